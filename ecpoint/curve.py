from typing import Optional

from .exceptions import InvalidState
from .field import FieldElement, PrimeField


class CurveFp:
    """Fp有限域曲线 方程 y^2= x^3+ax+b"""
    name: str
    key_size: int
    a: int
    b: int
    p: int
    n: Optional[int] = None
    gx: Optional[int] = None
    gy: Optional[int] = None

    _PARAMS = ('name', 'key_size', 'a', 'b', 'p', 'n', 'gx', 'gy')

    def __init__(self, **params):
        """
        预定义曲线以子类的类属性给出参数, 也可以直接传入关键字参数构造曲线
        例如 CurveFp(name='toy23', p=23, a=0, b=7)
        """
        for key, value in params.items():
            if key not in self._PARAMS:
                raise TypeError('未知的曲线参数: %s' % key)
            setattr(self, key, value)
        for key in ('name', 'a', 'b', 'p'):
            if getattr(self, key, None) is None:
                raise TypeError('缺少曲线参数: %s' % key)
        if getattr(self, 'key_size', None) is None:
            self.key_size = self.p.bit_length()
        self._field = PrimeField(self.p)

    @property
    def field(self) -> PrimeField:
        return self._field

    def __repr__(self):
        return '<CurveFp %s>' % self.name

    def _key(self) -> tuple:
        return (self.p, self.a % self.p, self.b % self.p, self.n, self.gx, self.gy)

    def __eq__(self, other):
        # 名称不参与比较, 参数相同即为同一条曲线
        if self is other:
            return True
        if not isinstance(other, CurveFp):
            return False
        return self._key() == other._key()

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self._key())

    def base_point(self) -> "Point":
        from .point import Point

        if self.gx is None or self.gy is None:
            raise InvalidState('曲线%s没有定义基点' % self.name)
        return Point(self.gx, self.gy, curve=self)

    def params(self) -> dict:
        """
        曲线参数
        :return: 字典类型的曲线参数
        """
        return dict(a=self.a, b=self.b, p=self.p, gx=self.gx, gy=self.gy, n=self.n)

    def is_on_curve(self, x, y) -> bool:
        """
        点(x, y)是否在曲线上 y^2 - (x^3 + ax + b) 应为p的倍数
        :param x: x坐标, int或FieldElement
        :param y: y坐标, int或FieldElement
        :return: 在曲线上返回True, 否则返回False
        """
        x = x if isinstance(x, FieldElement) else self.field(x)
        y = y if isinstance(y, FieldElement) else self.field(y)
        return (y ** 2 - x ** 3 - x * self.a - self.b).is_zero()


class SM2P256Curve(CurveFp):
    name = 'sm2p256v1'
    key_size = 256
    a = 115792089210356248756420345214020892766250353991924191454421193933289684991996
    b = 18505919022281880113072981827955639221458448578012075254857346196103069175443
    p = 115792089210356248756420345214020892766250353991924191454421193933289684991999
    n = 115792089210356248756420345214020892766061623724957744567843809356293439045923
    gx = 22963146547237050559479531362550074578802567295341616970375194840604139615431
    gy = 85132369209828568825618990617112496413088388631904505083283536607588877201568


class Secp256k1Curve(CurveFp):
    name = 'secp256k1'
    key_size = 256
    a = 0
    b = 7
    p = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
    n = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
    gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
    gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8


class Secp256r1Curve(CurveFp):
    name = 'secp256r1'
    key_size = 256
    a = -3
    b = 41058363725152142129326129780047268409114441015993725554835256314039467401291
    # p = 2**256 - 2**224 + 2**192 + 2**96 - 1
    p = 115792089210356248762697446949407573530086143415290314195533631308867097853951
    n = 115792089210356248762697446949407573529996955224135760342422259061068512044369
    gx = 48439561293906451759052585252797914202762949526041747995844080717082404635286
    gy = 36134250956749795798585127919587881956611106672985015071877198253568414405109


sm2p256v1 = SM2P256Curve()
secp256k1 = Secp256k1Curve()
secp256r1 = Secp256r1Curve()

CURVES = {curve.name: curve for curve in (sm2p256v1, secp256k1, secp256r1)}


def get_curve(name: str) -> CurveFp:
    """按名称获取预定义曲线"""
    try:
        return CURVES[name]
    except KeyError:
        raise ValueError('未知的曲线: %s, 可选: %s' % (name, ', '.join(sorted(CURVES)))) from None
