import pytest

from ecpoint import CurveFp, InvalidState, Point, get_curve, secp256k1, secp256r1, sm2p256v1


@pytest.fixture()
def curve():
    return sm2p256v1


@pytest.fixture()
def g(curve):
    return curve.base_point()


class TestCurveFp:
    def test_base_point(self, g, curve):
        assert g.is_affine
        assert g.curve is curve
        x, y = g.values()
        assert x.value == curve.gx
        assert y.value == curve.gy

    @pytest.mark.parametrize('curve', [sm2p256v1, secp256k1, secp256r1])
    def test_is_on_curve(self, curve):
        assert curve.is_on_curve(curve.gx, curve.gy)
        assert not curve.is_on_curve(curve.gx, curve.gy + 1)

    def test_params(self, curve):
        assert curve.params() == dict(a=curve.a, b=curve.b, p=curve.p, gx=curve.gx, gy=curve.gy, n=curve.n)

    def test_key_size_from_p(self):
        curve = CurveFp(name='toy23', p=23, a=0, b=7)
        assert curve.key_size == 5
        assert curve.field.p == 23

    def test_unknown_param(self):
        with pytest.raises(TypeError):
            CurveFp(name='toy23', p=23, a=0, b=7, c=1)

    def test_missing_param(self):
        with pytest.raises(TypeError):
            CurveFp(name='toy23', p=23, a=0)

    def test_no_base_point(self):
        curve = CurveFp(name='toy23', p=23, a=0, b=7)
        with pytest.raises(InvalidState):
            curve.base_point()

    def test_equal(self):
        assert CurveFp(name='a', p=23, a=0, b=7) == CurveFp(name='b', p=23, a=0, b=7)
        assert CurveFp(name='a', p=23, a=0, b=7) != CurveFp(name='a', p=23, a=0, b=3)
        assert CurveFp(name='a', p=23, a=-1, b=7) == CurveFp(name='a', p=23, a=22, b=7)
        assert sm2p256v1 != secp256k1
        assert secp256k1 != 'secp256k1'

    def test_hash(self):
        assert len({CurveFp(name='a', p=23, a=0, b=7), CurveFp(name='b', p=23, a=0, b=7)}) == 1


class TestGetCurve:
    @pytest.mark.parametrize('name, curve', [('sm2p256v1', sm2p256v1),
                                             ('secp256k1', secp256k1),
                                             ('secp256r1', secp256r1)])
    def test_get_curve(self, name, curve):
        assert get_curve(name) is curve

    def test_unknown_curve(self):
        with pytest.raises(ValueError):
            get_curve('p384')

    def test_base_point_round_trip(self):
        g = get_curve('secp256k1').base_point()
        expected = g.copy()
        assert g.to_jacobian().to_affine() == expected
        assert isinstance(g, Point)
