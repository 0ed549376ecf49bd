#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# @FileName     :   point.py
# @Function     :   椭圆曲线上的点及其坐标表示
"""
曲线上的点有两种坐标表示:

- 仿射坐标 Affine(x, y), x与y同时为None表示无穷远点
- Jacobian加重射影坐标 Jacobian(X, Y, Z), 对应仿射坐标 (X/Z^2, Y/Z^3), Z=0 为无穷远点

一个点任意时刻只处于其中一种表示, to_jacobian()/to_affine() 原地替换表示并返回点本身.
转换需要独占该点, 新坐标计算完成后一次性赋值, 并发读者不会看到转换到一半的状态.

仿射点与Jacobian点不能直接比较, 先转换到同一种表示.
"""
import logging
from typing import NamedTuple, Optional, Union

from .curve import CurveFp
from .exceptions import DivisionByZero, InvalidState, UnsupportedOperation
from .field import FieldElement

logger = logging.getLogger(__name__)


class Affine(NamedTuple):
    x: Optional[FieldElement]
    y: Optional[FieldElement]


class Jacobian(NamedTuple):
    X: FieldElement
    Y: FieldElement
    Z: FieldElement


Coordinate = Union[Affine, Jacobian]


def _unknown_coordinate(coordinate) -> UnsupportedOperation:
    return UnsupportedOperation('未知的坐标系: %s' % type(coordinate).__name__)


class Point:
    """有限域Fp曲线Curve上的点"""

    def __init__(self, x: Union[FieldElement, int, None], y: Union[FieldElement, int, None],
                 curve: CurveFp):
        """
        以仿射坐标构造点, 不校验点是否在曲线上
        :param x: x坐标, None表示无穷远点
        :param y: y坐标, None表示无穷远点
        :param curve: 所在曲线
        """
        if (x is None) != (y is None):
            raise InvalidState('仿射坐标x, y必须同时为None或同时不为None: x=%s, y=%s' % (x, y))
        self._curve = curve
        self._coordinate = Affine(self._lift(x), self._lift(y))  # type: Coordinate

    def _lift(self, value):
        if value is None:
            return None
        if isinstance(value, FieldElement):
            if value.field != self._curve.field:
                raise InvalidState('坐标%r不属于曲线%s的域' % (value, self._curve.name))
            return value
        return self._curve.field(value)

    @classmethod
    def infinity(cls, curve: CurveFp) -> "Point":
        """无穷远点, 以仿射坐标表示"""
        return cls(None, None, curve)

    @classmethod
    def from_jacobian(cls, x, y, z, curve: CurveFp) -> "Point":
        """直接以Jacobian坐标构造点"""
        if x is None or y is None or z is None:
            raise InvalidState('Jacobian坐标不能为None')
        point = cls.infinity(curve)
        point._coordinate = Jacobian(point._lift(x), point._lift(y), point._lift(z))
        return point

    @property
    def curve(self) -> CurveFp:
        return self._curve

    @property
    def coordinate(self) -> Coordinate:
        return self._coordinate

    @property
    def is_affine(self) -> bool:
        return isinstance(self._coordinate, Affine)

    @property
    def is_jacobian(self) -> bool:
        return isinstance(self._coordinate, Jacobian)

    @property
    def is_infinity(self) -> bool:
        coordinate = self._coordinate
        if isinstance(coordinate, Affine):
            return coordinate.x is None and coordinate.y is None
        if isinstance(coordinate, Jacobian):
            return coordinate.Z.is_zero()
        raise _unknown_coordinate(coordinate)

    def values(self) -> tuple:
        return tuple(self._coordinate)

    def to_jacobian(self) -> "Point":
        """
        仿射坐标 (x, y) 原地转换成Jacobian坐标 (x : y : 1)
        无穷远点和已是Jacobian坐标的点不能转换
        """
        coordinate = self._coordinate
        if isinstance(coordinate, Jacobian):
            raise InvalidState('已经是Jacobian坐标')
        if not isinstance(coordinate, Affine):
            raise _unknown_coordinate(coordinate)
        if coordinate.x is None:
            raise InvalidState('无穷远点没有Jacobian坐标表示')
        self._coordinate = Jacobian(coordinate.x, coordinate.y, self._curve.field.one())
        logger.debug('converted %s to jacobian on %s', self, self._curve.name)
        return self

    def to_affine(self) -> "Point":
        """
        Jacobian坐标 (X : Y : Z) 原地转换成仿射坐标 (X/Z^2, Y/Z^3)
        Z=0 (无穷远点) 抛出DivisionByZero
        """
        coordinate = self._coordinate
        if isinstance(coordinate, Affine):
            raise InvalidState('已经是仿射坐标')
        if not isinstance(coordinate, Jacobian):
            raise _unknown_coordinate(coordinate)
        X, Y, Z = coordinate
        if Z.is_zero():
            raise DivisionByZero('Z=0的Jacobian点不能转换成仿射坐标')
        z2 = Z * Z
        z3 = z2 * Z
        self._coordinate = Affine(X / z2, Y / z3)
        logger.debug('converted %s to affine on %s', self, self._curve.name)
        return self

    def copy(self) -> "Point":
        point = Point.infinity(self._curve)
        point._coordinate = self._coordinate
        return point

    def __copy__(self):
        return self.copy()

    def describe(self) -> str:
        if self.is_infinity:
            return 'Infinity'
        coordinate = self._coordinate
        if isinstance(coordinate, Affine):
            return '(%s, %s)' % coordinate
        if isinstance(coordinate, Jacobian):
            return '(%s : %s : %s)' % coordinate
        raise _unknown_coordinate(coordinate)

    def __str__(self):
        return self.describe()

    def __repr__(self):
        kind = 'affine' if self.is_affine else 'jacobian'
        return '<Point %s %s on %s>' % (kind, self.describe(), self._curve.name)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False
        # 不同曲线上的点一律不相等, 包括无穷远点
        if self._curve != other._curve:
            return False
        c1, c2 = self._coordinate, other._coordinate
        if isinstance(c1, Affine) and isinstance(c2, Affine):
            return c1.x == c2.x and c1.y == c2.y
        if isinstance(c1, Jacobian) and isinstance(c2, Jacobian):
            return _jacobian_equal(c1, c2)
        if isinstance(c1, (Affine, Jacobian)) and isinstance(c2, (Affine, Jacobian)):
            raise UnsupportedOperation('仿射坐标与Jacobian坐标不能直接比较, 请先转换到同一坐标系')
        raise _unknown_coordinate(c2 if isinstance(c1, (Affine, Jacobian)) else c1)

    def __ne__(self, other):
        return not self.__eq__(other)

    # 转换会改变点的表示, 不可哈希
    __hash__ = None


def _jacobian_equal(c1: Jacobian, c2: Jacobian) -> bool:
    """
    (X1 : Y1 : Z1) 与 (X2 : Y2 : Z2) 表示同一个点当且仅当
    X1*Z2^2 == X2*Z1^2 且 Y1*Z2^3 == Y2*Z1^3
    Z=0 的点都是无穷远点
    """
    inf1, inf2 = c1.Z.is_zero(), c2.Z.is_zero()
    if inf1 or inf2:
        return inf1 and inf2
    z1_2 = c1.Z * c1.Z
    z2_2 = c2.Z * c2.Z
    if c1.X * z2_2 != c2.X * z1_2:
        return False
    return c1.Y * z2_2 * c2.Z == c2.Y * z1_2 * c1.Z
