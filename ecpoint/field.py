#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# @FileName     :   field.py
# @Function     :   素数域Fp及其元素
from typing import Union

from .exceptions import DivisionByZero, InvalidState


def inverse_mod(a: int, m: int) -> int:
    """扩展欧几里得算法求 a 模 m 的逆元"""
    if a < 0 or m <= a:
        a = a % m
    if a == 0:
        raise DivisionByZero('0在模%d下没有逆元' % m)
    c, d = a, m
    uc, vc, ud, vd = 1, 0, 0, 1
    while c != 0:
        q, c, d = divmod(d, c) + (c,)
        uc, vc, ud, vd = ud - q * uc, vd - q * vc, uc, vc
    if d != 1:
        raise DivisionByZero('%d在模%d下没有逆元' % (a, m))
    if ud > 0:
        return ud
    else:
        return ud + m


class PrimeField:
    """有限域 Z/pZ, p为素数"""

    def __init__(self, p: int):
        if not isinstance(p, int):
            raise TypeError('Invalid type %s, expected integral type.' % type(p))
        if p <= 2:
            raise ValueError('p必须是大于2的素数: %d' % p)
        self.p = p

    def __repr__(self):
        return '<PrimeField p=%d>' % self.p

    def __eq__(self, other):
        if not isinstance(other, PrimeField):
            return False
        return self.p == other.p

    def __hash__(self):
        return hash(('PrimeField', self.p))

    def __call__(self, value: int) -> "FieldElement":
        return FieldElement(value, self)

    def int(self, value: int) -> "FieldElement":
        return FieldElement(value, self)

    def one(self) -> "FieldElement":
        """乘法单位元"""
        return FieldElement(1, self)

    def zero(self) -> "FieldElement":
        """加法单位元"""
        return FieldElement(0, self)


class FieldElement:
    """
    Fp中的元素, 不可变
    运算结果总是新的FieldElement, 与int运算时int先被约化到域中
    """
    __slots__ = ('_value', '_field')

    def __init__(self, value: int, field: PrimeField):
        if not isinstance(value, int):
            raise TypeError('Invalid type %s, expected integral type.' % type(value))
        self._value = value % field.p
        self._field = field

    @property
    def value(self) -> int:
        return self._value

    @property
    def field(self) -> PrimeField:
        return self._field

    def _coerce(self, other: Union["FieldElement", int]) -> int:
        if isinstance(other, FieldElement):
            if other.field != self.field:
                raise InvalidState('两个元素不在同一个域中: %r, %r' % (self.field, other.field))
            return other.value
        if isinstance(other, int):
            return other % self.field.p
        raise TypeError('Invalid type %s, expected FieldElement or int.' % type(other))

    def _new(self, value: int) -> "FieldElement":
        return FieldElement(value, self.field)

    def __add__(self, other):
        return self._new(self.value + self._coerce(other))

    def __radd__(self, other):
        return self + other

    def __sub__(self, other):
        return self._new(self.value - self._coerce(other))

    def __rsub__(self, other):
        return self._new(self._coerce(other) - self.value)

    def __mul__(self, other):
        return self._new(self.value * self._coerce(other))

    def __rmul__(self, other):
        return self * other

    def __truediv__(self, other):
        divisor = self._coerce(other)
        return self * self._new(divisor).inverse()

    def __rtruediv__(self, other):
        return self._new(self._coerce(other)) * self.inverse()

    def __neg__(self):
        return self._new(-self.value)

    def __pow__(self, k: int):
        if not isinstance(k, int):
            raise TypeError('Invalid type %s, expected integral type.' % type(k))
        if k < 0:
            return self.inverse() ** -k
        return self._new(pow(self.value, k, self.field.p))

    def inverse(self) -> "FieldElement":
        """乘法逆元, 0没有逆元"""
        return self._new(inverse_mod(self.value, self.field.p))

    def is_zero(self) -> bool:
        return self.value == 0

    def __eq__(self, other):
        if isinstance(other, FieldElement):
            return self.field == other.field and self.value == other.value
        # 只与FieldElement比较, 与int不相等
        return NotImplemented

    def __hash__(self):
        return hash((self.field.p, self.value))

    def __int__(self):
        return self.value

    def __str__(self):
        return '%d' % self.value

    def __repr__(self):
        return '<FieldElement %d mod %d>' % (self.value, self.field.p)
