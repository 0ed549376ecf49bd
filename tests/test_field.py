#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import pytest

from ecpoint import DivisionByZero, FieldElement, InvalidState, PrimeField
from ecpoint.field import inverse_mod


@pytest.fixture()
def field():
    return PrimeField(23)


class TestPrimeField:
    def test_identities(self, field):
        assert field.one().value == 1
        assert field.zero().value == 0
        assert field.zero().is_zero()

    def test_reduce(self, field):
        assert field(24).value == 1
        assert field.int(-1).value == 22

    def test_equal(self, field):
        assert field == PrimeField(23)
        assert field != PrimeField(29)

    @pytest.mark.parametrize('p, error', [('23', TypeError), (23.0, TypeError), (0, ValueError), (2, ValueError)])
    def test_invalid_modulus(self, p, error):
        with pytest.raises(error):
            PrimeField(p)


class TestFieldElement:
    def test_arithmetic(self, field):
        x, y = field(10), field(15)
        assert (x + y).value == 2
        assert (x - y).value == 18
        assert (x * y).value == 12
        assert (x * 3).value == 7
        assert (3 - x).value == 16
        assert (-x).value == 13
        assert (x ** 2).value == 8

    def test_division(self, field):
        # 8 * 3 = 24 = 1 mod 23
        assert field(8).inverse() == field(3)
        assert field(11) / field(8) == field(10)
        assert (1 / field(8)) == field(3)
        assert field(8) ** -1 == field(3)

    def test_division_by_zero(self, field):
        with pytest.raises(DivisionByZero):
            field.zero().inverse()
        with pytest.raises(DivisionByZero):
            field(5) / 0
        with pytest.raises(ZeroDivisionError):
            field(5) / field(23)

    def test_inverse_mod(self):
        assert inverse_mod(8, 23) == 3
        assert inverse_mod(-15, 23) == 3

    def test_mixed_fields(self, field):
        with pytest.raises(InvalidState):
            field(1) + PrimeField(29)(1)

    def test_equal(self, field):
        assert field(1) == field(24)
        assert field(1) != 1
        assert field(1) != 24
        assert field(1) != PrimeField(29)(1)
        assert field(1) != None  # noqa: E711
        assert hash(field(1)) == hash(field(24))

    def test_hash_matches_equal(self, field):
        elements = [field(1), field(24), field(-22), PrimeField(29)(1), 1, 24]
        for a in elements:
            for b in elements:
                if a == b:
                    assert hash(a) == hash(b)
        assert 1 not in {field(1)}
        assert field(24) in {field(1)}

    def test_invalid_type(self, field):
        with pytest.raises(TypeError):
            FieldElement(1.5, field)

    def test_str(self, field):
        assert str(field(10)) == '10'
        assert repr(field(10)) == '<FieldElement 10 mod 23>'
