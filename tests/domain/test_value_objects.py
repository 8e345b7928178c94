"""Unit tests for domain value objects."""

import pytest

from ecom.domain.exceptions import ValidationError
from ecom.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(1050)
        assert m.cents == 1050

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(-1)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="integer number of cents"):
            Money(10.5)

    def test_addition(self):
        assert Money(1000) + Money(550) == Money(1550)

    def test_multiplication_by_int(self):
        assert Money(750) * 3 == Money(2250)

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money(750) * 1.5

    def test_str_formatting(self):
        assert str(Money(99999)) == "$999.99"
        assert str(Money(950)) == "$9.50"
        assert str(Money(5)) == "$0.05"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_str(self):
        assert str(Quantity(7)) == "7"
