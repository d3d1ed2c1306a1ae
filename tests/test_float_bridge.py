"""
Tests for float_bridge.py
"""

from decimal import Decimal

from float_bridge import PythonMathProvider, to_decimal


class TestToDecimal:
    def test_rounds_to_fifteen_significant_digits(self):
        assert to_decimal(27 ** (1 / 3)) == Decimal(3)
        assert to_decimal(0.1 + 0.2) == Decimal("0.3")

    def test_non_finite(self):
        assert to_decimal(float("nan")) == 0
        assert to_decimal(float("inf")) == 0
        assert to_decimal(float("-inf")) == 0


class TestPythonMathProvider:
    def setup_method(self):
        self.provider = PythonMathProvider()

    def test_power(self):
        assert self.provider.power(Decimal(2), Decimal(10)) == Decimal(1024)

    def test_fractional_power(self):
        assert self.provider.power(Decimal(2), Decimal("0.5")) == Decimal("1.41421356237310")

    def test_power_domain_errors_collapse_to_zero(self):
        assert self.provider.power(Decimal(0), Decimal(-1)) == 0
        assert self.provider.power(Decimal(-8), Decimal("0.5")) == 0

    def test_power_overflow_collapses_to_zero(self):
        assert self.provider.power(Decimal(10), Decimal(400)) == 0

    def test_nth_root(self):
        assert self.provider.nth_root(Decimal(16), Decimal(4)) == Decimal(2)

    def test_nth_root_negative_odd(self):
        assert self.provider.nth_root(Decimal(-27), Decimal(3)) == Decimal(-3)

    def test_sqrt(self):
        assert self.provider.sqrt(Decimal(81)) == Decimal(9)
        assert self.provider.sqrt(Decimal(2)) == Decimal("1.41421356237310")
