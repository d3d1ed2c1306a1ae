"""
Tests for arbitrary_precision_engine.py
"""

from decimal import Decimal

from arbitrary_precision_engine import ArbitraryPrecisionCalculatorEngine, MPMathProvider
from calculator_engine import CalculatorEngine, nth_root


class TestMPMathProvider:
    def setup_method(self):
        self.provider = MPMathProvider(digits=30)

    def test_minimum_digits(self):
        assert MPMathProvider(digits=2).digits == 8

    def test_sqrt_keeps_requested_digits(self):
        assert str(self.provider.sqrt(Decimal(2))).startswith("1.41421356237309504880168872")

    def test_power(self):
        assert self.provider.power(Decimal(2), Decimal(10)) == 1024

    def test_complex_power_collapses_to_zero(self):
        assert self.provider.power(Decimal(-8), Decimal("0.5")) == 0

    def test_zero_to_negative_power_collapses_to_zero(self):
        assert self.provider.power(Decimal(0), Decimal(-1)) == 0

    def test_nth_root_negative_odd(self):
        assert self.provider.nth_root(Decimal(-27), Decimal(3)) == -3

    def test_guards_shared_with_float_bridge(self):
        assert nth_root(Decimal(-4), Decimal(2), self.provider) == 0
        assert nth_root(Decimal(5), Decimal(0), self.provider) == 0


class TestArbitraryPrecisionCalculatorEngine:
    def test_is_a_calculator_engine(self):
        engine = ArbitraryPrecisionCalculatorEngine(digits=40)
        assert isinstance(engine, CalculatorEngine)
        assert engine.digits == 40

    def press(self, keys: str) -> str:
        engine = ArbitraryPrecisionCalculatorEngine(digits=30)
        for key in keys.split():
            engine.handle_key(key)
        return engine.display

    def test_power(self):
        assert self.press("2 ^ 1 0 =") == "1024"

    def test_nth_root(self):
        assert self.press("3 nthRoot 2 7 =") == "3"

    def test_sqrt_display_precision(self):
        assert self.press("2 sqrt") == "1.414213562373095"

    def test_arithmetic_unchanged(self):
        assert self.press("3 + 4 + 5 =") == "12"
        assert self.press("5 / 0 =") == "0"


class TestOverflow:
    def press(self, keys: str) -> str:
        engine = ArbitraryPrecisionCalculatorEngine(digits=30)
        for key in keys.split():
            engine.handle_key(key)
        return engine.display

    def test_power_beyond_double_range_is_zero(self):
        assert MPMathProvider(digits=30).power(Decimal(10), Decimal(400)) == 0

    def test_huge_power_shows_zero(self):
        assert self.press("1 0 ^ 1 0 0 0 0 0 0 =") == "0"

    def test_huge_power_then_multiply_shows_zero(self):
        assert self.press("1 0 ^ 9 9 9 9 9 9 * 1 0 0 =") == "0"

    def test_largest_double_range_power_is_kept(self):
        assert self.press("1 0 ^ 3 0 0 =") == "1" + "0" * 300
