"""Motor de la calculadora con potencias y raíces de precisión arbitraria."""

from __future__ import annotations

import logging
import sys
from decimal import Decimal

from calculator_engine import CalculatorEngine

try:
    from mpmath import mp
except ImportError as exc:  # pragma: no cover
    raise ImportError(
        "mpmath no está instalado. Instala con: pip install mpmath"
    ) from exc


logger = logging.getLogger(__name__)


class MPMathProvider:
    """Proveedor matemático basado en mpmath."""

    MIN_DIGITS = 8

    def __init__(self, digits: int = 30):
        self._digits = max(self.MIN_DIGITS, digits)

    @property
    def digits(self) -> int:
        return self._digits

    def _internal_dps(self) -> int:
        return max(40, self._digits * 2 + 10)

    @staticmethod
    def _to_mpf(value: Decimal):
        return mp.mpf(str(value))

    def _to_decimal(self, value) -> Decimal:
        # Resultados complejos o no finitos se colapsan a 0
        if isinstance(value, mp.mpc) or not mp.isfinite(value):
            return Decimal(0)
        if value == 0:
            return Decimal(0)
        # Mismo límite que la frontera float: desbordar da 0
        if abs(value) > sys.float_info.max:
            return Decimal(0)
        return Decimal(mp.nstr(value, n=self._digits))

    def power(self, base: Decimal, exponent: Decimal) -> Decimal:
        with mp.workdps(self._internal_dps()):
            try:
                result = mp.power(self._to_mpf(base), self._to_mpf(exponent))
            except (ZeroDivisionError, ValueError) as exc:
                logger.debug("pow(%s, %s) fuera de dominio: %s", base, exponent, exc)
                return Decimal(0)
            return self._to_decimal(result)

    def nth_root(self, radicand: Decimal, degree: Decimal) -> Decimal:
        with mp.workdps(self._internal_dps()):
            x = self._to_mpf(radicand)
            n = self._to_mpf(degree)
            try:
                if x < 0:
                    result = -mp.power(abs(x), 1 / abs(n))
                else:
                    result = mp.power(x, 1 / n)
            except (ZeroDivisionError, ValueError) as exc:
                logger.debug("raíz %s de %s fuera de dominio: %s", degree, radicand, exc)
                return Decimal(0)
            return self._to_decimal(result)

    def sqrt(self, value: Decimal) -> Decimal:
        with mp.workdps(self._internal_dps()):
            return self._to_decimal(mp.sqrt(self._to_mpf(value)))


class ArbitraryPrecisionCalculatorEngine(CalculatorEngine):
    """CalculatorEngine cuyas potencias y raíces usan mpmath."""

    def __init__(self, digits: int = 30):
        super().__init__(provider=MPMathProvider(digits=digits))

    @property
    def digits(self) -> int:
        return self.provider.digits
