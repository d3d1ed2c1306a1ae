"""Frontera de conversión Decimal ⇄ float para potencias y raíces."""

import logging
import math
from decimal import Decimal


logger = logging.getLogger(__name__)

SIGNIFICANT_DIGITS = 15


def to_float(value: Decimal) -> float:
    return float(value)


def to_decimal(value: float) -> Decimal:
    """Convierte un float a Decimal con 15 cifras significativas.

    Los valores no finitos se colapsan a 0.
    """
    if math.isnan(value) or math.isinf(value):
        return Decimal(0)
    return Decimal(f"{value:.{SIGNIFICANT_DIGITS}g}")


class PythonMathProvider:
    """Potencia y raíces en doble precisión usando el módulo math."""

    def power(self, base: Decimal, exponent: Decimal) -> Decimal:
        try:
            return to_decimal(math.pow(to_float(base), to_float(exponent)))
        except (ValueError, OverflowError, ZeroDivisionError) as exc:
            logger.debug("pow(%s, %s) fuera de dominio: %s", base, exponent, exc)
            return Decimal(0)

    def nth_root(self, radicand: Decimal, degree: Decimal) -> Decimal:
        x = to_float(radicand)
        n = to_float(degree)
        try:
            if x < 0:
                # Solo se llega aquí con grado entero impar
                result = -math.pow(abs(x), 1.0 / abs(n))
            else:
                result = math.pow(x, 1.0 / n)
        except (ValueError, OverflowError, ZeroDivisionError) as exc:
            logger.debug("raíz %s de %s fuera de dominio: %s", degree, radicand, exc)
            return Decimal(0)
        return to_decimal(result)

    def sqrt(self, value: Decimal) -> Decimal:
        try:
            return to_decimal(math.sqrt(to_float(value)))
        except (ValueError, OverflowError) as exc:
            logger.debug("sqrt(%s) fuera de dominio: %s", value, exc)
            return Decimal(0)
