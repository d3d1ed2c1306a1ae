"""
Estado de la calculadora de teclado.

El estado es un registro inmutable: cada pulsación produce uno nuevo.
El valor actual es una variante etiquetada:

    - Entry(text):   número que se está tecleando o último resultado.
    - Failure(kind): operación inválida; se muestra como "Error".

Contrato de interfaz:
    - parse_input(text: str) -> Decimal | None
    - format_decimal(value: Decimal) -> str
    - render(state: CalculatorState) -> str
"""

from __future__ import annotations

import re
from decimal import (
    Context,
    Decimal,
    InvalidOperation,
    Overflow,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    localcontext,
)
from typing import NamedTuple, Optional, Union


DECIMAL_PRECISION = 28
DISPLAY_FRACTION_DIGITS = 16
ERROR_TEXT = "Error"

INVALID_ROOT = "invalid_root"
NEGATIVE_SQRT = "negative_sqrt"

DECIMAL_CONTEXT = Context(prec=DECIMAL_PRECISION, rounding=ROUND_HALF_EVEN)

_DEC_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")


class Entry(NamedTuple):
    text: str


class Failure(NamedTuple):
    kind: str


class CalculatorState(NamedTuple):
    """Registro completo de la máquina de estados."""

    current: Union[Entry, Failure] = Entry("0")
    accumulator: Decimal = Decimal(0)
    pending_op: Optional[str] = None
    just_evaluated: bool = False

    @property
    def is_error(self) -> bool:
        return isinstance(self.current, Failure)

    @property
    def text(self) -> str:
        return render(self)


INITIAL_STATE = CalculatorState()


# ── Parseo ───────────────────────────────────────────────────────

def parse_input(text: str) -> Decimal | None:
    """Convierte el texto de entrada en Decimal.

    Solo admite notación decimal simple ("12", "-3.5", "7.", ".25").
    Devuelve None para cualquier otra cosa, incluido "Error".
    """
    if not _DEC_RE.fullmatch(text):
        return None
    return Decimal(text)


def current_value(state: CalculatorState) -> Decimal | None:
    if state.is_error:
        return None
    return parse_input(state.current.text)


# ── Formato ──────────────────────────────────────────────────────

def format_decimal(value: Decimal) -> str:
    """Redondea a 16 decimales como máximo y quita los ceros sobrantes."""
    if not value.is_finite():
        return "0"

    try:
        with localcontext() as ctx:
            # Cuantizar un número grande no debe fallar por falta de dígitos
            ctx.prec = max(DECIMAL_PRECISION, value.adjusted() + DISPLAY_FRACTION_DIGITS + 2)
            ctx.rounding = ROUND_HALF_UP
            quantum = Decimal(1).scaleb(-DISPLAY_FRACTION_DIGITS)
            rounded = value.quantize(quantum)
    except (Overflow, InvalidOperation):
        # Fuera del rango decimal: se muestra 0, como el resto de desbordamientos
        return "0"

    if rounded.is_zero():
        return "0"

    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def render(state: CalculatorState) -> str:
    if isinstance(state.current, Failure):
        return ERROR_TEXT
    return state.current.text
