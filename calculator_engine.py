"""
Motor de la calculadora de teclado.

Este módulo convierte una secuencia de pulsaciones en un cálculo decimal
en curso. El núcleo es la función pura transition(state, symbol), que
devuelve un estado nuevo; CalculatorEngine la envuelve con un estado
mutable protegido por un lock.

Contrato de interfaz:
    - handle_key(symbol: str) -> str
    - display: propiedad con el texto que debe mostrar la pantalla

Símbolos admitidos: "0".."9", ".", "+", "-", "*", "/", "=", "C",
"backspace", "sqrt", "^", "nthRoot".
"""

from __future__ import annotations

import logging
import math
import threading
from decimal import Decimal, InvalidOperation, Overflow

from calculator_state import (
    CalculatorState,
    DECIMAL_CONTEXT,
    Entry,
    Failure,
    INITIAL_STATE,
    INVALID_ROOT,
    NEGATIVE_SQRT,
    current_value,
    format_decimal,
    render,
)
from float_bridge import PythonMathProvider


logger = logging.getLogger(__name__)

INTEGER_TOLERANCE = 1e-12

DIGITS = frozenset("0123456789")
BINARY_OPERATORS = ("+", "-", "*", "/", "^", "nthRoot")

DEFAULT_PROVIDER = PythonMathProvider()


# ── Semántica de los operadores ──────────────────────────────────

def degree_parity(degree: Decimal) -> tuple[bool, bool]:
    """Devuelve (es_entero, es_impar) para el grado de una raíz."""
    dn = float(degree)
    if not math.isfinite(dn):
        return False, False
    nearest = round(dn)
    is_int = abs(dn - nearest) < INTEGER_TOLERANCE
    is_odd = is_int and abs(nearest) % 2 == 1
    return is_int, is_odd


def allows_negative_radicand(degree: Decimal) -> bool:
    is_int, is_odd = degree_parity(degree)
    return is_int and is_odd


def nth_root(radicand: Decimal, degree: Decimal, provider=DEFAULT_PROVIDER) -> Decimal:
    """Raíz real de grado `degree` de `radicand`.

    El grado 0 da 0. Un radicando negativo solo es válido con grado
    entero impar; en otro caso el resultado es 0.
    """
    if degree == 0:
        return Decimal(0)
    if radicand < 0 and not allows_negative_radicand(degree):
        return Decimal(0)
    return provider.nth_root(radicand, degree)


def _decimal_op(operation, a: Decimal, b: Decimal) -> Decimal:
    try:
        return operation(a, b)
    except (Overflow, InvalidOperation) as exc:
        logger.debug("Resultado decimal fuera de rango (%s, %s): %r", a, b, exc)
        return Decimal(0)


def compute(a: Decimal, b: Decimal, op: str, provider=DEFAULT_PROVIDER) -> Decimal:
    """Aplica el operador binario. Nunca lanza excepciones.

    Un resultado fuera del rango decimal se colapsa a 0, igual que el
    desbordamiento de potencias y raíces.
    """
    if op == "+":
        return _decimal_op(DECIMAL_CONTEXT.add, a, b)
    if op == "-":
        return _decimal_op(DECIMAL_CONTEXT.subtract, a, b)
    if op == "*":
        return _decimal_op(DECIMAL_CONTEXT.multiply, a, b)
    if op == "/":
        if b == 0:
            return Decimal(0)
        return _decimal_op(DECIMAL_CONTEXT.divide, a, b)
    if op == "^":
        return provider.power(a, b)
    if op == "nthRoot":
        # a = grado, b = radicando
        return nth_root(b, a, provider)
    return b


# ── Transiciones ─────────────────────────────────────────────────

def _fresh_entry(state: CalculatorState) -> CalculatorState:
    if state.just_evaluated or state.is_error:
        return state._replace(current=Entry("0"), just_evaluated=False)
    return state


def append_digit(state: CalculatorState, digit: str) -> CalculatorState:
    state = _fresh_entry(state)
    text = state.current.text
    text = digit if text == "0" else text + digit
    return state._replace(current=Entry(text))


def append_decimal_point(state: CalculatorState) -> CalculatorState:
    state = _fresh_entry(state)
    text = state.current.text
    if "." in text:
        return state
    return state._replace(current=Entry(text + "."))


def apply_operator(state: CalculatorState, op: str, provider=DEFAULT_PROVIDER) -> CalculatorState:
    value = current_value(state)
    if value is None:
        return state

    if state.pending_op is None:
        accumulator = value
    else:
        accumulator = compute(state.accumulator, value, state.pending_op, provider)

    return state._replace(
        current=Entry("0"),
        accumulator=accumulator,
        pending_op=op,
        just_evaluated=False,
    )


def evaluate(state: CalculatorState, provider=DEFAULT_PROVIDER) -> CalculatorState:
    value = current_value(state)
    if state.pending_op is None or value is None:
        return state

    if state.pending_op == "nthRoot":
        if value < 0 and not allows_negative_radicand(state.accumulator):
            logger.info("Raíz inválida: grado %s, radicando %s", state.accumulator, value)
            return state._replace(
                current=Failure(INVALID_ROOT),
                pending_op=None,
                just_evaluated=False,
            )

    result = compute(state.accumulator, value, state.pending_op, provider)
    return state._replace(
        current=Entry(format_decimal(result)),
        accumulator=result,
        pending_op=None,
        just_evaluated=True,
    )


def apply_sqrt(state: CalculatorState, provider=DEFAULT_PROVIDER) -> CalculatorState:
    value = current_value(state)
    if value is None:
        return state

    if value < 0:
        logger.info("Raíz cuadrada de negativo: %s", value)
        return state._replace(
            current=Failure(NEGATIVE_SQRT),
            pending_op=None,
            just_evaluated=False,
        )

    result = provider.sqrt(value)
    return state._replace(current=Entry(format_decimal(result)), just_evaluated=True)


def backspace(state: CalculatorState) -> CalculatorState:
    if state.just_evaluated or state.is_error:
        return state

    text = state.current.text
    if len(text) <= 1 or (len(text) == 2 and text.startswith("-")):
        return state._replace(current=Entry("0"))
    return state._replace(current=Entry(text[:-1]))


def clear(_state: CalculatorState) -> CalculatorState:
    return INITIAL_STATE


def transition(state: CalculatorState, symbol: str, provider=DEFAULT_PROVIDER) -> CalculatorState:
    """Aplica una pulsación y devuelve el estado resultante."""
    if symbol in DIGITS:
        return append_digit(state, symbol)
    if symbol == ".":
        return append_decimal_point(state)
    if symbol in BINARY_OPERATORS:
        return apply_operator(state, symbol, provider)
    if symbol == "=":
        return evaluate(state, provider)
    if symbol == "C":
        return clear(state)
    if symbol == "backspace":
        return backspace(state)
    if symbol == "sqrt":
        return apply_sqrt(state, provider)

    logger.debug("Símbolo ignorado: %r", symbol)
    return state


def run_keys(symbols, state: CalculatorState = INITIAL_STATE, provider=DEFAULT_PROVIDER) -> CalculatorState:
    for symbol in symbols:
        state = transition(state, symbol, provider)
    return state


# ── Fachada con estado ───────────────────────────────────────────

class CalculatorEngine:
    """Mantiene el estado de la calculadora entre pulsaciones."""

    def __init__(self, provider=None):
        self._provider = provider if provider is not None else DEFAULT_PROVIDER
        self._state = INITIAL_STATE
        self._lock = threading.Lock()

    @property
    def provider(self):
        return self._provider

    @property
    def state(self) -> CalculatorState:
        with self._lock:
            return self._state

    @property
    def display(self) -> str:
        with self._lock:
            return self._state.text

    def handle_key(self, symbol: str) -> str:
        """Procesa una pulsación y devuelve el texto de la pantalla."""
        with self._lock:
            self._state = transition(self._state, symbol, self._provider)
            text = render(self._state)
        logger.debug("%s -> %s", symbol, text)
        return text

    def reset(self) -> str:
        return self.handle_key("C")
