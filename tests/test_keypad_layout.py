"""
Tests for keypad_layout.py
"""

import pytest

from calculator_engine import BINARY_OPERATORS, DIGITS, CalculatorEngine
from keypad_layout import KEYPAD, LABEL_TO_TOKEN, token_for_label


KNOWN_TOKENS = set(DIGITS) | set(BINARY_OPERATORS) | {".", "=", "C", "backspace", "sqrt"}


class TestKeypadLayout:
    @pytest.mark.parametrize("label, token", [
        ("÷", "/"),
        ("×", "*"),
        ("−", "-"),
        ("+", "+"),
        ("⌫", "backspace"),
        ("√", "sqrt"),
        ("y√x", "nthRoot"),
        ("^", "^"),
        ("=", "="),
        ("C", "C"),
    ])
    def test_label_translation(self, label, token):
        assert token_for_label(label) == token

    def test_unknown_label(self):
        with pytest.raises(ValueError):
            token_for_label("%")

    def test_every_token_is_known(self):
        assert set(LABEL_TO_TOKEN.values()) == KNOWN_TOKENS

    def test_color_kinds(self):
        kinds = {kind for row in KEYPAD for _label, _token, kind in row}
        assert kinds <= {"num", "op", "func", "special", "equals"}

    def test_button_labels_drive_engine(self):
        engine = CalculatorEngine()
        for label in ["3", "y√x", "6", "4", "=", "×", "2", "="]:
            engine.handle_key(token_for_label(label))
        assert engine.display == "8"

    def test_backspace_and_sqrt_labels(self):
        engine = CalculatorEngine()
        for label in ["8", "1", "7", "⌫", "√"]:
            engine.handle_key(token_for_label(label))
        assert engine.display == "9"
