"""Distribución del teclado y traducción de etiquetas a símbolos del motor."""


# ── Definiciones del teclado ─────────────────────────────────────
#  Cada fila es una lista de (texto, símbolo, tipo_color)
#  tipo_color: "num", "op", "func", "special", "equals"

KEYPAD = [
    [("C",  "C",         "special"), ("⌫", "backspace", "special"),
     ("√", "sqrt",  "func"),    ("÷", "/",         "op")],

    [("7",  "7",         "num"), ("8", "8", "num"),
     ("9",  "9",         "num"), ("×", "*", "op")],

    [("4",  "4",         "num"), ("5", "5", "num"),
     ("6",  "6",         "num"), ("−", "-", "op")],

    [("1",  "1",         "num"), ("2", "2", "num"),
     ("3",  "3",         "num"), ("+", "+", "op")],

    [("^",  "^",         "func"), ("y√x", "nthRoot", "func"),
     ("0",  "0",         "num"),  (".", ".", "num")],

    [("=",  "=",         "equals")],
]

LABEL_TO_TOKEN = {
    label: token
    for row in KEYPAD
    for label, token, _kind in row
}


def token_for_label(label: str) -> str:
    """Devuelve el símbolo canónico asociado a la etiqueta de un botón."""
    try:
        return LABEL_TO_TOKEN[label]
    except KeyError:
        raise ValueError(f"Botón desconocido: {label}") from None
