from arbitrary_precision_engine import ArbitraryPrecisionCalculatorEngine
from calculator_engine import CalculatorEngine, run_keys
from calculator_state import CalculatorState, Entry, render
from decimal import Decimal
import sys


def _press(keys: str, engine=None) -> tuple[str, list[str], CalculatorEngine]:
	engine = engine if engine is not None else CalculatorEngine()
	states = []

	for key in keys.split():
		states.append(engine.handle_key(key))

	return engine.display, states, engine


def inspect_key_states(keys: str, *, arbitrary: bool = False, digits: int = 30) -> None:
	"""Imprime la pantalla tras cada pulsación."""
	engine = ArbitraryPrecisionCalculatorEngine(digits=digits) if arbitrary else None
	end_text, states, engine = _press(keys, engine)

	print("Key inspection")
	print(f"keys:           {keys}")
	print(f"engine:         {type(engine).__name__}")
	print("states:")
	for key, text in zip(keys.split(), states):
		print(f"  {key:>9} -> {text}")

	state = engine.state
	print(f"final text:     {end_text}")
	print(f"pending op:     {state.pending_op}")
	print(f"just evaluated: {state.just_evaluated}")


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	end_chain, _, _ = _press("3 + 4 + 5 =")
	expected_actual.append(("3 + 4 + 5 =", "12", end_chain))
	checks.append(("chained operators fold left to right", end_chain == "12"))

	end_div0, _, _ = _press("5 / 0 =")
	checks.append(("division by zero shows 0", end_div0 == "0"))

	end_pow, _, _ = _press("2 ^ 1 0 =")
	expected_actual.append(("2 ^ 1 0 =", "1024", end_pow))
	checks.append(("2^10 is 1024", end_pow == "1024"))

	end_root, _, _ = _press("3 nthRoot 2 7 =")
	expected_actual.append(("3 nthRoot 2 7 =", "3", end_root))
	checks.append(("cube root of 27 is exactly 3", end_root == "3"))

	end_third, _, _ = _press("1 / 3 =")
	expected_actual.append(("1 / 3 =", "0.3333333333333333", end_third))
	checks.append(("1/3 keeps 16 fractional digits", end_third == "0.3333333333333333"))

	end_two_thirds, _, _ = _press("2 / 3 =")
	expected_actual.append(("2 / 3 =", "0.6666666666666667", end_two_thirds))

	end_sqrt_neg, _, engine_sqrt = _press("0 - 1 6 = sqrt")
	checks.append(("sqrt of negative shows Error", end_sqrt_neg == "Error"))
	checks.append((
		"sqrt error leaves just_evaluated unset",
		engine_sqrt.state.just_evaluated is False,
	))
	checks.append(("backspace in error is a no-op", engine_sqrt.handle_key("backspace") == "Error"))
	checks.append(("digit after error starts fresh", engine_sqrt.handle_key("7") == "7"))

	even_root = run_keys(["="], CalculatorState(Entry("-4"), Decimal(2), "nthRoot"))
	checks.append(("even root of negative radicand shows Error", render(even_root) == "Error"))

	odd_root = run_keys(["="], CalculatorState(Entry("-27"), Decimal(3), "nthRoot"))
	expected_actual.append(("3 nthRoot -27 =", "-3", render(odd_root)))
	checks.append(("odd root of negative radicand is negative", render(odd_root) == "-3"))

	_, _, engine_neg = _press("0 - 4 = nthRoot")
	checks.append(("result of = becomes the root degree", engine_neg.state.accumulator == -4))

	end_fresh, _, _ = _press("2 + 3 = 7")
	checks.append(("digit after = starts a new number", end_fresh == "7"))

	end_clear, _, _ = _press("9 sqrt C")
	checks.append(("C resets display", end_clear == "0"))

	end_ap, _, _ = _press("2 sqrt", ArbitraryPrecisionCalculatorEngine(digits=30))
	expected_actual.append(("2 sqrt (mpmath)", "1.414213562373095", end_ap))
	checks.append(("mpmath sqrt keeps 16 fractional digits", end_ap == "1.414213562373095"))

	end_float, _, _ = _press("2 sqrt")
	expected_actual.append(("2 sqrt (float)", "1.4142135623731", end_float))
	checks.append(("float sqrt rounds to 15 significant digits", end_float == "1.4142135623731"))

	failed = [name for name, ok in checks if not ok]
	for name, ok in checks:
		print(f"{name}: {'OK' if ok else 'FAIL'}")

	print("\nExpected vs Actual:")
	for label, expected, actual in expected_actual:
		status = "OK" if expected == actual else "FAIL"
		print(f"- {label}: {status}")
		print(f"  expected: {expected}")
		print(f"  actual:   {actual}")

	if failed:
		print("\nFAILED CHECKS:")
		for name in failed:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_key_checks.py
	#   python regression_key_checks.py --inspect "2 ^ 1 0 ="
	#   python regression_key_checks.py --inspect "2 sqrt" --arbitrary --digits 40
	if "--inspect" in sys.argv:
		try:
			keys = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing key sequence after --inspect")

		def _read_int(flag: str, default: int) -> int:
			if flag not in sys.argv:
				return default
			idx = sys.argv.index(flag)
			try:
				return int(sys.argv[idx + 1])
			except (ValueError, IndexError):
				raise SystemExit(f"Invalid value for {flag}")

		inspect_key_states(
			keys,
			arbitrary="--arbitrary" in sys.argv,
			digits=_read_int("--digits", 30),
		)
	else:
		run_regressions()
