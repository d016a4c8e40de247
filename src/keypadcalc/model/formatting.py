"""
Display Text <-> Number Conversion
==================================
The display always shows the shortest decimal string that round-trips to the
same double, laid out like ``Number#toString`` in a browser:

    16.0        -> "16"
    0.1 + 0.2   -> "0.30000000000000004"
    1e21        -> "1e+21"
    1.5e-7      -> "1.5e-7"
    inf / nan   -> "Infinity" / "NaN"
"""
from __future__ import annotations

import math
from decimal import Decimal

# Fixed notation is used for decimal exponents in [-6, 21)
_FIXED_MIN_EXPONENT = -6
_FIXED_MAX_EXPONENT = 21

_SPECIAL_TEXT: dict[str, float] = {
    "Infinity": math.inf,
    "-Infinity": -math.inf,
    "NaN": math.nan,
}


def _shortest_digits(value: float) -> tuple[str, int]:
    """
    Split a positive finite float into (digits, n) with value == 0.<digits> * 10**n.

    ``repr`` already produces the shortest round-trippable digits; Decimal
    only gives us a convenient way to read them back out.
    """
    _sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).lstrip("0")
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    return stripped, len(stripped) + exponent


def format_number(value: float) -> str:
    """Convert a computation result to display text."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        # Covers -0.0 as well
        return "0"

    sign = "-" if value < 0 else ""
    digits, n = _shortest_digits(abs(value))
    k = len(digits)

    if k <= n <= _FIXED_MAX_EXPONENT:
        text = digits + "0" * (n - k)
    elif 0 < n <= _FIXED_MAX_EXPONENT:
        text = f"{digits[:n]}.{digits[n:]}"
    elif _FIXED_MIN_EXPONENT < n <= 0:
        text = "0." + "0" * (-n) + digits
    else:
        exponent = n - 1
        mantissa = digits[0] if k == 1 else f"{digits[0]}.{digits[1:]}"
        exp_sign = "+" if exponent >= 0 else "-"
        text = f"{mantissa}e{exp_sign}{abs(exponent)}"

    return sign + text


def parse_display(text: str) -> float:
    """
    Convert display text back to a number.

    Accepts anything ``format_number`` produces plus the partial literals the
    keypad builds, e.g. "3." or "0.". Empty text reads as zero.
    """
    if not text:
        return 0.0
    if text in _SPECIAL_TEXT:
        return _SPECIAL_TEXT[text]
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"Display text is not a number: {text!r}") from None


def count_digits(text: str) -> int:
    """Number of characters in ``text`` that count towards the digit cap."""
    return len(text.replace(".", ""))
