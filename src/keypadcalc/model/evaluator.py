"""
Arithmetic Evaluator
====================
Pairwise IEEE-754 double arithmetic for the four keypad operators.

Division by zero is not an error here: numpy returns the floating-point
sentinel (inf, -inf or nan) which the display then shows as text.
"""
from __future__ import annotations

from enum import StrEnum
from typing import Callable

import numpy as np


class Operator(StrEnum):
    """The four binary operators, keyed by their keyboard symbol."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def glyph(self) -> str:
        """Label shown on the keypad button."""
        return _GLYPHS[self]


_GLYPHS: dict[Operator, str] = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "−",
    Operator.MULTIPLY: "×",
    Operator.DIVIDE: "÷",
}

_UFUNCS: dict[Operator, Callable[..., np.floating]] = {
    Operator.ADD: np.add,
    Operator.SUBTRACT: np.subtract,
    Operator.MULTIPLY: np.multiply,
    Operator.DIVIDE: np.divide,
}


def evaluate(left: float, right: float, operator: Operator | str) -> float:
    """
    Apply ``operator`` to the two operands.

    Args:
        left: The pending (left-hand) operand.
        right: The operand just typed.
        operator: An ``Operator`` or its symbol ("+", "-", "*", "/").

    Returns:
        The double-precision result. Non-finite results are returned, not raised.
    """
    try:
        op = Operator(operator)
    except ValueError:
        raise ValueError(f"Unknown operator: {operator!r}") from None

    with np.errstate(all="ignore"):
        result = _UFUNCS[op](np.float64(left), np.float64(right))
    return float(result)
