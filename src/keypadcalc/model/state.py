"""
Calculator State (Data Model)
=============================
This module defines the value held by the running calculator and the pure
transition functions that produce the next value from an input.

Why is this file needed?
------------------------
1. State Management: The four fields (display, pending operand, pending
   operator, awaiting flag) live together in one immutable tuple.
2. Decoupling: Views only read a ``CalculatorState``; the store replaces it
   with whatever a transition returns. Nothing mutates it in place.

Classes:
    CalculatorState: The frozen state tuple.

Functions:
    enter_digit, enter_decimal, select_operator, equals, backspace, clear
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional

from keypadcalc.config import INITIAL_DISPLAY, MAX_DIGITS
from keypadcalc.model.evaluator import Operator, evaluate
from keypadcalc.model.formatting import count_digits, format_number, parse_display

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


@dataclass(frozen=True)
class CalculatorState:
    """
    Everything the calculator knows between two inputs.

    ``pending_operand`` and ``pending_operator`` are set and cleared together.
    """
    display: str = INITIAL_DISPLAY
    pending_operand: Optional[float] = None
    pending_operator: Optional[Operator] = None
    awaiting_operand: bool = False

    def __post_init__(self) -> None:
        if not self.display:
            raise ValueError("Display text must not be empty.")
        if (self.pending_operand is None) != (self.pending_operator is None):
            raise ValueError(
                "Pending operand and operator must be set together "
                f"(operand={self.pending_operand!r}, operator={self.pending_operator!r})."
            )

    @property
    def has_pending_operation(self) -> bool:
        return self.pending_operator is not None


INITIAL_STATE = CalculatorState()


def enter_digit(state: CalculatorState, digit: str) -> CalculatorState:
    if len(digit) != 1 or digit not in DIGITS:
        raise ValueError(f"Not a digit: {digit!r}")

    if state.awaiting_operand:
        return replace(state, display=digit, awaiting_operand=False)

    if state.display == "0":
        return replace(state, display=digit)

    candidate = state.display + digit
    if count_digits(candidate) > MAX_DIGITS:
        logger.debug(f"Digit '{digit}' ignored, display is full ({MAX_DIGITS} digits).")
        return state
    return replace(state, display=candidate)


def enter_decimal(state: CalculatorState) -> CalculatorState:
    if state.awaiting_operand:
        return replace(state, display="0.", awaiting_operand=False)
    if "." in state.display:
        return state
    return replace(state, display=state.display + ".")


def select_operator(state: CalculatorState, operator: Operator) -> CalculatorState:
    """
    Start, chain or substitute a pending operation.

    - No pending operation: the display becomes the left operand.
    - A new operand was typed since the last operator: evaluate the pending
      operation and keep its result as the new left operand.
    - Operator pressed twice in a row: only the operator is replaced.
    """
    operator = Operator(operator)
    input_value = parse_display(state.display)

    if state.pending_operand is None:
        return replace(
            state,
            pending_operand=input_value,
            pending_operator=operator,
            awaiting_operand=True,
        )

    if state.pending_operator is not None and not state.awaiting_operand:
        result = evaluate(state.pending_operand, input_value, state.pending_operator)
        return CalculatorState(
            display=format_number(result),
            pending_operand=result,
            pending_operator=operator,
            awaiting_operand=True,
        )

    return replace(state, pending_operator=operator, awaiting_operand=True)


def equals(state: CalculatorState) -> CalculatorState:
    if state.pending_operator is None or state.pending_operand is None:
        return state

    input_value = parse_display(state.display)
    result = evaluate(state.pending_operand, input_value, state.pending_operator)
    return CalculatorState(
        display=format_number(result),
        pending_operand=None,
        pending_operator=None,
        awaiting_operand=True,
    )


def backspace(state: CalculatorState) -> CalculatorState:
    # Nothing typed yet, the display still shows an operand or result
    if state.awaiting_operand:
        return state
    return replace(state, display=state.display[:-1] or "0")


def clear(state: CalculatorState) -> CalculatorState:
    return INITIAL_STATE
