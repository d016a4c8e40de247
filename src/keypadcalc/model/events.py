"""
Input Events
============
One small value type per thing the user can do. The keyboard path and the
keypad buttons both produce these, so the state machine cannot tell the two
input modalities apart.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from keypadcalc.model import state as transitions
from keypadcalc.model.evaluator import Operator
from keypadcalc.model.state import CalculatorState


@dataclass(frozen=True)
class DigitPressed:
    digit: str


@dataclass(frozen=True)
class DecimalPressed:
    pass


@dataclass(frozen=True)
class OperatorPressed:
    operator: Operator


@dataclass(frozen=True)
class EqualsPressed:
    pass


@dataclass(frozen=True)
class BackspacePressed:
    pass


@dataclass(frozen=True)
class ClearPressed:
    pass


InputEvent = Union[
    DigitPressed, DecimalPressed, OperatorPressed, EqualsPressed, BackspacePressed, ClearPressed
]


def reduce(state: CalculatorState, event: InputEvent) -> CalculatorState:
    """Return the state that follows ``state`` after ``event``."""
    if isinstance(event, DigitPressed):
        return transitions.enter_digit(state, event.digit)
    if isinstance(event, DecimalPressed):
        return transitions.enter_decimal(state)
    if isinstance(event, OperatorPressed):
        return transitions.select_operator(state, event.operator)
    if isinstance(event, EqualsPressed):
        return transitions.equals(state)
    if isinstance(event, BackspacePressed):
        return transitions.backspace(state)
    if isinstance(event, ClearPressed):
        return transitions.clear(state)
    raise TypeError(f"Unknown input event: {event!r}")
