"""
Keyboard Mapping
================
Translates a key press into the same input event a keypad button produces.

Printable keys are matched on the text they produce, so the number pad and
shifted layouts (e.g. Shift+= for "+") behave the same. Keys without text
(Enter, Backspace, ...) are matched on their Qt key code.
"""
from __future__ import annotations

import enum
from typing import Optional, Union

from PySide6.QtCore import Qt

from keypadcalc.model.evaluator import Operator
from keypadcalc.model.events import (
    BackspacePressed, ClearPressed, DecimalPressed, DigitPressed, EqualsPressed, InputEvent,
    OperatorPressed,
)


def _key_value(key: Union[int, enum.Enum]) -> int:
    # PySide6 hands out Qt.Key members in some places and plain ints in others
    if isinstance(key, enum.Enum):
        return int(key.value)
    return int(key)


TEXT_EVENTS: dict[str, InputEvent] = {
    "+": OperatorPressed(Operator.ADD),
    "-": OperatorPressed(Operator.SUBTRACT),
    "*": OperatorPressed(Operator.MULTIPLY),
    "/": OperatorPressed(Operator.DIVIDE),
    "=": EqualsPressed(),
    ".": DecimalPressed(),
    ",": DecimalPressed(),
}

NAMED_KEY_EVENTS: dict[int, InputEvent] = {
    _key_value(Qt.Key.Key_Return): EqualsPressed(),
    _key_value(Qt.Key.Key_Enter): EqualsPressed(),
    _key_value(Qt.Key.Key_Backspace): BackspacePressed(),
    _key_value(Qt.Key.Key_Delete): BackspacePressed(),
    _key_value(Qt.Key.Key_Escape): ClearPressed(),
}


def map_key(key: Union[int, enum.Enum], text: str = "") -> Optional[InputEvent]:
    """
    Return the input event for a key press, or None if the key is not ours.

    Args:
        key: Qt key code (``QKeyEvent.key()``).
        text: Text the key produced (``QKeyEvent.text()``).
    """
    if len(text) == 1:
        if "0" <= text <= "9":
            return DigitPressed(text)
        if text in TEXT_EVENTS:
            return TEXT_EVENTS[text]

    return NAMED_KEY_EVENTS.get(_key_value(key))
