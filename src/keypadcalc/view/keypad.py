"""
Keypad
======
One push button per calculator input, laid out as a 4-column grid:

    AC  AC  ⌫  ÷
    7   8   9  ×
    4   5   6  −
    1   2   3  +
    0   0   .  =

Every button emits the same event object the keyboard mapping produces.
"""
from __future__ import annotations

from PySide6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget
from PySide6.QtCore import Qt, Signal

from keypadcalc.model.evaluator import Operator
from keypadcalc.model.events import (
    BackspacePressed, ClearPressed, DecimalPressed, DigitPressed, EqualsPressed, InputEvent,
    OperatorPressed,
)

# (label, event, row, column, column span)
KEYPAD_LAYOUT: list[tuple[str, InputEvent, int, int, int]] = [
    ("AC", ClearPressed(), 0, 0, 2),
    ("⌫", BackspacePressed(), 0, 2, 1),
    (Operator.DIVIDE.glyph, OperatorPressed(Operator.DIVIDE), 0, 3, 1),
    ("7", DigitPressed("7"), 1, 0, 1),
    ("8", DigitPressed("8"), 1, 1, 1),
    ("9", DigitPressed("9"), 1, 2, 1),
    (Operator.MULTIPLY.glyph, OperatorPressed(Operator.MULTIPLY), 1, 3, 1),
    ("4", DigitPressed("4"), 2, 0, 1),
    ("5", DigitPressed("5"), 2, 1, 1),
    ("6", DigitPressed("6"), 2, 2, 1),
    (Operator.SUBTRACT.glyph, OperatorPressed(Operator.SUBTRACT), 2, 3, 1),
    ("1", DigitPressed("1"), 3, 0, 1),
    ("2", DigitPressed("2"), 3, 1, 1),
    ("3", DigitPressed("3"), 3, 2, 1),
    (Operator.ADD.glyph, OperatorPressed(Operator.ADD), 3, 3, 1),
    ("0", DigitPressed("0"), 4, 0, 2),
    (".", DecimalPressed(), 4, 2, 1),
    ("=", EqualsPressed(), 4, 3, 1),
]


class Keypad(QWidget):
    # Emitted with the InputEvent of the clicked button
    event_triggered = Signal(object)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.buttons: dict[str, QPushButton] = {}

        grid = QGridLayout(self)
        grid.setSpacing(6)
        grid.setContentsMargins(0, 0, 0, 0)

        for label, event, row, col, span in KEYPAD_LAYOUT:
            btn = QPushButton(label)
            btn.setMinimumHeight(48)
            btn.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
            # Keyboard input goes through the listener, never a focused button
            btn.setFocusPolicy(Qt.NoFocus)
            btn.clicked.connect(lambda _checked=False, e=event: self.event_triggered.emit(e))
            grid.addWidget(btn, row, col, 1, span)
            self.buttons[label] = btn

    def button(self, label: str) -> QPushButton:
        return self.buttons[label]
