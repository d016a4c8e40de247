"""
Calculator Display
"""
from PySide6.QtWidgets import QLabel, QSizePolicy, QWidget
from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QFont

from keypadcalc.config import INITIAL_DISPLAY


class CalculatorDisplay(QLabel):
    """Shows the display text verbatim, right aligned."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(INITIAL_DISPLAY, parent)
        self.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        self.setMinimumHeight(70)
        self.setWordWrap(True)

        font = QFont("Monospace")
        font.setStyleHint(QFont.Monospace)
        font.setPointSize(24)
        font.setBold(True)
        self.setFont(font)

    @Slot(str)
    def show_text(self, text: str) -> None:
        # Empty text only ever shows up transiently
        self.setText(text or INITIAL_DISPLAY)
