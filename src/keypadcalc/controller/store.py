"""
Calculator Store
================
Owns the one mutable reference to the current ``CalculatorState``.

Why is this file needed?
------------------------
1. Single writer: Keypad clicks and key presses both end up in ``dispatch``;
   nothing else replaces the state.
2. Signals: Views subscribe to ``state_changed`` / ``display_changed`` and
   re-render whenever the state is replaced.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from keypadcalc.model.events import ClearPressed, InputEvent, reduce
from keypadcalc.model.state import CalculatorState, INITIAL_STATE

logger = logging.getLogger(__name__)


class CalculatorStore(QObject):
    """Central state store with signals for view sync."""
    state_changed = Signal(object)
    display_changed = Signal(str)

    def __init__(self, initial: CalculatorState = INITIAL_STATE, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._state: CalculatorState = initial

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def display(self) -> str:
        return self._state.display

    def dispatch(self, event: InputEvent) -> CalculatorState:
        """Apply ``event`` and notify listeners if the state changed."""
        new_state = reduce(self._state, event)

        if new_state == self._state:
            logger.debug(f"{event} -> no change (display '{new_state.display}')")
            return new_state

        old_display = self._state.display
        self._state = new_state
        logger.debug(
            f"{event} -> display '{new_state.display}', pending "
            f"{new_state.pending_operand!r} {new_state.pending_operator}, "
            f"awaiting={new_state.awaiting_operand}"
        )

        self.state_changed.emit(new_state)
        if new_state.display != old_display:
            self.display_changed.emit(new_state.display)
        return new_state

    def reset(self) -> None:
        """Return to the initial state (same as pressing AC)."""
        self.dispatch(ClearPressed())
