"""
Keyboard Listener
=================
Application-wide key handling for the calculator window.

The listener is an event filter on the ``QApplication``: once installed it
sees every key press before any widget does, maps it, and dispatches the
result into the store. Matched keys are consumed so buttons never act on
them as well.

Only keys aimed at the calculator window are taken. While a popup (e.g. the
window menu) is open, or when another top-level window has the key, the
event passes through untouched.

The filter is a scoped resource. ``MainWindow`` installs it when shown and
removes it when hidden, so a closed calculator no longer reacts to keys.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QCoreApplication, QEvent, QObject
from PySide6.QtGui import QKeyEvent, QWindow
from PySide6.QtWidgets import QApplication, QWidget

from keypadcalc.controller.keymap import map_key
from keypadcalc.controller.store import CalculatorStore

logger = logging.getLogger(__name__)


class KeyboardListener(QObject):
    def __init__(
        self,
        store: CalculatorStore,
        window: QWidget | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.store = store
        # None means every key press in the application is ours
        self._window = window
        self._target: QCoreApplication | None = None

    @property
    def is_installed(self) -> bool:
        return self._target is not None

    def install(self) -> None:
        if self._target is not None:
            return
        app = QCoreApplication.instance()
        if app is None:
            raise RuntimeError("KeyboardListener needs a running QApplication.")
        app.installEventFilter(self)
        self._target = app
        logger.info("Keyboard listener installed.")

    def remove(self) -> None:
        if self._target is None:
            return
        self._target.removeEventFilter(self)
        self._target = None
        logger.info("Keyboard listener removed.")

    def handle_key(self, event: QKeyEvent) -> bool:
        """Dispatch ``event`` if it maps to a calculator input. Returns True if consumed."""
        input_event = map_key(event.key(), event.text())
        if input_event is None:
            return False
        self.store.dispatch(input_event)
        event.accept()
        return True

    def targets_calculator(self, watched: QObject) -> bool:
        """True if a key press delivered to ``watched`` belongs to the calculator."""
        if QApplication.activePopupWidget() is not None:
            return False
        if self._window is None:
            return True
        if isinstance(watched, QWidget):
            return watched.window() is self._window
        if isinstance(watched, QWindow):
            return watched is self._window.windowHandle()
        return False

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if (
            event.type() == QEvent.Type.KeyPress
            and isinstance(event, QKeyEvent)
            and self.targets_calculator(watched)
        ):
            return self.handle_key(event)
        return super().eventFilter(watched, event)
