"""
Main Application Window
=======================
The top-level calculator window: display on top, keypad below.

Why is this file needed?
------------------------
1. Layout: It organizes the display and keypad into one window.
2. Routing: Keypad clicks and the keyboard listener both dispatch into the
   same ``CalculatorStore``; the display follows the store's signal.
3. Scope: The keyboard listener is installed while the window is shown and
   removed when it is hidden or closed.
"""
import logging

from PySide6.QtWidgets import QMainWindow, QVBoxLayout, QWidget
from PySide6.QtGui import QAction, QHideEvent, QShowEvent

from keypadcalc.config import VISIBLE_APP_NAME
from keypadcalc.controller.keyboard import KeyboardListener
from keypadcalc.controller.store import CalculatorStore
from keypadcalc.view.display import CalculatorDisplay
from keypadcalc.view.keypad import Keypad

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: CalculatorStore | None = None) -> None:
        super().__init__()
        if store is None:
            store = CalculatorStore(parent=self)
        self.store: CalculatorStore = store
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(320, 440)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        layout = QVBoxLayout(main_widget)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(12)

        self.display = CalculatorDisplay()
        layout.addWidget(self.display)

        self.keypad = Keypad()
        layout.addWidget(self.keypad, stretch=1)

        # --- SIGNAL CONNECTIONS ---
        # 1. Keypad -> Store
        self.keypad.event_triggered.connect(self.store.dispatch)

        # 2. Store -> Display
        self.store.display_changed.connect(self.display.show_text)

        # --- KEYBOARD ---
        self.keyboard = KeyboardListener(self.store, window=self, parent=self)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # Initial Render
        self.display.show_text(self.store.display)

    def _create_actions(self) -> None:
        self.act_clear = QAction("Clear", self)
        self.act_clear.triggered.connect(self.store.reset)

        self.act_exit = QAction("Exit", self)
        self.act_exit.setShortcut("Ctrl+Q")
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()
        menu_calc = menu_bar.addMenu("Calculator")
        menu_calc.addAction(self.act_clear)
        menu_calc.addSeparator()
        menu_calc.addAction(self.act_exit)

    # --- EVENTS ---

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        self.keyboard.install()
        logger.info("Calculator window shown.")

    def hideEvent(self, event: QHideEvent) -> None:
        self.keyboard.remove()
        logger.info("Calculator window hidden.")
        super().hideEvent(event)
