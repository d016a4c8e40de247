import os

# Qt tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from keypadcalc.model.events import reduce
from keypadcalc.model.state import INITIAL_STATE
from keypadcalc.controller.keymap import map_key


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def press():
    """Feed a string of keyboard characters through the keymap and reducer."""
    def _press(keys: str, state=INITIAL_STATE):
        for ch in keys:
            event = map_key(0, ch)
            assert event is not None, f"unmapped key {ch!r}"
            state = reduce(state, event)
        return state
    return _press
