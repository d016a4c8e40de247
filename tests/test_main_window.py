import pytest
from PySide6.QtCore import Qt
from PySide6.QtTest import QTest

from keypadcalc.controller.store import CalculatorStore
from keypadcalc.model.state import INITIAL_STATE
from keypadcalc.view.keypad import KEYPAD_LAYOUT
from keypadcalc.view.main_window import MainWindow


@pytest.fixture
def window(qapp):
    win = MainWindow(CalculatorStore())
    yield win
    win.close()


def click(window, *labels):
    for label in labels:
        window.keypad.button(label).click()


def test_initial_display(window):
    assert window.display.text() == "0"


def test_keypad_has_one_button_per_input(window):
    assert set(window.keypad.buttons) == {label for label, *_ in KEYPAD_LAYOUT}
    assert len(window.keypad.buttons) == 18
    for btn in window.keypad.buttons.values():
        assert btn.focusPolicy() == Qt.NoFocus


def test_click_calculation(window):
    click(window, "5", "+", "3", "×", "2", "=")
    assert window.display.text() == "16"
    assert window.store.state.pending_operator is None


def test_click_backspace_and_clear(window):
    click(window, "1", "2", "⌫")
    assert window.display.text() == "1"
    click(window, "⌫")
    assert window.display.text() == "0"
    click(window, "7", "÷", "AC")
    assert window.store.state == INITIAL_STATE
    assert window.display.text() == "0"


def test_click_divide_by_zero(window):
    click(window, "5", "÷", "0", "=")
    assert window.display.text() == "Infinity"


def test_listener_follows_visibility(window):
    assert not window.keyboard.is_installed
    window.show()
    assert window.keyboard.is_installed
    window.hide()
    assert not window.keyboard.is_installed


def test_keyboard_and_clicks_are_equivalent(qapp):
    typed = MainWindow(CalculatorStore())
    clicked = MainWindow(CalculatorStore())
    try:
        typed.show()
        QTest.keyClicks(typed, "12.5*4")
        QTest.keyClick(typed, Qt.Key.Key_Return)
        typed.hide()

        click(clicked, "1", "2", ".", "5", "×", "4", "=")

        assert typed.store.state == clicked.store.state
        assert typed.display.text() == "50"
    finally:
        typed.close()
        clicked.close()


def test_keys_ignored_while_hidden(window):
    QTest.keyClick(window, Qt.Key.Key_5)
    assert window.display.text() == "0"


def test_clear_action(window):
    click(window, "9", "+")
    window.act_clear.trigger()
    assert window.store.state == INITIAL_STATE


def test_display_renders_verbatim(window):
    window.display.show_text("3.")
    assert window.display.text() == "3."
    window.display.show_text("")
    assert window.display.text() == "0"


def test_open_menu_keeps_its_keys(window):
    window.show()
    QTest.keyClicks(window, "42")
    assert window.display.text() == "42"

    menu = window.menuBar().actions()[0].menu()
    menu.popup(window.mapToGlobal(window.rect().center()))
    try:
        assert menu.isVisible()
        QTest.keyClick(menu, Qt.Key.Key_7)
        QTest.keyClick(menu, Qt.Key.Key_Escape)
        assert window.display.text() == "42"
        assert not menu.isVisible()
    finally:
        menu.close()

    # Keys reach the calculator again once the menu is gone
    QTest.keyClick(window, Qt.Key.Key_Escape)
    assert window.display.text() == "0"
