import random

import pytest
from PySide6.QtTest import QTest

from passgen_app.core.definitions import MSG_LENGTH_TOO_SHORT, MSG_NO_OPTION_SELECTED, OPTION_KEYS
from passgen_app.core.form_state import PasswordFormState
from passgen_app.gui.main_window import PasswordGeneratorWindow


@pytest.fixture
def window(qapp):
    state = PasswordFormState(alert_timeout_ms=50, rng=random.Random(3))
    win = PasswordGeneratorWindow(state)
    yield win
    win.close()


def test_initial_layout(window):
    assert window.windowTitle() == "Password Generator"
    assert window.length_input.placeholderText() == "Password length e.g 8"
    assert [cb.text() for cb in window.option_checkboxes.values()] == [
        "Include Lowercase", "Include Uppercase", "Include Numbers", "Include Symbols",
    ]
    assert not any(cb.isChecked() for cb in window.option_checkboxes.values())
    assert window.result_card.isHidden()
    assert window.alert_banner.isHidden()
    assert window.length_error_label.isHidden()
    assert window.generate_button.text() == "Generate Password"
    assert window.reset_button.text() == "Reset"


def test_generate_shows_result(window):
    window.option_checkboxes["include_lowercase"].setChecked(True)
    window.length_input.setText("5")
    window.generate_button.click()

    assert not window.result_card.isHidden()
    assert window.result_label.text() == window.form_state.generated_password
    assert len(window.result_label.text()) == 5


def test_result_text_is_selectable(window):
    from PySide6.QtCore import Qt
    assert window.result_label.textInteractionFlags() & Qt.TextSelectableByMouse


def test_invalid_length_shows_inline_error(window):
    window.option_checkboxes["include_numbers"].setChecked(True)
    window.length_input.setText("3")
    window.generate_button.click()

    assert not window.length_error_label.isHidden()
    assert window.length_error_label.text() == MSG_LENGTH_TOO_SHORT
    assert window.result_card.isHidden()

    window.length_input.setText("9")
    assert window.length_error_label.isHidden()


def test_no_option_shows_banner_then_hides(window):
    window.length_input.setText("10")
    window.generate_button.click()

    assert not window.alert_banner.isHidden()
    assert window.alert_banner.message_label.text() == MSG_NO_OPTION_SELECTED
    assert window.result_card.isHidden()

    QTest.qWait(300)
    assert window.alert_banner.isHidden()


def test_reset_unchecks_and_hides_result(window):
    for cb in window.option_checkboxes.values():
        cb.setChecked(True)
    window.length_input.setText("12")
    window.generate_button.click()
    assert not window.result_card.isHidden()

    window.reset_button.click()

    assert not any(cb.isChecked() for cb in window.option_checkboxes.values())
    assert window.form_state.options.as_dict() == {key: False for key in OPTION_KEYS}
    assert window.result_card.isHidden()
    assert window.length_input.text() == "12"


def test_return_key_submits(window):
    window.option_checkboxes["include_uppercase"].setChecked(True)
    window.length_input.setText("7")
    window.length_input.returnPressed.emit()
    assert len(window.form_state.generated_password) == 7
