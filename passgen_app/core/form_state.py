# passgen_app/core/form_state.py
import logging
from PySide6.QtCore import QObject, Signal
from passgen_app.core.alert import AlertState
from passgen_app.core.app_log import log_app_event
from passgen_app.core.definitions import (
    LOG_EVENT_PASSWORD_GENERATED, LOG_EVENT_GENERATION_REFUSED,
    LOG_EVENT_VALIDATION_FAILED, LOG_EVENT_FORM_RESET
)
from passgen_app.core.options import PasswordOptions
from passgen_app.utils.password_generator import (
    NoOptionSelectedError, build_character_pool, generate_password
)
from passgen_app.utils.password_validator import validate_password_length


class PasswordFormState(QObject):
    """
    State behind the generator form: options, alert, length error and result.

    The widgets only reflect this object and forward user intents to it.
    """
    password_changed = Signal(str)
    length_error_changed = Signal(str)
    options_changed = Signal()

    def __init__(self, alert_timeout_ms: int | None = None, rng=None, parent=None):
        super().__init__(parent)
        self.options = PasswordOptions()
        self.alert = AlertState(alert_timeout_ms, parent=self)
        self.generated_password = ""
        self.length_text = ""
        self.length_error = ""
        # Errors stay hidden until the first submit
        self.touched = False
        self._rng = rng

    def _set_length_error(self, feedback: str):
        if feedback == self.length_error:
            return
        self.length_error = feedback
        self.length_error_changed.emit(feedback)

    def _set_password(self, password: str):
        if password == self.generated_password:
            return
        self.generated_password = password
        self.password_changed.emit(password)

    def set_length_text(self, text: str):
        self.length_text = text
        if self.touched:
            self._set_length_error(validate_password_length(text)["feedback"])

    def set_option(self, key: str, checked: bool):
        if self.options.get(key) == bool(checked):
            return
        self.options.set(key, checked)
        self.options_changed.emit()

    def submit(self, length_text: str | None = None) -> str | None:
        """
        Validate the length then generate.

        Returns the new password, or None when validation fails or no
        character class is selected. A refusal raises the alert and clears
        the previous result.
        """
        if length_text is not None:
            self.length_text = length_text
        self.touched = True

        result = validate_password_length(self.length_text)
        self._set_length_error(result["feedback"])
        if not result["valid"]:
            log_app_event(LOG_EVENT_VALIDATION_FAILED, logging.WARNING, feedback=result['feedback'])
            return None

        try:
            password = generate_password(self.options, result["value"], self._rng)
        except NoOptionSelectedError as e:
            log_app_event(LOG_EVENT_GENERATION_REFUSED, logging.WARNING, reason=e)
            self.alert.raise_alert(str(e))
            self._set_password("")
            return None

        log_app_event(LOG_EVENT_PASSWORD_GENERATED, length=len(password),
                      pool_size=len(build_character_pool(self.options)))
        self._set_password(password)
        return password

    def reset(self):
        """Clear the options and the result; the length field and alert are left as is."""
        self.options.reset()
        self.options_changed.emit()
        self._set_password("")
        log_app_event(LOG_EVENT_FORM_RESET)

    @property
    def has_result(self) -> bool:
        return bool(self.generated_password)
