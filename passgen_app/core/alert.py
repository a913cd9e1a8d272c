# passgen_app/core/alert.py
from PySide6.QtCore import QObject, QTimer, Signal
from passgen_app.core.app_log import log_app_event
from passgen_app.core.definitions import LOG_EVENT_ALERT_HIDDEN
from passgen_app import config


class AlertState(QObject):
    """
    Transient (message, visible) notice that hides itself after a timeout.

    A single single-shot timer backs the auto-hide: raising again while a hide
    is pending restarts it, so a later alert always gets its full interval.
    Hiding leaves the message in place.
    """
    changed = Signal(bool, str)

    def __init__(self, timeout_ms: int | None = None, parent=None):
        super().__init__(parent)
        self._visible = False
        self._message = ""
        self._hide_timer = QTimer(self)
        self._hide_timer.setSingleShot(True)
        self._hide_timer.setInterval(config.ALERT_TIMEOUT_MS if timeout_ms is None else timeout_ms)
        self._hide_timer.timeout.connect(self._on_timeout)

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def message(self) -> str:
        return self._message

    @property
    def timeout_ms(self) -> int:
        return self._hide_timer.interval()

    def is_pending(self) -> bool:
        return self._hide_timer.isActive()

    def raise_alert(self, message: str):
        self._message = message
        self._visible = True
        self._hide_timer.start()
        self.changed.emit(self._visible, self._message)

    def hide(self):
        self._hide_timer.stop()
        if not self._visible:
            return
        self._visible = False
        self.changed.emit(self._visible, self._message)

    def _on_timeout(self):
        log_app_event(LOG_EVENT_ALERT_HIDDEN, after_ms=self.timeout_ms)
        self.hide()
