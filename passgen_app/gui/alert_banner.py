# passgen_app/gui/alert_banner.py
from PySide6.QtWidgets import QFrame, QVBoxLayout, QLabel
from PySide6.QtCore import Qt


class AlertBanner(QFrame):
    """Banner shown while its AlertState is visible."""

    def __init__(self, alert_state, parent=None):
        super().__init__(parent)
        self.setObjectName("alert-banner")
        self.alert_state = alert_state

        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 10, 14, 10)
        self.message_label = QLabel("")
        self.message_label.setObjectName("alert-message")
        self.message_label.setWordWrap(True)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        layout.addWidget(self.message_label)

        self.alert_state.changed.connect(self.on_alert_changed)
        self.on_alert_changed(self.alert_state.visible, self.alert_state.message)

    def on_alert_changed(self, visible: bool, message: str):
        self.message_label.setText(message)
        self.setVisible(visible)
