# passgen_app/gui/main_window.py
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit,
    QPushButton, QCheckBox, QFrame, QScrollArea
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from passgen_app.core.form_state import PasswordFormState
from passgen_app.core.options import option_label
from .alert_banner import AlertBanner


def _divider() -> QFrame:
    line = QFrame()
    line.setObjectName("divider")
    line.setFrameShape(QFrame.HLine)
    line.setFrameShadow(QFrame.Plain)
    return line


class PasswordGeneratorWindow(QMainWindow):
    def __init__(self, form_state: PasswordFormState | None = None, parent=None):
        super().__init__(parent)
        self.form_state = form_state or PasswordFormState(parent=self)
        self.option_checkboxes = {}
        self.setWindowTitle("Password Generator")
        self.setMinimumSize(420, 620)
        self.setup_ui()
        self._connect_state()

    def setup_ui(self):
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        content = QWidget()
        content.setObjectName("generator-page")
        scroll.setWidget(content)
        self.setCentralWidget(scroll)

        main_layout = QVBoxLayout(content)
        main_layout.setContentsMargins(30, 30, 30, 30)
        main_layout.setSpacing(16)

        # Header
        title = QLabel("Password Generator")
        title.setObjectName("heading")
        title.setAlignment(Qt.AlignCenter)
        title.setFont(QFont("Segoe UI", 16, QFont.Bold))
        main_layout.addWidget(title)
        main_layout.addWidget(_divider())

        # Length + inline error
        self.length_input = QLineEdit()
        self.length_input.setPlaceholderText("Password length e.g 8")
        self.length_input.setFixedHeight(36)
        self.length_input.returnPressed.connect(self.on_generate)
        self.length_error_label = QLabel("")
        self.length_error_label.setObjectName("error-text")
        self.length_error_label.setVisible(False)
        main_layout.addWidget(self.length_input)
        main_layout.addWidget(self.length_error_label)

        self.alert_banner = AlertBanner(self.form_state.alert)
        main_layout.addWidget(self.alert_banner)

        # Options card
        options_card = QFrame()
        options_card.setObjectName("card")
        options_layout = QVBoxLayout(options_card)
        options_layout.setContentsMargins(16, 8, 16, 8)
        items = self.form_state.options.items()
        for index, (key, checked) in enumerate(items):
            cb = QCheckBox(option_label(key))
            cb.setChecked(checked)
            cb.setCursor(Qt.PointingHandCursor)
            cb.toggled.connect(lambda state, k=key: self.form_state.set_option(k, state))
            self.option_checkboxes[key] = cb
            options_layout.addWidget(cb)
            if index < len(items) - 1:
                options_layout.addWidget(_divider())
        main_layout.addWidget(options_card)

        # Result
        self.result_card = QFrame()
        self.result_card.setObjectName("card")
        result_layout = QVBoxLayout(self.result_card)
        result_layout.setContentsMargins(16, 12, 16, 12)
        result_title = QLabel("Generated Password")
        result_title.setObjectName("card-title")
        result_title.setAlignment(Qt.AlignCenter)
        self.result_label = QLabel("")
        self.result_label.setObjectName("generated-password")
        self.result_label.setWordWrap(True)
        self.result_label.setTextInteractionFlags(Qt.TextSelectableByMouse | Qt.TextSelectableByKeyboard)
        result_layout.addWidget(result_title)
        result_layout.addWidget(_divider())
        result_layout.addWidget(self.result_label)
        self.result_card.setVisible(False)
        main_layout.addWidget(self.result_card)

        # Actions
        actions = QHBoxLayout()
        actions.setContentsMargins(20, 20, 20, 20)
        self.generate_button = QPushButton("Generate Password")
        self.generate_button.setProperty("variant", "primary")
        self.generate_button.setCursor(Qt.PointingHandCursor)
        self.generate_button.clicked.connect(self.on_generate)
        self.reset_button = QPushButton("Reset")
        self.reset_button.setCursor(Qt.PointingHandCursor)
        self.reset_button.clicked.connect(self.form_state.reset)
        actions.addWidget(self.generate_button)
        actions.addStretch()
        actions.addWidget(self.reset_button)
        main_layout.addLayout(actions)
        main_layout.addStretch()

        self.length_input.setFocus()

    def _connect_state(self):
        self.length_input.textChanged.connect(self.form_state.set_length_text)
        self.form_state.length_error_changed.connect(self.on_length_error_changed)
        self.form_state.password_changed.connect(self.on_password_changed)
        self.form_state.options_changed.connect(self.sync_checkboxes)

    def on_generate(self):
        self.form_state.submit(self.length_input.text())

    def on_length_error_changed(self, feedback: str):
        self.length_error_label.setText(feedback)
        self.length_error_label.setVisible(bool(feedback))

    def on_password_changed(self, password: str):
        self.result_label.setText(password)
        self.result_card.setVisible(bool(password))

    def sync_checkboxes(self):
        for key, checked in self.form_state.options.items():
            cb = self.option_checkboxes[key]
            if cb.isChecked() != checked:
                cb.setChecked(checked)
