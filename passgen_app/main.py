# passgen_app/main.py
import sys
import os
import traceback
from PySide6.QtWidgets import QApplication
from passgen_app.core.app_log import log_error
from passgen_app.gui.main_window import PasswordGeneratorWindow
from passgen_app.gui.styles import theme_manager
from passgen_app import config

def log_uncaught_exception(exc_type, exc_value, exc_tb):
    """Exceptions raised inside Qt slots end up here: written to the log file, then the default hook."""
    details = ''.join(traceback.format_exception(exc_type, exc_value, exc_tb))
    log_error(f"Unhandled exception: {exc_value!r}\n{details}")
    sys.__excepthook__(exc_type, exc_value, exc_tb)

def main():
    os.makedirs(config.APP_DATA_DIR, exist_ok=True)
    sys.excepthook = log_uncaught_exception
    app = QApplication(sys.argv)
    app.setApplicationName("Password Generator")
    theme_manager.apply_theme(getattr(config, 'THEME', 'light'), app)

    window = PasswordGeneratorWindow()
    window.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
