# passgen_app/gui/styles/theme_manager.py
import os
from PySide6.QtWidgets import QApplication

BASE_DIR = os.path.dirname(__file__)
THEMES = ('light', 'dark')

def _load_qss(path: str) -> str:
    if os.path.exists(path):
        with open(path, 'r') as f:
            return f.read()
    return ""

def build_stylesheet(theme: str) -> str:
    """Feuille de style complète : base.qss puis le thème demandé ('light' par défaut)."""
    if theme not in THEMES:
        theme = 'light'
    return _load_qss(os.path.join(BASE_DIR, 'base.qss')) + _load_qss(os.path.join(BASE_DIR, f'{theme}_theme.qss'))

def apply_theme(theme: str, app_or_widget=None):
    """Applique le thème spécifié sur l'application ou le widget donné.
    theme: 'dark' or 'light'
    """
    if app_or_widget is None:
        app_or_widget = QApplication.instance()
    if app_or_widget:
        app_or_widget.setStyleSheet(build_stylesheet(theme))
