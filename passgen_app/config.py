# passgen_app/config.py
import os
import json
import logging

# --- Chemins de l'application ---
APP_DATA_DIR = os.getenv("PASSGEN_HOME", os.path.join(os.path.expanduser("~"), ".passgen"))
SETTINGS_FILE = os.path.join(APP_DATA_DIR, "settings.json")
APP_LOG_FILE = os.path.join(APP_DATA_DIR, "passgen.log")

# --- Alerte ---
ALERT_TIMEOUT_MS = 3000

# --- Apparence ---
THEME = 'light'

def load_settings():
    """Charge la configuration utilisateur depuis le fichier JSON si existant."""
    global ALERT_TIMEOUT_MS, THEME
    if not os.path.exists(SETTINGS_FILE):
        return
    try:
        with open(SETTINGS_FILE, 'r') as f:
            data = json.load(f)
        ALERT_TIMEOUT_MS = int(data.get("alert_timeout_ms", ALERT_TIMEOUT_MS))
        theme_val = data.get("theme", None)
        if theme_val in ("dark", "light"):
            THEME = theme_val
    except (OSError, ValueError, TypeError, AttributeError) as e:
        logging.getLogger(__name__).warning("Ignoring unreadable settings file %s: %s", SETTINGS_FILE, e)

load_settings()
