# passgen_app/core/app_log.py
import logging
import os
from passgen_app.config import APP_LOG_FILE

logger = logging.getLogger('PassgenLogger')
logger.setLevel(logging.INFO)

os.makedirs(os.path.dirname(APP_LOG_FILE), exist_ok=True)

file_handler = logging.FileHandler(APP_LOG_FILE)
file_handler.setLevel(logging.INFO)
formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
file_handler.setFormatter(formatter)
if not logger.handlers:
    logger.addHandler(file_handler)

def format_app_event(event_type: str, **details) -> str:
    """'PASSWORD_GENERATED: length=16, pool_size=26'. Details keep their keyword order."""
    if not details:
        return event_type
    return f"{event_type}: " + ", ".join(f"{key}={value}" for key, value in details.items())

def log_app_event(event_type: str, level: int = logging.INFO, **details):
    # Never pass the generated password itself as a detail
    logger.log(level, format_app_event(event_type, **details))

def log_error(message: str): logger.error(message)
