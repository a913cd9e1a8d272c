# passgen_app/utils/password_validator.py
import re
from passgen_app.core.definitions import (
    MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH,
    MSG_LENGTH_REQUIRED, MSG_LENGTH_NOT_A_NUMBER, MSG_LENGTH_TOO_SHORT, MSG_LENGTH_TOO_LONG
)

# ASCII digits only; an all-zero fraction ("5.0", "5.") still counts as a whole number
WHOLE_NUMBER_RE = re.compile(r"[+-]?[0-9]+(\.0*)?")

def validate_password_length(raw_text) -> dict:
    """
    Validate the length typed in the form.
    Returns a dict with the status, the integer value and the error message.
    """
    text = (raw_text or "").strip()
    if not text:
        return {"valid": False, "value": None, "feedback": MSG_LENGTH_REQUIRED}

    if not WHOLE_NUMBER_RE.fullmatch(text):
        return {"valid": False, "value": None, "feedback": MSG_LENGTH_NOT_A_NUMBER}
    value = int(text.split(".", 1)[0])

    if value < MIN_PASSWORD_LENGTH:
        return {"valid": False, "value": value, "feedback": MSG_LENGTH_TOO_SHORT}
    if value > MAX_PASSWORD_LENGTH:
        return {"valid": False, "value": value, "feedback": MSG_LENGTH_TOO_LONG}

    return {"valid": True, "value": value, "feedback": ""}
