# passgen_app/core/definitions.py

MIN_PASSWORD_LENGTH = 4
MAX_PASSWORD_LENGTH = 100

# Fixed pool order: lowercase, uppercase, numbers, symbols
OPTION_KEYS = (
    "include_lowercase",
    "include_uppercase",
    "include_numbers",
    "include_symbols",
)

CHARACTER_SETS = {
    "include_lowercase": "acbdefghijklmnopqrstuvwxyz",
    "include_uppercase": "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "include_numbers": "0123456789",
    "include_symbols": "!@#$%^&*()_+=",
}

# Messages
MSG_LENGTH_REQUIRED = "Please determine password length."
MSG_LENGTH_NOT_A_NUMBER = "Password length must be a number."
MSG_LENGTH_TOO_SHORT = f"A password should be at least {MIN_PASSWORD_LENGTH}."
MSG_LENGTH_TOO_LONG = f"Maximum supported length is {MAX_PASSWORD_LENGTH}."
MSG_NO_OPTION_SELECTED = "Please select at least one option to generate password"

# Log Event Types
LOG_EVENT_PASSWORD_GENERATED = "PASSWORD_GENERATED"
LOG_EVENT_GENERATION_REFUSED = "GENERATION_REFUSED"
LOG_EVENT_VALIDATION_FAILED = "VALIDATION_FAILED"
LOG_EVENT_FORM_RESET = "FORM_RESET"
LOG_EVENT_ALERT_HIDDEN = "ALERT_HIDDEN"
