# passgen_app/core/options.py
from typing import Dict, List, Tuple
from passgen_app.core.definitions import OPTION_KEYS


def option_label(key: str) -> str:
    """Checkbox text: 'include_lowercase' -> 'Include Lowercase'."""
    return "Include " + key.replace("include_", "", 1).capitalize()


class PasswordOptions:
    """The four character-class toggles, all off by default."""

    def __init__(self, **flags: bool):
        self._flags: Dict[str, bool] = {key: False for key in OPTION_KEYS}
        for key, value in flags.items():
            self.set(key, value)

    def _check_key(self, key: str):
        if key not in self._flags:
            raise KeyError(f"Unknown password option: {key}")

    def get(self, key: str) -> bool:
        self._check_key(key)
        return self._flags[key]

    def set(self, key: str, value: bool):
        self._check_key(key)
        self._flags[key] = bool(value)

    def reset(self):
        for key in self._flags:
            self._flags[key] = False

    def any_selected(self) -> bool:
        return any(self._flags.values())

    def selected(self) -> List[str]:
        return [key for key in OPTION_KEYS if self._flags[key]]

    def items(self) -> List[Tuple[str, bool]]:
        return [(key, self._flags[key]) for key in OPTION_KEYS]

    def as_dict(self) -> Dict[str, bool]:
        return dict(self._flags)

    def __repr__(self):
        return f"PasswordOptions({self._flags!r})"
