# passgen_app/utils/password_generator.py
import random
from passgen_app.core.definitions import CHARACTER_SETS, MSG_NO_OPTION_SELECTED


class NoOptionSelectedError(ValueError):
    """Raised when a password is requested with every character class turned off."""

    def __init__(self, message: str = MSG_NO_OPTION_SELECTED):
        super().__init__(message)


def build_character_pool(options) -> str:
    """Concatenate the selected character sets in their fixed order."""
    return ''.join(CHARACTER_SETS[key] for key in options.selected())


def generate_password(options, length: int, rng=None) -> str:
    """
    Draw `length` characters uniformly, with replacement, from the selected pool.

    `rng` only needs a `randrange` method and defaults to the `random` module,
    which is not a cryptographic source.
    """
    if not options.any_selected():
        raise NoOptionSelectedError()
    rng = rng or random
    pool = build_character_pool(options)
    return ''.join(pool[rng.randrange(len(pool))] for _ in range(length))
