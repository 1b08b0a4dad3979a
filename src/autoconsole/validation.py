# autoconsole: Character-whitelist check applied to every line the console accepts, whether typed or read from an automation file.

from .errors import InvalidInputError

# Punctuation allowed on top of alphanumerics.
ALLOWED_SYMBOLS = frozenset(".+-|@ ")

EXPECTED_CHARSET = "alphanumeric characters or one of '.', '+', '-', '|', '@', ' '"


def is_allowed_char(ch: str) -> bool:
    """Return True when a single character belongs to the accepted set."""
    return ch.isalnum() or ch in ALLOWED_SYMBOLS


def check(text: str) -> None:
    """
    Validate a line of input.

    Raises:
        InvalidInputError: when text is empty or contains a character outside
        the accepted set. The caller owns the read_valid flag and only sets it
        when this returns normally.
    """
    if not text:
        raise InvalidInputError(EXPECTED_CHARSET, text)
    for ch in text:
        if not is_allowed_char(ch):
            raise InvalidInputError(EXPECTED_CHARSET, text)
