# account_api/core/validation.py
"""Credential shape checks shared by signup and login."""

USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 20
PASSWORD_MIN_LEN = 10
PASSWORD_MAX_LEN = 32


def is_between(value: int, low: int, high: int) -> bool:
    """Inclusive range check."""
    return low <= value <= high


def text_length(s: str) -> int:
    """
    Length in UTF-16 code units, as browser clients count it.

    Characters outside the Basic Multilingual Plane (most emoji) count as 2.
    """
    return len(s.encode("utf-16-le")) // 2


def is_valid_user(username, password) -> bool:
    """
    Check that a username/password pair is acceptable for an account.

    Both must be strings; username length in [3, 20] and password length
    in [10, 32], bounds inclusive, measured with text_length().
    """
    return (
        isinstance(username, str)
        and isinstance(password, str)
        and is_between(text_length(username), USERNAME_MIN_LEN, USERNAME_MAX_LEN)
        and is_between(text_length(password), PASSWORD_MIN_LEN, PASSWORD_MAX_LEN)
    )
