"""
Account field validators.

Pure predicates over a single string. None, empty and whitespace-only
input is always invalid. Patterns match the whole string.
"""

import re

_EMAIL_PATTERN = re.compile(r"\w[-\w.+]*@([A-Za-z0-9][-A-Za-z0-9]+\.)+[A-Za-z]{2,14}", re.ASCII)
_HANDLE_PATTERN = re.compile(r"[\w_]{6,20}", re.ASCII)
_PASSWORD_PATTERN = _HANDLE_PATTERN
_PHONE_NUMBER_PATTERN = re.compile(r"0?(13|14|15|17|18|19)[0-9]{9}")
_ID_NUMBER_PATTERN = re.compile(r"\d{17}[\dx]|\d{15}", re.ASCII)

DISPLAY_NAME_MAX_LENGTH = 20


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_valid_email(email: str | None) -> bool:
    """Local part, '@', dot-separated labels, final label of 2-14 letters."""
    if _is_blank(email):
        return False
    return _EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_handle(handle: str | None) -> bool:
    """6-20 word characters."""
    if _is_blank(handle):
        return False
    return _HANDLE_PATTERN.fullmatch(handle) is not None


def is_valid_password(password: str | None) -> bool:
    """6-20 word characters, same shape as a handle."""
    if _is_blank(password):
        return False
    return _PASSWORD_PATTERN.fullmatch(password) is not None


def is_valid_phone_number(number: str | None) -> bool:
    """
    Mainland China mobile number.

    Optional leading 0, a 13/14/15/17/18/19 prefix, then 9 more digits.
    """
    if _is_blank(number):
        return False
    return _PHONE_NUMBER_PATTERN.fullmatch(number) is not None


def is_valid_id_number(number: str | None) -> bool:
    """
    National ID number.

    Either the 15-digit first-generation form or 17 digits followed by a
    digit or lowercase 'x' check character.
    """
    if _is_blank(number):
        return False
    return _ID_NUMBER_PATTERN.fullmatch(number) is not None


def is_valid_display_name(name: str | None) -> bool:
    """Not blank and at most 20 characters."""
    if _is_blank(name):
        return False
    return len(name) <= DISPLAY_NAME_MAX_LENGTH
