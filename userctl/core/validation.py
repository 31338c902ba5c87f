"""Field validators for user records.

Pure functions: each returns the accepted value or raises the matching
``InvalidField`` subclass.
"""

from __future__ import annotations

import re

from userctl.core.errors import InvalidAge, InvalidEmail, InvalidPhone, InvalidUsername

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_PATTERN = re.compile(r"[0-9]+")
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

MIN_USERNAME_LENGTH = 3
MIN_PHONE_DIGITS = 10
MIN_AGE = 0
MAX_AGE = 150


def validate_email(email: str) -> str:
    if not isinstance(email, str) or not EMAIL_PATTERN.fullmatch(email):
        raise InvalidEmail(f"Invalid email format: {email}")
    return email


def validate_username(username: str) -> str:
    if (
        not isinstance(username, str)
        or not username.strip()
        or len(username) < MIN_USERNAME_LENGTH
    ):
        raise InvalidUsername(
            f"Username must be at least {MIN_USERNAME_LENGTH} characters long"
        )
    return username


def validate_phone(phone: str) -> str:
    """Accept ASCII digits only; separators such as '-', ' ' or '+' are rejected."""
    if not isinstance(phone, str) or not PHONE_PATTERN.fullmatch(phone):
        raise InvalidPhone(f"Phone number must contain digits only: {phone}")
    if len(phone) < MIN_PHONE_DIGITS:
        raise InvalidPhone(f"Phone number must be at least {MIN_PHONE_DIGITS} digits")
    return phone


def parse_age(raw: int | str) -> int:
    """Turn a command-line age into an int.

    Raises:
        InvalidAge: If ``raw`` is not a base-10 integer, or has too many digits
            to convert.
    """
    # bool is an int subclass but never a valid age
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and INTEGER_PATTERN.fullmatch(raw.strip()):
        try:
            return int(raw.strip())
        except ValueError as e:
            # Well-formed but beyond int conversion limits, so far out of range
            raise InvalidAge(f"Age must be between {MIN_AGE} and {MAX_AGE}") from e
    raise InvalidAge(f"Invalid age format: {raw}")


def validate_age(age: int | str) -> int:
    value = parse_age(age)
    if not MIN_AGE <= value <= MAX_AGE:
        raise InvalidAge(f"Age must be between {MIN_AGE} and {MAX_AGE}")
    return value
