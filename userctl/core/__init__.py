"""Core primitives: error taxonomy and field validators."""

from .errors import (
    InvalidAge,
    InvalidEmail,
    InvalidField,
    InvalidPhone,
    InvalidUsername,
    IoError,
    ParseError,
    StorageError,
    UserAlreadyExists,
    UserError,
    UserNotFound,
)
from .validation import (
    parse_age,
    validate_age,
    validate_email,
    validate_phone,
    validate_username,
)

__all__ = [
    "InvalidAge",
    "InvalidEmail",
    "InvalidField",
    "InvalidPhone",
    "InvalidUsername",
    "IoError",
    "ParseError",
    "StorageError",
    "UserAlreadyExists",
    "UserError",
    "UserNotFound",
    "parse_age",
    "validate_age",
    "validate_email",
    "validate_phone",
    "validate_username",
]
