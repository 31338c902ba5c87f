"""Error taxonomy for user record operations.

Every failure a repository operation can produce is one of the classes below.
Each carries a human-readable ``reason`` and a ``kind`` tag (the variant name),
and renders as ``Kind("reason")`` through ``repr()``, with backslashes, quotes
and non-printable characters in the reason escaped so the rendering is always
one unambiguous line:

- InvalidField: InvalidEmail, InvalidUsername, InvalidPhone, InvalidAge
- UserAlreadyExists, UserNotFound
- StorageError: ParseError, IoError
"""

from __future__ import annotations

import unicodedata

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}

# Unicode categories written as \u{hex} escapes
_NON_PRINTABLE = {"Cc", "Cf", "Cs", "Co", "Cn", "Zl", "Zp"}


def escape_reason(text: str) -> str:
    """Escape ``text`` for display inside double quotes."""
    parts = []
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif unicodedata.category(ch) in _NON_PRINTABLE:
            parts.append(f"\\u{{{ord(ch):x}}}")
        else:
            parts.append(ch)
    return "".join(parts)


class UserError(Exception):
    """Base class for all user record errors."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

    @property
    def kind(self) -> str:
        """Variant name of this error."""
        return type(self).__name__

    def __str__(self) -> str:
        return self.reason

    def __repr__(self) -> str:
        return f'{self.kind}("{escape_reason(self.reason)}")'


class InvalidField(UserError):
    """A field value failed its format rule."""


class InvalidEmail(InvalidField):
    pass


class InvalidUsername(InvalidField):
    pass


class InvalidPhone(InvalidField):
    pass


class InvalidAge(InvalidField):
    pass


class UserAlreadyExists(UserError):
    """A record with the requested email is already stored."""

    @classmethod
    def for_email(cls, email: str) -> UserAlreadyExists:
        return cls(f"User with email {email} already exists")


class UserNotFound(UserError):
    """No record is stored under the requested email."""

    @classmethod
    def for_email(cls, email: str) -> UserNotFound:
        return cls(f"User with email {email} not found")


class StorageError(UserError):
    """The backing store could not be read or written."""


class ParseError(StorageError):
    """The storage file exists but its content is malformed."""


class IoError(StorageError):
    """The file system refused a read or write."""
