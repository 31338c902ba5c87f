"""Unit tests for the error taxonomy."""

import pytest

from userctl.core.errors import (
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


class TestUserError:
    """Tests for the tagged error variants."""

    def test_repr_is_tagged_form(self):
        """Should render as Kind("reason")."""
        error = InvalidEmail("Invalid email format: bad")

        assert repr(error) == 'InvalidEmail("Invalid email format: bad")'
        assert str(error) == "Invalid email format: bad"
        assert error.kind == "InvalidEmail"
        assert error.reason == "Invalid email format: bad"

    @pytest.mark.parametrize(
        ("reason", "rendered"),
        [
            ('Invalid email format: a"b', 'InvalidEmail("Invalid email format: a\\"b")'),
            ("Invalid email format: a\\b", 'InvalidEmail("Invalid email format: a\\\\b")'),
            ("Invalid email format: a\nb", 'InvalidEmail("Invalid email format: a\\nb")'),
            ("Invalid email format: a\tb", 'InvalidEmail("Invalid email format: a\\tb")'),
            ("Invalid email format: \x1b[31m", 'InvalidEmail("Invalid email format: \\u{1b}[31m")'),
            ("Invalid email format: ゆき", 'InvalidEmail("Invalid email format: ゆき")'),
        ],
    )
    def test_repr_escapes_reason(self, reason, rendered):
        """Quotes, backslashes and control characters never break the tagged form."""
        error = InvalidEmail(reason)

        assert repr(error) == rendered
        assert "\n" not in repr(error)
        assert error.reason == reason

    def test_for_email_messages(self):
        """Should build the standard existence messages."""
        assert repr(UserAlreadyExists.for_email("john@example.com")) == (
            'UserAlreadyExists("User with email john@example.com already exists")'
        )
        assert repr(UserNotFound.for_email("john@example.com")) == (
            'UserNotFound("User with email john@example.com not found")'
        )

    @pytest.mark.parametrize(
        ("error_class", "base"),
        [
            (InvalidEmail, InvalidField),
            (InvalidUsername, InvalidField),
            (InvalidPhone, InvalidField),
            (InvalidAge, InvalidField),
            (ParseError, StorageError),
            (IoError, StorageError),
            (UserAlreadyExists, UserError),
            (UserNotFound, UserError),
        ],
    )
    def test_hierarchy(self, error_class, base):
        """Every variant belongs to the closed UserError hierarchy."""
        error = error_class("reason")

        assert isinstance(error, base)
        assert isinstance(error, UserError)
        assert error.kind == error_class.__name__

    def test_variants_are_distinct(self):
        """Variants are discriminated by type, not by message."""
        with pytest.raises(UserNotFound):
            raise UserNotFound("same text")

        assert not isinstance(UserNotFound("same text"), UserAlreadyExists)
