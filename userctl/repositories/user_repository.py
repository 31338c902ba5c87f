"""Validated user record repository.

Each operation loads the record set for ``path``, acts on it and, when it
mutates, saves the whole set back. Validation runs before any storage access
and failed operations never write.
"""

from __future__ import annotations

from loguru import logger

from userctl.core.errors import UserAlreadyExists, UserNotFound
from userctl.entities.user import User
from userctl.storage import JsonFileUserStore, StoragePath, UserStore


class UserRepository:
    """Create, read, update, list and delete users keyed by email."""

    def __init__(self, store: UserStore | None = None) -> None:
        self._store = store if store is not None else JsonFileUserStore()

    @property
    def store(self) -> UserStore:
        return self._store

    def create_user(
        self, path: StoragePath, email: str, username: str, phone: str, age: int | str
    ) -> User:
        """Insert a new user.

        Raises:
            InvalidEmail, InvalidUsername, InvalidPhone, InvalidAge: If a field is invalid
            UserAlreadyExists: If a user with ``email`` is already stored
            ParseError, IoError: On storage failure
        """
        user = User.validated(email, username, phone, age)

        users = self._store.load(path)
        if user.email in users:
            logger.debug("Rejected create for existing user {}", user.email)
            raise UserAlreadyExists.for_email(user.email)

        users[user.email] = user
        self._store.save(path, users)
        logger.info("Created user {}", user.email)
        return user

    def update_user(
        self, path: StoragePath, email: str, username: str, phone: str, age: int | str
    ) -> User:
        """Replace username, phone and age of an existing user; the email key never changes.

        Raises:
            InvalidEmail, InvalidUsername, InvalidPhone, InvalidAge: If a field is invalid
            UserNotFound: If no user with ``email`` is stored
            ParseError, IoError: On storage failure
        """
        candidate = User.validated(email, username, phone, age)

        users = self._store.load(path)
        current = users.get(candidate.email)
        if current is None:
            logger.debug("Rejected update for unknown user {}", candidate.email)
            raise UserNotFound.for_email(candidate.email)

        updated = current.with_attributes(candidate.username, candidate.phone, candidate.age)
        users[updated.email] = updated
        self._store.save(path, users)
        logger.info("Updated user {}", updated.email)
        return updated

    def get_user(self, path: StoragePath, email: str) -> User:
        """Return the user stored under ``email``.

        Raises:
            UserNotFound: If no user with ``email`` is stored
            ParseError, IoError: On storage failure
        """
        user = self._store.load(path).get(email)
        if user is None:
            raise UserNotFound.for_email(email)
        return user

    def list_users(self, path: StoragePath) -> list[User]:
        """Return every stored user in storage order (oldest first)."""
        return list(self._store.load(path).values())

    def delete_user(self, path: StoragePath, email: str) -> User:
        """Remove the user stored under ``email`` and return it.

        Raises:
            UserNotFound: If no user with ``email`` is stored
            ParseError, IoError: On storage failure
        """
        users = self._store.load(path)
        removed = users.pop(email, None)
        if removed is None:
            logger.debug("Rejected delete for unknown user {}", email)
            raise UserNotFound.for_email(email)

        self._store.save(path, users)
        logger.info("Deleted user {}", email)
        return removed
