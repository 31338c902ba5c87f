"""User record storage interface and implementations.

A store moves a whole RecordSet between memory and a location identified by a
path. The JSON file store is the durable backend; the in-memory store keeps
sets per path for tests and embedding.
"""

from __future__ import annotations

import contextlib
import json
import os
import stat
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from userctl.core.errors import IoError, ParseError
from userctl.entities.user import RecordSet, User

StoragePath = str | os.PathLike[str]


class UserStore(ABC):
    """Abstract interface for record set storage backends."""

    @abstractmethod
    def load(self, path: StoragePath) -> RecordSet:
        """Load the full record set.

        Args:
            path: Storage location

        Returns:
            Record set keyed by email, empty when nothing is stored yet

        Raises:
            ParseError: If stored content is malformed
            IoError: If the location cannot be read
        """
        pass

    @abstractmethod
    def save(self, path: StoragePath, users: RecordSet) -> None:
        """Replace the stored record set with ``users``.

        Args:
            path: Storage location
            users: Full record set to persist

        Raises:
            IoError: If the location cannot be written
        """
        pass


class InMemoryUserStore(UserStore):
    """In-memory record set storage keyed by path."""

    def __init__(self) -> None:
        self._data: dict[str, RecordSet] = {}

    def load(self, path: StoragePath) -> RecordSet:
        return dict(self._data.get(os.fspath(path), {}))

    def save(self, path: StoragePath, users: RecordSet) -> None:
        self._data[os.fspath(path)] = dict(users)


class JsonFileUserStore(UserStore):
    """Record set stored as a JSON object of user objects keyed by email.

    Saves are atomic: the new content is written to a temporary file next to
    the target, synced, and renamed over it, so an interrupted save leaves the
    previous file intact.
    """

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def load(self, path: StoragePath) -> RecordSet:
        path = Path(path)
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            logger.debug("No data file at {}; starting with an empty record set", path)
            return {}
        except OSError as e:
            raise IoError(f"Failed to read file: {e}") from e

        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"Failed to parse JSON: {e}") from e

        if not content.strip():
            return {}

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ParseError(f"Failed to parse JSON: {e}") from e

        users = _decode_record_set(data)
        logger.debug("Loaded {} user(s) from {}", len(users), path)
        return users

    def save(self, path: StoragePath, users: RecordSet) -> None:
        path = Path(path)
        payload = {user.email: user.model_dump(mode="json") for user in users.values()}
        content = json.dumps(payload, ensure_ascii=False, indent=self.indent) + "\n"

        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{path.name}.", suffix=".tmp", dir=os.fspath(path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            if path.exists():
                os.chmod(tmp_name, stat.S_IMODE(path.stat().st_mode))
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            raise IoError(f"Failed to write file: {e}") from e

        logger.debug("Saved {} user(s) to {}", len(payload), path)


def _decode_record_set(data: Any) -> RecordSet:
    """Build a record set from decoded JSON (object keyed by email, or array)."""
    entries: list[tuple[str | None, Any]]
    if isinstance(data, dict):
        entries = list(data.items())
    elif isinstance(data, list):
        entries = [(None, entry) for entry in data]
    else:
        raise ParseError(
            f"Failed to parse JSON: expected an object or array of users, got {type(data).__name__}"
        )

    users: RecordSet = {}
    for index, (key, entry) in enumerate(entries):
        label = key if key is not None else f"index {index}"
        try:
            user = User.model_validate(entry)
        except ValidationError as e:
            raise ParseError(f"Invalid user record at {label}: {_describe(e)}") from e
        if key is not None and key != user.email:
            raise ParseError(f"Record key {key} does not match its email {user.email}")
        if user.email in users:
            raise ParseError(f"Duplicate user email {user.email}")
        users[user.email] = user
    return users


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'record'}: {err['msg']}"
        for err in error.errors()
    )
