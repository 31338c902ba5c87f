"""Shared fixtures for the userctl test suite."""

from collections.abc import Generator
from pathlib import Path

import pytest
from loguru import logger

from userctl.repositories import UserRepository
from userctl.storage import InMemoryUserStore, JsonFileUserStore


@pytest.fixture(autouse=True)
def _reset_loguru() -> Generator[None, None, None]:
    """Drop sinks added during a test so later tests never write to closed streams."""
    yield
    logger.remove()


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory with no userctl variables set."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("USER_DATA_FILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return tmp_path


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Location of a JSON data file that does not exist yet."""
    return tmp_path / "userdata.json"


@pytest.fixture
def json_store() -> JsonFileUserStore:
    return JsonFileUserStore()


@pytest.fixture
def memory_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def repository(json_store: JsonFileUserStore) -> UserRepository:
    """Repository backed by real JSON files."""
    return UserRepository(json_store)


@pytest.fixture
def john() -> dict[str, str]:
    return {
        "email": "john@example.com",
        "username": "john",
        "phone": "1234567890",
        "age": "30",
    }
