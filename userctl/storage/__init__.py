"""Record set persistence backends."""

from .user_storage import InMemoryUserStore, JsonFileUserStore, StoragePath, UserStore

__all__ = ["InMemoryUserStore", "JsonFileUserStore", "StoragePath", "UserStore"]
