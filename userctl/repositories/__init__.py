"""Repositories orchestrating validation and storage."""

from .user_repository import UserRepository

__all__ = ["UserRepository"]
