"""User entity module.

- User: the record (email, username, phone, age), keyed by email
- RecordSet: mapping of email to User, the unit loaded and saved by stores
"""

from .entity import RecordSet, User

__all__ = ["RecordSet", "User"]
