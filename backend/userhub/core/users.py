"""User Directory — the fixed, in-memory user list served by /api/users.

Invariants:
    - Exactly two users, defined at import time, never mutated
    - list_users() returns fresh copies: callers cannot alter the directory
"""

from types import MappingProxyType

USERS: tuple[MappingProxyType, ...] = (
    MappingProxyType({"id": 1, "name": "John Doe", "email": "john@example.com"}),
    MappingProxyType({"id": 2, "name": "Jane Smith", "email": "jane@example.com"}),
)


def list_users() -> list[dict]:
    """Return a copy of every user in the directory, in id order."""
    return [dict(user) for user in USERS]
