"""Users and permissions."""

from __future__ import annotations

__all__ = [
    "Permissions",
    "TopicPermissions",
    "User",
]

from typing import Any

from rabbitmq_http_types.responses.base import DefinitionRecord
from rabbitmq_http_types.responses.validators import TagList


class User(DefinitionRecord):
    """A user.

    Attributes:
        name: Username.
        tags: User tags. Older servers send a comma-separated string.
        password_hash: Salted password hash.
        hashing_algorithm: e.g. "rabbit_password_hashing_sha256".
        limits: Per-user limits, present in definitions exports only.
    """

    name: str
    tags: TagList
    password_hash: str
    hashing_algorithm: str | None = None
    limits: dict[str, Any] | None = None


class Permissions(DefinitionRecord):
    """A user's permissions in a virtual host."""

    user: str
    vhost: str
    configure: str
    read: str
    write: str


class TopicPermissions(DefinitionRecord):
    """A user's topic permissions on one exchange in a virtual host."""

    user: str
    vhost: str
    exchange: str
    read: str
    write: str
