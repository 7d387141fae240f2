"""Resource limit targets for virtual hosts and users.

Both enumerations are closed and fall back to MAX_CONNECTIONS.
"""

from __future__ import annotations

__all__ = ["UserLimitTarget", "VirtualHostLimitTarget"]

from typing import Self

from rabbitmq_http_types.commons.base import ClosedVocabulary


class VirtualHostLimitTarget(ClosedVocabulary):
    """Limits that can be enforced on a virtual host."""

    MAX_CONNECTIONS = "max-connections"
    MAX_QUEUES = "max-queues"

    @classmethod
    def default(cls) -> Self:
        return cls.MAX_CONNECTIONS


class UserLimitTarget(ClosedVocabulary):
    """Limits that can be enforced on a user."""

    MAX_CONNECTIONS = "max-connections"
    MAX_CHANNELS = "max-channels"

    @classmethod
    def default(cls) -> Self:
        return cls.MAX_CONNECTIONS
