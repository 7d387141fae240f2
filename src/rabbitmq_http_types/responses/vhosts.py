"""Virtual hosts and enforced limits."""

from __future__ import annotations

__all__ = [
    "EnforcedLimits",
    "UserLimits",
    "VirtualHost",
    "VirtualHostLimits",
    "VirtualHostMetadata",
]

from typing import Any

from pydantic import Field

from rabbitmq_http_types.commons import QueueType, UserLimitTarget, VirtualHostLimitTarget
from rabbitmq_http_types.responses.base import DefinitionRecord, FrozenModel

EnforcedLimits = dict[str, Any]


class VirtualHostMetadata(DefinitionRecord):
    """Virtual host metadata combined, as reported under ``metadata``."""

    tags: list[str] | None = None
    description: str | None = None
    default_queue_type: str | None = None


class VirtualHost(DefinitionRecord):
    """A virtual host.

    Attributes:
        name: Virtual host name.
        tags: Optional tags.
        description: Optional description.
        default_queue_type: Queue type used when clients do not specify one.
            Kept as the raw string (servers may report e.g. "undefined");
            see ``queue_type`` for the decoded value.
        metadata: All virtual host metadata combined.
    """

    name: str
    tags: list[str] | None = None
    description: str | None = None
    default_queue_type: str | None = None
    metadata: VirtualHostMetadata = Field(default_factory=VirtualHostMetadata)

    @property
    def queue_type(self) -> QueueType | None:
        """Decoded default queue type, None when the server reports none."""
        if self.default_queue_type is None:
            return None
        return QueueType.parse(self.default_queue_type)


class VirtualHostLimits(FrozenModel):
    """Limits enforced on one virtual host, keyed by limit name."""

    vhost: str
    limits: EnforcedLimits = Field(alias="value")

    def get(self, target: VirtualHostLimitTarget) -> int | None:
        """Value of one limit, None when not set."""
        return self.limits.get(target.value)


class UserLimits(FrozenModel):
    """Limits enforced on one user, keyed by limit name."""

    username: str = Field(alias="user")
    limits: EnforcedLimits = Field(alias="value")

    def get(self, target: UserLimitTarget) -> int | None:
        """Value of one limit, None when not set."""
        return self.limits.get(target.value)
