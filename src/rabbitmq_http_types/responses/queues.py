"""Queues as listed by the server and as stored in definitions."""

from __future__ import annotations

__all__ = [
    "QueueDefinition",
    "QueueInfo",
]

from pydantic import Field

from rabbitmq_http_types.commons import QueueType, WireQueueType
from rabbitmq_http_types.constants import UNDEFINED_FIELD_VALUE
from rabbitmq_http_types.responses.base import DefinitionRecord, FrozenModel
from rabbitmq_http_types.responses.validators import XArguments


class QueueInfo(FrozenModel):
    """A queue with its runtime metrics.

    Gauges default to zero because servers omit them until the first stats
    emission. ``leader``, ``members`` and ``online`` are only reported for
    replicated types (quorum queues and streams) and are None otherwise.
    """

    name: str
    vhost: str
    queue_type: WireQueueType = Field(default=QueueType.CLASSIC, alias="type")
    durable: bool
    auto_delete: bool
    exclusive: bool
    arguments: XArguments = Field(default_factory=dict)

    node: str = UNDEFINED_FIELD_VALUE
    state: str = UNDEFINED_FIELD_VALUE
    # only quorum queues and streams will have these
    leader: str | None = None
    members: list[str] | None = None
    online: list[str] | None = None

    memory: int = 0
    consumer_count: int = Field(default=0, alias="consumers")
    consumer_utilisation: float | None = None
    exclusive_consumer_tag: str | None = None
    policy: str | None = None

    message_bytes: int = 0
    message_bytes_persistent: int = 0
    message_bytes_ram: int = 0
    message_bytes_ready: int = 0
    message_bytes_unacknowledged: int = 0

    message_count: int = Field(default=0, alias="messages")
    on_disk_message_count: int = Field(default=0, alias="messages_persistent")
    in_memory_message_count: int = Field(default=0, alias="messages_ram")
    ready_message_count: int = Field(default=0, alias="messages_ready")
    unacknowledged_message_count: int = Field(default=0, alias="messages_unacknowledged")

    @property
    def is_replicated(self) -> bool:
        return self.queue_type.is_replicated


class QueueDefinition(DefinitionRecord):
    """A queue as stored in a definitions export."""

    name: str
    vhost: str
    durable: bool
    auto_delete: bool
    arguments: XArguments = Field(default_factory=dict)
