"""Queue types."""

from __future__ import annotations

__all__ = ["QueueType", "WireQueueType"]

from typing import Self

from rabbitmq_http_types.commons.base import ClosedVocabulary, wire_type
from rabbitmq_http_types.constants import DEFAULT_QUEUE_TYPE_NAME


class QueueType(ClosedVocabulary):
    """Queue type selected at declaration time.

    Closed: an unrecognized value decodes to CLASSIC, the server default.
    """

    CLASSIC = "classic"
    QUORUM = "quorum"
    STREAM = "stream"

    @classmethod
    def default(cls) -> Self:
        return cls(DEFAULT_QUEUE_TYPE_NAME)

    @property
    def is_replicated(self) -> bool:
        """Quorum queues and streams report leader/members/online nodes."""
        return self is not QueueType.CLASSIC


WireQueueType = wire_type(QueueType, QueueType.parse)
