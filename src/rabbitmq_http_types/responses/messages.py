"""Messages fetched from or published to a queue."""

from __future__ import annotations

__all__ = [
    "GetMessage",
    "MessageList",
    "MessageProperties",
    "MessageRouted",
]

from collections.abc import Iterator

from pydantic import ConfigDict, RootModel

from rabbitmq_http_types.responses.base import FrozenModel
from rabbitmq_http_types.responses.validators import MapOrEmpty

MessageProperties = MapOrEmpty


class GetMessage(FrozenModel):
    """A message fetched from a queue.

    ``properties`` is an empty map when the message has no properties, even
    if the server sends ``[]``.
    """

    payload_bytes: int
    redelivered: bool
    exchange: str
    routing_key: str
    message_count: int
    properties: MessageProperties
    payload: str
    payload_encoding: str

    def __str__(self) -> str:
        lines = [
            f"payload: {self.payload}",
            f"exchange: {self.exchange}",
            f"routing key: {self.routing_key}",
            f"redelivered: {self.redelivered}",
            "properties:",
        ]
        lines.extend(f"  {key}: {value}" for key, value in self.properties.items())
        return "\n".join(lines)


class MessageList(RootModel[list[GetMessage]]):
    """Messages returned by a single get request, in queue order."""

    model_config = ConfigDict(frozen=True)

    def __iter__(self) -> Iterator[GetMessage]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> GetMessage:
        return self.root[index]

    def __str__(self) -> str:
        return "\n\n".join(str(message) for message in self.root)


class MessageRouted(FrozenModel):
    """Result of publishing a message through the management API."""

    routed: bool

    def __str__(self) -> str:
        if self.routed:
            return "Message published and routed successfully"
        return "Message published but NOT routed"
