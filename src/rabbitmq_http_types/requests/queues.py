"""Queue and exchange declaration parameters.

Queue bundles always carry an ``x-queue-type`` argument derived from their
typed queue type. It is built in two steps:

1. start a new map holding only the queue type marker;
2. overlay the caller's arguments on top (last write wins).

A caller argument named ``x-queue-type`` therefore replaces the injected
marker. Exchange bundles inject nothing: the exchange type travels as the
top-level ``type`` key.

Builders do not validate anything (e.g. the 255 byte name limit); the server
rejects invalid declarations.
"""

from __future__ import annotations

__all__ = [
    "ExchangeParams",
    "QueueParams",
]

import copy
from collections.abc import Mapping
from typing import Any

from pydantic import Field, model_validator

from rabbitmq_http_types.commons import (
    AnyExchangeType,
    ExchangeType,
    QueueType,
    WireExchangeType,
    WireQueueType,
)
from rabbitmq_http_types.constants import QUEUE_TYPE_ARGUMENT
from rabbitmq_http_types.requests.base import ParamsModel, XArguments


class QueueParams(ParamsModel):
    """Queue properties used at queue declaration time.

    Attributes:
        name: The name of the queue to declare.
            Must be no longer than 255 bytes in length.
        queue_type: Quorum, classic or stream. Not serialized as a field,
            it reaches the server as the x-queue-type argument.
        durable: Should the queue survive a node restart?
        auto_delete: Should the queue be deleted when its last consumer
            unsubscribes?
        exclusive: Should the queue be exclusive to its declaring connection?
        arguments: Optional queue arguments, always including x-queue-type.
    """

    name: str
    queue_type: WireQueueType = Field(default=QueueType.CLASSIC, exclude=True)
    durable: bool = True
    auto_delete: bool = False
    exclusive: bool = False
    arguments: XArguments = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def inject_queue_type_argument(cls, data: Any) -> Any:
        """Merge the x-queue-type marker into the arguments map.

        Idempotent: re-running it over an already merged map changes nothing.
        """
        if not isinstance(data, dict):
            return data
        queue_type = QueueType.parse(data.get("queue_type", QueueType.default()))
        return {**data, "arguments": cls.combined_args(data.get("arguments"), queue_type)}

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> QueueParams:
        """Copy, re-running marker injection when the update touches it.

        Changing ``queue_type`` without new ``arguments`` replaces the
        x-queue-type entry with the new type; other arguments are kept.
        """
        if not update or not (update.keys() & {"queue_type", "arguments"}):
            return super().model_copy(update=update, deep=deep)
        fields = {name: getattr(self, name) for name in type(self).model_fields}
        if "arguments" not in update:
            fields["arguments"] = {
                key: value for key, value in self.arguments.items() if key != QUEUE_TYPE_ARGUMENT
            }
        fields.update(update)
        if deep:
            fields = copy.deepcopy(fields)
        return type(self).model_validate(fields)

    @staticmethod
    def combined_args(optional_args: XArguments | None, queue_type: QueueType) -> XArguments:
        """Build the arguments map: queue type marker first, caller entries on top.

        Args:
            optional_args: Caller-supplied arguments, never mutated.
            queue_type: Queue type to record under x-queue-type.

        Returns:
            A new map. If optional_args also defines x-queue-type, its value wins.
        """
        result: XArguments = {QUEUE_TYPE_ARGUMENT: queue_type.value}
        if optional_args:
            result.update(optional_args)
        return result

    @classmethod
    def new(
        cls,
        name: str,
        queue_type: QueueType,
        durable: bool,
        auto_delete: bool,
        optional_args: XArguments | None = None,
    ) -> QueueParams:
        """Declare a non-exclusive queue of any type."""
        return cls(
            name=name,
            queue_type=queue_type,
            durable=durable,
            auto_delete=auto_delete,
            exclusive=False,
            arguments=optional_args,
        )

    @classmethod
    def new_quorum_queue(cls, name: str, optional_args: XArguments | None = None) -> QueueParams:
        """Declare a quorum queue (always durable)."""
        return cls.new(name, QueueType.QUORUM, True, False, optional_args)

    @classmethod
    def new_stream(cls, name: str, optional_args: XArguments | None = None) -> QueueParams:
        """Declare a stream (always durable)."""
        return cls.new(name, QueueType.STREAM, True, False, optional_args)

    @classmethod
    def new_durable_classic_queue(
        cls, name: str, optional_args: XArguments | None = None
    ) -> QueueParams:
        """Declare a durable classic queue."""
        return cls.new(name, QueueType.CLASSIC, True, False, optional_args)


class ExchangeParams(ParamsModel):
    """Exchange properties used at exchange declaration time.

    The named constructors are shorthands for ``new``. ``new_durable`` takes
    any type, including plugin-provided ones.

    Attributes:
        name: Exchange name.
        exchange_type: Serialized under the "type" key. Plugin-provided
            types are sent exactly as given.
        durable: Should the exchange survive a node restart?
        auto_delete: Should the exchange be deleted when its last binding
            is removed?
        arguments: Optional exchange arguments, sent as given.
    """

    name: str
    exchange_type: WireExchangeType = Field(alias="type")
    durable: bool = True
    auto_delete: bool = False
    arguments: XArguments | None = None

    @classmethod
    def new(
        cls,
        name: str,
        exchange_type: AnyExchangeType,
        durable: bool,
        auto_delete: bool,
        optional_args: XArguments | None = None,
    ) -> ExchangeParams:
        return cls(
            name=name,
            exchange_type=exchange_type,
            durable=durable,
            auto_delete=auto_delete,
            arguments=optional_args,
        )

    @classmethod
    def new_durable(
        cls, name: str, exchange_type: AnyExchangeType, optional_args: XArguments | None = None
    ) -> ExchangeParams:
        return cls.new(name, exchange_type, True, False, optional_args)

    @classmethod
    def fanout(
        cls, name: str, durable: bool, auto_delete: bool, optional_args: XArguments | None = None
    ) -> ExchangeParams:
        return cls.new(name, ExchangeType.FANOUT, durable, auto_delete, optional_args)

    @classmethod
    def durable_fanout(cls, name: str, optional_args: XArguments | None = None) -> ExchangeParams:
        return cls.new(name, ExchangeType.FANOUT, True, False, optional_args)

    @classmethod
    def topic(
        cls, name: str, durable: bool, auto_delete: bool, optional_args: XArguments | None = None
    ) -> ExchangeParams:
        return cls.new(name, ExchangeType.TOPIC, durable, auto_delete, optional_args)

    @classmethod
    def durable_topic(cls, name: str, optional_args: XArguments | None = None) -> ExchangeParams:
        return cls.new(name, ExchangeType.TOPIC, True, False, optional_args)

    @classmethod
    def direct(
        cls, name: str, durable: bool, auto_delete: bool, optional_args: XArguments | None = None
    ) -> ExchangeParams:
        return cls.new(name, ExchangeType.DIRECT, durable, auto_delete, optional_args)

    @classmethod
    def durable_direct(cls, name: str, optional_args: XArguments | None = None) -> ExchangeParams:
        return cls.new(name, ExchangeType.DIRECT, True, False, optional_args)

    @classmethod
    def headers(
        cls, name: str, durable: bool, auto_delete: bool, optional_args: XArguments | None = None
    ) -> ExchangeParams:
        return cls.new(name, ExchangeType.HEADERS, durable, auto_delete, optional_args)

    @classmethod
    def durable_headers(cls, name: str, optional_args: XArguments | None = None) -> ExchangeParams:
        return cls.new(name, ExchangeType.HEADERS, True, False, optional_args)
