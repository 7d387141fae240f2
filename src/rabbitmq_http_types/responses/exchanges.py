"""Exchanges and bindings."""

from __future__ import annotations

__all__ = [
    "BindingInfo",
    "ExchangeDefinition",
    "ExchangeInfo",
]

from pydantic import Field

from rabbitmq_http_types.commons import WireBindingDestinationType, WireExchangeType
from rabbitmq_http_types.responses.base import DefinitionRecord
from rabbitmq_http_types.responses.validators import XArguments


class ExchangeInfo(DefinitionRecord):
    """An exchange.

    ``exchange_type`` keeps plugin-provided types verbatim, so the record
    can be used to redeclare the exchange unchanged.
    """

    name: str
    vhost: str
    exchange_type: WireExchangeType = Field(alias="type")
    durable: bool
    auto_delete: bool
    internal: bool = False
    arguments: XArguments = Field(default_factory=dict)


ExchangeDefinition = ExchangeInfo


class BindingInfo(DefinitionRecord):
    """A binding between an exchange and a queue or another exchange.

    Attributes:
        properties_key: Server-computed key identifying the binding in
            delete requests. Not present in definitions exports.
    """

    vhost: str
    source: str
    destination: str
    destination_type: WireBindingDestinationType
    routing_key: str
    arguments: XArguments = Field(default_factory=dict)
    properties_key: str | None = None
