"""Exchange types.

Most members are exchange types included with modern RabbitMQ distributions.
Types provided by 3rd party plugins decode to ``PluginExchangeType`` and keep
their exact name, so they can be echoed back unchanged on redeclaration.
"""

from __future__ import annotations

__all__ = [
    "AnyExchangeType",
    "ExchangeType",
    "PluginExchangeType",
    "WireExchangeType",
]

from enum import Enum

from rabbitmq_http_types import constants
from rabbitmq_http_types.commons.base import OpenValue, parse_open, wire_type


class ExchangeType(str, Enum):
    """Known exchange types.

    Attributes:
        CONSISTENT_HASHING: Consistent hashing exchange.
        MODULUS_HASH: Modulus hash, ships with the rabbitmq-sharding plugin.
        DELAYED_MESSAGE: Provided by the delayed message exchange plugin.
        MESSAGE_DEDUPLICATION: Provided by the message deduplication plugin.
    """

    FANOUT = constants.EXCHANGE_TYPE_FANOUT
    TOPIC = constants.EXCHANGE_TYPE_TOPIC
    DIRECT = constants.EXCHANGE_TYPE_DIRECT
    HEADERS = constants.EXCHANGE_TYPE_HEADERS
    CONSISTENT_HASHING = constants.EXCHANGE_TYPE_CONSISTENT_HASHING
    MODULUS_HASH = constants.EXCHANGE_TYPE_MODULUS_HASH
    RANDOM = constants.EXCHANGE_TYPE_RANDOM
    LOCAL_RANDOM = constants.EXCHANGE_TYPE_LOCAL_RANDOM
    JMS_TOPIC = constants.EXCHANGE_TYPE_JMS_TOPIC
    RECENT_HISTORY = constants.EXCHANGE_TYPE_RECENT_HISTORY
    DELAYED_MESSAGE = constants.EXCHANGE_TYPE_DELAYED_MESSAGE
    MESSAGE_DEDUPLICATION = constants.EXCHANGE_TYPE_MESSAGE_DEDUPLICATION

    @classmethod
    def parse(cls, value: object) -> AnyExchangeType:
        """Decode an exchange type; unknown ones become PluginExchangeType."""
        return parse_open(cls, PluginExchangeType, value)


class PluginExchangeType(OpenValue):
    """An exchange type provided by a plugin not known to this library."""


AnyExchangeType = ExchangeType | PluginExchangeType

WireExchangeType = wire_type(AnyExchangeType, ExchangeType.parse)
