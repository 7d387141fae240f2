"""Protocol identifiers used by listeners and connections.

Plugins can register listeners for protocols not listed here, so this is an
open enumeration: unknown identifiers decode to ``UnknownProtocol``.
"""

from __future__ import annotations

__all__ = [
    "AnySupportedProtocol",
    "SupportedProtocol",
    "UnknownProtocol",
    "WireProtocol",
]

from enum import Enum

from rabbitmq_http_types import constants
from rabbitmq_http_types.commons.base import OpenValue, parse_open, wire_type


class SupportedProtocol(str, Enum):
    """Protocols shipped with modern RabbitMQ distributions.

    Attributes:
        AMQP: AMQP 1.0 and AMQP 0-9-1 (they share a listener).
        AMQP_WITH_TLS: AMQP 1.0 and AMQP 0-9-1 with TLS enabled.
        STREAM: The RabbitMQ Stream protocol.
        STREAM_WITH_TLS: The RabbitMQ Stream protocol with TLS enabled.
    """

    CLUSTERING = constants.PROTOCOL_CLUSTERING
    AMQP = constants.PROTOCOL_AMQP
    AMQP_WITH_TLS = constants.PROTOCOL_AMQP_WITH_TLS
    STREAM = constants.PROTOCOL_STREAM
    STREAM_WITH_TLS = constants.PROTOCOL_STREAM_WITH_TLS
    MQTT = constants.PROTOCOL_MQTT
    MQTT_WITH_TLS = constants.PROTOCOL_MQTT_WITH_TLS
    STOMP = constants.PROTOCOL_STOMP
    STOMP_WITH_TLS = constants.PROTOCOL_STOMP_WITH_TLS
    MQTT_OVER_WEBSOCKETS = constants.PROTOCOL_MQTT_OVER_WEBSOCKETS
    MQTT_OVER_WEBSOCKETS_WITH_TLS = constants.PROTOCOL_MQTT_OVER_WEBSOCKETS_WITH_TLS
    STOMP_OVER_WEBSOCKETS = constants.PROTOCOL_STOMP_OVER_WEBSOCKETS
    STOMP_OVER_WEBSOCKETS_WITH_TLS = constants.PROTOCOL_STOMP_OVER_WEBSOCKETS_WITH_TLS
    PROMETHEUS = constants.PROTOCOL_PROMETHEUS
    PROMETHEUS_WITH_TLS = constants.PROTOCOL_PROMETHEUS_WITH_TLS
    HTTP = constants.PROTOCOL_HTTP
    HTTP_WITH_TLS = constants.PROTOCOL_HTTP_WITH_TLS

    @classmethod
    def parse(cls, value: object) -> AnySupportedProtocol:
        """Decode a protocol identifier; unknown ones become UnknownProtocol."""
        return parse_open(cls, UnknownProtocol, value)

    @property
    def uses_tls(self) -> bool:
        """Whether this listener protocol is TLS-enabled."""
        return self.value in _TLS_PROTOCOLS


class UnknownProtocol(OpenValue):
    """A protocol identifier outside SupportedProtocol, e.g. from a plugin."""


_TLS_PROTOCOLS: frozenset[str] = frozenset(
    {
        constants.PROTOCOL_AMQP_WITH_TLS,
        constants.PROTOCOL_STREAM_WITH_TLS,
        constants.PROTOCOL_MQTT_WITH_TLS,
        constants.PROTOCOL_STOMP_WITH_TLS,
        constants.PROTOCOL_MQTT_OVER_WEBSOCKETS_WITH_TLS,
        constants.PROTOCOL_STOMP_OVER_WEBSOCKETS_WITH_TLS,
        constants.PROTOCOL_PROMETHEUS_WITH_TLS,
        constants.PROTOCOL_HTTP_WITH_TLS,
    }
)

AnySupportedProtocol = SupportedProtocol | UnknownProtocol

WireProtocol = wire_type(AnySupportedProtocol, SupportedProtocol.parse)
