"""Client connections, channels and consumers.

Wire names that read poorly in Python are renamed through aliases
(e.g. ``user`` -> ``username``, ``peer_host`` -> ``client_hostname``).
"""

from __future__ import annotations

__all__ = [
    "Channel",
    "ChannelDetails",
    "ClientCapabilities",
    "ClientProperties",
    "Connection",
    "ConnectionDetails",
    "Consumer",
    "NameAndVirtualHost",
    "UserConnection",
]

from pydantic import Field

from rabbitmq_http_types.constants import UNDEFINED_FIELD_VALUE
from rabbitmq_http_types.responses.base import FrozenModel
from rabbitmq_http_types.responses.validators import XArguments


# =============================================================================
# Connections
# =============================================================================


class ClientCapabilities(FrozenModel):
    """Capabilities a client advertised when connecting.

    Clients only list what they support; anything missing is False.
    """

    authentication_failure_close: bool = False
    basic_nack: bool = Field(default=False, alias="basic.nack")
    connection_blocked: bool = Field(default=False, alias="connection.blocked")
    consumer_cancel_notify: bool = False
    exchange_to_exchange_bindings: bool = Field(default=False, alias="exchange_exchange_bindings")
    publisher_confirms: bool = False


class ClientProperties(FrozenModel):
    """Client-provided properties (metadata and capabilities)."""

    connection_name: str = ""
    platform: str = ""
    product: str = ""
    version: str = ""
    capabilities: ClientCapabilities | None = None


class Connection(FrozenModel):
    """A client connection.

    Attributes:
        name: Connection name. Use it to close this connection.
        node: To what node the client is connected.
        state: Connection state, "?" when not reported.
        protocol: What protocol the connection uses (e.g. "AMQP 0-9-1").
        username: The name of the authenticated user.
        connected_at: When was this connection opened (a timestamp).
        server_hostname: The hostname used to connect.
        server_port: The port used to connect.
        client_hostname: Client hostname.
        client_port: Ephemeral client port.
        channel_max: Maximum number of channels that can be opened.
        channel_count: How many channels are opened on this connection.
        client_properties: Client-provided properties.
    """

    name: str
    node: str
    state: str = UNDEFINED_FIELD_VALUE
    protocol: str
    username: str = Field(alias="user")
    connected_at: int
    server_hostname: str = Field(alias="host")
    server_port: int = Field(alias="port")
    client_hostname: str = Field(alias="peer_host")
    client_port: int = Field(alias="peer_port")
    channel_max: int
    channel_count: int = Field(default=0, alias="channels")
    client_properties: ClientProperties = Field(default_factory=ClientProperties)


class UserConnection(FrozenModel):
    """A connection as listed for a user."""

    name: str
    node: str
    username: str = Field(alias="user")
    vhost: str


# =============================================================================
# Channels
# =============================================================================


class ConnectionDetails(FrozenModel):
    """The connection a channel belongs to."""

    name: str
    client_hostname: str = Field(alias="peer_host")
    client_port: int = Field(alias="peer_port")


class Channel(FrozenModel):
    """A channel on a client connection."""

    id: int = Field(alias="number")
    name: str
    connection_details: ConnectionDetails
    vhost: str
    state: str
    consumer_count: int
    has_publisher_confirms_enabled: bool = Field(alias="confirm")
    prefetch_count: int
    messages_unacknowledged: int
    messages_unconfirmed: int


class ChannelDetails(FrozenModel):
    """The channel a consumer is registered on."""

    id: int = Field(alias="number")
    name: str
    connection_name: str
    node: str
    client_hostname: str = Field(alias="peer_host")
    client_port: int = Field(alias="peer_port")
    username: str = Field(alias="user")


# =============================================================================
# Consumers
# =============================================================================


class NameAndVirtualHost(FrozenModel):
    name: str
    vhost: str


class Consumer(FrozenModel):
    """A consumer.

    Attributes:
        manual_ack: True when deliveries must be acknowledged by the client.
        delivery_ack_timeout: Milliseconds a delivery may stay unacknowledged.
        queue: The queue consumed from.
    """

    consumer_tag: str
    active: bool
    manual_ack: bool = Field(alias="ack_required")
    prefetch_count: int
    exclusive: bool
    arguments: XArguments
    delivery_ack_timeout: int = Field(alias="consumer_timeout")
    queue: NameAndVirtualHost
    channel_details: ChannelDetails
