"""Library-wide constants for rabbitmq-http-types.

Canonical wire strings for the management API vocabulary and the defaults
used when decoding server payloads. There is no runtime configuration file;
everything a caller could tune lives here.
"""

__all__ = [
    # Library identity
    "APP_NAME",
    # Queue declaration
    "QUEUE_TYPE_ARGUMENT",
    "DEFAULT_QUEUE_TYPE_NAME",
    # Decoding defaults
    "UNDEFINED_FIELD_VALUE",
    # Definitions files
    "DEFINITIONS_FILE_ENCODING",
    "DEFINITIONS_JSON_INDENT",
    # Protocols
    "PROTOCOL_CLUSTERING",
    "PROTOCOL_AMQP",
    "PROTOCOL_AMQP_WITH_TLS",
    "PROTOCOL_STREAM",
    "PROTOCOL_STREAM_WITH_TLS",
    "PROTOCOL_MQTT",
    "PROTOCOL_MQTT_WITH_TLS",
    "PROTOCOL_MQTT_OVER_WEBSOCKETS",
    "PROTOCOL_MQTT_OVER_WEBSOCKETS_WITH_TLS",
    "PROTOCOL_STOMP",
    "PROTOCOL_STOMP_WITH_TLS",
    "PROTOCOL_STOMP_OVER_WEBSOCKETS",
    "PROTOCOL_STOMP_OVER_WEBSOCKETS_WITH_TLS",
    "PROTOCOL_PROMETHEUS",
    "PROTOCOL_PROMETHEUS_WITH_TLS",
    "PROTOCOL_HTTP",
    "PROTOCOL_HTTP_WITH_TLS",
    # Exchange types
    "EXCHANGE_TYPE_FANOUT",
    "EXCHANGE_TYPE_TOPIC",
    "EXCHANGE_TYPE_DIRECT",
    "EXCHANGE_TYPE_HEADERS",
    "EXCHANGE_TYPE_CONSISTENT_HASHING",
    "EXCHANGE_TYPE_MODULUS_HASH",
    "EXCHANGE_TYPE_RANDOM",
    "EXCHANGE_TYPE_LOCAL_RANDOM",
    "EXCHANGE_TYPE_JMS_TOPIC",
    "EXCHANGE_TYPE_RECENT_HISTORY",
    "EXCHANGE_TYPE_DELAYED_MESSAGE",
    "EXCHANGE_TYPE_MESSAGE_DEDUPLICATION",
]

# ============================================================================
# Library Identity
# ============================================================================

# Root logger name; module loggers are f"{APP_NAME}.<area>"
APP_NAME: str = "rabbitmq-http-types"

# ============================================================================
# Queue Declaration
# ============================================================================

# Optional queue argument that selects the queue type at declaration time.
# QueueParams always carries it, derived from its typed queue_type field.
QUEUE_TYPE_ARGUMENT: str = "x-queue-type"

# Queue type assumed when a server reports one we do not know
DEFAULT_QUEUE_TYPE_NAME: str = "classic"

# ============================================================================
# Decoding Defaults
# ============================================================================

# Placeholder for string fields some servers omit (connection state, queue node)
UNDEFINED_FIELD_VALUE: str = "?"

# ============================================================================
# Definitions Files (backup/restore)
# ============================================================================

DEFINITIONS_FILE_ENCODING: str = "utf-8"
DEFINITIONS_JSON_INDENT: int = 2

# ============================================================================
# Protocols (listener and connection protocol identifiers)
# ============================================================================

PROTOCOL_CLUSTERING: str = "clustering"

# AMQP 1.0 and AMQP 0-9-1 share a listener
PROTOCOL_AMQP: str = "amqp"
PROTOCOL_AMQP_WITH_TLS: str = "amqps"

PROTOCOL_STREAM: str = "stream"
PROTOCOL_STREAM_WITH_TLS: str = "stream/ssl"

PROTOCOL_MQTT: str = "mqtt"
PROTOCOL_MQTT_WITH_TLS: str = "mqtt/ssl"
PROTOCOL_MQTT_OVER_WEBSOCKETS: str = "http/web-mqtt"
PROTOCOL_MQTT_OVER_WEBSOCKETS_WITH_TLS: str = "https/web-mqtt"

PROTOCOL_STOMP: str = "stomp"
PROTOCOL_STOMP_WITH_TLS: str = "stomp/ssl"
PROTOCOL_STOMP_OVER_WEBSOCKETS: str = "http/web-stomp"
PROTOCOL_STOMP_OVER_WEBSOCKETS_WITH_TLS: str = "https/web-stomp"

PROTOCOL_PROMETHEUS: str = "http/prometheus"
PROTOCOL_PROMETHEUS_WITH_TLS: str = "https/prometheus"

PROTOCOL_HTTP: str = "http"
PROTOCOL_HTTP_WITH_TLS: str = "https"

# ============================================================================
# Exchange Types
# ============================================================================

EXCHANGE_TYPE_FANOUT: str = "fanout"
EXCHANGE_TYPE_TOPIC: str = "topic"
EXCHANGE_TYPE_DIRECT: str = "direct"
EXCHANGE_TYPE_HEADERS: str = "headers"
EXCHANGE_TYPE_CONSISTENT_HASHING: str = "x-consistent-hash"
# Ships with the rabbitmq-sharding plugin
EXCHANGE_TYPE_MODULUS_HASH: str = "x-modulus-hash"
EXCHANGE_TYPE_RANDOM: str = "x-random"
EXCHANGE_TYPE_LOCAL_RANDOM: str = "x-local-random"
EXCHANGE_TYPE_JMS_TOPIC: str = "x-jms-topic"
EXCHANGE_TYPE_RECENT_HISTORY: str = "x-recent-history"
EXCHANGE_TYPE_DELAYED_MESSAGE: str = "x-delayed-message"
EXCHANGE_TYPE_MESSAGE_DEDUPLICATION: str = "x-message-deduplication"
