"""Tests for the management API vocabulary.

Covers both enumeration flavours:
1. Open enumerations keep unknown strings verbatim and echo them back
2. Closed enumerations fall back to their documented default
3. Wire field types decode with parse and dump the canonical string
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import BaseModel, ValidationError

from rabbitmq_http_types.commons import (
    BindingDestinationType,
    ExchangeType,
    PluginExchangeType,
    PolicyTarget,
    QueueType,
    SupportedProtocol,
    UnknownProtocol,
    UserLimitTarget,
    VirtualHostLimitTarget,
    WireExchangeType,
    WireProtocol,
    WireQueueType,
    encode_vocabulary,
)


# ============================================================================
# Fixtures
# ============================================================================


class ListenerLike(BaseModel):
    """Minimal model using the wire field types."""

    protocol: WireProtocol
    exchange_type: WireExchangeType
    queue_type: WireQueueType


# ============================================================================
# Tests: Open enumerations
# ============================================================================


class TestSupportedProtocol:
    """Tests for SupportedProtocol decoding and encoding."""

    @pytest.mark.parametrize(
        ("wire", "expected"),
        [
            ("clustering", SupportedProtocol.CLUSTERING),
            ("amqp", SupportedProtocol.AMQP),
            ("amqps", SupportedProtocol.AMQP_WITH_TLS),
            ("stream", SupportedProtocol.STREAM),
            ("stream/ssl", SupportedProtocol.STREAM_WITH_TLS),
            ("mqtt", SupportedProtocol.MQTT),
            ("mqtt/ssl", SupportedProtocol.MQTT_WITH_TLS),
            ("stomp", SupportedProtocol.STOMP),
            ("stomp/ssl", SupportedProtocol.STOMP_WITH_TLS),
            ("http/web-mqtt", SupportedProtocol.MQTT_OVER_WEBSOCKETS),
            ("https/web-mqtt", SupportedProtocol.MQTT_OVER_WEBSOCKETS_WITH_TLS),
            ("http/web-stomp", SupportedProtocol.STOMP_OVER_WEBSOCKETS),
            ("https/web-stomp", SupportedProtocol.STOMP_OVER_WEBSOCKETS_WITH_TLS),
            ("http/prometheus", SupportedProtocol.PROMETHEUS),
            ("https/prometheus", SupportedProtocol.PROMETHEUS_WITH_TLS),
            ("http", SupportedProtocol.HTTP),
            ("https", SupportedProtocol.HTTP_WITH_TLS),
        ],
    )
    def test_known_wire_strings_decode_and_encode_back(self, wire, expected):
        # Act
        decoded = SupportedProtocol.parse(wire)

        # Assert
        assert decoded is expected
        assert encode_vocabulary(decoded) == wire

    def test_stomp_over_websockets_is_symmetric(self):
        """Encoding STOMP over WebSockets yields the string it decodes from."""
        # Act
        encoded = SupportedProtocol.STOMP_OVER_WEBSOCKETS.value

        # Assert
        assert encoded == "http/web-stomp"
        assert SupportedProtocol.parse(encoded) is SupportedProtocol.STOMP_OVER_WEBSOCKETS

    def test_unknown_protocol_is_kept_verbatim(self):
        # Act
        decoded = SupportedProtocol.parse("Bogus/Proto ")

        # Assert
        assert decoded == UnknownProtocol("Bogus/Proto ")
        assert decoded.value == "Bogus/Proto "

    def test_lookup_is_case_sensitive(self):
        # Act
        decoded = SupportedProtocol.parse("AMQP")

        # Assert
        assert isinstance(decoded, UnknownProtocol)

    def test_non_string_is_rejected(self):
        with pytest.raises(ValueError):
            SupportedProtocol.parse(5672)

    @pytest.mark.parametrize(
        ("protocol", "uses_tls"),
        [
            (SupportedProtocol.AMQP, False),
            (SupportedProtocol.AMQP_WITH_TLS, True),
            (SupportedProtocol.STOMP_OVER_WEBSOCKETS_WITH_TLS, True),
            (SupportedProtocol.CLUSTERING, False),
        ],
        ids=["amqp", "amqps", "https-web-stomp", "clustering"],
    )
    def test_uses_tls(self, protocol, uses_tls):
        assert protocol.uses_tls is uses_tls


class TestExchangeType:
    """Tests for ExchangeType, including plugin-provided types."""

    @pytest.mark.parametrize(
        ("wire", "expected"),
        [
            ("fanout", ExchangeType.FANOUT),
            ("topic", ExchangeType.TOPIC),
            ("direct", ExchangeType.DIRECT),
            ("headers", ExchangeType.HEADERS),
            ("x-consistent-hash", ExchangeType.CONSISTENT_HASHING),
            ("x-modulus-hash", ExchangeType.MODULUS_HASH),
            ("x-random", ExchangeType.RANDOM),
            ("x-local-random", ExchangeType.LOCAL_RANDOM),
            ("x-jms-topic", ExchangeType.JMS_TOPIC),
            ("x-recent-history", ExchangeType.RECENT_HISTORY),
            ("x-delayed-message", ExchangeType.DELAYED_MESSAGE),
            ("x-message-deduplication", ExchangeType.MESSAGE_DEDUPLICATION),
        ],
    )
    def test_known_wire_strings(self, wire, expected):
        # Act
        decoded = ExchangeType.parse(wire)

        # Assert
        assert decoded is expected
        assert decoded.value == wire

    def test_plugin_type_round_trips(self):
        # Act
        decoded = ExchangeType.parse("x-custom-plugin")

        # Assert
        assert decoded == PluginExchangeType("x-custom-plugin")
        assert encode_vocabulary(decoded) == "x-custom-plugin"
        assert str(decoded) == "x-custom-plugin"

    def test_plugin_type_is_hashable_and_immutable(self):
        # Arrange
        plugin = PluginExchangeType("x-custom-plugin")

        # Act / Assert
        assert {plugin: 1}[PluginExchangeType("x-custom-plugin")] == 1
        with pytest.raises(AttributeError):
            plugin.value = "other"  # type: ignore[misc]

    def test_already_decoded_value_passes_through(self):
        plugin = PluginExchangeType("x-custom-plugin")

        assert ExchangeType.parse(plugin) is plugin
        assert ExchangeType.parse(ExchangeType.TOPIC) is ExchangeType.TOPIC


# ============================================================================
# Tests: Closed enumerations
# ============================================================================


class TestClosedVocabularies:
    """Closed enumerations decode unknown strings to their default."""

    @pytest.mark.parametrize(
        ("enum_class", "wire", "expected"),
        [
            (QueueType, "quorum", QueueType.QUORUM),
            (QueueType, "stream", QueueType.STREAM),
            (QueueType, "classic", QueueType.CLASSIC),
            (QueueType, "delayed", QueueType.CLASSIC),
            (BindingDestinationType, "exchange", BindingDestinationType.EXCHANGE),
            (BindingDestinationType, "topic", BindingDestinationType.QUEUE),
            (PolicyTarget, "classic_queues", PolicyTarget.CLASSIC_QUEUES),
            (PolicyTarget, "quorum_queues", PolicyTarget.QUORUM_QUEUES),
            (PolicyTarget, "everything", PolicyTarget.QUEUES),
            (VirtualHostLimitTarget, "max-queues", VirtualHostLimitTarget.MAX_QUEUES),
            (VirtualHostLimitTarget, "max-channels", VirtualHostLimitTarget.MAX_CONNECTIONS),
            (UserLimitTarget, "max-channels", UserLimitTarget.MAX_CHANNELS),
            (UserLimitTarget, "max-queues", UserLimitTarget.MAX_CONNECTIONS),
        ],
        ids=[
            "queue-quorum",
            "queue-stream",
            "queue-classic",
            "queue-unknown",
            "binding-exchange",
            "binding-unknown",
            "policy-classic-queues",
            "policy-quorum-queues",
            "policy-unknown",
            "vhost-limit-max-queues",
            "vhost-limit-unknown",
            "user-limit-max-channels",
            "user-limit-unknown",
        ],
    )
    def test_parse(self, enum_class, wire, expected):
        assert enum_class.parse(wire) is expected

    def test_unknown_value_is_logged_at_debug(self, caplog):
        # Act
        with caplog.at_level("DEBUG", logger="rabbitmq-http-types.commons"):
            QueueType.parse("delayed")

        # Assert
        assert "delayed" in caplog.text

    def test_non_string_is_rejected(self):
        with pytest.raises(ValueError):
            QueueType.parse(1)

    def test_replicated_queue_types(self):
        assert not QueueType.CLASSIC.is_replicated
        assert QueueType.QUORUM.is_replicated
        assert QueueType.STREAM.is_replicated

    def test_path_abbreviation(self):
        assert BindingDestinationType.QUEUE.path_abbreviation == "q"
        assert BindingDestinationType.EXCHANGE.path_abbreviation == "e"


# ============================================================================
# Tests: Wire field types
# ============================================================================


class TestWireFieldTypes:
    """Wire field types inside pydantic models."""

    def test_decodes_and_dumps_wire_strings(self):
        # Act
        model = ListenerLike.model_validate(
            {"protocol": "x-plugin-proto", "exchange_type": "fanout", "queue_type": "weird"}
        )

        # Assert
        assert model.protocol == UnknownProtocol("x-plugin-proto")
        assert model.exchange_type is ExchangeType.FANOUT
        assert model.queue_type is QueueType.CLASSIC
        assert model.model_dump(mode="json") == {
            "protocol": "x-plugin-proto",
            "exchange_type": "fanout",
            "queue_type": "classic",
        }

    def test_non_string_field_fails_validation(self):
        with pytest.raises(ValidationError) as exc_info:
            ListenerLike.model_validate(
                {"protocol": 1, "exchange_type": "fanout", "queue_type": "quorum"}
            )

        assert exc_info.value.errors()[0]["loc"] == ("protocol",)


# ============================================================================
# Property tests
# ============================================================================


@settings(max_examples=200)
@given(wire=st.text())
def test_open_protocol_encode_of_decode_is_identity(wire: str) -> None:
    """Any string survives a decode/encode cycle unchanged."""
    assert encode_vocabulary(SupportedProtocol.parse(wire)) == wire


@settings(max_examples=200)
@given(wire=st.text())
def test_open_exchange_type_encode_of_decode_is_identity(wire: str) -> None:
    assert encode_vocabulary(ExchangeType.parse(wire)) == wire


@given(member=st.sampled_from(list(ExchangeType)))
def test_known_exchange_types_decode_to_themselves(member: ExchangeType) -> None:
    assert ExchangeType.parse(member.value) is member


@given(wire=st.text())
def test_closed_queue_type_decode_is_total(wire: str) -> None:
    assert QueueType.parse(wire) in set(QueueType)
