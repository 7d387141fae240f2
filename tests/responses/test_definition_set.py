"""Tests for definitions export decoding and lossless re-encoding."""

import copy

import pytest

from rabbitmq_http_types.codec import decode, encode
from rabbitmq_http_types.commons import BindingDestinationType, ExchangeType, QueueType
from rabbitmq_http_types.responses import DefinitionSet


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def definitions_payload() -> dict:
    """A small export: one user, vhost, classic queue, fanout exchange and binding."""
    return {
        "rabbitmq_version": "4.0.5",
        "rabbit_version": "4.0.5",
        "product_name": "RabbitMQ",
        "product_version": "4.0.5",
        "users": [
            {
                "name": "guest",
                "password_hash": "bDvN0cNq5ZexCLTA5Qd2MQ6xUVxt0lsRUnvbUKxKtfWOmBW0",
                "hashing_algorithm": "rabbit_password_hashing_sha256",
                "tags": ["administrator"],
                "limits": {},
            }
        ],
        "vhosts": [
            {
                "name": "/",
                "description": "Default virtual host",
                "tags": [],
                "metadata": {"description": "Default virtual host", "tags": []},
            }
        ],
        "permissions": [
            {"user": "guest", "vhost": "/", "configure": ".*", "write": ".*", "read": ".*"}
        ],
        "topic_permissions": [],
        "parameters": [],
        "global_parameters": [{"name": "cluster_name", "value": "rabbit@host1"}],
        "policies": [],
        "queues": [
            {
                "name": "orders",
                "vhost": "/",
                "durable": True,
                "auto_delete": False,
                "arguments": {"x-queue-type": "classic"},
            }
        ],
        "exchanges": [
            {
                "name": "events",
                "vhost": "/",
                "type": "fanout",
                "durable": True,
                "auto_delete": False,
                "internal": False,
                "arguments": {},
            }
        ],
        "bindings": [
            {
                "source": "events",
                "vhost": "/",
                "destination": "orders",
                "destination_type": "queue",
                "routing_key": "",
                "arguments": {},
            }
        ],
    }


# ============================================================================
# Tests: Decoding
# ============================================================================


class TestDefinitionSetDecoding:
    """Decoded content."""

    def test_typed_records(self, definitions_payload):
        # Act
        definitions = decode(DefinitionSet, definitions_payload)

        # Assert
        assert definitions.server_version == "4.0.5"
        assert definitions.version == "4.0.5"
        assert definitions.users[0].tags == ["administrator"]
        assert definitions.virtual_hosts[0].name == "/"
        assert definitions.queues[0].durable is True
        assert definitions.exchanges[0].exchange_type is ExchangeType.FANOUT
        assert definitions.bindings[0].destination_type is BindingDestinationType.QUEUE
        assert definitions.global_parameters[0].value == "rabbit@host1"

    def test_missing_sections_are_empty(self):
        # Act
        definitions = decode(DefinitionSet, {"rabbit_version": "3.8.0"})

        # Assert
        assert definitions.users == []
        assert definitions.bindings == []
        assert definitions.version == "3.8.0"

    def test_summary(self, definitions_payload):
        summary = decode(DefinitionSet, definitions_payload).summary()

        assert summary["queues"] == 1
        assert summary["vhosts"] == 1
        assert summary["policies"] == 0


# ============================================================================
# Tests: Round trip
# ============================================================================


class TestDefinitionSetRoundTrip:
    """decode then encode yields the original payload."""

    def test_round_trip_is_lossless(self, definitions_payload):
        # Arrange
        original = copy.deepcopy(definitions_payload)

        # Act
        encoded = encode(decode(DefinitionSet, definitions_payload))

        # Assert
        assert encoded == original

    def test_unknown_keys_survive(self, definitions_payload):
        # Arrange
        definitions_payload["queues"][0]["x-future-field"] = {"a": 1}
        definitions_payload["future_section"] = [1, 2, 3]

        # Act
        encoded = encode(decode(DefinitionSet, definitions_payload))

        # Assert
        assert encoded["queues"][0]["x-future-field"] == {"a": 1}
        assert encoded["future_section"] == [1, 2, 3]

    def test_legacy_string_tags_are_reencoded_as_list(self, definitions_payload):
        definitions_payload["users"][0]["tags"] = "administrator"

        encoded = encode(decode(DefinitionSet, definitions_payload))

        assert encoded["users"][0]["tags"] == ["administrator"]

    def test_queue_type_argument_is_preserved(self, definitions_payload):
        definitions_payload["queues"][0]["arguments"] = {"x-queue-type": "quorum"}

        definitions = decode(DefinitionSet, definitions_payload)

        assert QueueType.parse(definitions.queues[0].arguments["x-queue-type"]) is QueueType.QUORUM
