"""Tests for exchange, binding, policy, virtual host and access parameters."""

import pytest

from rabbitmq_http_types.commons import (
    BindingDestinationType,
    ExchangeType,
    PluginExchangeType,
    PolicyTarget,
    QueueType,
    UserLimitTarget,
    VirtualHostLimitTarget,
)
from rabbitmq_http_types.requests import (
    BindingParams,
    EnforcedLimitParams,
    ExchangeParams,
    PermissionParams,
    PolicyParams,
    RuntimeParameterDefinition,
    UserParams,
    VirtualHostParams,
)


# ============================================================================
# Tests: Exchanges
# ============================================================================


class TestExchangeParams:
    """Exchange declarations serialize the type under "type"."""

    def test_durable_fanout_payload(self):
        # Act
        payload = ExchangeParams.durable_fanout("logs").to_payload()

        # Assert
        assert payload == {
            "name": "logs",
            "type": "fanout",
            "durable": True,
            "auto_delete": False,
        }

    def test_arguments_are_sent_as_given(self):
        # Act
        params = ExchangeParams.durable_topic("events", {"alternate-exchange": "unrouted"})

        # Assert
        assert params.arguments == {"alternate-exchange": "unrouted"}
        assert "x-queue-type" not in params.to_payload()["arguments"]

    @pytest.mark.parametrize(
        ("builder", "expected_type"),
        [
            (ExchangeParams.fanout, ExchangeType.FANOUT),
            (ExchangeParams.topic, ExchangeType.TOPIC),
            (ExchangeParams.direct, ExchangeType.DIRECT),
            (ExchangeParams.headers, ExchangeType.HEADERS),
        ],
        ids=["fanout", "topic", "direct", "headers"],
    )
    def test_typed_builders(self, builder, expected_type):
        # Act
        params = builder("x", False, True)

        # Assert
        assert params.exchange_type is expected_type
        assert params.durable is False
        assert params.auto_delete is True

    @pytest.mark.parametrize(
        ("builder", "expected_type"),
        [
            (ExchangeParams.durable_fanout, ExchangeType.FANOUT),
            (ExchangeParams.durable_topic, ExchangeType.TOPIC),
            (ExchangeParams.durable_direct, ExchangeType.DIRECT),
            (ExchangeParams.durable_headers, ExchangeType.HEADERS),
        ],
        ids=["fanout", "topic", "direct", "headers"],
    )
    def test_durable_builders(self, builder, expected_type):
        params = builder("x")

        assert params.exchange_type is expected_type
        assert params.durable is True
        assert params.auto_delete is False

    def test_plugin_type_is_sent_verbatim(self):
        # Act
        payload = ExchangeParams.new_durable(
            "delayed", PluginExchangeType("x-my-plugin")
        ).to_payload()

        # Assert
        assert payload["type"] == "x-my-plugin"

    def test_known_type_by_string(self):
        params = ExchangeParams(name="x", type="x-delayed-message")

        assert params.exchange_type is ExchangeType.DELAYED_MESSAGE


# ============================================================================
# Tests: Bindings
# ============================================================================


class TestBindingParams:
    """Bindings carry only routing data in the body."""

    def test_queue_binding_payload_and_path(self):
        # Act
        params = BindingParams.queue_binding("/", "amq.topic", "q1", routing_key="a.#")

        # Assert
        assert params.to_payload() == {"routing_key": "a.#"}
        assert params.path_segments == ("/", "e", "amq.topic", "q", "q1")

    def test_exchange_binding_path(self):
        # Act
        params = BindingParams.exchange_binding(
            "vh1", "src", "dst", arguments={"x-match": "all"}
        )

        # Assert
        assert params.destination_type is BindingDestinationType.EXCHANGE
        assert params.path_segments == ("vh1", "e", "src", "e", "dst")
        assert params.to_payload() == {"routing_key": "", "arguments": {"x-match": "all"}}


# ============================================================================
# Tests: Policies and runtime parameters
# ============================================================================


class TestPolicyParams:
    """Policies serialize the target under "apply-to"."""

    def test_payload_uses_apply_to_key(self):
        # Act
        payload = PolicyParams(
            vhost="/",
            name="cap",
            pattern="^cq\\.",
            apply_to=PolicyTarget.CLASSIC_QUEUES,
            priority=5,
            definition={"max-length": 1000},
        ).to_payload()

        # Assert
        assert payload == {
            "vhost": "/",
            "name": "cap",
            "pattern": "^cq\\.",
            "apply-to": "classic_queues",
            "priority": 5,
            "definition": {"max-length": 1000},
        }

    def test_missing_definition_is_omitted(self):
        payload = PolicyParams(vhost="/", name="p", pattern=".*").to_payload()

        assert "definition" not in payload
        assert payload["apply-to"] == "queues"

    def test_runtime_parameter_payload(self):
        params = RuntimeParameterDefinition(
            name="up1",
            vhost="/",
            component="federation-upstream",
            value={"uri": "amqp://remote"},
        )

        assert params.to_payload()["value"] == {"uri": "amqp://remote"}


# ============================================================================
# Tests: Virtual hosts, users, limits, permissions
# ============================================================================


class TestVirtualHostParams:
    """Virtual host parameters omit unset optional fields."""

    def test_named_has_only_name_and_tracing(self):
        assert VirtualHostParams.named("vh1").to_payload() == {"name": "vh1", "tracing": False}

    def test_full_payload(self):
        # Act
        payload = VirtualHostParams(
            name="vh2",
            description="staging",
            tags=["qa", "eu"],
            default_queue_type=QueueType.QUORUM,
            tracing=True,
        ).to_payload()

        # Assert
        assert payload == {
            "name": "vh2",
            "description": "staging",
            "tags": ["qa", "eu"],
            "default_queue_type": "quorum",
            "tracing": True,
        }


class TestEnforcedLimitParams:
    """Limits keep the target passed in."""

    def test_virtual_host_limit(self):
        params = EnforcedLimitParams.new(VirtualHostLimitTarget.MAX_QUEUES, 100)

        assert params.to_payload() == {"kind": "max-queues", "value": 100}

    def test_user_limit_parametrized_decodes_string(self):
        params = EnforcedLimitParams[UserLimitTarget](kind="max-channels", value=-1)

        assert params.kind is UserLimitTarget.MAX_CHANNELS
        assert params.to_payload() == {"kind": "max-channels", "value": -1}

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            ("max-channels", UserLimitTarget.MAX_CHANNELS),
            ("max-queues", VirtualHostLimitTarget.MAX_QUEUES),
            ("max-connections", VirtualHostLimitTarget.MAX_CONNECTIONS),
        ],
        ids=["user-max-channels", "vhost-max-queues", "max-connections"],
    )
    def test_unparametrized_matches_known_names_exactly(self, kind, expected):
        # Act
        params = EnforcedLimitParams(kind=kind, value=5)

        # Assert
        assert params.kind is expected
        assert params.to_payload() == {"kind": kind, "value": 5}

    def test_user_member_is_kept(self):
        params = EnforcedLimitParams.new(UserLimitTarget.MAX_CHANNELS, 5)

        assert params.kind is UserLimitTarget.MAX_CHANNELS


class TestAccessParams:
    """Users and permissions."""

    def test_user_payload(self):
        params = UserParams(name="alice", password_hash="abc", tags="administrator")

        assert params.to_payload() == {
            "name": "alice",
            "password_hash": "abc",
            "tags": "administrator",
        }

    def test_full_access(self):
        params = PermissionParams.full_access("alice", "/")

        assert (params.configure, params.read, params.write) == (".*", ".*", ".*")
