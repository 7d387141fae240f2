"""Immutable snapshots decoded from management API responses.

Decoding tolerates shape drift between server versions: unknown keys are
ignored, fields that older servers omit decode to None or zero, and a few
legacy shapes (``[]`` for an empty map, numeric strings, comma-separated
tags) are normalized.

Structure:
    base.py         - FrozenModel, DefinitionRecord
    validators.py   - tolerant field types (MapOrEmpty, NumberFromString, TagList)
    vhosts.py       - VirtualHost, VirtualHostLimits, UserLimits
    access.py       - User, Permissions, TopicPermissions
    connections.py  - Connection, Channel, Consumer and their details
    queues.py       - QueueInfo, QueueDefinition
    exchanges.py    - ExchangeInfo, BindingInfo
    parameters.py   - RuntimeParameter, GlobalRuntimeParameter, Policy
    cluster.py      - ClusterNode, Overview, Listener
    health.py       - HealthCheckFailureDetails
    messages.py     - GetMessage, MessageList, MessageRouted
    definitions.py  - DefinitionSet
"""

from rabbitmq_http_types.responses.access import Permissions, TopicPermissions, User
from rabbitmq_http_types.responses.base import DefinitionRecord, FrozenModel
from rabbitmq_http_types.responses.cluster import (
    ChurnRates,
    ClusterIdentity,
    ClusterNode,
    Listener,
    ObjectTotals,
    Overview,
    QueueTotals,
)
from rabbitmq_http_types.responses.connections import (
    Channel,
    ChannelDetails,
    ClientCapabilities,
    ClientProperties,
    Connection,
    ConnectionDetails,
    Consumer,
    NameAndVirtualHost,
    UserConnection,
)
from rabbitmq_http_types.responses.definitions import DefinitionSet
from rabbitmq_http_types.responses.exchanges import (
    BindingInfo,
    ExchangeDefinition,
    ExchangeInfo,
)
from rabbitmq_http_types.responses.health import (
    ClusterAlarmCheckDetails,
    HealthCheckFailureDetails,
    QuorumCriticalityCheckDetails,
    QuorumEndangeredQueue,
    ResourceAlarm,
)
from rabbitmq_http_types.responses.messages import (
    GetMessage,
    MessageList,
    MessageProperties,
    MessageRouted,
)
from rabbitmq_http_types.responses.parameters import (
    GlobalRuntimeParameter,
    Policy,
    RuntimeParameter,
)
from rabbitmq_http_types.responses.queues import QueueDefinition, QueueInfo
from rabbitmq_http_types.responses.vhosts import (
    UserLimits,
    VirtualHost,
    VirtualHostLimits,
    VirtualHostMetadata,
)

__all__ = [
    # Bases
    "DefinitionRecord",
    "FrozenModel",
    # Virtual hosts and limits
    "UserLimits",
    "VirtualHost",
    "VirtualHostLimits",
    "VirtualHostMetadata",
    # Users and permissions
    "Permissions",
    "TopicPermissions",
    "User",
    # Connections
    "Channel",
    "ChannelDetails",
    "ClientCapabilities",
    "ClientProperties",
    "Connection",
    "ConnectionDetails",
    "Consumer",
    "NameAndVirtualHost",
    "UserConnection",
    # Queues, exchanges, bindings
    "BindingInfo",
    "ExchangeDefinition",
    "ExchangeInfo",
    "QueueDefinition",
    "QueueInfo",
    # Parameters and policies
    "GlobalRuntimeParameter",
    "Policy",
    "RuntimeParameter",
    # Cluster
    "ChurnRates",
    "ClusterIdentity",
    "ClusterNode",
    "Listener",
    "ObjectTotals",
    "Overview",
    "QueueTotals",
    # Health checks
    "ClusterAlarmCheckDetails",
    "HealthCheckFailureDetails",
    "QuorumCriticalityCheckDetails",
    "QuorumEndangeredQueue",
    "ResourceAlarm",
    # Messages
    "GetMessage",
    "MessageList",
    "MessageProperties",
    "MessageRouted",
    # Definitions
    "DefinitionSet",
]
