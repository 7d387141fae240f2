"""Management API vocabulary.

Open enumerations (unknown values are kept verbatim):
    protocol.py       - SupportedProtocol / UnknownProtocol
    exchange_type.py  - ExchangeType / PluginExchangeType

Closed enumerations (unknown values fall back to a default):
    queue_type.py     - QueueType (CLASSIC)
    binding.py        - BindingDestinationType (QUEUE)
    policy_target.py  - PolicyTarget (QUEUES)
    limits.py         - VirtualHostLimitTarget, UserLimitTarget (MAX_CONNECTIONS)

Every value exposes its wire string as ``.value``. The ``Wire*`` aliases are
pydantic field types that decode with ``parse`` and dump the wire string.
"""

from rabbitmq_http_types.commons.base import (
    ClosedVocabulary,
    OpenValue,
    encode_vocabulary,
)
from rabbitmq_http_types.commons.binding import (
    BindingDestinationType,
    WireBindingDestinationType,
)
from rabbitmq_http_types.commons.exchange_type import (
    AnyExchangeType,
    ExchangeType,
    PluginExchangeType,
    WireExchangeType,
)
from rabbitmq_http_types.commons.limits import UserLimitTarget, VirtualHostLimitTarget
from rabbitmq_http_types.commons.policy_target import PolicyTarget, WirePolicyTarget
from rabbitmq_http_types.commons.protocol import (
    AnySupportedProtocol,
    SupportedProtocol,
    UnknownProtocol,
    WireProtocol,
)
from rabbitmq_http_types.commons.queue_type import QueueType, WireQueueType

__all__ = [
    # Shared
    "ClosedVocabulary",
    "OpenValue",
    "encode_vocabulary",
    # Protocols
    "AnySupportedProtocol",
    "SupportedProtocol",
    "UnknownProtocol",
    "WireProtocol",
    # Exchange types
    "AnyExchangeType",
    "ExchangeType",
    "PluginExchangeType",
    "WireExchangeType",
    # Queue types
    "QueueType",
    "WireQueueType",
    # Bindings
    "BindingDestinationType",
    "WireBindingDestinationType",
    # Policies
    "PolicyTarget",
    "WirePolicyTarget",
    # Limits
    "UserLimitTarget",
    "VirtualHostLimitTarget",
]
