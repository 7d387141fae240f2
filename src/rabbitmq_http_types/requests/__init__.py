"""Declaration parameters sent to the management API.

Every bundle is an immutable pydantic model whose ``to_payload()`` returns
the request body, ready to be JSON-encoded by the transport.

Structure:
    base.py      - ParamsModel, XArguments
    vhosts.py    - VirtualHostParams, EnforcedLimitParams
    access.py    - UserParams, PermissionParams, TopicPermissionParams
    queues.py    - QueueParams (x-queue-type injection), ExchangeParams
    bindings.py  - BindingParams
    policies.py  - PolicyParams, RuntimeParameterDefinition
"""

from rabbitmq_http_types.requests.access import (
    PermissionParams,
    TopicPermissionParams,
    UserParams,
)
from rabbitmq_http_types.requests.base import ParamsModel, XArguments
from rabbitmq_http_types.requests.bindings import BindingParams
from rabbitmq_http_types.requests.policies import (
    PolicyDefinition,
    PolicyParams,
    RuntimeParameterDefinition,
    RuntimeParameterValue,
)
from rabbitmq_http_types.requests.queues import ExchangeParams, QueueParams
from rabbitmq_http_types.requests.vhosts import EnforcedLimitParams, VirtualHostParams

__all__ = [
    "BindingParams",
    "EnforcedLimitParams",
    "ExchangeParams",
    "ParamsModel",
    "PermissionParams",
    "PolicyDefinition",
    "PolicyParams",
    "QueueParams",
    "RuntimeParameterDefinition",
    "RuntimeParameterValue",
    "TopicPermissionParams",
    "UserParams",
    "VirtualHostParams",
    "XArguments",
]
