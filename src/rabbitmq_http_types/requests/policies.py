"""Policy and runtime parameter definitions."""

from __future__ import annotations

__all__ = [
    "PolicyDefinition",
    "PolicyParams",
    "RuntimeParameterDefinition",
    "RuntimeParameterValue",
]

from typing import Any

from pydantic import Field

from rabbitmq_http_types.commons import PolicyTarget, WirePolicyTarget
from rabbitmq_http_types.requests.base import ParamsModel

PolicyDefinition = dict[str, Any]
RuntimeParameterValue = dict[str, Any]


class RuntimeParameterDefinition(ParamsModel):
    """A runtime parameter, e.g. a shovel or federation upstream definition."""

    name: str
    vhost: str
    component: str
    value: RuntimeParameterValue


class PolicyParams(ParamsModel):
    """A policy to be declared.

    Attributes:
        vhost: Virtual host the policy belongs to.
        name: Policy name.
        pattern: Regular expression matched against entity names.
        apply_to: Entity kinds the policy applies to, sent as "apply-to".
        priority: Higher priority policies win when several match.
        definition: Policy keys and values (e.g. {"max-length": 1000}).
    """

    vhost: str
    name: str
    pattern: str
    apply_to: WirePolicyTarget = Field(default=PolicyTarget.QUEUES, alias="apply-to")
    priority: int = 0
    definition: PolicyDefinition | None = None
