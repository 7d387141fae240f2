"""Runtime parameters and policies."""

from __future__ import annotations

__all__ = [
    "GlobalRuntimeParameter",
    "Policy",
    "PolicyDefinition",
    "RuntimeParameter",
]

from typing import Any

from pydantic import Field

from rabbitmq_http_types.commons import WirePolicyTarget
from rabbitmq_http_types.responses.base import DefinitionRecord
from rabbitmq_http_types.responses.validators import MapOrEmpty

PolicyDefinition = dict[str, Any]


class RuntimeParameter(DefinitionRecord):
    """A virtual host scoped runtime parameter (shovels, federation upstreams, ...).

    ``value`` may arrive as an empty list instead of a map; it then
    decodes to an empty map.
    """

    name: str
    vhost: str
    component: str
    value: MapOrEmpty


class GlobalRuntimeParameter(DefinitionRecord):
    """A cluster-wide runtime parameter (e.g. cluster_name)."""

    name: str
    value: Any


class Policy(DefinitionRecord):
    """A policy.

    Attributes:
        apply_to: Entity kinds the policy applies to (wire key "apply-to").
        definition: Policy keys and values; None if the server sends null.
    """

    name: str
    vhost: str
    pattern: str
    apply_to: WirePolicyTarget = Field(alias="apply-to")
    priority: int
    definition: PolicyDefinition | None
