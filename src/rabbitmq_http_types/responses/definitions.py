"""Definitions export: everything needed to restore a cluster's topology.

A DefinitionSet decodes the body of ``GET /api/definitions`` and re-encodes
it for ``POST /api/definitions``. Every record kind keeps keys it does not
model, and ``to_payload()`` only emits what was present on input, so a
decoded export restores unchanged.
"""

from __future__ import annotations

__all__ = [
    "DefinitionSet",
]

from pydantic import Field

from rabbitmq_http_types.responses.access import Permissions, TopicPermissions, User
from rabbitmq_http_types.responses.base import DefinitionRecord
from rabbitmq_http_types.responses.exchanges import BindingInfo, ExchangeDefinition
from rabbitmq_http_types.responses.parameters import (
    GlobalRuntimeParameter,
    Policy,
    RuntimeParameter,
)
from rabbitmq_http_types.responses.queues import QueueDefinition
from rabbitmq_http_types.responses.vhosts import VirtualHost


class DefinitionSet(DefinitionRecord):
    """A definitions export bundle.

    Attributes:
        server_version: Version of the node that produced the export
            (wire key "rabbitmq_version").
        rabbit_version: Legacy version key written by older servers.
        virtual_hosts: Virtual hosts (wire key "vhosts").
    """

    server_version: str | None = Field(default=None, alias="rabbitmq_version")
    rabbit_version: str | None = None
    product_name: str | None = None
    product_version: str | None = None

    users: list[User] = Field(default_factory=list)
    virtual_hosts: list[VirtualHost] = Field(default_factory=list, alias="vhosts")
    permissions: list[Permissions] = Field(default_factory=list)
    topic_permissions: list[TopicPermissions] = Field(default_factory=list)

    parameters: list[RuntimeParameter] = Field(default_factory=list)
    global_parameters: list[GlobalRuntimeParameter] = Field(default_factory=list)
    policies: list[Policy] = Field(default_factory=list)

    queues: list[QueueDefinition] = Field(default_factory=list)
    exchanges: list[ExchangeDefinition] = Field(default_factory=list)
    bindings: list[BindingInfo] = Field(default_factory=list)

    @property
    def version(self) -> str | None:
        """Server version, whichever key the export used."""
        return self.server_version or self.rabbit_version

    def summary(self) -> dict[str, int]:
        """Record counts per kind, keyed by wire name."""
        return {
            "users": len(self.users),
            "vhosts": len(self.virtual_hosts),
            "permissions": len(self.permissions),
            "topic_permissions": len(self.topic_permissions),
            "parameters": len(self.parameters),
            "global_parameters": len(self.global_parameters),
            "policies": len(self.policies),
            "queues": len(self.queues),
            "exchanges": len(self.exchanges),
            "bindings": len(self.bindings),
        }
