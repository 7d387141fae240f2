"""Virtual host and resource limit parameters."""

from __future__ import annotations

__all__ = [
    "EnforcedLimitParams",
    "VirtualHostParams",
]

from typing import Any, Generic, TypeVar

from pydantic import model_validator

from rabbitmq_http_types.commons import UserLimitTarget, VirtualHostLimitTarget, WireQueueType
from rabbitmq_http_types.requests.base import ParamsModel

LimitTargetT = TypeVar("LimitTargetT", VirtualHostLimitTarget, UserLimitTarget)

# Searched in order; "max-connections" exists in both and encodes the same
_LIMIT_TARGET_CLASSES = (VirtualHostLimitTarget, UserLimitTarget)


class VirtualHostParams(ParamsModel):
    """Properties of a virtual host to be created or updated.

    Attributes:
        name: Virtual host name.
        description: Optional description, e.g. what purpose does this
            virtual host serve?
        tags: Optional list of virtual host tags.
        default_queue_type: Queue type used when clients do not specify one.
        tracing: Enable the firehose tracer for this virtual host.
    """

    name: str
    description: str | None = None
    tags: list[str] | None = None
    default_queue_type: WireQueueType | None = None
    tracing: bool = False

    @classmethod
    def named(cls, name: str) -> VirtualHostParams:
        """Parameters for a virtual host with nothing but a name."""
        return cls(name=name)


class EnforcedLimitParams(ParamsModel, Generic[LimitTargetT]):
    """A resource usage limit to be enforced on a virtual host or a user.

    A member passed directly is kept as is. Without a type parameter, a
    limit name string is matched exactly against both the virtual host and
    the user limits; only a name known to neither falls back to the
    virtual host default. ``EnforcedLimitParams[UserLimitTarget]`` decodes
    against the user limits alone.

    Attributes:
        kind: Which limit to set (e.g. max-queues).
        value: The limit. A negative value means no limit.
    """

    kind: LimitTargetT
    value: int

    @model_validator(mode="before")
    @classmethod
    def resolve_limit_name(cls, data: Any) -> Any:
        """Resolve a known limit name before any closed-enum default applies."""
        if not isinstance(data, dict) or cls.__pydantic_generic_metadata__["args"]:
            return data
        kind = data.get("kind")
        if not isinstance(kind, str) or isinstance(kind, _LIMIT_TARGET_CLASSES):
            return data
        for target_class in _LIMIT_TARGET_CLASSES:
            for member in target_class:
                if member.value == kind:
                    return {**data, "kind": member}
        return data

    @classmethod
    def new(cls, kind: LimitTargetT, value: int) -> EnforcedLimitParams[LimitTargetT]:
        return cls(kind=kind, value=value)
