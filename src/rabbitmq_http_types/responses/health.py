"""Health check failure details.

A failed health check carries one of two evidence shapes. The payload has
no discriminator key, so the variant is inferred from which evidence list
is present:

- ``alarms``: ClusterAlarmCheckDetails (cluster-wide or local alarms)
- ``queues``: QuorumCriticalityCheckDetails (node is quorum critical)
"""

from __future__ import annotations

__all__ = [
    "ClusterAlarmCheckDetails",
    "HealthCheckFailureDetails",
    "QuorumCriticalityCheckDetails",
    "QuorumEndangeredQueue",
    "ResourceAlarm",
]

from typing import Annotated, Any, Union

from pydantic import Discriminator, Field, Tag

from rabbitmq_http_types.commons import WireQueueType
from rabbitmq_http_types.responses.base import FrozenModel

_ALARM_CHECK_TAG = "alarm_check"
_QUORUM_CRITICALITY_TAG = "node_is_quorum_critical"


class ResourceAlarm(FrozenModel):
    """A resource alarm in effect on a node (e.g. memory, disk)."""

    node: str
    resource: str


class ClusterAlarmCheckDetails(FrozenModel):
    reason: str
    alarms: list[ResourceAlarm]


class QuorumEndangeredQueue(FrozenModel):
    """A queue that would lose its quorum if the node were shut down."""

    name: str
    vhost: str = Field(alias="virtual_host")
    queue_type: WireQueueType = Field(alias="type")


class QuorumCriticalityCheckDetails(FrozenModel):
    reason: str
    queues: list[QuorumEndangeredQueue]


def _failure_details_tag(value: Any) -> str | None:
    """Infer the variant from the evidence present. None fails the decode."""
    if isinstance(value, dict):
        if "alarms" in value:
            return _ALARM_CHECK_TAG
        if "queues" in value:
            return _QUORUM_CRITICALITY_TAG
        return None
    if isinstance(value, ClusterAlarmCheckDetails):
        return _ALARM_CHECK_TAG
    if isinstance(value, QuorumCriticalityCheckDetails):
        return _QUORUM_CRITICALITY_TAG
    return None


HealthCheckFailureDetails = Annotated[
    Union[
        Annotated[ClusterAlarmCheckDetails, Tag(_ALARM_CHECK_TAG)],
        Annotated[QuorumCriticalityCheckDetails, Tag(_QUORUM_CRITICALITY_TAG)],
    ],
    Discriminator(_failure_details_tag),
]
