"""Cluster nodes, listeners and the cluster overview."""

from __future__ import annotations

__all__ = [
    "ChurnRates",
    "ClusterIdentity",
    "ClusterNode",
    "Listener",
    "ObjectTotals",
    "Overview",
    "QueueTotals",
]

from pydantic import Field

from rabbitmq_http_types.commons import WireProtocol
from rabbitmq_http_types.responses.base import FrozenModel
from rabbitmq_http_types.responses.validators import NumberFromString, TagMap


class ClusterNode(FrozenModel):
    """A cluster node summary.

    ``os_pid`` is reported as a string; a non-numeric value fails to decode.
    """

    name: str
    uptime: int
    run_queue: int
    processors: int
    os_pid: NumberFromString
    fd_total: int
    total_erlang_processes: int = Field(alias="proc_total")
    memory_high_watermark: int = Field(alias="mem_limit")
    has_memory_alarm_in_effect: bool = Field(alias="mem_alarm")
    free_disk_space_low_watermark: int = Field(alias="disk_free_limit")
    has_free_disk_space_alarm_in_effect: bool = Field(alias="disk_free_alarm")
    rates_mode: str

    @property
    def has_alarms_in_effect(self) -> bool:
        return self.has_memory_alarm_in_effect or self.has_free_disk_space_alarm_in_effect


class ClusterIdentity(FrozenModel):
    name: str


class Listener(FrozenModel):
    """A protocol listener on a node."""

    node: str
    protocol: WireProtocol
    port: int
    interface: str = Field(alias="ip_address")


class ChurnRates(FrozenModel):
    """Object churn counters since the last stats emission."""

    connection_created: int = 0
    connection_closed: int = 0
    queue_declared: int = 0
    queue_created: int = 0
    queue_deleted: int = 0
    channel_created: int = 0
    channel_closed: int = 0

    def __str__(self) -> str:
        return "\n".join(f"{key}: {value}" for key, value in self.model_dump().items())


class ObjectTotals(FrozenModel):
    connections: int = 0
    channels: int = 0
    queues: int = 0
    exchanges: int = 0
    consumers: int = 0


class QueueTotals(FrozenModel):
    messages: int = 0
    messages_ready: int = 0
    messages_unacknowledged: int = 0


class Overview(FrozenModel):
    """Cluster-wide overview.

    ``cluster_tags`` and ``node_tags`` are None on servers older than 4.0,
    which do not report them.
    """

    cluster_name: str
    node: str

    erlang_full_version: str
    erlang_version: str
    rabbitmq_version: str
    product_name: str
    product_version: str

    # these two won't be available in 3.13.x
    cluster_tags: TagMap | None = None
    node_tags: TagMap | None = None

    statistics_db_event_queue: int = 0
    churn_rates: ChurnRates = Field(default_factory=ChurnRates)
    object_totals: ObjectTotals = Field(default_factory=ObjectTotals)
    queue_totals: QueueTotals | None = None
    listeners: list[Listener] = Field(default_factory=list)
