"""Policy targets (the ``apply-to`` key of a policy)."""

from __future__ import annotations

__all__ = ["PolicyTarget", "WirePolicyTarget"]

from typing import Self

from rabbitmq_http_types.commons.base import ClosedVocabulary, wire_type


class PolicyTarget(ClosedVocabulary):
    """What kinds of entities a policy applies to.

    Closed: an unrecognized value decodes to QUEUES.
    """

    QUEUES = "queues"
    CLASSIC_QUEUES = "classic_queues"
    QUORUM_QUEUES = "quorum_queues"
    STREAMS = "streams"
    EXCHANGES = "exchanges"
    ALL = "all"

    @classmethod
    def default(cls) -> Self:
        return cls.QUEUES


WirePolicyTarget = wire_type(PolicyTarget, PolicyTarget.parse)
