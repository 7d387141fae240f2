"""Binding destination types."""

from __future__ import annotations

__all__ = ["BindingDestinationType", "WireBindingDestinationType"]

from typing import Self

from rabbitmq_http_types.commons.base import ClosedVocabulary, wire_type


class BindingDestinationType(ClosedVocabulary):
    """Binding destination can be either a queue or another exchange.

    The latter is the case for exchange-to-exchange bindings.
    Closed: an unrecognized value decodes to QUEUE.
    """

    QUEUE = "queue"
    EXCHANGE = "exchange"

    @classmethod
    def default(cls) -> Self:
        return cls.QUEUE

    @property
    def path_abbreviation(self) -> str:
        """Abbreviation used in binding endpoint paths (/bindings/{vhost}/e/{src}/q/{dst})."""
        return "q" if self is BindingDestinationType.QUEUE else "e"


WireBindingDestinationType = wire_type(BindingDestinationType, BindingDestinationType.parse)
