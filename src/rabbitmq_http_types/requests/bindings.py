"""Binding parameters."""

from __future__ import annotations

__all__ = ["BindingParams"]

from pydantic import Field

from rabbitmq_http_types.commons import BindingDestinationType, WireBindingDestinationType
from rabbitmq_http_types.requests.base import ParamsModel, XArguments


class BindingParams(ParamsModel):
    """A binding from an exchange to a queue or to another exchange.

    Only ``routing_key`` and ``arguments`` go into the request body; the
    other fields address the binding endpoint and are exposed through
    ``path_segments``.
    """

    vhost: str = Field(exclude=True)
    source: str = Field(exclude=True)
    destination: str = Field(exclude=True)
    destination_type: WireBindingDestinationType = Field(
        default=BindingDestinationType.QUEUE, exclude=True
    )
    routing_key: str = ""
    arguments: XArguments | None = None

    @classmethod
    def queue_binding(
        cls,
        vhost: str,
        exchange: str,
        queue: str,
        routing_key: str = "",
        arguments: XArguments | None = None,
    ) -> BindingParams:
        return cls(
            vhost=vhost,
            source=exchange,
            destination=queue,
            destination_type=BindingDestinationType.QUEUE,
            routing_key=routing_key,
            arguments=arguments,
        )

    @classmethod
    def exchange_binding(
        cls,
        vhost: str,
        source: str,
        destination: str,
        routing_key: str = "",
        arguments: XArguments | None = None,
    ) -> BindingParams:
        return cls(
            vhost=vhost,
            source=source,
            destination=destination,
            destination_type=BindingDestinationType.EXCHANGE,
            routing_key=routing_key,
            arguments=arguments,
        )

    @property
    def path_segments(self) -> tuple[str, str, str, str, str]:
        """(vhost, "e", source, "q"|"e", destination), unescaped."""
        return (
            self.vhost,
            BindingDestinationType.EXCHANGE.path_abbreviation,
            self.source,
            self.destination_type.path_abbreviation,
            self.destination,
        )
