"""Decode and encode entry points.

Transports hand parsed JSON (or raw JSON text) to ``decode*`` and get back
an immutable snapshot, or a DecodeError naming every failing field. Outbound
bundles go through ``encode``.

Usage:
    from rabbitmq_http_types.codec import decode_list
    from rabbitmq_http_types.responses import QueueInfo

    queues = decode_list(QueueInfo, response.json())
"""

from __future__ import annotations

__all__ = [
    "decode",
    "decode_health_check_failure",
    "decode_json",
    "decode_list",
    "encode",
]

import logging
from functools import lru_cache
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from rabbitmq_http_types.constants import APP_NAME
from rabbitmq_http_types.exceptions import DecodeError
from rabbitmq_http_types.responses.health import (
    ClusterAlarmCheckDetails,
    HealthCheckFailureDetails,
    QuorumCriticalityCheckDetails,
)

_logger = logging.getLogger(f"{APP_NAME}.codec")

M = TypeVar("M", bound=BaseModel)

_health_check_adapter: TypeAdapter[Any] = TypeAdapter(HealthCheckFailureDetails)


class SupportsPayload(Protocol):
    def to_payload(self) -> dict[str, Any]: ...


def _decode_error(model: str, error: ValidationError) -> DecodeError:
    _logger.debug("Failed to decode %s (%d error(s))", model, error.error_count())
    return DecodeError.from_validation_error(model, error)


@lru_cache(maxsize=None)
def _list_adapter(model: type[M]) -> TypeAdapter[list[M]]:
    return TypeAdapter(list[model])  # type: ignore[valid-type]


def decode(model: type[M], payload: Any) -> M:
    """Decode a parsed JSON value into a snapshot.

    Args:
        model: Target type (e.g. Overview, QueueInfo).
        payload: Parsed JSON, usually a dict.

    Returns:
        Instance of model.

    Raises:
        DecodeError: If payload does not fit model.
    """
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise _decode_error(model.__name__, e) from e


def decode_json(model: type[M], text: str | bytes) -> M:
    """Decode raw JSON text into a snapshot.

    Malformed JSON is reported as a DecodeError at location "<root>".

    Raises:
        DecodeError: If text is not JSON or does not fit model.
    """
    try:
        return model.model_validate_json(text)
    except ValidationError as e:
        raise _decode_error(model.__name__, e) from e


def decode_list(model: type[M], payload: Any) -> list[M]:
    """Decode a JSON array into a list of snapshots.

    Error locations start with the element index (e.g. "2.durable").

    Raises:
        DecodeError: If payload is not a list or an element does not fit model.
    """
    try:
        return _list_adapter(model).validate_python(payload)
    except ValidationError as e:
        raise _decode_error(f"list[{model.__name__}]", e) from e


def decode_health_check_failure(
    payload: Any,
) -> ClusterAlarmCheckDetails | QuorumCriticalityCheckDetails:
    """Decode the body of a failed health check.

    The variant is picked by the evidence present: ``alarms`` or ``queues``.

    Raises:
        DecodeError: If neither evidence list is present or it is malformed.
    """
    try:
        return _health_check_adapter.validate_python(payload)
    except ValidationError as e:
        raise _decode_error("HealthCheckFailureDetails", e) from e


def encode(value: SupportsPayload) -> dict[str, Any]:
    """Encode a declaration bundle or snapshot into a request body.

    Raises:
        EncodeError: If a value cannot be represented as JSON.
    """
    return value.to_payload()
