"""Tolerant decode steps for fields whose shape drifts between servers.

Each function is used as a pydantic ``BeforeValidator``: it inspects the raw
value before pydantic commits to the target type.
"""

from __future__ import annotations

__all__ = [
    "MapOrEmpty",
    "NumberFromString",
    "TagList",
    "TagMap",
    "XArguments",
    "comma_separated_list",
    "map_or_empty",
    "number_from_string",
]

import logging
from typing import Annotated, Any

from pydantic import BeforeValidator, StrictInt, ValidationInfo

from rabbitmq_http_types.constants import APP_NAME

_logger = logging.getLogger(f"{APP_NAME}.responses")


def map_or_empty(value: Any, info: ValidationInfo) -> Any:
    """Accept a map as-is and turn a sequence into an empty map.

    Some servers send ``[]`` instead of ``{}`` for empty message properties
    and runtime parameter values. Any other shape is left for pydantic to
    reject.
    """
    if isinstance(value, (list, tuple)):
        if value:
            _logger.debug(
                "Field %s arrived as a non-empty sequence, decoding it as an empty map",
                info.field_name,
            )
        return {}
    return value


def number_from_string(value: Any) -> Any:
    """Parse a string of ASCII digits into an int.

    Whitespace, signs and digit separators are not accepted. Non-string
    values are left for strict int validation, which also rejects bools.

    Raises:
        ValueError: If value is a string but not made of ASCII digits only.
    """
    if isinstance(value, str):
        if not (value.isascii() and value.isdigit()):
            raise ValueError(f"expected a number or a numeric string, got {value!r}")
        return int(value)
    return value


def comma_separated_list(value: Any) -> Any:
    """Accept ``"a,b"`` as well as ``["a", "b"]``.

    Older servers report user tags as a single comma-separated string.
    """
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return value


XArguments = dict[str, Any]
TagMap = dict[str, Any]
TagList = Annotated[list[str], BeforeValidator(comma_separated_list)]
MapOrEmpty = Annotated[dict[str, Any], BeforeValidator(map_or_empty)]
NumberFromString = Annotated[StrictInt, BeforeValidator(number_from_string)]
