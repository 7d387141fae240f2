"""Base classes for decoded server payloads.

FrozenModel:
    Immutable snapshot. Unknown keys are ignored, so new server fields never
    break decoding. Fields may be populated by their wire name (alias) or
    their Python name.

DefinitionRecord:
    A FrozenModel that also keeps unknown keys. Used for everything that can
    appear in a definitions export, so that a decoded export re-encodes
    without losing anything on restore.
"""

from __future__ import annotations

__all__ = [
    "DefinitionRecord",
    "FrozenModel",
]

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic_core import PydanticSerializationError

from rabbitmq_http_types.exceptions import EncodeError


class FrozenModel(BaseModel):
    """Base class for immutable decoded payloads."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_payload(self) -> dict[str, Any]:
        """Re-encode using wire key names.

        Only fields that were present when decoding (or passed explicitly
        when constructing) are emitted.

        Raises:
            EncodeError: If a value cannot be represented as JSON.
        """
        try:
            return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
        except PydanticSerializationError as e:
            raise EncodeError(f"Cannot encode {type(self).__name__}: {e}") from e


class DefinitionRecord(FrozenModel):
    """Decoded payload that round-trips unknown keys."""

    model_config = ConfigDict(extra="allow")
