"""Shared base for declaration parameter bundles."""

from __future__ import annotations

__all__ = ["ParamsModel", "XArguments"]

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic_core import PydanticSerializationError

from rabbitmq_http_types.exceptions import EncodeError

# Optional arguments attached to a queue, exchange or binding
XArguments = dict[str, Any]


class ParamsModel(BaseModel):
    """Immutable bundle of declaration parameters.

    Fields that are None are left out of the payload so the server applies
    its own defaults.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Encode into the request body expected by the management API.

        Returns:
            JSON-compatible dict, ready to be sent as-is.

        Raises:
            EncodeError: If an argument value cannot be represented as JSON.
        """
        try:
            return self.model_dump(mode="json", by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            raise EncodeError(f"Cannot encode {type(self).__name__}: {e}") from e
