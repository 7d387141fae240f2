"""Custom exceptions for rabbitmq-http-types.

This module contains all custom exceptions used throughout the package.
Exceptions are organized into two categories:

Codec Errors (caller decides whether to retry, report or abort):
    - DecodeError: A server payload does not fit the target type
    - EncodeError: A declaration bundle could not be serialized

File Errors:
    - DefinitionsFileError: A definitions backup could not be read or written

Unrecognized vocabulary values are never errors: open enumerations keep the
raw string and closed enumerations fall back to a documented default.

Usage:
    from rabbitmq_http_types.exceptions import DecodeError
"""

from __future__ import annotations

__all__ = [
    "DecodeError",
    "DefinitionsFileError",
    "EncodeError",
    "FieldError",
    "RabbitMQTypesError",
]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pydantic import ValidationError


class RabbitMQTypesError(Exception):
    """Base class for every error raised by this package."""


# =============================================================================
# Codec Errors
# =============================================================================


@dataclass(frozen=True)
class FieldError:
    """A single decode failure.

    Attributes:
        location: Dotted path to the offending field (e.g. "queues.0.durable").
            "<root>" when the payload itself has the wrong shape.
        message: Human-readable reason.
        input_value: The value that failed to decode.
    """

    location: str
    message: str
    input_value: Any = None

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


class DecodeError(RabbitMQTypesError, ValueError):
    """A server payload could not be decoded into the requested type.

    Raised for payloads of an incompatible shape, e.g. a process identifier
    delivered as a non-numeric string or a required field that is missing.

    Attributes:
        model: Name of the type the payload was decoded into.
        errors: One FieldError per failing field.
    """

    def __init__(self, model: str, errors: list[FieldError]) -> None:
        self.model = model
        self.errors = errors
        lines = "\n".join(f"  - {error}" for error in errors)
        super().__init__(f"Failed to decode {model}:\n{lines}")

    @property
    def locations(self) -> list[str]:
        """Dotted paths of every failing field."""
        return [error.location for error in self.errors]

    @classmethod
    def from_validation_error(cls, model: str, error: ValidationError) -> DecodeError:
        """Build a DecodeError from a pydantic ValidationError.

        Args:
            model: Name of the target type.
            error: The validation error raised by pydantic.

        Returns:
            DecodeError listing every failing location.
        """
        field_errors = []
        for detail in error.errors():
            loc = ".".join(str(part) for part in detail["loc"]) or "<root>"
            field_errors.append(FieldError(loc, detail["msg"], detail.get("input")))
        return cls(model, field_errors)


class EncodeError(RabbitMQTypesError, ValueError):
    """A declaration bundle could not be encoded into a payload.

    Builders do not validate argument values, so this surfaces only when a
    caller-supplied argument cannot be represented as JSON.
    """


# =============================================================================
# File Errors
# =============================================================================


class DefinitionsFileError(RabbitMQTypesError):
    """A definitions file could not be read, parsed or written.

    The underlying OSError or JSONDecodeError is chained as __cause__.
    Content that parses as JSON but does not fit the definitions shape
    raises DecodeError instead.
    """
