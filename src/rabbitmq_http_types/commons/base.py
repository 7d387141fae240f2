"""Building blocks shared by every vocabulary type.

Two flavours of enumeration exist:

Open (plugin-extensible):
    Known values are members of a ``(str, Enum)`` class. Anything else is
    kept verbatim in a frozen ``OpenValue`` subclass so that it can be echoed
    back to the server unchanged.

Closed (exhaustive by design):
    A ``ClosedVocabulary`` subclass. Unknown strings resolve to the class
    default so that decoding never fails on forward-incompatible servers.

Both flavours expose the wire string as ``.value``.
"""

from __future__ import annotations

__all__ = [
    "ClosedVocabulary",
    "OpenValue",
    "encode_vocabulary",
    "parse_open",
    "wire_type",
]

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Self, TypeVar

from pydantic import PlainSerializer, PlainValidator

from rabbitmq_http_types.constants import APP_NAME

_logger = logging.getLogger(f"{APP_NAME}.commons")

E = TypeVar("E", bound=Enum)
V = TypeVar("V", bound="OpenValue")


@dataclass(frozen=True)
class OpenValue:
    """Extension variant of an open enumeration.

    Carries a value outside the known set, exactly as the server sent it
    (case-sensitive, untrimmed).

    Attributes:
        value: The raw wire string.
    """

    value: str

    def __str__(self) -> str:
        return self.value


class ClosedVocabulary(str, Enum):
    """Base for enumerations whose unknown values map to a default member.

    Subclasses define their members and override ``default``.
    """

    @classmethod
    def default(cls) -> Self:
        """Member used for any unrecognized string."""
        raise NotImplementedError

    @classmethod
    def _missing_(cls, value: object) -> Self | None:
        if isinstance(value, str):
            fallback = cls.default()
            _logger.debug(
                "Unrecognized %s value %r, using default %r",
                cls.__name__,
                value,
                fallback.value,
            )
            return fallback
        # Non-string input is a shape error, let Enum raise ValueError
        return None

    @classmethod
    def parse(cls, value: object) -> Self:
        """Decode a wire string. Total over strings.

        Raises:
            ValueError: If value is not a string.
        """
        return cls(value)


def parse_open(known: type[E], other: type[V], value: object) -> E | V:
    """Decode a wire string into a known member or the extension variant.

    Args:
        known: The enumeration of known values.
        other: The extension variant class.
        value: Wire string, or an already decoded value.

    Returns:
        The matching member of ``known``, otherwise ``other(value)``.

    Raises:
        ValueError: If value is neither a string nor an already decoded value.
    """
    if isinstance(value, (known, other)):
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {type(value).__name__}")
    try:
        return known(value)
    except ValueError:
        _logger.debug("Unrecognized %s value %r, keeping it verbatim", known.__name__, value)
        return other(value)


def encode_vocabulary(value: Enum | OpenValue) -> str:
    """Encode any vocabulary value into its wire string."""
    return value.value


def wire_type(python_type: Any, parser: Callable[[Any], Any]) -> Any:
    """Pydantic field type that decodes with ``parser`` and dumps the wire string.

    Args:
        python_type: The decoded type (a class or a union alias).
        parser: Total decode function, e.g. ``QueueType.parse``.

    Returns:
        An ``Annotated`` type usable in model field annotations.
    """
    return Annotated[
        python_type,
        PlainValidator(parser),
        PlainSerializer(encode_vocabulary, return_type=str),
    ]
