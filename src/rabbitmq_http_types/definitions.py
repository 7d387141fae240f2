"""Definitions backup and restore files.

A definitions file is the JSON body of ``GET /api/definitions``. Loading
decodes it into a DefinitionSet; saving writes back only what was present
when it was decoded, so load-then-save preserves the file's content.
"""

from __future__ import annotations

__all__ = [
    "load_definitions",
    "save_definitions",
]

import logging
from pathlib import Path

from rabbitmq_http_types.codec import decode, encode
from rabbitmq_http_types.constants import (
    APP_NAME,
    DEFINITIONS_FILE_ENCODING,
    DEFINITIONS_JSON_INDENT,
)
from rabbitmq_http_types.responses.definitions import DefinitionSet
from rabbitmq_http_types.utils.file_helpers import (
    read_json_file,
    require_file_exists,
    write_json_file,
)

_logger = logging.getLogger(f"{APP_NAME}.definitions")


def _format_counts(definitions: DefinitionSet) -> str:
    return ", ".join(f"{count} {kind}" for kind, count in definitions.summary().items() if count)


def load_definitions(path: Path | str) -> DefinitionSet:
    """Load a definitions export from a JSON file.

    Args:
        path: Path to the definitions file.

    Returns:
        The decoded DefinitionSet.

    Raises:
        DefinitionsFileError: If the file is missing, unreadable or not JSON.
        DecodeError: If the JSON does not have the definitions shape.
    """
    path = Path(path)
    require_file_exists(path, file_type="definitions")
    data = read_json_file(path, file_type="definitions", encoding=DEFINITIONS_FILE_ENCODING)
    definitions = decode(DefinitionSet, data)
    _logger.info(
        "Loaded definitions from %s (version %s): %s",
        path,
        definitions.version or "unknown",
        _format_counts(definitions) or "empty",
    )
    return definitions


def save_definitions(definitions: DefinitionSet, path: Path | str) -> None:
    """Save a definitions export to a JSON file.

    Parent directories are created. The file is readable by its owner only,
    since exports carry password hashes.

    Args:
        definitions: The definitions to save.
        path: Destination path. An existing file is overwritten.

    Raises:
        DefinitionsFileError: If the file cannot be written.
        EncodeError: If an unknown key holds a value that is not JSON.
    """
    path = Path(path)
    write_json_file(
        path,
        encode(definitions),
        file_type="definitions",
        encoding=DEFINITIONS_FILE_ENCODING,
        indent=DEFINITIONS_JSON_INDENT,
    )
    _logger.info("Saved definitions to %s: %s", path, _format_counts(definitions) or "empty")
