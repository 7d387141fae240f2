"""File utilities for definitions backups.

- require_file_exists: Fail early with a readable message
- read_json_file: Read and parse a JSON file
- write_json_file: Write JSON, creating parent directories
- set_secure_permissions: Owner-only permissions (exports hold password hashes)
"""

from __future__ import annotations

__all__ = [
    "read_json_file",
    "require_file_exists",
    "set_secure_permissions",
    "write_json_file",
]

import json
import sys
from pathlib import Path
from typing import Any

from rabbitmq_http_types.exceptions import DefinitionsFileError


def require_file_exists(file_path: Path, file_type: str = "file") -> None:
    """Raise DefinitionsFileError if file doesn't exist.

    Args:
        file_path: Path to check.
        file_type: Description for error message (e.g., "definitions").

    Raises:
        DefinitionsFileError: If file doesn't exist.
    """
    if file_path.is_file():
        return
    raise DefinitionsFileError(f"{file_type.capitalize()} file not found at {file_path}")


def read_json_file(file_path: Path, file_type: str = "file", encoding: str = "utf-8") -> Any:
    """Read and parse a JSON file.

    Args:
        file_path: Path to JSON file.
        file_type: Description for error messages.
        encoding: File encoding.

    Returns:
        The parsed JSON value.

    Raises:
        DefinitionsFileError: If the file cannot be read or is not valid JSON.
    """
    try:
        with open(file_path, "r", encoding=encoding) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise DefinitionsFileError(f"Invalid JSON in {file_type} file {file_path}: {e}") from e
    except OSError as e:
        raise DefinitionsFileError(f"Could not read {file_type} file {file_path}: {e}") from e


def write_json_file(
    file_path: Path,
    data: Any,
    file_type: str = "file",
    encoding: str = "utf-8",
    indent: int = 2,
) -> None:
    """Write a JSON value to file, creating parent directories.

    The file is restricted to its owner after writing.

    Raises:
        DefinitionsFileError: If the file cannot be written.
    """
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w", encoding=encoding) as f:
            json.dump(data, f, indent=indent)
            f.write("\n")
    except OSError as e:
        raise DefinitionsFileError(f"Could not write {file_type} file {file_path}: {e}") from e

    set_secure_permissions(file_path)


def set_secure_permissions(path: Path) -> None:
    """Restrict a file to its owner (0o600).

    Does nothing on Windows. Permission errors are ignored
    (some filesystems don't support permission changes).
    """
    if sys.platform == "win32":
        return

    try:
        path.chmod(0o600)
    except OSError:
        pass
