"""
File system helpers for reading the schema and writing generated output.
"""

import json
import logging
from pathlib import Path
from typing import Any, Union

from .exceptions import FileSystemError, SchemaReadError


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def validate_file_exists(file_path: PathLike) -> Path:
    """
    Ensure a file exists and is a regular file.

    Raises:
        SchemaReadError: If the file does not exist
    """
    path = Path(file_path)
    if not path.is_file():
        raise SchemaReadError(
            f"File not found or not readable: {file_path}",
            path=str(file_path),
            context={"resolved_path": str(path.resolve())},
        )
    return path


def read_text(file_path: PathLike) -> str:
    """
    Read a UTF-8 text file.

    Raises:
        SchemaReadError: If the file is missing or cannot be read
    """
    path = validate_file_exists(file_path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaReadError(f"Unable to read file: {file_path} ({e})", path=str(file_path)) from e


def read_json(file_path: PathLike) -> Any:
    """
    Read and parse a JSON document.

    Raises:
        SchemaReadError: If the file cannot be read or is not valid JSON
    """
    content = read_text(file_path)
    try:
        document = json.loads(content)
    except json.JSONDecodeError as e:
        raise SchemaReadError(
            f"Failed to read or parse input configuration: {e}",
            path=str(file_path),
            context={"line": e.lineno, "column": e.colno},
        ) from e
    logger.debug(f"Read schema document from {file_path}")
    return document


def write_text(file_path: PathLike, content: str) -> Path:
    """
    Write UTF-8 text, creating parent directories as needed.

    Raises:
        FileSystemError: If the file cannot be written
    """
    path = Path(file_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise FileSystemError(f"Unable to write file: {file_path} ({e})", path=str(file_path)) from e
    logger.debug(f"Wrote {len(content)} characters to {path}")
    return path
