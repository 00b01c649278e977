"""
Generate TypeScript types from an Appwrite project schema.

Typical use::

    from appwrite_typegen import generate_types

    generate_types(input_path="./appwrite.json", output_path="./src/types.ts")
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .config import GeneratorConfig, TransformContext, load_config, merge_config
from .exceptions import (
    ConfigurationError,
    DocumentValidationError,
    FileSystemError,
    GenerationError,
    SchemaReadError,
    StructuralError,
    TypeGeneratorError,
    UnsupportedTypeError,
)
from .file_system import write_text
from .generator import TypesGenerator


logger = logging.getLogger(__name__)

__version__ = "0.1.0"


def generate_types(
    config: Optional[Union[GeneratorConfig, Mapping[str, Any]]] = None,
    *,
    config_path: Optional[Union[str, Path]] = None,
    write: bool = True,
    **overrides: Any,
) -> str:
    """
    Generate the TypeScript module and optionally write it to ``output_path``.

    Args:
        config: A ready ``GeneratorConfig``, or a dict of options (snake_case
            or camelCase keys). A dict is layered over any discovered config
            file; a ``GeneratorConfig`` is used as is.
        config_path: Explicit config file, merged before ``overrides``; not
            used when ``config`` is a ``GeneratorConfig``
        write: Write the result to the configured output path
        **overrides: Individual options that win over everything else

    Returns:
        The generated source

    Raises:
        ConfigurationError: If the configuration is invalid
        GenerationError: If the schema cannot be loaded or converted
        FileSystemError: If the output cannot be written
    """
    if isinstance(config, GeneratorConfig):
        effective = config
        if config_path:
            logger.warning(f"Ignoring config file {config_path}: an explicit GeneratorConfig was given")
    else:
        effective = load_config(config_path, overrides=config)

    if overrides:
        effective = merge_config(effective, overrides)

    output = TypesGenerator(effective).generate()

    if write:
        path = write_text(effective.output_path, output)
        logger.info(f"Types written to {path}")

    return output


__all__ = [
    'generate_types',
    'GeneratorConfig',
    'TransformContext',
    'TypesGenerator',
    'load_config',
    'TypeGeneratorError',
    'ConfigurationError',
    'SchemaReadError',
    'StructuralError',
    'UnsupportedTypeError',
    'FileSystemError',
    'DocumentValidationError',
    'GenerationError',
]
