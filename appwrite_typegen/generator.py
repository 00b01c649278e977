"""
The type generation pipeline.

``TypesGenerator`` reads the schema named by its configuration and produces
the complete TypeScript module in four stages:

1. Load: check the configured paths, read and parse the schema file and
   validate it into an ``AppwriteSchema``.
2. Generate: header, union types, enums, interfaces and ID constants, in that
   order, each section subject to its toggles.
3. Transform: user-supplied transformers, applied left to right.
4. Finalize: blank-line runs collapsed, surrounding whitespace stripped,
   exactly one trailing newline.

Failures in Load and Generate surface as ``GenerationError`` with the original
exception chained. Transformer failures are not wrapped.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional, Union

from .codegen import render_template
from .config import GeneratorConfig, TransformContext
from .constants import HEADER_TITLE, TemplateNames
from .domain.models import AppwriteSchema, Collection, parse_schema
from .exceptions import ConfigurationError, GenerationError, TypeGeneratorError
from .file_system import read_json
from .generators import EnumGenerator, IdConstantsGenerator, InterfaceGenerator


logger = logging.getLogger(__name__)

# Two or more consecutive blank (or whitespace-only) lines
_BLANK_LINE_RUN = re.compile(r"\n(?:[ \t]*\n){2,}")


def finalize_output(text: str) -> str:
    """Collapse blank-line runs to a single blank line and end with one newline."""
    return _BLANK_LINE_RUN.sub("\n\n", text).strip() + "\n"


class TypesGenerator:
    """Generates TypeScript declarations from an Appwrite schema file."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()

    def generate(self) -> str:
        """
        Run the whole pipeline against ``config.input_path``.

        Returns:
            The finalized TypeScript source

        Raises:
            GenerationError: If the schema cannot be loaded or the
                declarations cannot be produced
        """
        try:
            self.validate_configuration()
            logger.info(f"Loading schema from {self.config.input_path}")
            document = read_json(self.config.input_path)
        except TypeGeneratorError as e:
            raise self._wrap_error(e) from e

        return self.render(document)

    def render(self, document: Union[AppwriteSchema, Mapping[str, Any]]) -> str:
        """
        Generate, transform and finalize the output for a parsed document.

        Raises:
            GenerationError: If the document is malformed or generation fails
        """
        try:
            schema = parse_schema(document)
            collections = schema.processable_collections
            for collection in schema.collections:
                if not collection.is_processable:
                    logger.debug(f"Skipping collection {collection.name}: no attributes")
            logger.info(
                f"Generating types for {len(collections)} of "
                f"{len(schema.collections)} collection(s)"
            )
            generated = self.generate_sections(schema, collections)
        except Exception as e:
            raise self._wrap_error(e) from e

        input_config = (
            schema.model_dump(by_alias=True)
            if isinstance(document, AppwriteSchema)
            else dict(document)
        )
        transformed = self.apply_transformers(
            generated,
            TransformContext(input_config=input_config, collections=collections),
        )
        return finalize_output(transformed)

    def validate_configuration(self) -> None:
        """
        Raises:
            ConfigurationError: If the input or output path is empty
        """
        if not self.config.input_path:
            raise ConfigurationError("Input path is required for type generation")
        if not self.config.output_path:
            raise ConfigurationError("Output path is required for type generation")

    def generate_sections(self, schema: AppwriteSchema, collections: List[Collection]) -> str:
        """Concatenate every enabled section, separated by blank lines."""
        config = self.config
        sections: List[str] = [self.generate_header()]

        enum_config = config.enum.model_copy(
            update={
                "generate_enums": config.generate_enums and config.enum.generate_enums,
                "generate_union_types": config.generate_enums and config.enum.generate_union_types,
            }
        )
        enum_definitions = EnumGenerator.generate_enum_definitions(collections, enum_config)
        sections.append(enum_definitions.type_definitions)
        sections.append(enum_definitions.enum_definitions)

        if config.generate_interfaces:
            sections.append(InterfaceGenerator.generate_interfaces(collections, config.interface))
        else:
            logger.debug("Interface generation disabled")

        if config.generate_database_constants or config.generate_collection_constants:
            sections.append(
                IdConstantsGenerator.generate_id_constants(
                    schema,
                    config.id_constants,
                    include_databases=config.generate_database_constants,
                    include_collections=config.generate_collection_constants,
                )
            )
        else:
            logger.debug("ID constant generation disabled")

        return "\n\n".join(section for section in sections if section)

    def generate_header(self) -> str:
        return render_template(
            TemplateNames.HEADER,
            {"title": HEADER_TITLE, "generated_at": self._timestamp()},
        )

    def apply_transformers(self, generated: str, context: TransformContext) -> str:
        for transformer in self.config.transformers:
            logger.debug(f"Applying transformer {getattr(transformer, '__name__', transformer)!r}")
            generated = transformer(generated, context)
        return generated

    def _timestamp(self) -> str:
        # ISO 8601, millisecond precision, Z suffix
        now = datetime.now(timezone.utc)
        return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    @staticmethod
    def _wrap_error(error: Exception) -> GenerationError:
        message = error.message if isinstance(error, TypeGeneratorError) else str(error)
        logger.debug(f"Type generation failed: {error!r}")
        return GenerationError(f"Type generation failed: {message}", cause=error)
