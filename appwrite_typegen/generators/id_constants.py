import logging
from typing import Any, Dict, Iterable, Mapping, NamedTuple, Optional, Union

from ..codegen import render_template
from ..config import IdConstantsConfig
from ..constants import COLLECTION_IDS_NAME, DATABASE_IDS_NAME, TemplateNames
from ..domain.models import AppwriteSchema, parse_schema
from ..domain.naming import format_constant_name
from ..exceptions import StructuralError


logger = logging.getLogger(__name__)


class ConstantEntry(NamedTuple):
    """One constant: the backend identifier and the entity it came from."""

    identifier: str
    source_name: str


ConstantTable = Dict[str, ConstantEntry]


class ConstantTables(NamedTuple):
    database_table: ConstantTable
    collection_table: ConstantTable


class IdConstantsGenerator:
    """Generates database and collection ID constant tables."""

    @classmethod
    def build_tables(
        cls,
        schema: Union[AppwriteSchema, Mapping[str, Any]],
        config: Optional[IdConstantsConfig] = None,
    ) -> ConstantTables:
        """
        Build the database and collection constant tables.

        Args:
            schema: Validated schema, or the raw parsed document
            config: Naming options (defaults when omitted)

        Returns:
            Ordered constant-name -> entry mappings. Entities whose names
            sanitize to the same key overwrite earlier ones.

        Raises:
            StructuralError: If ``schema`` is not a structured object
        """
        config = config or IdConstantsConfig()
        schema = cls._validate_input(schema)

        database_table = cls._build_table(
            ((database.name, database.id) for database in schema.databases),
            config,
        )
        collection_table = cls._build_table(
            ((collection.name, collection.identifier) for collection in schema.collections),
            config,
        )
        return ConstantTables(database_table, collection_table)

    @classmethod
    def generate_id_constants(
        cls,
        schema: Union[AppwriteSchema, Mapping[str, Any]],
        config: Optional[IdConstantsConfig] = None,
        include_databases: bool = True,
        include_collections: bool = True,
    ) -> str:
        """Render the ``DATABASE_IDS`` and ``COLLECTION_IDS`` declarations."""
        config = config or IdConstantsConfig()
        tables = cls.build_tables(schema, config)

        sections = []
        if include_databases:
            sections.append(cls.render_table("Database", DATABASE_IDS_NAME, tables.database_table, config))
        if include_collections:
            sections.append(cls.render_table("Collection", COLLECTION_IDS_NAME, tables.collection_table, config))
        return "\n\n".join(sections)

    @staticmethod
    def render_table(label: str, table_name: str, entries: ConstantTable, config: IdConstantsConfig) -> str:
        return render_template(
            TemplateNames.CONSTANT_TABLE,
            {
                "label": label,
                "table_name": table_name,
                "entries": entries,
                "include_comments": config.include_comments,
            },
        )

    @staticmethod
    def _validate_input(schema: Any) -> AppwriteSchema:
        if isinstance(schema, AppwriteSchema):
            return schema
        if not isinstance(schema, Mapping):
            raise StructuralError(
                "Invalid input configuration: Must be a non-null object",
                context={"received_type": type(schema).__name__},
            )
        # The constants only need names and ids, so a document without a
        # collections list still yields (empty) tables.
        document = dict(schema)
        document.setdefault("collections", [])
        return parse_schema(document)

    @staticmethod
    def _build_table(entities: Iterable, config: IdConstantsConfig) -> ConstantTable:
        table: ConstantTable = {}
        for name, identifier in entities:
            constant_name = format_constant_name(
                name,
                config.constant_prefix,
                config.constant_suffix,
                config.naming_transform,
            )
            if constant_name in table:
                logger.debug(f"Constant {constant_name} for '{name}' replaces an earlier entry")
            table[constant_name] = ConstantEntry(identifier=identifier, source_name=name)
        return table
