"""
Centralized constants for the Appwrite types generator.

Type mappings, default configuration values and the fixed pieces of generated
output live here so the generators only contain mapping logic.
"""

from enum import Enum
from typing import Dict, List, Tuple


# =============================================================================
# CORE CONFIGURATION
# =============================================================================

class DefaultConfig:
    """Default configuration values."""

    INPUT_PATH = "./appwrite.json"
    OUTPUT_PATH = "./src/lib/appwrite/types.ts"

    # Section toggles
    GENERATE_ENUMS = True
    GENERATE_INTERFACES = True
    GENERATE_DATABASE_CONSTANTS = True
    GENERATE_COLLECTION_CONSTANTS = True

    # Enum options
    GENERATE_UNION_TYPES = True
    NAMING_STRATEGY = "pascal"

    # Interface options
    INCLUDE_METADATA = True
    OPTIONAL_METADATA = True

    # Constant options
    INCLUDE_COMMENTS = True


# Config files looked up in the working directory when none is given
CONFIG_SEARCH_PATHS: List[str] = [
    "./appwrite-types.config.json",
    "./appwrite-types.json",
    "./types-generator.config.json",
    "./appwrite-types.config.yaml",
    "./appwrite-types.config.yml",
]

CONFIG_FILE_SUFFIXES: List[str] = [".json", ".yaml", ".yml"]


# =============================================================================
# TYPE MAPPINGS
# =============================================================================

class AttributeTypes:
    """Attribute type names used in appwrite.json."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    RELATIONSHIP = "relationship"

    ENUM_FORMAT = "enum"


# Appwrite primitive type to TypeScript type
PRIMITIVE_TYPE_MAP: Dict[str, str] = {
    AttributeTypes.STRING: "string",
    AttributeTypes.INTEGER: "number",
    AttributeTypes.FLOAT: "number",
    AttributeTypes.BOOLEAN: "boolean",
    AttributeTypes.DATETIME: "string",
}

# Type used when a relationship cardinality is not recognised
RELATIONSHIP_FALLBACK_TYPE = "string | RelationshipReference"


class RelationType(str, Enum):
    """Relationship cardinalities."""

    ONE_TO_MANY = "oneToMany"
    MANY_TO_ONE = "manyToOne"
    ONE_TO_ONE = "oneToOne"
    MANY_TO_MANY = "manyToMany"


class RelationSide(str, Enum):
    """Which end of a relationship an attribute describes."""

    PARENT = "parent"
    CHILD = "child"


class OnDelete(str, Enum):
    """Deletion behaviors for relationships."""

    CASCADE = "cascade"
    SET_NULL = "setNull"
    RESTRICT = "restrict"
    NO_ACTION = "noAction"


# =============================================================================
# GENERATED OUTPUT
# =============================================================================

class NamingStrategies:
    """Enum member naming strategies."""

    PASCAL = "pascal"
    CAMEL = "camel"
    SNAKE = "snake"


# (field name, TypeScript type, description) for document metadata
METADATA_FIELDS: List[Tuple[str, str, str]] = [
    ("$id", "string", "Unique document identifier"),
    ("$createdAt", "string", "Document creation timestamp"),
    ("$updatedAt", "string", "Document last update timestamp"),
    ("$databaseId", "string", "Database identifier"),
    ("$collectionId", "string", "Collection identifier"),
    ("$permissions", "string[]", "Document-level permissions"),
]

HEADER_TITLE = "Auto-generated Appwrite Types"

DATABASE_IDS_NAME = "DATABASE_IDS"
COLLECTION_IDS_NAME = "COLLECTION_IDS"


class TemplateNames:
    """Jinja2 templates used to render each section."""

    HEADER = "header.ts.j2"
    UNION_TYPE = "union_type.ts.j2"
    ENUM = "enum.ts.j2"
    INTERFACE = "interface.ts.j2"
    CONSTANT_TABLE = "constant_table.ts.j2"
