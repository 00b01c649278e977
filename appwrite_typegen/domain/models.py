"""
Core domain models for the Appwrite types generator.

These pydantic models describe the parts of an ``appwrite.json`` project file
the generator reads. They are validated once, up front, and are read-only
afterwards. Field names are snake_case; the Appwrite spelling is accepted via
aliases.
"""

import logging
from typing import Annotated, Any, Dict, List, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    ValidationError,
)

from ..constants import AttributeTypes, OnDelete, RelationSide
from ..exceptions import StructuralError


logger = logging.getLogger(__name__)


class _SchemaModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )


class BaseAttribute(_SchemaModel):
    """Fields shared by every attribute."""

    key: str = Field(..., min_length=1, description="Attribute key.")
    type: str = Field(..., min_length=1, description="Appwrite attribute type.")
    required: bool = Field(False, description="Whether the attribute is required.")
    is_array: bool = Field(False, alias="array", description="Whether the attribute holds a list.")
    size: Optional[int] = Field(None, description="Maximum size for string attributes.")
    enum_values: Optional[List[str]] = Field(
        None, alias="elements", description="Allowed values for enum attributes."
    )
    format: Optional[str] = Field(None, description="Attribute format (e.g. 'enum', 'email').")

    @property
    def is_enum(self) -> bool:
        """True for enum attributes that declare at least one value."""
        return self.format == AttributeTypes.ENUM_FORMAT and bool(self.enum_values)

    @property
    def is_relationship(self) -> bool:
        return False


class ScalarAttribute(BaseAttribute):
    """A primitive (string, integer, float, boolean, datetime) attribute."""


class RelationshipAttribute(BaseAttribute):
    """An attribute linking one collection to another."""

    related_collection: str = Field(..., alias="relatedCollection", min_length=1)
    # Kept as a plain string: unknown cardinalities fall back to a generic
    # reference type instead of failing validation.
    relation_type: str = Field("", alias="relationType")
    two_way: bool = Field(False, alias="twoWay")
    two_way_key: Optional[str] = Field(None, alias="twoWayKey")
    side: str = Field(RelationSide.PARENT.value)
    on_delete: str = Field(OnDelete.RESTRICT.value, alias="onDelete")

    @property
    def is_relationship(self) -> bool:
        return True


def _attribute_kind(value: Any) -> str:
    if isinstance(value, Mapping):
        kind = value.get("type")
    else:
        kind = getattr(value, "type", None)
    return "relationship" if kind == AttributeTypes.RELATIONSHIP else "scalar"


Attribute = Annotated[
    Union[
        Annotated[RelationshipAttribute, Tag("relationship")],
        Annotated[ScalarAttribute, Tag("scalar")],
    ],
    Discriminator(_attribute_kind),
]


class Collection(_SchemaModel):
    """A named group of attributes."""

    id: Optional[str] = Field(None, alias="$id")
    name: str
    attributes: List[Attribute] = Field(default_factory=list)

    @property
    def identifier(self) -> str:
        """Backend identifier, falling back to the name when ``$id`` is absent."""
        return self.id if self.id else self.name

    @property
    def is_processable(self) -> bool:
        return bool(self.attributes)


class Database(_SchemaModel):
    """A database in the Appwrite project."""

    id: str = Field(..., alias="$id")
    name: str


class AppwriteSchema(_SchemaModel):
    """The validated schema document."""

    databases: List[Database] = Field(default_factory=list)
    collections: List[Collection]

    @property
    def processable_collections(self) -> List[Collection]:
        """Collections with at least one attribute, in document order."""
        return [collection for collection in self.collections if collection.is_processable]


def _format_location(loc) -> str:
    parts = [str(item) for item in loc]
    return " -> ".join(parts) if parts else "Top Level"


def parse_schema(document: Any) -> AppwriteSchema:
    """
    Validate a parsed schema document into an ``AppwriteSchema``.

    Args:
        document: The parsed JSON document (or an already built schema)

    Returns:
        The validated schema

    Raises:
        StructuralError: If the document is not an object, has no
            ``collections`` list, or any entry has the wrong shape
    """
    if isinstance(document, AppwriteSchema):
        return document

    if document is None or not isinstance(document, Mapping):
        raise StructuralError(
            "Invalid input configuration: Must be a non-null object",
            context={"received_type": type(document).__name__},
        )

    if not isinstance(document.get("collections"), list):
        raise StructuralError(
            "No collections found in input configuration",
            location="collections",
        )

    try:
        schema = AppwriteSchema.model_validate(document)
    except ValidationError as e:
        problems: Dict[str, str] = {}
        for error in e.errors():
            problems[_format_location(error.get("loc", ()))] = error.get("msg", "Unknown error")
        first_location = next(iter(problems), None)
        raise StructuralError(
            f"Schema document has an invalid shape ({e.error_count()} problem(s))",
            location=first_location,
            context={"errors": problems},
        ) from e

    logger.debug(
        f"Parsed schema with {len(schema.databases)} database(s) and "
        f"{len(schema.collections)} collection(s)"
    )
    return schema
