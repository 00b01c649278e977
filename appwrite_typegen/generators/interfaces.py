import logging
from typing import Iterable, List, NamedTuple, Optional

from ..codegen import render_template
from ..config import InterfaceConfig
from ..constants import METADATA_FIELDS, AttributeTypes, TemplateNames
from ..domain.models import BaseAttribute, Collection, RelationshipAttribute
from ..domain.naming import format_property_name, generate_interface_name
from ..domain.type_mapping import TypeConverter


logger = logging.getLogger(__name__)


class InterfaceField(NamedTuple):
    name: str
    marker: str
    type: str
    comments: List[str]


class MetadataField(NamedTuple):
    name: str
    marker: str
    type: str
    description: str


class InterfaceGenerator:
    """Generates TypeScript interfaces from Appwrite collections."""

    @classmethod
    def generate_interfaces(
        cls,
        collections: Iterable[Collection],
        config: Optional[InterfaceConfig] = None,
    ) -> str:
        """
        Generate one interface per collection.

        Raises:
            UnsupportedTypeError: If any attribute has an unknown type
        """
        config = config or InterfaceConfig()
        return "\n\n".join(
            cls.generate_collection_interface(collection, config)
            for collection in collections
        )

    @classmethod
    def generate_collection_interface(
        cls,
        collection: Collection,
        config: Optional[InterfaceConfig] = None,
    ) -> str:
        """
        Generate the interface for a single collection.

        Args:
            collection: Collection to generate the interface for
            config: Interface generation options (defaults when omitted)

        Returns:
            The rendered ``export interface`` declaration

        Raises:
            UnsupportedTypeError: If any attribute has an unknown type; no
                partial declaration is returned
        """
        config = config or InterfaceConfig()
        interface_name = generate_interface_name(
            collection.name,
            config.interface_prefix,
            config.interface_suffix,
        )

        fields = [cls.generate_attribute_field(attribute, collection.name) for attribute in collection.attributes]
        metadata_fields = cls._metadata_fields(config) if config.include_metadata else []

        logger.debug(f"Generating interface {interface_name} with {len(fields)} field(s)")
        return render_template(
            TemplateNames.INTERFACE,
            {
                "collection_name": collection.name,
                "interface_name": interface_name,
                "metadata_fields": metadata_fields,
                "fields": fields,
            },
        )

    @classmethod
    def generate_attribute_field(cls, attribute: BaseAttribute, collection_name: str = None) -> InterfaceField:
        """Build the field for one attribute: name, optional marker, type, comments."""
        type_name = TypeConverter.convert(
            attribute,
            {"collection_name": collection_name, "attribute_name": attribute.key}
            if collection_name else {"attribute_name": attribute.key},
        )
        return InterfaceField(
            name=format_property_name(attribute.key),
            marker="" if attribute.required else "?",
            type=type_name,
            comments=cls.generate_attribute_comments(attribute),
        )

    @staticmethod
    def generate_attribute_comments(attribute: BaseAttribute) -> List[str]:
        """Descriptive doc lines shown above a field."""
        comments: List[str] = []

        if attribute.size:
            comments.append(f"Maximum size: {attribute.size} characters")

        if attribute.format == AttributeTypes.ENUM_FORMAT and attribute.enum_values:
            comments.append(f"Possible values: {', '.join(attribute.enum_values)}")

        if isinstance(attribute, RelationshipAttribute):
            comments.append(f"Relationship type: {attribute.relation_type}")
            comments.append(f"Related collection: {attribute.related_collection}")
            if attribute.two_way:
                comments.append(f"Two-way relationship with key: {attribute.two_way_key}")
            comments.append(f"Deletion behavior: {attribute.on_delete}")

        return comments

    @staticmethod
    def _metadata_fields(config: InterfaceConfig) -> List[MetadataField]:
        marker = "?" if config.optional_metadata else ""
        return [
            MetadataField(name=name, marker=marker, type=ts_type, description=description)
            for name, ts_type, description in METADATA_FIELDS
        ]
