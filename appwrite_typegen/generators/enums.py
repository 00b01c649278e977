import logging
from typing import Dict, Iterable, List, NamedTuple, Optional

from ..codegen import render_template
from ..config import EnumConfig
from ..constants import TemplateNames
from ..domain.models import Collection
from ..domain.naming import format_enum_key, generate_enum_type_name
from ..domain.type_mapping import literal_union


logger = logging.getLogger(__name__)


class EnumMember(NamedTuple):
    name: str
    value: str


class EnumDefinitions(NamedTuple):
    """Rendered enum declarations and union type aliases."""

    enum_definitions: str
    type_definitions: str


class EnumGenerator:
    """
    Extracts enum attributes from collections and renders them as TypeScript
    enums and literal union type aliases.
    """

    @staticmethod
    def extract_enum_types(collections: Iterable[Collection]) -> Dict[str, List[str]]:
        """
        Collect enum attributes across collections.

        Returns:
            Qualified type name -> enum values, in first-seen order. A later
            attribute with the same qualified name replaces the values but
            keeps the original position.
        """
        enum_types: Dict[str, List[str]] = {}

        for collection in collections:
            for attribute in collection.attributes:
                if not attribute.is_enum:
                    continue

                type_name = generate_enum_type_name(collection.name, attribute.key)
                if type_name in enum_types:
                    logger.debug(
                        f"Enum type {type_name} from {collection.name}.{attribute.key} "
                        f"replaces an earlier definition"
                    )
                enum_types[type_name] = list(attribute.enum_values)

        return enum_types

    @staticmethod
    def generate_enum(type_name: str, values: List[str], naming_strategy: str = "pascal") -> str:
        """Render a single ``export enum`` declaration."""
        members = [EnumMember(format_enum_key(value, naming_strategy), value) for value in values]
        return render_template(
            TemplateNames.ENUM,
            {"type_name": type_name, "members": members},
        )

    @staticmethod
    def generate_union_type(type_name: str, values: List[str]) -> str:
        """Render a single ``export type <Name>Type = ...`` alias."""
        return render_template(
            TemplateNames.UNION_TYPE,
            {"type_name": type_name, "union": literal_union(values)},
        )

    @classmethod
    def generate_enum_definitions(
        cls,
        collections: Iterable[Collection],
        config: Optional[EnumConfig] = None,
    ) -> EnumDefinitions:
        """
        Generate enum and union type definitions for all enum attributes.

        Args:
            collections: Collections to extract enum types from
            config: Enum generation options (defaults when omitted)

        Returns:
            The enum declarations and the union type aliases, each as one
            block of text with declarations separated by blank lines
        """
        config = config or EnumConfig()
        enum_types = cls.extract_enum_types(collections)

        enums: List[str] = []
        unions: List[str] = []
        for type_name, values in enum_types.items():
            if config.generate_enums:
                enums.append(cls.generate_enum(type_name, values, config.naming_strategy))
            if config.generate_union_types:
                unions.append(cls.generate_union_type(type_name, values))

        logger.debug(f"Generated {len(enums)} enum(s) and {len(unions)} union type(s)")
        return EnumDefinitions(
            enum_definitions="\n\n".join(enums),
            type_definitions="\n\n".join(unions),
        )
