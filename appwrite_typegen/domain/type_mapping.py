"""
Attribute type mapping for the Appwrite types generator.

This module contains the core logic for turning an Appwrite attribute into a
TypeScript type expression, and into a Python predicate that checks whether a
runtime value conforms to the attribute.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, TypedDict

from ..constants import (
    PRIMITIVE_TYPE_MAP,
    RELATIONSHIP_FALLBACK_TYPE,
    AttributeTypes,
    RelationSide,
    RelationType,
)
from ..exceptions import UnsupportedTypeError
from .models import BaseAttribute, RelationshipAttribute
from .naming import generate_type_name, ts_string


logger = logging.getLogger(__name__)

TypeGuard = Callable[[Any], bool]


class ConversionContext(TypedDict, total=False):
    """Where an attribute lives, for error reporting."""

    collection_name: str
    attribute_name: str


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def _accept_any(value: Any) -> bool:
    return True


PRIMITIVE_TYPE_GUARDS: Dict[str, TypeGuard] = {
    AttributeTypes.STRING: _is_string,
    AttributeTypes.INTEGER: _is_integer,
    AttributeTypes.FLOAT: _is_number,
    AttributeTypes.BOOLEAN: _is_boolean,
    AttributeTypes.DATETIME: _is_string,
}


def literal_union(values: List[str]) -> str:
    """``"a" | "b"`` for the given values."""
    return " | ".join(ts_string(value) for value in values)


class TypeConverter:
    """
    Converts Appwrite attributes to TypeScript type expressions.

    Conversion never looks at other attributes or collections, so the same
    attribute always converts to the same expression.
    """

    @classmethod
    def convert(
        cls,
        attribute: BaseAttribute,
        context: Optional[ConversionContext] = None,
    ) -> str:
        """
        Convert an attribute to a TypeScript type expression.

        Args:
            attribute: The attribute to convert
            context: Optional collection/attribute names for error reporting

        Returns:
            The type expression, e.g. ``string``, ``Array<number>`` or
            ``"admin" | "member"``

        Raises:
            UnsupportedTypeError: If the attribute has an unknown primitive type
        """
        if attribute.is_enum:
            return cls._convert_enum(attribute)

        if isinstance(attribute, RelationshipAttribute):
            return cls._convert_relationship(attribute)

        base_type = PRIMITIVE_TYPE_MAP.get(attribute.type)
        if base_type is None:
            cls._raise_unsupported_type(attribute, context)

        if attribute.is_array:
            return cls._convert_array(attribute, base_type)

        return base_type

    @classmethod
    def create_type_guard(cls, attribute: BaseAttribute) -> TypeGuard:
        """
        Build a predicate that checks a runtime value against the attribute.

        Enum attributes test membership, primitives test the Python type.
        Unknown types accept anything. Array attributes require a list whose
        items all pass.
        """
        if attribute.format == AttributeTypes.ENUM_FORMAT and attribute.enum_values is not None:
            valid_values = frozenset(attribute.enum_values)

            def check(value: Any) -> bool:
                return isinstance(value, str) and value in valid_values
        else:
            check = PRIMITIVE_TYPE_GUARDS.get(attribute.type, _accept_any)

        if attribute.is_array:
            return lambda value: isinstance(value, list) and all(check(item) for item in value)
        return check

    @staticmethod
    def _convert_enum(attribute: BaseAttribute) -> str:
        union = literal_union(attribute.enum_values)
        return f"({union})[]" if attribute.is_array else union

    @staticmethod
    def _convert_relationship(attribute: RelationshipAttribute) -> str:
        related_type = generate_type_name(attribute.related_collection)
        as_list = f"{related_type}[]"
        as_nullable = f"{related_type} | null"
        is_parent = attribute.side == RelationSide.PARENT.value

        relation_type = attribute.relation_type
        if relation_type == RelationType.ONE_TO_MANY.value:
            return as_list if is_parent else as_nullable
        if relation_type == RelationType.MANY_TO_ONE.value:
            return as_nullable if is_parent else as_list
        if relation_type in (RelationType.ONE_TO_ONE.value, RelationType.MANY_TO_MANY.value):
            return as_list

        logger.debug(
            f"Unknown relationship type '{relation_type}' on attribute '{attribute.key}', "
            f"using fallback type"
        )
        return RELATIONSHIP_FALLBACK_TYPE

    @staticmethod
    def _convert_array(attribute: BaseAttribute, base_type: str) -> str:
        # Element lists on non-enum attributes still narrow the item type
        if attribute.enum_values:
            return f"({literal_union(attribute.enum_values)})[]"
        return f"Array<{base_type}>"

    @staticmethod
    def _raise_unsupported_type(
        attribute: BaseAttribute,
        context: Optional[ConversionContext],
    ) -> None:
        context = context or {}
        collection_name = context.get("collection_name")
        attribute_name = context.get("attribute_name")

        message = f"Unsupported attribute type: {attribute.type}"
        if context:
            message += (
                f" in {collection_name or 'unknown'} collection, "
                f"attribute {attribute_name or 'unknown'}"
            )

        raise UnsupportedTypeError(
            message,
            attribute_key=attribute.key,
            attribute_type=attribute.type,
            collection_name=collection_name,
            attribute_name=attribute_name,
        )
