"""
Domain module for the Appwrite types generator.

This module contains the schema models and the mapping logic from Appwrite
attributes to TypeScript, separated from template rendering and file I/O.
"""

from .models import (
    Attribute,
    BaseAttribute,
    ScalarAttribute,
    RelationshipAttribute,
    Collection,
    Database,
    AppwriteSchema,
    parse_schema,
)

from .type_mapping import (
    TypeConverter,
    ConversionContext,
    TypeGuard,
    literal_union,
)

from .naming import (
    singularize,
    to_pascal_case,
    generate_type_name,
    generate_interface_name,
    generate_enum_type_name,
    format_enum_key,
    default_naming_transform,
    format_constant_name,
    format_property_name,
)

__all__ = [
    # Schema models
    'Attribute',
    'BaseAttribute',
    'ScalarAttribute',
    'RelationshipAttribute',
    'Collection',
    'Database',
    'AppwriteSchema',
    'parse_schema',

    # Type mapping
    'TypeConverter',
    'ConversionContext',
    'TypeGuard',
    'literal_union',

    # Naming
    'singularize',
    'to_pascal_case',
    'generate_type_name',
    'generate_interface_name',
    'generate_enum_type_name',
    'format_enum_key',
    'default_naming_transform',
    'format_constant_name',
    'format_property_name',
]
