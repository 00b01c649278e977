"""
Naming convention utilities for the Appwrite types generator.

This module converts collection names, attribute keys and enum values into the
identifiers used in generated TypeScript, and quotes values as TypeScript
string literals.
"""

import json
import re
from typing import Callable, Optional

from ..constants import NamingStrategies


_SEGMENT_SEPARATOR = re.compile(r"[-_\s]+")
_TS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def singularize(name: str) -> str:
    """
    Strip a single trailing plural ``s``.

    Example:
        >>> singularize("users")
        'user'
        >>> singularize("status")
        'statu'
    """
    if name.endswith("s"):
        return name[:-1]
    return name


def to_pascal_case(name: str) -> str:
    """
    Split on ``-``, ``_`` and whitespace; upper-case each segment's first character.

    The rest of each segment is left untouched, so ``blogPost`` stays
    ``BlogPost`` rather than becoming ``Blogpost``.

    Example:
        >>> to_pascal_case("blog_post-tags")
        'BlogPostTags'
    """
    return "".join(word[:1].upper() + word[1:] for word in _SEGMENT_SEPARATOR.split(name))


def generate_type_name(collection_name: str) -> str:
    """Type name for a collection: singular, pascal-cased."""
    return to_pascal_case(singularize(collection_name))


def generate_interface_name(collection_name: str, prefix: str = "", suffix: str = "") -> str:
    """Interface name for a collection with optional prefix and suffix."""
    return f"{prefix}{generate_type_name(collection_name)}{suffix}"


def generate_enum_type_name(collection_name: str, attribute_key: str) -> str:
    """
    Qualified name of the enum extracted from an attribute.

    Example:
        >>> generate_enum_type_name("users", "account_status")
        'UserAccountStatus'
    """
    return f"{generate_type_name(collection_name)}{to_pascal_case(attribute_key)}"


def format_enum_key(value: str, strategy: str = NamingStrategies.PASCAL) -> str:
    """
    Enum member name for an enum value under the given naming strategy.

    Non-alphanumeric characters become underscores. A name that would start
    with a digit is prefixed with ``_``. An empty value becomes ``_``.

    Example:
        >>> format_enum_key("in-progress")
        'IN_PROGRESS'
        >>> format_enum_key("in-progress", "camel")
        'iN_PROGRESS'
        >>> format_enum_key("in-progress", "snake")
        'in_progress'
    """
    sanitized = re.sub(r"[^a-zA-Z0-9]", "_", value).upper()
    if sanitized[:1].isdigit():
        sanitized = f"_{sanitized}"
    if not sanitized:
        sanitized = "_"

    if strategy == NamingStrategies.CAMEL:
        return sanitized[:1].lower() + sanitized[1:]
    if strategy == NamingStrategies.SNAKE:
        return sanitized.lower()
    return sanitized


def default_naming_transform(name: str) -> str:
    """
    Default transform applied to entity names before they become constant keys.

    Trims, collapses whitespace runs to ``_`` and drops every other character
    that is not a letter, digit or underscore.
    """
    name = name.strip()
    name = re.sub(r"\s+", "_", name)
    return re.sub(r"[^a-zA-Z0-9_]", "", name)


def format_constant_name(
    name: str,
    prefix: str = "",
    suffix: str = "",
    transform: Optional[Callable[[str], str]] = None,
) -> str:
    """
    Constant key for a database or collection name.

    Example:
        >>> format_constant_name("Main DB")
        'MAIN_DB'
        >>> format_constant_name("2024 archive", prefix="DB_")
        'DB__2024_ARCHIVE'
    """
    transformed = (transform or default_naming_transform)(name)

    sanitized = re.sub(r"[^a-zA-Z0-9_]", "_", transformed)
    if sanitized[:1].isdigit():
        sanitized = f"_{sanitized}"
    if not sanitized:
        sanitized = "_"

    return f"{prefix}{sanitized.upper()}{suffix}"


def is_valid_identifier(name: str) -> bool:
    """Check if a string can be used unquoted as a TypeScript property name."""
    return bool(_TS_IDENTIFIER.match(name))


def format_property_name(name: str) -> str:
    """Property name for an interface field, quoted when it is not an identifier."""
    if is_valid_identifier(name):
        return name
    return ts_string(name)


def ts_string(value: str) -> str:
    """Double-quoted TypeScript string literal."""
    return json.dumps(value, ensure_ascii=False)


def ts_single_quoted(value: str) -> str:
    """Single-quoted TypeScript string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{escaped}'"


def doc_text(value) -> str:
    """Text safe to embed in a ``/** ... */`` comment."""
    return str(value).replace("*/", "*\\/").replace("\n", " ")
