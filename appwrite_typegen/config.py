"""
Configuration handling for the Appwrite types generator.

The effective configuration is built from three sources, each overriding the
previous one: built-in defaults, a config file (given explicitly or discovered
in the working directory) and caller overrides. Nested option sections are
merged key by key; everything else is replaced.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Literal, Mapping, NamedTuple, Optional, Type, Union

import yaml
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
)
from pydantic.alias_generators import to_camel

from .constants import CONFIG_FILE_SUFFIXES, CONFIG_SEARCH_PATHS, DefaultConfig
from .domain.models import Collection
from .domain.naming import default_naming_transform
from .exceptions import ConfigurationError


logger = logging.getLogger(__name__)


class TransformContext(NamedTuple):
    """What a transformer sees besides the text generated so far."""

    input_config: Dict[str, Any]
    collections: List[Collection]


Transformer = Callable[[str, TransformContext], str]


class _ConfigModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",  # Allow and ignore extra fields from input dict
    )


class EnumConfig(_ConfigModel):
    """Options for enum and union type generation."""

    generate_enums: bool = Field(
        DefaultConfig.GENERATE_ENUMS, description="Whether to generate enums."
    )
    generate_union_types: bool = Field(
        DefaultConfig.GENERATE_UNION_TYPES, description="Whether to generate union type aliases."
    )
    naming_strategy: Literal["pascal", "camel", "snake"] = Field(
        DefaultConfig.NAMING_STRATEGY, description="Naming strategy for enum members."
    )


class InterfaceConfig(_ConfigModel):
    """Options for interface generation."""

    include_metadata: bool = Field(
        DefaultConfig.INCLUDE_METADATA, description="Include $id, $createdAt, etc."
    )
    optional_metadata: bool = Field(
        DefaultConfig.OPTIONAL_METADATA, description="Mark metadata fields optional."
    )
    interface_prefix: str = Field("", description="Prefix for interface names.")
    interface_suffix: str = Field("", description="Suffix for interface names.")


class IdConstantsConfig(_ConfigModel):
    """Options for database and collection ID constants."""

    constant_prefix: str = Field("", description="Prefix for constant names.")
    constant_suffix: str = Field("", description="Suffix for constant names.")
    naming_transform: Callable[[str], str] = Field(
        default_naming_transform,
        description="Transform applied to entity names before sanitizing.",
    )
    include_comments: bool = Field(
        DefaultConfig.INCLUDE_COMMENTS, description="Emit a doc comment per constant."
    )


class GeneratorConfig(_ConfigModel):
    """Complete, immutable configuration for one generation run."""

    input_path: str = Field(DefaultConfig.INPUT_PATH, description="Path to appwrite.json.")
    output_path: str = Field(DefaultConfig.OUTPUT_PATH, description="Where to write the types.")

    generate_enums: bool = Field(DefaultConfig.GENERATE_ENUMS)
    generate_interfaces: bool = Field(DefaultConfig.GENERATE_INTERFACES)
    generate_database_constants: bool = Field(DefaultConfig.GENERATE_DATABASE_CONSTANTS)
    generate_collection_constants: bool = Field(DefaultConfig.GENERATE_COLLECTION_CONSTANTS)

    enum: EnumConfig = Field(
        default_factory=EnumConfig,
        validation_alias=AliasChoices("enum", "enumConfig"),
    )
    interface: InterfaceConfig = Field(
        default_factory=InterfaceConfig,
        validation_alias=AliasChoices("interface", "interfaceConfig"),
    )
    id_constants: IdConstantsConfig = Field(
        default_factory=IdConstantsConfig,
        validation_alias=AliasChoices("id_constants", "idConstants", "idConstantsConfig"),
    )

    transformers: List[Transformer] = Field(
        default_factory=list,
        description="Post-generation text transformers, applied in order.",
    )


# Top-level keys whose values are merged key by key instead of replaced
_SECTION_MODELS: Dict[str, Type[_ConfigModel]] = {
    "enum": EnumConfig,
    "interface": InterfaceConfig,
    "id_constants": IdConstantsConfig,
}


def _key_lookup(model_cls: Type[BaseModel]) -> Dict[str, str]:
    """Map every accepted spelling of a field to its field name."""
    lookup: Dict[str, str] = {}
    for name, field_info in model_cls.model_fields.items():
        lookup[name] = name
        lookup[to_camel(name)] = name
        if field_info.alias:
            lookup[field_info.alias] = name
        validation_alias = field_info.validation_alias
        if isinstance(validation_alias, str):
            lookup[validation_alias] = name
        elif isinstance(validation_alias, AliasChoices):
            for choice in validation_alias.choices:
                if isinstance(choice, str):
                    lookup[choice] = name
    return lookup


def _canonical_keys(model_cls: Type[BaseModel], values: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Rename keys to field names, dropping unknown keys and ``None`` values.

    When one field is spelled more than once, mappings are merged in order and
    any other value is replaced by the later spelling.
    """
    lookup = _key_lookup(model_cls)
    canonical: Dict[str, Any] = {}
    for key, value in values.items():
        if value is None:
            continue
        field_name = lookup.get(key)
        if field_name is None:
            logger.debug(f"Ignoring unknown configuration key: {key}")
            continue
        if field_name in canonical:
            logger.debug(f"Configuration key {key} repeats {field_name}; merging with the earlier value")
            previous = canonical[field_name]
            if isinstance(previous, Mapping) and isinstance(value, Mapping):
                value = {**previous, **value}
        canonical[field_name] = value
    return canonical


def _field_values(model: BaseModel) -> Dict[str, Any]:
    return {name: getattr(model, name) for name in type(model).model_fields}


def _format_validation_errors(error: ValidationError) -> Dict[str, str]:
    problems: Dict[str, str] = {}
    for item in error.errors():
        loc_parts = [str(loc_item) for loc_item in item.get("loc", ())]
        loc_str = " -> ".join(loc_parts) if loc_parts else "Top Level"
        problems[loc_str] = item.get("msg", "Unknown error")
    return problems


def validate_config(config_dict: Mapping[str, Any], source: Optional[str] = None) -> GeneratorConfig:
    """
    Validate a raw configuration dictionary against ``GeneratorConfig``.

    Raises:
        ConfigurationError: With one context entry per invalid location
    """
    try:
        return GeneratorConfig.model_validate(dict(config_dict))
    except ValidationError as e:
        logger.debug(f"Configuration validation failed: {e}")
        raise ConfigurationError(
            "Invalid configuration",
            config_file=source,
            context={"errors": _format_validation_errors(e)},
        ) from e


def merge_config(
    base: GeneratorConfig,
    override: Union[GeneratorConfig, Mapping[str, Any]],
    source: Optional[str] = None,
) -> GeneratorConfig:
    """
    Merge ``override`` on top of ``base`` and return a new config.

    Scalars and lists in ``override`` replace those of ``base``. The ``enum``,
    ``interface`` and ``id_constants`` sections are merged one level deep.
    Keys may use snake_case or camelCase; ``None`` values are ignored.
    """
    if isinstance(override, GeneratorConfig):
        override = _field_values(override)

    merged = _field_values(base)
    for key, value in _canonical_keys(GeneratorConfig, override).items():
        section_model = _SECTION_MODELS.get(key)
        if section_model is not None and isinstance(value, (Mapping, BaseModel)):
            section_values = _field_values(value) if isinstance(value, BaseModel) else value
            merged[key] = {
                **_field_values(merged[key]),
                **_canonical_keys(section_model, section_values),
            }
        else:
            merged[key] = value

    return validate_config(merged, source=source)


def find_config_file(config_path: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """
    Locate the config file to use.

    An explicitly given path must exist. Otherwise the default names are
    tried in order in the working directory.

    Raises:
        ConfigurationError: If an explicit path does not exist
    """
    if config_path:
        path = Path(config_path)
        if not path.is_file():
            raise ConfigurationError(
                f"Configuration file not found: {path}",
                config_file=str(path),
                context={"resolved_path": str(path.resolve())},
            )
        return path

    for candidate in CONFIG_SEARCH_PATHS:
        path = Path(candidate)
        if path.is_file():
            logger.debug(f"Found configuration file {path}")
            return path

    return None


def load_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a JSON or YAML config file into a dictionary.

    Raises:
        ConfigurationError: If the file cannot be read, parsed, or does not
            contain a mapping
    """
    path = Path(config_path)
    if path.suffix.lower() not in CONFIG_FILE_SUFFIXES:
        logger.warning(f"Unexpected config file extension '{path.suffix}', parsing as YAML")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid configuration file: {e}",
            config_file=str(path),
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Error reading configuration file: {e}",
            config_file=str(path),
        ) from e

    if data is None:
        logger.warning(f"Config file {path} is empty. Using defaults.")
        return {}

    if not isinstance(data, dict):
        raise ConfigurationError(
            "Configuration file must contain an object",
            config_file=str(path),
            context={"loaded_type": type(data).__name__},
        )

    logger.debug(f"Loaded configuration from {path}")
    return data


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    discover: bool = True,
) -> GeneratorConfig:
    """
    Build the effective configuration: defaults, then file, then overrides.

    Args:
        config_path: Explicit config file; must exist when given
        overrides: Caller-supplied values that win over the file
        discover: Look for a default config file when no path is given

    Returns:
        The merged, validated, immutable configuration
    """
    config = GeneratorConfig()

    file_path = find_config_file(config_path) if (config_path or discover) else None
    if file_path is not None:
        config = merge_config(config, load_config_file(file_path), source=str(file_path))

    if overrides:
        config = merge_config(config, overrides)
        logger.debug(f"Applied configuration overrides: {sorted(overrides)}")

    return config
