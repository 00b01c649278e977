"""
Runtime validation of documents against a collection definition.

Uses the same attribute rules as type generation, so a document that passes
here matches the interface generated for its collection.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from .domain.models import Collection
from .domain.type_mapping import TypeConverter, TypeGuard
from .exceptions import DocumentValidationError


logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of a validation operation."""

    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    collection: str = None

    def __post_init__(self):
        """Ensure consistency."""
        if self.errors and self.is_valid:
            self.is_valid = False

    def add_error(self, error: str) -> None:
        """Add an error."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a warning."""
        self.warnings.append(warning)

    def raise_if_invalid(self) -> None:
        """Raise DocumentValidationError if invalid."""
        if not self.is_valid:
            raise DocumentValidationError(
                f"Validation failed: {'; '.join(self.errors)}",
                collection=self.collection,
                context={"errors": self.errors, "warnings": self.warnings},
            )


class DocumentValidator:
    """Validates documents belonging to one collection."""

    def __init__(self, collection: Collection):
        self.collection = collection
        self._guards: Dict[str, TypeGuard] = {
            attribute.key: TypeConverter.create_type_guard(attribute)
            for attribute in collection.attributes
            if not attribute.is_relationship
        }

    def validate(self, document: Mapping[str, Any]) -> ValidationResult:
        result = ValidationResult(collection=self.collection.name)

        if not isinstance(document, Mapping):
            result.add_error(f"Document must be an object, got {type(document).__name__}")
            return result

        for attribute in self.collection.attributes:
            if attribute.key not in document:
                if attribute.required:
                    result.add_error(f"Missing required attribute '{attribute.key}'")
                continue

            value = document[attribute.key]
            if value is None:
                if attribute.required:
                    result.add_error(f"Required attribute '{attribute.key}' is null")
                continue

            guard = self._guards.get(attribute.key)
            if guard is not None and not guard(value):
                result.add_error(
                    f"Attribute '{attribute.key}' has an invalid value {value!r} "
                    f"for type {attribute.type}{'[]' if attribute.is_array else ''}"
                )

        known_keys = {attribute.key for attribute in self.collection.attributes}
        for key in document:
            if key not in known_keys and not str(key).startswith("$"):
                result.add_warning(f"Unknown attribute '{key}'")

        if not result.is_valid:
            logger.debug(f"Document for {self.collection.name} failed validation: {result.errors}")
        return result
