"""
Exception hierarchy for the Appwrite types generator.

Every error carries a message, an optional context dictionary describing where
the failure happened, and a list of suggestions for fixing it.
"""

from typing import Dict, Any, Optional, List


class TypeGeneratorError(Exception):
    """
    Base exception for all generator errors.

    Provides rich context and error recovery guidance.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        error_code: Optional[str] = None
    ):
        """
        Initialize the exception with context and recovery suggestions.

        Args:
            message: Human-readable error message
            context: Additional context about where/why the error occurred
            suggestions: List of potential solutions or next steps
            error_code: Unique error code for programmatic handling
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        self.error_code = error_code

    def __str__(self) -> str:
        """Return formatted error message with context."""
        lines = [self.message]

        if self.error_code:
            lines.append(f"Error Code: {self.error_code}")

        if self.context:
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        if self.suggestions:
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  • {suggestion}")

        return "\n".join(lines)


class ConfigurationError(TypeGeneratorError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_file: str = None, **kwargs):
        context = kwargs.get('context', {})
        if config_file:
            context['config_file'] = config_file

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the configuration file syntax",
                "Verify inputPath and outputPath are set",
                "Check the README for configuration examples"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CONFIG_ERROR"
        )


class SchemaReadError(TypeGeneratorError):
    """Raised when the schema document cannot be read or parsed."""

    def __init__(self, message: str, path: str = None, **kwargs):
        context = kwargs.get('context', {})
        if path:
            context['path'] = path

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Verify the schema file exists and is readable",
                "Run `appwrite pull collections` to refresh appwrite.json",
                "Check the file is valid JSON"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="SCHEMA_READ_ERROR"
        )


class StructuralError(TypeGeneratorError):
    """Raised when the schema document does not have the expected shape."""

    def __init__(self, message: str, location: str = None, **kwargs):
        context = kwargs.get('context', {})
        if location:
            context['location'] = location

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "The schema must be a JSON object with a 'collections' list",
                "Each collection needs a 'name' and an 'attributes' list",
                "Each attribute needs a non-empty 'key' and 'type'"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="STRUCTURAL_ERROR"
        )


class UnsupportedTypeError(TypeGeneratorError):
    """Raised when an attribute's primitive type has no TypeScript mapping."""

    def __init__(
        self,
        message: str,
        attribute_key: str = None,
        attribute_type: str = None,
        collection_name: str = None,
        attribute_name: str = None,
        **kwargs
    ):
        self.attribute_key = attribute_key
        self.attribute_type = attribute_type
        self.collection_name = collection_name
        self.attribute_name = attribute_name

        context = kwargs.get('context', {})
        if attribute_key:
            context['attribute_key'] = attribute_key
        if attribute_type:
            context['attribute_type'] = attribute_type
        if collection_name:
            context['collection'] = collection_name
        if attribute_name:
            context['attribute'] = attribute_name

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Supported types are: string, integer, float, boolean, datetime, relationship",
                "Check the attribute definition in appwrite.json"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="UNSUPPORTED_TYPE_ERROR"
        )


class FileSystemError(TypeGeneratorError):
    """Raised when generated output cannot be written."""

    def __init__(self, message: str, path: str = None, **kwargs):
        context = kwargs.get('context', {})
        if path:
            context['path'] = path

        super().__init__(
            message,
            context=context,
            suggestions=kwargs.get('suggestions') or [
                "Check the output directory is writable",
            ],
            error_code="FILE_SYSTEM_ERROR"
        )


class DocumentValidationError(TypeGeneratorError):
    """Raised when a document does not conform to its collection."""

    def __init__(self, message: str, collection: str = None, **kwargs):
        context = kwargs.get('context', {})
        if collection:
            context['collection'] = collection

        super().__init__(
            message,
            context=context,
            suggestions=kwargs.get('suggestions', []),
            error_code="VALIDATION_ERROR"
        )


class GenerationError(TypeGeneratorError):
    """
    Raised by the generation pipeline.

    Wraps whatever went wrong while loading the schema or producing the
    declarations; the original exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, cause: Exception = None, **kwargs):
        context = kwargs.get('context', {})
        if isinstance(cause, TypeGeneratorError):
            context.update(cause.context)
            if cause.error_code:
                context['cause'] = cause.error_code
            suggestions = kwargs.get('suggestions') or cause.suggestions
        else:
            if cause is not None:
                context['cause'] = type(cause).__name__
            suggestions = kwargs.get('suggestions', [])

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="GENERATION_ERROR"
        )
