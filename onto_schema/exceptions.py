"""
Custom exception hierarchy for onto-schema.

The schema model itself degrades gracefully and never raises; these
exceptions cover the layers around it (settings loading and the builder)
and carry context plus recovery hints like the rest of the tooling.
"""

from typing import Dict, Any, Optional, List


class OntoSchemaError(Exception):
    """
    Base exception for all onto-schema errors.

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
        self.context = context or {}
        self.suggestions = suggestions or []
        self.error_code = error_code

    def __str__(self) -> str:
        """Return formatted error message with context."""
        lines = [super().__str__()]

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


class ConfigurationError(OntoSchemaError):
    """Raised when settings are invalid or cannot be read."""

    def __init__(self, message: str, config_file: str = None, **kwargs):
        context = dict(kwargs.get('context') or {})
        if config_file:
            context['config_file'] = config_file

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the settings file syntax",
                "Verify type_names only uses known kinds",
                "Remove the file to fall back to the defaults",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CONFIG_ERROR"
        )


class SchemaBuildError(OntoSchemaError):
    """Raised when a domain class builder is misused."""

    def __init__(self, message: str, class_name: str = None, **kwargs):
        context = dict(kwargs.get('context') or {})
        if class_name:
            context['class_name'] = class_name

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Populate every partition before calling build()",
                "Start a new DomainClassBuilder for another class",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="SCHEMA_BUILD_ERROR"
        )

