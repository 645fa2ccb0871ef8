"""
Configuration-related exceptions.

Raised while a DeliveryClient validates its DeliveryOptions.
"""

from typing import Any, Optional

from .base import DeliveryError, ExceptionContext
from .templates import ErrorCodes, ErrorMessageTemplates


class ConfigurationError(DeliveryError):
    """Base class for configuration-related errors."""
    pass


class MissingConfigurationError(ConfigurationError):
    """Raised when a required configuration value is absent or empty."""

    def __init__(self, field: str, description: Optional[str] = None):
        self.field = field
        message = ErrorMessageTemplates.CONFIG_MISSING.format(
            description=description or f"Configuration value '{field}'"
        )
        context = ExceptionContext(
            help_text=f"Provide a value for '{field}' in DeliveryOptions",
            error_code=ErrorCodes.CONFIG_MISSING,
            context={"field": field},
        )
        super().__init__(message, context)


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration contains an invalid value."""

    def __init__(self, field: str, value: Any, expected: str, message: Optional[str] = None):
        self.field = field
        self.value = value
        self.expected = expected
        message = message or ErrorMessageTemplates.CONFIG_INVALID.format(
            field=field, value=value, expected=expected
        )
        context = ExceptionContext(
            help_text=f"Check '{field}' and ensure it matches the expected format: {expected}",
            error_code=ErrorCodes.CONFIG_INVALID,
            context={"field": field},
        )
        super().__init__(message, context)
