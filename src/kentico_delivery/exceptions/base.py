"""
Base exception classes for the Kentico Delivery client.

Provides DeliveryError, the root of every error the client raises.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ExceptionContext:
    """Details attached to a delivery error beyond its message."""

    help_text: Optional[str] = None
    error_code: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)
    technical_details: Optional[str] = None


class DeliveryError(Exception):
    """Base exception for all Kentico Delivery client errors.

    Catch this class to handle every failure raised by the client, or one of
    its subclasses to handle a single error kind.

    Attributes:
        message: The error message
        help_text: Optional guidance for fixing the configuration or request
        error_code: One of ErrorCodes, for programmatic handling
        context: Values describing the failed request or setting
        technical_details: Raw detail such as a validation report
        correlation_id: Short ID to find this error in application logs
    """

    def __init__(self, message: str, context: Optional[ExceptionContext] = None):
        context = context or ExceptionContext()
        self.message = message
        self.help_text = context.help_text
        self.error_code = context.error_code
        self.context = dict(context.context)
        self.technical_details = context.technical_details
        self.correlation_id = str(uuid.uuid4())[:8]
        super().__init__(message)

    def __str__(self) -> str:
        result = self.message
        if self.help_text:
            result += f"\n\nHelp: {self.help_text}"

        details = [f"{k}: {v}" for k, v in self.context.items() if v is not None]
        if details:
            result += f"\n\nContext: {', '.join(details)}"

        result += f"\n\nError ID: {self.correlation_id}"
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "correlation_id": self.correlation_id,
            "context": self.context,
            "help_text": self.help_text,
            "technical_details": self.technical_details,
        }
