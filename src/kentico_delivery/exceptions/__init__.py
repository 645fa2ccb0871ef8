"""
Kentico Delivery exception hierarchy.

Exception Hierarchy:
    DeliveryError (base)
    ├── ConfigurationError
    │   ├── MissingConfigurationError
    │   └── InvalidConfigurationError
    └── RequestError
        ├── ApiError
        ├── ServerError
        ├── DeserializationError
        └── DeliveryConnectionError

Components:
- base: Core DeliveryError base class
- config: Configuration validation exceptions
- api: Request/response exceptions
- templates: Error codes and message templates
"""

from .api import ApiError, DeliveryConnectionError, DeserializationError, RequestError, ServerError
from .base import DeliveryError, ExceptionContext
from .config import ConfigurationError, InvalidConfigurationError, MissingConfigurationError
from .templates import ErrorCodes, ErrorMessageTemplates

__all__ = [
    # Base
    "DeliveryError",
    "ExceptionContext",
    # Configuration
    "ConfigurationError",
    "MissingConfigurationError",
    "InvalidConfigurationError",
    # API
    "RequestError",
    "ApiError",
    "ServerError",
    "DeserializationError",
    "DeliveryConnectionError",
    # Templates
    "ErrorCodes",
    "ErrorMessageTemplates",
]
