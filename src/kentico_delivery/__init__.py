"""
Kentico Delivery: client library for the Kentico Cloud Delivery API

Typed access to content items, content types and content type elements of a
Kentico Cloud project.

Architecture Overview:
- Config: DeliveryOptions and environment overrides
- Client: DeliveryClient issuing requests and deserializing responses
- Models: Response shapes returned by the API
- Infrastructure: HTTP transport used by the client
- Exceptions: Error kinds raised by the client
- CLI: Command-line access to the API
"""

__version__ = "0.1.0"

from .client import DeliveryClient
from .config import DeliveryOptions
from .exceptions import (
    ApiError,
    ConfigurationError,
    DeliveryConnectionError,
    DeliveryError,
    DeserializationError,
    RequestError,
    ServerError,
)
from .models import (
    ContentItem,
    ContentItemResponse,
    ContentItemsListingResponse,
    ContentType,
    ContentTypesListingResponse,
    Element,
    KenticoError,
    Pagination,
)
from .query import DeliveryParameterBuilder

__all__ = [
    "DeliveryClient",
    "DeliveryOptions",
    "DeliveryParameterBuilder",
    "DeliveryError",
    "ConfigurationError",
    "RequestError",
    "ApiError",
    "ServerError",
    "DeserializationError",
    "DeliveryConnectionError",
    "ContentItem",
    "ContentItemResponse",
    "ContentItemsListingResponse",
    "ContentType",
    "ContentTypesListingResponse",
    "Element",
    "KenticoError",
    "Pagination",
]
