"""
Response models for the Kentico Delivery API.

Plain pydantic shapes mirroring the JSON returned by each endpoint.
"""

from .base import DeliveryModel
from .content_item import (
    ContentItem,
    ContentItemResponse,
    ContentItemsListingResponse,
    ContentItemSystem,
)
from .content_type import ContentType, ContentTypesListingResponse, ContentTypeSystem
from .element import Element, ElementOption
from .error import KenticoError
from .pagination import Pagination

__all__ = [
    "DeliveryModel",
    "ContentItem",
    "ContentItemSystem",
    "ContentItemResponse",
    "ContentItemsListingResponse",
    "ContentType",
    "ContentTypeSystem",
    "ContentTypesListingResponse",
    "Element",
    "ElementOption",
    "KenticoError",
    "Pagination",
]
