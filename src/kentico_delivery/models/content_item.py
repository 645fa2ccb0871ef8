"""
Content item models.

Covers the ``items`` and ``items/{codename}`` responses of the Delivery API.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from .base import DeliveryModel, trim_fractional_seconds
from .element import Element
from .pagination import Pagination


class ContentItemSystem(DeliveryModel):
    """System attributes of a content item."""

    id: str = ""
    name: str = ""
    codename: str = ""
    language: Optional[str] = None
    type: str = ""
    sitemap_locations: List[str] = Field(default_factory=list)
    last_modified: Optional[datetime] = None

    @field_validator("last_modified", mode="before")
    @classmethod
    def trim_last_modified(cls, v):
        return trim_fractional_seconds(v)


class ContentItem(DeliveryModel):
    """A content item with its elements keyed by codename."""

    system: ContentItemSystem
    elements: Dict[str, Element] = Field(default_factory=dict)

    def get_element(self, codename: str) -> Optional[Element]:
        """Return the element with the given codename, or None."""
        return self.elements.get(codename)

    def get_string(self, codename: str) -> Optional[str]:
        """Return the value of a text-like element, or None if it is missing."""
        element = self.get_element(codename)
        if element is None or element.value is None:
            return None
        return str(element.value)

    def get_value(self, codename: str, default: Any = None) -> Any:
        """Return an element's raw value, or default if the element is missing."""
        element = self.get_element(codename)
        return default if element is None else element.value


class ContentItemsListingResponse(DeliveryModel):
    """Response of the ``items`` endpoint."""

    items: List[ContentItem]
    modular_content: Dict[str, ContentItem] = Field(default_factory=dict)
    pagination: Pagination = Field(default_factory=Pagination)


class ContentItemResponse(DeliveryModel):
    """Response of the ``items/{codename}`` endpoint."""

    item: ContentItem
    modular_content: Dict[str, ContentItem] = Field(default_factory=dict)
