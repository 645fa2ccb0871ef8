"""
Content type models.

Covers the ``types`` and ``types/{codename}`` responses of the Delivery API.
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field, field_validator

from .base import DeliveryModel, trim_fractional_seconds
from .element import Element
from .pagination import Pagination


class ContentTypeSystem(DeliveryModel):
    """System attributes of a content type."""

    id: str = ""
    name: str = ""
    codename: str = ""
    last_modified: Optional[datetime] = None

    @field_validator("last_modified", mode="before")
    @classmethod
    def trim_last_modified(cls, v):
        return trim_fractional_seconds(v)


class ContentType(DeliveryModel):
    """A content type with its element definitions keyed by codename."""

    system: ContentTypeSystem
    elements: Dict[str, Element] = Field(default_factory=dict)


class ContentTypesListingResponse(DeliveryModel):
    """Response of the ``types`` endpoint."""

    types: List[ContentType]
    pagination: Pagination = Field(default_factory=Pagination)
