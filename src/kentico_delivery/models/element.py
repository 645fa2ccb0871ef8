"""
Element models.

An element is a single field of a content item or content type. Its ``value``
shape depends on the element type (text, number, rich_text, asset, ...), so it
is kept as plain JSON.
"""

from typing import Any, List, Optional

from pydantic import Field

from .base import DeliveryModel


class ElementOption(DeliveryModel):
    """Option of a multiple choice element."""

    name: str = ""
    codename: str = ""


class Element(DeliveryModel):
    """Element of a content item or content type."""

    type: str
    name: str = ""
    codename: Optional[str] = None
    value: Any = None
    options: List[ElementOption] = Field(default_factory=list)
    taxonomy_group: Optional[str] = None
