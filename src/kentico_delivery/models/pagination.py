"""Pagination model for listing responses."""

from pydantic import Field

from .base import DeliveryModel


class Pagination(DeliveryModel):
    """Paging information of a listing response."""

    skip: int = 0
    limit: int = 0
    count: int = 0
    next_page: str = Field("", description="URL of the next page, empty on the last page")

    @property
    def has_next_page(self) -> bool:
        return bool(self.next_page)
