"""Error payload returned by the Delivery API on 4xx responses."""

from typing import Optional

from .base import DeliveryModel


class KenticoError(DeliveryModel):
    """Message and identifiers describing why a request was rejected."""

    message: str
    request_id: Optional[str] = None
    error_code: Optional[int] = None
    specific_code: Optional[int] = None
