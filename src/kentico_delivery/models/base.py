"""Common base for Delivery API response models."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict

# Timestamps carry up to 7 fractional digits; Python datetimes hold 6
_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


class DeliveryModel(BaseModel):
    """Base model for JSON shapes returned by the Delivery API.

    Unknown fields are kept so nothing the API sends is lost.
    """

    model_config = ConfigDict(extra="allow")


def trim_fractional_seconds(value: Any) -> Any:
    """Truncate an ISO timestamp's fractional seconds to microseconds."""
    if isinstance(value, str):
        return _EXCESS_FRACTION.sub(r"\1", value, count=1)
    return value
