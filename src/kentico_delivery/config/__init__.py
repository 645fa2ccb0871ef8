"""Configuration for the Kentico Delivery client."""

from .models import DeliveryOptions, DeliverySettings

__all__ = ["DeliveryOptions", "DeliverySettings"]
