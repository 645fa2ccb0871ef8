"""Command-line interface for the Kentico Delivery client."""

from .main import cli

__all__ = ["cli"]
