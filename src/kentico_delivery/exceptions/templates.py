"""
Standardized error codes and message templates.

Keeps the wording of client errors consistent across the exception classes.
"""


class ErrorCodes:
    """Error codes for programmatic handling of delivery errors."""

    CONFIG_MISSING = "CONFIG_MISSING"
    CONFIG_INVALID = "CONFIG_INVALID"

    API_ERROR = "API_ERROR"
    SERVER_ERROR = "SERVER_ERROR"
    DESERIALIZATION_FAILED = "DESERIALIZATION_FAILED"
    CONNECTION_FAILED = "CONNECTION_FAILED"


class ErrorMessageTemplates:
    """Message templates for consistent formatting."""

    CONFIG_MISSING = "{description} is not specified."
    CONFIG_INVALID = "Invalid configuration for '{field}': got {value!r}, expected {expected}"

    INVALID_PROJECT_ID = (
        "Provided string is not a valid project identifier ({value}). "
        "Have you accidentally passed the Preview API key instead of the project identifier?"
    )

    API_ERROR = "Kentico Delivery API request failed (HTTP {status_code}): {message}"
    SERVER_ERROR = (
        "Unknown error with Kentico Delivery API (HTTP {status_code}). "
        "The service is likely suffering site issues."
    )
    DESERIALIZATION_FAILED = "Response from {url} could not be read as {target}: {details}"
    CONNECTION_FAILED = "Connection to {url} failed: {details}"
