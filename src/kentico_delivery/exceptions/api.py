"""
Exceptions raised while talking to the Delivery API.

One class per failure kind so callers can tell a bad request from a remote
outage, a contract mismatch or a network problem. All of them derive from
RequestError, which records the URL and, when a response arrived, its status.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

from .base import DeliveryError, ExceptionContext
from .templates import ErrorCodes, ErrorMessageTemplates

if TYPE_CHECKING:
    from kentico_delivery.models.error import KenticoError


class RequestError(DeliveryError):
    """Base class for failures of a single Delivery API request."""

    def __init__(
        self,
        message: str,
        url: Optional[str],
        status_code: Optional[int],
        help_text: str,
        error_code: str,
        technical_details: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ):
        self.url = url
        self.status_code = status_code
        context = ExceptionContext(
            help_text=help_text,
            error_code=error_code,
            context={"url": url, "status_code": status_code, **(extra or {})},
            technical_details=technical_details,
        )
        super().__init__(message, context)


class ApiError(RequestError):
    """Raised when the Delivery API answers with a 4xx status.

    ``message`` is the message returned by the service; ``error`` holds the
    full error payload when the body could be parsed.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        error: Optional["KenticoError"] = None,
        url: Optional[str] = None,
    ):
        self.error = error
        super().__init__(
            message,
            url,
            status_code,
            help_text="Check the requested codename, query parameters and API key",
            error_code=ErrorCodes.API_ERROR,
            technical_details=ErrorMessageTemplates.API_ERROR.format(
                status_code=status_code, message=message
            ),
            extra={"request_id": error.request_id if error else None},
        )

    @property
    def request_id(self) -> Optional[str]:
        return self.error.request_id if self.error else None


class ServerError(RequestError):
    """Raised when the Delivery API answers with a 5xx status."""

    def __init__(self, status_code: int, url: Optional[str] = None):
        super().__init__(
            ErrorMessageTemplates.SERVER_ERROR.format(status_code=status_code),
            url,
            status_code,
            help_text="The request may succeed if retried later",
            error_code=ErrorCodes.SERVER_ERROR,
        )


class DeserializationError(RequestError):
    """Raised when a successful response body does not match the expected shape."""

    def __init__(self, url: str, target: str, details: str, status_code: Optional[int] = None):
        self.target = target
        super().__init__(
            ErrorMessageTemplates.DESERIALIZATION_FAILED.format(
                url=url, target=target, details=details
            ),
            url,
            status_code,
            help_text="The Delivery API response format may have changed; upgrade the client",
            error_code=ErrorCodes.DESERIALIZATION_FAILED,
            technical_details=details,
            extra={"target": target},
        )


class DeliveryConnectionError(RequestError):
    """Raised when the HTTP request could not be completed."""

    def __init__(self, url: str, details: Optional[str] = None):
        super().__init__(
            ErrorMessageTemplates.CONNECTION_FAILED.format(
                url=url, details=details or "unknown error"
            ),
            url,
            None,
            help_text="Check your internet connection and the Delivery API status",
            error_code=ErrorCodes.CONNECTION_FAILED,
        )
