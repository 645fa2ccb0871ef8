"""
HTTP transport abstraction for the Delivery client.

DeliveryClient talks to the network only through the HttpTransport protocol,
so tests and applications can substitute their own transport. HttpClient is
the default implementation, built on a reusable requests session.
"""

import logging
from typing import Dict, Optional, Protocol, Sequence, Tuple, runtime_checkable

import requests
from requests.adapters import HTTPAdapter

from kentico_delivery.constants import DEFAULT_TIMEOUT_SECONDS
from kentico_delivery.exceptions import DeliveryConnectionError

QueryParams = Sequence[Tuple[str, str]]


@runtime_checkable
class HttpResponse(Protocol):
    """The parts of an HTTP response the client reads."""

    status_code: int
    content: bytes


@runtime_checkable
class HttpTransport(Protocol):
    """Protocol for executing blocking HTTP GET requests.

    Implementations raise DeliveryConnectionError when the request cannot be
    completed (DNS failure, refused connection, timeout).
    """

    def get(
        self,
        url: str,
        params: Optional[QueryParams] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> HttpResponse:
        ...

    def close(self) -> None:
        ...


class HttpClient:
    """requests-based transport with a session reused across calls."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        """Initialize HTTP client with configuration.

        Args:
            session: Optional existing session to use
            timeout: Default request timeout in seconds
        """
        self.timeout = timeout
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        # Use provided session or create new one
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """Create a session with the default connection pool and no retries."""
        session = requests.Session()

        adapter = HTTPAdapter(max_retries=0)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def get(
        self,
        url: str,
        params: Optional[QueryParams] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        """Perform GET request.

        Args:
            url: Absolute request URL
            params: Ordered query parameter pairs
            headers: Request headers
            timeout: Request timeout, defaults to the client timeout

        Returns:
            Response object

        Raises:
            DeliveryConnectionError: If the request could not be completed
        """
        self.logger.debug("GET %s", url)

        try:
            response = self.session.get(
                url,
                params=list(params) if params else None,
                headers=headers,
                timeout=timeout if timeout is not None else self.timeout,
            )
        except requests.RequestException as e:
            raise DeliveryConnectionError(url, str(e)) from e

        self._log_response(response)
        return response

    def _log_response(self, response: requests.Response) -> None:
        """Log response details."""
        self.logger.debug("Response: %s - %s bytes", response.status_code, len(response.content))

    def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            self.session.close()
