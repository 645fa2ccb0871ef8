"""
Client for the Kentico Cloud Delivery API.

DeliveryClient validates its DeliveryOptions once, at construction, and then
issues authenticated GET requests for content items, content types and
content type elements, returning typed response models.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Tuple, Type, TypeVar, Union

from pydantic import ValidationError

from kentico_delivery.config import DeliveryOptions
from kentico_delivery.constants import (
    ACCEPT_HEADER,
    AUTHORIZATION_HEADER,
    BEARER_TEMPLATE,
    ELEMENTS,
    HTTP_CLIENT_ERROR_MIN,
    HTTP_SERVER_ERROR_MIN,
    ITEMS,
    JSON_CONTENT_TYPE,
    PROJECT_ID_PLACEHOLDER,
    TYPES,
    UUID_CANONICAL_LENGTH,
)
from kentico_delivery.exceptions import (
    ApiError,
    DeserializationError,
    ErrorMessageTemplates,
    InvalidConfigurationError,
    MissingConfigurationError,
    ServerError,
)
from kentico_delivery.infrastructure.http import HttpClient, HttpResponse, HttpTransport
from kentico_delivery.models import (
    ContentItemResponse,
    ContentItemsListingResponse,
    ContentType,
    ContentTypesListingResponse,
    Element,
    KenticoError,
)
from kentico_delivery.query import DeliveryParameterBuilder

logger = logging.getLogger(__name__)

T = TypeVar("T")
Params = Union[Iterable[Tuple[str, str]], DeliveryParameterBuilder, None]


CANONICAL_UUID = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}\Z"
)


def _is_canonical_uuid(value: str) -> bool:
    return len(value) == UUID_CANONICAL_LENGTH and CANONICAL_UUID.match(value) is not None


class DeliveryClient:
    """Executes requests against the Kentico Cloud Delivery API."""

    def __init__(self, delivery_options: DeliveryOptions, transport: Optional[HttpTransport] = None):
        """Initialize a client for retrieving content of the specified project.

        Args:
            delivery_options: The settings of the Kentico Cloud project
            transport: Optional HTTP transport; a requests-based HttpClient
                is created and owned by the client when omitted

        Raises:
            ConfigurationError: If the options are missing or invalid
        """
        self._validate_options(delivery_options)
        self.delivery_options = delivery_options
        self._owns_transport = transport is None
        self.transport = transport if transport is not None else HttpClient(timeout=delivery_options.timeout)

    @staticmethod
    def _validate_options(delivery_options: Optional[DeliveryOptions]) -> None:
        if delivery_options is None:
            raise MissingConfigurationError(
                "delivery_options", "The Delivery options object"
            )

        project_id = delivery_options.project_id
        if not project_id:
            raise MissingConfigurationError(
                "project_id", "Kentico Cloud project identifier"
            )

        if not _is_canonical_uuid(project_id):
            raise InvalidConfigurationError(
                "project_id",
                project_id,
                "a UUID in canonical 8-4-4-4-12 form",
                message=ErrorMessageTemplates.INVALID_PROJECT_ID.format(value=project_id),
            )

        if delivery_options.use_preview_api:
            if not delivery_options.preview_api_key:
                raise MissingConfigurationError(
                    "preview_api_key", "The Preview API key"
                )
            endpoint_field = "preview_endpoint"
        else:
            endpoint_field = "production_endpoint"

        endpoint = getattr(delivery_options, endpoint_field)
        if PROJECT_ID_PLACEHOLDER not in endpoint:
            raise InvalidConfigurationError(
                endpoint_field,
                endpoint,
                f"a URL template containing '{PROJECT_ID_PLACEHOLDER}'",
            )

    # Content items

    def get_items(self, params: Params = None) -> ContentItemsListingResponse:
        """Retrieve content items, optionally filtered by query parameters."""
        return self._get(ITEMS, params, ContentItemsListingResponse)

    def get_item(self, codename: str, params: Params = None) -> ContentItemResponse:
        """Retrieve a single content item by codename."""
        return self._get(f"{ITEMS}/{codename}", params, ContentItemResponse)

    # Content types

    def get_types(self, params: Params = None) -> ContentTypesListingResponse:
        """Retrieve content types."""
        return self._get(TYPES, params, ContentTypesListingResponse)

    def get_type(self, codename: str, params: Params = None) -> ContentType:
        """Retrieve a single content type by codename."""
        return self._get(f"{TYPES}/{codename}", params, ContentType)

    def get_content_type_element(
        self, type_codename: str, element_codename: str, params: Params = None
    ) -> Element:
        """Retrieve a single element of a content type."""
        path = f"{TYPES}/{type_codename}/{ELEMENTS}/{element_codename}"
        return self._get(path, params, Element)

    # Request execution

    def _get(self, path: str, params: Params, response_type: Type[T]) -> T:
        url = self._build_url(path)
        response = self.transport.get(
            url,
            params=self._normalize_params(params),
            headers=self._build_headers(),
            timeout=self.delivery_options.timeout,
        )
        self._handle_error_if_necessary(url, response)
        return self._deserialize(url, response, response_type)

    def _build_url(self, path: str) -> str:
        return f"{self._get_base_url()}/{path}"

    def _build_headers(self) -> Dict[str, str]:
        headers = {ACCEPT_HEADER: JSON_CONTENT_TYPE}
        if self.delivery_options.use_preview_api:
            headers[AUTHORIZATION_HEADER] = BEARER_TEMPLATE.format(
                key=self.delivery_options.preview_api_key
            )
        return headers

    @staticmethod
    def _normalize_params(params: Params) -> List[Tuple[str, str]]:
        if params is None:
            return []
        return [(name, value) for name, value in params]

    def _get_base_url(self) -> str:
        options = self.delivery_options
        if options.use_preview_api:
            template = options.preview_endpoint
        else:
            template = options.production_endpoint
        return template.replace(PROJECT_ID_PLACEHOLDER, options.project_id)

    def _handle_error_if_necessary(self, url: str, response: HttpResponse) -> None:
        status_code = response.status_code
        if status_code >= HTTP_SERVER_ERROR_MIN:
            logger.debug("Delivery API returned server error %s for %s", status_code, url)
            raise ServerError(status_code, url)
        if status_code >= HTTP_CLIENT_ERROR_MIN:
            try:
                error = KenticoError.model_validate_json(response.content)
            except ValidationError:
                logger.debug("Unreadable error payload for HTTP %s from %s", status_code, url)
                raise ApiError(status_code, f"HTTP {status_code}", url=url) from None
            raise ApiError(status_code, error.message, error, url=url)

    @staticmethod
    def _deserialize(url: str, response: HttpResponse, response_type: Type[T]) -> T:
        try:
            return response_type.model_validate_json(response.content)
        except ValidationError as e:
            raise DeserializationError(
                url, response_type.__name__, str(e), response.status_code
            ) from e

    # Resource management

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "DeliveryClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
