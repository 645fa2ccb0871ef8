"""
Unit tests for the delivery exception system.
"""

import pytest

from kentico_delivery.exceptions import (
    ApiError,
    ConfigurationError,
    DeliveryConnectionError,
    DeliveryError,
    DeserializationError,
    ErrorCodes,
    ExceptionContext,
    InvalidConfigurationError,
    MissingConfigurationError,
    RequestError,
    ServerError,
)
from kentico_delivery.models import KenticoError


@pytest.mark.unit
class TestDeliveryError:
    """Test the base DeliveryError class."""

    def test_basic_error_creation(self):
        error = DeliveryError("Test error message", ExceptionContext(help_text="Test help text"))

        error_str = str(error)
        assert "Test error message" in error_str
        assert "Help: Test help text" in error_str
        assert "Error ID:" in error_str
        assert error.help_text == "Test help text"
        assert error.error_code is None

    def test_error_without_context(self):
        error = DeliveryError("Test error")

        assert "Help:" not in str(error)
        assert error.context == {}
        assert len(error.correlation_id) == 8

    def test_correlation_ids_differ(self):
        assert DeliveryError("a").correlation_id != DeliveryError("b").correlation_id

    def test_to_dict(self):
        error = DeliveryError("Test", ExceptionContext(error_code="CODE_001", context={"a": 1}))

        data = error.to_dict()
        assert data["error_type"] == "DeliveryError"
        assert data["message"] == "Test"
        assert data["error_code"] == "CODE_001"
        assert data["context"] == {"a": 1}

    def test_context_rendered_without_empty_values(self):
        error = DeliveryError("Test", ExceptionContext(context={"url": "https://example.com", "status_code": None}))

        assert "Context: url: https://example.com" in str(error)
        assert "status_code" not in str(error)


@pytest.mark.unit
class TestConfigurationErrors:
    """Test configuration-related errors."""

    def test_missing_configuration_error(self):
        error = MissingConfigurationError("preview_api_key", "The Preview API key")

        assert isinstance(error, ConfigurationError)
        assert isinstance(error, DeliveryError)
        assert error.message == "The Preview API key is not specified."
        assert error.error_code == ErrorCodes.CONFIG_MISSING
        assert error.field == "preview_api_key"

    def test_missing_configuration_default_description(self):
        error = MissingConfigurationError("timeout")

        assert error.message == "Configuration value 'timeout' is not specified."

    def test_invalid_configuration_error(self):
        error = InvalidConfigurationError("production_endpoint", "https://x", "a URL template")

        assert isinstance(error, ConfigurationError)
        assert "production_endpoint" in error.message
        assert "'https://x'" in error.message
        assert error.error_code == ErrorCodes.CONFIG_INVALID

    def test_invalid_configuration_custom_message(self):
        error = InvalidConfigurationError("project_id", "abc", "a UUID", message="Bad id")

        assert error.message == "Bad id"
        assert error.value == "abc"


@pytest.mark.unit
class TestApiErrors:
    """Test errors raised while executing requests."""

    def test_api_error(self):
        payload = KenticoError(message="not found", request_id="req-1", error_code=100, specific_code=0)
        error = ApiError(404, "not found", payload)

        assert error.message == "not found"
        assert error.status_code == 404
        assert error.error is payload
        assert error.request_id == "req-1"
        assert error.context["status_code"] == 404
        assert "404" in error.technical_details

    def test_api_error_without_payload(self):
        error = ApiError(400, "HTTP 400")

        assert error.error is None
        assert error.request_id is None

    def test_server_error(self):
        error = ServerError(503)

        assert error.status_code == 503
        assert "503" in error.message
        assert error.error_code == ErrorCodes.SERVER_ERROR

    def test_deserialization_error(self):
        error = DeserializationError("https://x/items", "ContentItemsListingResponse", "items: Field required")

        assert error.target == "ContentItemsListingResponse"
        assert "https://x/items" in error.message
        assert error.technical_details == "items: Field required"

    def test_connection_error(self):
        error = DeliveryConnectionError("https://x/items", "Name or service not known")

        assert error.url == "https://x/items"
        assert "Name or service not known" in error.message
        assert error.error_code == ErrorCodes.CONNECTION_FAILED

    @pytest.mark.parametrize(
        "error",
        [
            ApiError(400, "bad"),
            ServerError(500),
            DeserializationError("u", "T", "d"),
            DeliveryConnectionError("u"),
        ],
    )
    def test_error_kinds_are_distinct(self, error):
        kinds = (ApiError, ServerError, DeserializationError, DeliveryConnectionError, ConfigurationError)

        assert sum(isinstance(error, kind) for kind in kinds) == 1

    @pytest.mark.parametrize(
        "error, status_code",
        [
            (ApiError(404, "not found", url="https://x/items/a"), 404),
            (ServerError(503, "https://x/items/a"), 503),
            (DeserializationError("https://x/items/a", "ContentItemResponse", "item: Field required", 200), 200),
            (DeliveryConnectionError("https://x/items/a", "timed out"), None),
        ],
    )
    def test_request_errors_carry_url_and_status(self, error, status_code):
        assert isinstance(error, RequestError)
        assert error.url == "https://x/items/a"
        assert error.status_code == status_code
        assert error.context["url"] == "https://x/items/a"

    def test_configuration_error_is_not_request_error(self):
        assert not isinstance(MissingConfigurationError("project_id", "id"), RequestError)
