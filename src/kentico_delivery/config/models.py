"""
Configuration models for the Kentico Delivery client.

DeliveryOptions is the immutable settings object handed to DeliveryClient.
The model only coerces types; semantic checks (project identifier format,
preview key presence, endpoint templates) run once, when a client is built.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from kentico_delivery.constants import (
    DEFAULT_PREVIEW_ENDPOINT,
    DEFAULT_PRODUCTION_ENDPOINT,
    DEFAULT_TIMEOUT_SECONDS,
    MAX_TIMEOUT_SECONDS,
)


class DeliveryOptions(BaseModel):
    """Settings of a Kentico Cloud project."""

    model_config = ConfigDict(frozen=True)

    project_id: Optional[str] = Field(None, description="Kentico Cloud project identifier (UUID)")
    use_preview_api: bool = Field(False, description="Retrieve unpublished content via the Preview API")
    preview_api_key: Optional[str] = Field(None, description="Preview API key, required in preview mode")
    preview_endpoint: str = Field(
        DEFAULT_PREVIEW_ENDPOINT, description="Preview API URL template with a {project_id} slot"
    )
    production_endpoint: str = Field(
        DEFAULT_PRODUCTION_ENDPOINT, description="Delivery API URL template with a {project_id} slot"
    )
    timeout: float = Field(
        DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        le=MAX_TIMEOUT_SECONDS,
        description="Request timeout in seconds",
    )

    @classmethod
    def from_env(cls, **overrides: Any) -> "DeliveryOptions":
        """Build options from ``KENTICO_*`` environment variables.

        Keyword arguments that are not None take precedence over the environment.
        """
        settings = DeliverySettings()
        data: Dict[str, Any] = settings.to_options_data()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**data)


class DeliverySettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    kentico_project_id: Optional[str] = Field(None, alias="KENTICO_PROJECT_ID")
    kentico_use_preview_api: Optional[bool] = Field(None, alias="KENTICO_USE_PREVIEW_API")
    kentico_preview_api_key: Optional[str] = Field(None, alias="KENTICO_PREVIEW_API_KEY")
    kentico_preview_endpoint: Optional[str] = Field(None, alias="KENTICO_PREVIEW_ENDPOINT")
    kentico_production_endpoint: Optional[str] = Field(None, alias="KENTICO_PRODUCTION_ENDPOINT")
    kentico_timeout: Optional[float] = Field(None, alias="KENTICO_TIMEOUT")

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    def to_options_data(self) -> Dict[str, Any]:
        """Return the values that are set, keyed by DeliveryOptions field name."""
        mapping = {
            "kentico_project_id": "project_id",
            "kentico_use_preview_api": "use_preview_api",
            "kentico_preview_api_key": "preview_api_key",
            "kentico_preview_endpoint": "preview_endpoint",
            "kentico_production_endpoint": "production_endpoint",
            "kentico_timeout": "timeout",
        }
        data = {}
        for setting_name, option_name in mapping.items():
            value = getattr(self, setting_name)
            if value is not None:
                data[option_name] = value
        return data
