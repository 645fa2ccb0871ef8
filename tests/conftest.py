"""
Pytest configuration and shared fixtures for Kentico Delivery tests.
"""

import json
from typing import Any, Dict
from unittest.mock import Mock

import pytest

from kentico_delivery.config import DeliveryOptions

PROJECT_ID = "975bf280-fd91-488c-994c-2f04416e5ee3"
PREVIEW_API_KEY = "ew0KICAiYWxnIjogIkhTMjU2IiwNCiAgInR5cCI6ICJKV1QiDQp9"


@pytest.fixture
def project_id():
    return PROJECT_ID


@pytest.fixture
def production_options():
    """Options targeting the production Delivery API."""
    return DeliveryOptions(project_id=PROJECT_ID)


@pytest.fixture
def preview_options():
    """Options targeting the Preview API."""
    return DeliveryOptions(
        project_id=PROJECT_ID,
        use_preview_api=True,
        preview_api_key=PREVIEW_API_KEY,
    )


@pytest.fixture
def make_response():
    """Factory for transport responses with a status code and JSON body."""

    def _make(status_code: int = 200, body: Any = None) -> Mock:
        response = Mock()
        response.status_code = status_code
        if body is None:
            response.content = b""
        elif isinstance(body, (bytes, str)):
            response.content = body.encode() if isinstance(body, str) else body
        else:
            response.content = json.dumps(body).encode()
        return response

    return _make


@pytest.fixture
def mock_transport(make_response):
    """Transport stub returning an empty items listing by default."""
    transport = Mock()
    transport.get.return_value = make_response(200, {"items": [], "modular_content": {}})
    return transport


@pytest.fixture
def content_item_data() -> Dict[str, Any]:
    return {
        "system": {
            "id": "f4b3fc05-e988-4dae-9ac1-a94aba566474",
            "name": "On Roasts",
            "codename": "on_roasts",
            "language": "default",
            "type": "article",
            "sitemap_locations": ["articles"],
            "last_modified": "2017-04-04T13:45:36.6565466Z",
        },
        "elements": {
            "title": {"type": "text", "name": "Title", "value": "On Roasts"},
            "post_date": {
                "type": "date_time",
                "name": "Post date",
                "value": "2014-11-07T00:00:00Z",
            },
            "personas": {
                "type": "taxonomy",
                "name": "Personas",
                "taxonomy_group": "personas",
                "value": [{"name": "Barista", "codename": "barista"}],
            },
        },
    }


@pytest.fixture
def items_listing_data(content_item_data) -> Dict[str, Any]:
    return {
        "items": [content_item_data],
        "modular_content": {},
        "pagination": {
            "skip": 0,
            "limit": 2,
            "count": 1,
            "next_page": "",
        },
    }


@pytest.fixture
def content_type_data() -> Dict[str, Any]:
    return {
        "system": {
            "id": "b7aa4a53-d9b1-48cf-b7a6-ed0b182c4b89",
            "name": "Article",
            "codename": "article",
            "last_modified": "2016-10-20T12:03:48.4628352Z",
        },
        "elements": {
            "title": {"type": "text", "name": "Title"},
            "category": {
                "type": "multiple_choice",
                "name": "Category",
                "options": [
                    {"name": "Coffee", "codename": "coffee"},
                    {"name": "Tea", "codename": "tea"},
                ],
            },
        },
    }
