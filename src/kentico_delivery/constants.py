"""
Constants for the Kentico Delivery client.

Endpoint templates, API path segments and request defaults used throughout
the client live here so they are defined in exactly one place.
"""

# Endpoint templates; ``{project_id}`` is substituted at request time
DEFAULT_PRODUCTION_ENDPOINT = "https://deliver.kenticocloud.com/{project_id}"
DEFAULT_PREVIEW_ENDPOINT = "https://preview-deliver.kenticocloud.com/{project_id}"
PROJECT_ID_PLACEHOLDER = "{project_id}"

# API path segments
ITEMS = "items"
TYPES = "types"
ELEMENTS = "elements"

# Request headers
ACCEPT_HEADER = "Accept"
AUTHORIZATION_HEADER = "Authorization"
JSON_CONTENT_TYPE = "application/json"
BEARER_TEMPLATE = "Bearer {key}"

# Network
DEFAULT_TIMEOUT_SECONDS = 30.0
MAX_TIMEOUT_SECONDS = 300.0

# Canonical textual UUID length (8-4-4-4-12 with hyphens)
UUID_CANONICAL_LENGTH = 36

# HTTP status boundaries
HTTP_CLIENT_ERROR_MIN = 400
HTTP_SERVER_ERROR_MIN = 500
