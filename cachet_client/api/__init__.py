"""Request/response layer for the Cachet REST API.

This module provides:
- Request dispatch with token and optional basic authentication
- Normalization of every HTTP outcome into an ``ApiResponse``
- Header redaction for safe logging
- Metrics collection for observability
"""

from cachet_client.api.client import ApiClient
from cachet_client.api.constants import (
    HTTP_STATUS_NOT_FOUND,
    HTTP_STATUS_OK_MAX,
    HTTP_STATUS_OK_MIN,
    HTTP_STATUS_UNAUTHORIZED,
    MESSAGE_AUTH_FAILED,
    MESSAGE_NOT_FOUND,
    TOKEN_HEADER,
)
from cachet_client.api.metrics import ApiMetrics
from cachet_client.api.models import ApiErrorClass, ApiResponse
from cachet_client.api.redact import redact_headers, redact_url_credentials


__all__ = [
    # Client
    "ApiClient",
    # Models
    "ApiErrorClass",
    "ApiResponse",
    # Constants
    "HTTP_STATUS_OK_MIN",
    "HTTP_STATUS_OK_MAX",
    "HTTP_STATUS_UNAUTHORIZED",
    "HTTP_STATUS_NOT_FOUND",
    "MESSAGE_AUTH_FAILED",
    "MESSAGE_NOT_FOUND",
    "TOKEN_HEADER",
    # Metrics
    "ApiMetrics",
    # Redaction
    "redact_headers",
    "redact_url_credentials",
]
