"""Request dispatch and response normalization for the Cachet API."""

import time
from collections.abc import Mapping
from enum import Enum
from typing import Any

import httpx
import structlog

from cachet_client.api.constants import (
    ENVELOPE_DATA_KEY,
    ENVELOPE_ERRORS_KEY,
    ERROR_JOIN_SEPARATOR,
    ERROR_TITLE_SEPARATOR,
    HTTP_STATUS_NOT_FOUND,
    HTTP_STATUS_OK_MAX,
    HTTP_STATUS_OK_MIN,
    HTTP_STATUS_UNAUTHORIZED,
    JSON_CONTENT_TYPE,
    MESSAGE_AUTH_FAILED,
    MESSAGE_NOT_FOUND,
    REDIRECT_METHODS,
    TOKEN_HEADER,
)
from cachet_client.api.metrics import ApiMetrics
from cachet_client.api.models import ApiErrorClass, ApiResponse
from cachet_client.api.redact import redact_headers, redact_url_credentials
from cachet_client.config import ClientConfig
from cachet_client.errors import CachetDecodeError, CachetTransportError


logger = structlog.get_logger()

QueryParams = Mapping[str, Any]


class ApiClient:
    """Low-level Cachet API client.

    Builds requests against the configured base URL, attaches the API
    token (and basic auth when configured), executes them and normalizes
    every HTTP outcome into an ``ApiResponse``:

    - 2xx: payload is the ``data`` key of the JSON envelope
    - 401 and 404: fixed messages
    - other: ``"title: detail"`` pairs from the ``errors`` body joined
      with ``"; "``, or the HTTP reason phrase when there is none

    GET requests follow redirects; other methods report the 3xx as a
    failure. HTTP-level failures are never raised. Only transport failures
    (``CachetTransportError``) and undecodable 2xx bodies
    (``CachetDecodeError``) raise.

    Attributes:
        error: Message of the most recent failed call. Overwritten by
            every failure and not safe to share across threads.
        last_response: The most recent ``ApiResponse``.
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            config: Client configuration.
            http_client: Optional pre-built httpx client. The token header
                and basic auth are applied to it; it is not closed by
                ``close()``.
        """
        self._config = config
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(
            timeout=config.timeout_seconds,
            follow_redirects=True,
        )
        self._http.headers[TOKEN_HEADER] = config.api_token
        self._http.headers["User-Agent"] = config.user_agent
        self._http.headers["Accept"] = JSON_CONTENT_TYPE
        if config.basic_auth is not None:
            self._http.auth = httpx.BasicAuth(
                config.basic_auth.user, config.basic_auth.password
            )

        self._metrics = ApiMetrics.get_instance()
        self._log = logger.bind(component="api")

        self.error: str | None = None
        self.last_response: ApiResponse | None = None

    @property
    def config(self) -> ClientConfig:
        """Client configuration."""
        return self._config

    def get(self, path: str, params: QueryParams | None = None) -> ApiResponse:
        """Issue a GET request.

        Args:
            path: Path relative to the API base URL.
            params: Optional query string parameters.

        Returns:
            Normalized response.
        """
        return self._request("GET", path, params=params)

    def post(self, path: str, body: Mapping[str, Any] | None = None) -> ApiResponse:
        """Issue a POST request with a JSON body.

        Args:
            path: Path relative to the API base URL.
            body: Mapping serialized as the JSON request body.

        Returns:
            Normalized response.
        """
        return self._request("POST", path, body=body)

    def put(self, path: str, body: Mapping[str, Any] | None = None) -> ApiResponse:
        """Issue a PUT request with a JSON body.

        Args:
            path: Path relative to the API base URL.
            body: Mapping serialized as the JSON request body.

        Returns:
            Normalized response.
        """
        return self._request("PUT", path, body=body)

    def delete(self, path: str) -> ApiResponse:
        """Issue a DELETE request.

        Args:
            path: Path relative to the API base URL.

        Returns:
            Normalized response.
        """
        return self._request("DELETE", path)

    def close(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_http:
            self._http.close()

    def _request(
        self,
        method: str,
        path: str,
        params: QueryParams | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> ApiResponse:
        """Execute a request and classify the response.

        Args:
            method: HTTP method.
            path: Path relative to the API base URL.
            params: Query parameters (GET only).
            body: JSON body (POST/PUT only).

        Returns:
            Normalized response.

        Raises:
            CachetTransportError: If no response was received.
            CachetDecodeError: If a 2xx response body is not JSON.
        """
        url = f"{self._config.api_url}{path}"
        safe_url = redact_url_credentials(url)
        log = self._log.bind(method=method, url=safe_url)

        request_kwargs: dict[str, Any] = {
            "follow_redirects": method in REDIRECT_METHODS,
        }
        if params:
            request_kwargs["params"] = _encode_params(params)
        if method in ("POST", "PUT"):
            request_kwargs["json"] = dict(body) if body is not None else {}

        log.debug("api_request_start", headers=redact_headers(self._http.headers))

        start_time_ns = time.perf_counter_ns()
        try:
            response = self._http.request(method, url, **request_kwargs)
        except httpx.HTTPError as exc:
            self._metrics.record_transport_error()
            log.warning("api_transport_error", error=str(exc))
            msg = f"{method} {safe_url} failed: {exc}"
            raise CachetTransportError(msg, url=safe_url) from exc
        duration_ms = (time.perf_counter_ns() - start_time_ns) / 1_000_000

        self._metrics.record_request(method, response.status_code, duration_ms)

        result = self._classify_response(response)
        self.last_response = result

        if result.ok:
            log.debug(
                "api_request_complete",
                status_code=response.status_code,
                bytes=len(response.content),
                duration_ms=round(duration_ms, 2),
            )
        else:
            self.error = result.message
            if result.error_class is not None:
                self._metrics.record_failure(result.error_class)
            log.warning(
                "api_request_failed",
                status_code=response.status_code,
                error_class=result.error_class.value if result.error_class else None,
                message=result.message,
                duration_ms=round(duration_ms, 2),
            )

        return result

    def _classify_response(self, response: httpx.Response) -> ApiResponse:
        """Classify an HTTP response into an ApiResponse.

        Args:
            response: HTTP response.

        Returns:
            Normalized response.

        Raises:
            CachetDecodeError: If a 2xx response body is not JSON.
        """
        status_code = response.status_code

        if HTTP_STATUS_OK_MIN <= status_code < HTTP_STATUS_OK_MAX:
            return ApiResponse.success(self._extract_data(response), status_code)

        if status_code == HTTP_STATUS_UNAUTHORIZED:
            return ApiResponse.failure(
                MESSAGE_AUTH_FAILED, ApiErrorClass.AUTHENTICATION, status_code
            )

        if status_code == HTTP_STATUS_NOT_FOUND:
            return ApiResponse.failure(
                MESSAGE_NOT_FOUND, ApiErrorClass.NOT_FOUND, status_code
            )

        messages = self._extract_error_messages(response)
        if messages:
            return ApiResponse.failure(
                ERROR_JOIN_SEPARATOR.join(messages),
                ApiErrorClass.APPLICATION,
                status_code,
            )

        reason = response.reason_phrase or f"HTTP {status_code}"
        return ApiResponse.failure(reason, ApiErrorClass.TRANSPORT, status_code)

    def _extract_data(self, response: httpx.Response) -> Any:
        """Unwrap the ``data`` envelope of a successful response.

        Args:
            response: HTTP response with a 2xx status.

        Returns:
            Envelope payload, or None for an empty body.

        Raises:
            CachetDecodeError: If the body is not JSON.
        """
        if not response.content:
            return None

        try:
            document = response.json()
        except ValueError as exc:
            msg = f"Invalid JSON in {response.status_code} response: {exc}"
            raise CachetDecodeError(msg, status_code=response.status_code) from exc

        if isinstance(document, dict):
            return document.get(ENVELOPE_DATA_KEY)
        return None

    def _extract_error_messages(self, response: httpx.Response) -> list[str]:
        """Flatten an ``errors`` body into ``"title: detail"`` strings.

        Args:
            response: HTTP response with an error status.

        Returns:
            One message per error entry, empty when the body carries none.
        """
        if not response.content:
            return []

        try:
            document = response.json()
        except ValueError:
            return []

        if not isinstance(document, dict):
            return []

        errors = document.get(ENVELOPE_ERRORS_KEY)
        if not isinstance(errors, list):
            return []

        messages: list[str] = []
        for entry in errors:
            if not isinstance(entry, dict):
                continue
            title = entry.get("title") or ""
            detail = entry.get("detail") or ""
            messages.append(f"{title}{ERROR_TITLE_SEPARATOR}{detail}")
        return messages


def _encode_params(params: QueryParams) -> dict[str, Any]:
    """Prepare query parameters for httpx.

    Drops None values, sends enums by value and booleans as 1/0.

    Args:
        params: Caller-supplied filter mapping.

    Returns:
        Parameters ready for ``httpx.Client.request``.
    """
    encoded: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            encoded[key] = [_encode_scalar(item) for item in value]
        else:
            encoded[key] = _encode_scalar(value)
    return encoded


def _encode_scalar(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return int(value)
    return value
