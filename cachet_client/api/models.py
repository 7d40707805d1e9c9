"""Result types for the Cachet API layer."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ApiErrorClass(str, Enum):
    """Classification of failed API calls.

    - AUTHENTICATION: 401, token missing or rejected
    - NOT_FOUND: 404, unknown resource
    - APPLICATION: Other non-2xx with a structured errors[] body
    - TRANSPORT: Other non-2xx with an empty or unstructured body
    """

    AUTHENTICATION = "AUTHENTICATION"
    NOT_FOUND = "NOT_FOUND"
    APPLICATION = "APPLICATION"
    TRANSPORT = "TRANSPORT"


class ApiResponse(BaseModel):
    """Uniform outcome of a single API call.

    On success ``data`` holds the unwrapped envelope payload and
    ``message`` is None. On failure ``message`` describes the error and
    ``data`` is None. Use ``success()`` and ``failure()`` to build one.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ok: bool = Field(description="Whether the call succeeded (2xx)")
    data: Any = Field(default=None, description="Envelope payload on success")
    message: str | None = Field(default=None, description="Error message on failure")
    status_code: int | None = Field(
        default=None, description="HTTP status code of the response"
    )
    error_class: ApiErrorClass | None = Field(
        default=None, description="Failure classification"
    )

    @classmethod
    def success(cls, data: Any, status_code: int | None = None) -> "ApiResponse":
        """Build a successful response.

        Args:
            data: Payload extracted from the envelope.
            status_code: HTTP status code.

        Returns:
            ApiResponse with ok=True.
        """
        return cls(ok=True, data=data, status_code=status_code)

    @classmethod
    def failure(
        cls,
        message: str,
        error_class: ApiErrorClass,
        status_code: int | None = None,
    ) -> "ApiResponse":
        """Build a failed response.

        Args:
            message: Human-readable error message.
            error_class: Classification of the failure.
            status_code: HTTP status code.

        Returns:
            ApiResponse with ok=False.
        """
        return cls(
            ok=False,
            message=message,
            error_class=error_class,
            status_code=status_code,
        )

    def __bool__(self) -> bool:
        return self.ok
