"""Unit tests for API result models."""

import pytest
from pydantic import ValidationError

from cachet_client.api import ApiErrorClass, ApiResponse


class TestApiErrorClass:
    """Tests for ApiErrorClass enum."""

    def test_values(self) -> None:
        """Test enum values."""
        assert ApiErrorClass.AUTHENTICATION.value == "AUTHENTICATION"
        assert ApiErrorClass.NOT_FOUND.value == "NOT_FOUND"
        assert ApiErrorClass.APPLICATION.value == "APPLICATION"
        assert ApiErrorClass.TRANSPORT.value == "TRANSPORT"


class TestApiResponse:
    """Tests for ApiResponse model."""

    def test_success(self) -> None:
        """Test building a successful response."""
        response = ApiResponse.success({"id": 1}, status_code=200)

        assert response.ok is True
        assert response.data == {"id": 1}
        assert response.message is None
        assert response.error_class is None
        assert bool(response) is True

    def test_failure(self) -> None:
        """Test building a failed response."""
        response = ApiResponse.failure(
            "Requested resource not found", ApiErrorClass.NOT_FOUND, 404
        )

        assert response.ok is False
        assert response.data is None
        assert response.message == "Requested resource not found"
        assert response.status_code == 404
        assert bool(response) is False

    def test_frozen(self) -> None:
        """Test that responses are immutable."""
        response = ApiResponse.success(None)

        with pytest.raises(ValidationError):
            response.ok = False

    def test_extra_fields_forbidden(self) -> None:
        """Test that unknown fields are rejected."""
        with pytest.raises(ValidationError):
            ApiResponse(ok=True, payload={})
