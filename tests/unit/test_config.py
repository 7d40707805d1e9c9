"""Unit tests for client configuration."""

import pytest
from pydantic import ValidationError

from cachet_client.config import BasicAuth, ClientConfig


class TestBasicAuth:
    """Tests for BasicAuth model."""

    def test_create(self) -> None:
        """Test creating credentials."""
        auth = BasicAuth(user="cachet", password="test")

        assert auth.user == "cachet"
        assert auth.password == "test"

    def test_password_hidden_from_repr(self) -> None:
        """Test that the password does not appear in repr."""
        assert "test-secret" not in repr(BasicAuth(user="cachet", password="test-secret"))

    def test_extra_keys_rejected(self) -> None:
        """Test that unknown keys are rejected."""
        with pytest.raises(ValidationError):
            BasicAuth(user="cachet", password="test", realm="x")


class TestClientConfig:
    """Tests for ClientConfig model."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = ClientConfig(api_url="https://status.example.com/api/v1", api_token="t")

        assert config.basic_auth is None
        assert config.timeout_seconds == 30.0
        assert config.user_agent == "cachet-client/1.0"

    def test_strips_trailing_slash(self) -> None:
        """Test that trailing slashes are removed from the base URL."""
        config = ClientConfig(api_url="http://localhost/api/v1//", api_token="t")

        assert config.api_url == "http://localhost/api/v1"

    def test_rejects_non_http_url(self) -> None:
        """Test that non-http URLs are rejected."""
        with pytest.raises(ValidationError, match="api_url"):
            ClientConfig(api_url="ftp://status.example.com", api_token="t")

    def test_token_hidden_from_repr(self) -> None:
        """Test that the token does not appear in repr."""
        config = ClientConfig(api_url="http://localhost", api_token="very-secret")

        assert "very-secret" not in repr(config)

    def test_timeout_bounds(self) -> None:
        """Test timeout validation."""
        with pytest.raises(ValidationError):
            ClientConfig(api_url="http://localhost", api_token="t", timeout_seconds=0)

    def test_frozen(self) -> None:
        """Test that config is immutable."""
        config = ClientConfig(api_url="http://localhost", api_token="t")

        with pytest.raises(ValidationError):
            config.api_token = "other"
