"""Unit tests for environment settings."""

import pytest
from pydantic import ValidationError

from cachet_client import CachetClient
from cachet_client.settings import CachetSettings, get_settings


@pytest.fixture
def cachet_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Provide the required environment variables."""
    monkeypatch.setenv("CACHET_API_URL", "https://status.example.com/api/v1")
    monkeypatch.setenv("CACHET_API_TOKEN", "env-token")
    monkeypatch.delenv("CACHET_BASIC_AUTH_USER", raising=False)
    monkeypatch.delenv("CACHET_BASIC_AUTH_PASSWORD", raising=False)
    monkeypatch.delenv("CACHET_TIMEOUT_SECONDS", raising=False)


class TestCachetSettings:
    """Tests for CachetSettings."""

    def test_reads_environment(self, cachet_env: None) -> None:
        """Test that settings are read from the environment."""
        settings = CachetSettings(_env_file=None)

        assert settings.api_url == "https://status.example.com/api/v1"
        assert settings.api_token == "env-token"
        assert settings.timeout_seconds == 30.0

    def test_missing_token(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the token is required."""
        monkeypatch.setenv("CACHET_API_URL", "https://status.example.com/api/v1")
        monkeypatch.delenv("CACHET_API_TOKEN", raising=False)

        with pytest.raises(ValidationError):
            CachetSettings(_env_file=None)

    def test_to_client_config_without_basic_auth(self, cachet_env: None) -> None:
        """Test building a config without basic auth."""
        config = CachetSettings(_env_file=None).to_client_config()

        assert config.api_token == "env-token"
        assert config.basic_auth is None

    def test_to_client_config_with_basic_auth(
        self, cachet_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test building a config with basic auth."""
        monkeypatch.setenv("CACHET_BASIC_AUTH_USER", "cachet")
        monkeypatch.setenv("CACHET_BASIC_AUTH_PASSWORD", "test")
        monkeypatch.setenv("CACHET_TIMEOUT_SECONDS", "5")

        config = CachetSettings(_env_file=None).to_client_config()

        assert config.basic_auth is not None
        assert config.basic_auth.user == "cachet"
        assert config.timeout_seconds == 5.0

    def test_half_basic_auth_rejected(
        self, cachet_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that user without password is rejected."""
        monkeypatch.setenv("CACHET_BASIC_AUTH_USER", "cachet")

        with pytest.raises(ValueError, match="must be set together"):
            CachetSettings(_env_file=None).to_client_config()

    def test_get_settings(self, cachet_env: None) -> None:
        """Test the settings factory."""
        assert get_settings().api_token == "env-token"

    def test_client_from_settings(self, cachet_env: None) -> None:
        """Test creating a client from settings."""
        client = CachetClient.from_settings(CachetSettings(_env_file=None))

        assert client.api.config.api_url == "https://status.example.com/api/v1"
        client.close()
