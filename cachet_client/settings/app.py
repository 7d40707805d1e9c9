"""Client settings powered by Pydantic BaseSettings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cachet_client.config import BasicAuth, ClientConfig


class CachetSettings(BaseSettings):
    """Environment configuration for a Cachet client."""

    model_config = SettingsConfigDict(
        env_prefix="", case_sensitive=False, env_file=".env", env_file_encoding="utf-8"
    )

    api_url: str = Field(validation_alias="CACHET_API_URL")
    api_token: str = Field(validation_alias="CACHET_API_TOKEN", repr=False)
    basic_auth_user: str | None = Field(
        default=None, validation_alias="CACHET_BASIC_AUTH_USER"
    )
    basic_auth_password: str | None = Field(
        default=None, validation_alias="CACHET_BASIC_AUTH_PASSWORD", repr=False
    )
    timeout_seconds: float = Field(
        default=30.0, validation_alias="CACHET_TIMEOUT_SECONDS"
    )

    def to_client_config(self) -> ClientConfig:
        """Build a client configuration from these settings.

        Basic auth is enabled when a user is set; the password must
        then be set as well.

        Returns:
            Validated client configuration.

        Raises:
            ValueError: If only half of the basic auth pair is set.
        """
        basic_auth = None
        if self.basic_auth_user is not None or self.basic_auth_password is not None:
            if self.basic_auth_user is None or self.basic_auth_password is None:
                msg = (
                    "CACHET_BASIC_AUTH_USER and CACHET_BASIC_AUTH_PASSWORD "
                    "must be set together"
                )
                raise ValueError(msg)
            basic_auth = BasicAuth(
                user=self.basic_auth_user, password=self.basic_auth_password
            )

        return ClientConfig(
            api_url=self.api_url,
            api_token=self.api_token,
            basic_auth=basic_auth,
            timeout_seconds=self.timeout_seconds,
        )


def get_settings() -> CachetSettings:
    """Get a settings instance."""
    return CachetSettings()
