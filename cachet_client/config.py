"""Construction configuration for the Cachet client."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_USER_AGENT = "cachet-client/1.0"


class BasicAuth(BaseModel):
    """HTTP basic authentication credentials.

    Sent on every request alongside the API token, for Cachet instances
    sitting behind a password-protected proxy.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    user: Annotated[str, Field(min_length=1)]
    password: str = Field(repr=False)


class ClientConfig(BaseModel):
    """Configuration for a ``CachetClient``.

    ``api_url`` is the base URL including the API version path, for
    example ``https://status.example.com/api/v1``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_url: Annotated[str, Field(min_length=1)]
    api_token: Annotated[str, Field(min_length=1, repr=False)]
    basic_auth: BasicAuth | None = None
    timeout_seconds: Annotated[float, Field(ge=1.0, le=300.0)] = 30.0
    user_agent: Annotated[str, Field(min_length=1, max_length=500)] = (
        DEFAULT_USER_AGENT
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Require an http(s) URL and strip any trailing slash."""
        if not v.startswith(("http://", "https://")):
            msg = f"api_url must start with http:// or https://, got {v!r}"
            raise ValueError(msg)
        return v.rstrip("/")
