"""Subscriber entity."""

from typing import Annotated

from pydantic import Field

from cachet_client.models.base import CachetObject, Flag, read_only


class Subscriber(CachetObject):
    """An email address subscribed to status notifications."""

    email: Annotated[str, Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")]
    verify: Flag | None = Field(
        default=None, description="Skip the verification email when true"
    )

    verify_code: str | None = read_only("Verification code")
    verified_at: str | None = read_only("Verification timestamp")
    created_at: str | None = read_only("Creation timestamp")
    updated_at: str | None = read_only("Last update timestamp")
