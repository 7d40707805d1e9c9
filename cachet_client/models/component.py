"""Component entity."""

from pydantic import Field

from cachet_client.models.base import (
    CachetObject,
    Flag,
    OptionalRef,
    RequiredText,
    read_only,
)
from cachet_client.models.constants import ComponentStatus


class Component(CachetObject):
    """A monitored part of the system shown on the status page.

    A component belongs to zero or one component group through
    ``group_id`` (0 means ungrouped).
    """

    name: RequiredText
    status: ComponentStatus
    description: str | None = None
    link: str | None = None
    order: int | None = None
    group_id: OptionalRef | None = None
    enabled: Flag | None = None
    tags: dict[str, str] | list[str] | None = Field(
        default=None, description="Server-side tags; never accepted on write"
    )

    status_name: str | None = read_only("Human-readable status label")
    created_at: str | None = read_only("Creation timestamp")
    updated_at: str | None = read_only("Last update timestamp")
