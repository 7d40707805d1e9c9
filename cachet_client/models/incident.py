"""Incident entity."""

from pydantic import Field

from cachet_client.models.base import (
    CachetObject,
    Flag,
    OptionalRef,
    RequiredText,
    read_only,
)
from cachet_client.models.constants import ComponentStatus, IncidentStatus


class Incident(CachetObject):
    """An incident or scheduled maintenance notice.

    An incident may reference one component. When it does,
    ``component_status`` sets that component's status at the same time;
    the API rejects a ``component_id`` sent without it.

    ``created_at`` is writable so incidents can be backdated on create,
    but the API rejects it on update.
    """

    name: RequiredText
    status: IncidentStatus
    message: str | None = None
    visible: Flag | None = None
    component_id: OptionalRef | None = None
    component_status: ComponentStatus | None = None
    notify: Flag | None = None
    template: str | None = None
    created_at: str | None = Field(default=None, description="Occurrence timestamp")

    human_status: str | None = read_only("Human-readable status label")
    updated_at: str | None = read_only("Last update timestamp")
