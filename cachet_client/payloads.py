"""Request body shaping for Cachet write endpoints.

Some fields make the Cachet API fail even though it returns them on
read. They are removed from outgoing bodies here:

- ``tags`` on component create/update causes a 500 Internal Server Error
- ``component_id`` without ``component_status`` on incident create/update
  causes a 400 Bad Request
- ``created_at`` on incident update causes a 500 Internal Server Error

Each function returns a new mapping and leaves its input untouched.
"""

from collections.abc import Mapping
from typing import Any

from cachet_client.models import CachetObject


Payload = Mapping[str, Any] | CachetObject


def to_body(data: Payload) -> dict[str, Any]:
    """Convert an entity or mapping into a mutable request body.

    Args:
        data: Entity model or plain mapping.

    Returns:
        A new dict; entities are serialized with ``to_dict()``.
    """
    if isinstance(data, CachetObject):
        return data.to_dict()
    return dict(data)


def shape_component_body(data: Payload) -> dict[str, Any]:
    """Build a component create/update body without ``tags``."""
    body = to_body(data)
    body.pop("tags", None)
    return body


def shape_incident_body(data: Payload, *, updating: bool = False) -> dict[str, Any]:
    """Build an incident create/update body.

    Args:
        data: Incident entity or mapping.
        updating: Whether the body is for an update, which also drops
            ``created_at``.

    Returns:
        Request body.
    """
    body = to_body(data)
    if updating:
        body.pop("created_at", None)
    if "component_status" not in body:
        body.pop("component_id", None)
    return body
