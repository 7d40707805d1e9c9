"""Component group entity."""

from cachet_client.models.base import CachetObject, Flag, RequiredText, read_only
from cachet_client.models.constants import GroupCollapsed


class ComponentGroup(CachetObject):
    """A named group of components."""

    name: RequiredText
    order: int | None = None
    collapsed: GroupCollapsed | None = None
    visible: Flag | None = None

    created_at: str | None = read_only("Creation timestamp")
    updated_at: str | None = read_only("Last update timestamp")
