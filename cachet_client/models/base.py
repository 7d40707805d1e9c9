"""Base class and shared field types for Cachet entities."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _reject_bool(value: Any) -> Any:
    # bool is an int subclass; True must not become id 1
    if isinstance(value, bool):
        msg = "identifier must be an integer, not a boolean"
        raise ValueError(msg)
    return value


def _parse_flag(value: Any) -> Any:
    """Accept only booleans, 0/1 and "0"/"1" for API flags."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value in ("0", "1"):
        return value == "1"
    msg = f"flag must be a boolean, 0 or 1, got {value!r}"
    raise ValueError(msg)


# Identifiers assigned by the server are always positive
PositiveId = Annotated[int, BeforeValidator(_reject_bool), Field(ge=1)]

# Foreign keys where 0 means "not linked" (e.g. ungrouped component)
OptionalRef = Annotated[int, BeforeValidator(_reject_bool), Field(ge=0)]

RequiredText = Annotated[str, Field(min_length=1)]

# Cachet stores flags as 0/1
Flag = Annotated[bool, BeforeValidator(_parse_flag)]


def read_only(description: str) -> Any:
    """Declare a server-managed field that is never sent back on write."""
    return Field(default=None, exclude=True, description=description)


class CachetObject(BaseModel):
    """Base for all entity models.

    Fields are validated on construction and on assignment, so a
    rejected value raises ``pydantic.ValidationError`` naming the field
    and the offending input. Unknown keys in API payloads are ignored.
    """

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    id: PositiveId | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize writable fields that are set into a JSON-ready mapping.

        Returns:
            Mapping suitable for a request body. ``None`` values and
            read-only fields are omitted.
        """
        return self.model_dump(mode="json", exclude_none=True)
