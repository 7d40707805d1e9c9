"""Metric point entity."""

from typing import Annotated

from pydantic import Field

from cachet_client.models.base import CachetObject, PositiveId, read_only


class MetricPoint(CachetObject):
    """A single value recorded against a metric.

    ``timestamp`` is a Unix timestamp and is only meaningful on create;
    without it the server records the point at the current time.
    """

    metric_id: PositiveId | None = None
    value: float | None = None
    counter: Annotated[int, Field(ge=1)] | None = None
    timestamp: int | None = None

    calculated_value: float | None = read_only("Value after counter is applied")
    created_at: str | None = read_only("Creation timestamp")
    updated_at: str | None = read_only("Last update timestamp")
