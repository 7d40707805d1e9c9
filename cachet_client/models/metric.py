"""Metric entity."""

from typing import Annotated

from pydantic import Field

from cachet_client.models.base import CachetObject, Flag, RequiredText, read_only
from cachet_client.models.constants import MetricCalcType, MetricView


class Metric(CachetObject):
    """A time series displayed as a chart on the status page."""

    name: RequiredText
    suffix: str | None = None
    description: str | None = None
    default_value: float | None = None
    calc_type: MetricCalcType | None = None
    display_chart: Flag | None = None
    places: Annotated[int, Field(ge=0, le=4)] | None = None
    default_view: MetricView | None = None
    threshold: Annotated[int, Field(ge=0)] | None = None
    order: int | None = None

    created_at: str | None = read_only("Creation timestamp")
    updated_at: str | None = read_only("Last update timestamp")
