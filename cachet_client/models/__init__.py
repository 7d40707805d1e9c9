"""Typed entity models for Cachet API resources.

Each entity validates its fields on construction and assignment and
serializes itself with ``to_dict()`` for request bodies.
"""

from pydantic import ValidationError

from cachet_client.models.base import CachetObject
from cachet_client.models.component import Component
from cachet_client.models.component_group import ComponentGroup
from cachet_client.models.constants import (
    ComponentStatus,
    GroupCollapsed,
    IncidentStatus,
    MetricCalcType,
    MetricView,
)
from cachet_client.models.incident import Incident
from cachet_client.models.metric import Metric
from cachet_client.models.metric_point import MetricPoint
from cachet_client.models.subscriber import Subscriber


__all__ = [
    # Base
    "CachetObject",
    "ValidationError",
    # Entities
    "Component",
    "ComponentGroup",
    "Incident",
    "Metric",
    "MetricPoint",
    "Subscriber",
    # Enums
    "ComponentStatus",
    "GroupCollapsed",
    "IncidentStatus",
    "MetricCalcType",
    "MetricView",
]
