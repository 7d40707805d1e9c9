"""Python client for the Cachet status page API.

    from cachet_client import CachetClient, ComponentStatus

    client = CachetClient(
        "https://status.example.com/api/v1",
        "rRpHYVhsNnG12X3N4ufr",
        basic_auth={"user": "cachet", "password": "test"},
    )
    for component in client.get_components({"status": ComponentStatus.MAJOR_OUTAGE}) or []:
        print(component.name)
"""

from cachet_client.api import ApiClient, ApiErrorClass, ApiResponse
from cachet_client.client import CachetClient
from cachet_client.config import BasicAuth, ClientConfig
from cachet_client.errors import CachetDecodeError, CachetError, CachetTransportError
from cachet_client.models import (
    CachetObject,
    Component,
    ComponentGroup,
    ComponentStatus,
    GroupCollapsed,
    Incident,
    IncidentStatus,
    Metric,
    MetricCalcType,
    MetricPoint,
    MetricView,
    Subscriber,
    ValidationError,
)
from cachet_client.settings import CachetSettings


__version__ = "0.1.0"

__all__ = [
    # Clients
    "ApiClient",
    "CachetClient",
    # Results
    "ApiErrorClass",
    "ApiResponse",
    # Config
    "BasicAuth",
    "CachetSettings",
    "ClientConfig",
    # Errors
    "CachetDecodeError",
    "CachetError",
    "CachetTransportError",
    "ValidationError",
    # Entities
    "CachetObject",
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
