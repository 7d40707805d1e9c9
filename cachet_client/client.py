"""High-level Cachet API client.

One method per API operation. Successful payloads are converted into
entity models; failures return ``None`` (or ``False`` for deletes) and
leave the message in ``CachetClient.error``::

    client = CachetClient("https://status.example.com/api/v1", "token")
    component = client.get_component(1)
    if component is None:
        raise SystemExit(client.error)

    component.status = ComponentStatus.PARTIAL_OUTAGE
    client.update_component(component)
"""

from collections.abc import Mapping
from typing import Any, TypeVar, overload

import httpx
import structlog
from pydantic import ValidationError

from cachet_client.api import ApiClient, ApiResponse
from cachet_client.api.constants import PING_PATH, VERSION_PATH
from cachet_client.config import DEFAULT_USER_AGENT, BasicAuth, ClientConfig
from cachet_client.models import (
    CachetObject,
    Component,
    ComponentGroup,
    Incident,
    Metric,
    MetricPoint,
    Subscriber,
)
from cachet_client.payloads import (
    Payload,
    shape_component_body,
    shape_incident_body,
    to_body,
)
from cachet_client.settings import CachetSettings


logger = structlog.get_logger()

EntityT = TypeVar("EntityT", bound=CachetObject)

# Identifiers may be given as int, numeric string or an entity carrying one
IdOrEntity = int | str | CachetObject
Params = Mapping[str, Any]

COMPONENTS_PATH = "/components"
COMPONENT_GROUPS_PATH = "/components/groups"
INCIDENTS_PATH = "/incidents"
METRICS_PATH = "/metrics"
SUBSCRIBERS_PATH = "/subscribers"


def resolve_id(value: IdOrEntity) -> int | str:
    """Normalize an id-or-entity argument to a bare id.

    Args:
        value: Identifier or entity.

    Returns:
        The identifier.

    Raises:
        ValueError: If an entity without an id is given.
    """
    if isinstance(value, CachetObject):
        if value.id is None:
            msg = f"{type(value).__name__} has no id"
            raise ValueError(msg)
        return value.id
    return value


def resolve_update(
    target: IdOrEntity, data: Payload | None
) -> tuple[int | str, Payload]:
    """Normalize the arguments of an update call.

    Accepts ``(id, data)``, ``(entity, data)`` or a single entity that
    carries its own id.

    Args:
        target: Identifier or entity.
        data: Changes to send; optional when ``target`` is an entity.

    Returns:
        Tuple of (id, payload).

    Raises:
        ValueError: If no payload can be determined or the entity has no id.
    """
    if data is None:
        if not isinstance(target, CachetObject):
            msg = "update requires data when called with a bare id"
            raise ValueError(msg)
        data = target
    return resolve_id(target), data


def resolve_metric_point(
    metric: int | str | Metric | MetricPoint,
    point: Any,
) -> tuple[int | str, Any]:
    """Normalize the (metric, point) arguments of metric point calls.

    Accepts ``(metric_id, point)``, ``(metric, point)`` or a single
    ``MetricPoint`` that carries its own ``metric_id``.

    Args:
        metric: Metric id, Metric, or a MetricPoint with ``metric_id``.
        point: Point data, point id or MetricPoint; ignored when
            ``metric`` is a MetricPoint.

    Returns:
        Tuple of (metric id, point argument).

    Raises:
        ValueError: If the metric id or point cannot be determined.
    """
    if isinstance(metric, MetricPoint):
        if metric.metric_id is None:
            msg = "MetricPoint has no metric_id"
            raise ValueError(msg)
        return metric.metric_id, metric

    if point is None:
        msg = "a metric point is required"
        raise ValueError(msg)
    return resolve_id(metric), point


class CachetClient:
    """Client for the Cachet status page API.

    Remote failures never raise. Every operation returns ``None`` (or
    ``False``) on failure and stores the message in ``error``; the full
    outcome of the last call is in ``last_response``. A successful
    response whose payload does not validate as the expected entity is
    treated as a failure as well. ``error`` and ``last_response`` are
    overwritten by each call and must not be relied on when one client
    is shared between threads.
    """

    def __init__(
        self,
        api_url: str,
        api_token: str,
        basic_auth: BasicAuth | Mapping[str, str] | None = None,
        *,
        timeout_seconds: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_url: Base API URL including the version path.
            api_token: Token sent as ``X-Cachet-Token`` on every request.
            basic_auth: Optional ``user``/``password`` pair for HTTP basic auth.
            timeout_seconds: Transport timeout for owned httpx clients.
            user_agent: User-Agent header value.
            http_client: Optional pre-built httpx client.

        Raises:
            pydantic.ValidationError: If the configuration is malformed.
        """
        config = ClientConfig(
            api_url=api_url,
            api_token=api_token,
            basic_auth=basic_auth,
            timeout_seconds=timeout_seconds,
            user_agent=user_agent,
        )
        self._api = ApiClient(config, http_client=http_client)
        self._log = logger.bind(component="client")

    @classmethod
    def from_config(
        cls, config: ClientConfig, http_client: httpx.Client | None = None
    ) -> "CachetClient":
        """Create a client from a prepared configuration."""
        return cls(
            api_url=config.api_url,
            api_token=config.api_token,
            basic_auth=config.basic_auth,
            timeout_seconds=config.timeout_seconds,
            user_agent=config.user_agent,
            http_client=http_client,
        )

    @classmethod
    def from_settings(
        cls, settings: CachetSettings | None = None
    ) -> "CachetClient":
        """Create a client from environment settings.

        Args:
            settings: Settings to use; read from the environment if omitted.

        Returns:
            Configured client.
        """
        settings = settings or CachetSettings()
        return cls.from_config(settings.to_client_config())

    @property
    def api(self) -> ApiClient:
        """Underlying request/response client."""
        return self._api

    @property
    def error(self) -> str | None:
        """Message of the last failed call. Not safe for concurrent use."""
        return self._api.error

    @property
    def last_response(self) -> ApiResponse | None:
        """Outcome of the last call. Not safe for concurrent use."""
        return self._api.last_response

    def close(self) -> None:
        """Release the underlying HTTP client."""
        self._api.close()

    def __enter__(self) -> "CachetClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # General

    def ping(self) -> bool:
        """Check that the API is responding."""
        return self._api.get(PING_PATH).ok

    def get_version(self) -> Any:
        """Get the Cachet version string, or None on failure."""
        response = self._api.get(VERSION_PATH)
        if response.ok:
            return response.data
        return None

    # Components

    def get_components(self, params: Params | None = None) -> list[Component] | None:
        """List components, optionally filtered (e.g. ``{"status": 4}``)."""
        return self._list(COMPONENTS_PATH, Component, params)

    def get_component(self, component_id: int | str) -> Component | None:
        """Get a single component."""
        return self._fetch(f"{COMPONENTS_PATH}/{component_id}", Component)

    def add_component(self, component: Payload) -> Component | None:
        """Create a component. Requires valid authentication."""
        return self._create(
            COMPONENTS_PATH, Component, shape_component_body(component)
        )

    @overload
    def update_component(self, component: Component) -> Component | None: ...

    @overload
    def update_component(
        self, component: IdOrEntity, data: Payload
    ) -> Component | None: ...

    def update_component(
        self, component: IdOrEntity, data: Payload | None = None
    ) -> Component | None:
        """Update a component. Requires valid authentication.

        Call with ``(id, data)`` or with a component that has an id.
        """
        component_id, payload = resolve_update(component, data)
        return self._update(
            f"{COMPONENTS_PATH}/{component_id}",
            Component,
            shape_component_body(payload),
        )

    def delete_component(self, component: IdOrEntity) -> bool:
        """Delete a component. Requires valid authentication."""
        return self._remove(f"{COMPONENTS_PATH}/{resolve_id(component)}")

    # Component groups

    def get_component_groups(
        self, params: Params | None = None
    ) -> list[ComponentGroup] | None:
        """List component groups."""
        return self._list(COMPONENT_GROUPS_PATH, ComponentGroup, params)

    def get_component_group(self, group_id: int | str) -> ComponentGroup | None:
        """Get a single component group."""
        return self._fetch(f"{COMPONENT_GROUPS_PATH}/{group_id}", ComponentGroup)

    def add_component_group(self, group: Payload) -> ComponentGroup | None:
        """Create a component group. Requires valid authentication."""
        return self._create(COMPONENT_GROUPS_PATH, ComponentGroup, to_body(group))

    @overload
    def update_component_group(
        self, group: ComponentGroup
    ) -> ComponentGroup | None: ...

    @overload
    def update_component_group(
        self, group: IdOrEntity, data: Payload
    ) -> ComponentGroup | None: ...

    def update_component_group(
        self, group: IdOrEntity, data: Payload | None = None
    ) -> ComponentGroup | None:
        """Update a component group. Requires valid authentication."""
        group_id, payload = resolve_update(group, data)
        return self._update(
            f"{COMPONENT_GROUPS_PATH}/{group_id}", ComponentGroup, to_body(payload)
        )

    def delete_component_group(self, group: IdOrEntity) -> bool:
        """Delete a component group. Requires valid authentication."""
        return self._remove(f"{COMPONENT_GROUPS_PATH}/{resolve_id(group)}")

    # Incidents

    def get_incidents(self, params: Params | None = None) -> list[Incident] | None:
        """List incidents."""
        return self._list(INCIDENTS_PATH, Incident, params)

    def get_incident(self, incident_id: int | str) -> Incident | None:
        """Get a single incident."""
        return self._fetch(f"{INCIDENTS_PATH}/{incident_id}", Incident)

    def add_incident(self, incident: Payload) -> Incident | None:
        """Create an incident. Requires valid authentication.

        ``component_id`` is only sent together with ``component_status``.
        """
        return self._create(INCIDENTS_PATH, Incident, shape_incident_body(incident))

    @overload
    def update_incident(self, incident: Incident) -> Incident | None: ...

    @overload
    def update_incident(
        self, incident: IdOrEntity, data: Payload
    ) -> Incident | None: ...

    def update_incident(
        self, incident: IdOrEntity, data: Payload | None = None
    ) -> Incident | None:
        """Update an incident. Requires valid authentication.

        ``created_at`` is never sent, and ``component_id`` only together
        with ``component_status``.
        """
        incident_id, payload = resolve_update(incident, data)
        return self._update(
            f"{INCIDENTS_PATH}/{incident_id}",
            Incident,
            shape_incident_body(payload, updating=True),
        )

    def delete_incident(self, incident: IdOrEntity) -> bool:
        """Delete an incident. Requires valid authentication."""
        return self._remove(f"{INCIDENTS_PATH}/{resolve_id(incident)}")

    # Metrics

    def get_metrics(self, params: Params | None = None) -> list[Metric] | None:
        """List metrics."""
        return self._list(METRICS_PATH, Metric, params)

    def get_metric(self, metric_id: int | str) -> Metric | None:
        """Get a single metric."""
        return self._fetch(f"{METRICS_PATH}/{metric_id}", Metric)

    def add_metric(self, metric: Payload) -> Metric | None:
        """Create a metric. Requires valid authentication."""
        return self._create(METRICS_PATH, Metric, to_body(metric))

    @overload
    def update_metric(self, metric: Metric) -> Metric | None: ...

    @overload
    def update_metric(self, metric: IdOrEntity, data: Payload) -> Metric | None: ...

    def update_metric(
        self, metric: IdOrEntity, data: Payload | None = None
    ) -> Metric | None:
        """Update a metric. Requires valid authentication."""
        metric_id, payload = resolve_update(metric, data)
        return self._update(f"{METRICS_PATH}/{metric_id}", Metric, to_body(payload))

    def delete_metric(self, metric: IdOrEntity) -> bool:
        """Delete a metric. Requires valid authentication."""
        return self._remove(f"{METRICS_PATH}/{resolve_id(metric)}")

    # Metric points

    def get_metric_points(
        self, metric: int | str | Metric, params: Params | None = None
    ) -> list[MetricPoint] | None:
        """List the points of a metric."""
        return self._list(
            f"{METRICS_PATH}/{resolve_id(metric)}/points", MetricPoint, params
        )

    @overload
    def add_metric_point(self, metric: MetricPoint) -> MetricPoint | None: ...

    @overload
    def add_metric_point(
        self, metric: int | str | Metric, point: Payload
    ) -> MetricPoint | None: ...

    def add_metric_point(
        self,
        metric: int | str | Metric | MetricPoint,
        point: Payload | None = None,
    ) -> MetricPoint | None:
        """Add a point to a metric. Requires valid authentication.

        Call with ``(metric_id, data)``, ``(metric, point)`` or a single
        point that has ``metric_id`` set.
        """
        metric_id, payload = resolve_metric_point(metric, point)
        return self._create(
            f"{METRICS_PATH}/{metric_id}/points", MetricPoint, to_body(payload)
        )

    @overload
    def delete_metric_point(self, metric: MetricPoint) -> bool: ...

    @overload
    def delete_metric_point(
        self, metric: int | str | Metric, point: IdOrEntity
    ) -> bool: ...

    def delete_metric_point(
        self,
        metric: int | str | Metric | MetricPoint,
        point: IdOrEntity | None = None,
    ) -> bool:
        """Delete a metric point. Requires valid authentication.

        Call with ``(metric_id, point_id)``, ``(metric, point)`` or a
        single point that has both ``id`` and ``metric_id`` set.
        """
        metric_id, target = resolve_metric_point(metric, point)
        return self._remove(f"{METRICS_PATH}/{metric_id}/points/{resolve_id(target)}")

    # Subscribers

    def get_subscribers(self, params: Params | None = None) -> list[Subscriber] | None:
        """List subscribers."""
        return self._list(SUBSCRIBERS_PATH, Subscriber, params)

    def add_subscriber(self, subscriber: Payload) -> Subscriber | None:
        """Subscribe an email address. Requires valid authentication."""
        return self._create(SUBSCRIBERS_PATH, Subscriber, to_body(subscriber))

    def delete_subscriber(self, subscriber: IdOrEntity) -> bool:
        """Remove a subscriber. Requires valid authentication."""
        return self._remove(f"{SUBSCRIBERS_PATH}/{resolve_id(subscriber)}")

    # Shared request patterns

    def _to_entity(
        self, path: str, model: type[EntityT], data: Any
    ) -> EntityT | None:
        """Validate a response payload, recording a mismatch as a failure."""
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            self._api.error = (
                f"Unexpected {model.__name__} payload from {path}: "
                f"{exc.error_count()} validation error(s)"
            )
            self._log.warning(
                "entity_payload_invalid",
                path=path,
                model=model.__name__,
                errors=exc.error_count(),
            )
            return None

    def _list(
        self, path: str, model: type[EntityT], params: Params | None
    ) -> list[EntityT] | None:
        response = self._api.get(path, params)
        if not response.ok:
            return None
        items = []
        for item in response.data or []:
            entity = self._to_entity(path, model, item)
            if entity is None:
                return None
            items.append(entity)
        self._log.debug("entities_listed", path=path, count=len(items))
        return items

    def _fetch(self, path: str, model: type[EntityT]) -> EntityT | None:
        response = self._api.get(path)
        if not response.ok:
            return None
        return self._to_entity(path, model, response.data)

    def _create(
        self, path: str, model: type[EntityT], body: dict[str, Any]
    ) -> EntityT | None:
        response = self._api.post(path, body)
        if not response.ok:
            return None
        entity = self._to_entity(path, model, response.data)
        if entity is not None:
            self._log.info("entity_created", path=path, id=entity.id)
        return entity

    def _update(
        self, path: str, model: type[EntityT], body: dict[str, Any]
    ) -> EntityT | None:
        response = self._api.put(path, body)
        if not response.ok:
            return None
        entity = self._to_entity(path, model, response.data)
        if entity is not None:
            self._log.info("entity_updated", path=path, id=entity.id)
        return entity

    def _remove(self, path: str) -> bool:
        response = self._api.delete(path)
        if response.ok:
            self._log.info("entity_deleted", path=path)
        return response.ok
