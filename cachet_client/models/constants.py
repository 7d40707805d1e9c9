"""Enumerated values accepted by the Cachet API."""

from enum import IntEnum


class ComponentStatus(IntEnum):
    """Operational status of a component."""

    OPERATIONAL = 1
    PERFORMANCE_ISSUES = 2
    PARTIAL_OUTAGE = 3
    MAJOR_OUTAGE = 4


class IncidentStatus(IntEnum):
    """Lifecycle status of an incident.

    - SCHEDULED: Planned maintenance
    - INVESTIGATING: Cause unknown, being investigated
    - IDENTIFIED: Cause found, fix under way
    - WATCHING: Fix deployed, monitoring
    - FIXED: Resolved
    """

    SCHEDULED = 0
    INVESTIGATING = 1
    IDENTIFIED = 2
    WATCHING = 3
    FIXED = 4


class MetricCalcType(IntEnum):
    """How metric points are aggregated."""

    SUM = 0
    AVERAGE = 1


class MetricView(IntEnum):
    """Default chart window shown on the status page."""

    LAST_HOUR = 0
    LAST_12_HOURS = 1
    LAST_WEEK = 2
    LAST_MONTH = 3


class GroupCollapsed(IntEnum):
    """Collapse behavior of a component group on the status page."""

    NO = 0
    YES = 1
    NOT_OPERATIONAL = 2
