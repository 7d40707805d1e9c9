"""Unit tests for the Incident entity."""

import pytest
from pydantic import ValidationError

from cachet_client.models import ComponentStatus, Incident, IncidentStatus


class TestIncident:
    """Tests for Incident model."""

    def test_create_minimal(self) -> None:
        """Test creating an incident with required fields only."""
        incident = Incident(name="Outage", status=IncidentStatus.INVESTIGATING)

        assert incident.name == "Outage"
        assert incident.status == 1

    def test_scheduled_status_zero(self) -> None:
        """Test that status 0 (scheduled) is valid for incidents."""
        incident = Incident(name="Maintenance", status=0)

        assert incident.status == IncidentStatus.SCHEDULED

    @pytest.mark.parametrize("bad_status", [5, -1, "fixed"])
    def test_invalid_status(self, bad_status: object) -> None:
        """Test that unknown incident statuses are rejected."""
        with pytest.raises(ValidationError):
            Incident(name="Outage", status=bad_status)

    def test_component_reference(self) -> None:
        """Test referencing a component with a status change."""
        incident = Incident(
            name="Outage",
            status=1,
            component_id=5,
            component_status=ComponentStatus.MAJOR_OUTAGE,
        )

        assert incident.component_id == 5
        assert incident.component_status == ComponentStatus.MAJOR_OUTAGE

    def test_invalid_component_status(self) -> None:
        """Test that component_status uses component status values."""
        with pytest.raises(ValidationError):
            Incident(name="Outage", status=1, component_status=0)

    def test_invalid_component_id(self) -> None:
        """Test that component_id must be an integer."""
        with pytest.raises(ValidationError):
            Incident(name="Outage", status=1, component_id="db")

    def test_to_dict_includes_created_at(self) -> None:
        """Test that created_at is writable and serialized."""
        incident = Incident(name="Outage", status=4, created_at="2020-01-01 00:00")

        assert incident.to_dict()["created_at"] == "2020-01-01 00:00"

    def test_to_dict_omits_read_only_fields(self) -> None:
        """Test that derived fields from the API are not serialized."""
        incident = Incident.model_validate(
            {
                "id": 3,
                "name": "Outage",
                "status": 2,
                "human_status": "Identified",
                "updated_at": "2020-01-01 00:00",
            }
        )

        assert incident.to_dict() == {"id": 3, "name": "Outage", "status": 2}
