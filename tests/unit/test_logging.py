"""Unit tests for logging configuration."""

import io
import json
import logging

import structlog

from cachet_client.observability import (
    bind_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
)
from tests.helpers.transport import FakeCachet, make_client


class TestConfigureLogging:
    """Tests for configure_logging."""

    def teardown_method(self) -> None:
        """Restore structlog defaults."""
        clear_request_context()
        structlog.reset_defaults()

    def test_json_output(self) -> None:
        """Test that events are rendered as JSON."""
        output = io.StringIO()
        configure_logging(level=logging.DEBUG, output=output)

        get_logger().info("hello", answer=42)

        record = json.loads(output.getvalue().strip().splitlines()[-1])
        assert record["event"] == "hello"
        assert record["answer"] == 42
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_level_filtering(self) -> None:
        """Test that events below the level are dropped."""
        output = io.StringIO()
        configure_logging(level=logging.WARNING, output=output)

        get_logger().info("quiet")

        assert output.getvalue() == ""

    def test_bound_context(self) -> None:
        """Test that bound context appears in events."""
        output = io.StringIO()
        configure_logging(output=output)
        bind_request_context(job_id="sync-1")

        get_logger().info("with_context")

        record = json.loads(output.getvalue().strip().splitlines()[-1])
        assert record["job_id"] == "sync-1"

    def test_failed_request_logged_without_token(self) -> None:
        """Test that failures are logged and the token is never printed."""
        output = io.StringIO()
        configure_logging(level=logging.DEBUG, output=output)
        fake = FakeCachet().respond(404)
        client = make_client(fake)

        client.get_component(1)

        text = output.getvalue()
        assert "api_request_failed" in text
        assert "Requested resource not found" in text
        assert "rRpHYVhsNnG12X3N4ufr" not in text
