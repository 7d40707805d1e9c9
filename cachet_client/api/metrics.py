"""Metrics collection for the Cachet API layer."""

from dataclasses import dataclass, field
from threading import Lock
from typing import ClassVar

from cachet_client.api.models import ApiErrorClass


_instance_lock: Lock = Lock()


@dataclass
class ApiMetrics:
    """Metrics for Cachet API calls.

    Singleton that tracks request counts by method and status code,
    failures by error class, and cumulative duration.
    """

    _lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    api_requests_total: dict[str, int] = field(default_factory=dict)
    api_responses_total: dict[int, int] = field(default_factory=dict)
    api_failures_total: dict[str, int] = field(default_factory=dict)
    api_transport_errors_total: int = 0
    api_duration_ms_total: float = 0.0
    api_request_count: int = 0

    _instance: ClassVar["ApiMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "ApiMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            with _instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        with _instance_lock:
            cls._instance = None

    def record_request(self, method: str, status_code: int, duration_ms: float) -> None:
        """Record a completed HTTP request.

        Args:
            method: HTTP method.
            status_code: HTTP status code.
            duration_ms: Round trip duration in milliseconds.
        """
        with self._lock:
            self.api_requests_total[method] = self.api_requests_total.get(method, 0) + 1
            self.api_responses_total[status_code] = (
                self.api_responses_total.get(status_code, 0) + 1
            )
            self.api_duration_ms_total += duration_ms
            self.api_request_count += 1

    def record_failure(self, error_class: ApiErrorClass) -> None:
        """Record a failed API call.

        Args:
            error_class: Classification of the failure.
        """
        key = error_class.value
        with self._lock:
            self.api_failures_total[key] = self.api_failures_total.get(key, 0) + 1

    def record_transport_error(self) -> None:
        """Record a request that never produced a response."""
        with self._lock:
            self.api_transport_errors_total += 1

    def to_dict(self) -> dict[str, int | float | dict[str, int] | dict[int, int]]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        with self._lock:
            return {
                "api_requests_total": dict(self.api_requests_total),
                "api_responses_total": dict(self.api_responses_total),
                "api_failures_total": dict(self.api_failures_total),
                "api_transport_errors_total": self.api_transport_errors_total,
                "api_duration_ms_total": self.api_duration_ms_total,
                "api_request_count": self.api_request_count,
            }
