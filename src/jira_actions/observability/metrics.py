"""Prometheus metrics collection for load-test actions.

This module provides Prometheus metrics for tracking action executions,
skipped steps, measured durations and diagnostic captures.
"""

from typing import Optional

from prometheus_client import Counter, Histogram, generate_latest

action_executions_total = Counter(
    "jira_action_executions_total",
    "Total number of measured action executions",
    labelnames=["action", "status"],
)

action_skips_total = Counter(
    "jira_action_skips_total",
    "Total number of actions skipped for lack of a remembered fact",
    labelnames=["action"],
)

action_duration_seconds = Histogram(
    "jira_action_duration_seconds",
    "Action duration in seconds at each completion boundary",
    labelnames=["action", "boundary"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
)

diagnostic_captures_total = Counter(
    "jira_diagnostic_captures_total",
    "Total number of background diagnostic captures",
    labelnames=["status"],
)


class MetricsCollector:
    """Collects and exposes Prometheus metrics.

    Provides methods for recording action outcomes, skipped actions,
    boundary durations and diagnostic capture outcomes.
    """

    def record_action_execution(self, action: str, status: str) -> None:
        """Record a measured action execution.

        Args:
            action: Action-kind tag (e.g. "View Issue")
            status: Execution status (ok, error)
        """
        action_executions_total.labels(action=action, status=status).inc()

    def record_action_skip(self, action: str) -> None:
        """Record an action skipped because a prerequisite fact was missing.

        Args:
            action: Action-kind tag
        """
        action_skips_total.labels(action=action).inc()

    def record_action_duration(self, action: str, boundary: str, duration_seconds: float) -> None:
        """Record the duration of an action up to a completion boundary.

        Args:
            action: Action-kind tag
            boundary: Which boundary was reached (navigation, action)
            duration_seconds: Duration from the action start in seconds

        Example:
            >>> collector = get_metrics_collector()
            >>> collector.record_action_duration("View Issue", "navigation", 0.42)
        """
        action_duration_seconds.labels(action=action, boundary=boundary).observe(
            duration_seconds
        )

    def record_diagnostic_capture(self, status: str) -> None:
        """Record the outcome of a background diagnostic capture.

        Args:
            status: Capture status (saved, failed)
        """
        diagnostic_captures_total.labels(status=status).inc()

    def generate_metrics(self) -> bytes:
        """Generate Prometheus metrics in text format.

        Returns:
            Metrics in Prometheus exposition format
        """
        return generate_latest()


# Singleton instance
_metrics_collector: Optional[MetricsCollector] = None


def get_metrics_collector() -> MetricsCollector:
    """Get the global MetricsCollector instance.

    Returns:
        Singleton MetricsCollector instance
    """
    global _metrics_collector
    if _metrics_collector is None:
        _metrics_collector = MetricsCollector()
    return _metrics_collector
