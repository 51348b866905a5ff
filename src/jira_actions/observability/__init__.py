"""Observability module for logging and metrics.

This module provides:
- Structured logging with journey IDs
- Prometheus metrics for action outcomes and durations
"""

from jira_actions.observability.logging import (
    bound_journey,
    get_journey_id,
    get_logger,
    in_current_context,
    setup_logging,
)
from jira_actions.observability.metrics import MetricsCollector, get_metrics_collector

__all__ = [
    "setup_logging",
    "get_logger",
    "bound_journey",
    "get_journey_id",
    "in_current_context",
    "MetricsCollector",
    "get_metrics_collector",
]
