"""Action meter: turns a successful action into exactly one observation.

The meter does not time anything itself. The action closure measures its
own boundaries and returns them inside its result; the observation
extractor turns that result into measurement fields.
"""

from collections.abc import Callable, Mapping
from typing import Optional, TypeVar

from jira_actions.measure.observation import Observation, Scalar
from jira_actions.measure.sink import ObservationSink
from jira_actions.observability.logging import get_logger
from jira_actions.observability.metrics import MetricsCollector, get_metrics_collector

logger = get_logger(__name__)

R = TypeVar("R")

# Observation fields fed to the duration histogram, keyed by boundary label
_BOUNDARY_FIELDS = {
    "navigation": "navigationDuration",
    "action": "actionDuration",
}


class ActionMeter:
    """Measures actions and emits their observations.

    Emission is all-or-nothing: if the action or the observation extractor
    raises, nothing is emitted and the error propagates to the caller.

    Example:
        >>> meter = ActionMeter(sink=InMemoryObservationSink())
        >>> page = meter.measure(
        ...     key=VIEW_ISSUE,
        ...     action=lambda: load_issue(),
        ...     observation=lambda result: {"issueKey": result.key},
        ... )
    """

    def __init__(
        self,
        sink: ObservationSink,
        metrics: Optional[MetricsCollector] = None,
    ) -> None:
        """Initialize the meter.

        Args:
            sink: Where observations are emitted
            metrics: Metrics collector; the process-wide one if omitted
        """
        self._sink = sink
        self._metrics = metrics or get_metrics_collector()

    def measure(
        self,
        key: str,
        action: Callable[[], R],
        observation: Callable[[R], Mapping[str, Scalar]],
    ) -> R:
        """Run an action and emit its observation.

        Args:
            key: Action-kind tag the observation is emitted under
            action: Closure performing the step and returning its timed result
            observation: Extractor building measurement fields from the result

        Returns:
            The action's result, unchanged

        Raises:
            Exception: Whatever the action or the extractor raised
        """
        try:
            result = action()
            record = Observation(key=key, fields=dict(observation(result)))
        except Exception:
            self._metrics.record_action_execution(key, "error")
            logger.warning("action_failed", action=key, exc_info=True)
            raise

        self._sink.emit(record)
        self._metrics.record_action_execution(key, "ok")
        for boundary, field_name in _BOUNDARY_FIELDS.items():
            duration_ms = record.fields.get(field_name)
            if isinstance(duration_ms, (int, float)) and not isinstance(duration_ms, bool):
                self._metrics.record_action_duration(key, boundary, duration_ms / 1000)
        return result
