"""Base class for journey actions."""

from abc import ABC, abstractmethod

from jira_actions.observability.logging import get_logger
from jira_actions.observability.metrics import get_metrics_collector

logger = get_logger(__name__)


class Action(ABC):
    """One simulated user step.

    Each concrete action captures its dependencies (driver, meter, memory
    slots) at construction time; run() takes nothing and returns nothing.
    An action whose prerequisite fact is missing skips itself: it logs at
    debug level and returns without touching the driver, the meter or the
    memory.
    """

    key: str = ""

    @abstractmethod
    def run(self) -> None:
        """Perform the step."""

    def _skip(self, reason: str) -> None:
        logger.debug("action_skipped", action=self.key, reason=reason)
        get_metrics_collector().record_action_skip(self.key)
