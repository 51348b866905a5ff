"""Journey: an ordered sequence of actions for one simulated user."""

import uuid
from collections.abc import Sequence
from typing import Optional

from jira_actions.actions.base import Action
from jira_actions.observability.logging import bound_journey, get_logger

logger = get_logger(__name__)


class Journey:
    """Runs actions in order, binding a journey ID to every log event.

    There is no retry: the first action error ends the journey run and
    propagates to the caller. Skipped actions are not errors.
    """

    def __init__(
        self,
        name: str,
        actions: Sequence[Action],
        journey_id: Optional[str] = None,
    ) -> None:
        self.name = name
        self.actions = list(actions)
        self.journey_id = journey_id or str(uuid.uuid4())

    def run(self) -> None:
        """Run every action once, in order."""
        with bound_journey(self.journey_id, journey=self.name):
            logger.info("journey_started", actions=len(self.actions))
            for action in self.actions:
                action.run()
            logger.info("journey_finished")
