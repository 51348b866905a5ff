"""Search with JQL action."""

import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta

from jira_actions.actions.base import Action
from jira_actions.keys import SEARCH_WITH_JQL
from jira_actions.measure.meter import ActionMeter
from jira_actions.memory.issue_key import IssueKeyMemory
from jira_actions.memory.jql import JqlMemory
from jira_actions.observability.logging import get_logger
from jira_actions.page import IssueNavigatorPage, WebJira

logger = get_logger(__name__)


@dataclass(frozen=True)
class _SearchResult:
    page: IssueNavigatorPage
    issue_keys: list[str]
    navigation_duration: timedelta
    action_duration: timedelta


class SearchJqlAction(Action):
    """Runs a remembered JQL query and remembers the issue keys it finds.

    Skips itself when no query is known yet.
    """

    key = SEARCH_WITH_JQL

    def __init__(
        self,
        jira: WebJira,
        meter: ActionMeter,
        jql_memory: JqlMemory,
        issue_key_memory: IssueKeyMemory,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._jira = jira
        self._meter = meter
        self._jql_memory = jql_memory
        self._issue_key_memory = issue_key_memory
        self._clock = clock

    def run(self) -> None:
        jql = self._jql_memory.recall()
        if jql is None:
            self._skip("no JQL queries remembered")
            return
        result = self._meter.measure(
            key=SEARCH_WITH_JQL,
            action=lambda: self._search(jql),
            observation=lambda res: {
                "jql": jql,
                "issueCount": len(res.issue_keys),
                "navigationDuration": int(res.navigation_duration.total_seconds() * 1000),
                "actionDuration": int(res.action_duration.total_seconds() * 1000),
            },
        )
        self._issue_key_memory.remember(result.issue_keys)

    def _search(self, jql: str) -> _SearchResult:
        start = self._clock()
        page = self._jira.go_to_issue_navigator(jql)
        navigation_duration = timedelta(seconds=self._clock() - start)
        page.wait_for_issue_list()
        action_duration = timedelta(seconds=self._clock() - start)
        issue_keys = page.get_issue_keys()
        logger.debug(
            "issue_list_visible",
            jql=jql,
            issue_count=len(issue_keys),
            duration_ms=int(action_duration.total_seconds() * 1000),
        )
        return _SearchResult(page, issue_keys, navigation_duration, action_duration)
