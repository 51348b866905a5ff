"""View Issue action.

Opens a remembered issue, measures the navigation and summary-visible
boundaries, takes a screenshot in the background, and leaves the issue's
attributes and derived search context in memory for later steps.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Optional

from jira_actions.actions.base import Action
from jira_actions.actions.diagnostics import DiagnosticCapture, new_diagnostic_directory
from jira_actions.config import ActionsConfig
from jira_actions.keys import VIEW_ISSUE
from jira_actions.measure.meter import ActionMeter
from jira_actions.memory.issue import IssueMemory
from jira_actions.memory.issue_key import IssueKeyMemory
from jira_actions.memory.jql import JqlMemory
from jira_actions.memory.types import Issue
from jira_actions.observability.logging import get_logger
from jira_actions.page import IssuePage, WebJira

logger = get_logger(__name__)


@dataclass(frozen=True)
class _ViewIssueResult:
    page: IssuePage
    navigation_duration: timedelta
    action_duration: timedelta
    diagnostic_directory: Path


def _millis(duration: timedelta) -> int:
    return int(duration.total_seconds() * 1000)


class ViewIssueAction(Action):
    """Views a random issue whose key an earlier step remembered.

    Skips itself when no issue key is known yet.
    """

    key = VIEW_ISSUE

    def __init__(
        self,
        jira: WebJira,
        meter: ActionMeter,
        issue_key_memory: IssueKeyMemory,
        issue_memory: IssueMemory,
        jql_memory: JqlMemory,
        config: Optional[ActionsConfig] = None,
        capture: Optional[DiagnosticCapture] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._jira = jira
        self._meter = meter
        self._issue_key_memory = issue_key_memory
        self._issue_memory = issue_memory
        self._jql_memory = jql_memory
        self._config = config or ActionsConfig()
        self._clock = clock
        self._capture = capture or DiagnosticCapture(
            jira,
            delay=self._config.screenshot_delay,
            filename=self._config.screenshot_filename,
            clock=clock,
        )

    def run(self) -> None:
        issue_key = self._issue_key_memory.recall()
        if issue_key is None:
            self._skip("no issue keys remembered")
            return
        directory = new_diagnostic_directory(self._config.diagnostics_root, issue_key)
        result = self._meter.measure(
            key=VIEW_ISSUE,
            action=lambda: self._view(issue_key, directory),
            observation=lambda res: {
                "issueKey": issue_key,
                "issueId": res.page.get_issue_id(),
                "navigationDuration": _millis(res.navigation_duration),
                "actionDuration": _millis(res.action_duration),
                "screenshotLocation": str(res.diagnostic_directory),
            },
        )
        page = result.page
        issue = Issue(
            key=issue_key,
            editable=page.is_editable(),
            id=page.get_issue_id(),
            type=page.get_issue_type(),
        )
        self._issue_memory.remember([issue])
        self._jql_memory.observe(page)

    def _view(self, issue_key: str, directory: Path) -> _ViewIssueResult:
        start = self._clock()
        page = self._jira.go_to_issue(issue_key)
        navigation_duration = timedelta(seconds=self._clock() - start)
        logger.debug("navigation_finished", duration_ms=_millis(navigation_duration))
        self._capture.schedule(directory, start)
        page.wait_for_summary()
        action_duration = timedelta(seconds=self._clock() - start)
        logger.debug("summary_visible", duration_ms=_millis(action_duration))
        return _ViewIssueResult(page, navigation_duration, action_duration, directory)
