"""jira-actions: timed user-journey steps for load testing Jira.

Each action measures one simulated user step at two boundaries, emits one
observation per successful execution, takes a best-effort screenshot in the
background, and hands facts to later steps through shared memory slots.
"""

from jira_actions.actions import Action, DiagnosticCapture, SearchJqlAction, ViewIssueAction
from jira_actions.config import ActionsConfig
from jira_actions.errors import (
    DiagnosticDirectoryError,
    JiraActionsError,
    NavigationError,
    ScreenshotError,
)
from jira_actions.journey import Journey
from jira_actions.keys import SEARCH_WITH_JQL, VIEW_ISSUE
from jira_actions.measure import ActionMeter, InMemoryObservationSink, Observation
from jira_actions.memory import Issue, IssueKeyMemory, IssueMemory, JqlMemory

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionMeter",
    "ActionsConfig",
    "DiagnosticCapture",
    "DiagnosticDirectoryError",
    "InMemoryObservationSink",
    "Issue",
    "IssueKeyMemory",
    "IssueMemory",
    "JiraActionsError",
    "JqlMemory",
    "Journey",
    "NavigationError",
    "Observation",
    "ScreenshotError",
    "SEARCH_WITH_JQL",
    "SearchJqlAction",
    "VIEW_ISSUE",
    "ViewIssueAction",
]
