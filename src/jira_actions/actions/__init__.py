"""Journey actions and their background diagnostics."""

from jira_actions.actions.base import Action
from jira_actions.actions.diagnostics import (
    DiagnosticCapture,
    ensure_directory,
    new_diagnostic_directory,
)
from jira_actions.actions.search_jql import SearchJqlAction
from jira_actions.actions.view_issue import ViewIssueAction

__all__ = [
    "Action",
    "DiagnosticCapture",
    "SearchJqlAction",
    "ViewIssueAction",
    "ensure_directory",
    "new_diagnostic_directory",
]
