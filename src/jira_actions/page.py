"""Driver protocols for the web application under load.

These protocols describe the minimal surface an action needs from a web
driver. Any Selenium- or Playwright-backed implementation satisfies them
through structural typing; tests use in-process fakes.
"""

from typing import Protocol


class IssuePage(Protocol):
    """A navigated-to issue page."""

    issue_key: str

    def wait_for_summary(self) -> None:
        """Block until the issue summary is visible."""
        ...

    def get_issue_id(self) -> int:
        """Return the server-assigned issue id."""
        ...

    def is_editable(self) -> bool:
        """Return whether the current user can edit the issue."""
        ...

    def get_issue_type(self) -> str:
        """Return the issue type name (e.g. "Bug")."""
        ...


class IssueNavigatorPage(Protocol):
    """Search results for a JQL query."""

    def wait_for_issue_list(self) -> None:
        """Block until the result list is rendered."""
        ...

    def get_issue_keys(self) -> list[str]:
        """Return the keys of the issues listed on the page."""
        ...


class WebJira(Protocol):
    """Entry point into the application for actions.

    Navigation methods may raise; errors propagate to the journey. The
    screenshot capability may raise as well, but is only ever called from
    a diagnostic capture which contains the failure.
    """

    def go_to_issue(self, issue_key: str) -> IssuePage:
        """Navigate to an issue and return its page once navigation returns."""
        ...

    def go_to_issue_navigator(self, jql: str) -> IssueNavigatorPage:
        """Navigate to the issue navigator for a JQL query."""
        ...

    def capture_screenshot(self) -> bytes:
        """Return a PNG screenshot of the current viewport."""
        ...
