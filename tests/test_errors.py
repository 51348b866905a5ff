"""Tests for the action exception hierarchy."""

import pytest

from jira_actions.errors import (
    DiagnosticDirectoryError,
    JiraActionsError,
    NavigationError,
    ScreenshotError,
)


class TestJiraActionsError:
    """Tests for the base error."""

    def test_message_only(self) -> None:
        error = JiraActionsError("Something went wrong")

        assert str(error) == "[JIRA_ACTIONS_ERROR] Something went wrong"
        assert error.context == {}

    def test_with_context(self) -> None:
        error = JiraActionsError("Step failed", issue_key="ABC-1")

        assert str(error) == "[JIRA_ACTIONS_ERROR] Step failed (issue_key=ABC-1)"


class TestSubclasses:
    """Tests for the concrete errors."""

    def test_diagnostic_directory_error(self) -> None:
        error = DiagnosticDirectoryError("diagnostics/x/ABC-1", "already exists and is not a directory")

        assert isinstance(error, JiraActionsError)
        assert error.error_code == "DIAGNOSTIC_DIRECTORY_ERROR"
        assert error.context["path"] == "diagnostics/x/ABC-1"
        assert "not a directory" in error.message

    def test_navigation_error(self) -> None:
        error = NavigationError("ABC-1", "HTTP 502")

        assert error.error_code == "NAVIGATION_ERROR"
        assert error.message == "Failed to navigate to 'ABC-1': HTTP 502"

    def test_screenshot_error_can_be_raised(self) -> None:
        with pytest.raises(ScreenshotError, match="SCREENSHOT_ERROR"):
            raise ScreenshotError("session lost")
