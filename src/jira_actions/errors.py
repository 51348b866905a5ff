"""Exception hierarchy for action errors.

Only main-flow failures are represented here. A missing remembered fact is
not an error (the action is skipped) and a failed background capture never
leaves the capture task.
"""

from typing import Any


class JiraActionsError(Exception):
    """Base exception for all action errors.

    Attributes:
        message: Human-readable error description
        error_code: Unique code for programmatic error handling
        context: Additional context information
    """

    error_code: str = "JIRA_ACTIONS_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize error with message and optional context.

        Args:
            message: Human-readable error description
            **context: Additional context information (path, issue_key, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """Return formatted error message with context."""
        if not self.context:
            return f"[{self.error_code}] {self.message}"

        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"[{self.error_code}] {self.message} ({context_str})"


class DiagnosticDirectoryError(JiraActionsError):
    """Raised when a diagnostic directory cannot be established.

    This signals a broken environment (a file squatting on the path, missing
    permissions) and aborts the action before anything is measured.
    """

    error_code = "DIAGNOSTIC_DIRECTORY_ERROR"

    def __init__(self, path: str, reason: str, **context: Any) -> None:
        message = f"Failed to ensure that '{path}' is a directory: {reason}"
        super().__init__(message, path=path, reason=reason, **context)


class NavigationError(JiraActionsError):
    """Raised by drivers when navigating to a page fails."""

    error_code = "NAVIGATION_ERROR"

    def __init__(self, target: str, reason: str, **context: Any) -> None:
        message = f"Failed to navigate to '{target}': {reason}"
        super().__init__(message, target=target, reason=reason, **context)


class ScreenshotError(JiraActionsError):
    """Raised by drivers when a screenshot cannot be taken."""

    error_code = "SCREENSHOT_ERROR"

    def __init__(self, reason: str, **context: Any) -> None:
        message = f"Failed to take a screenshot: {reason}"
        super().__init__(message, reason=reason, **context)
