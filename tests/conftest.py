"""Pytest configuration and shared fixtures for the test suite."""

import threading
from pathlib import Path
from typing import Any, Optional

import pytest
import structlog

from jira_actions.config import ActionsConfig
from jira_actions.measure.meter import ActionMeter
from jira_actions.measure.sink import InMemoryObservationSink
from jira_actions.memory import IssueKeyMemory, IssueMemory, JqlMemory

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-screenshot"


class FakeIssuePage:
    """In-process stand-in for a rendered issue page."""

    def __init__(
        self,
        issue_key: str,
        issue_id: int = 10042,
        editable: bool = True,
        issue_type: str = "Bug",
        wait_error: Optional[Exception] = None,
    ) -> None:
        self.issue_key = issue_key
        self._issue_id = issue_id
        self._editable = editable
        self._issue_type = issue_type
        self._wait_error = wait_error
        self.waited = False

    def wait_for_summary(self) -> None:
        if self._wait_error is not None:
            raise self._wait_error
        self.waited = True

    def get_issue_id(self) -> int:
        return self._issue_id

    def is_editable(self) -> bool:
        return self._editable

    def get_issue_type(self) -> str:
        return self._issue_type


class FakeIssueNavigatorPage:
    """In-process stand-in for a JQL search result page."""

    def __init__(self, issue_keys: list[str]) -> None:
        self._issue_keys = list(issue_keys)
        self.waited = False
        self.key_reads = 0

    def wait_for_issue_list(self) -> None:
        self.waited = True

    def get_issue_keys(self) -> list[str]:
        self.key_reads += 1
        return list(self._issue_keys)


class FakeJira:
    """Records driver calls and signals when a screenshot was attempted.

    A screenshot_gate, when given, holds capture_screenshot until it is set.
    """

    screenshot_bytes = PNG_BYTES

    def __init__(
        self,
        issue_id: int = 10042,
        editable: bool = True,
        issue_type: str = "Bug",
        search_results: Optional[list[str]] = None,
        navigation_error: Optional[Exception] = None,
        wait_error: Optional[Exception] = None,
        screenshot_error: Optional[Exception] = None,
        screenshot_gate: Optional[threading.Event] = None,
    ) -> None:
        self.issue_id = issue_id
        self.editable = editable
        self.issue_type = issue_type
        self.search_results = search_results or []
        self.navigation_error = navigation_error
        self.wait_error = wait_error
        self.screenshot_error = screenshot_error
        self.screenshot_gate = screenshot_gate
        self.calls: list[tuple[str, str]] = []
        self.screenshot_attempted = threading.Event()
        self.navigator_pages: list[FakeIssueNavigatorPage] = []
        self.capture_context: dict[str, Any] = {}

    def go_to_issue(self, issue_key: str) -> FakeIssuePage:
        self.calls.append(("go_to_issue", issue_key))
        if self.navigation_error is not None:
            raise self.navigation_error
        return FakeIssuePage(
            issue_key,
            issue_id=self.issue_id,
            editable=self.editable,
            issue_type=self.issue_type,
            wait_error=self.wait_error,
        )

    def go_to_issue_navigator(self, jql: str) -> FakeIssueNavigatorPage:
        self.calls.append(("go_to_issue_navigator", jql))
        if self.navigation_error is not None:
            raise self.navigation_error
        page = FakeIssueNavigatorPage(self.search_results)
        self.navigator_pages.append(page)
        return page

    def capture_screenshot(self) -> bytes:
        self.calls.append(("capture_screenshot", ""))
        try:
            self.capture_context = structlog.contextvars.get_contextvars()
            if self.screenshot_gate is not None and not self.screenshot_gate.wait(timeout=5):
                raise TimeoutError("screenshot gate was never opened")
            if self.screenshot_error is not None:
                raise self.screenshot_error
            return self.screenshot_bytes
        finally:
            self.screenshot_attempted.set()


@pytest.fixture
def jira() -> FakeJira:
    """Driver fake answering for issue 10042, an editable Bug."""
    return FakeJira()


@pytest.fixture
def make_jira() -> type[FakeJira]:
    """Factory for driver fakes with custom answers or failures."""
    return FakeJira


@pytest.fixture
def sink() -> InMemoryObservationSink:
    """Observation sink collecting emissions in memory."""
    return InMemoryObservationSink()


@pytest.fixture
def meter(sink: InMemoryObservationSink) -> ActionMeter:
    """Meter emitting into the in-memory sink."""
    return ActionMeter(sink=sink)


@pytest.fixture
def config(tmp_path: Path) -> ActionsConfig:
    """Config writing diagnostics under tmp_path with an immediate screenshot."""
    return ActionsConfig(diagnostics_root=tmp_path / "diagnostics", screenshot_delay_ms=0)


@pytest.fixture
def issue_key_memory() -> IssueKeyMemory:
    return IssueKeyMemory()


@pytest.fixture
def issue_memory() -> IssueMemory:
    return IssueMemory()


@pytest.fixture
def jql_memory() -> JqlMemory:
    return JqlMemory()
