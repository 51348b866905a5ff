"""Tests for structured logging."""

import threading

import structlog

from jira_actions.observability.logging import (
    bound_journey,
    get_journey_id,
    get_logger,
    in_current_context,
    setup_logging,
)


class TestStructuredLogging:
    """Tests for structured logging setup."""

    def test_setup_logging_with_json_format(self) -> None:
        """setup_logging should configure JSON logging."""
        setup_logging(log_level="INFO", json_logs=True)
        logger = get_logger(__name__)
        assert logger is not None

    def test_setup_logging_with_console_format(self) -> None:
        """setup_logging should configure console logging."""
        setup_logging(log_level="DEBUG", json_logs=False)
        logger = get_logger(__name__)
        assert logger is not None

    def test_get_logger_returns_logger(self) -> None:
        """get_logger should return a valid logger instance."""
        logger = get_logger("test_module")
        assert hasattr(logger, "debug")
        assert hasattr(logger, "error")


class TestJourneyBinding:
    """Tests for binding a journey ID to log events."""

    def test_bound_inside_block_only(self) -> None:
        assert get_journey_id() is None

        with bound_journey("user-7"):
            assert get_journey_id() == "user-7"

        assert get_journey_id() is None

    def test_extra_context_is_bound_alongside(self) -> None:
        with bound_journey("user-7", journey="browse"):
            bound = structlog.contextvars.get_contextvars()

        assert bound == {"journey_id": "user-7", "journey": "browse"}
        assert structlog.contextvars.get_contextvars() == {}

    def test_binding_reaches_merged_event(self) -> None:
        with bound_journey("user-9"):
            event = structlog.contextvars.merge_contextvars(
                None, "info", {"event": "navigation_finished"}  # type: ignore[arg-type]
            )

        assert event == {"event": "navigation_finished", "journey_id": "user-9"}


class TestInCurrentContext:
    """Tests for carrying the caller's context onto other threads."""

    def _seen_on_thread(self, target) -> list:
        seen: list = []
        thread = threading.Thread(target=lambda: seen.append(target()))
        thread.start()
        thread.join(timeout=5)
        return seen

    def test_plain_thread_does_not_see_binding(self) -> None:
        with bound_journey("user-3"):
            seen = self._seen_on_thread(get_journey_id)

        assert seen == [None]

    def test_wrapped_target_sees_binding(self) -> None:
        with bound_journey("user-3"):
            seen = self._seen_on_thread(in_current_context(get_journey_id))

        assert seen == ["user-3"]

    def test_context_is_captured_when_wrapping(self) -> None:
        """Leaving the block after wrapping should not strip the copied binding."""
        with bound_journey("user-4"):
            wrapped = in_current_context(get_journey_id)

        assert get_journey_id() is None
        assert wrapped() == "user-4"

    def test_arguments_are_passed_through(self) -> None:
        wrapped = in_current_context(lambda a, b=0: a + b)

        assert wrapped(2, b=3) == 5
