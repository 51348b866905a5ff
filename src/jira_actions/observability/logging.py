"""Structured logging for journeys and their background captures.

Log events are rendered by structlog through the stdlib logging module.
The journey a step belongs to is bound with structlog's context variables,
and work handed to another thread is run in a copy of the caller's context
so its events carry the same journey binding.
"""

import contextvars
import logging
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, Optional, TypeVar

import structlog

R = TypeVar("R")

JOURNEY_ID_KEY = "journey_id"


def setup_logging(log_level: str = "INFO", json_logs: bool = True) -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, render JSON lines; otherwise a console format

    Example:
        >>> setup_logging(log_level="DEBUG", json_logs=False)
        >>> get_logger(__name__).debug("navigation_finished", duration_ms=312)
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    renderer: list[Any]
    if json_logs:
        renderer = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderer = [structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            *renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


@contextmanager
def bound_journey(journey_id: str, **context: Any) -> Iterator[None]:
    """Bind a journey ID (and any extra context) to events logged inside the block.

    Args:
        journey_id: Identifier of the simulated user session
        **context: Further key/value pairs, e.g. journey="browse"
    """
    with structlog.contextvars.bound_contextvars(**{JOURNEY_ID_KEY: journey_id}, **context):
        yield


def get_journey_id() -> Optional[str]:
    """Return the journey ID bound in the current context, if any."""
    return structlog.contextvars.get_contextvars().get(JOURNEY_ID_KEY)


def in_current_context(func: Callable[..., R]) -> Callable[..., R]:
    """Wrap func so it runs in a copy of the caller's context.

    Threads start with an empty context; wrapping the thread target keeps
    the caller's journey binding on the events it logs.

    Args:
        func: Callable to run later, typically on another thread

    Returns:
        Callable running func inside the copied context
    """
    ctx = contextvars.copy_context()

    def run(*args: Any, **kwargs: Any) -> R:
        return ctx.run(func, *args, **kwargs)

    return run
