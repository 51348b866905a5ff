"""Best-effort diagnostics captured while an action runs.

Directory setup happens on the main flow and is fatal when it fails: a
path that cannot be a directory means the environment is broken. The
screenshot itself runs on a daemon timer thread and contains every
failure, so it can neither fail the action nor skew its timing.
"""

import contextlib
import os
import tempfile
import threading
import time
import uuid
from collections.abc import Callable
from datetime import timedelta
from pathlib import Path
from typing import Optional

from jira_actions.errors import DiagnosticDirectoryError
from jira_actions.observability.logging import get_logger, in_current_context
from jira_actions.observability.metrics import MetricsCollector, get_metrics_collector
from jira_actions.page import WebJira

logger = get_logger(__name__)


def ensure_directory(path: Path) -> Path:
    """Make sure a directory exists at path and return it.

    Reuses an existing directory, creates missing parents, and tolerates a
    concurrent caller creating the same directory first.

    Args:
        path: Directory to establish

    Returns:
        The same path

    Raises:
        DiagnosticDirectoryError: If path exists and is not a directory, or
            cannot be created
    """
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except FileExistsError as e:
        raise DiagnosticDirectoryError(str(path), "already exists and is not a directory") from e
    except OSError as e:
        raise DiagnosticDirectoryError(str(path), e.strerror or str(e)) from e
    if not path.is_dir():
        raise DiagnosticDirectoryError(str(path), "is not a directory after creation")
    return path


def _is_single_component(subject: str) -> bool:
    if subject in ("", ".", ".."):
        return False
    separators = {"/", os.sep} | ({os.altsep} if os.altsep else set())
    return not any(sep in subject for sep in separators) and "\0" not in subject


def new_diagnostic_directory(root: Path, subject: str) -> Path:
    """Create a fresh directory for one execution against one subject.

    The layout is <root>/<execution uuid>/<subject>/, so two executions never
    share a directory, even for the same subject.

    Args:
        root: Diagnostics root (e.g. "diagnostics")
        subject: Subject of the action, typically an issue key

    Returns:
        The created directory

    Raises:
        DiagnosticDirectoryError: If subject is not a single path component
    """
    execution = Path(root) / str(uuid.uuid4())
    if not _is_single_component(subject):
        raise DiagnosticDirectoryError(
            str(execution / subject), "subject must be a single path component"
        )
    return ensure_directory(execution / subject)


class DiagnosticCapture:
    """Takes a delayed screenshot in the background.

    The capture is fire-and-forget: schedule() returns the started timer
    only so that tests and shutdown hooks can wait on it if they choose.
    """

    def __init__(
        self,
        jira: WebJira,
        delay: timedelta = timedelta(milliseconds=800),
        filename: str = "screenshot.png",
        clock: Callable[[], float] = time.monotonic,
        metrics: Optional[MetricsCollector] = None,
    ) -> None:
        """Initialize the capture.

        Args:
            jira: Driver providing the screenshot capability
            delay: Delay measured from the action start
            filename: Fixed filename inside the diagnostic directory
            clock: Monotonic clock in seconds, shared with the action
            metrics: Metrics collector; the process-wide one if omitted
        """
        self._jira = jira
        self._delay = delay
        self._filename = filename
        self._clock = clock
        self._metrics = metrics or get_metrics_collector()

    def schedule(self, directory: Path, started_at: float) -> threading.Timer:
        """Schedule a screenshot at started_at + delay.

        Args:
            directory: Existing directory the screenshot is saved into
            started_at: Clock reading taken when the action started

        Returns:
            The started daemon timer
        """
        elapsed = self._clock() - started_at
        remaining = max(0.0, self._delay.total_seconds() - elapsed)
        timer = threading.Timer(
            remaining, in_current_context(self.capture), args=(Path(directory),)
        )
        timer.daemon = True
        timer.name = f"diagnostic-capture-{Path(directory).name}"
        timer.start()
        return timer

    def capture(self, directory: Path) -> Optional[Path]:
        """Take the screenshot now and save it into directory.

        Never raises. Failures are logged and counted.

        Args:
            directory: Existing directory the screenshot is saved into

        Returns:
            Path of the saved screenshot, or None if the capture failed
        """
        target = Path(directory) / self._filename
        logger.debug("screenshot_started", path=str(target))
        start = self._clock()
        try:
            self._save(self._jira.capture_screenshot(), target)
        except Exception:
            logger.error("screenshot_failed", path=str(target), exc_info=True)
            self._metrics.record_diagnostic_capture("failed")
            saved = None
        else:
            logger.debug("screenshot_saved", path=str(target))
            self._metrics.record_diagnostic_capture("saved")
            saved = target
        logger.debug(
            "screenshot_finished",
            duration_ms=int((self._clock() - start) * 1000),
        )
        return saved

    @staticmethod
    def _save(png: bytes, target: Path) -> None:
        # Written beside the target, then renamed onto it
        fd, temporary = tempfile.mkstemp(dir=target.parent, prefix=".screenshot-", suffix=".part")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(png)
            os.replace(temporary, target)
        except Exception:
            with contextlib.suppress(OSError):
                os.unlink(temporary)
            raise
