"""Observation sinks.

The meter hands every observation to a sink and never waits on the result.
Three sinks ship with the package: an in-memory list for tests and local
runs, a structured-log sink, and a JSON-lines file sink.
"""

import json
import threading
from pathlib import Path
from typing import Protocol

from jira_actions.measure.observation import Observation
from jira_actions.observability.logging import get_logger

logger = get_logger(__name__)


class ObservationSink(Protocol):
    """Anything that accepts observations."""

    def emit(self, observation: Observation) -> None:
        """Accept one observation."""
        ...


class InMemoryObservationSink:
    """Keeps observations in a list, in emission order."""

    def __init__(self) -> None:
        self._observations: list[Observation] = []
        self._lock = threading.Lock()

    def emit(self, observation: Observation) -> None:
        with self._lock:
            self._observations.append(observation)

    @property
    def observations(self) -> list[Observation]:
        """Snapshot of the observations emitted so far."""
        with self._lock:
            return list(self._observations)

    def by_key(self, key: str) -> list[Observation]:
        """Observations emitted under one action-kind tag."""
        return [observation for observation in self.observations if observation.key == key]


class LoggingObservationSink:
    """Writes each observation as a structured log event."""

    def emit(self, observation: Observation) -> None:
        logger.info(
            "action_observed",
            action=observation.key,
            recorded_at=observation.recorded_at.isoformat(),
            **observation.fields,
        )


class JsonLinesObservationSink:
    """Appends each observation as one JSON object per line.

    The parent directory is created on construction. Writes from several
    journey threads are serialised by a lock.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def emit(self, observation: Observation) -> None:
        line = json.dumps(observation.to_dict(), ensure_ascii=False)
        with self._lock:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
