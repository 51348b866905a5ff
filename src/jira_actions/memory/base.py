"""Set-valued memory slot shared between actions.

A slot is created once at journey start and handed to every action that
reads or writes it. Reads never block on anything but a short critical
section and never raise: an empty slot is a normal, expected state.
"""

import random
import threading
from collections.abc import Callable, Iterable
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class SetMemory(Generic[T]):
    """Thread-safe set of remembered facts with random recall.

    Writes merge into the set, so concurrent writers from several simulated
    users only ever add facts. A read-then-act sequence across calls is not
    atomic; callers may act on a slightly stale fact.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        """Initialize an empty slot.

        Args:
            rng: Random source for recall; a private one is created if omitted
        """
        self._values: set[T] = set()
        self._lock = threading.Lock()
        self._rng = rng or random.Random()

    def remember(self, values: Iterable[T]) -> None:
        """Merge values into the slot.

        Args:
            values: Facts to add; duplicates are ignored
        """
        incoming = list(values)
        with self._lock:
            self._values.update(incoming)

    def recall(self, predicate: Optional[Callable[[T], bool]] = None) -> Optional[T]:
        """Return a random remembered fact, or None if there is none.

        Args:
            predicate: Optional filter a recalled fact must satisfy

        Returns:
            A remembered fact, or None when the slot holds no matching fact
        """
        with self._lock:
            candidates = [value for value in self._values if predicate is None or predicate(value)]
        if not candidates:
            return None
        return self._rng.choice(candidates)

    def recall_all(self) -> frozenset[T]:
        """Return a snapshot of every remembered fact."""
        with self._lock:
            return frozenset(self._values)

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)
