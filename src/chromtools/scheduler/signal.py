from __future__ import annotations

from threading import Condition
from typing import Optional


class ChangeSignal:
    """
    Coalescing "graph changed" flag guarded by its own lock.

    Any number of ``mark()`` calls before a ``consume()`` collapse into a
    single pending change. The worker polls ``is_set()`` as its
    cancellation checkpoint and blocks in ``wait()`` when idle.
    """

    def __init__(self, initially_set: bool = False) -> None:
        self._cond = Condition()
        self._set = initially_set

    def mark(self) -> None:
        with self._cond:
            self._set = True
            self._cond.notify_all()

    def is_set(self) -> bool:
        with self._cond:
            return self._set

    def consume(self) -> bool:
        """Clear the flag; return whether it was set."""
        with self._cond:
            was_set = self._set
            self._set = False
            return was_set

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the flag is set or *timeout* elapses; return the flag."""
        with self._cond:
            if not self._set:
                self._cond.wait(timeout)
            return self._set

    def wake(self) -> None:
        """Wake any waiter without setting the flag (used on shutdown)."""
        with self._cond:
            self._cond.notify_all()
