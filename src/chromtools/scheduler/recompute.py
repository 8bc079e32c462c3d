"""Background recomputation of the chromatic polynomial of an editable graph."""
from __future__ import annotations

import logging
import time
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from threading import Condition, Event, Lock, Thread
from typing import Callable, Dict, Optional

from chromtools import config
from chromtools.errors import ComputationCancelled, ComputationFailed
from chromtools.graph.editable import EditableGraph
from chromtools.graph.snapshot import GraphSnapshot
from chromtools.invariants.chromatic import ChromaticPolynomial, compute_chromatic_polynomial
from chromtools.scheduler.signal import ChangeSignal

log = logging.getLogger(__name__)

ComputeFn = Callable[..., ChromaticPolynomial]


class CycleState(str, Enum):
    IDLE = "idle"
    COMPUTING = "computing"
    PUBLISHED = "published"
    ABORTED = "aborted"
    FAILED = "failed"


@dataclass(frozen=True)
class Progress:
    """Progress of the cycle in flight (or of the last one)."""

    submaps_found: int = 0
    rows_done: int = 0
    rows_total: int = 0


class RecomputeScheduler:
    """
    Recomputes the chromatic polynomial of *graph* on a worker thread
    whenever its topology changes.

    - Every graph mutation marks a coalescing ChangeSignal; edits made
      before the worker looks at the signal collapse into one cycle.
    - A cycle consumes the signal, snapshots the graph, and runs
      *compute* with a stop check that fires as soon as the signal is
      set again (or shutdown begins). A cancelled cycle publishes nothing.
    - A successful cycle replaces the single published result. Aborted
      and failed cycles leave it untouched.

    The graph lock, the signal lock and the output lock are never held
    at the same time by the worker.
    """

    def __init__(
        self,
        graph: EditableGraph,
        *,
        compute: ComputeFn = compute_chromatic_polynomial,
        idle_wait_s: Optional[float] = None,
        name: str = "chromtools-recompute",
    ) -> None:
        self._graph = graph
        self._compute = compute
        self._idle_wait_s = config.IDLE_WAIT_S if idle_wait_s is None else idle_wait_s
        self._name = name

        self._signal = ChangeSignal()

        # Output slot, progress and cycle bookkeeping.
        self._out_lock = Lock()
        self._out_cond = Condition(self._out_lock)
        self._published: Optional[ChromaticPolynomial] = None
        self._state = CycleState.IDLE
        self._last_error: Optional[BaseException] = None
        self._failed_revision: Optional[int] = None
        self._progress = Progress()
        self._counts: Counter[CycleState] = Counter()

        # Lifecycle
        self._lifecycle_lock = Lock()
        self._stop_requested = Event()
        self._thread: Optional[Thread] = None

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    def start(self) -> None:
        """
        Start the worker thread if not already running. The graph as it
        stands at start counts as a change, so a first cycle always runs.

        If an earlier stop() timed out, the old worker is joined first.
        """
        with self._lifecycle_lock:
            previous = self._thread
            if previous is not None and previous.is_alive():
                if not self._stop_requested.is_set():
                    return
                log.info("%s waiting for the previous worker to exit", self._name)
                previous.join()
            self._stop_requested.clear()
            self._graph.subscribe(self._on_graph_mutation)
            self._signal.mark()
            self._thread = Thread(target=self._run, name=self._name, daemon=True)
            self._thread.start()
        log.info("%s started", self._name)

    def stop(self, timeout: Optional[float] = None) -> None:
        """
        Stop accepting cycles, cancel the one in flight at its next
        checkpoint and join the worker.
        """
        with self._lifecycle_lock:
            thread = self._thread
            self._graph.unsubscribe(self._on_graph_mutation)
            self._stop_requested.set()
            self._signal.wake()
        if thread is not None:
            thread.join(timeout=timeout)
            if thread.is_alive():
                log.warning("%s did not stop within %s s", self._name, timeout)
        log.info("%s stopped", self._name)

    @property
    def running(self) -> bool:
        with self._lifecycle_lock:
            return self._thread is not None and self._thread.is_alive()

    def __enter__(self) -> "RecomputeScheduler":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    # ------------------------------------------------------------------ #
    # Outputs
    # ------------------------------------------------------------------ #

    @property
    def state(self) -> CycleState:
        with self._out_lock:
            return self._state

    @property
    def published(self) -> Optional[ChromaticPolynomial]:
        """Last published polynomial, possibly for an older graph revision."""
        with self._out_lock:
            return self._published

    @property
    def last_error(self) -> Optional[BaseException]:
        with self._out_lock:
            return self._last_error

    def current(self) -> Optional[ChromaticPolynomial]:
        """
        The published polynomial if it matches the graph as it is now,
        otherwise None (not yet available / in progress).
        """
        revision = self._graph.revision
        with self._out_lock:
            poly = self._published
        if poly is not None and poly.revision == revision:
            return poly
        return None

    def progress(self) -> Progress:
        with self._out_lock:
            return self._progress

    def cycle_counts(self) -> Dict[CycleState, int]:
        """How many cycles ended published, aborted or failed so far."""
        with self._out_lock:
            return dict(self._counts)

    def wait_for_result(self, timeout: Optional[float] = None) -> Optional[ChromaticPolynomial]:
        """
        Block until a result for the graph's current revision is published
        (returned) or computing it failed (None), or until *timeout*.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            revision = self._graph.revision
            with self._out_cond:
                poly = self._published
                if poly is not None and poly.revision == revision:
                    return poly
                if self._state is CycleState.FAILED and self._failed_revision == revision:
                    return None
                if deadline is None:
                    self._out_cond.wait(self._idle_wait_s)
                else:
                    remaining = deadline - time.monotonic()
                    if remaining <= 0:
                        return None
                    self._out_cond.wait(min(remaining, self._idle_wait_s))

    # ------------------------------------------------------------------ #
    # Editor side
    # ------------------------------------------------------------------ #

    def _on_graph_mutation(self, revision: int) -> None:
        self._signal.mark()

    # ------------------------------------------------------------------ #
    # Worker
    # ------------------------------------------------------------------ #

    def _should_stop(self) -> bool:
        return self._signal.is_set() or self._stop_requested.is_set()

    def _run(self) -> None:
        try:
            while not self._stop_requested.is_set():
                if not self._signal.wait(self._idle_wait_s):
                    continue
                if self._stop_requested.is_set():
                    break
                self._signal.consume()
                self._run_cycle(self._graph.snapshot())
        finally:
            with self._out_cond:
                self._state = CycleState.IDLE
                self._out_cond.notify_all()
            log.info("%s worker loop exited", self._name)

    def _run_cycle(self, snapshot: GraphSnapshot) -> None:
        with self._out_cond:
            self._state = CycleState.COMPUTING
            self._progress = Progress()

        log.debug(
            "%s cycle start: revision=%s n=%d m=%d",
            self._name, snapshot.revision, snapshot.n, snapshot.n_edges,
        )
        try:
            poly = self._compute(
                snapshot,
                should_stop=self._should_stop,
                on_submap=self._on_submap,
                on_row=self._on_row,
            )
        except ComputationCancelled:
            self._finish(CycleState.ABORTED)
            log.debug("%s cycle aborted: revision=%s", self._name, snapshot.revision)
            return
        except MemoryError as exc:
            self._fail(snapshot, ComputationFailed(f"out of memory: {exc!r}"))
            return
        except ComputationFailed as exc:
            self._fail(snapshot, exc)
            return
        except Exception as exc:
            log.exception("%s cycle crashed: revision=%s", self._name, snapshot.revision)
            self._fail(snapshot, ComputationFailed(f"computation crashed: {exc!r}"))
            return

        # An edit that landed after the last checkpoint still wins.
        if self._should_stop():
            self._finish(CycleState.ABORTED)
            log.debug("%s result dropped: revision=%s is stale", self._name, snapshot.revision)
            return

        with self._out_cond:
            self._published = poly
            self._last_error = None
            self._failed_revision = None
            self._state = CycleState.PUBLISHED
            self._counts[CycleState.PUBLISHED] += 1
            self._out_cond.notify_all()
        log.debug("%s published revision=%s: %s", self._name, snapshot.revision, poly)

    def _finish(self, state: CycleState) -> None:
        with self._out_cond:
            self._state = state
            self._counts[state] += 1
            self._out_cond.notify_all()

    def _fail(self, snapshot: GraphSnapshot, exc: ComputationFailed) -> None:
        log.error("%s cycle failed: revision=%s: %s", self._name, snapshot.revision, exc)
        with self._out_cond:
            self._last_error = exc
            self._failed_revision = snapshot.revision
            self._state = CycleState.FAILED
            self._counts[CycleState.FAILED] += 1
            self._out_cond.notify_all()

    def _on_submap(self, count: int) -> None:
        with self._out_lock:
            self._progress = Progress(submaps_found=count)

    def _on_row(self, done: int, total: int) -> None:
        with self._out_lock:
            self._progress = Progress(
                submaps_found=self._progress.submaps_found,
                rows_done=done,
                rows_total=total,
            )
