"""Thread-safe editable graph shared between an editor and the recompute worker."""
from __future__ import annotations

import logging
from threading import Lock
from typing import Callable, List, Set

from chromtools.errors import GraphInputError
from chromtools.graph.snapshot import Edge, GraphSnapshot, canon_edge

log = logging.getLogger(__name__)

MutationCallback = Callable[[int], None]


class EditableGraph:
    """
    Simple undirected graph with dense vertex ids 0..n-1.

    Every read and write goes through an internal lock. Topology mutations
    bump ``revision`` and then notify subscribers with the new revision,
    after the lock has been released, so a subscriber may take its own
    lock without any ordering hazard.

    Removing a vertex drops its incident edges and shifts every higher
    vertex id down by one, keeping ids dense.
    """

    def __init__(self, n: int = 0, edges: list[tuple[int, int]] | None = None) -> None:
        if n < 0:
            raise GraphInputError(f"vertex count must be non-negative, got {n}")
        self._lock = Lock()
        self._n = n
        self._edges: Set[Edge] = set()
        self._revision = 0
        self._subscribers: List[MutationCallback] = []
        for u, v in edges or []:
            if not self._add_edge_unlocked(u, v):
                raise GraphInputError(f"duplicate edge {canon_edge(u, v)}")

    # ------------------------------------------------------------------ #
    # Observation
    # ------------------------------------------------------------------ #

    def subscribe(self, callback: MutationCallback) -> None:
        """Register a callback invoked with the new revision after every mutation."""
        with self._lock:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: MutationCallback) -> None:
        with self._lock:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass

    @property
    def revision(self) -> int:
        with self._lock:
            return self._revision

    @property
    def n(self) -> int:
        with self._lock:
            return self._n

    def edges(self) -> list[Edge]:
        with self._lock:
            return sorted(self._edges)

    def snapshot(self) -> GraphSnapshot:
        """Consistent copy of vertices, edges and revision."""
        with self._lock:
            return GraphSnapshot(
                n=self._n,
                edges=tuple(sorted(self._edges)),
                revision=self._revision,
            )

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #

    def add_vertex(self) -> int:
        """Append a vertex and return its id."""
        with self._lock:
            v = self._n
            self._n += 1
            rev = self._bump_unlocked()
        self._notify(rev)
        return v

    def remove_vertex(self, v: int) -> None:
        with self._lock:
            self._check_vertex_unlocked(v)
            kept: Set[Edge] = set()
            for a, b in self._edges:
                if a == v or b == v:
                    continue
                kept.add((a - 1 if a > v else a, b - 1 if b > v else b))
            self._edges = kept
            self._n -= 1
            rev = self._bump_unlocked()
        self._notify(rev)

    def add_edge(self, u: int, v: int) -> bool:
        """Add edge {u, v}. Returns False (and changes nothing) if it already exists."""
        with self._lock:
            if not self._add_edge_unlocked(u, v):
                return False
            rev = self._bump_unlocked()
        self._notify(rev)
        return True

    def remove_edge(self, u: int, v: int) -> bool:
        """Remove edge {u, v}. Returns False if it was not present."""
        with self._lock:
            e = canon_edge(u, v)
            if e not in self._edges:
                return False
            self._edges.remove(e)
            rev = self._bump_unlocked()
        self._notify(rev)
        return True

    # ------------------------------------------------------------------ #
    # Internals (lock held)
    # ------------------------------------------------------------------ #

    def _check_vertex_unlocked(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise GraphInputError(f"vertex {v} outside 0..{self._n - 1}")

    def _add_edge_unlocked(self, u: int, v: int) -> bool:
        self._check_vertex_unlocked(u)
        self._check_vertex_unlocked(v)
        if u == v:
            raise GraphInputError(f"self-loop at vertex {u}")
        e = canon_edge(u, v)
        if e in self._edges:
            return False
        self._edges.add(e)
        return True

    def _bump_unlocked(self) -> int:
        self._revision += 1
        return self._revision

    def _notify(self, revision: int) -> None:
        with self._lock:
            subscribers = list(self._subscribers)
        for cb in subscribers:
            cb(revision)
        log.debug("graph mutated, revision=%d", revision)
