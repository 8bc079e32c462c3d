"""Closure of a graph under repeated edge contraction."""
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from chromtools.errors import ComputationCancelled
from chromtools.submaps.core import Submap, direct_children

log = logging.getLogger(__name__)

StopCheck = Callable[[], bool]


class SubmapSet:
    """
    Insertion-ordered set of unique submaps.

    Acts as an arena: the integer handle of a submap is its insertion
    index, and ``index`` is an O(1) hash lookup.
    """

    def __init__(self) -> None:
        self._items: List[Submap] = []
        self._index: Dict[Submap, int] = {}

    def add(self, submap: Submap) -> int:
        """Insert *submap* if absent; return its handle either way."""
        idx = self._index.get(submap)
        if idx is None:
            idx = len(self._items)
            self._items.append(submap)
            self._index[submap] = idx
        return idx

    def index(self, submap: Submap) -> int:
        return self._index[submap]

    def __contains__(self, submap: object) -> bool:
        return submap in self._index

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Submap]:
        return iter(self._items)

    def __getitem__(self, idx: int) -> Submap:
        return self._items[idx]

    @property
    def top(self) -> Submap:
        """The last inserted submap (the uncontracted graph after a full enumeration)."""
        return self._items[-1]


def enumerate_submaps(
    root: Submap,
    *,
    should_stop: Optional[StopCheck] = None,
    on_submap: Optional[Callable[[int], None]] = None,
) -> SubmapSet:
    """Every distinct submap reachable from *root* by edge contractions.

    Depth-first post-order over an explicit worklist: a submap is inserted
    only after all its direct children, so children always precede their
    parents and *root* is last. Submaps already in the set are not
    expanded again.

    *should_stop* is polled once per visited submap; a True reading raises
    ComputationCancelled. *on_submap* receives the running count after
    each insertion.
    """
    found = SubmapSet()
    # (submap, expanded): expanded entries are inserted when popped.
    stack: List[Tuple[Submap, bool]] = [(root, False)]

    while stack:
        if should_stop is not None and should_stop():
            log.debug("submap enumeration cancelled after %d submaps", len(found))
            raise ComputationCancelled("graph changed during submap enumeration")

        submap, expanded = stack.pop()
        if submap in found:
            continue

        if expanded:
            found.add(submap)
            if on_submap is not None:
                on_submap(len(found))
            continue

        stack.append((submap, True))
        # Reverse so children are visited in edge order.
        for child in reversed(direct_children(submap)):
            if child not in found:
                stack.append((child, False))

    return found
