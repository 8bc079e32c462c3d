"""Refinement order over an enumerated submap set."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from chromtools.errors import ComputationCancelled
from chromtools.submaps.core import Submap

log = logging.getLogger(__name__)

OrderMatrix = List[List[int]]


def is_coarsening(coarse: Submap, fine: Submap) -> bool:
    """True iff every block of *fine* lies inside a single block of *coarse*.

    Both submaps must partition the same base labels.
    """
    return _refines(fine, coarse.block_of())


def order_matrix(
    submaps: Sequence[Submap],
    *,
    should_stop: Optional[Callable[[], bool]] = None,
    on_row: Optional[Callable[[int, int], None]] = None,
) -> OrderMatrix:
    """Unit-upper-triangular 0/1 matrix of the contraction order.

    M[i][j] = 1 for i <= j iff submaps[i] is a coarsening of submaps[j].
    Enumeration order puts every submap after all of its contractions, so
    nothing below the diagonal can be related and those entries stay 0.

    *should_stop* is polled once per row (raises ComputationCancelled);
    *on_row(done, total)* reports completed rows.
    """
    m = len(submaps)
    M: OrderMatrix = [[0] * m for _ in range(m)]

    for i in range(m):
        if should_stop is not None and should_stop():
            log.debug("order matrix cancelled at row %d/%d", i, m)
            raise ComputationCancelled("graph changed during order matrix construction")

        coarse = submaps[i]
        where = coarse.block_of()
        row = M[i]
        row[i] = 1
        for j in range(i + 1, m):
            fine = submaps[j]
            # A coarsening never has more blocks than what it coarsens.
            if fine.n_blocks < coarse.n_blocks:
                continue
            if _refines(fine, where):
                row[j] = 1

        if on_row is not None:
            on_row(i + 1, m)

    return M


def _refines(fine: Submap, where: dict[int, int]) -> bool:
    for block in fine.blocks:
        target = where[block[0]]
        for label in block[1:]:
            if where[label] != target:
                return False
    return True
