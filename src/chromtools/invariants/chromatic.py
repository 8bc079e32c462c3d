from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import networkx as nx

from chromtools import config
from chromtools.errors import ComputationFailed
from chromtools.graph.snapshot import GraphSnapshot, snapshot_from_edges, snapshot_from_nx
from chromtools.io.graph6 import g6_to_snapshot
from chromtools.poset.mobius import mobius_identity_holds, mobius_vector
from chromtools.poset.order import order_matrix
from chromtools.submaps.closure import SubmapSet, enumerate_submaps
from chromtools.submaps.core import submap_from_snapshot
from chromtools.utils.formatting import format_polynomial

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChromaticPolynomial:
    """
    Chromatic polynomial in the monomial basis.

    coefficients: (c_0, ..., c_{n-1}) meaning sum c_k * x^(k+1);
                  empty for the graph with no vertices (P = 1).
    n_submaps:    size of the contraction closure it was computed from.
    revision:     revision of the graph snapshot, None for one-shot calls.
    """

    coefficients: Tuple[int, ...]
    n_submaps: int = 0
    revision: Optional[int] = None

    @property
    def degree(self) -> int:
        return len(self.coefficients)

    def evaluate(self, q: int) -> int:
        """P(q); for integer q >= 0 this is the number of proper q-colourings."""
        if not self.coefficients:
            return 1
        total = 0
        for k in range(len(self.coefficients) - 1, -1, -1):
            total = (total + self.coefficients[k]) * q
        return total

    def __str__(self) -> str:
        if not self.coefficients:
            return "1"
        return format_polynomial(self.coefficients)


def chromatic_coefficients(submaps: Sequence, mu: Sequence[int], n: int) -> List[int]:
    """Fold Möbius values into coefficients: c[k] += mu(s) for s with k+1 blocks."""
    coeffs = [0] * n
    for s, value in zip(submaps, mu):
        coeffs[s.n_blocks - 1] += value
    return coeffs


def compute_chromatic_polynomial(
    snapshot: GraphSnapshot,
    *,
    should_stop: Optional[Callable[[], bool]] = None,
    on_submap: Optional[Callable[[int], None]] = None,
    on_row: Optional[Callable[[int, int], None]] = None,
    max_vertices: Optional[int] = None,
) -> ChromaticPolynomial:
    """Run enumeration, order matrix, Möbius inversion and assembly on *snapshot*.

    The snapshot is trusted to be a simple graph. *max_vertices* defaults to
    config.MAX_VERTICES; a value <= 0 disables the ceiling.

    Raises ComputationCancelled when *should_stop* fires, and
    ComputationFailed when the graph is over the ceiling or memory runs out.
    """
    limit = config.MAX_VERTICES if max_vertices is None else max_vertices
    n = snapshot.n
    if limit > 0 and n > limit:
        raise ComputationFailed(
            f"graph has {n} vertices, above the ceiling of {limit} "
            "(set CHROMTOOLS_MAX_VERTICES to raise it)"
        )
    if n == 0:
        return ChromaticPolynomial(coefficients=(), n_submaps=0, revision=snapshot.revision)

    try:
        submaps: SubmapSet = enumerate_submaps(
            submap_from_snapshot(snapshot),
            should_stop=should_stop,
            on_submap=on_submap,
        )
        log.debug("n=%d m=%d: %d submaps", n, snapshot.n_edges, len(submaps))
        M = order_matrix(list(submaps), should_stop=should_stop, on_row=on_row)
        mu = mobius_vector(M)
        if log.isEnabledFor(logging.DEBUG) and not mobius_identity_holds(M, mu):
            log.error("Möbius identity violated for n=%d m=%d", n, snapshot.n_edges)
        coeffs = chromatic_coefficients(submaps, mu, n)
    except MemoryError as exc:
        raise ComputationFailed(
            f"out of memory computing chromatic polynomial (n={n}, m={snapshot.n_edges})"
        ) from exc

    return ChromaticPolynomial(
        coefficients=tuple(coeffs),
        n_submaps=len(submaps),
        revision=snapshot.revision,
    )


def chromatic_polynomial(
    n: int,
    edges: Iterable[Tuple[int, int]],
    *,
    max_vertices: Optional[int] = None,
) -> ChromaticPolynomial:
    """Chromatic polynomial of a graph on {0..n-1}, validating the edge list first."""
    return compute_chromatic_polynomial(
        snapshot_from_edges(n, edges),
        max_vertices=max_vertices,
    )


def chromatic_polynomial_nx(G: nx.Graph, *, max_vertices: Optional[int] = None) -> ChromaticPolynomial:
    """Chromatic polynomial of a simple NetworkX graph."""
    return compute_chromatic_polynomial(snapshot_from_nx(G), max_vertices=max_vertices)


def chromatic_polynomial_g6(g6: str, *, max_vertices: Optional[int] = None) -> ChromaticPolynomial:
    """Chromatic polynomial from a graph6 string."""
    return compute_chromatic_polynomial(g6_to_snapshot(g6), max_vertices=max_vertices)
