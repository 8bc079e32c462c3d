"""Immutable graph snapshots and boundary validation.

Everything downstream of a GraphSnapshot assumes a simple graph on the
dense vertex set 0..n-1; the constructors here are the only place that
checks it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import networkx as nx

from chromtools.errors import GraphInputError

Edge = Tuple[int, int]


def canon_edge(a: int, b: int) -> Edge:
    """Canonical ordering of an endpoint pair."""
    return (a, b) if a <= b else (b, a)


@dataclass(frozen=True)
class GraphSnapshot:
    """
    A consistent copy of a simple graph.

    n:        number of vertices, labelled 0..n-1
    edges:    sorted tuple of (u, v) with u < v
    revision: revision of the editable graph this was taken from, if any
    """

    n: int
    edges: Tuple[Edge, ...]
    revision: Optional[int] = None

    @property
    def n_edges(self) -> int:
        return len(self.edges)


def snapshot_from_edges(
    n: int,
    edges: Iterable[Tuple[int, int]],
    *,
    revision: Optional[int] = None,
) -> GraphSnapshot:
    """Validate an edge list on {0..n-1} and freeze it.

    Raises GraphInputError for a negative vertex count, an out-of-range
    endpoint, a self-loop or a repeated edge (in either orientation).
    """
    if n < 0:
        raise GraphInputError(f"vertex count must be non-negative, got {n}")

    seen: set[Edge] = set()
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise GraphInputError(f"edge ({u}, {v}) references a vertex outside 0..{n - 1}")
        if u == v:
            raise GraphInputError(f"self-loop at vertex {u}")
        e = canon_edge(u, v)
        if e in seen:
            raise GraphInputError(f"duplicate edge {e}")
        seen.add(e)

    return GraphSnapshot(n=n, edges=tuple(sorted(seen)), revision=revision)


def snapshot_from_nx(G: nx.Graph) -> GraphSnapshot:
    """
    Freeze a NetworkX graph. Nodes are relabelled 0..n-1 in sorted order
    when sortable, else in insertion order.
    """
    if G.is_directed() or G.is_multigraph():
        raise GraphInputError("expected a simple undirected graph")
    try:
        H = nx.convert_node_labels_to_integers(G, ordering="sorted")
    except TypeError:
        H = nx.convert_node_labels_to_integers(G, ordering="default")
    return snapshot_from_edges(H.number_of_nodes(), H.edges())


def snapshot_to_nx(snapshot: GraphSnapshot) -> nx.Graph:
    """Thaw a snapshot into a NetworkX graph on 0..n-1."""
    G = nx.Graph()
    G.add_nodes_from(range(snapshot.n))
    G.add_edges_from(snapshot.edges)
    return G
