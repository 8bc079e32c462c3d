from __future__ import annotations

import networkx as nx

from chromtools.errors import GraphInputError
from chromtools.graph.snapshot import GraphSnapshot, snapshot_from_nx, snapshot_to_nx


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def g6_to_nx(g6: str) -> nx.Graph:
    """
    Parse a graph6 string into a simple undirected NetworkX Graph.

    Raises GraphInputError for strings networkx cannot decode.
    """
    s = strip_graph6_header(g6)
    try:
        G = nx.from_graph6_bytes(s.encode("ascii"))
    except (nx.NetworkXError, ValueError, UnicodeEncodeError) as exc:
        raise GraphInputError(f"invalid graph6 string {g6!r}: {exc}") from exc
    if isinstance(G, (nx.MultiGraph, nx.MultiDiGraph)):
        G = nx.Graph(G)
    return G


def g6_to_snapshot(g6: str) -> GraphSnapshot:
    """
    Parse a graph6 string straight into a validated GraphSnapshot on 0..n-1.
    """
    return snapshot_from_nx(g6_to_nx(g6))


def snapshot_to_g6(snapshot: GraphSnapshot) -> str:
    """Encode a snapshot as a graph6 string (no header)."""
    G = snapshot_to_nx(snapshot)
    return nx.to_graph6_bytes(G, header=False).decode("ascii").strip()
