"""Submaps: graphs obtained from a base graph by contracting edges.

A submap is a partition of the base vertices into blocks (each block a
sorted tuple of base labels) plus the edges between blocks, stored as
index pairs into the block tuple.

Canonical form: blocks are ordered by their smallest label and edges are
sorted (i, j) pairs with i < j. Contraction of (i, j), i < j, keeps the
merged block at position i, whose smallest label is the smaller of the
two, so block order survives contraction unchanged; edges are re-sorted
after every contraction. Two submaps describing the same contraction are
therefore equal and hash equal, however they were reached.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from chromtools.graph.snapshot import Edge, GraphSnapshot, canon_edge

Block = Tuple[int, ...]


@dataclass(frozen=True)
class Submap:
    blocks: Tuple[Block, ...]
    edges: Tuple[Edge, ...]

    @property
    def n_blocks(self) -> int:
        return len(self.blocks)

    @property
    def n_edges(self) -> int:
        return len(self.edges)

    def block_of(self) -> dict[int, int]:
        """Map each base label to the index of the block containing it."""
        return {label: i for i, block in enumerate(self.blocks) for label in block}


def initial_submap(n: int, edges: Iterable[Tuple[int, int]]) -> Submap:
    """The uncontracted graph: n singleton blocks plus the given edges."""
    blocks = tuple((v,) for v in range(n))
    return Submap(blocks=blocks, edges=tuple(sorted({canon_edge(u, v) for u, v in edges})))


def submap_from_snapshot(snapshot: GraphSnapshot) -> Submap:
    return initial_submap(snapshot.n, snapshot.edges)


def contract(submap: Submap, i: int, j: int) -> Submap:
    """Contract the edge between blocks i and j.

    The merged block takes position min(i, j); the other position is
    removed and every higher index shifts down by one. Edges that would
    become self-loops are dropped and parallel edges collapse.
    """
    if i > j:
        i, j = j, i

    merged = tuple(sorted(submap.blocks[i] + submap.blocks[j]))
    blocks = submap.blocks[:i] + (merged,) + submap.blocks[i + 1:j] + submap.blocks[j + 1:]

    def remap(k: int) -> int:
        if k == j:
            return i
        return k - 1 if k > j else k

    new_edges: set[Edge] = set()
    for a, b in submap.edges:
        a2, b2 = remap(a), remap(b)
        if a2 == b2:
            continue
        new_edges.add(canon_edge(a2, b2))

    return Submap(blocks=blocks, edges=tuple(sorted(new_edges)))


def direct_children(submap: Submap) -> List[Submap]:
    """One child per edge of *submap*, obtained by contracting that edge.

    Children that coincide (different edges, same result) are all returned;
    deduplication happens in the enumeration.
    """
    return [contract(submap, i, j) for i, j in submap.edges]
