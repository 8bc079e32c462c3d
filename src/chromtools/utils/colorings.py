from __future__ import annotations

from itertools import product


def count_proper_colorings(n: int, edges: list[tuple[int, int]], q: int) -> int:
    """Number of proper q-colourings of a graph on {0..n-1}, by brute force.

    Enumerates all q^n assignments, so only practical for small n and q.
    Raises ValueError for q^n above ten million.
    """
    if q < 0:
        raise ValueError(f"q must be non-negative, got {q}")
    if n == 0:
        return 1
    if q ** n > 10_000_000:
        raise ValueError(
            f"Brute-force colouring count is impractical for n={n}, q={q}."
        )

    count = 0
    for colors in product(range(q), repeat=n):
        if all(colors[u] != colors[v] for u, v in edges):
            count += 1
    return count
