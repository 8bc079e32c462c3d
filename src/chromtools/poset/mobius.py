from __future__ import annotations

from typing import List, Sequence


def mobius_vector(M: Sequence[Sequence[int]]) -> List[int]:
    """Möbius values mu(s, top) for a unit-upper-triangular order matrix.

    The last index is the unique top element:
      mu(top) = 1
      mu(s)   = -sum(mu(t) for t > s with M[s][t] = 1)

    Equivalent to the last column of M^{-1}, computed by back-substitution
    in O(m^2) with exact integers.
    """
    m = len(M)
    mu = [0] * m
    if m == 0:
        return mu

    mu[m - 1] = 1
    for s in range(m - 2, -1, -1):
        row = M[s]
        total = 0
        for t in range(s + 1, m):
            if row[t]:
                total += mu[t]
        mu[s] = -total
    return mu


def mobius_identity_holds(M: Sequence[Sequence[int]], mu: Sequence[int]) -> bool:
    """Check sum_{t >= s} M[s][t] * mu(t) == [s is top] for every s."""
    m = len(M)
    if len(mu) != m:
        return False
    for s in range(m):
        acc = sum(M[s][t] * mu[t] for t in range(s, m))
        if acc != (1 if s == m - 1 else 0):
            return False
    return True
