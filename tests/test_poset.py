"""Tests for chromtools.poset (order matrix and Möbius values)."""
import pytest

from chromtools.errors import ComputationCancelled
from chromtools.poset.mobius import mobius_identity_holds, mobius_vector
from chromtools.poset.order import is_coarsening, order_matrix
from chromtools.submaps.closure import enumerate_submaps
from chromtools.submaps.core import Submap, initial_submap

TRIANGLE = [(0, 1), (1, 2), (0, 2)]
CYCLE4 = [(0, 1), (1, 2), (2, 3), (0, 3)]
K4 = [(i, j) for i in range(4) for j in range(i + 1, 4)]


def _submaps(n, edges):
    return list(enumerate_submaps(initial_submap(n, edges)))


# --- coarsening ---

def test_is_coarsening_contracted_vs_root():
    root = initial_submap(3, TRIANGLE)
    merged = Submap(blocks=((0, 1), (2,)), edges=((0, 1),))
    assert is_coarsening(merged, root) is True
    assert is_coarsening(root, merged) is False


def test_is_coarsening_reflexive():
    s = Submap(blocks=((0, 2), (1,)), edges=((0, 1),))
    assert is_coarsening(s, s) is True


def test_is_coarsening_siblings_incomparable():
    a = Submap(blocks=((0, 1), (2,)), edges=((0, 1),))
    b = Submap(blocks=((0,), (1, 2)), edges=((0, 1),))
    assert is_coarsening(a, b) is False
    assert is_coarsening(b, a) is False


def test_is_coarsening_single_block_is_bottom():
    bottom = Submap(blocks=((0, 1, 2),), edges=())
    for s in _submaps(3, TRIANGLE):
        assert is_coarsening(bottom, s) is True


# --- order matrix ---

@pytest.mark.parametrize("n,edges", [(3, TRIANGLE), (4, CYCLE4), (4, K4), (2, [])])
def test_order_matrix_unit_upper_triangular(n, edges):
    subs = _submaps(n, edges)
    M = order_matrix(subs)
    m = len(subs)
    assert len(M) == m
    for i in range(m):
        assert M[i][i] == 1
        for j in range(i):
            assert M[i][j] == 0


def test_order_matrix_matches_coarsening():
    subs = _submaps(4, CYCLE4)
    M = order_matrix(subs)
    m = len(subs)
    for i in range(m):
        for j in range(m):
            if i <= j:
                assert M[i][j] == int(is_coarsening(subs[i], subs[j]))
            else:
                # Enumeration order leaves nothing to relate below the diagonal.
                assert not is_coarsening(subs[i], subs[j])


def test_order_matrix_triangle():
    subs = _submaps(3, TRIANGLE)
    M = order_matrix(subs)
    # Bottom (one block) is below everything; the root is above everything.
    assert M[0] == [1, 1, 1, 1, 1]
    assert [row[4] for row in M] == [1, 1, 1, 1, 1]
    assert M[1][2] == 0 and M[1][3] == 0 and M[2][3] == 0


def test_order_matrix_progress_rows():
    subs = _submaps(3, TRIANGLE)
    rows = []
    order_matrix(subs, on_row=lambda done, total: rows.append((done, total)))
    assert rows == [(i, 5) for i in range(1, 6)]


def test_order_matrix_cancelled_per_row():
    subs = _submaps(4, K4)
    polls = []

    def stop_on_third_row():
        polls.append(1)
        return len(polls) >= 3

    with pytest.raises(ComputationCancelled):
        order_matrix(subs, should_stop=stop_on_third_row)
    assert len(polls) == 3


def test_order_matrix_empty():
    assert order_matrix([]) == []


# --- Möbius ---

def test_mobius_empty_and_single():
    assert mobius_vector([]) == []
    assert mobius_vector([[1]]) == [1]


def test_mobius_chain():
    M = [[1, 1, 1], [0, 1, 1], [0, 0, 1]]
    assert mobius_vector(M) == [0, -1, 1]


def test_mobius_boolean_lattice_b2():
    M = [
        [1, 1, 1, 1],
        [0, 1, 0, 1],
        [0, 0, 1, 1],
        [0, 0, 0, 1],
    ]
    assert mobius_vector(M) == [1, -1, -1, 1]


def test_mobius_triangle():
    M = order_matrix(_submaps(3, TRIANGLE))
    assert mobius_vector(M) == [2, -1, -1, -1, 1]


@pytest.mark.parametrize("n,edges", [(3, TRIANGLE), (4, CYCLE4), (4, K4), (1, [])])
def test_mobius_identity(n, edges):
    M = order_matrix(_submaps(n, edges))
    mu = mobius_vector(M)
    assert mu[-1] == 1
    assert mobius_identity_holds(M, mu)


def test_mobius_identity_rejects_wrong_values():
    M = [[1, 1, 1], [0, 1, 1], [0, 0, 1]]
    assert not mobius_identity_holds(M, [1, -1, 1])
    assert not mobius_identity_holds(M, [0, -1])
