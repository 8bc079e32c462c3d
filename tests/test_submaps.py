"""Tests for chromtools.submaps."""
import pytest

from chromtools.errors import ComputationCancelled
from chromtools.submaps.core import Submap, initial_submap, contract, direct_children
from chromtools.submaps.closure import SubmapSet, enumerate_submaps

TRIANGLE = [(0, 1), (1, 2), (0, 2)]
PATH4 = [(0, 1), (1, 2), (2, 3)]
CYCLE4 = [(0, 1), (1, 2), (2, 3), (0, 3)]
K4 = [(i, j) for i in range(4) for j in range(i + 1, 4)]


# --- construction ---

def test_initial_submap_singletons():
    s = initial_submap(3, [(1, 0), (2, 1)])
    assert s.blocks == ((0,), (1,), (2,))
    assert s.edges == ((0, 1), (1, 2))
    assert s.n_blocks == 3
    assert s.n_edges == 2


def test_initial_submap_no_edges():
    s = initial_submap(2, [])
    assert s.blocks == ((0,), (1,))
    assert s.edges == ()


def test_block_of():
    s = Submap(blocks=((0, 2), (1,)), edges=((0, 1),))
    assert s.block_of() == {0: 0, 2: 0, 1: 1}


# --- contraction ---

def test_contract_triangle_collapses_parallel_edges():
    s = contract(initial_submap(3, TRIANGLE), 0, 1)
    assert s.blocks == ((0, 1), (2,))
    assert s.edges == ((0, 1),)


def test_contract_shifts_higher_indices():
    s = contract(initial_submap(4, PATH4), 1, 2)
    assert s.blocks == ((0,), (1, 2), (3,))
    assert s.edges == ((0, 1), (1, 2))


def test_contract_argument_order_irrelevant():
    base = initial_submap(4, PATH4)
    assert contract(base, 2, 1) == contract(base, 1, 2)


def test_contract_merged_block_sorted():
    base = initial_submap(4, CYCLE4)
    s = contract(base, 0, 3)
    assert s.blocks[0] == (0, 3)
    assert s.blocks == ((0, 3), (1,), (2,))


def test_direct_children_one_per_edge():
    children = direct_children(initial_submap(3, TRIANGLE))
    assert len(children) == 3
    for c in children:
        assert c.n_blocks == 2
        assert c.n_edges == 1


def test_direct_children_single_block():
    s = Submap(blocks=((0, 1, 2),), edges=())
    assert direct_children(s) == []


def test_contraction_order_gives_equal_submaps():
    # C4: contracting {0,1} then {2,3} equals {2,3} then {0,1}
    base = initial_submap(4, CYCLE4)
    a = contract(contract(base, 0, 1), 1, 2)
    b = contract(contract(base, 2, 3), 0, 1)
    assert a == b
    assert hash(a) == hash(b)
    assert a.blocks == ((0, 1), (2, 3))
    assert a.edges == ((0, 1),)


# --- SubmapSet ---

def test_submap_set_dedup():
    found = SubmapSet()
    s = initial_submap(2, [(0, 1)])
    assert found.add(s) == 0
    assert found.add(initial_submap(2, [(1, 0)])) == 0
    assert len(found) == 1
    assert s in found
    assert found.index(s) == 0
    assert found[0] is s
    assert found.top is s


# --- enumeration ---

def test_enumerate_triangle():
    root = initial_submap(3, TRIANGLE)
    found = enumerate_submaps(root)
    assert len(found) == 5
    assert found.top == root
    assert found[0].n_blocks == 1


@pytest.mark.parametrize(
    "n,edges,expected",
    [
        (1, [], 1),
        (3, [], 1),            # no contractible edges
        (2, [(0, 1)], 2),
        (4, PATH4, 8),         # connected partitions of a path: 2^(n-1)
        (4, CYCLE4, 12),
        (4, K4, 15),           # Bell(4)
    ],
)
def test_enumerate_sizes(n, edges, expected):
    assert len(enumerate_submaps(initial_submap(n, edges))) == expected


def test_enumerate_unique():
    found = enumerate_submaps(initial_submap(4, K4))
    assert len(set(found)) == len(found)


def test_enumerate_children_precede_parents():
    root = initial_submap(4, CYCLE4)
    found = enumerate_submaps(root)
    assert found.index(root) == len(found) - 1
    for idx, s in enumerate(found):
        for child in direct_children(s):
            assert child in found
            assert found.index(child) < idx
            assert child.n_blocks == s.n_blocks - 1


def test_enumerate_blocks_partition_base_labels():
    for s in enumerate_submaps(initial_submap(4, K4)):
        labels = sorted(v for block in s.blocks for v in block)
        assert labels == [0, 1, 2, 3]
        assert [b[0] for b in s.blocks] == sorted(b[0] for b in s.blocks)
        for i, j in s.edges:
            assert 0 <= i < j < s.n_blocks


def test_enumerate_progress_counts():
    seen = []
    found = enumerate_submaps(initial_submap(3, TRIANGLE), on_submap=seen.append)
    assert seen == list(range(1, len(found) + 1))


def test_enumerate_cancelled_immediately():
    with pytest.raises(ComputationCancelled):
        enumerate_submaps(initial_submap(3, TRIANGLE), should_stop=lambda: True)


def test_enumerate_cancelled_midway():
    polls = []

    def stop_after_three():
        polls.append(1)
        return len(polls) > 3

    with pytest.raises(ComputationCancelled):
        enumerate_submaps(initial_submap(4, K4), should_stop=stop_after_three)
    assert len(polls) == 4
