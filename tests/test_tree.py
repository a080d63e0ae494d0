import sys

import pytest

from fp_datastructures.tree import (
    Branch,
    Leaf,
    depth,
    depth_via_fold,
    fold,
    iter_leaves,
    map,
    map_via_fold,
    maximum,
    maximum_via_fold,
    size,
    size_via_fold,
)

TREE = Branch(Leaf(1), Branch(Leaf(2), Leaf(4)))

SAMPLES = [
    Leaf(1),
    Leaf(5),
    TREE,
    Branch(Branch(Leaf(7), Leaf(-1)), Leaf(3)),
    Branch(
        Branch(Leaf(0), Branch(Leaf(9), Leaf(2))),
        Branch(Leaf(4), Leaf(4)),
    ),
]


def test_size():
    assert 1 == size(Leaf(1))
    assert 5 == size(TREE)


def test_depth():
    assert 0 == depth(Leaf(1))
    assert 2 == depth(TREE)


def test_maximum():
    assert 5 == maximum(Leaf(5))
    assert 4 == maximum(TREE)


def test_map():
    assert Leaf(3) == map(Leaf(2), lambda x: x + 1)
    assert Branch(Leaf(2), Branch(Leaf(3), Leaf(5))) == map(
        TREE, lambda x: x + 1
    )
    assert Branch(Leaf("1"), Branch(Leaf("2"), Leaf("4"))) == map(
        TREE, str
    )


def test_map_leaves_input_alone():
    map(TREE, lambda x: x * 10)
    assert Branch(Leaf(1), Branch(Leaf(2), Leaf(4))) == TREE


def test_tree_is_immutable():
    with pytest.raises(AttributeError):
        TREE.left = Leaf(0)  # type: ignore


@pytest.mark.parametrize("tree", SAMPLES)
def test_fold_variants_agree(tree):
    assert size(tree) == size_via_fold(tree)
    assert depth(tree) == depth_via_fold(tree)
    assert maximum(tree) == maximum_via_fold(tree)
    assert map(tree, lambda x: x - 1) == map_via_fold(
        tree, lambda x: x - 1
    )


def test_fold_keeps_left_right_order():
    assert "(1(24))" == fold(TREE, str, lambda l, r: f"({l}{r})")


def test_iter_leaves():
    assert [1, 2, 4] == list(iter_leaves(TREE))
    assert [7] == list(iter_leaves(Leaf(7)))


def test_fold_on_deep_tree():
    n = sys.getrecursionlimit() * 5
    tree = Leaf(0)
    for i in range(1, n + 1):
        tree = Branch(Leaf(i), tree)
    assert n == depth_via_fold(tree)
    assert 2 * n + 1 == size_via_fold(tree)
    assert n == maximum_via_fold(tree)
    assert n + 1 == len(list(iter_leaves(tree)))
