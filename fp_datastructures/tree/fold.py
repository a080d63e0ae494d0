from typing import Callable, Iterator

from fp_datastructures.tree import Branch, Leaf, Tree


def fold[A, B](
    tree: Tree[A],
    leaf_f: Callable[[A], B],
    branch_f: Callable[[B, B], B],
) -> B:
    """
    leaf_f on every Leaf, branch_f on the folded children of
    every Branch

    Walks the tree with an explicit stack rather than recursing,
    so a degenerate (list shaped) tree of any depth is fine.
    Entries are (node, expanded); a Branch is pushed once to
    schedule its children and again, marked expanded, to combine
    their results, which are on top of `results` by then
    """
    stack: list[tuple[Tree[A], bool]] = [(tree, False)]
    results: list[B] = []
    while stack:
        node, expanded = stack.pop()
        match node:
            case Leaf(value):
                results.append(leaf_f(value))
            case Branch(left, right):
                if expanded:
                    right_result = results.pop()
                    left_result = results.pop()
                    results.append(branch_f(left_result, right_result))
                else:
                    stack.append((node, True))
                    stack.append((right, False))
                    stack.append((left, False))
    assert len(results) == 1
    return results[0]


def size_via_fold[A](tree: Tree[A]) -> int:
    return fold(tree, lambda _: 1, lambda l, r: 1 + l + r)


def depth_via_fold[A](tree: Tree[A]) -> int:
    return fold(tree, lambda _: 0, lambda l, r: 1 + max(l, r))


def maximum_via_fold(tree: Tree[int]) -> int:
    return fold(tree, lambda v: v, max)


def map_via_fold[A, B](tree: Tree[A], f: Callable[[A], B]) -> Tree[B]:
    return fold(
        tree,
        lambda v: Leaf(f(v)),
        lambda l, r: Branch(l, r),
    )


def iter_leaves[A](tree: Tree[A]) -> Iterator[A]:
    """Leaf values, left to right"""
    stack: list[Tree[A]] = [tree]
    while stack:
        match stack.pop():
            case Leaf(value):
                yield value
            case Branch(left, right):
                stack.append(right)
                stack.append(left)
