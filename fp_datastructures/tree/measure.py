from typing import Callable

from fp_datastructures.tree import Branch, Leaf, Tree


def size[A](tree: Tree[A]) -> int:
    """Counts branches as well as leaves"""
    match tree:
        case Leaf():
            return 1
        case Branch(left, right):
            return 1 + size(left) + size(right)


def depth[A](tree: Tree[A]) -> int:
    match tree:
        case Leaf():
            return 0
        case Branch(left, right):
            return 1 + max(depth(left), depth(right))


def maximum(tree: Tree[int]) -> int:
    match tree:
        case Leaf(value):
            return value
        case Branch(left, right):
            return max(maximum(left), maximum(right))


def map[A, B](tree: Tree[A], f: Callable[[A], B]) -> Tree[B]:
    match tree:
        case Leaf(value):
            return Leaf(f(value))
        case Branch(left, right):
            return Branch(map(left, f), map(right, f))
