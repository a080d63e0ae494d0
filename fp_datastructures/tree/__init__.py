from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T", covariant=True)

type Tree[T] = Leaf[T] | Branch[T]


@dataclass(frozen=True)
class Leaf(Generic[T]):
    value: T


@dataclass(frozen=True)
class Branch(Generic[T]):
    """Always exactly two children, there are no unary branches"""

    left: Tree[T]
    right: Tree[T]


# Implementations
from fp_datastructures.tree.measure import depth, map, maximum, size
from fp_datastructures.tree.fold import (
    depth_via_fold,
    fold,
    iter_leaves,
    map_via_fold,
    maximum_via_fold,
    size_via_fold,
)
