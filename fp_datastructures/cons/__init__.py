from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T", covariant=True)

type ConsList[T] = Cons[T] | None
"""`None` is the empty list"""


@dataclass(frozen=True)
class Cons(Generic[T]):
    head: T
    tail: ConsList[T]


def cons_list[T](*items: T) -> ConsList[T]:
    return to_cons_list(items)


def to_cons_list[T](it: Iterable[T]) -> ConsList[T]:
    # Built from the back so every cell is allocated exactly once
    l: ConsList[T] = None
    for item in reversed(list(it)):
        l = Cons(item, l)
    return l


def iter_cons_list[T](l: ConsList[T]) -> Iterator[T]:
    while l is not None:
        yield l.head
        l = l.tail


# Implementations
from fp_datastructures.cons.folds import (
    fold_left,
    fold_right,
    length,
    length_via_fold_left,
    product,
    product_via_fold_right,
    sum,
    sum_via_fold_right,
)
from fp_datastructures.cons.slicing import (
    drop,
    drop_while,
    init,
    set_head,
    tail,
)
from fp_datastructures.cons.transform import (
    append,
    append_via_fold_left,
    append_via_fold_right,
    filter,
    filter_via_flat_map,
    flat_map,
    map,
    reverse,
)
from fp_datastructures.cons.zipping import add_elements, zip_with
