from typing import Callable

from fp_datastructures.cons import (
    Cons,
    ConsList,
    cons_list,
)
from fp_datastructures.cons.folds import fold_left, fold_right


def append[A](a1: ConsList[A], a2: ConsList[A]) -> ConsList[A]:
    """a2 is shared as the tail of the result, a1 is copied"""
    return fold_right(a1, a2, Cons)


def append_via_fold_right[A](
    a1: ConsList[A], a2: ConsList[A]
) -> ConsList[A]:
    return fold_right(a1, a2, lambda x, acc: Cons(x, acc))


def append_via_fold_left[A](
    a1: ConsList[A], a2: ConsList[A]
) -> ConsList[A]:
    return fold_left(reverse(a1), a2, lambda acc, x: Cons(x, acc))


def reverse[A](l: ConsList[A]) -> ConsList[A]:
    return fold_left(l, None, lambda acc, x: Cons(x, acc))


def map[A, B](l: ConsList[A], f: Callable[[A], B]) -> ConsList[B]:
    # fold_left here would come out reversed
    return fold_right(l, None, lambda x, acc: Cons(f(x), acc))


def filter[A](
    l: ConsList[A], include: Callable[[A], bool]
) -> ConsList[A]:
    return fold_right(
        l,
        None,
        lambda x, acc: Cons(x, acc) if include(x) else acc,
    )


def flat_map[A, B](
    l: ConsList[A], f: Callable[[A], ConsList[B]]
) -> ConsList[B]:
    return fold_right(
        l, None, lambda x, acc: append(f(x), acc)
    )


def filter_via_flat_map[A](
    l: ConsList[A], include: Callable[[A], bool]
) -> ConsList[A]:
    return flat_map(
        l, lambda x: cons_list(x) if include(x) else None
    )

