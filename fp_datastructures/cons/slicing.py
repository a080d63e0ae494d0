from typing import Callable

from fp_datastructures.cons import (
    Cons,
    ConsList,
    iter_cons_list,
    to_cons_list,
)
from fp_datastructures.errors import EmptyListError
from fp_datastructures.logging import get_logger

logger = get_logger(__name__)


def tail[A](l: ConsList[A]) -> ConsList[A]:
    if l is None:
        logger.debug("tail_of_empty_list")
        raise EmptyListError()
    return l.tail


def set_head[A](l: ConsList[A], h: A) -> ConsList[A]:
    """
    Unlike `tail`, an empty list isn't an error here: you get
    back the single element list [h]
    """
    if l is None:
        logger.debug("set_head_on_empty_list", head=h)
        return Cons(h, None)
    return Cons(h, l.tail)


def drop[A](l: ConsList[A], n: int) -> ConsList[A]:
    """
    Removes the first n elements. Running out of list first
    (which includes any negative n) gives the empty list
    """
    remaining = n
    while remaining != 0:
        if l is None:
            logger.debug("drop_past_end", n=n, short_by=remaining)
            return None
        l = l.tail
        remaining -= 1
    return l


def drop_while[A](
    l: ConsList[A], f: Callable[[A], bool]
) -> ConsList[A]:
    while l is not None and f(l.head):
        l = l.tail
    return l


def init[A](l: ConsList[A]) -> ConsList[A]:
    heads = tuple(iter_cons_list(l))
    return to_cons_list(heads[:-1])
