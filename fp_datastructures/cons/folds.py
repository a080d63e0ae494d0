from typing import Callable

from fp_datastructures.cons import ConsList, iter_cons_list


def fold_right[A, B](
    l: ConsList[A], z: B, f: Callable[[A, B], B]
) -> B:
    """
    f(a0, f(a1, ... f(an, z)))

    The cells are buffered and combined from the back, which is
    the same order of f calls as the recursive definition but
    without using a stack frame per element
    """
    acc = z
    for head in reversed(tuple(iter_cons_list(l))):
        acc = f(head, acc)
    return acc


def fold_left[A, B](
    l: ConsList[A], z: B, f: Callable[[B, A], B]
) -> B:
    acc = z
    while l is not None:
        acc = f(acc, l.head)
        l = l.tail
    return acc


def sum(ints: ConsList[int]) -> int:
    total = 0
    for x in iter_cons_list(ints):
        total += x
    return total


def product(ds: ConsList[float]) -> float:
    """
    head * product(tail), where the product of a list starting
    with 0.0 is 0.0 without looking any further

    Only the heads before the first zero are kept, and they are
    multiplied in from the back like `fold_right`
    """
    heads: list[float] = []
    result = 1.0
    for x in iter_cons_list(ds):
        if x == 0.0:
            result = 0.0
            break
        heads.append(x)
    for x in reversed(heads):
        result = x * result
    return result


def sum_via_fold_right(ns: ConsList[int]) -> int:
    return fold_right(ns, 0, lambda x, y: x + y)


def product_via_fold_right(ns: ConsList[float]) -> float:
    return fold_right(ns, 1.0, lambda x, y: x * y)


def length[A](l: ConsList[A]) -> int:
    return fold_right(l, 0, lambda _, acc: acc + 1)


def length_via_fold_left[A](l: ConsList[A]) -> int:
    return fold_left(l, 0, lambda acc, _: acc + 1)
