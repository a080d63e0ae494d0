from typing import Callable

from fp_datastructures.cons import ConsList, to_cons_list


def zip_with[A](
    l1: ConsList[A], l2: ConsList[A], f: Callable[[A, A], A]
) -> ConsList[A]:
    """Pairs up elements until either list runs out"""
    combined: list[A] = []
    while l1 is not None and l2 is not None:
        combined.append(f(l1.head, l2.head))
        l1, l2 = l1.tail, l2.tail
    return to_cons_list(combined)


def add_elements(
    l1: ConsList[int], l2: ConsList[int]
) -> ConsList[int]:
    return zip_with(l1, l2, lambda x, y: x + y)
