"""Classic recursion exercises on lists, stacks and sequences."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any


def reverse_in_place(chars: MutableSequence[Any]) -> None:
    """Reverse ``chars`` in place."""
    left, right = 0, len(chars) - 1
    while left < right:
        chars[left], chars[right] = chars[right], chars[left]
        left += 1
        right -= 1


def recursive_sort(values: Iterable[Any]) -> list[Any]:
    """Return ``values`` sorted by repeated insertion into a sorted prefix.

    Each element goes after any equal elements already placed, so the
    sort is stable.
    """
    ordered: list[Any] = []
    for value in values:
        bisect.insort_right(ordered, value)
    return ordered


def delete_middle(stack: Iterable[Any]) -> list[Any]:
    """Return a copy of ``stack`` without its middle element.

    The stack is given bottom first; the element removed is the
    ``len // 2 + 1``-th counted from the top.
    """
    items = list(stack)
    if not items:
        return items
    from_top = len(items) // 2 + 1
    del items[len(items) - from_top]
    return items


def sort_stack(stack: Iterable[Any]) -> list[Any]:
    """Return ``stack`` sorted so that its largest element is on top.

    Stacks are given and returned bottom first.
    """
    return recursive_sort(stack)


def kth_symbol(n: int, k: int) -> int:
    """Return the ``k``-th symbol (1-based) in row ``n`` of the 0/1 grammar.

    Row 1 is ``0``; every later row replaces 0 with ``01`` and 1 with ``10``.
    """
    if n < 1 or not 1 <= k <= 2 ** (n - 1):
        raise ValueError(f"position {k} is not in row {n}")
    flipped = 0
    while n > 1:
        mid = 2 ** (n - 1) // 2
        if k > mid:
            k -= mid
            flipped ^= 1
        n -= 1
    return flipped


def _subsets(items: list[Any], index: int, chosen: list[Any]) -> Iterator[list[Any]]:
    if index >= len(items):
        yield list(chosen)
        return
    yield from _subsets(items, index + 1, chosen)
    chosen.append(items[index])
    yield from _subsets(items, index + 1, chosen)
    chosen.pop()


def subsets(values: Iterable[Any]) -> list[list[Any]]:
    """Return every subset of ``values``, leaving each element out before taking it."""
    return list(_subsets(list(values), 0, []))


def josephus(n: int, k: int) -> int:
    """Return the 1-based position left standing when every ``k``-th of ``n`` falls."""
    if n < 1 or k < 1:
        raise ValueError("n and k must both be at least 1")
    people = list(range(1, n + 1))
    position = 0
    while len(people) > 1:
        position = (position + k - 1) % len(people)
        del people[position]
    return people[0]


def _permute(items: list[Any], index: int) -> Iterator[list[Any]]:
    if index >= len(items):
        yield list(items)
        return
    for other in range(index, len(items)):
        items[index], items[other] = items[other], items[index]
        yield from _permute(items, index + 1)
        items[index], items[other] = items[other], items[index]


def permutations(values: Iterable[Any]) -> list[list[Any]]:
    """Return every ordering of ``values``, generated by successive swaps."""
    return list(_permute(list(values), 0))