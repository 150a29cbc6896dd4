"""Backtracking searches: subset sums, keypad words, combination sums and maze paths."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")
_DIGITS = "0123456789"

# Moves tried at every cell, in this order: down, left, right, up.
_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def subset_sums(values: Iterable[int]) -> list[int]:
    """Return the sums of every subset of ``values`` in ascending order."""
    totals = [0]
    for value in values:
        totals = [total + value for total in totals] + totals
    return sorted(totals)


def letter_combinations(digits: str) -> list[str]:
    """Return every word a phone keypad can spell for ``digits``.

    Digits 0 and 1 carry no letters, so any digit string holding them
    spells nothing.
    """
    if not digits:
        return []
    groups = []
    for digit in digits:
        if len(digit) != 1 or digit not in _DIGITS:
            raise ValueError(f"not a keypad digit: {digit!r}")
        groups.append(_KEYPAD[int(digit)])
    words = [""]
    for letters in groups:
        words = [prefix + letter for prefix in words for letter in letters]
    return words


def _combinations(
    candidates: Sequence[int], target: int, index: int, chosen: list[int]
) -> Iterator[list[int]]:
    if index == len(candidates):
        if target == 0:
            yield list(chosen)
        return
    candidate = candidates[index]
    if candidate <= target:
        chosen.append(candidate)
        yield from _combinations(candidates, target - candidate, index, chosen)
        chosen.pop()
    yield from _combinations(candidates, target, index + 1, chosen)


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return every combination of ``candidates`` (reusable) summing to ``target``.

    Combinations come out in search order: a candidate is taken as often
    as possible before the search moves on to the next one.
    """
    pool = list(candidates)
    if any(candidate <= 0 for candidate in pool):
        raise ValueError("candidates must be positive")
    return list(_combinations(pool, target, 0, []))


def maze_paths(grid: Iterable[Iterable[int]]) -> list[str]:
    """Return, sorted, every path from the top-left to the bottom-right cell.

    ``grid`` is square; cells holding 1 are open. A path is a string of
    the moves D, L, R and U and never visits a cell twice.
    """
    rows = [list(row) for row in grid]
    size = len(rows)
    if size == 0 or any(len(row) != size for row in rows):
        raise ValueError("maze must be a non-empty square grid")
    if rows[0][0] == 0:
        return []

    goal = (size - 1, size - 1)
    visited: set[tuple[int, int]] = set()
    steps: list[str] = []
    paths: list[str] = []

    def walk(x: int, y: int) -> None:
        if (x, y) == goal:
            paths.append("".join(steps))
            return
        visited.add((x, y))
        for step, dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if (
                0 <= nx < size
                and 0 <= ny < size
                and (nx, ny) not in visited
                and rows[nx][ny] == 1
            ):
                steps.append(step)
                walk(nx, ny)
                steps.pop()
        visited.discard((x, y))

    walk(0, 0)
    return sorted(paths)