"""Array puzzles: boolean matrix spreading, cyclic subarray sums, deduplication, equal pairs."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence


def boolean_matrix(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy in which every row and column holding a 1 is filled with 1."""
    if not matrix:
        return []
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("all rows must have the same length")
    marked_rows = {i for i, row in enumerate(matrix) if 1 in row}
    marked_cols = {j for row in matrix for j, cell in enumerate(row) if cell == 1}
    return [
        [
            1 if i in marked_rows or j in marked_cols else cell
            for j, cell in enumerate(row)
        ]
        for i, row in enumerate(matrix)
    ]


def min_size_subarray(nums: Sequence[int], target: int) -> int:
    """Length of the shortest subarray of ``nums`` repeated forever summing to ``target``.

    Raises ValueError when no such subarray exists.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    if any(value <= 0 for value in nums):
        raise ValueError("nums must hold positive numbers")
    if target < 0:
        raise ValueError("target must not be negative")
    full_cycles, rest = divmod(target, sum(nums))
    base = full_cycles * len(nums)
    if rest == 0:
        return base

    doubled = list(nums) * 2
    best: int | None = None
    window = 0
    left = 0
    for right, value in enumerate(doubled):
        window += value
        while window > rest:
            window -= doubled[left]
            left += 1
        if window == rest:
            length = right - left + 1
            best = length if best is None else min(best, length)
    if best is None:
        raise ValueError(f"no subarray sums to {target}")
    return base + best


def unique_elements(items: Iterable[Hashable]) -> list[Hashable]:
    """Return the items without repeats, in order of first appearance."""
    return list(dict.fromkeys(items))


def identical_pairs(nums: Iterable[Hashable]) -> int:
    """Count the index pairs ``i < j`` with equal values."""
    return sum(count * (count - 1) // 2 for count in Counter(nums).values())