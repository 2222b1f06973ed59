"""Grid and sequence dynamic programming: paths, triangles and house robbing."""

from __future__ import annotations

import math
from typing import Sequence


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Smallest top-to-bottom path sum, stepping to an adjacent index on each row."""
    if not triangle:
        raise ValueError("triangle must have at least one row")
    below = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        below = [value + min(below[j], below[j + 1]) for j, value in enumerate(row)]
    return below[0]


def _rob_line(values: Sequence[int]) -> int:
    """Best total of non-adjacent values in a straight row (first value always counted)."""
    skipped = best = values[0]
    for index, value in enumerate(values[1:], start=1):
        take = value + (skipped if index > 1 else 0)
        skipped, best = best, max(best, take)
    return best


def rob(nums: Sequence[int]) -> int:
    """Best total of non-adjacent houses arranged in a circle."""
    if not nums:
        raise ValueError("need at least one house")
    if len(nums) == 1:
        return nums[0]
    return max(_rob_line(nums[:-1]), _rob_line(nums[1:]))


def unique_paths(m: int, n: int) -> int:
    """Number of right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    return math.comb(m + n - 2, m - 1)


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Number of right/down paths from corner to corner avoiding cells marked 1."""
    if not grid or not grid[0]:
        raise ValueError("grid must be non-empty")
    if grid[0][0]:
        return 0
    cols = len(grid[0])
    ways = [0] * cols
    for i, row in enumerate(grid):
        current = [0] * cols
        for j, cell in enumerate(row):
            if cell == 1:
                continue
            if i == 0 and j == 0:
                current[0] = 1
            else:
                current[j] = ways[j] + (current[j - 1] if j > 0 else 0)
        ways = current
    return ways[-1]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a right/down path from the top-left to the bottom-right cell."""
    if not grid or not grid[0]:
        raise ValueError("grid must be non-empty")
    cols = len(grid[0])
    above: list[float] = [math.inf] * cols
    for i, row in enumerate(grid):
        current: list[float] = [math.inf] * cols
        for j, cell in enumerate(row):
            if i == 0 and j == 0:
                current[0] = cell
            else:
                from_left = current[j - 1] if j > 0 else math.inf
                current[j] = cell + min(above[j], from_left)
        above = current
    return int(above[-1])


def min_falling_path_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Smallest sum falling from the top row to the bottom, moving at most one column per row."""
    if not matrix:
        raise ValueError("matrix must be non-empty")
    below: list[float] = list(matrix[-1])
    width = len(below)
    for row in reversed(matrix[:-1]):
        below = [
            value
            + min(
                below[j],
                below[j - 1] if j > 0 else math.inf,
                below[j + 1] if j < width - 1 else math.inf,
            )
            for j, value in enumerate(row)
        ]
    return int(min(below))