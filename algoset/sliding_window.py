"""Sliding-window and prefix-sum counting over sequences."""

from __future__ import annotations

from collections import Counter
from typing import Sequence


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Longest run of ones obtainable by flipping at most ``k`` zeros."""
    left = 0
    zeros = 0
    best = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeros += 1
        while zeros > k:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def _at_most(nums: Sequence[int], goal: int) -> int:
    """Number of subarrays whose sum is at most ``goal`` (non-negative values)."""
    if goal < 0:
        return 0
    left = 0
    total = 0
    count = 0
    for right, value in enumerate(nums):
        total += value
        while total > goal:
            total -= nums[left]
            left += 1
        count += right - left + 1
    return count


def number_of_nice_subarrays(nums: Sequence[int], k: int) -> int:
    """Number of subarrays holding exactly ``k`` odd numbers."""
    odd = [value % 2 for value in nums]
    return _at_most(odd, k) - _at_most(odd, k - 1)


def number_of_substrings(s: str) -> int:
    """Number of substrings containing each of 'a', 'b' and 'c' at least once."""
    last = {"a": -1, "b": -1, "c": -1}
    count = 0
    for index, char in enumerate(s):
        if char not in last:
            raise ValueError(f"unexpected character {char!r}; only 'a', 'b', 'c' allowed")
        last[char] = index
        earliest = min(last.values())
        if earliest != -1:
            count += earliest + 1
    return count


def max_score(card_points: Sequence[int], k: int) -> int:
    """Largest total from taking ``k`` cards off either end of the row."""
    n = len(card_points)
    if not 0 <= k <= n:
        raise ValueError(f"k must be between 0 and {n}, got {k}")
    left_sum = sum(card_points[:k])
    if k == n:
        return left_sum
    best = left_sum
    right_sum = 0
    for taken in range(1, k + 1):
        left_sum -= card_points[k - taken]
        right_sum += card_points[n - taken]
        best = max(best, left_sum + right_sum)
    return best


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    window: set[str] = set()
    left = 0
    best = 0
    for right, char in enumerate(s):
        while char in window:
            window.discard(s[left])
            left += 1
        window.add(char)
        best = max(best, right - left + 1)
    return best


def num_subarrays_with_sum(nums: Sequence[int], goal: int) -> int:
    """Number of subarrays of a binary array whose sum equals ``goal``."""
    return _at_most(nums, goal) - _at_most(nums, goal - 1)


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Number of contiguous subarrays summing to ``k``; values may be negative."""
    seen = Counter({0: 1})
    prefix = 0
    count = 0
    for value in nums:
        prefix += value
        count += seen[prefix - k]
        seen[prefix] += 1
    return count


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Longest run of non-zero values."""
    best = 0
    run = 0
    for value in nums:
        run = 0 if value == 0 else run + 1
        best = max(best, run)
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Best gain from one buy followed by one later sell; zero if none is profitable."""
    if not prices:
        return 0
    best = 0
    lowest = prices[0]
    for price in prices:
        if lowest < price:
            best = max(best, price - lowest)
        else:
            lowest = price
    return best