"""Array problems: sums, majority votes, permutations, intervals and in-place reordering."""

from __future__ import annotations

import heapq
from typing import MutableSequence, Optional, Sequence


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct triplets that sum to zero, each in ascending order."""
    values = sorted(nums)
    n = len(values)
    triplets: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        lo, hi = i + 1, n - 1
        while lo < hi:
            total = first + values[lo] + values[hi]
            if total < 0:
                lo += 1
            elif total > 0:
                hi -= 1
            else:
                triplets.append([first, values[lo], values[hi]])
                lo += 1
                hi -= 1
                while lo < hi and values[lo] == values[lo - 1]:
                    lo += 1
                while lo < hi and values[hi] == values[hi + 1]:
                    hi -= 1
    return triplets


def majority_element(nums: Sequence[int]) -> int:
    """The value occurring more than ``len(nums) // 2`` times.

    Raises ValueError when no such value exists.
    """
    candidate: Optional[int] = None
    count = 0
    for value in nums:
        if count == 0:
            candidate = value
            count = 1
        elif value == candidate:
            count += 1
        else:
            count -= 1

    if candidate is not None and sum(1 for v in nums if v == candidate) > len(nums) // 2:
        return candidate
    raise ValueError("sequence has no majority element")


def majority_elements(nums: Sequence[int]) -> list[int]:
    """All values occurring more than ``len(nums) // 3`` times."""
    first: Optional[int] = None
    second: Optional[int] = None
    count1 = count2 = 0
    for value in nums:
        if count1 == 0 and second != value:
            first, count1 = value, 1
        elif count2 == 0 and first != value:
            second, count2 = value, 1
        elif value == first:
            count1 += 1
        elif value == second:
            count2 += 1
        else:
            count1 -= 1
            count2 -= 1

    threshold = len(nums) // 3 + 1
    found = []
    for candidate in (first, second):
        if candidate is not None and sum(1 for v in nums if v == candidate) >= threshold:
            found.append(candidate)
    return found


def rearrange_by_sign(nums: Sequence[int]) -> list[int]:
    """Alternate non-negative and negative values, starting non-negative, keeping order.

    Raises ValueError unless the two groups are the same size.
    """
    positives = [v for v in nums if v >= 0]
    negatives = [v for v in nums if v < 0]
    if len(positives) != len(negatives):
        raise ValueError("need as many negative values as non-negative ones")
    return [v for pair in zip(positives, negatives) for v in pair]


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted list in place so its first ``k`` items are unique; return ``k``."""
    if not nums:
        return 0
    write = 1
    for previous, current in zip(list(nums), list(nums)[1:]):
        if previous != current:
            nums[write] = current
            write += 1
    return write


def find_duplicate(nums: Sequence[int]) -> int:
    """The repeated value in a list of ``n + 1`` values drawn from ``1..n``."""
    if len(nums) < 2:
        raise ValueError("need at least two values")
    slow = nums[0]
    fast = nums[nums[0]]
    while slow != fast:
        slow = nums[slow]
        fast = nums[nums[fast]]
    fast = 0
    while fast != slow:
        fast = nums[fast]
        slow = nums[slow]
    return slow


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into its next lexicographic permutation.

    The last permutation wraps around to the first (ascending order).
    """
    n = len(nums)
    pivot = next((i for i in range(n - 2, -1, -1) if nums[i] < nums[i + 1]), -1)
    if pivot >= 0:
        swap_at = next(i for i in range(n - 1, pivot, -1) if nums[i] > nums[pivot])
        nums[pivot], nums[swap_at] = nums[swap_at], nums[pivot]
    nums[pivot + 1:] = list(reversed(nums[pivot + 1:]))


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run."""
    if not nums:
        raise ValueError("need at least one value")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals; the result is sorted by start."""
    merged: list[list[int]] = []
    for start, end in sorted([list(interval) for interval in intervals]):
        if not merged or start > merged[-1][1]:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged values")
    merged = list(heapq.merge(list(nums1[:m]), list(nums2[:n])))
    nums1[: m + n] = merged