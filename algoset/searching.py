"""Binary searches over sorted and rotated data, and fast exponentiation."""

from __future__ import annotations

from typing import Sequence


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated ascending list of distinct values, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] <= target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of the union of two ascending lists."""
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    n1, n2 = len(nums1), len(nums2)
    total = n1 + n2
    if total == 0:
        raise ValueError("cannot take the median of no values")

    half = (total + 1) // 2
    low, high = 0, n1
    while low <= high:
        cut1 = (low + high) // 2
        cut2 = half - cut1
        l1 = nums1[cut1 - 1] if cut1 > 0 else float("-inf")
        l2 = nums2[cut2 - 1] if cut2 > 0 else float("-inf")
        r1 = nums1[cut1] if cut1 < n1 else float("inf")
        r2 = nums2[cut2] if cut2 < n2 else float("inf")

        if l1 <= r2 and l2 <= r1:
            if total % 2 == 1:
                return float(max(l1, l2))
            return (max(l1, l2) + min(r1, r2)) / 2.0
        if l1 > r2:
            high = cut1 - 1
        else:
            low = cut1 + 1
    raise ValueError("inputs must be sorted in ascending order")


def single_non_duplicate(nums: Sequence[int]) -> int:
    """The one value appearing once in a sorted list where all others appear twice."""
    if not nums:
        raise ValueError("need at least one value")
    left, right = 0, len(nums) - 1
    while left < right:
        mid = (left + right) // 2
        if (mid % 2 == 0 and nums[mid] == nums[mid + 1]) or (
            mid % 2 == 1 and nums[mid] == nums[mid - 1]
        ):
            left = mid + 1
        else:
            right = mid
    return nums[left]


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """True if ``target`` is in a matrix whose rows, read in order, are ascending."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    low, high = 0, len(matrix) * cols - 1
    while low <= high:
        mid = (low + high) // 2
        row, col = divmod(mid, cols)
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return False


def my_pow(x: float, n: int) -> float:
    """``x`` raised to the integer power ``n`` by repeated squaring."""
    result = 1.0
    remaining = abs(n)
    while remaining > 0:
        if remaining % 2 == 1:
            result *= x
            remaining -= 1
        else:
            x *= x
            remaining //= 2
    if n < 0:
        result = 1 / result
    return result