"""Puzzles on lists of integers."""

from __future__ import annotations

from bisect import bisect_left
from itertools import permutations
from typing import Sequence


def count_negatives(grid: Sequence[Sequence[int]]) -> int:
    """Count negatives in a grid whose rows and columns are sorted in non-increasing order."""
    if not grid or not grid[0]:
        return 0
    width = len(grid[0])
    boundary = width
    total = 0
    for row in grid:
        while boundary > 0 and row[boundary - 1] < 0:
            boundary -= 1
        total += width - boundary
    return total


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """1-based positions of two entries of a sorted list that add up to ``target``.

    Raises ValueError when no such pair exists.
    """
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return [left + 1, right + 1]
        if total < target:
            left += 1
        else:
            right -= 1
    raise ValueError(f"no two numbers add up to {target}")


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of two entries that add up to ``target``.

    Raises ValueError when no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        other = target - value
        if other in seen:
            return [seen[other], index]
        seen[value] = index
    raise ValueError(f"no two numbers add up to {target}")


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place so its first k entries are distinct; return k."""
    if not nums:
        return 0
    slow = 0
    for value in nums[1:]:
        if value != nums[slow]:
            slow += 1
            nums[slow] = value
    return slow + 1


def remove_element(nums: list[int], val: int) -> int:
    """Move the entries not equal to ``val`` to the front in order; return how many there are."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def move_zeroes(nums: list[int]) -> None:
    """Move all zeros to the end in place, keeping the order of the other entries."""
    nonzero = [value for value in nums if value != 0]
    nums[:] = nonzero + [0] * (len(nums) - len(nonzero))


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a sorted list, or where it would be inserted."""
    return bisect_left(nums, target)


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as a list of decimal digits and return the new digits."""
    if not digits:
        return []
    result = list(digits)
    index = len(result) - 1
    while index >= 0 and result[index] == 9:
        result[index] = 0
        index -= 1
    if index < 0:
        return [1, *result]
    result[index] += 1
    return result


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first n entries of nums2 into the first m entries of nums1, in place.

    Raises ValueError when nums1 has no room for m + n entries.
    """
    if m < 0 or n < 0 or len(nums1) < m + n or len(nums2) < n:
        raise ValueError("nums1 must hold m + n entries and nums2 at least n")
    i, j = m - 1, n - 1
    for k in range(m + n - 1, -1, -1):
        if j < 0:
            break
        if i >= 0 and nums1[i] > nums2[j]:
            nums1[k] = nums1[i]
            i -= 1
        else:
            nums1[k] = nums2[j]
            j -= 1


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Every ordering of the given distinct numbers; an empty input gives no orderings."""
    if not nums:
        return []
    return [list(order) for order in permutations(nums)]