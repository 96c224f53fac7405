"""Searching in sorted arrays that have been rotated."""

from __future__ import annotations

from collections.abc import Sequence


def find_min(nums: Sequence[int]) -> int:
    """Return the smallest value by scanning every element."""
    if not nums:
        raise ValueError("nums must not be empty")
    smallest = nums[0]
    for num in nums:
        if num < smallest:
            smallest = num
    return smallest


def find_min_binary_search(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated sorted array of distinct values."""
    if not nums:
        raise ValueError("nums must not be empty")
    result = nums[0]
    left, right = 0, len(nums) - 1
    while left <= right:
        if nums[left] <= nums[right]:
            result = min(result, nums[left])
            break
        middle = (left + right) // 2
        result = min(result, nums[middle])
        if nums[middle] >= nums[left]:
            left = middle + 1
        else:
            right = middle - 1
    return result


def search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted array, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        middle = (left + right) // 2
        if nums[middle] == target:
            return middle
        if nums[left] <= nums[middle]:
            if nums[middle] < target or target < nums[left]:
                left = middle + 1
            else:
                right = middle - 1
        elif nums[middle] > target or target > nums[right]:
            right = middle - 1
        else:
            left = middle + 1
    return -1