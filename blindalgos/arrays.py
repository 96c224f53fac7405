"""Array problems: pair and triplet sums, subarray extremes, stock profit and more."""

from __future__ import annotations

from collections.abc import Sequence


def _require_non_empty(values: Sequence[int], what: str) -> None:
    if not values:
        raise ValueError(f"{what} must not be empty")


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every unique triplet of values from ``nums`` that sums to zero.

    Triplets come out in ascending order, each one sorted.
    """
    ordered = sorted(nums)
    result: list[list[int]] = []
    last = len(ordered) - 1
    for i, fixed in enumerate(ordered):
        if i > 0 and fixed == ordered[i - 1]:
            continue
        left, right = i + 1, last
        while left < right:
            total = fixed + ordered[left] + ordered[right]
            if total > 0:
                right -= 1
            elif total < 0:
                left += 1
            else:
                result.append([fixed, ordered[left], ordered[right]])
                left += 1
                while left < right and ordered[left] == ordered[left - 1]:
                    left += 1
    return result


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell, or 0."""
    _require_non_empty(prices, "prices")
    buy_price = prices[0]
    best = 0
    for price in prices[1:]:
        best = max(best, price - buy_price)
        buy_price = min(buy_price, price)
    return best


def max_area(height: Sequence[int]) -> int:
    """Return the largest container area by checking every pair of lines."""
    best = 0
    for i, left in enumerate(height):
        for offset, right in enumerate(height[i + 1:], start=1):
            best = max(best, min(left, right) * offset)
    return best


def max_area_two_pointers(height: Sequence[int]) -> int:
    """Return the largest container area, closing in from both ends."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] > height[right]:
            right -= 1
        else:
            left += 1
    return best


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Return True if any value appears more than once."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous subarray."""
    _require_non_empty(nums, "nums")
    result = cur_max = cur_min = nums[0]
    for num in nums[1:]:
        if num < 0:
            cur_max, cur_min = cur_min, cur_max
        cur_max = max(cur_max * num, num)
        cur_min = min(cur_min * num, num)
        result = max(result, cur_max)
    return result


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    _require_non_empty(nums, "nums")
    best = nums[0]
    running = 0
    for num in nums:
        running = max(running + num, num)
        best = max(best, running)
    return best


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all the other values."""
    results = [1] * len(nums)
    prefix = 1
    for i, num in enumerate(nums):
        results[i] = prefix
        prefix *= num
    suffix = 1
    for i in reversed(range(len(nums))):
        results[i] *= suffix
        suffix *= nums[i]
    return results


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of the first pair summing to ``target``, or an empty list."""
    seen: dict[int, int] = {}
    for i, num in enumerate(nums):
        j = seen.get(target - num)
        if j is not None:
            return [j, i]
        seen[num] = i
    return []


def missing_number(nums: Sequence[int]) -> int:
    """Return the value of 0..len(nums) missing from ``nums``, found by sorting."""
    _require_non_empty(nums, "nums")
    ordered = sorted(nums)
    if ordered[0] != 0:
        return 0
    for previous, current in zip(ordered, ordered[1:]):
        if current - previous > 1:
            return current - 1
    return ordered[-1] + 1


def missing_number_optimized(nums: Sequence[int]) -> int:
    """Return the value of 0..len(nums) missing from ``nums``, found by summing."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)