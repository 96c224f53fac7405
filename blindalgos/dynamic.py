"""Dynamic programming problems: stairs, coins, subsequences and word splitting."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking 1 or 2 at a time.

    A negative ``n`` has no ways and gives 0.
    """
    if n < 0:
        return 0
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Return the fewest coins that make up ``amount``, or -1 if none do."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    coin_list = list(coins)
    if any(coin <= 0 for coin in coin_list):
        raise ValueError("coins must be positive")
    if amount == 0:
        return 0
    unreachable = amount + 1
    dp = [0] + [unreachable] * amount
    for i in range(1, amount + 1):
        for coin in coin_list:
            if coin <= i:
                dp[i] = min(dp[i], dp[i - coin] + 1)
    return -1 if dp[amount] == unreachable else dp[amount]


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Return the length of the longest subsequence shared by both texts."""
    previous = [0] * (len(text2) + 1)
    for char1 in text1:
        current = [0]
        for j, char2 in enumerate(text2, start=1):
            if char1 == char2:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def length_of_lis(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence, in quadratic time.

    The answer is never below 1, even for an empty sequence.
    """
    best = 1
    lengths: list[int] = []
    for i, num in enumerate(nums):
        length = 1
        for j, earlier in enumerate(nums[:i]):
            if num > earlier:
                length = max(length, lengths[j] + 1)
        lengths.append(length)
        best = max(best, length)
    return best


def length_of_lis_optimized(nums: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence, by binary search."""
    tails: list[int] = []
    for num in nums:
        i = bisect_left(tails, num)
        if i == len(tails):
            tails.append(num)
        else:
            tails[i] = num
    return len(tails)


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Return True if ``s`` splits into a sequence of words from ``word_dict``."""
    words = set(word_dict)
    reachable = [True] + [False] * len(s)
    for end in range(1, len(s) + 1):
        reachable[end] = any(
            reachable[start] and s[start:end] in words for start in range(end)
        )
    return reachable[-1]