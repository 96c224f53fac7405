"""Bit manipulation: counting set bits, reversing bits and adding without '+'."""

from __future__ import annotations

_UINT32_MAX = 0xFFFFFFFF
_INT64_MASK = 0xFFFFFFFFFFFFFFFF
_INT64_SIGN = 0x8000000000000000


def _require_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def count_bits(n: int) -> list[int]:
    """Return the number of set bits of every integer from 0 to ``n``, counted one by one."""
    _require_non_negative(n, "n")
    return [hamming_weight(i) for i in range(n + 1)]


def count_bits_optimized(n: int) -> list[int]:
    """Return the number of set bits of every integer from 0 to ``n``, reusing earlier counts."""
    _require_non_negative(n, "n")
    result = [0] * (n + 1)
    for i in range(1, n + 1):
        result[i] = result[i >> 1] + (i & 1)
    return result


def hamming_weight(n: int) -> int:
    """Return the number of set bits in the non-negative integer ``n``."""
    _require_non_negative(n, "n")
    count = 0
    while n:
        count += n & 1
        n >>= 1
    return count


def reverse_bits(num: int) -> int:
    """Return ``num`` with its 32 bits in reverse order."""
    if not 0 <= num <= _UINT32_MAX:
        raise ValueError("num must fit in an unsigned 32-bit integer")
    result = 0
    for _ in range(32):
        result = (result << 1) | (num & 1)
        num >>= 1
    return result


def get_sum(a: int, b: int) -> int:
    """Return ``a + b`` as a signed 64-bit integer, using only bitwise operations."""
    a &= _INT64_MASK
    b &= _INT64_MASK
    while b:
        carry = a & b
        a ^= b
        b = (carry << 1) & _INT64_MASK
    return a - (1 << 64) if a & _INT64_SIGN else a