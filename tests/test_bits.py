import pytest
from hypothesis import given
from hypothesis import strategies as st

from blindalgos.bits import (
    count_bits,
    count_bits_optimized,
    get_sum,
    hamming_weight,
    reverse_bits,
)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@given(st.integers(min_value=0, max_value=300))
def test_count_bits_versions_agree(n):
    assert count_bits(n) == count_bits_optimized(n)


@given(st.integers(min_value=0, max_value=300))
def test_count_bits_length_and_entries(n):
    counts = count_bits(n)
    assert len(counts) == n + 1
    assert counts == [hamming_weight(i) for i in range(n + 1)]


@pytest.mark.parametrize("k", range(0, 12))
def test_count_bits_powers_of_two_have_one_bit(k):
    counts = count_bits_optimized(2**k)
    assert counts[2**k] == 1


@given(st.integers(min_value=1, max_value=500))
def test_count_bits_doubling_keeps_count(n):
    counts = count_bits_optimized(2 * n)
    assert counts[2 * n] == counts[n]
    assert counts[n] == hamming_weight(n)


@pytest.mark.parametrize("func", [count_bits, count_bits_optimized])
def test_count_bits_rejects_negative(func):
    with pytest.raises(ValueError):
        func(-1)


@pytest.mark.parametrize("k", range(0, 40))
def test_hamming_weight_all_ones(k):
    assert hamming_weight(2**k - 1) == k


@given(st.integers(min_value=0, max_value=2**40))
def test_hamming_weight_matches_binary_text(n):
    assert hamming_weight(n) == format(n, "b").count("1")


def test_hamming_weight_rejects_negative():
    with pytest.raises(ValueError):
        hamming_weight(-5)


@given(st.integers(min_value=0, max_value=0xFFFFFFFF))
def test_reverse_bits_is_involution(num):
    assert reverse_bits(reverse_bits(num)) == num


@given(st.integers(min_value=0, max_value=0xFFFFFFFF))
def test_reverse_bits_keeps_bit_count(num):
    assert hamming_weight(reverse_bits(num)) == hamming_weight(num)


def test_reverse_bits_lowest_to_highest():
    assert reverse_bits(1) == 0x80000000


def test_reverse_bits_all_ones():
    assert reverse_bits(0xFFFFFFFF) == 0xFFFFFFFF


@pytest.mark.parametrize("num", [-1, 2**32])
def test_reverse_bits_rejects_out_of_range(num):
    with pytest.raises(ValueError):
        reverse_bits(num)


@given(
    st.integers(min_value=-(2**40), max_value=2**40),
    st.integers(min_value=-(2**40), max_value=2**40),
)
def test_get_sum_matches_addition(a, b):
    assert get_sum(a, b) == a + b


@given(st.integers(min_value=-(2**40), max_value=2**40))
def test_get_sum_with_negation_is_zero(a):
    assert get_sum(a, -a) == 0


def test_get_sum_wraps_like_int64():
    assert get_sum(INT64_MAX, 1) == INT64_MIN