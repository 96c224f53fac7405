# blindalgos

Plain-Python implementations of well-known algorithm problems, grouped by technique.
It has no runtime dependencies. It is a library only and has no command-line tool.

## Installation

```
pip install .
```

## Modules

- `blindalgos.arrays`: `three_sum`, `max_profit`, `max_area`, `max_area_two_pointers`,
  `contains_duplicate`, `max_product`, `max_sub_array`, `product_except_self`,
  `two_sum`, `missing_number`, `missing_number_optimized`
- `blindalgos.search`: `find_min`, `find_min_binary_search`, `search`.
  `find_min_binary_search` and `search` expect a sorted list of distinct values that
  may have been rotated.
- `blindalgos.bits`: `count_bits`, `count_bits_optimized`, `hamming_weight`,
  `reverse_bits`, `get_sum`
- `blindalgos.dynamic`: `climb_stairs`, `coin_change`, `longest_common_subsequence`,
  `length_of_lis`, `length_of_lis_optimized`, `word_break`

## Example

```python
from blindalgos.arrays import three_sum, two_sum
from blindalgos.search import search
from blindalgos.bits import reverse_bits
from blindalgos.dynamic import coin_change, word_break

three_sum([-1, 0, 1, 2, -1, -4])       # [[-1, -1, 2], [-1, 0, 1]]
two_sum([2, 7, 11, 15], 9)             # [0, 1]
search([4, 5, 6, 7, 0, 1, 2], 0)       # 4
reverse_bits(0b1)                      # 2147483648
coin_change([1, 2, 5], 11)             # 3
word_break("leetcode", ["leet", "code"])  # True
```

## Behaviour worth knowing

- Several functions raise `ValueError` on input they cannot handle: an empty list for
  `max_profit`, `max_product`, `max_sub_array`, `missing_number`, `find_min` and
  `find_min_binary_search`; a negative number for `count_bits`, `count_bits_optimized`
  and `hamming_weight`; a value outside the unsigned 32-bit range for `reverse_bits`;
  a negative amount or a non-positive coin for `coin_change`.
- `two_sum` and `search` return `[]` and `-1` when nothing is found; `coin_change`
  returns `-1` when the amount cannot be made.
- `get_sum` adds using only bitwise operations and wraps the result to a signed
  64-bit integer.
- `climb_stairs` returns 1 for 0 steps and 0 for a negative count.

Where a problem has two approaches, both are provided: a simple one and a faster one,
for example `length_of_lis` and `length_of_lis_optimized`. On ordinary input they agree,
but they differ at the edges: `length_of_lis` returns 1 for an empty list while
`length_of_lis_optimized` returns 0, and `missing_number` raises on an empty list while
`missing_number_optimized` returns 0.

## Running the tests

```
pip install ".[test]"
pytest
```