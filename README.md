# arrayalgos

A small library of well-known algorithms for lists of integers and
matrices: rearranging, searching, counting pairs, finding sums and walking
matrices. Every function takes plain Python sequences and returns plain
Python values. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Modules

### `arrayalgos.rearrange`

- `rearrange_by_sign(values)`: alternates non-negative and negative values,
  starting with a non-negative one, keeping the order within each sign.
  Raises `ValueError` if the counts do not allow a strict alternation.
- `sort_by_parity(values)`: moves even values to the front by swapping.
- `sort_by_parity_alternating(values)`: even values at even indices, odd
  values at odd indices. Raises `ValueError` if the counts do not fit.
- `next_permutation(values)`: the next permutation in lexicographic order.
  After the last one it wraps around to the smallest.
- `leaders(values)`: the elements that are strictly greater than everything
  to their right.

### `arrayalgos.search`

All of these do a binary search. They return `None` where nothing is found.

- `binary_search(values, target)`: an index of `target` in a sorted sequence.
- `ceil_value(values, target)`: the smallest element `>= target`.
- `floor_value(values, target)`: the largest element `<= target`.
- `last_occurrence(values, key)`: the index of the last `key`.
- `search_insert(values, target)`: the first index whose element is
  `>= target`, or `len(values)`. It never returns `None`.
- `search_rotated(values, target)`: finds `target` in a rotated sorted
  sequence of distinct values.

### `arrayalgos.matrix`

- `rotate_clockwise(matrix)`: returns a square matrix turned a quarter turn
  clockwise. Raises `ValueError` for a non-square or ragged matrix.
- `spiral_order(matrix)`: the elements read clockwise in a spiral, starting
  at the top-left corner. Raises `ValueError` for a ragged matrix.

### `arrayalgos.sums`

- `three_sum(values)`: the distinct sorted triplets that sum to zero.
- `four_sum(values, target)`: the distinct sorted quadruplets that sum to
  `target`.
- `count_subarrays_with_sum(values, k)`: the number of contiguous subarrays
  that sum to `k`.
- `max_product_subarray(values)`: the largest product of a non-empty
  contiguous subarray. Raises `ValueError` for empty input.

### `arrayalgos.counting`

- `majority_elements(values)`: the elements that occur more than
  `len(values) // 3` times, in the order the vote found them.
- `count_inversions(values)`: the number of pairs `i < j` with
  `values[i] > values[j]`.
- `count_reverse_pairs(values)`: the number of pairs `i < j` with
  `values[i] > 2 * values[j]`.
- `find_missing_and_repeating(values)`: returns `(repeating, missing)` for
  the numbers 1..n with one value duplicated. Raises `ValueError` when the
  input does not have that shape.

### `arrayalgos.merge`

- `merge_sorted_in_place(first, second)`: changes the two lists in place.
  Afterwards both are sorted and keep their lengths, and no element of
  `first` is greater than any element of `second`. Returns `None`.

## Examples

```python
from arrayalgos.search import search_rotated, last_occurrence
from arrayalgos.matrix import spiral_order
from arrayalgos.counting import majority_elements, count_inversions
from arrayalgos.sums import count_subarrays_with_sum, three_sum

search_rotated([4, 5, 6, 7, 0, 1, 2], 0)           # 4
last_occurrence([3, 4, 13, 13, 13, 20, 40], 13)    # 4
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])    # [1, 2, 3, 6, 9, 8, 7, 4, 5]
majority_elements([11, 33, 33, 11, 33, 11])        # [11, 33]
count_inversions([5, 4, 3, 2, 1])                  # 10
count_subarrays_with_sum([3, 1, 2, 4], 6)          # 2
three_sum([-1, 0, 1, 2, -1, -4])                   # [(-1, -1, 2), (-1, 0, 1)]
```

## What it does not do

This is a library only. It has no command-line program and reads no input
from the terminal or from files. Call its functions from your own code.

## Running the tests

```
pip install .[test]
pytest
```