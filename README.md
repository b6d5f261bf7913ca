# arraydrills

Classic beginner-to-intermediate algorithm exercises as small Python
functions. The exercises cover number loops, array scans, two-pointer
tricks, binary search and list rotation. The package needs nothing beyond
the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `arraydrills.basics`

- `factorial(n)` returns the factorial of `n`. It returns 1 when `n` is below 2.
- `count_up(n)` returns the list `[1, ..., n]`.
- `sum_natural(n)`, `sum_odd(n)`, `sum_even(n)` and `sum_multiples_of_three(n)`
  each return a sum over the numbers from 1 to `n`.
- `is_prime(n)` decides primality by trial division up to the square root of `n`.
- `primes_up_to(limit)` returns every prime from 2 to `limit`.
- `arithmetic(a, b)` returns an `Arithmetic` record with the fields `total`,
  `difference`, `product`, `quotient` and `remainder`. Division truncates
  toward zero, and the remainder takes the sign of `a`. A zero `b` raises
  `ZeroDivisionError`.

### `arraydrills.arrays`

- `largest`, `smallest` and `min_max` return the extremes of a list.
- `min_max_positions` returns `(smallest, index)` and `(largest, index)`.
  When a value occurs more than once, the index is that of its last
  occurrence.
- `unique_elements` returns the values that occur exactly once.
- `intersection(first, second)` returns the elements of `first` that also
  occur in `second`.
- `linear_search(values, target)` returns the index of the first match, or `-1`.
- `sum_and_product` returns the sum and the product of the elements.
- `single_number` returns the XOR of all elements. That is the lone value
  when every other value appears twice.
- The following functions change the list they are given:
  - `double_in_place` doubles every element.
  - `reverse_in_place` reverses the list.
  - `swap_min_max` swaps the first smallest element with the first largest.

### `arraydrills.digits`

- `decimal_to_binary(n)` returns an integer whose decimal digits spell `n`
  in binary, so `5` gives `101`.
- `binary_to_decimal(n)` does the reverse, so `101` gives `5`.
- `reverse_number(n)` reverses the decimal digits of `n`.
- The three functions above return 0 when `n <= 0`.
- `power(x, n)` computes `x ** n` by repeated squaring. `n` may be negative.
- `power_steps(x, n)` yields `(base, remaining_exponent, result)` for the
  starting state and after each squaring.

### `arraydrills.subarrays`

- `all_subarrays` lists every non-empty contiguous subarray.
- `max_subarray_sum_brute` and `max_subarray_sum` return the largest
  contiguous sum. The first tries every start; the second is Kadane's
  single pass.

### `arraydrills.searching`

- `binary_search(values, target)` searches an ascending list and returns an
  index or `-1`.
- `binary_search_recursive(values, target, start, end)` searches within
  `values[start..end]` and returns an index or `-1`.
- `search_rotated` searches a rotated ascending list and returns an index
  or `-1`.
- `peak_index_linear` and `peak_index` find the peak of a mountain list, by
  linear scan and by binary search. Both return `-1` when no peak is found.
- `single_element` returns the one value that appears once in a sorted list
  of pairs. It raises `ValueError` when the list is empty or no such value
  exists.

### `arraydrills.rotation`

All of these change the list they are given.

- `remove_duplicates` compacts a sorted list so its distinct values come
  first, and returns how many there are.
- `rotate_left_one` moves the first element to the end.
- `rotate_left` and `rotate_left_reversal` rotate the list `k` places to the
  left.
- `rotate_right` and `rotate_right_reversal` rotate the list `k` places to
  the right.
- The rotation amount `k` is taken modulo the length of the list.

### `arraydrills.problems`

- `pair_sum_brute` returns the first index pair whose values sum to the
  target, or `None`.
- `pair_sum` does the same for an ascending list, using two pointers.
- `majority_brute` and `majority_sorted` return the value occurring more
  than `len/2` times, or `-1` if there is none.
- `majority_moore` returns the Boyer–Moore voting candidate. That is the
  majority value whenever one exists.
- `max_profit` returns the best profit from one buy followed by a later
  sale.
- `max_water_brute` and `max_water` solve the container-with-most-water
  problem.
- `second_largest` and `second_smallest` return `None` when all values are
  equal. They raise `ValueError` on an empty list.
- `is_sorted` tells whether a list is in non-decreasing order.

## Example

```python
from arraydrills.subarrays import max_subarray_sum
from arraydrills.searching import binary_search
from arraydrills.problems import majority_moore, max_water

max_subarray_sum([3, -4, 5, 4, -1, 7, -8])     # 15
binary_search([1, 2, 3, 4, 5, 6, 7, 8, 9], 5)  # 4
majority_moore([1, 1, 2, 2, 2, 2, 2, 1, 1])    # 2
max_water([1, 8, 6, 2, 5, 4, 8, 3, 7])         # 49
```

## What it does not do

This is a library of functions only. It has no command-line program and
does not read input interactively or print results. Call the functions
from your own code.