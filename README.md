# arraykit

A small collection of well-known algorithms on lists of integers and on
integers, written as plain Python functions. It has no dependencies outside
the standard library.

## Installation

```
pip install arraykit
```

To run the test suite:

```
pip install "arraykit[test]"
pytest
```

## Modules

### `arraykit.setops`: sorted set operations

Both inputs are ascending iterables of integers and may hold duplicates. The
result is an ascending list with no duplicates.

```python
from arraykit.setops import sorted_union, sorted_intersection

sorted_union([1, 2, 2, 3, 4], [2, 2, 4, 6, 7, 8])         # [1, 2, 3, 4, 6, 7, 8]
sorted_intersection([1, 2, 2, 3, 4], [2, 2, 4, 6, 7, 8])  # [2, 4]
```

### `arraykit.rearrange`: in-place rearrangements

These functions change the list they are given and return `None`.

- `reverse_in_place(items)`: reverses the list.
- `segregate_even_odd(items)`: swaps values from both ends so that even values
  come before odd ones. The order within each group is not kept. Only positive
  odd values are recognised as odd when scanning from the right, so lists with
  negative odd values may not end up cleanly split.
- `alternate_signs(items)`: interleaves non-negative and negative values,
  starting with a non-negative one and keeping each group's order. Whatever is
  left over from the longer group goes at the end.
- `push_zeros_to_end(items)` and `move_zeroes(items)`: move zeros to the end
  and keep the order of the other values. The second does it by swapping.
- `sort_012(items)`: sorts a list of 0s, 1s and 2s by counting them; any other
  value is counted as a 2.

```python
from arraykit.rearrange import alternate_signs

values = [-5, -2, 5, 2, 4, 7, 1, 8, 0, -8]
alternate_signs(values)
# values == [5, -5, 2, -2, 4, -8, 7, 1, 8, 0]
```

### `arraykit.search`: searching and counting

- `odd_occurrence(items)`: the first value that occurs an odd number of times,
  or `None`.
- `two_repeated(items)`: a pair holding the first two values found to appear
  again later in the list; a slot that is never filled is `None`.
- `missing_number(items)`: the smallest value in `1..len(items) + 1` that is
  absent.
- `first_missing_positive(items)`: the smallest positive integer that is absent.
- `repeated_and_missing(items)`: for the numbers `1..n` with one value replaced
  by another, returns `(repeated, missing)`. Raises `ValueError` when nothing
  is repeated.
- `majority_third(items)`: a value that occurs more than `len(items) // 3`
  times, or `None`.
- `single_numbers(items)`: the values that occur exactly once, in ascending
  order.
- `two_odd_occurrences(items)`: the two values that occur an odd number of
  times, larger first. Raises `ValueError` unless there are exactly two.
- `find_min_max(items)`: `(minimum, maximum)`. Raises `ValueError` on an empty
  list.
- `find_duplicate(items)`: the repeated value in a list of `n + 1` values drawn
  from `1..n`, found by cycle detection. Raises `ValueError` on an empty list.

```python
from arraykit.search import first_missing_positive, find_duplicate

first_missing_positive([3, 4, -1, 1])  # 2
find_duplicate([1, 3, 4, 2, 2])        # 2
```

### `arraykit.columns`: spreadsheet column titles

`title_to_number` accepts upper-case letters only and raises `ValueError` for
any other character. `number_to_title` returns an empty string for numbers
below 1.

```python
from arraykit.columns import title_to_number, number_to_title

title_to_number("AB")   # 28
number_to_title(701)    # "ZY"
```

### `arraykit.digits`: integer digit checks

`is_palindrome(number)` tells whether the decimal digits read the same both
ways. Negative numbers are never palindromes.

```python
from arraykit.digits import is_palindrome

is_palindrome(121)   # True
is_palindrome(-121)  # False
```

## What it does not do

arraykit is a library only: it has no command-line program, and it does not
read or write files.