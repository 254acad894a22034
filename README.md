# algokit

A small collection of classic algorithm routines for sequences, strings,
hash-based counting and matrices, with a command-line front end that reads
test cases from standard input and prints the answers.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

### Sequences

`algokit.sequences.next_permutation(nums)` returns a new list holding the next
lexicographically greater permutation of `nums`. If `nums` is already the last
permutation (non-increasing), the first permutation (ascending order) is
returned. The input is left unchanged.

```python
from algokit.sequences import next_permutation

next_permutation([1, 2, 3])  # [1, 3, 2]
next_permutation([3, 2, 1])  # [1, 2, 3]
```

### Strings

```python
from algokit.strings import (
    defang_ip_address,
    is_pangram,
    is_rotated_by_two,
    longest_unique_substring_length,
    rotate_left,
    rotate_right,
    sort_letters,
)

defang_ip_address("1.1.1.1")                       # "1[.]1[.]1[.]1"
longest_unique_substring_length("abcabcbb")        # 3
is_pangram("thequickbrownfoxjumpsoverthelazydog")  # True
sort_letters("edcab")                              # "abcde"
rotate_right("abcde", 2)                           # "deabc"
rotate_left("abcde", 2)                            # "cdeab"
is_rotated_by_two("amazon", "azonam")              # True
```

- `is_pangram` and `sort_letters` accept only lowercase letters `a`–`z` and
  raise `ValueError` for any other character.
- `rotate_right` moves the last `places` characters to the front;
  `rotate_left` moves the first `places` characters to the end. Rotation
  wraps around the length of the string; an empty string is returned as is.
- `is_rotated_by_two(first, second)` is `True` when `second` is `first`
  rotated two places in either direction, and `False` when the lengths differ.

### Counting

```python
from algokit.counting import (
    contains_duplicate,
    contains_nearby_duplicate,
    frequency_count,
)

contains_duplicate([1, 2, 3, 1])            # True
contains_nearby_duplicate([1, 2, 3, 1], 3)  # True
frequency_count([2, 3, 2, 3, 5])            # [0, 2, 2, 0, 1]
```

`contains_nearby_duplicate(nums, k)` is `True` when two equal values sit at
most `k` positions apart. `frequency_count(values)` reports, for each number
from 1 to `len(values)`, how often it occurs; values outside that range are
not counted.

### Matrices

Matrices are sequences of rows; every row must have the same length, or
`ValueError` is raised.

```python
from algokit.matrix import (
    add_matrices,
    diagonal_sum,
    reverse_rows,
    transpose,
    wave_order,
)

transpose([[1, 2, 3], [4, 5, 6]])      # [[1, 4], [2, 5], [3, 6]]
add_matrices([[1, 2]], [[10, 20]])     # [[11, 22]]
reverse_rows([[2, 3, 4], [1, 2, 6]])   # [[4, 3, 2], [6, 2, 1]]
diagonal_sum([[1, 2], [3, 4]])         # 5
wave_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
# [1, 4, 7, 8, 5, 2, 3, 6, 9]
```

`add_matrices` requires both matrices to have the same shape and
`diagonal_sum` requires a square matrix; otherwise `ValueError` is raised.
`wave_order` walks the matrix column by column, downwards in even-numbered
columns and upwards in odd-numbered ones.

## Command line

### `algokit`

```
algokit COMMAND < input.txt
```

Each command reads whitespace-separated input from standard input:

| Command            | Input                                                                 | Output per case                          |
|--------------------|-----------------------------------------------------------------------|------------------------------------------|
| `next-permutation` | a case count, then one line of integers per case                      | the permutation, each value followed by a space |
| `frequency`        | a case count, then one line of integers per case                      | the counts separated by spaces, or `[]`  |
| `sort-string`      | a case count, then one lowercase word per case                        | the sorted word, then a line `~`         |
| `rotated`          | a case count, then two words per case                                 | `true` or `false`, then a line `~`       |
| `add-matrix`       | a case count, then per case `n` and two `n`×`n` matrices              | the sum row by row, then a line `~`      |
| `diagonal-sum`     | a case count, then per case `n` and an `n`×`n` matrix                 | the diagonal sum, then a line `~`        |
| `wave`             | a row count, a column count, then the matrix                          | the wave order on one line               |

Example:

```
$ printf '2\n1 2 3\n3 2 1\n' | algokit next-permutation
1 3 2 
1 2 3 
```

Malformed input (missing tokens, non-integers, letters outside `a`–`z` for
`sort-string`) prints `error: ...` to standard error and exits with status 1.

The same drivers are available from Python through
`algokit.cli.run(command, stdin, stdout)`, which takes text streams and
raises `ValueError` for an unknown command or bad input.

### `algokit-timing`

```
algokit-timing [--outer N] [--middle N] [--inner N]
```

Runs three empty nested loops of the given sizes (defaults 10000, 10000 and
1000) and prints `Execution time for the for loop: <seconds> seconds`. With the
defaults this is 10^11 iterations and takes a very long time in Python; pass
smaller sizes for a quick measurement. From Python,
`algokit.timing.time_nested_loops(outer, middle, inner)` returns the elapsed
seconds as a float.