# dsabasics

Small building blocks for learning basic data structures and algorithms:
arrays, matrices, integer arithmetic, searching, recursion, stacks and
queues. Plain Python with no third-party dependencies.

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

| Module                | What it offers                                                                 |
|-----------------------|--------------------------------------------------------------------------------|
| `dsabasics.arrays`    | `format_values`, `array_sum`, `array_max`, `count_even`, `count_odd`, `count_pairs_with_sum`, `reverse_in_place` |
| `dsabasics.matrix`    | `format_matrix`, `add_matrices`, `diagonal_view`, `flatten`, `sort_matrix`, `matrix_contains` |
| `dsabasics.arith`     | `add_three`, `inclusive_range`, `count_even_odd` (returns `EvenOddCount`), `natural_sum`, `is_prime`, `count_primes`, `digit_sum` |
| `dsabasics.search`    | `bubble_sort`, `binary_search`, `binary_search_recursive`, `linear_search_recursive`, `first_index`, `last_index`, `count_occurrences`, `count_frequency`, `next_greater_letter` |
| `dsabasics.recursion` | `sum_to`, `count_down`, `count_up`, `elements`, `elements_reversed`, `recursive_min`, `recursive_max`, `factorial`, `fibonacci` |
| `dsabasics.stacks`    | `reverse_string`, `rebuild_number`, `remove_adjacent_duplicates`, `drain_queue`, `fifo_via_stacks`, `reverse_queue` |
| `dsabasics.cli`       | the `dsabasics` command                                                        |

Functions that need at least one value (`array_max`, `recursive_min`,
`recursive_max`) raise `ValueError` on an empty sequence; `sum_to`,
`fibonacci` and `factorial` raise `ValueError` outside their domain.
Search functions return `-1` when the target is absent, and
`next_greater_letter` returns `None`.

## Examples

```python
from dsabasics.arith import is_prime, count_primes, digit_sum
from dsabasics.recursion import factorial, fibonacci
from dsabasics.search import bubble_sort, binary_search, count_frequency
from dsabasics.stacks import remove_adjacent_duplicates, reverse_string
from dsabasics.matrix import add_matrices

is_prime(7)            # True
count_primes(10)       # 4
digit_sum(1234)        # 10

factorial(5)           # 120
fibonacci(10)          # 55

remove_adjacent_duplicates("abbaca")   # "ca"
reverse_string("Sagar")                # "ragaS"

add_matrices([[2, 2], [2, 2]], [[2, 2], [2, 2]])   # [[4, 4], [4, 4]]
```

Searching works on sorted sequences. `bubble_sort` returns a new sorted
list and leaves its argument unchanged:

```python
values = bubble_sort([3, 2, 5, 1, 8])   # [1, 2, 3, 5, 8]
binary_search(values, 5)                # 3
count_frequency([1, 2, 2, 2, 3], 2)     # 3
```

`reverse_in_place` (arrays) and `reverse_queue` (stacks, taking a
`collections.deque`) change their argument and return `None`.

## Command line

Installing the package provides a `dsabasics` command with two
subcommands:

```
dsabasics prime 7
dsabasics frequency 6
dsabasics frequency 4 1 4 4 9
```

`prime` prints whether the number is prime. `frequency` counts an element
in a list of integers (sorted before searching); without a list it uses a
built-in sample. See all options with:

```
dsabasics --help
```

## What it does not do

The command covers only those two exercises; every other routine is used
from Python. There is no interactive prompting: input comes from arguments.