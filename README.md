# algokit

A small collection of classic teaching algorithms and data structures,
written as plain, dependency-free Python.

## What is inside

- `algokit.numbers`: number puzzles and helpers: `is_armstrong`,
  `factorial`, `fibonacci`, `floyds_triangle`, `is_leap_year`,
  `reverse_number`, `is_palindrome`, `is_perfect`, `is_prime`,
  `strong_sum`, `is_strong`, `celsius_to_fahrenheit`,
  `fahrenheit_to_celsius`, `convert_temperature` (scale `"C"` or `"F"`,
  anything else raises `ValueError`), `max_min` and `binary_search`.
- `algokit.textops`: `encrypt` (shifts every character up by one code
  point), `is_balanced` (matching of `()`, `[]` and `{}`),
  `write_keywords` (writes the 32 C keywords to a file, one per line) and
  `count_lines` (counts the newlines in a file).
- `algokit.hanoi`: `hanoi_moves`, a generator of `(disk, from_peg, to_peg)`
  moves, and `format_move` to describe one move as text.
- `algokit.matrix`: `upper_triangular` (zeroes the entries below the
  diagonal of a square matrix) and `format_matrix`.
- `algokit.scheduling`: non-preemptive first-come-first-served scheduling
  with `Process`, `ProcessStats`, `schedule` and `averages` (integer
  averages of turnaround and waiting time).
- `algokit.game`: a number guessing game: `GuessGame`, `Outcome` and
  `random_secret` (a number from 0 to 99).
- `algokit.avl`: a self-balancing `AVLTree` with `insert`, `delete`,
  `inorder`, `height`, `len()` and `in`.
- `algokit.bst`: a `BinarySearchTree` with `insert`, `delete`, `search`
  and the `inorder`, `preorder` and `postorder` traversals.
- `algokit.linkedlists`: `CircularList` (`add_to_beginning`,
  `add_to_end`) and `SinglyLinkedList` (`append`, `reverse`); both can be
  iterated.
- `algokit.polynomial`: `Polynomial`, whose terms are kept in descending
  order of exponent, and `add_polynomials`.

## Installing

```
pip install .
```

Python 3.10 or newer is required. There are no runtime dependencies.

## Using the library

```python
from algokit.numbers import is_armstrong, factorial, is_leap_year
from algokit.textops import is_balanced

is_armstrong(153)                # True
factorial(5)                     # 120
is_leap_year(1900)               # False
is_balanced("[()]{}{[()()]()}")  # True
is_balanced("[(])")              # False
```

```python
from algokit.avl import AVLTree

tree = AVLTree()
for value in range(1, 8):
    tree.insert(value)
tree.inorder()   # [1, 2, 3, 4, 5, 6, 7]
tree.delete(4)   # True
```

```python
from algokit.polynomial import Polynomial, add_polynomials

p = Polynomial([(3, 2), (1, 0)])
q = Polynomial([(2, 2), (4, 1)])
str(add_polynomials(p, q))   # '(5.0x^2)+(4.0x^1)+(1.0x^0)'
```

## Command line

Installing the package provides the `algokit` command with two
subcommands:

```
algokit hanoi 3          # print the moves for three disks, pegs A to C
algokit guess            # play guess the number with 7 guesses
algokit guess --moves 5  # play with 5 guesses
algokit --help
```

## What it does not do

The command line covers only the Tower of Hanoi and the guessing game;
the other modules are used from Python. Nothing is stored between runs,
apart from the file that `write_keywords` writes where you ask it to.

## Running the tests

```
pip install ".[test]"
pytest
```