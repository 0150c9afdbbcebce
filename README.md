# algokit

A small library of classic algorithms and data structures, written in plain
Python with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `insertion_sort`, `merge_sort`, `selection_sort`, `move_negatives_left`, `reverse_range` |
| `algokit.searching` | `binary_search`, `exponential_search`, `search_sorted_matrix`, `min_max`, `sliding_window_max`, `count_triplets_below`, `longest_increasing_subsequence` |
| `algokit.textalgo` | `compute_lps`, `kmp_search`, `count_anagrams`, `is_balanced`, `evaluate_postfix`, `count_decodings` |
| `algokit.containers` | `TwoStacks`, `CircularDeque`, `StackOverflowError`, `StackUnderflowError` |
| `algokit.linkedlist` | `Node`, `build_list`, `to_list`, `reverse`, `remove_smaller_than_right` |
| `algokit.bst` | `TreeNode`, `insert`, `inorder`, `count_in_range`, `has_dead_end`, `merge_sorted`, `sorted_to_bst`, `merge_trees` |
| `algokit.graphs` | `connected_components`, `DisjointSet`, `Graph` (Kruskal), `prim_mst` |
| `algokit.backtracking` | `is_safe`, `solve_sudoku`, `solve_sudoku_text`, `solve_n_queens`, `rat_in_maze`, `tower_of_hanoi` |
| `algokit.numtheory` | `binomial`, `catalan`, `sieve`, `bitwise_equal` |
| `algokit.crc` | `crc_remainder`, `encode`, `verify`, `main` |
| `algokit.rover` | `Orientation`, `Rover`, `main` |
| `algokit.expedition` | `min_refuels`, `main` |

The sorting functions return new lists and leave their input alone. Search
functions return `None` when nothing is found. Problems that cannot be solved
(an unsolvable sudoku, a maze with no path, an unreachable town) also give
`None`; bad input raises `ValueError` or `IndexError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algokit.sorting import merge_sort
from algokit.textalgo import kmp_search, is_balanced
from algokit.graphs import Graph
from algokit.numtheory import catalan

merge_sort([6, 5, 12, 10, 9, 1])                 # [1, 5, 6, 9, 10, 12]
kmp_search("ABABCABAB", "ABABDABACDABABCABAB")   # [10]
is_balanced("{([])}")                            # True
[catalan(i) for i in range(10)]                  # [1, 1, 2, 5, 14, 42, 132, 429, 1430, 4862]

g = Graph(4)
for u, v, w in [(0, 1, 1), (1, 3, 3), (3, 2, 4), (2, 0, 2), (0, 3, 2), (1, 2, 2)]:
    g.add_edge(u, v, w)
g.kruskal_mst()                                  # 5
```

`tower_of_hanoi` yields its moves lazily as `(disk, from_peg, to_peg)`:

```python
from algokit.backtracking import tower_of_hanoi

list(tower_of_hanoi(2))   # [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]
```

Containers raise exceptions rather than printing errors:

```python
from algokit.containers import TwoStacks, StackUnderflowError

stacks = TwoStacks(5)
stacks.push1(5)
stacks.pop1()        # 5
try:
    stacks.pop1()
except StackUnderflowError:
    ...
```

`CircularDeque` raises `StackOverflowError` when full and
`StackUnderflowError` when empty; it supports `len()` and iterates from front
to rear.

CRC bits can be given as strings or sequences of 0/1 integers:

```python
from algokit.crc import crc_remainder, encode, verify

crc_remainder("1101011011", "10011")   # [1, 1, 1, 0]
verify(encode("1101011011", "10011"), "10011")   # True
```

## Command-line tools

Three programs are installed along with the library:

- `algokit-crc FRAME GENERATOR [RECEIVED]` prints the sender side (frame,
  padded message, CRC bits, transmitted frame) and the receiver side
  (received frame and remainder). The received frame defaults to the
  transmitted one. It exits with status 1 when the remainder is not zero.

  ```
  algokit-crc 1101011011 10011
  ```

- `algokit-rover [X Y ORIENTATION] [--commands STRING]` places a rover and
  prints its final position as `x y heading`. The start is read from standard
  input when not given; the command string defaults to `MMRMMRMRRM`. `L` turns
  left, `R` turns right and any other character moves one cell forward.

  ```
  algokit-rover 1 2 N --commands LMLMLMLMM     # prints: 1 3 N
  ```

- `algokit-expedition [FILE]` reads whitespace-separated integers from a file
  or standard input: the number of cases, then for each case the number of
  stations, one `distance-from-town fuel` pair per station, and finally the
  truck's distance from town and its starting fuel. It prints the fewest
  refuelling stops for each case, or `-1` when the town cannot be reached.

  ```
  echo "1 4 4 4 5 2 11 5 15 10 25 10" | algokit-expedition    # prints: 2
  ```

Run any of them with `--help` to see the arguments they take.