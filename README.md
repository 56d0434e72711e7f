# algolab

A collection of classic algorithms and data structures, written to be read,
run and experimented with.

## What is inside

- `algolab.sorting`: `insertion_sort`, `shell_sort` (gaps n/2, n/4, ..., 1),
  `shell_sort_hibbard` (gaps 2**k - 1 divided by three; for some lengths the
  gap sequence skips 1, so the result is only gap-sorted), `heap_sort`,
  `merge_sort`, `quick_sort`, `partition` (in place, around the first
  element of a range), `quick_sort_lomuto_trace` (returns the sorted list and
  a snapshot after every partition step), `median_of_three_quick_sort` with
  an insertion-sort cutoff, and `bucket_sort` for integers in `0..max_value`.
  Every sort returns a new list and leaves its input untouched.
- `algolab.heaps`: `MinHeap` and `MaxHeap` with `push`, `pop`, `peek` and
  `len()`, an optional capacity, and `drain(heap)`, a generator that pops a
  heap empty.
- `algolab.linked_list`: a singly linked `LinkedList` with `append`,
  `prepend`, `insert_after` (0-based), `delete_after`, `update` and `get`
  (1-based), `reverse` in place and `reversed` as a new list.
- `algolab.bst`: an unbalanced `BinarySearchTree` with `insert`, `find`,
  `in`, `min`, `max`, `delete`, `preorder`, `inorder`, `postorder`, `leaves`,
  `height`, `render` (sideways, right subtree on top) and `clear`.
- `algolab.avl`: a self-balancing `AVLTree` with `insert`, `delete`, `min`,
  `max`, `height`, `inorder` and `inorder_with_heights`.
- `algolab.kmp`: Knuth–Morris–Pratt search with three jump tables:
  `prefix_table` / `kmp_search`, `failure_table` / `kmp_search_failure`,
  `optimized_next` / `kmp_search_optimized`. Each search returns the first
  match index or -1.
- `algolab.subsequence`: `max_subsequence_sum` (linear) and
  `max_subsequence_sum_brute`; the empty run counts, so the result is never
  negative.
- `algolab.puzzles`: `dna_mismatches`, `count_char_ignoring_case`,
  `digit_sum_pinyin`, `fibonacci`, `fibonacci_distance`, `find_words` (finds
  "this", "two" and "fat" in a letter grid) and `format_homework`.
- `algolab.prefix`: `to_prefix` converts infix to prefix notation,
  `evaluate_prefix` evaluates it; `BoundedStack` is the fixed-capacity stack
  both use.
- `algolab.game2048`: `Board` (with `move`, `spawn`, `free_neighbours`,
  `render`), `Direction` and `key_to_direction`, plus a terminal game.
- `algolab.readers_writers`: `ReaderWriterLock` with `read()` and `write()`
  context managers, and `run_simulation`, which runs reader threads and one
  writer and returns the `Event`s in the order they happened.
- `algolab.students`: `Student`, `parse_students`, `rank_students` (highest
  score first) and `average_score` (truncated towards zero).
- `algolab.pca`: `load_samples`, `covariance`, `jacobi_eigen`, `sort_eigen`,
  `choose_components`, `reduce` and `write_results`, built on numpy.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using it from Python

```python
from algolab.kmp import kmp_search
from algolab.subsequence import max_subsequence_sum
from algolab.puzzles import dna_mismatches, digit_sum_pinyin
from algolab.heaps import MinHeap, drain

kmp_search("abcabdababaca", "ababaca")                 # 6
max_subsequence_sum([1, 4, -9, 23, 5, -2, 7, 14])      # 47
dna_mismatches("ACGT", "TGCA")                         # 0
digit_sum_pinyin("1234567890987654321123456789")       # "yi san wu"

heap = MinHeap()
for value in (8, 2, 5):
    heap.push(value)
list(drain(heap))                                      # [2, 5, 8]
```

## Commands

| Command | What it does |
| --- | --- |
| `algolab-bst` | reads a count and that many integers from standard input and prints them in order |
| `algolab-avl` | reads a count and integers from standard input and prints each value with its node height |
| `algolab-kmp TEXT PATTERN` | prints the prefix table of the pattern and the first match index (reads the two words from standard input when no arguments are given) |
| `algolab-prefix [EXPRESSION ...]` | prints the prefix form and the value of each expression; without arguments it asks for expressions interactively |
| `algolab-2048 [--seed N]` | plays 2048 in the terminal with `wasd` or `hjkl`; `q` quits, and the game ends when the board is full |
| `algolab-readers-writers [--readers N] [--seed N]` | runs the readers/writers simulation and prints each event |
| `algolab-students [FILE]` | reads id/score pairs from a file or standard input, prints them ranked and the average |
| `algolab-pca [INPUT]` | runs the PCA pipeline over a sample file and writes the result files |

`algolab-pca` options: `--rows` (default 400), `--columns` (default 1024),
`--percent` (default 0.99), `--output` (default the current directory),
`--tolerance` (default 1e-16) and `--max-iterations`. The input defaults to
`ORL.txt`; of every ten rows the first seven are used. It writes `tzz.txt`
(the rotated matrix), `tzxl.txt` (eigenvectors), `c_tzxl.txt` (the chosen
eigenvectors) and `low.txt` (the reduced samples).

For example:

```
echo "5 3 1 4 1 5" | algolab-bst
algolab-prefix "1+2*3"
```

## Limits

- `algolab-2048` needs Python's `curses` module and a real terminal; the
  arrow keys are not mapped, only the letter keys.
- `algolab.pca` stops at writing the reduced samples; it does not classify or
  recognise new samples against them.
- In `to_prefix` every operator, `^` included, groups from the left.