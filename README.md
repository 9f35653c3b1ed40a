# structalgo

Classic data-structure and algorithm exercises as a Python package, with four
small interactive console programs. It has no dependencies beyond the
standard library.

## Modules

- `structalgo.numerics`: `factorial_iterative`, `factorial_recursive`,
  `fibonacci_naive`, `fibonacci_fast` (doubling identities), `minor`,
  `determinant` (cofactor expansion along the first column), `format_matrix`,
  `read_matrix` (a dimension from 0 to 10, then the values), and the `Barrel`
  dataclass with `volume()` and `describe()`. A negative argument raises
  `ValueError`.
- `structalgo.textutils`: `is_ascii`, `upper_ascii`, `min_value`,
  `in_domain`, `describe_digit` and `read_table`. `read_table` reads a count,
  asking again until the count is between 0 and 10, and then reads that many
  integers.
- `structalgo.menu`: `Menu`, which holds at most 20 entries of at most 59
  characters. It provides `max_length()`, `render()` (numbered entries,
  centred) and `choose(stream, out)`. `choose` returns the 1-based number of
  the typed entry. It returns 0 when the reader types `q` or `Q` or the input
  ends.
- `structalgo.polynomial`: `Monomial` and `Polynomial`, immutable values
  kept in increasing degree order. `Polynomial` supports `prepend`,
  `degree`, `multiply_monomial`, `+`, `*`, iteration and `str()`. The module
  also provides `symmetric_difference` of two ascending sequences.
- `structalgo.hangman`: `reveal` and the `Hangman` game. `Hangman` has
  `guess`, `masked`, `won` and `lost`, and gives 10 attempts by default.
- `structalgo.electors`: `Elector` and `ElectorList`. The list is kept in
  alphabetical order of name. It provides `add`, `find`, `remove` (raises
  `KeyError`), `split` into left (votes 1 and 3), blank and right (votes 2
  and 4), `sort_by_cin`, `count_left` and `format`. The module also provides
  `merge_lists`.
- `structalgo.voting_cli`: `normalize_choice`, `left_right_percentages` and
  the elector menu `main`.
- `structalgo.textindex`: `Index`, a binary search tree of the words of a
  text (`WordNode`). Each word is lower-cased and keeps its `Position`s
  (line, order in the line, sentence) in a `PositionList`. `Index` provides
  `find`, `insert_node`, `index_lines`, `index_file`, in-order iteration,
  `height`, `is_balanced` and `most_frequent`. The module also has the
  helpers `lowercase_ascii`, `upper_char`, `find_max`, `height` and
  `balanced_height`.
- `structalgo.textindex_render`: `format_node`, `format_index` (words
  grouped under their initial), `format_max`, `format_occurrences` (the
  sentences that contain a word), `rebuild_text` and `write_text`, which
  restore capitals and periods.
- `structalgo.index_cli`: the text index menu `main`.

## Installation

```
pip install .
```

## Console programs

```
structalgo-determinant
structalgo-hangman
structalgo-voting [--pause SECONDS]
structalgo-index
```

- `structalgo-determinant` reads a dimension followed by the matrix values
  from standard input. It prints the matrix and its determinant.
- `structalgo-hangman` reads the secret word and then one guess per line.
- `structalgo-voting` is a numbered menu for adding, removing, finding,
  listing and counting electors. It can also split, sort and merge the list
  and compute the left and right percentages. It waits `--pause` seconds
  after each action (default 3).
- `structalgo-index` is a numbered menu. It loads one text file, shows the
  index and its statistics, searches for words and writes the rebuilt text
  to a file.

All four programs stop cleanly at the end of input.

## Library use

```python
from structalgo.polynomial import Polynomial
from structalgo.numerics import determinant, fibonacci_fast

p = Polynomial().prepend(2, 6).prepend(7, 3)
q = Polynomial().prepend(4, 7).prepend(6, 3)
print(p * q)

print(determinant([[1.0, 2.0], [3.0, 4.0]]))   # -2.0
print(fibonacci_fast(14))                        # 377
```

```python
from structalgo.textindex import Index
from structalgo.textindex_render import format_index

index = Index()
index.index_lines(["The cat sleeps. The dog barks.\n"])
print(index.most_frequent().word)   # "the"
print(format_index(index))
```

## Limitations

- Nothing is saved between runs. The elector list and the text index live
  only in memory.
- Words are split on single spaces only. Only a trailing period ends a
  sentence.

## Running the tests

```
pip install .[test]
pytest
```