# minecount

`minecount` turns a Minesweeper board into its annotated form. Each empty
square that touches one or more mines gets the number of neighbouring mines.
Empty squares with no neighbouring mines stay blank. Mines (`*`) and any
other characters are kept as they are.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Using the library

A board is a sequence of strings of equal length. A space is an empty square
and `*` is a mine.

```python
from minecount.annotate import annotate

board = [
    " * * ",
    "  *  ",
    "  *  ",
    "     ",
]

for row in annotate(board):
    print(row)
```

This prints:

```
1*3*1
13*31
 2*2 
 111 
```

An empty board gives an empty list. If the rows differ in length, `annotate`
raises `ValueError`.

`read_minefield(path)` reads a board from a UTF-8 text file. It returns one
row per line, without the line endings.

## Checking a directory of boards

A directory may hold pairs of files that share a name. `<name>.mines` holds a
board and `<name>.expected` holds its annotated form.

- `test_names(directory)` returns the distinct, sorted file stems of the
  regular files in the directory. A file named `.DS_Store` is ignored.
- `run_tests(directory)` annotates every `.mines` board and compares the
  result with the matching `.expected` file. It returns the number of cases
  checked. On the first mismatch it raises `FieldMismatch`, a subclass of
  `AssertionError` that carries `name`, `actual` and `expected`. If no
  directory is given, it uses `system_test/test_files`.

The same check is available from the command line:

```
minecount [directory]
```

If you give no directory, the command checks `system_test/test_files`. When
every case passes, it prints `N case(s) passed` and exits with status 0.
On a mismatch, or on a file that cannot be read, it prints the error to
standard error and exits with status 1.

## Linked list

`minecount.linkedlist` provides a small doubly linked list that grows at its
tail:

```python
from minecount.linkedlist import LinkedList

items = LinkedList()
items.push(1)
items.push(2)
print(list(items), len(items))   # [1, 2] 2
```

`LinkedList` exposes its `head` and `tail` nodes. Each `Node` has `item`,
`next` and `prev` attributes.

## What it does not do

The package does not let you play Minesweeper. It has no board generator and
no interactive game; it only annotates boards that are given to it.

The linked list only supports appending with `push`, iterating and `len`. It
has no removal, no swapping of elements and no indexing.