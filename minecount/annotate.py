"""Annotate minesweeper boards with neighbouring mine counts."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

MINE = "*"
EMPTY = " "
DEFAULT_TEST_DIR = Path("system_test") / "test_files"
_IGNORED_STEMS = {".DS_Store"}

_NEIGHBOURS = tuple(
    (di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)
)


class FieldMismatch(AssertionError):
    """An annotated board differs from the expected board."""

    def __init__(self, name: str, actual: list[str], expected: list[str]) -> None:
        super().__init__(
            f"case {name!r}: got {actual!r}, expected {expected!r}"
        )
        self.name = name
        self.actual = actual
        self.expected = expected


def annotate(minefield: Sequence[str]) -> list[str]:
    """Replace each empty cell by the number of adjacent mines.

    Mines stay as they are, empty cells with no adjacent mine stay blank,
    and any other character is left untouched.
    """
    rows = list(minefield)
    if not rows:
        return []

    width = len(rows[0])
    for number, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(
                f"row {number} has length {len(row)}, expected {width}"
            )

    height = len(rows)

    def is_mine(i: int, j: int) -> bool:
        return 0 <= i < height and 0 <= j < width and rows[i][j] == MINE

    def cell(i: int, j: int, char: str) -> str:
        if char != EMPTY:
            return char
        count = sum(is_mine(i + di, j + dj) for di, dj in _NEIGHBOURS)
        return str(count) if count else EMPTY

    return [
        "".join(cell(i, j, char) for j, char in enumerate(row))
        for i, row in enumerate(rows)
    ]


def read_minefield(path: str | Path) -> list[str]:
    """Read a board from a file, one row per line, without line endings."""
    with open(path, encoding="utf-8") as handle:
        return [line.rstrip("\n") for line in handle]


def test_names(directory: str | Path) -> list[str]:
    """Return the distinct file stems of the regular files in a directory."""
    stems = {
        entry.stem
        for entry in Path(directory).iterdir()
        if entry.is_file() and entry.stem not in _IGNORED_STEMS
    }
    return sorted(stems)


def _check_all(directory: Path, names: Iterable[str]) -> int:
    checked = 0
    for name in names:
        board = read_minefield(directory / f"{name}.mines")
        expected = read_minefield(directory / f"{name}.expected")
        actual = annotate(board)
        if actual != expected:
            raise FieldMismatch(name, actual, expected)
        checked += 1
    return checked


def run_tests(directory: str | Path = DEFAULT_TEST_DIR) -> int:
    """Check every ``<name>.mines`` against ``<name>.expected`` in a directory.

    Returns the number of cases checked; raises FieldMismatch on the first
    board whose annotation differs.
    """
    directory = Path(directory)
    return _check_all(directory, test_names(directory))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the file-based board checks and report the outcome."""
    parser = argparse.ArgumentParser(
        description="Check annotated minesweeper boards against expected files."
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=str(DEFAULT_TEST_DIR),
        help="directory holding .mines and .expected files",
    )
    args = parser.parse_args(argv)

    try:
        checked = run_tests(args.directory)
    except FieldMismatch as error:
        print(error, file=sys.stderr)
        return 1
    except OSError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    print(f"{checked} case(s) passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())