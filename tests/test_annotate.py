from pathlib import Path

import pytest

from minecount.annotate import (
    FieldMismatch,
    annotate,
    main,
    read_minefield,
    run_tests,
    test_names as list_test_names,
)


def test_case_01():
    board = [" * * ", "  *  ", "  *  ", "     "]
    assert annotate(board) == ["1*3*1", "13*31", " 2*2 ", " 111 "]


def test_case_02():
    board = ["    *    ", " * * * * ", "*********", "         "]
    assert annotate(board) == ["1122*2211", "3*5*6*5*3", "*********", "233333332"]


def test_empty_field():
    board = ["     ", "     ", "     "]
    assert annotate(board) == ["     ", "     ", "     "]


def test_all_mines():
    board = ["****", "****", "****"]
    assert annotate(board) == ["****", "****", "****"]


def test_alternating_row_mines():
    assert annotate(["* * * * *"]) == ["*2*2*2*2*"]


def test_single_column_with_mine():
    assert annotate([" ", "*", " "]) == ["1", "*", "1"]


def test_wrong_input():
    assert annotate([]) == []


def test_other_characters_untouched():
    assert annotate(["*."]) == ["*."]


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        annotate(["   ", " "])


def test_shape_preserved():
    board = [" * ", "   ", "** "]
    result = annotate(board)
    assert [len(row) for row in result] == [len(row) for row in board]
    assert all(
        (a == "*") == (b == "*")
        for before, after in zip(board, result)
        for a, b in zip(before, after)
    )


def _write(directory: Path, name: str, rows: list[str]) -> None:
    (directory / name).write_text("\n".join(rows) + "\n", encoding="utf-8")


def test_read_minefield_strips_newlines(tmp_path):
    _write(tmp_path, "board.mines", [" * ", "   "])
    assert read_minefield(tmp_path / "board.mines") == [" * ", "   "]


def test_read_minefield_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_minefield(tmp_path / "absent.mines")


def test_names_are_distinct_stems(tmp_path):
    _write(tmp_path, "one.mines", ["*"])
    _write(tmp_path, "one.expected", ["*"])
    _write(tmp_path, "two.mines", [" "])
    (tmp_path / ".DS_Store").write_bytes(b"")
    (tmp_path / "sub").mkdir()
    assert list_test_names(tmp_path) == ["one", "two"]


def test_run_tests_passes(tmp_path):
    _write(tmp_path, "a.mines", [" * * ", "  *  ", "  *  ", "     "])
    _write(tmp_path, "a.expected", ["1*3*1", "13*31", " 2*2 ", " 111 "])
    _write(tmp_path, "b.mines", ["* * * * *"])
    _write(tmp_path, "b.expected", ["*2*2*2*2*"])
    assert run_tests(tmp_path) == 2


def test_run_tests_mismatch(tmp_path):
    _write(tmp_path, "bad.mines", [" ", "*", " "])
    _write(tmp_path, "bad.expected", [" ", "*", " "])
    with pytest.raises(FieldMismatch) as info:
        run_tests(tmp_path)
    assert info.value.name == "bad"
    assert info.value.actual == ["1", "*", "1"]


def test_run_tests_missing_expected(tmp_path):
    _write(tmp_path, "lonely.mines", ["*"])
    with pytest.raises(FileNotFoundError):
        run_tests(tmp_path)


def test_main_success(tmp_path, capsys):
    _write(tmp_path, "a.mines", ["****"])
    _write(tmp_path, "a.expected", ["****"])
    assert main([str(tmp_path)]) == 0
    assert "1 case(s) passed" in capsys.readouterr().out


def test_main_failure(tmp_path):
    _write(tmp_path, "a.mines", [" *"])
    _write(tmp_path, "a.expected", [" *"])
    assert main([str(tmp_path)]) == 1


def test_main_missing_directory(tmp_path):
    assert main([str(tmp_path / "nowhere")]) == 1