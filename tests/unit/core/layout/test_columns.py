from __future__ import annotations

"""
Unit tests for the Column Layout Engine.

Verifies:
1. Grid geometry (floor column count, ceil rows, minimum one column).
2. Degenerate single-row collapse.
3. Column-major cell assignment.
4. Padding by visible length, independent of ANSI sequences.
"""

from colorama import Fore

from glyphls.core.layout.columns import compute_grid, layout_columns, single_column


def test_empty_list_produces_no_rows():
    grid = compute_grid([], 80)
    assert grid.rows == 0
    assert grid.col_width == 2
    assert layout_columns([], 80) == []


def test_degenerate_single_row_collapses_to_one_per_line():
    lines = ["aa", "bb", "cc"]
    grid = compute_grid(lines, 100)

    assert grid.col_width == 4
    assert (grid.rows, grid.cols) == (3, 1)
    assert layout_columns(lines, 100) == ["aa  ", "bb  ", "cc  "]


def test_column_major_fill():
    lines = ["e0", "e1", "e2", "e3", "e4"]
    grid = compute_grid(lines, 8)

    assert (grid.rows, grid.cols) == (3, 2)
    assert grid.index_at(0, 0) == 0
    assert grid.index_at(1, 0) == 1
    assert grid.index_at(2, 0) == 2
    assert grid.index_at(0, 1) == 3
    assert grid.index_at(1, 1) == 4
    assert grid.index_at(2, 1) == 5  # beyond the list: empty cell

    assert layout_columns(lines, 8) == [
        "e0  e3  ",
        "e1  e4  ",
        "e2  ",
    ]


def test_column_count_uses_floor_division():
    lines = [f"i{n}" for n in range(10)]
    # col_width 4: 11 // 4 == 2 columns (ceil would give 3)
    grid = compute_grid(lines, 11)
    assert grid.cols == 2
    assert grid.rows == 5


def test_narrow_terminal_keeps_one_column():
    lines = ["long-name", "other"]
    grid = compute_grid(lines, 3)
    assert grid.cols == 1
    assert grid.rows == 2


def test_fallback_width_one_degenerates_to_list():
    lines = ["a", "b", "c", "d"]
    assert layout_columns(lines, 1) == ["a  ", "b  ", "c  ", "d  "]


def test_padding_ignores_escape_sequences():
    colored = f"{Fore.RED}ab{Fore.RESET}"
    lines = [colored, "cd", "ef", "gh"]
    rows = layout_columns(lines, 8)

    assert rows[0] == f"{colored}  ef  "
    assert rows[1] == "cd  gh  "


def test_layout_is_deterministic():
    lines = [f"entry-{n}" for n in range(17)]
    assert layout_columns(lines, 60) == layout_columns(list(lines), 60)


def test_single_column_is_unpadded():
    assert single_column(["a", "bbb"]) == ["a", "bbb"]
