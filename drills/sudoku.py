"""Validation of a partially filled 9x9 sudoku board."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

EMPTY = "."
SIZE = 9
BOX = 3


def _has_repeat(cells: Iterable[str]) -> bool:
    seen: set[str] = set()
    for cell in cells:
        if cell == EMPTY:
            continue
        if cell in seen:
            return True
        seen.add(cell)
    return False


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Return whether no row, column or 3x3 box repeats a filled digit.

    ``board`` is nine rows of nine cells; empty cells are ``"."``.
    Only the filled cells are checked; the board need not be solvable.
    """
    if len(board) != SIZE or any(len(row) != SIZE for row in board):
        raise ValueError("a sudoku board must be 9 rows of 9 cells")

    rows = (list(row) for row in board)
    columns = ([board[r][c] for r in range(SIZE)] for c in range(SIZE))
    boxes = (
        [
            board[r][c]
            for r in range(top, top + BOX)
            for c in range(left, left + BOX)
        ]
        for top in range(0, SIZE, BOX)
        for left in range(0, SIZE, BOX)
    )
    for group in (rows, columns, boxes):
        if any(_has_repeat(cells) for cells in group):
            return False
    return True