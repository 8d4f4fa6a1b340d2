from __future__ import annotations
from typing import FrozenSet, Iterable, Optional, Tuple

from tictactoe.config import COL_LABELS, MIN_WINNING_THRESHOLD, ROW_LABELS
from tictactoe.core.board import Cell
from tictactoe.core.position import CENTER, Position

Line = Tuple[Position, ...]

ROWS: Tuple[Line, ...] = tuple(
    tuple(Position(r, c) for c in COL_LABELS) for r in ROW_LABELS
)
COLUMNS: Tuple[Line, ...] = tuple(
    tuple(Position(r, c) for r in ROW_LABELS) for c in COL_LABELS
)
DIAGONALS: Tuple[Line, ...] = (
    (Position("A", "1"), CENTER, Position("C", "3")),
    (Position("A", "3"), CENTER, Position("C", "1")),
)
WIN_LINES: Tuple[Line, ...] = ROWS + COLUMNS + DIAGONALS


def _positions(cells: Iterable[Cell]) -> FrozenSet[Position]:
    return frozenset(cell.position for cell in cells)


def _won_on_axis(occupied: FrozenSet[Position], axis: str, label: str) -> bool:
    count = sum(1 for p in occupied if getattr(p, axis) == label)
    return count == MIN_WINNING_THRESHOLD


def _won_row(occupied: FrozenSet[Position]) -> bool:
    return any(_won_on_axis(occupied, "row", r) for r in ROW_LABELS)


def _won_column(occupied: FrozenSet[Position]) -> bool:
    return any(_won_on_axis(occupied, "col", c) for c in COL_LABELS)


def _won_diagonal(occupied: FrozenSet[Position]) -> bool:
    if CENTER not in occupied:
        return False
    return all(p in occupied for p in DIAGONALS[0]) or all(p in occupied for p in DIAGONALS[1])


def has_won(occupied_cells: Iterable[Cell]) -> bool:
    """
    True when the given cells, all held by one participant, complete a row,
    a column or a diagonal. Re-scans every call; the board is only nine cells.
    """
    occupied = _positions(occupied_cells)
    if len(occupied) < MIN_WINNING_THRESHOLD:
        return False
    return _won_row(occupied) or _won_column(occupied) or _won_diagonal(occupied)


def winning_line(occupied_cells: Iterable[Cell]) -> Optional[Line]:
    occupied = _positions(occupied_cells)
    for line in WIN_LINES:
        if all(p in occupied for p in line):
            return line
    return None
