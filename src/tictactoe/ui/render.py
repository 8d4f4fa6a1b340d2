from __future__ import annotations
from typing import Iterable, List, Optional, Set

from tictactoe.config import COL_LABELS, PLAYER_ONE_SYMBOL, ROW_LABELS
from tictactoe.core.board import Grid
from tictactoe.core.position import Position
from tictactoe.ui.colors import c, BOLD, DIM, FG_RED, FG_YELLOW, REVERSE

CLEAR = "\033[2J\033[H"


def _piece(symbol: str, use_color: bool) -> str:
    if symbol == " ":
        return symbol
    if symbol == PLAYER_ONE_SYMBOL:
        return c(symbol, FG_RED, use_color)
    return c(symbol, FG_YELLOW, use_color)


def format_board(
    grid: Grid,
    highlight: Optional[Iterable[Position]] = None,
    use_color: bool = False,
) -> str:
    """
    Text picture of the grid: rows A-C down the left, columns 1-3 along
    the bottom. Highlighted cells are shown in reverse video when colors
    are on.
    """
    hl: Set[Position] = set(highlight) if highlight else set()
    snap = grid.snapshot()

    lines: List[str] = [" ___________________"]
    for r in ROW_LABELS:
        parts = []
        for col in COL_LABELS:
            pos = Position(r, col)
            p = _piece(snap[pos.label], use_color)
            if pos in hl:
                p = c(p, BOLD + REVERSE, use_color)
            parts.append(f"  {p}  ")
        lines.append(f"{r}|" + "|".join(parts) + "|")
        lines.append(" |_____|_____|_____|")
    lines.append(c("    " + "     ".join(COL_LABELS), DIM, use_color))
    return "\n".join(lines)
