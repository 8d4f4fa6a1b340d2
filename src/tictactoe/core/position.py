# src/tictactoe/core/position.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from tictactoe.config import ROW_LABELS, COL_LABELS
from tictactoe.types import Label


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """
    One of the nine grid coordinates, row A-C and column 1-3.

    Ordering follows the canonical reading order A1, A2, A3, B1 ... C3.
    """

    row: str
    col: str

    def __post_init__(self) -> None:
        if self.row not in ROW_LABELS or self.col not in COL_LABELS:
            raise ValueError(f"Unknown position: {self.row!r}{self.col!r}")

    @property
    def label(self) -> Label:
        return Label(f"{self.row}{self.col}")

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_label(cls, label: str) -> "Position":
        """Strict constructor for code-supplied labels such as "B2"."""
        pos = cls.parse(label)
        if pos is None:
            raise ValueError(f"Unknown position label: {label!r}")
        return pos

    @classmethod
    def parse(cls, text: str) -> Optional["Position"]:
        """
        Resolve user text against the nine labels, ignoring case.
        Returns None when nothing matches.
        """
        return _BY_LABEL.get(text.upper())


ALL_POSITIONS: Tuple[Position, ...] = tuple(
    Position(r, c) for r in ROW_LABELS for c in COL_LABELS
)

_BY_LABEL: Dict[str, Position] = {p.label: p for p in ALL_POSITIONS}

CENTER = Position("B", "2")
