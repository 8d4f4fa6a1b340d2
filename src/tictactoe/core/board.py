# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Union

from tictactoe.core.player import Participant
from tictactoe.core.position import ALL_POSITIONS, Position


@dataclass(eq=False, slots=True)
class Cell:
    position: Position
    occupant: Optional[Participant] = None

    def __post_init__(self) -> None:
        if not isinstance(self.position, Position):
            raise TypeError(f"Cell needs a Position, got {self.position!r}")

    @property
    def is_occupied(self) -> bool:
        return self.occupant is not None

    def occupy(self, participant: Participant) -> None:
        # Callers validate first; a second occupation is a programming error.
        if self.occupant is not None:
            raise ValueError(f"Cell {self.position} is already occupied.")
        self.occupant = participant

    def symbol_if_occupied(self) -> str:
        return self.occupant.symbol if self.occupant is not None else " "


def _fresh_cells() -> Dict[Position, Cell]:
    return {p: Cell(p) for p in ALL_POSITIONS}


@dataclass(slots=True)
class Grid:
    cells: Dict[Position, Cell] = field(default_factory=_fresh_cells)

    def __post_init__(self) -> None:
        if set(self.cells) != set(ALL_POSITIONS):
            raise ValueError("Grid needs exactly one cell per position A1..C3.")
        for pos, cell in self.cells.items():
            if cell.position != pos:
                raise ValueError(f"Cell {cell.position} filed under {pos}.")

    def __iter__(self) -> Iterator[Cell]:
        return (self.cells[p] for p in ALL_POSITIONS)

    def __len__(self) -> int:
        return len(self.cells)

    def cell_at(self, where: Union[Position, str]) -> Optional[Cell]:
        """
        Look up a cell by Position (always found) or by raw label text,
        which is matched case-insensitively and yields None when unknown.
        """
        if isinstance(where, Position):
            return self.cells[where]
        pos = Position.parse(where)
        if pos is None:
            return None
        return self.cells[pos]

    def cells_occupied_by(self, participant: Participant) -> List[Cell]:
        return [cell for cell in self if cell.occupant is participant]

    def is_full(self) -> bool:
        return all(cell.is_occupied for cell in self)

    def snapshot(self) -> Dict[str, str]:
        return {cell.position.label: cell.symbol_if_occupied() for cell in self}
