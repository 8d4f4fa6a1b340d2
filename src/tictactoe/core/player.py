# src/tictactoe/core/player.py

from __future__ import annotations
from typing import Optional


class Participant:
    """
    One of the two players.

    The symbol is fixed at construction. The display name falls back to the
    symbol whenever it is missing or blank.
    """

    __slots__ = ("_symbol", "_name")

    def __init__(self, symbol: str, name: Optional[str] = None) -> None:
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise ValueError(f"Symbol must be a single character, got {symbol!r}")
        self._symbol = symbol
        self._name = symbol
        self.name = name

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: Optional[str]) -> None:
        if value is None or not value.strip():
            self._name = self._symbol
        else:
            self._name = value

    def __repr__(self) -> str:
        return f"Participant(symbol={self._symbol!r}, name={self._name!r})"
