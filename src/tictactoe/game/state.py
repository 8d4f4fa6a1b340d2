from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from tictactoe.core.player import Participant


@dataclass(frozen=True, slots=True)
class Intro:
    pass


@dataclass(frozen=True, slots=True)
class AwaitingMove:
    turn: int
    participant: Participant


@dataclass(frozen=True, slots=True)
class Won:
    participant: Participant


@dataclass(frozen=True, slots=True)
class Draw:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


GameState = Union[Intro, AwaitingMove, Won, Draw, Quit]


def is_terminal(state: GameState) -> bool:
    return isinstance(state, (Won, Draw, Quit))
