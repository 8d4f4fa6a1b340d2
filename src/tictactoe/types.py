# src/tictactoe/types.py

from __future__ import annotations
from typing import Literal, NewType

Label = NewType("Label", str)   # "A1".."C3"
Slot = Literal[1, 2]            # name prompt number
