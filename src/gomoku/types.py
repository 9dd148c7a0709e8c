# src/gomoku/types.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional

Player = Literal["X", "O"]
Cell = Optional[Player]

PLAYERS: tuple[Player, Player] = ("X", "O")


def opponent(p: Player) -> Player:
    return "O" if p == "X" else "X"


@dataclass(frozen=True, slots=True)
class Location:
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"
