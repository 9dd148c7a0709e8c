from __future__ import annotations
from typing import Callable, Optional, Protocol, Sequence

from gomoku.core.board import Board
from gomoku.game.state import GameState
from gomoku.types import Location

# Pluggable strategies for search-based agents
MoveGenerator = Callable[[Board], Sequence[Location]]
Evaluator = Callable[[Board], int]


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Optional[Location]:
        ...
