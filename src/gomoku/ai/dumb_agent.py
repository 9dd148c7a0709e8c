from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from gomoku.ai.candidates import first_empty_cell
from gomoku.game.state import GameState
from gomoku.types import Location, Player


@dataclass(slots=True)
class DumbAgent:
    """Always takes the first empty cell, scanning rows top to bottom."""
    me: Player
    name: str = "Dumb AI"

    def choose_move(self, state: GameState) -> Optional[Location]:
        moves = first_empty_cell(state.board)
        return moves[0] if moves else None
