from __future__ import annotations
from dataclasses import dataclass, field

from gomoku.core.board import Board
from gomoku.core.errors import NotYourTurn
from gomoku.types import Location, Player, opponent


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    current: Player = "X"
    last_status: str = "Player X starts."

    def submit(self, player: Player, location: Location) -> Board:
        """
        Play `location` for `player` and pass the turn. The board raises for
        illegal moves; the turn is only passed when the move is accepted.
        """
        if player != self.current:
            raise NotYourTurn(f"It is {self.current}'s turn, not {player}'s.")
        self.board = self.board.update(player, location)
        self.current = opponent(player)
        return self.board
