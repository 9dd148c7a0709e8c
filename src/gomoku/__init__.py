from .core.board import Board, Drawn, MoveResult, MoveStatus, Ongoing, Won
from .ai.minimax_agent import MinimaxAgent
from .ai.smart_agent import smart_agent
from .types import Location, Player, opponent

__all__ = [
    "Board",
    "Drawn",
    "Location",
    "MinimaxAgent",
    "MoveResult",
    "MoveStatus",
    "Ongoing",
    "Player",
    "Won",
    "opponent",
    "smart_agent",
]
