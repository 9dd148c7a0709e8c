from __future__ import annotations
from functools import partial

from gomoku.ai.candidates import neighbourhood_cells
from gomoku.ai.minimax_agent import MinimaxAgent
from gomoku.config import MINIMAX_DEPTH, NEIGHBOUR_RADIUS
from gomoku.core.scoring import evaluate
from gomoku.types import Player


def smart_agent(
    me: Player,
    depth: int = MINIMAX_DEPTH,
    radius: int = NEIGHBOUR_RADIUS,
    name: str = "Smart AI",
) -> MinimaxAgent:
    """
    Minimax that only looks at cells next to existing marks and scores
    positions by counting winnable lines for each side.
    """
    return MinimaxAgent(
        me=me,
        depth=depth,
        moves=partial(neighbourhood_cells, radius=radius),
        estimate=partial(evaluate, player=me),
        name=name,
    )
