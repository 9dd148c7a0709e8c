from __future__ import annotations
from typing import Dict

from gomoku.config import INF
from gomoku.core.board import Board, Won
from gomoku.core.rules import is_winnable, run_cells, runs
from gomoku.types import Player, opponent

# Score of one winnable run by the number of the player's marks in it
LINE_SCORES: Dict[int, int] = {
    0: 0,
    1: 1,
    2: 10,
    3: 100,
    4: 1_000,
    5: 10_000,
}


def winnable_score(board: Board, player: Player) -> int:
    """
    Sum over every winnable run for `player`. Overlapping runs are counted
    once each, so a mark in the middle of open space scores for every run
    passing through it.
    """
    score = 0
    for run in runs(board.size):
        cells = run_cells(board.grid, run)
        if is_winnable(cells, player):
            score += LINE_SCORES[cells.count(player)]
    return score


def evaluate(board: Board, player: Player) -> int:
    state = board.state
    if isinstance(state, Won):
        return INF if state.winner == player else -INF
    return winnable_score(board, player) - winnable_score(board, opponent(player))
