from __future__ import annotations

from dataclasses import dataclass, field
import logging
import time
from typing import Literal, Optional

from gomoku.ai.base import Evaluator, MoveGenerator
from gomoku.config import INF
from gomoku.core.board import Board, MoveStatus
from gomoku.game.state import GameState
from gomoku.types import Location, Player, opponent

log = logging.getLogger(__name__)

TieBreak = Literal["first", "last"]

# Which of two equally scored moves wins. The root keeps the earliest
# candidate, inner levels keep the latest one.
ROOT_TIE_BREAK: TieBreak = "first"
INNER_TIE_BREAK: TieBreak = "last"


def _better(score: float, best: float, maximize: bool, tie_break: TieBreak) -> bool:
    if score == best:
        return tie_break == "last"
    return score > best if maximize else score < best

@dataclass(slots=True)
class SearchStats:
    """Counters for one select_move call. Never shared between calls."""
    nodes: int = 0
    leaves: int = 0


@dataclass(slots=True)
class MinimaxAgent:
    """
    Depth-bounded minimax over the candidates offered by `moves`, scoring
    depth-exhausted positions with `estimate`. Scores are always from `me`'s
    point of view: levels where `me` replies maximize, opponent levels
    minimize.

    Finished positions are detected by the board refusing the move:
      - game already won  -> +INF / -INF depending on who won
      - board full        -> 0 (draw)
    Any other refusal means `moves` offered an illegal cell and is raised.

    The search keeps its counters in a per-call SearchStats. `last_info` is
    only a report of the most recent call, replaced in one assignment.
    """
    me: Player
    depth: int
    moves: MoveGenerator
    estimate: Evaluator
    name: str = "Minimax AI"

    # Report of the last search
    last_info: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.depth, int) or self.depth < 1:
            raise ValueError(f"Search depth must be a positive integer, got {self.depth!r}.")

    def choose_move(self, state: GameState) -> Optional[Location]:
        return self.select_move(state.board)

    def select_move(self, board: Board) -> Optional[Location]:
        start = time.perf_counter()
        stats = SearchStats()

        best_move: Optional[Location] = None
        best_score: float = -INF

        for m in self.moves(board):
            score = self._recurse(self.depth - 1, board, opponent(self.me), m, stats)
            if best_move is None or _better(score, best_score, True, ROOT_TIE_BREAK):
                best_move = m
                best_score = score

        elapsed_ms = max(1, int((time.perf_counter() - start) * 1000))
        info = {
            "depth": self.depth,
            "nodes": stats.nodes,
            "leaves": stats.leaves,
            "eval": best_score if best_move is not None else None,
            "move": best_move,
            "time_ms": elapsed_ms,
        }
        self.last_info = info
        log.debug("%s (%s) chose %s score=%s nodes=%d in %dms",
                  self.name, self.me, best_move, info["eval"], stats.nodes, elapsed_ms)
        return best_move

    def _recurse(
        self,
        depth: int,
        board: Board,
        to_reply: Player,
        move: Location,
        stats: Optional[SearchStats] = None,
    ) -> float:
        """
        Score of `move` played by `to_reply`'s opponent on `board`, looking
        `depth` further plies ahead with `to_reply` moving next.
        """
        if stats is None:
            stats = SearchStats()
        stats.nodes += 1
        maximize = to_reply == self.me

        result = board.try_update(opponent(to_reply), move)
        if result.status is MoveStatus.ALREADY_DECIDED:
            stats.leaves += 1
            return INF if maximize else -INF
        if result.status is MoveStatus.BOARD_FULL:
            stats.leaves += 1
            return 0
        with_move = result.unwrap()

        if depth == 0:
            stats.leaves += 1
            return self.estimate(with_move)

        candidates = list(self.moves(with_move))
        if not candidates:
            stats.leaves += 1
            return 0

        acc: float = -INF if maximize else INF
        for c in candidates:
            s = self._recurse(depth - 1, with_move, opponent(to_reply), c, stats)
            if _better(s, acc, maximize, INNER_TIE_BREAK):
                acc = s
        return acc
