from __future__ import annotations

from dataclasses import dataclass, field
import logging
import time
from typing import List, Optional, Tuple

from gomoku.ai.base import Agent
from gomoku.core.board import Board, Drawn, Won
from gomoku.core.rules import check_winner_with_line
from gomoku.game.state import GameState
from gomoku.types import Location, Player
from gomoku.ui.render import render

log = logging.getLogger(__name__)

Coord = Tuple[int, int]


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


@dataclass(slots=True)
class GameRecord:
    x_name: str
    o_name: str
    result: str = "abandoned"  # "X" | "O" | "draw" | "abandoned"
    moves: List[Location] = field(default_factory=list)
    time_ms: dict = field(default_factory=lambda: {"X": 0, "O": 0})
    nodes: dict = field(default_factory=lambda: {"X": 0, "O": 0})
    winning_line: Optional[List[Coord]] = None
    board: Board = field(default_factory=Board)

    @property
    def winner(self) -> Optional[Player]:
        return self.result if self.result in ("X", "O") else None  # type: ignore[return-value]


def run_game(agent_x: Agent, agent_o: Agent, board: Optional[Board] = None, show: bool = False) -> GameRecord:
    """
    Alternate the two agents from X until the board is won or drawn. An agent
    that returns no move on an unfinished board abandons the game.
    """
    state = GameState(board=board or Board(), current="X", last_status="Player X starts.")
    record = GameRecord(_agent_name(agent_x, "Player X"), _agent_name(agent_o, "Player O"))

    while True:
        if show:
            print(render(state.board, f"X: {record.x_name} | O: {record.o_name} | {state.last_status}"))

        outcome = state.board.state
        if isinstance(outcome, Won):
            line = check_winner_with_line(state.board.grid)
            record.result = outcome.winner
            record.winning_line = line[1] if line else None
            break
        if isinstance(outcome, Drawn):
            record.result = "draw"
            break

        current_agent = agent_x if state.current == "X" else agent_o
        start = time.perf_counter()
        move = current_agent.choose_move(state)
        record.time_ms[state.current] += int((time.perf_counter() - start) * 1000)

        info = getattr(current_agent, "last_info", None)
        if info:
            record.nodes[state.current] += int(info.get("nodes", 0))

        if move is None:
            log.info("%s had no move on an unfinished board", _agent_name(current_agent, state.current))
            break

        mover = state.current
        state.submit(mover, move)
        record.moves.append(move)
        state.last_status = f"Player {mover} chose {move} | Next: Player {state.current}"

    record.board = state.board
    if show:
        print(render(state.board, f"Result: {record.result}", highlight=record.winning_line))
    log.info("%s vs %s -> %s after %d moves", record.x_name, record.o_name, record.result, len(record.moves))
    return record
