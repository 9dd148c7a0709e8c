from __future__ import annotations

from functools import partial
from pathlib import Path
import time
from typing import Callable, Dict, List

import pandas as pd

from gomoku.ai.base import Agent
from gomoku.ai.candidates import all_empty_cells
from gomoku.ai.dumb_agent import DumbAgent
from gomoku.ai.minimax_agent import MinimaxAgent
from gomoku.ai.smart_agent import smart_agent
from gomoku.config import MINIMAX_DEPTH
from gomoku.core.scoring import evaluate
from gomoku.game.controller import run_game
from gomoku.types import Player

AgentFactory = Callable[[Player, int], Agent]

ROSTER: Dict[str, AgentFactory] = {
    "dumb": lambda me, depth: DumbAgent(me),
    "smart": lambda me, depth: smart_agent(me, depth=depth, name=f"Smart d{depth}"),
    "wide": lambda me, depth: MinimaxAgent(
        me=me,
        depth=depth,
        moves=all_empty_cells,
        estimate=partial(evaluate, player=me),
        name=f"Wide d{depth}",
    ),
}

RESULT_COLS = [
    "game", "x", "o", "result", "winner_name", "moves",
    "x_time_ms", "o_time_ms", "x_nodes", "o_nodes",
]


def make_agent(kind: str, me: Player, depth: int = MINIMAX_DEPTH) -> Agent:
    try:
        factory = ROSTER[kind]
    except KeyError:
        raise ValueError(f"Unknown agent {kind!r}. Choose from: {', '.join(sorted(ROSTER))}") from None
    return factory(me, depth)


def play_match(
    first: str,
    second: str,
    games: int = 2,
    depth: int = MINIMAX_DEPTH,
    swap_sides: bool = True,
    show: bool = False,
) -> pd.DataFrame:
    """
    Play `games` games between two roster agents. With `swap_sides` the agents
    alternate who plays X. One row per game.
    """
    rows: List[dict] = []
    for i in range(games):
        swapped = swap_sides and i % 2 == 1
        first_side, second_side = ("O", "X") if swapped else ("X", "O")
        first_agent = make_agent(first, first_side, depth)
        second_agent = make_agent(second, second_side, depth)
        # A mirror match needs two names or the summary folds both sides together
        if first_agent.name == second_agent.name:
            first_agent.name = f"{first_agent.name} #1"
            second_agent.name = f"{second_agent.name} #2"
        agent_x, agent_o = (second_agent, first_agent) if swapped else (first_agent, second_agent)

        rec = run_game(agent_x, agent_o, show=show)
        winner_name = {"X": rec.x_name, "O": rec.o_name}.get(rec.result, "")
        rows.append({
            "game": i + 1,
            "x": rec.x_name,
            "o": rec.o_name,
            "result": rec.result,
            "winner_name": winner_name,
            "moves": len(rec.moves),
            "x_time_ms": rec.time_ms["X"],
            "o_time_ms": rec.time_ms["O"],
            "x_nodes": rec.nodes["X"],
            "o_nodes": rec.nodes["O"],
        })

    return pd.DataFrame(rows, columns=RESULT_COLS)


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Wins, draws and losses per agent name across both sides."""
    names = sorted(set(df["x"]) | set(df["o"]))
    out = []
    for name in names:
        played = df[(df["x"] == name) | (df["o"] == name)]
        wins = int((played["winner_name"] == name).sum())
        draws = int((played["result"] == "draw").sum())
        decided = played["result"].isin(["X", "O"])
        losses = int((decided & (played["winner_name"] != name)).sum())
        out.append({
            "name": name,
            "games": len(played),
            "wins": wins,
            "draws": draws,
            "losses": losses,
            "abandoned": int((played["result"] == "abandoned").sum()),
        })
    return pd.DataFrame(out).sort_values(["wins", "draws"], ascending=False).reset_index(drop=True)


def export_csv(df: pd.DataFrame, results_dir: Path) -> Path:
    results_dir.mkdir(parents=True, exist_ok=True)
    stamp = time.strftime("%Y%m%d_%H%M%S")
    path = results_dir / f"match_results_{stamp}.csv"
    df.to_csv(path, index=False)
    return path
