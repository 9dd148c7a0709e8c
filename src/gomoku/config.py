# src/gomoku/config.py

from __future__ import annotations

SIZE = 9
WIN_LENGTH = 5

# Stand-in for an unbounded score (certain win / certain loss)
INF = 100_000_000

# UI toggles
USE_COLOR = True

# AI defaults
MINIMAX_DEPTH = 2
NEIGHBOUR_RADIUS = 1

# Match runner defaults
MATCH_GAMES = 2
RESULTS_DIR = "data/results"
