from __future__ import annotations
from typing import Dict

from gomoku.config import USE_COLOR

RESET = "\033[0m"

# ANSI code per thing drawn on screen
PALETTE: Dict[str, str] = {
    "title": "\033[1m",
    "status": "\033[36m",
    "index": "\033[2m",
    "empty": "\033[90m",
    "X": "\033[31m",
    "O": "\033[33m",
    "highlight": "\033[7m",
}


def paint(s: str, role: str, enabled: bool = USE_COLOR) -> str:
    if not enabled:
        return s
    return f"{PALETTE[role]}{s}{RESET}"
