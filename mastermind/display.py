"""
Terminal rendering. Everything that writes escape codes or clears the
screen lives here; the engine and the session never import this module.
"""

import logging
import os
import subprocess
from typing import Dict, Iterable, List, Sequence

from .schemas import GuessRecord
from .types import Color, Hint

logger = logging.getLogger(__name__)

RESET = "\x1b[0m"
PEG = "⬤"
EMPTY_PEG = "◯"
UNPLAYED = "･"

# ANSI foreground codes per color
ANSI_CODES: Dict[Color, str] = {
    Color.GREEN: "32",
    Color.RED: "31",
    Color.BROWN: "38;2;210;105;30",
    Color.YELLOW: "93",
    Color.BLACK: "90",
    Color.WHITE: "37",
    Color.ORANGE: "33",
    Color.BLUE: "94",
}

HINT_GLYPHS: Dict[Hint, str] = {
    Hint.EXACT_MATCH: "●",
    Hint.COLOR_MATCH: "○",
}


def render_peg(color: Color, use_color: bool = True) -> str:
    if color is Color.NONE:
        return EMPTY_PEG
    if not use_color:
        return PEG
    return f"\x1b[{ANSI_CODES[color]}m{PEG}{RESET}"


def render_code(code: Iterable[Color], use_color: bool = True) -> str:
    return "".join(render_peg(c, use_color) for c in code)


def render_hints(hints: Sequence[Hint]) -> str:
    # Hints arrive exact-first from the engine
    return "".join(HINT_GLYPHS[h] for h in hints)


def render_unplayed_rows(attempts: int, max_attempts: int, length: int) -> List[str]:
    return [f"{row + 1:2}: {UNPLAYED * length}" for row in range(attempts, max_attempts)]


def render_board(
    history: Sequence[GuessRecord], max_attempts: int, length: int, use_color: bool = True
) -> List[str]:
    lines = [
        f"{record.attempt:2}: {render_code(record.guess, use_color)}  {render_hints(record.hints)}".rstrip()
        for record in history
    ]
    lines.extend(render_unplayed_rows(len(history), max_attempts, length))
    return lines


def clear_screen() -> None:
    command = ["cmd", "/C", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError as exc:
        logger.warning("Could not clear the screen: %s", exc)
