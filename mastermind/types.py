"""
Labels for clarity.
"""

from enum import Enum
from typing import List


class Color(str, Enum):
    # Declaration order doubles as the internal draw order (index 0..8)
    RED = "red"
    BROWN = "brown"
    YELLOW = "yellow"
    GREEN = "green"
    BLACK = "black"
    WHITE = "white"
    ORANGE = "orange"
    BLUE = "blue"
    NONE = "none"  # wildcard: no peg placed


class Hint(str, Enum):
    EXACT_MATCH = "exact"  # right color, right place
    COLOR_MATCH = "color"  # right color, somewhere else


class SessionState(str, Enum):
    AWAITING_GUESS = "awaiting_guess"
    WON = "won"
    EXHAUSTED = "exhausted"


COLORS: List[Color] = list(Color)
Code = List[Color]  # 5 colors by default
