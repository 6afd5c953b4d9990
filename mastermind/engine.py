"""
Pure game logic (no terminal, no randomness).
For each guess we compute a list of hints:
- EXACT_MATCH: the color is right and sits in the right position
- COLOR_MATCH: the color is in the secret, but at another position that
  was not already used by a different hint

Each secret position can back at most one hint, so a guess full of one
color never earns more hints than the secret has pegs of that color.

This module also holds the guess parsers: they turn player text into colors
and raise a typed error instead of crashing on bad input.
"""

from typing import List, Sequence, Tuple, Union

from .types import Code, Color, Hint


class GuessParseError(ValueError):
    """Base class for anything that makes a raw guess unusable."""


class ColorParseError(GuessParseError):
    def __init__(self, token: str):
        self.token = token
        allowed = ", ".join(c.value for c in Color)
        super().__init__(f"Unknown color '{token}'. Allowed: {allowed}.")


class GuessLengthError(GuessParseError):
    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"Guess must have exactly {expected} colors, but got {got}.")


_HINT_ORDER = {Hint.EXACT_MATCH: 0, Hint.COLOR_MATCH: 1}


def score(guess: Sequence[Color], secret: Sequence[Color]) -> List[Hint]:
    """
    Example:
      secret = [RED, RED, BLUE, GREEN, NONE]
      guess  = [RED, BLUE, BLUE, BLUE, BLUE]
      position 0 and position 2 are exact matches, the secret has no Blue
      left to give, so the result is [EXACT_MATCH, EXACT_MATCH].
    """

    # 0. Validate lengths match
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")

    hints: List[Hint] = []
    consumed = [False] * n

    # 1. Exact matches claim their secret position first
    i = 0
    while i < n:
        if guess[i] == secret[i]:
            hints.append(Hint.EXACT_MATCH)
            consumed[i] = True
        i += 1

    # 2. Color-only matches, each taking the first secret position still free
    i = 0
    while i < n:
        if guess[i] != secret[i]:
            j = 0
            while j < n:
                if not consumed[j] and secret[j] == guess[i]:
                    hints.append(Hint.COLOR_MATCH)
                    consumed[j] = True
                    break
                j += 1
        i += 1

    # 3. Exact before color, for stable display
    hints.sort(key=_HINT_ORDER.__getitem__)
    return hints


def count_hints(hints: Sequence[Hint]) -> Tuple[int, int]:
    """Returns (exact, color)."""
    exact = sum(1 for h in hints if h is Hint.EXACT_MATCH)
    return (exact, len(hints) - exact)


def is_win(guess: Sequence[Color], secret: Sequence[Color]) -> bool:
    """
    Win = all colors match in order, for all positions.
    Works for any length, as long as lengths match.
    """
    if len(secret) == 0:
        return False
    return tuple(guess) == tuple(secret)


def parse_color(token: Union[str, Color]) -> Color:
    if isinstance(token, Color):
        return token
    text = str(token).strip().lower()
    try:
        return Color(text)
    except ValueError:
        raise ColorParseError(str(token)) from None


def parse_guess(raw: Union[str, Sequence[Union[str, Color]]], length: int) -> Code:
    """
    Accepts "red blue none green black" or an already split sequence.
    Unknown colors are reported before a wrong count, so the player
    sees the typo first.
    """
    tokens = raw.split() if isinstance(raw, str) else list(raw)

    guess = [parse_color(token) for token in tokens]

    if len(guess) != length:
        raise GuessLengthError(length, len(guess))
    return guess
