"""
- HTTP call with clear fallback
Draw secret colors (indices 0..8, one per peg) either locally or from
random.org. If random.org goes wrong (no internet, timeout, bad response),
we fall back to a local secure random generator so the game still works.
"""

import logging
from secrets import randbelow
from typing import Callable, List

import requests

from .types import COLORS, Code

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"
SOURCES = ("local", "random.org")

Draw = Callable[[int], Code]


def local_code(length: int = 5) -> Code:
    # randbelow(9) gives us an index between 0 and 8
    return [COLORS[randbelow(len(COLORS))] for _ in range(length)]


def fetch_code(length: int = 5) -> Code:
    # Parameters to send to random.org
    params = {
        "num": length,               # one number per peg
        "min": 0,                    # smallest color index
        "max": len(COLORS) - 1,      # largest color index (the wildcard)
        "col": 1,                    # one number per line
        "base": 10,
        "format": "plain",
        "rnd": "new",
    }

    # keep network quick; if it takes too long, we will just fallback
    timeout_seconds = 3.0

    try:
        response = requests.get(RANDOM_URL, params=params, timeout=timeout_seconds)
        response.raise_for_status()

        # The body looks like:
        #   0\n3\n8\n2\n5\n
        indices = [int(line) for line in response.text.split() if line.strip()]

        if len(indices) != length:
            raise ValueError(f"random.org returned {len(indices)} values, expected {length}.")
        for index in indices:
            if index < 0 or index >= len(COLORS):
                raise ValueError(f"random.org number {index} out of range 0..{len(COLORS) - 1}.")

        return [COLORS[index] for index in indices]

    except (requests.RequestException, ValueError) as exc:
        logger.warning("random.org draw failed (%s); using local random instead", exc)
        return local_code(length)


def make_draw(source: str) -> Draw:
    if source == "local":
        return local_code
    if source == "random.org":
        return fetch_code
    raise ValueError(f"Unknown random source '{source}'. Choose one of: {', '.join(SOURCES)}.")
