'''
Terminal Mastermind

Run:
  mastermind                      -> play with settings from env / .env
  mastermind --length 4 --max-attempts 10
  mastermind --random-source random.org --no-color

Type the colors of your guess separated by spaces, e.g.
  >red brown yellow green black
Type 'quit' or 'exit' (or press Ctrl+D) to leave.
'''

import argparse
import logging
import sys
import time
from typing import Callable, List, Optional

from .config import load_settings
from .display import clear_screen, render_board, render_code, render_hints, render_unplayed_rows
from .random_client import SOURCES, make_draw
from .schemas import GameOver, InvalidGuess, Victory
from .session import Session
from .types import COLORS

QUIT_WORDS = ("quit", "exit", "q")
WELCOME_PAUSE_SECONDS = 0.75


def _noop() -> None:
    pass


def _print_instructions(length: int) -> None:
    names = ", ".join(c.value.capitalize() for c in COLORS)
    example = " ".join(COLORS[i % len(COLORS)].value.capitalize() for i in range(length))
    print(f"The colors are: {names}")
    print("You guess by writing the colors you want to guess separated by spaces.")
    print(f"A guess of {length} colors would look like:")
    print(f">{example}")


def _read_line(prompt: str) -> Optional[str]:
    # None means the player closed the input or hit Ctrl+C
    try:
        return input(prompt)
    except (EOFError, KeyboardInterrupt):
        return None


def play(session: Session, use_color: bool = True, clear: Callable[[], None] = clear_screen) -> None:
    """
    Drive one session from the terminal until it ends or the player leaves.
    """
    for line in render_unplayed_rows(session.attempts, session.max_attempts, session.length):
        print(line)
    _print_instructions(session.length)

    while not session.is_terminal:
        print()
        print(f"You have {session.attempts_left} tries remaining. Try and guess.")
        raw = _read_line(">")
        if raw is None:
            print("\nExiting.")
            return
        raw = raw.strip().lower()
        if raw in QUIT_WORDS:
            print("Thanks for playing!")
            return

        result = session.submit(raw)
        if isinstance(result, InvalidGuess):
            print("Sorry, your guess was not valid. Please try again.")
            print(f"  {result.reason}")
            continue

        record = result.record
        print(f"You guessed: {render_code(record.guess, use_color)}  {render_hints(record.hints)}")

        if isinstance(result, Victory):
            print(f"Which is correct! Congratulations, you cracked the code in {result.attempts} tries!")
            return
        print("Unfortunately that is not correct.")

        if isinstance(result, GameOver):
            print(f"No more tries left. The secret code was: {render_code(result.secret, use_color)}")
            return

        if _read_line("Press enter to continue...") is None:
            print("\nExiting.")
            return
        clear()
        for line in render_board(session.history, session.max_attempts, session.length, use_color):
            print(line)


def build_parser(defaults) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="mastermind", description="Play Mastermind in the terminal.")
    ap.add_argument("--length", type=int, default=defaults.code_length, help="Pegs per code")
    ap.add_argument("--max-attempts", type=int, default=defaults.max_attempts, help="Guesses allowed")
    ap.add_argument(
        "--random-source",
        choices=SOURCES,
        default=defaults.random_source,
        help="Where the secret code comes from",
    )
    ap.add_argument("--no-color", action="store_true", help="Plain pegs, no ANSI colors")
    ap.add_argument("--no-clear", action="store_true", help="Never clear the screen")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.length <= 0 or args.max_attempts <= 0:
        print("--length and --max-attempts must be positive.", file=sys.stderr)
        return 2

    clear = _noop if args.no_clear else clear_screen

    session = Session(
        draw=make_draw(args.random_source),
        length=args.length,
        max_attempts=args.max_attempts,
    )

    print("Welcome to Mastermind! Let us get started.")
    time.sleep(WELCOME_PAUSE_SECONDS)
    clear()

    play(session, use_color=not args.no_color, clear=clear)
    return 0


if __name__ == "__main__":
    sys.exit(main())
