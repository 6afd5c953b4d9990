"""
One game of Mastermind, held in memory.

A Session owns the secret, the attempt counter and the guess history.
The only way to change it is submit(); every call returns one of the
SubmissionResult variants from schemas.py.
"""

import logging
from typing import List, Optional, Sequence, Tuple, Union

from .engine import GuessParseError, is_win, parse_guess, score
from .random_client import Draw, local_code
from .schemas import GameOver, GuessRecord, InProgress, InvalidGuess, SubmissionResult, Victory
from .types import Code, Color, SessionState

logger = logging.getLogger(__name__)

RawGuess = Union[str, Sequence[Union[str, Color]]]


class SessionTerminated(RuntimeError):
    """submit() was called after the game already ended."""


class Session:
    def __init__(self, draw: Draw = local_code, length: int = 5, max_attempts: int = 12) -> None:
        if length <= 0:
            raise ValueError("Code length must be positive.")
        if max_attempts <= 0:
            raise ValueError("Max attempts must be positive.")

        # One draw per session, never repeated
        secret = list(draw(length))
        if len(secret) != length or not all(isinstance(c, Color) for c in secret):
            raise ValueError(f"Draw source must return exactly {length} colors.")

        self._secret: Tuple[Color, ...] = tuple(secret)
        self._max_attempts = max_attempts
        self._attempts = 0
        self._history: List[GuessRecord] = []
        self._state = SessionState.AWAITING_GUESS

    @classmethod
    def with_secret(cls, secret: Code, max_attempts: int = 12) -> "Session":
        """Build a session around a known code instead of a random one."""
        return cls(draw=lambda length: list(secret), length=len(secret), max_attempts=max_attempts)

    # --- Read-only view ---

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def attempts_left(self) -> int:
        return self._max_attempts - self._attempts

    @property
    def length(self) -> int:
        return len(self._secret)

    @property
    def history(self) -> Tuple[GuessRecord, ...]:
        return tuple(self._history)

    @property
    def is_terminal(self) -> bool:
        return self._state is not SessionState.AWAITING_GUESS

    def reveal_secret(self) -> Optional[Code]:
        """Return the secret code ONLY for finished games; else None."""
        if self.is_terminal:
            return list(self._secret)
        return None

    # --- The one mutating operation ---

    def submit(self, raw_guess: RawGuess) -> SubmissionResult:
        if self.is_terminal:
            raise SessionTerminated(f"Game is already {self._state.value}. No more guesses allowed.")

        try:
            guess = parse_guess(raw_guess, self.length)
        except GuessParseError as exc:
            logger.info("Rejected guess %r: %s", raw_guess, exc)
            return InvalidGuess(reason=str(exc), attempts_left=self.attempts_left)

        self._attempts += 1
        record = GuessRecord(
            attempt=self._attempts,
            guess=guess,
            hints=score(guess, list(self._secret)),
        )
        self._history.append(record)
        logger.debug(
            "Attempt %d/%d: %d exact, %d color",
            self._attempts, self._max_attempts, record.exact, record.color,
        )

        if is_win(guess, self._secret):
            self._state = SessionState.WON
            logger.debug("Code cracked on attempt %d", self._attempts)
            return Victory(attempts=self._attempts, record=record)

        if self._attempts == self._max_attempts:
            self._state = SessionState.EXHAUSTED
            logger.debug("No attempts left after %d guesses", self._attempts)
            return GameOver(attempts=self._attempts, record=record, secret=list(self._secret))

        return InProgress(record=record, attempts_left=self.attempts_left)
