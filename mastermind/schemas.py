"""
Explicit validation & Pydantic models
- GuessRecord is what the session keeps in its history (one per counted guess).
- The SubmissionResult variants are what Session.submit() hands back to the
  caller; `kind` tells them apart.
"""

from typing import List, Literal, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .engine import count_hints
from .types import Color, Hint


# 1. One counted guess and the feedback it earned
class GuessRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    attempt: int = Field(..., ge=1, description="1-based attempt number this guess was counted as")
    # Tuples, so a record handed to a caller cannot be edited in place
    guess: Tuple[Color, ...] = Field(..., description="The player's guess")
    hints: Tuple[Hint, ...] = Field(..., description="Hints, exact matches first")

    @field_validator("hints")
    @classmethod
    def validate_hint_count(cls, hints: Tuple[Hint, ...], info: ValidationInfo) -> Tuple[Hint, ...]:
        """
        A guess can never earn more hints than it has pegs.
        """
        guess = info.data.get("guess")
        if guess is not None and len(hints) > len(guess):
            raise ValueError("More hints than pegs in the guess.")
        return hints

    @property
    def exact(self) -> int:
        return count_hints(self.hints)[0]

    @property
    def color(self) -> int:
        return count_hints(self.hints)[1]


# 2. Guess rejected; no attempt was used
class InvalidGuess(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["invalid_guess"] = "invalid_guess"
    reason: str = Field(..., description="Why the guess was rejected")
    attempts_left: int = Field(..., description="How many guesses remain (unchanged)")


# 3. Guess counted, game goes on
class InProgress(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["in_progress"] = "in_progress"
    record: GuessRecord = Field(..., description="The guess that was just counted")
    attempts_left: int = Field(..., description="How many guesses remain")

    @property
    def hints(self) -> Tuple[Hint, ...]:
        return self.record.hints


# 4. Guess matched the secret
class Victory(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["victory"] = "victory"
    attempts: int = Field(..., description="Attempt on which the code was cracked")
    record: GuessRecord = Field(..., description="The winning guess")


# 5. Last attempt used without a win
class GameOver(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["game_over"] = "game_over"
    attempts: int = Field(..., description="Attempts used (equals the maximum)")
    record: GuessRecord = Field(..., description="The final, losing guess")
    secret: Optional[List[Color]] = Field(None, description="The secret code, for the caller to reveal if it wants")


SubmissionResult = Union[InvalidGuess, InProgress, Victory, GameOver]
