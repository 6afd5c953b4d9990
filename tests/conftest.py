"""
- Keep tests away from the player's real environment: no MASTERMIND_* env vars
  and no .env file get picked up.
- Provide small helpers for known secrets so outcomes are predictable.
"""
import pytest

import mastermind.config as config
from mastermind.types import Color


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """
    Settings come from the environment; wipe ours before each test and
    stop load_dotenv() from reading a developer's local .env.
    """
    for name in (
        "MASTERMIND_CODE_LENGTH",
        "MASTERMIND_MAX_ATTEMPTS",
        "MASTERMIND_RANDOM_SOURCE",
        "MASTERMIND_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    yield


@pytest.fixture
def secret():
    return [Color.RED, Color.BROWN, Color.YELLOW, Color.GREEN, Color.BLACK]


@pytest.fixture
def fixed_draw(secret):
    """
    A draw source that ignores randomness and always hands back `secret`.
    Records every length it was asked for.
    """
    calls = []

    def draw(length: int):
        calls.append(length)
        return list(secret)

    draw.calls = calls
    return draw
