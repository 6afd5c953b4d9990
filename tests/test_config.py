"""
Testing settings loaded from the environment.
"""

import pytest

from mastermind.config import Settings, load_settings


def test_defaults():
    assert load_settings() == Settings(
        code_length=5, max_attempts=12, random_source="local", log_level="WARNING"
    )


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MASTERMIND_CODE_LENGTH", "4")
    monkeypatch.setenv("MASTERMIND_MAX_ATTEMPTS", "10")
    monkeypatch.setenv("MASTERMIND_RANDOM_SOURCE", " Random.org ")
    monkeypatch.setenv("MASTERMIND_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.code_length == 4
    assert settings.max_attempts == 10
    assert settings.random_source == "random.org"
    assert settings.log_level == "DEBUG"


def test_blank_value_uses_default(monkeypatch):
    monkeypatch.setenv("MASTERMIND_CODE_LENGTH", "")

    assert load_settings().code_length == 5


@pytest.mark.parametrize(
    "name,value",
    [
        ("MASTERMIND_CODE_LENGTH", "five"),
        ("MASTERMIND_CODE_LENGTH", "0"),
        ("MASTERMIND_MAX_ATTEMPTS", "-3"),
        ("MASTERMIND_RANDOM_SOURCE", "dice"),
        ("MASTERMIND_LOG_LEVEL", "LOUD"),
    ],
)
def test_bad_values_fail_at_load(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(RuntimeError) as exc_info:
        load_settings()

    assert name in str(exc_info.value)
