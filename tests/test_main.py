"""
Testing the terminal game end to end
- Trick: replace make_draw so the secret is predictable and feed the
  player's lines through a fake input().
- Tool: pytest's "monkeypatch" for the patches, "capsys" to read the output.
"""

import pytest

import mastermind.main as app_main
from mastermind.session import Session
from mastermind.types import Color

SECRET = [Color.RED, Color.BROWN, Color.YELLOW, Color.GREEN, Color.BLACK]


def make_fake_draw():
    """Ignores randomness and always draws SECRET (trimmed/padded to length)."""
    def fake_draw(length: int):
        return [SECRET[i % len(SECRET)] for i in range(length)]
    return fake_draw


def feed_input(monkeypatch, lines):
    """Answer input() with `lines`, then behave like a closed stdin."""
    remaining = list(lines)
    prompts = []

    def fake_input(prompt=""):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)
    return prompts


@pytest.fixture(autouse=True)
def _fast_and_fixed(monkeypatch):
    monkeypatch.setattr(app_main, "make_draw", lambda source: make_fake_draw())
    monkeypatch.setattr(app_main.time, "sleep", lambda seconds: None)


def test_win_after_an_invalid_and_a_wrong_guess(monkeypatch, capsys):
    feed_input(
        monkeypatch,
        [
            "red brown purple green black",   # invalid, free retry
            "Red Brown Yellow Green Blue",    # wrong
            "",                               # press enter
            "red brown yellow green black",   # win
        ],
    )

    code = app_main.main(["--no-clear", "--no-color"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Welcome to Mastermind!" in out
    assert "Sorry, your guess was not valid." in out
    assert "Unfortunately that is not correct." in out
    # The invalid guess did not count: the win is on try 2
    assert "cracked the code in 2 tries" in out


def test_loss_reveals_the_secret(monkeypatch, capsys):
    feed_input(monkeypatch, ["blue blue blue", "", "none none none"])

    code = app_main.main(["--no-clear", "--no-color", "--length", "3", "--max-attempts", "2"])

    out = capsys.readouterr().out
    assert code == 0
    assert "You have 2 tries remaining." in out
    assert "You have 1 tries remaining." in out
    assert "No more tries left. The secret code was: ⬤⬤⬤" in out


def test_quit_word_ends_the_game(monkeypatch, capsys):
    feed_input(monkeypatch, ["quit"])

    assert app_main.main(["--no-clear"]) == 0
    assert "Thanks for playing!" in capsys.readouterr().out


def test_closed_input_ends_the_game(monkeypatch, capsys):
    feed_input(monkeypatch, [])

    assert app_main.main(["--no-clear"]) == 0
    assert "Exiting." in capsys.readouterr().out


def test_defaults_come_from_settings(monkeypatch, capsys):
    monkeypatch.setenv("MASTERMIND_MAX_ATTEMPTS", "4")
    monkeypatch.setenv("MASTERMIND_CODE_LENGTH", "3")
    feed_input(monkeypatch, [])

    app_main.main(["--no-clear"])

    out = capsys.readouterr().out
    assert " 4: ･･･" in out
    assert "You have 4 tries remaining." in out


def test_non_positive_options_are_rejected(monkeypatch, capsys):
    feed_input(monkeypatch, [])

    assert app_main.main(["--max-attempts", "0"]) == 2
    assert "must be positive" in capsys.readouterr().err


def test_play_redraws_board_between_guesses(monkeypatch, capsys):
    cleared = []
    feed_input(monkeypatch, ["none none", "", "red brown"])
    session = Session.with_secret([Color.RED, Color.BROWN], max_attempts=5)

    app_main.play(session, use_color=False, clear=lambda: cleared.append(True))

    out = capsys.readouterr().out
    assert cleared == [True]
    assert " 1: ◯◯" in out
    assert "cracked the code in 2 tries" in out
