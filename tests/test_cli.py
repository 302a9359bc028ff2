"""Tests for the interactive CLI helpers."""

import pytest

from othello_ai.cli.play_human_vs_agent import play_human_vs_agent, read_coordinate


def _feed(monkeypatch, answers):
    """Replace ``input`` with a scripted sequence; exceptions are raised."""
    answers = iter(answers)

    def fake_input(prompt=""):
        answer = next(answers)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    monkeypatch.setattr("builtins.input", fake_input)


def test_read_coordinate_retries_until_two_numbers(monkeypatch, capsys):
    _feed(monkeypatch, ["bad", "2 x", "2,3"])
    assert read_coordinate() == (2, 3)
    out = capsys.readouterr().out
    assert "Please enter two numbers" in out
    assert "Please enter valid numbers" in out


@pytest.mark.parametrize("error", [EOFError(), KeyboardInterrupt()])
def test_read_coordinate_returns_none_when_input_ends(monkeypatch, error):
    _feed(monkeypatch, ["bad", error])
    assert read_coordinate() is None


def test_game_stops_cleanly_on_eof(monkeypatch, capsys):
    # the human plays Black by default and moves first
    _feed(monkeypatch, [EOFError()])
    play_human_vs_agent(agent_type="random")
    out = capsys.readouterr().out
    assert "Your turn!" in out
    assert "Game aborted." in out
    assert "Game over!" not in out
