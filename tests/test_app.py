# tests/test_app.py
import pytest
from unittest.mock import patch

from leitner_tutor.app import (
    SessionExitRequested, cmd_add, cmd_hint, cmd_history, cmd_next, cmd_practice, cmd_progress,
    main, run_practice_session, session_prompt,
)
from leitner_tutor.models import AnswerDifficulty


def test_session_prompt_raises_on_q():
    with patch("leitner_tutor.app.Prompt.ask", return_value="q"):
        with pytest.raises(SessionExitRequested):
            session_prompt("test prompt")


def test_session_prompt_raises_on_menu():
    with patch("leitner_tutor.app.Prompt.ask", return_value="menu"):
        with pytest.raises(SessionExitRequested):
            session_prompt("test prompt")


def test_session_prompt_returns_normal_input():
    with patch("leitner_tutor.app.Prompt.ask", return_value="hello"):
        assert session_prompt("test prompt") == "hello"


def test_run_practice_session_rates_every_due_card(state, cards):
    # Cards come sorted by front: "H2O is?", "Largest planet?", "What is 2 + 2?"
    with patch("leitner_tutor.app.Prompt.ask", side_effect=["", "e", "", "h", "", "w"]):
        rated = run_practice_session(state)
    assert rated == 3
    assert state.find_card_bucket(cards[2]) == 2
    assert state.find_card_bucket(cards[1]) == 1
    assert state.find_card_bucket(cards[0]) == 0
    assert len(state.get_history()) == 3


def test_run_practice_session_exits_on_q(state, cards):
    """First card is rated, then 'q' on the second reveal keeps the first answer."""
    with patch("leitner_tutor.app.Prompt.ask", side_effect=["", "e", "q"]):
        with pytest.raises(SessionExitRequested):
            run_practice_session(state)
    history = state.get_history()
    assert len(history) == 1
    assert history[0].card_front == cards[2].front
    assert history[0].difficulty is AnswerDifficulty.EASY


def test_cmd_practice_swallows_exit(state):
    with patch("leitner_tutor.app.Prompt.ask", return_value="q"):
        cmd_practice(state)
    assert state.get_history() == []


def test_run_practice_session_nothing_due(state, cards):
    state.set_buckets({1: set(cards)})
    state.increment_day()
    with patch("leitner_tutor.app.Prompt.ask") as ask:
        assert run_practice_session(state) == 0
    ask.assert_not_called()


def test_cmd_add_creates_card(state):
    with patch("leitner_tutor.app.Prompt.ask", side_effect=["Capital of Peru?", "Lima", "", "capitals, south america"]):
        cmd_add(state)
    card = state.find_card("Capital of Peru?", "Lima")
    assert card is not None
    assert card.tags == ("capitals", "south america")
    assert state.find_card_bucket(card) == 0


def test_cmd_hint_prints_hint(state, cards, capsys):
    with patch("leitner_tutor.app.Prompt.ask", side_effect=[cards[0].front, cards[0].back]):
        cmd_hint(state)
    assert "Even number" in capsys.readouterr().out


def test_cmd_progress_and_history_render(state, cards, capsys):
    with patch("leitner_tutor.app.Prompt.ask", side_effect=["", "e", "", "e", "", "e"]):
        run_practice_session(state)
    cmd_progress(state, learning_threshold=2)
    cmd_history(state)
    out = capsys.readouterr().out
    assert "100.0%" in out
    assert "Cards by Bucket" in out
    assert "Recent Reviews" in out


def test_cmd_next_advances_day(state):
    cmd_next(state)
    assert state.get_current_day() == 1


def test_main_reports_errors_and_quits(monkeypatch, capsys):
    monkeypatch.setenv("LEITNER_SEED", "1")
    answers = ["hint", "Unknown?", "Nobody", "next", "quit"]
    with patch("leitner_tutor.app.Prompt.ask", side_effect=answers), \
            patch("leitner_tutor.app.setup_logging"):
        main()
    out = capsys.readouterr().out
    assert "Card not found" in out
    assert "Advanced to day 1" in out


def test_run_practice_session_exits_on_menu_at_rating(state):
    with patch("leitner_tutor.app.Prompt.ask", side_effect=["", "menu"]) as ask:
        with pytest.raises(SessionExitRequested):
            run_practice_session(state)
    assert "menu" in ask.call_args.kwargs["choices"]
    assert "q" in ask.call_args.kwargs["choices"]
    assert state.get_history() == []
