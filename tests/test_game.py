"""Unit tests for rps_history.game"""
import random

from rps_history import game, rules
from rps_history.errors import GameError, InvalidChoice, PersistenceFailure
from rps_history.policy import FixedPolicy
from rps_history.rules import Outcome


def scripted(*lines):
    it = iter(lines)
    return lambda: next(it)


def quiet_session(rounds_to_win=3, computer="scissors", **kwargs):
    kwargs.setdefault("history_file", None)
    kwargs.setdefault("write", lambda msg: None)
    return game.create_game(
        rules.default_rules(), rounds_to_win, policy=FixedPolicy(computer), rng=random.Random(1), **kwargs
    )


def test_play_round_win():
    result = game.play_round(rules.default_rules(), "rock", "scissors")
    assert result.outcome is Outcome.PLAYER
    assert result.player_won


def test_play_round_is_case_insensitive():
    result = game.play_round(rules.default_rules(), "  Spock ", "ROCK")
    assert result == game.RoundResult("spock", "rock", Outcome.PLAYER)


def test_play_round_draw():
    result = game.play_round(rules.default_rules(), "lizard", "lizard")
    assert result.outcome is Outcome.DRAW
    assert not result.player_won


def test_play_round_invalid_move():
    try:
        game.play_round(rules.default_rules(), "fire", "rock")
        assert False, "Expected InvalidChoice for invalid move"
    except InvalidChoice as e:
        assert e.choice == "fire"


def test_play_round_invalid_computer_move():
    try:
        game.play_round(rules.default_rules(), "rock", "water")
        assert False, "Expected InvalidChoice for invalid move"
    except ValueError:
        pass


def test_rounds_to_win_must_be_positive():
    try:
        quiet_session(rounds_to_win=0)
        assert False, "Expected ValueError"
    except ValueError:
        pass


def test_new_session_awaits_first_round():
    session = quiet_session()
    assert session.state is game.State.AWAITING_ROUND
    assert session.player_score == 0
    assert session.computer_score == 0
    assert len(session.tracker) == 0


def test_invalid_move_changes_nothing():
    messages = []
    session = quiet_session(write=messages.append)
    session.start("Alice")
    assert session.submit("rock") is not None
    session.stick_or_twist("t")

    before = (session.player_score, session.computer_score, len(session.history), session.tracker.report())
    assert session.submit("dynamite") is None
    after = (session.player_score, session.computer_score, len(session.history), session.tracker.report())

    assert before == after
    assert session.state is game.State.AWAITING_ROUND
    assert messages[-1] == "Invalid choice. Please choose from the available options."


def test_submit_records_round():
    session = quiet_session(computer="paper")
    session.start("Alice")
    result = session.submit("Scissors")
    assert result.outcome is Outcome.PLAYER
    assert session.player_score == 1
    assert session.history.entries() == ("Alice wins this round!",)
    assert session.tracker.count("scissors") == 1
    assert session.state is game.State.ROUND_RESOLVED


def test_draw_scores_for_computer():
    session = quiet_session(computer="rock")
    session.start("Alice")
    session.submit("rock")
    assert session.computer_score == 1
    assert session.player_score == 0
    assert session.history.entries() == ("Computer wins this round.",)


def test_submit_after_game_over_is_rejected():
    session = quiet_session(rounds_to_win=1)
    session.start("Alice")
    session.submit("rock")
    assert session.is_over
    try:
        session.submit("rock")
        assert False, "Expected GameError"
    except GameError:
        pass


def test_stick_ends_game_early():
    session = quiet_session(rounds_to_win=3)
    session.start("Alice")
    session.submit("rock")
    assert session.stick_or_twist("S") is True
    assert session.is_over


def test_twist_continues():
    session = quiet_session(rounds_to_win=3)
    session.start("Alice")
    session.submit("rock")
    assert session.stick_or_twist("t") is False
    assert session.state is game.State.AWAITING_ROUND


def test_stick_or_twist_needs_a_resolved_round():
    session = quiet_session()
    session.start("Alice")
    try:
        session.stick_or_twist("s")
        assert False, "Expected GameError"
    except GameError:
        pass


def test_session_ends_within_round_limit():
    moves = random.Random(7)
    for rounds_to_win in (1, 2, 3, 5):
        for _ in range(20):
            session = game.create_game(
                rules.default_rules(), rounds_to_win, rng=random.Random(moves.random()),
                history_file=None, write=lambda msg: None,
            )
            session.start("Alice")
            while not session.is_over:
                session.submit(moves.choice(rules.DEFAULT_CHOICES))
                if not session.is_over:
                    session.stick_or_twist("t")
            assert session.rounds_played <= 2 * rounds_to_win - 1
            assert max(session.player_score, session.computer_score) == rounds_to_win


def test_end_to_end_player_wins(tmp_path):
    sink = tmp_path / "history.txt"
    messages = []
    session = quiet_session(
        rounds_to_win=1, computer="scissors", history_file=sink,
        read=scripted("Alice", "rock"), write=messages.append,
    )
    summary = session.play()

    assert summary.player_won
    assert summary.history == ("Alice wins this round!",)
    assert sink.read_text(encoding="utf-8").splitlines() == ["Alice wins this round!"]
    assert "\nCongratulations, Alice! You win the game!" in messages
    assert messages[-1] == "\nThanks for playing!"


def test_play_reprompts_after_invalid_move_and_handles_stick(tmp_path):
    sink = tmp_path / "history.txt"
    messages = []
    session = quiet_session(
        rounds_to_win=3, computer="rock", history_file=sink,
        read=scripted("Bob", "fire", "paper", "t", "Paper", "s"), write=messages.append,
    )
    summary = session.play()

    assert summary.player_score == 2
    assert summary.computer_score == 0
    assert summary.player_won
    assert summary.frequencies == [("paper", 2)]
    assert messages.count("Invalid choice. Please choose from the available options.") == 1
    assert "Choice: paper, Frequency: 2" in messages
    assert sink.read_text(encoding="utf-8") == "Bob wins this round!\nBob wins this round!"


def test_play_computer_wins_message():
    messages = []
    session = quiet_session(
        rounds_to_win=2, computer="paper", read=scripted("Carol", "rock", "t", "spock"), write=messages.append,
    )
    summary = session.play()
    assert not summary.player_won
    assert summary.computer_score == 2
    assert "\nComputer wins the game. Better luck next time!" in messages


def test_play_uses_given_name():
    session = quiet_session(rounds_to_win=1, read=scripted("rock"))
    summary = session.play("Dana")
    assert summary.player_name == "Dana"


def test_blank_name_falls_back():
    session = quiet_session(rounds_to_win=1, read=scripted("   ", "rock"))
    assert session.play().player_name == "Player"


def test_second_game_starts_with_empty_history(tmp_path):
    sink = tmp_path / "history.txt"
    session = quiet_session(rounds_to_win=1, computer="scissors", history_file=sink, read=scripted("rock", "paper"))
    first = session.play("Alice")
    second = session.play("Bob")

    assert first.history == ("Alice wins this round!",)
    assert second.history == ("Computer wins this round.",)
    assert second.frequencies == [("paper", 1)]
    assert sink.read_text(encoding="utf-8") == "Computer wins this round."


def test_failed_save_happens_after_the_report(tmp_path):
    messages = []
    session = quiet_session(
        rounds_to_win=1, computer="scissors", history_file=tmp_path / "missing" / "h.txt",
        read=scripted("rock"), write=messages.append,
    )
    try:
        session.play("Alice")
        assert False, "Expected PersistenceFailure"
    except PersistenceFailure:
        pass
    assert "\nCongratulations, Alice! You win the game!" in messages
    assert messages[-1] == "\nThanks for playing!"


def test_round_messages():
    messages = []
    session = quiet_session(computer="spock", write=messages.append)
    session.start("Alice")
    session.submit("rock")
    assert messages == ["Computer chose: spock", "Computer wins this round!", "Alice: 0 - Computer: 1"]
