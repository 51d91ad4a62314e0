"""Core game logic: resolving rounds and running a first-to-N session."""
from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, TextIO, Tuple, Union

from .errors import GameError, InvalidChoice
from .history import HistoryLog
from .policy import ChoicePolicy, RandomPolicy
from .rules import Outcome, Rules
from .tracker import FrequencyTracker

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_FILE = "game_history.txt"
COMPUTER_NAME = "Computer"


class State(Enum):
    AWAITING_ROUND = "awaiting_round"
    ROUND_RESOLVED = "round_resolved"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class RoundResult:
    player_choice: str
    computer_choice: str
    outcome: Outcome

    @property
    def player_won(self) -> bool:
        return self.outcome is Outcome.PLAYER


@dataclass(frozen=True)
class GameSummary:
    player_name: str
    player_score: int
    computer_score: int
    history: Tuple[str, ...] = ()
    frequencies: List[Tuple[str, int]] = field(default_factory=list)

    @property
    def player_won(self) -> bool:
        # A level score counts as a computer win.
        return self.player_score > self.computer_score


def play_round(rules: Rules, player_choice: str, computer_choice: str) -> RoundResult:
    """Resolve a single round.

    Both moves are matched case-insensitively. Raises InvalidChoice if either
    one is not part of ``rules``.
    """
    pm = player_choice.strip().lower()
    if not rules.is_valid(pm):
        raise InvalidChoice(player_choice, rules.choices())

    om = computer_choice.strip().lower()
    if not rules.is_valid(om):
        raise InvalidChoice(computer_choice, rules.choices())

    return RoundResult(pm, om, rules.resolve(pm, om))


class Session:
    """One game against the computer, played until a side reaches ``rounds_to_win``.

    Console access goes through ``read`` (returns one line) and ``write``
    (prints one message) so a game can be scripted. The computer's moves come
    from ``policy`` using ``rng``.
    """

    def __init__(
        self,
        rules: Rules,
        rounds_to_win: int = 3,
        *,
        policy: Optional[ChoicePolicy] = None,
        rng: Optional[random.Random] = None,
        history_file: Union[str, Path, TextIO, None] = DEFAULT_HISTORY_FILE,
        read: Optional[Callable[[], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ):
        if rounds_to_win < 1:
            raise ValueError(f"rounds_to_win must be at least 1, got {rounds_to_win}")
        self.rules = rules
        self.rounds_to_win = rounds_to_win
        self.policy = policy or RandomPolicy()
        self.rng = rng or random.Random()
        self.history_file = history_file
        self.read = read or input
        self.write = write or print

        self.tracker = FrequencyTracker()
        self.history = HistoryLog()
        self.player_name = "Player"
        self.player_score = 0
        self.computer_score = 0
        self.rounds_played = 0
        self.state = State.AWAITING_ROUND

    @property
    def is_over(self) -> bool:
        return self.state is State.GAME_OVER

    def _threshold_reached(self) -> bool:
        return self.player_score >= self.rounds_to_win or self.computer_score >= self.rounds_to_win

    def start(self, player_name: str) -> None:
        self.player_name = player_name.strip() or "Player"
        self.player_score = 0
        self.computer_score = 0
        self.rounds_played = 0
        self.tracker.reset()
        self.history.clear()
        self.state = State.AWAITING_ROUND
        logger.debug(f"Game started for {self.player_name!r} with rules {getattr(self.rules, 'name', self.rules)!r}")

    def prompt_choice(self) -> None:
        self.write(f"\n{self.player_name}, choose your weapon: ({', '.join(self.rules.choices())})")

    def submit(self, raw_choice: str) -> Optional[RoundResult]:
        """Play one round with the player's typed move.

        Returns None, with nothing changed, when the move is not valid.
        """
        if self.state is not State.AWAITING_ROUND:
            raise GameError(f"cannot play a round while {self.state.value}")

        choice = raw_choice.strip().lower()
        if not self.rules.is_valid(choice):
            self.write("Invalid choice. Please choose from the available options.")
            logger.debug(f"Rejected move {raw_choice!r}")
            return None

        computer_choice = self.policy.next_choice(self.rules, self.tracker, self.rng)
        self.write(f"Computer chose: {computer_choice}")
        result = play_round(self.rules, choice, computer_choice)

        if result.outcome is Outcome.DRAW:
            self.write("It's a draw!")
        # Draws go to the computer.
        if result.player_won:
            self.player_score += 1
            entry = f"{self.player_name} wins this round!"
            self.write(entry)
        else:
            self.computer_score += 1
            entry = f"{COMPUTER_NAME} wins this round."
            self.write(f"{COMPUTER_NAME} wins this round!")

        self.history.append(entry)
        self.tracker.record(choice)
        self.rounds_played += 1
        self.write(f"{self.player_name}: {self.player_score} - {COMPUTER_NAME}: {self.computer_score}")
        logger.debug(
            f"Round {self.rounds_played}: {choice} vs {computer_choice} -> {result.outcome.value} "
            f"({self.player_score}-{self.computer_score})"
        )

        self.state = State.GAME_OVER if self._threshold_reached() else State.ROUND_RESOLVED
        return result

    def stick_or_twist(self, answer: str) -> bool:
        """Handle the answer to "stick or twist"; returns True if the game ends.

        ``s`` sticks and ends the game at the current score, anything else
        carries on to the next round.
        """
        if self.state is not State.ROUND_RESOLVED:
            raise GameError(f"cannot stick or twist while {self.state.value}")
        if answer.strip().lower() == "s":
            logger.debug(f"{self.player_name} sticks at {self.player_score}-{self.computer_score}")
            self.state = State.GAME_OVER
            return True
        self.state = State.AWAITING_ROUND
        return False

    def analyse_strategy(self) -> None:
        self.write("\nPlayer's Strategy Analysis:")
        for choice, count in self.tracker.report():
            self.write(f"Choice: {choice}, Frequency: {count}")

    def finish(self) -> GameSummary:
        """Print the end of game report, then save the history."""
        self.analyse_strategy()
        self.history.display(self.write)

        summary = GameSummary(
            player_name=self.player_name,
            player_score=self.player_score,
            computer_score=self.computer_score,
            history=self.history.entries(),
            frequencies=self.tracker.report(),
        )
        if summary.player_won:
            self.write(f"\nCongratulations, {self.player_name}! You win the game!")
        else:
            self.write(f"\n{COMPUTER_NAME} wins the game. Better luck next time!")
        self.write("\nThanks for playing!")
        logger.info(
            f"Game over after {self.rounds_played} round(s): "
            f"{self.player_name} {self.player_score} - {self.computer_score} {COMPUTER_NAME}"
        )

        # The result is already on screen if the save fails.
        if self.history_file is not None:
            self.history.persist(self.history_file)
        return summary

    def play(self, player_name: Optional[str] = None) -> GameSummary:
        """Run the whole game on the console."""
        self.write("================================")
        self.write("Welcome to Rock, Paper, Scissors, Lizard, Spock!")
        self.write("================================")

        if player_name is None:
            self.write("Enter your name:")
            player_name = self.read()
        self.start(player_name)

        while not self.is_over:
            self.prompt_choice()
            if self.submit(self.read()) is None or self.is_over:
                continue
            self.write("\nDo you want to stick (s) or twist (t)?")
            self.stick_or_twist(self.read())

        return self.finish()


def create_game(rules: Rules, rounds_to_win: int = 3, **kwargs) -> Session:
    """Build a session for ``rules``; extra keyword arguments go to Session."""
    return Session(rules, rounds_to_win, **kwargs)
