"""Rule sets: the legal moves of a variant and who wins each pairing."""
from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Iterable, Mapping, Protocol, Tuple

from .errors import UndefinedOutcome


class Outcome(str, Enum):
    PLAYER = "player"
    COMPUTER = "computer"
    DRAW = "draw"


class Rules(Protocol):
    name: str

    def choices(self) -> Tuple[str, ...]: ...

    def is_valid(self, choice: str) -> bool: ...

    def resolve(self, player_choice: str, computer_choice: str) -> Outcome: ...


class TableRules:
    """A rule set backed by a complete outcome table.

    The table maps ``(player_choice, computer_choice)`` to an Outcome and is
    copied into a square matrix indexed by the position of each choice. Every
    ordered pair must be present; a gap raises UndefinedOutcome here rather
    than in the middle of a game.
    """

    def __init__(self, name: str, choices: Iterable[str], outcomes: Mapping[Tuple[str, str], Outcome]):
        self.name = name
        self._choices = tuple(choices)
        if len(set(self._choices)) != len(self._choices):
            raise ValueError(f"rule set {name!r} lists a choice twice: {self._choices}")
        self._index = {choice: i for i, choice in enumerate(self._choices)}

        unknown = [pair for pair in outcomes if pair[0] not in self._index or pair[1] not in self._index]
        if unknown:
            raise ValueError(f"rule set {name!r} has outcomes for unknown choices: {unknown}")

        missing = [(p, c) for p in self._choices for c in self._choices if (p, c) not in outcomes]
        if missing:
            raise UndefinedOutcome(name, missing)

        self._matrix = tuple(
            tuple(Outcome(outcomes[p, c]) for c in self._choices) for p in self._choices
        )

    def choices(self) -> Tuple[str, ...]:
        return self._choices

    def is_valid(self, choice: str) -> bool:
        return choice in self._index

    def resolve(self, player_choice: str, computer_choice: str) -> Outcome:
        try:
            row = self._index[player_choice]
            col = self._index[computer_choice]
        except KeyError:
            raise UndefinedOutcome(self.name, [(player_choice, computer_choice)]) from None
        return self._matrix[row][col]

    def __repr__(self):
        return f"TableRules({self.name!r}, choices={self._choices})"


P, C, D = Outcome.PLAYER, Outcome.COMPUTER, Outcome.DRAW

DEFAULT_CHOICES = ("rock", "paper", "scissors", "lizard", "spock")

# Rows are the player's move, columns the computer's, in DEFAULT_CHOICES order.
_DEFAULT_ROWS = {
    "rock":     (D, C, P, P, C),
    "paper":    (P, D, C, C, P),
    "scissors": (C, P, D, P, C),
    "lizard":   (C, P, C, D, P),
    "spock":    (P, C, P, C, D),
}

DEFAULT_OUTCOMES: Dict[Tuple[str, str], Outcome] = {
    (player, computer): outcome
    for player, row in _DEFAULT_ROWS.items()
    for computer, outcome in zip(DEFAULT_CHOICES, row)
}

CUSTOM_CHOICES = ("a", "b", "c", "d", "e")

# Template for a new variant; fill in every pair before using it.
CUSTOM_OUTCOMES: Dict[Tuple[str, str], Outcome] = {}


def default_rules() -> TableRules:
    """Rock, paper, scissors, lizard, spock."""
    return TableRules("default", DEFAULT_CHOICES, DEFAULT_OUTCOMES)


def custom_rules() -> TableRules:
    return TableRules("custom", CUSTOM_CHOICES, CUSTOM_OUTCOMES)


RULE_SETS: Dict[str, Callable[[], TableRules]] = {
    "default": default_rules,
    "custom": custom_rules,
}


def get_rules(name: str) -> TableRules:
    """Build the rule set registered under ``name``."""
    try:
        factory = RULE_SETS[name]
    except KeyError:
        raise KeyError(f"unknown rule set {name!r}. available: {sorted(RULE_SETS)}") from None
    return factory()
