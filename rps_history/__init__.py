"""Rock, Paper, Scissors, Lizard, Spock with pluggable rules and round history."""
from __future__ import annotations

from .errors import GameError, InvalidChoice, PersistenceFailure, UndefinedOutcome
from .game import GameSummary, RoundResult, Session, State, create_game, play_round
from .rules import Outcome, TableRules, default_rules, get_rules

__all__ = [
    "GameError",
    "InvalidChoice",
    "PersistenceFailure",
    "UndefinedOutcome",
    "GameSummary",
    "RoundResult",
    "Session",
    "State",
    "create_game",
    "play_round",
    "Outcome",
    "TableRules",
    "default_rules",
    "get_rules",
]
