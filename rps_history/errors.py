"""Exceptions raised by the game engine."""
from __future__ import annotations


class GameError(Exception):
    """Base class for every error the game raises on purpose."""


class InvalidChoice(GameError, ValueError):
    """A move that is not part of the active rule set."""

    def __init__(self, choice, valid):
        self.choice = choice
        self.valid = tuple(valid)
        super().__init__(f"invalid move: {choice!r}. valid moves: {self.valid}")


class UndefinedOutcome(GameError):
    """The outcome table has no entry for one or more pairs of moves."""

    def __init__(self, rules_name: str, missing):
        self.rules_name = rules_name
        self.missing = tuple(missing)
        shown = ", ".join(f"{p}/{c}" for p, c in self.missing[:5])
        if len(self.missing) > 5:
            shown += f", ... ({len(self.missing)} in total)"
        super().__init__(f"rule set {rules_name!r} has no outcome for: {shown}")


class PersistenceFailure(GameError):
    """Writing the game history to its sink failed."""

    def __init__(self, sink, cause: Exception):
        self.sink = sink
        self.cause = cause
        super().__init__(f"could not save game history to {sink}: {cause}")
