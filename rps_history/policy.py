"""How the computer picks its move."""
from __future__ import annotations
import random
from typing import Callable, Dict, Protocol

from .rules import Outcome, Rules
from .tracker import FrequencyTracker


class ChoicePolicy(Protocol):
    def next_choice(self, rules: Rules, tracker: FrequencyTracker, rng: random.Random) -> str: ...


class RandomPolicy:
    """Uniformly random moves.

    The player's favourite move is looked up first, exactly like the classic
    console game does, but the computer never acts on it: the returned move is
    a second, independent draw.
    """

    name = "random"

    def next_choice(self, rules: Rules, tracker: FrequencyTracker, rng: random.Random) -> str:
        choices = rules.choices()
        if tracker.most_frequent() is None:
            rng.choice(choices)  # unused fallback draw, still advances rng
        return rng.choice(choices)


class CounterPolicy:
    """Play something that beats the player's most frequent move."""

    name = "counter"

    def next_choice(self, rules: Rules, tracker: FrequencyTracker, rng: random.Random) -> str:
        choices = rules.choices()
        favourite = tracker.most_frequent()
        if favourite is None:
            return rng.choice(choices)
        beaters = [c for c in choices if rules.resolve(favourite, c) is Outcome.COMPUTER]
        return rng.choice(beaters or choices)


class FixedPolicy:
    """Always plays the same move."""

    name = "fixed"

    def __init__(self, choice: str):
        self.choice = choice

    def next_choice(self, rules: Rules, tracker: FrequencyTracker, rng: random.Random) -> str:
        return self.choice


POLICIES: Dict[str, Callable[[], ChoicePolicy]] = {
    "random": RandomPolicy,
    "counter": CounterPolicy,
}


def get_policy(name: str) -> ChoicePolicy:
    try:
        return POLICIES[name]()
    except KeyError:
        raise KeyError(f"unknown strategy {name!r}. available: {sorted(POLICIES)}") from None
