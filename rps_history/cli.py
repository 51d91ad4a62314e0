"""Command-line interface for Rock, Paper, Scissors, Lizard, Spock."""
from __future__ import annotations
import argparse
import logging
import random
from typing import Optional

from . import settings
from .errors import GameError, PersistenceFailure, UndefinedOutcome
from .game import Session, create_game
from .policy import POLICIES, get_policy
from .rules import RULE_SETS, get_rules

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="rps-history", description="Play Rock, Paper, Scissors, Lizard, Spock against the computer.")
    p.add_argument("--rules", choices=sorted(RULE_SETS), default=settings.RULES, help="Rule set to play (default: %(default)s)")
    p.add_argument("--rounds-to-win", type=int, default=settings.ROUNDS_TO_WIN, help="Rounds needed to win the game (default: %(default)s)")
    p.add_argument("--history-file", default=settings.HISTORY_FILE, help="Where the round history is saved (default: %(default)s)")
    p.add_argument("--strategy", choices=sorted(POLICIES), default=settings.STRATEGY, help="How the computer picks its move (default: %(default)s)")
    p.add_argument("--seed", type=int, default=settings.SEED, help="Seed for the computer's moves")
    p.add_argument("--player", help="Player name; skips the name prompt")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=settings.LOG_LEVEL, help="Logging level (default: %(default)s)")
    return p.parse_args(argv)


def build_game(args: argparse.Namespace) -> Session:
    """Create the session described by the parsed arguments.

    Unknown rule set or strategy names, which can come from the environment,
    are raised as ValueError.
    """
    try:
        rules = get_rules(args.rules)
        policy = get_policy(args.strategy)
    except KeyError as e:
        raise ValueError(e.args[0]) from None
    return create_game(
        rules,
        args.rounds_to_win,
        policy=policy,
        rng=random.Random(args.seed),
        history_file=args.history_file,
    )


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    try:
        logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
        game = build_game(args)
    except UndefinedOutcome as e:
        logger.error(f"Rule set {args.rules!r} is incomplete: {e}")
        print(f"\nCannot play with the {args.rules!r} rules: {e}")
        return 1
    except ValueError as e:
        print(f"\n{e}")
        return 2

    try:
        game.play(args.player)
    except PersistenceFailure as e:
        print(f"\nThe game finished but its history was not saved: {e}")
        return 1
    except GameError as e:
        logger.error(f"Game aborted: {e}")
        print(f"\nGame aborted: {e}")
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\nExiting early.")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
