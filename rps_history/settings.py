from decouple import config


# Game
RULES = config("RPS_RULES", default="default")

# Numbers stay strings here; the CLI converts them so a bad value is reported
# as a usage error.
ROUNDS_TO_WIN = config("RPS_ROUNDS_TO_WIN", default="3")

# "random" plays like the classic console game, "counter" plays against the
# player's favourite move.
STRATEGY = config("RPS_STRATEGY", default="random")

SEED = config("RPS_SEED", default=None)


# History file, overwritten at the end of every game
HISTORY_FILE = config("RPS_HISTORY_FILE", default="game_history.txt")


# Logging
LOG_LEVEL = config("RPS_LOG_LEVEL", default="WARNING")
