"""Top-level package for the Fireflower rules engine."""

from . import actions, endgame, events, game, hands, played, queues, rules, state, tiles, tokens
from .game import Game, new_game

__all__ = [
    "actions",
    "endgame",
    "events",
    "game",
    "hands",
    "played",
    "queues",
    "rules",
    "state",
    "tiles",
    "tokens",
    "Game",
    "new_game",
]
