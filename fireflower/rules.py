"""Rule constants and error types for Fireflower."""

from __future__ import annotations

from typing import Final, Iterable

__all__ = [
    "HAND_SIZE_FOR_THREE_OR_FEWER_PLAYERS",
    "HAND_SIZE_FOR_FOUR_OR_MORE_PLAYERS",
    "NUMBER_OF_HINT_TOKENS",
    "MAX_STRIKES",
    "MIN_PLAYERS",
    "MAX_RANK",
    "GAME_ENDED_BY_TEST",
    "hand_size_for",
    "ConfigurationError",
    "IllegalActionError",
    "InvalidPositionsError",
    "NoHintTokensError",
    "PositionOutOfRangeError",
    "EmptyPositionError",
    "EndGameFromTest",
]

HAND_SIZE_FOR_THREE_OR_FEWER_PLAYERS: Final[int] = 5
HAND_SIZE_FOR_FOUR_OR_MORE_PLAYERS: Final[int] = 4
NUMBER_OF_HINT_TOKENS: Final[int] = 8
MAX_STRIKES: Final[int] = 3
MIN_PLAYERS: Final[int] = 2
MAX_RANK: Final[int] = 5
GAME_ENDED_BY_TEST: Final[int] = -1


def hand_size_for(num_players: int) -> int:
    """Return the number of tiles each player holds for ``num_players``."""

    if num_players > 3:
        return HAND_SIZE_FOR_FOUR_OR_MORE_PLAYERS
    return HAND_SIZE_FOR_THREE_OR_FEWER_PLAYERS


class ConfigurationError(ValueError):
    """Raised when a game cannot be set up with the supplied arguments."""


class IllegalActionError(RuntimeError):
    """Raised when a player breaks the rules of the game."""


class InvalidPositionsError(IllegalActionError):
    """Raised when a reorder is not a permutation of the expected positions."""

    def __init__(self, expected: Iterable[int], received: Iterable[int]) -> None:
        self.expected = tuple(expected)
        self.received = tuple(received)
        super().__init__(
            f"expected a reordering of positions {sorted(self.expected)}, got {list(self.received)}"
        )


class NoHintTokensError(IllegalActionError):
    """Raised when a hint is given while no hint tokens remain."""


class PositionOutOfRangeError(IllegalActionError):
    """Raised when an action references a position outside the hand."""


class EmptyPositionError(IllegalActionError):
    """Raised when an action references a slot that holds no tile."""


class EndGameFromTest(Exception):
    """Raised by test players to stop a game early."""
