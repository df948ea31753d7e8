"""Harness for playing many seeded games with the sample players."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Sequence

from . import scoreboard, tiles
from .bots import RandomPlayer
from .game import Game, Player
from .rules import ConfigurationError, MIN_PLAYERS
from .state import GameConfig

__all__ = ["BenchmarkConfig", "PlayerFactory", "random_players", "play_one", "run_games"]

logger = logging.getLogger(__name__)

PlayerFactory = Callable[[GameConfig, random.Random], Sequence[Player]]


@dataclass(frozen=True, slots=True)
class BenchmarkConfig:
    """Configuration for a batch of games."""

    games: int = 10
    num_players: int = 3
    seed: int = 123
    hint_probability: float = 0.4
    play_probability: float = 0.3

    def __post_init__(self) -> None:
        if self.games <= 0:
            raise ConfigurationError("games must be positive")
        if self.num_players < MIN_PLAYERS:
            raise ConfigurationError(f"A minimum of {MIN_PLAYERS} players is required.")


def random_players(config: BenchmarkConfig) -> PlayerFactory:
    """Return a factory seating :class:`RandomPlayer` agents."""

    def build(game_config: GameConfig, rng: random.Random) -> Sequence[Player]:
        return [
            RandomPlayer(
                seat,
                game_config.num_players,
                rng,
                hint_probability=config.hint_probability,
                play_probability=config.play_probability,
                hand_size=game_config.hand_size,
                hint_tokens=game_config.hint_tokens,
                max_strikes=game_config.max_strikes,
            )
            for seat in range(game_config.num_players)
        ]

    return build


def play_one(game_number: int, seed: int, num_players: int, factory: PlayerFactory) -> scoreboard.GameSummary:
    """Play a single game shuffled with ``seed``."""

    game_config = GameConfig(num_players=num_players)
    rng = random.Random(seed)
    game = Game(tiles.shuffled(seed), factory(game_config, rng), game_config)
    game.run()
    if game.outcome is None:
        raise RuntimeError(f"game {game_number} did not reach an ending")
    logger.debug("game %d (seed %d) scored %d", game_number, seed, game.outcome.score)
    return scoreboard.GameSummary(
        game_number=game_number,
        seed=seed,
        num_players=num_players,
        outcome=game.outcome,
    )


def run_games(config: BenchmarkConfig, factory: PlayerFactory | None = None) -> scoreboard.GameHistory:
    """Play ``config.games`` games and return their history."""

    if factory is None:
        factory = random_players(config)
    seeds = random.Random(config.seed)
    history = scoreboard.GameHistory()
    for game_number in range(1, config.games + 1):
        seed = seeds.randrange(2**32)
        history.record(play_one(game_number, seed, config.num_players, factory))
    logger.info("played %d games with %d players", config.games, config.num_players)
    return history
