"""Game configuration, per-game state and the event pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Final, Iterable

from .endgame import GameEndDetector
from .events import Announcement
from .hands import HandCollection
from .played import PlayedTiles
from .queues import EventQueueCollection
from .rules import MAX_STRIKES, MIN_PLAYERS, NUMBER_OF_HINT_TOKENS, ConfigurationError, hand_size_for
from .tiles import DrawPile, Tile
from .tokens import HintCountEnforcer

__all__ = [
    "GameConfig",
    "GameState",
    "EventVisitor",
    "EVENT_PIPELINE",
    "new_game_state",
    "dispatch",
]


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Runtime configuration for a single game."""

    num_players: int
    hand_size: int | None = None
    hint_tokens: int = NUMBER_OF_HINT_TOKENS
    max_strikes: int = MAX_STRIKES

    def __post_init__(self) -> None:
        if self.num_players < MIN_PLAYERS:
            raise ConfigurationError(f"A minimum of {MIN_PLAYERS} players is required.")
        if self.hand_size is None:
            object.__setattr__(self, "hand_size", hand_size_for(self.num_players))
        elif self.hand_size <= 0:
            raise ConfigurationError("hand_size must be positive")
        if self.hint_tokens < 0:
            raise ConfigurationError("hint_tokens must not be negative")
        if self.max_strikes <= 0:
            raise ConfigurationError("max_strikes must be positive")


@dataclass(slots=True)
class GameState:
    """Every piece of state owned by one game."""

    config: GameConfig
    draw_pile: DrawPile
    hands: HandCollection
    queues: EventQueueCollection
    played: PlayedTiles
    tokens: HintCountEnforcer
    end_detector: GameEndDetector
    current_player: int = 0


def new_game_state(config: GameConfig, tiles: Iterable[Tile]) -> GameState:
    """Return fresh state for a game played with ``tiles``."""

    assert config.hand_size is not None
    draw_pile = DrawPile(tiles)
    played = PlayedTiles()
    return GameState(
        config=config,
        draw_pile=draw_pile,
        hands=HandCollection(config.num_players, config.hand_size),
        queues=EventQueueCollection(config.num_players),
        played=played,
        tokens=HintCountEnforcer(config.hint_tokens),
        end_detector=GameEndDetector(draw_pile, played, config.num_players, config.max_strikes),
    )


EventVisitor = Callable[[GameState, Announcement], None]


def update_hands(state: GameState, announcement: Announcement) -> None:
    state.hands.observe(announcement.event)


def append_to_queues(state: GameState, announcement: Announcement) -> None:
    state.queues.observe(announcement)


def enforce_hint_tokens(state: GameState, announcement: Announcement) -> None:
    state.tokens.observe(announcement.event)


def detect_game_end(state: GameState, announcement: Announcement) -> None:
    state.end_detector.observe(announcement.event)


EVENT_PIPELINE: Final[tuple[EventVisitor, ...]] = (
    update_hands,
    append_to_queues,
    enforce_hint_tokens,
    detect_game_end,
)


def dispatch(state: GameState, announcement: Announcement) -> None:
    """Run ``announcement`` through every visitor of the pipeline, in order."""

    for visitor in EVENT_PIPELINE:
        visitor(state, announcement)
