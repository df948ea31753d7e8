"""Turn orchestration for a game of Fireflower."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator, Protocol, Sequence

from .actions import Action, DiscardAction, HintAction, PlayAction
from .endgame import GameOutcome
from .events import (
    Announcement,
    DiscardEvent,
    DrawEvent,
    Event,
    HintEvent,
    PlayEvent,
    ReorderEvent,
    announce,
)
from .rules import (
    GAME_ENDED_BY_TEST,
    MIN_PLAYERS,
    ConfigurationError,
    EndGameFromTest,
    IllegalActionError,
    InvalidPositionsError,
    NoHintTokensError,
)
from .state import GameConfig, GameState, dispatch, new_game_state
from .tiles import Tile

__all__ = ["Player", "Game", "new_game"]

logger = logging.getLogger(__name__)


class Player(Protocol):
    """A seat at the table.

    The event iterators handed to a player are only valid during the call that
    receives them.
    """

    def take_turn(self, events: Iterator[Event]) -> Action:
        """Return the action for this turn."""

    def receive_hint(self, events: Iterator[Event]) -> Sequence[int]:
        """Return the new order of the occupied positions after being hinted."""


class Game:
    """Runs one game from the deal until the end detector calls it."""

    def __init__(
        self,
        tiles: Iterable[Tile],
        players: Sequence[Player],
        config: GameConfig | None = None,
    ) -> None:
        if len(players) < MIN_PLAYERS:
            raise ConfigurationError(f"A minimum of {MIN_PLAYERS} players is required.")
        if config is None:
            config = GameConfig(num_players=len(players))
        elif config.num_players != len(players):
            raise ConfigurationError(
                f"configuration expects {config.num_players} players, got {len(players)}"
            )
        self.players: tuple[Player, ...] = tuple(players)
        self.state: GameState = new_game_state(config, tiles)
        self._dealt = False
        self._outcome: GameOutcome | None = None

    @property
    def config(self) -> GameConfig:
        return self.state.config

    @property
    def current_player(self) -> int:
        return self.state.current_player

    @property
    def outcome(self) -> GameOutcome | None:
        """Outcome of the game once :meth:`run` has returned normally."""

        return self._outcome

    def deal(self) -> None:
        """Deal one tile per player per round until every hand is full."""

        if self._dealt:
            raise RuntimeError("tiles have already been dealt")
        hand_size = self.state.hands.hand_size
        for _ in range(hand_size):
            for player_index in range(self.config.num_players):
                if not self.state.draw_pile.has_more():
                    raise ConfigurationError("not enough tiles to deal every hand")
                self._draw(player_index)
        self._dealt = True
        logger.debug("dealt %d tiles to %d players", hand_size, self.config.num_players)

    def run(self) -> int:
        """Play until the game ends and return the score."""

        if not self._dealt:
            self.deal()
        end_detector = self.state.end_detector
        try:
            while not end_detector.is_game_over:
                self._take_turn()
                self.state.current_player = (self.state.current_player + 1) % self.config.num_players
        except EndGameFromTest:
            logger.info("game stopped by test after %d turns", end_detector.turns_taken)
            return GAME_ENDED_BY_TEST
        self._outcome = end_detector.outcome()
        logger.info(
            "game over (%s) after %d turns with score %d",
            self._outcome.reason.value if self._outcome.reason else "unknown",
            self._outcome.turns,
            self._outcome.score,
        )
        return self._outcome.score

    def _take_turn(self) -> None:
        current = self.state.current_player
        action = self.players[current].take_turn(self.state.queues.events_for(current))
        logger.debug("player %d chose %r", current, action)
        if isinstance(action, PlayAction):
            self._play(current, action)
        elif isinstance(action, DiscardAction):
            self._discard(current, action)
        elif isinstance(action, HintAction):
            self._hint(current, action)
        else:
            raise IllegalActionError(f"player {current} returned an unknown action {action!r}")

    def _play(self, player: int, action: PlayAction) -> None:
        tile = self.state.hands.remove(player, action.position)
        successful = self.state.played.play(tile)
        announcement = self._emit(PlayEvent(player, action.position, tile, successful))
        self._draw(player)
        self._reorder_after(player, action.reorder, announcement)

    def _discard(self, player: int, action: DiscardAction) -> None:
        tile = self.state.hands.remove(player, action.position)
        announcement = self._emit(DiscardEvent(player, action.position, tile))
        self._draw(player)
        self._reorder_after(player, action.reorder, announcement)

    def _hint(self, player: int, action: HintAction) -> None:
        if not self.state.tokens.can_hint():
            raise NoHintTokensError(f"player {player} cannot hint: no hint tokens remain")
        target = action.target
        if target == player or not 0 <= target < self.config.num_players:
            raise IllegalActionError(f"player {player} cannot hint player {target}")
        positions = self.state.hands.positions_of_matching_tiles(action)
        self._emit(HintEvent(player, target, positions, action.hint))
        new_order = self.players[target].receive_hint(self.state.queues.events_for(target))
        self._reorder(target, new_order)

    def _draw(self, player: int) -> None:
        if not self.state.draw_pile.has_more():
            return
        tile = self.state.draw_pile.take()
        self.state.hands.draw(player, tile)
        self._emit(DrawEvent(player, tile))

    def _reorder_after(
        self,
        player: int,
        reorder: Callable[[Any], Sequence[int]] | None,
        announcement: Announcement,
    ) -> None:
        if reorder is None:
            return
        self._reorder(player, reorder(announcement.owner_view))

    def _reorder(self, player: int, positions: Sequence[int]) -> None:
        received = tuple(positions)
        expected = self.state.hands.occupied_positions(player)
        if sorted(received) != list(expected):
            raise InvalidPositionsError(expected, received)
        if received != expected:
            self._emit(ReorderEvent(player, received))

    def _emit(self, event: Event) -> Announcement:
        announcement = announce(event)
        logger.debug("event %r", event)
        dispatch(self.state, announcement)
        return announcement

    def __repr__(self) -> str:
        return (
            f"Game(current_player={self.state.current_player}, "
            f"end_detector={self.state.end_detector!r})"
        )


def new_game(tiles: Iterable[Tile], players: Sequence[Player]) -> int:
    """Deal ``tiles`` to ``players``, play the game and return its score."""

    game = Game(tiles, players)
    game.deal()
    return game.run()
