"""Detection of the end of a game and final scoring."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .events import DrawEvent, Event, PlayEvent, ends_turn
from .played import PlayedTiles
from .rules import MAX_STRIKES
from .tiles import DrawPile

__all__ = ["EndPhase", "EndReason", "GameOutcome", "GameEndDetector"]


class EndPhase(str, Enum):
    """Phases leading up to the end of a game."""

    PLAYING = "playing"
    FINAL_ROUND = "final_round"
    GAME_OVER = "game_over"


class EndReason(str, Enum):
    """Why a game ended."""

    STRIKES = "strikes"
    PERFECT = "perfect"
    FINAL_ROUND = "final_round"


@dataclass(frozen=True, slots=True)
class GameOutcome:
    """Result of a finished game."""

    score: int
    reason: EndReason | None
    turns: int
    strikes: int


class GameEndDetector:
    """Watches the event stream and decides when the game is over.

    Failed plays count as strikes. Once the draw pile runs dry every player gets one
    more turn. Strikes and a perfect table are checked after each turn before the
    final round countdown.
    """

    def __init__(
        self,
        draw_pile: DrawPile,
        played: PlayedTiles,
        num_players: int,
        max_strikes: int = MAX_STRIKES,
    ) -> None:
        self._draw_pile = draw_pile
        self._played = played
        self._num_players = num_players
        self.max_strikes = max_strikes
        self.phase = EndPhase.PLAYING
        self.reason: EndReason | None = None
        self.strikes = 0
        self.turns_remaining: int | None = None
        self.turns_taken = 0

    @property
    def is_game_over(self) -> bool:
        return self.phase == EndPhase.GAME_OVER

    def observe(self, event: Event) -> None:
        if isinstance(event, PlayEvent) and not event.successful:
            self.strikes += 1
        if ends_turn(event):
            self._end_turn()
        elif isinstance(event, DrawEvent) and self.phase == EndPhase.PLAYING:
            if not self._draw_pile.has_more():
                self.phase = EndPhase.FINAL_ROUND
                self.turns_remaining = self._num_players

    def _end_turn(self) -> None:
        self.turns_taken += 1
        if self.is_game_over:
            return
        if self.strikes >= self.max_strikes:
            self._finish(EndReason.STRIKES)
        elif self._played.all_complete():
            self._finish(EndReason.PERFECT)
        elif self.phase == EndPhase.FINAL_ROUND and self.turns_remaining is not None:
            self.turns_remaining -= 1
            if self.turns_remaining == 0:
                self._finish(EndReason.FINAL_ROUND)

    def _finish(self, reason: EndReason) -> None:
        self.phase = EndPhase.GAME_OVER
        self.reason = reason

    def score(self) -> int:
        """Return the final score; a game lost to strikes scores nothing."""

        if self.reason == EndReason.STRIKES:
            return 0
        return self._played.score()

    def outcome(self) -> GameOutcome:
        return GameOutcome(
            score=self.score(),
            reason=self.reason,
            turns=self.turns_taken,
            strikes=self.strikes,
        )

    def __repr__(self) -> str:
        return (
            f"GameEndDetector(phase={self.phase.value}, strikes={self.strikes}, "
            f"turns_remaining={self.turns_remaining})"
        )
