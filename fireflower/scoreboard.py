"""Helpers for tracking the results of many Fireflower games."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .endgame import EndReason, GameOutcome
from .rules import MAX_RANK
from .tiles import Color

__all__ = ["GameSummary", "ScoreStatistics", "GameHistory"]

MAX_SCORE = MAX_RANK * len(Color)


@dataclass(frozen=True, slots=True)
class GameSummary:
    """Summary captured after a single game."""

    game_number: int
    seed: int | None
    num_players: int
    outcome: GameOutcome


@dataclass(frozen=True, slots=True)
class ScoreStatistics:
    """Aggregate score statistics across all recorded games."""

    games: int
    mean: float
    std: float
    best: int
    worst: int
    perfect_games: int
    strike_outs: int
    histogram: tuple[int, ...]


@dataclass(slots=True)
class GameHistory:
    """Mutable tracker that accumulates game summaries."""

    games: list[GameSummary] = field(default_factory=list)

    def record(self, summary: GameSummary) -> None:
        """Record ``summary``; only games that reached a real ending count."""

        if summary.outcome.reason is None:
            raise ValueError("cannot record a game that has not ended")
        if not 0 <= summary.outcome.score <= MAX_SCORE:
            raise ValueError("score out of range")
        self.games.append(summary)

    def scores(self) -> np.ndarray:
        return np.array([summary.outcome.score for summary in self.games], dtype=np.int64)

    def statistics(self) -> ScoreStatistics:
        """Return the aggregate statistics of every recorded game."""

        if not self.games:
            raise ValueError("no games recorded")
        scores = self.scores()
        reasons = [summary.outcome.reason for summary in self.games]
        histogram = np.bincount(scores, minlength=MAX_SCORE + 1)
        return ScoreStatistics(
            games=len(self.games),
            mean=float(scores.mean()),
            std=float(scores.std()),
            best=int(scores.max()),
            worst=int(scores.min()),
            perfect_games=reasons.count(EndReason.PERFECT),
            strike_outs=reasons.count(EndReason.STRIKES),
            histogram=tuple(int(count) for count in histogram),
        )
