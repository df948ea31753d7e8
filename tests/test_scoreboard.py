from __future__ import annotations

import pytest

from fireflower import scoreboard
from fireflower.endgame import EndReason, GameOutcome


def _summary(game_number: int, score: int, reason: EndReason | None) -> scoreboard.GameSummary:
    return scoreboard.GameSummary(
        game_number=game_number,
        seed=game_number,
        num_players=3,
        outcome=GameOutcome(score=score, reason=reason, turns=40, strikes=0),
    )


def test_history_accumulates_statistics() -> None:
    history = scoreboard.GameHistory()
    history.record(_summary(1, 10, EndReason.FINAL_ROUND))
    history.record(_summary(2, 0, EndReason.STRIKES))
    history.record(_summary(3, 25, EndReason.PERFECT))
    history.record(_summary(4, 5, EndReason.FINAL_ROUND))

    stats = history.statistics()

    assert stats.games == 4
    assert stats.mean == pytest.approx(10.0)
    assert stats.std == pytest.approx(9.354, abs=1e-3)
    assert (stats.best, stats.worst) == (25, 0)
    assert stats.perfect_games == 1
    assert stats.strike_outs == 1
    assert len(stats.histogram) == 26
    assert stats.histogram[0] == 1
    assert stats.histogram[10] == 1
    assert sum(stats.histogram) == 4


def test_history_rejects_unfinished_games() -> None:
    history = scoreboard.GameHistory()
    with pytest.raises(ValueError):
        history.record(_summary(1, 3, None))


def test_statistics_require_games() -> None:
    with pytest.raises(ValueError):
        scoreboard.GameHistory().statistics()
