from __future__ import annotations

import pytest

from fireflower.actions import ColorHint
from fireflower.events import DiscardEvent, DrawEvent, HintEvent, PlayEvent
from fireflower.rules import NoHintTokensError
from fireflower.tiles import Color, Tile
from fireflower.tokens import HintCountEnforcer


def _hint() -> HintEvent:
    return HintEvent(0, 1, frozenset({0}), ColorHint(Color.RED))


def test_hint_spends_a_token() -> None:
    tokens = HintCountEnforcer(8)
    tokens.observe(_hint())

    assert tokens.remaining == 7


def test_hint_without_tokens_is_rejected() -> None:
    tokens = HintCountEnforcer(2)
    tokens.observe(_hint())
    tokens.observe(_hint())

    assert not tokens.can_hint()
    with pytest.raises(NoHintTokensError):
        tokens.observe(_hint())
    assert tokens.remaining == 0


def test_discard_regains_a_token_capped_at_maximum() -> None:
    tokens = HintCountEnforcer(3)
    tokens.observe(DiscardEvent(0, 0, Tile(Color.RED, 1)))
    assert tokens.remaining == 3

    tokens.observe(_hint())
    tokens.observe(DiscardEvent(0, 0, Tile(Color.RED, 1)))
    assert tokens.remaining == 3


@pytest.mark.parametrize(
    ("event", "expected"),
    [
        (PlayEvent(0, 0, Tile(Color.BLUE, 5), True), 8),
        (PlayEvent(0, 0, Tile(Color.BLUE, 5), False), 7),
        (PlayEvent(0, 0, Tile(Color.BLUE, 4), True), 7),
        (DrawEvent(0, Tile(Color.BLUE, 5)), 7),
    ],
)
def test_only_completing_a_color_regains_a_token_on_play(event: object, expected: int) -> None:
    tokens = HintCountEnforcer(8)
    tokens.observe(_hint())

    tokens.observe(event)  # type: ignore[arg-type]

    assert tokens.remaining == expected


def test_token_count_stays_within_bounds() -> None:
    tokens = HintCountEnforcer(8)
    for _ in range(20):
        tokens.observe(DiscardEvent(1, 0, Tile(Color.WHITE, 2)))
        assert 0 <= tokens.remaining <= tokens.maximum
    for _ in range(8):
        tokens.observe(_hint())
    assert tokens.remaining == 0
