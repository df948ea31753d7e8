from __future__ import annotations

import pytest

from fireflower.played import PlayedTiles
from fireflower.tiles import Color, Tile


@pytest.mark.parametrize(
    ("already_played", "tile", "expected"),
    [
        ([], Tile(Color.RED, 1), True),
        ([], Tile(Color.RED, 2), False),
        ([Tile(Color.RED, 1)], Tile(Color.RED, 2), True),
        ([Tile(Color.RED, 1)], Tile(Color.RED, 1), False),
        ([Tile(Color.RED, 1)], Tile(Color.BLUE, 2), False),
        ([Tile(Color.RED, 1), Tile(Color.RED, 2)], Tile(Color.RED, 4), False),
    ],
)
def test_play_succeeds_only_on_next_rank(already_played: list[Tile], tile: Tile, expected: bool) -> None:
    played = PlayedTiles()
    for earlier in already_played:
        assert played.play(earlier)

    assert played.play(tile) is expected


def test_failed_play_leaves_top_untouched() -> None:
    played = PlayedTiles()
    played.play(Tile(Color.GREEN, 1))

    assert not played.play(Tile(Color.GREEN, 3))
    assert played.top(Color.GREEN) == 1


def test_score_sums_tops_across_colors() -> None:
    played = PlayedTiles()
    for rank in range(1, 4):
        played.play(Tile(Color.WHITE, rank))
    played.play(Tile(Color.YELLOW, 1))

    assert played.score() == 4
    assert played.tops()[Color.WHITE] == 3
    assert played.tops()[Color.BLUE] == 0


def test_color_completion() -> None:
    played = PlayedTiles()
    for rank in range(1, 6):
        played.play(Tile(Color.BLUE, rank))

    assert played.is_color_complete(Color.BLUE)
    assert not played.is_color_complete(Color.RED)
    assert not played.all_complete()

    for color in Color:
        if color is Color.BLUE:
            continue
        for rank in range(1, 6):
            played.play(Tile(color, rank))

    assert played.all_complete()
    assert played.score() == 25
