from __future__ import annotations

import pytest

from fireflower import tiles
from fireflower.tiles import Color, DrawPile, Tile


def test_standard_tile_set_composition() -> None:
    tile_set = tiles.standard_tile_set()

    assert len(tile_set) == 50
    for color in Color:
        ranks = sorted(tile.rank for tile in tile_set if tile.color is color)
        assert ranks == [1, 1, 1, 2, 2, 3, 3, 4, 4, 5]


def test_shuffled_is_reproducible() -> None:
    assert tiles.shuffled(42) == tiles.shuffled(42)
    assert sorted(tiles.shuffled(7), key=str) == sorted(tiles.standard_tile_set(), key=str)


@pytest.mark.parametrize("rank", [0, 6])
def test_tile_rejects_out_of_range_rank(rank: int) -> None:
    with pytest.raises(ValueError):
        Tile(Color.RED, rank)


def test_tile_codes() -> None:
    assert Tile.from_code("G4") == Tile(Color.GREEN, 4)
    assert Tile(Color.WHITE, 2).code == "W2"


def test_draw_pile_consumes_source_in_order() -> None:
    pile = DrawPile(iter([Tile(Color.RED, 1), Tile(Color.RED, 2)]))

    assert pile.has_more()
    assert pile.take() == Tile(Color.RED, 1)
    assert pile.take() == Tile(Color.RED, 2)
    assert not pile.has_more()
    assert pile.drawn == 2
    with pytest.raises(IndexError):
        pile.take()


def test_empty_draw_pile() -> None:
    assert not DrawPile([]).has_more()
