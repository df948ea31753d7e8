"""Tracking of the fireworks built on the table."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .rules import MAX_RANK
from .tiles import Color, Tile

__all__ = ["PlayedTiles"]


class PlayedTiles:
    """Highest rank successfully played for every color."""

    __slots__ = ("_tops",)

    def __init__(self) -> None:
        self._tops: dict[Color, int] = {color: 0 for color in Color}

    def top(self, color: Color) -> int:
        return self._tops[color]

    def tops(self) -> Mapping[Color, int]:
        """Return a read-only view of the current tops."""

        return MappingProxyType(self._tops)

    def can_play(self, tile: Tile) -> bool:
        return tile.rank == self._tops[tile.color] + 1

    def play(self, tile: Tile) -> bool:
        """Place ``tile`` if it continues its color and report whether it did."""

        if not self.can_play(tile):
            return False
        self._tops[tile.color] = tile.rank
        return True

    def score(self) -> int:
        return sum(self._tops.values())

    def is_color_complete(self, color: Color) -> bool:
        return self._tops[color] == MAX_RANK

    def all_complete(self) -> bool:
        return all(self.is_color_complete(color) for color in Color)

    def __repr__(self) -> str:
        tops = ", ".join(f"{color.value}={rank}" for color, rank in self._tops.items())
        return f"PlayedTiles({tops})"
