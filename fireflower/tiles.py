"""Tile abstractions and the standard tile set."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from .rules import MAX_RANK

__all__ = [
    "Color",
    "Tile",
    "DrawPile",
    "COPIES_PER_RANK",
    "standard_tile_set",
    "shuffled",
]

COPIES_PER_RANK: dict[int, int] = {1: 3, 2: 2, 3: 2, 4: 2, 5: 1}


class Color(str, Enum):
    """The five firework colors."""

    RED = "R"
    YELLOW = "Y"
    GREEN = "G"
    BLUE = "B"
    WHITE = "W"


@dataclass(frozen=True, slots=True)
class Tile:
    """Value object describing a single tile."""

    color: Color
    rank: int

    def __post_init__(self) -> None:
        if not 1 <= self.rank <= MAX_RANK:
            raise ValueError(f"rank must be between 1 and {MAX_RANK}, got {self.rank}")

    @classmethod
    def from_code(cls, code: str) -> "Tile":
        """Build a tile from a short code such as ``"R3"``."""

        if len(code) != 2:
            raise ValueError(f"invalid tile code '{code}'")
        return cls(Color(code[0]), int(code[1]))

    @property
    def code(self) -> str:
        return f"{self.color.value}{self.rank}"

    def __str__(self) -> str:
        return self.code


class DrawPile:
    """Read-once view over a pre-shuffled tile source with one tile of lookahead."""

    __slots__ = ("_source", "_next", "_drawn")

    def __init__(self, tiles: Iterable[Tile]) -> None:
        self._source: Iterator[Tile] = iter(tiles)
        self._next: Tile | None = next(self._source, None)
        self._drawn = 0

    def has_more(self) -> bool:
        return self._next is not None

    def take(self) -> Tile:
        """Remove and return the next tile."""

        tile = self._next
        if tile is None:
            raise IndexError("draw pile is empty")
        self._next = next(self._source, None)
        self._drawn += 1
        return tile

    @property
    def drawn(self) -> int:
        """Number of tiles taken so far."""

        return self._drawn

    def __repr__(self) -> str:
        return f"DrawPile(drawn={self._drawn}, has_more={self.has_more()})"


def standard_tile_set() -> list[Tile]:
    """Return the fifty tiles of a standard set in a deterministic order."""

    tiles: list[Tile] = []
    for color in Color:
        for rank, copies in COPIES_PER_RANK.items():
            tiles.extend(Tile(color, rank) for _ in range(copies))
    return tiles


def shuffled(seed: int | None = None, tiles: Iterable[Tile] | None = None) -> list[Tile]:
    """Return ``tiles`` (the standard set by default) shuffled with ``seed``."""

    deck = list(tiles) if tiles is not None else standard_tile_set()
    random.Random(seed).shuffle(deck)
    return deck
