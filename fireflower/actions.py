"""Actions a player may choose on its turn."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Protocol, Sequence, Union, runtime_checkable

from .tiles import Color, Tile

if TYPE_CHECKING:
    from .events import DiscardEvent, PlayEvent

__all__ = [
    "HintPredicate",
    "ColorHint",
    "RankHint",
    "PlayAction",
    "DiscardAction",
    "HintAction",
    "Action",
    "keep_order",
]


@runtime_checkable
class HintPredicate(Protocol):
    """Anything that can tell whether a tile is covered by a hint."""

    def matches(self, tile: Tile) -> bool: ...


@dataclass(frozen=True, slots=True)
class ColorHint:
    """Hint pointing at every tile of one color."""

    color: Color

    def matches(self, tile: Tile) -> bool:
        return tile.color == self.color


@dataclass(frozen=True, slots=True)
class RankHint:
    """Hint pointing at every tile of one rank."""

    rank: int

    def matches(self, tile: Tile) -> bool:
        return tile.rank == self.rank


@dataclass(frozen=True)
class PlayAction:
    """Play the tile at ``position``, optionally reordering afterwards."""

    position: int
    reorder: Callable[["PlayEvent"], Sequence[int]] | None = None


@dataclass(frozen=True)
class DiscardAction:
    """Discard the tile at ``position``, optionally reordering afterwards."""

    position: int
    reorder: Callable[["DiscardEvent"], Sequence[int]] | None = None


@dataclass(frozen=True)
class HintAction:
    """Tell ``target`` which of its positions match ``hint``."""

    target: int
    hint: HintPredicate


Action = Union[PlayAction, DiscardAction, HintAction]


def keep_order(positions: Sequence[int]) -> tuple[int, ...]:
    """Return the identity ordering for ``positions``."""

    return tuple(sorted(positions))
