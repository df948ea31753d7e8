"""Events describing what happened during a game.

Events are immutable facts created by the orchestrator. Each event knows the player
it belongs to and can produce the projection that player is allowed to see: a player
never learns the identity of a tile it draws, everyone else does.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from .actions import HintPredicate
from .tiles import Tile

__all__ = [
    "DrawEvent",
    "PlayEvent",
    "DiscardEvent",
    "HintEvent",
    "ReorderEvent",
    "Event",
    "Announcement",
    "announce",
    "ends_turn",
]


@dataclass(frozen=True, slots=True)
class DrawEvent:
    """``player`` drew a tile; ``tile`` is ``None`` in the drawer's own view."""

    player: int
    tile: Tile | None

    def redacted(self) -> "DrawEvent":
        return replace(self, tile=None)


@dataclass(frozen=True, slots=True)
class PlayEvent:
    """``player`` played the tile at ``position``."""

    player: int
    position: int
    tile: Tile
    successful: bool

    def redacted(self) -> "PlayEvent":
        return self


@dataclass(frozen=True, slots=True)
class DiscardEvent:
    """``player`` discarded the tile at ``position``."""

    player: int
    position: int
    tile: Tile

    def redacted(self) -> "DiscardEvent":
        return self


@dataclass(frozen=True, slots=True)
class HintEvent:
    """``player`` told ``target`` that ``positions`` match ``hint``."""

    player: int
    target: int
    positions: frozenset[int]
    hint: HintPredicate

    def redacted(self) -> "HintEvent":
        return self


@dataclass(frozen=True, slots=True)
class ReorderEvent:
    """``player`` rearranged its hand; ``positions[i]`` is the old slot now at the i-th occupied slot."""

    player: int
    positions: tuple[int, ...]

    def redacted(self) -> "ReorderEvent":
        return self


Event = Union[DrawEvent, PlayEvent, DiscardEvent, HintEvent, ReorderEvent]


@dataclass(frozen=True, slots=True)
class Announcement:
    """An event together with the view its owner receives."""

    event: Event
    owner_view: Event

    @property
    def owner(self) -> int:
        return self.event.player

    def view_for(self, player_index: int) -> Event:
        """Return the projection visible to ``player_index``."""

        return self.owner_view if player_index == self.owner else self.event


def announce(event: Event) -> Announcement:
    """Build both projections of ``event``."""

    return Announcement(event=event, owner_view=event.redacted())


def ends_turn(event: Event) -> bool:
    """Return ``True`` for the single event that completes a player's turn."""

    return isinstance(event, (PlayEvent, DiscardEvent, HintEvent))
