"""Per-player hands made of numbered tile slots."""

from __future__ import annotations

from typing import Sequence

from .actions import HintAction
from .events import Event, ReorderEvent
from .rules import EmptyPositionError, IllegalActionError, PositionOutOfRangeError
from .tiles import Tile

__all__ = ["HandCollection"]


class HandCollection:
    """Ordered tile slots for every seated player.

    Slots are only left empty once the draw pile can no longer refill them.
    """

    def __init__(self, num_players: int, hand_size: int) -> None:
        self.hand_size = hand_size
        self._slots: list[list[Tile | None]] = [[None] * hand_size for _ in range(num_players)]

    def _hand(self, player: int) -> list[Tile | None]:
        if player < 0 or player >= len(self._slots):
            raise IllegalActionError(f"unknown player {player}")
        return self._slots[player]

    def draw(self, player: int, tile: Tile) -> int:
        """Put ``tile`` in the lowest empty slot and return that position."""

        hand = self._hand(player)
        for position, slot in enumerate(hand):
            if slot is None:
                hand[position] = tile
                return position
        raise IllegalActionError(f"hand of player {player} is already full")

    def get(self, player: int, position: int) -> Tile:
        hand = self._hand(player)
        if position < 0 or position >= self.hand_size:
            raise PositionOutOfRangeError(
                f"position {position} is outside a hand of {self.hand_size} tiles"
            )
        tile = hand[position]
        if tile is None:
            raise EmptyPositionError(f"position {position} of player {player} holds no tile")
        return tile

    def remove(self, player: int, position: int) -> Tile:
        """Take the tile out of ``position``, leaving the slot empty."""

        tile = self.get(player, position)
        self._slots[player][position] = None
        return tile

    def tiles(self, player: int) -> tuple[Tile | None, ...]:
        return tuple(self._hand(player))

    def occupied_positions(self, player: int) -> tuple[int, ...]:
        return tuple(position for position, tile in enumerate(self._hand(player)) if tile is not None)

    def positions_of_matching_tiles(self, action: HintAction) -> frozenset[int]:
        """Return the positions of ``action.target`` whose tile matches the hint."""

        return frozenset(
            position
            for position, tile in enumerate(self._hand(action.target))
            if tile is not None and action.hint.matches(tile)
        )

    def reorder(self, player: int, positions: Sequence[int]) -> None:
        """Move the tile from ``positions[i]`` into the i-th occupied slot."""

        hand = self._hand(player)
        occupied = self.occupied_positions(player)
        if sorted(positions) != list(occupied):
            raise IllegalActionError(
                f"cannot reorder positions {list(occupied)} of player {player} into {list(positions)}"
            )
        moved = [hand[source] for source in positions]
        for target, tile in zip(occupied, moved):
            hand[target] = tile

    def observe(self, event: Event) -> None:
        """Apply reorder events emitted by the game."""

        if isinstance(event, ReorderEvent):
            self.reorder(event.player, event.positions)

    def __repr__(self) -> str:
        hands = "; ".join(
            " ".join(tile.code if tile is not None else "--" for tile in hand) for hand in self._slots
        )
        return f"HandCollection({hands})"
