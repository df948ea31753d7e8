"""Per-player queues of the events each player is entitled to see."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from .events import Announcement, Event

__all__ = ["EventQueueCollection"]


class EventQueueCollection:
    """Ordered, append-only event queues drained whenever a player reads them."""

    def __init__(self, num_players: int) -> None:
        self._queues: list[deque[Event]] = [deque() for _ in range(num_players)]

    def observe(self, announcement: Announcement) -> None:
        """Append the view of ``announcement`` each player is allowed to see."""

        for player_index, queue in enumerate(self._queues):
            queue.append(announcement.view_for(player_index))

    def events_for(self, player: int) -> Iterator[Event]:
        """Hand over everything ``player`` has been told since the last read."""

        queue = self._queues[player]
        delivered = tuple(queue)
        queue.clear()
        return iter(delivered)

    def pending(self, player: int) -> int:
        return len(self._queues[player])
