"""Hint token accounting."""

from __future__ import annotations

from .events import DiscardEvent, Event, HintEvent, PlayEvent
from .rules import MAX_RANK, NUMBER_OF_HINT_TOKENS, NoHintTokensError

__all__ = ["HintCountEnforcer"]


class HintCountEnforcer:
    """Keeps the number of hint tokens within ``[0, maximum]``."""

    __slots__ = ("maximum", "_remaining")

    def __init__(self, maximum: int = NUMBER_OF_HINT_TOKENS) -> None:
        self.maximum = maximum
        self._remaining = maximum

    @property
    def remaining(self) -> int:
        return self._remaining

    def can_hint(self) -> bool:
        return self._remaining > 0

    def observe(self, event: Event) -> None:
        if isinstance(event, HintEvent):
            if self._remaining == 0:
                raise NoHintTokensError(f"player {event.player} gave a hint with no hint tokens left")
            self._remaining -= 1
        elif isinstance(event, DiscardEvent):
            self._regain()
        elif isinstance(event, PlayEvent) and event.successful and event.tile.rank == MAX_RANK:
            self._regain()

    def _regain(self) -> None:
        self._remaining = min(self.maximum, self._remaining + 1)

    def __repr__(self) -> str:
        return f"HintCountEnforcer(remaining={self._remaining}, maximum={self.maximum})"
