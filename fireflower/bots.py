"""Sample players used by the command line tools and the tests."""

from __future__ import annotations

import random
from typing import Iterable, Iterator, Sequence

from .actions import Action, ColorHint, DiscardAction, HintAction, PlayAction, RankHint, keep_order
from .events import DiscardEvent, DrawEvent, Event, PlayEvent
from .rules import MAX_RANK, MAX_STRIKES, NUMBER_OF_HINT_TOKENS, EndGameFromTest, hand_size_for
from .tiles import Color
from .tokens import HintCountEnforcer

__all__ = ["TrackingPlayer", "ScriptedPlayer", "RandomPlayer"]


class TrackingPlayer:
    """Base player that keeps track of what it has been told.

    Only public information is tracked: which of its own slots hold a tile, the hint
    token count, and the number of failed plays.
    """

    def __init__(
        self,
        seat: int,
        num_players: int,
        *,
        hand_size: int | None = None,
        hint_tokens: int = NUMBER_OF_HINT_TOKENS,
    ) -> None:
        self.seat = seat
        self.num_players = num_players
        self.hand_size = hand_size if hand_size is not None else hand_size_for(num_players)
        self.tokens = HintCountEnforcer(hint_tokens)
        self.strikes = 0
        self.history: list[Event] = []
        self._occupied = [False] * self.hand_size

    def absorb(self, events: Iterable[Event]) -> list[Event]:
        """Fold ``events`` into the tracked knowledge and return them."""

        received = list(events)
        for event in received:
            self.tokens.observe(event)
            if isinstance(event, PlayEvent) and not event.successful:
                self.strikes += 1
            if event.player != self.seat:
                continue
            if isinstance(event, DrawEvent):
                self._occupied[self._occupied.index(False)] = True
            elif isinstance(event, (PlayEvent, DiscardEvent)):
                self._occupied[event.position] = False
        self.history.extend(received)
        return received

    def occupied_positions(self) -> tuple[int, ...]:
        return tuple(position for position, held in enumerate(self._occupied) if held)

    def receive_hint(self, events: Iterator[Event]) -> Sequence[int]:
        self.absorb(events)
        return keep_order(self.occupied_positions())


class ScriptedPlayer(TrackingPlayer):
    """Plays a fixed list of actions, then stops the game."""

    def __init__(
        self,
        seat: int,
        num_players: int,
        actions: Iterable[Action],
        *,
        reorders: Iterable[Sequence[int]] = (),
        hand_size: int | None = None,
        hint_tokens: int = NUMBER_OF_HINT_TOKENS,
    ) -> None:
        super().__init__(seat, num_players, hand_size=hand_size, hint_tokens=hint_tokens)
        self._actions = iter(actions)
        self._reorders = iter(reorders)
        self.deliveries: list[list[Event]] = []

    def take_turn(self, events: Iterator[Event]) -> Action:
        self.deliveries.append(self.absorb(events))
        action = next(self._actions, None)
        if action is None:
            raise EndGameFromTest(f"player {self.seat} has run out of scripted actions")
        return action

    def receive_hint(self, events: Iterator[Event]) -> Sequence[int]:
        self.deliveries.append(self.absorb(events))
        order = next(self._reorders, None)
        if order is None:
            return keep_order(self.occupied_positions())
        return order


class RandomPlayer(TrackingPlayer):
    """Chooses random legal actions from a seeded generator.

    Plays are only attempted while a failed play would not end the game.
    """

    def __init__(
        self,
        seat: int,
        num_players: int,
        rng: random.Random,
        *,
        hint_probability: float = 0.4,
        play_probability: float = 0.3,
        hand_size: int | None = None,
        hint_tokens: int = NUMBER_OF_HINT_TOKENS,
        max_strikes: int = MAX_STRIKES,
    ) -> None:
        super().__init__(seat, num_players, hand_size=hand_size, hint_tokens=hint_tokens)
        self.rng = rng
        self.hint_probability = hint_probability
        self.play_probability = play_probability
        self.max_strikes = max_strikes

    def take_turn(self, events: Iterator[Event]) -> Action:
        self.absorb(events)
        if self.tokens.can_hint() and self.rng.random() < self.hint_probability:
            target = self.rng.choice([seat for seat in range(self.num_players) if seat != self.seat])
            if self.rng.random() < 0.5:
                return HintAction(target, ColorHint(self.rng.choice(list(Color))))
            return HintAction(target, RankHint(self.rng.randint(1, MAX_RANK)))
        position = self.rng.choice(self.occupied_positions())
        if self.strikes < self.max_strikes - 1 and self.rng.random() < self.play_probability:
            return PlayAction(position)
        return DiscardAction(position)
