from __future__ import annotations

import pytest

from fireflower import state
from fireflower.events import Announcement, DrawEvent, announce
from fireflower.rules import ConfigurationError
from fireflower.tiles import Color, Tile


@pytest.mark.parametrize(
    ("num_players", "expected"),
    [
        (2, 5),
        (3, 5),
        (4, 4),
        (5, 4),
        (6, 4),
    ],
)
def test_hand_size_depends_on_player_count(num_players: int, expected: int) -> None:
    assert state.GameConfig(num_players=num_players).hand_size == expected


@pytest.mark.parametrize(
    "kwargs",
    [
        {"num_players": 1},
        {"num_players": 0},
        {"num_players": 2, "hand_size": 0},
        {"num_players": 2, "hint_tokens": -1},
        {"num_players": 2, "max_strikes": 0},
    ],
)
def test_invalid_configuration_is_rejected(kwargs: dict[str, int]) -> None:
    with pytest.raises(ConfigurationError):
        state.GameConfig(**kwargs)


def test_new_game_state_starts_empty() -> None:
    config = state.GameConfig(num_players=3, hint_tokens=6)
    game_state = state.new_game_state(config, [Tile(Color.RED, 1)])

    assert game_state.tokens.remaining == 6
    assert game_state.played.score() == 0
    assert game_state.hands.hand_size == 5
    assert game_state.draw_pile.has_more()
    assert not game_state.end_detector.is_game_over
    assert game_state.current_player == 0


def test_pipeline_order() -> None:
    assert state.EVENT_PIPELINE == (
        state.update_hands,
        state.append_to_queues,
        state.enforce_hint_tokens,
        state.detect_game_end,
    )


def test_dispatch_visits_in_pipeline_order(monkeypatch: pytest.MonkeyPatch) -> None:
    visited: list[str] = []

    def recorder(name: str):
        def visit(game_state: state.GameState, announcement: Announcement) -> None:
            visited.append(name)

        return visit

    monkeypatch.setattr(state, "EVENT_PIPELINE", (recorder("hands"), recorder("queues"), recorder("tokens"), recorder("end")))
    game_state = state.new_game_state(state.GameConfig(num_players=2), [])

    state.dispatch(game_state, announce(DrawEvent(0, Tile(Color.RED, 1))))

    assert visited == ["hands", "queues", "tokens", "end"]
