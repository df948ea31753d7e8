"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Mapping, Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from ..endgame import GameOutcome
from ..events import DiscardEvent, DrawEvent, Event, HintEvent, PlayEvent, ReorderEvent
from ..scoreboard import GameSummary, ScoreStatistics
from ..tiles import Color, Tile

_COLOR_STYLES = {
    Color.RED: "red",
    Color.YELLOW: "yellow",
    Color.GREEN: "green",
    Color.BLUE: "blue",
    Color.WHITE: "white",
}


def format_tile(tile: Tile | None) -> str:
    """Return a Rich-rendered label for ``tile``."""

    if tile is None:
        return "[dim]??[/dim]"
    style = _COLOR_STYLES[tile.color]
    return f"[{style}]{tile.code}[/{style}]"


def describe_event(event: Event) -> str:
    """Return a one-line description of ``event``."""

    actor = f"[cyan]P{event.player}[/cyan]"
    if isinstance(event, DrawEvent):
        return f"{actor} draws {format_tile(event.tile)}"
    if isinstance(event, PlayEvent):
        verdict = "[green]success[/green]" if event.successful else "[red]strike[/red]"
        return f"{actor} plays {format_tile(event.tile)} from slot {event.position} ({verdict})"
    if isinstance(event, DiscardEvent):
        return f"{actor} discards {format_tile(event.tile)} from slot {event.position}"
    if isinstance(event, HintEvent):
        positions = ", ".join(str(position) for position in sorted(event.positions)) or "none"
        return f"{actor} hints P{event.target} {event.hint!r}: slots {positions}"
    if isinstance(event, ReorderEvent):
        return f"{actor} reorders hand to {list(event.positions)}"
    return repr(event)


def render_fireworks(tops: Mapping[Color, int]) -> RenderableType:
    """Return a panel showing the top rank of every color."""

    table = Table(box=box.SIMPLE, expand=True)
    for color in Color:
        table.add_column(color.name.title(), justify="center", style=_COLOR_STYLES[color])
    table.add_row(*(str(tops[color]) for color in Color))
    return Panel(table, title="Fireworks", border_style="magenta")


def render_outcome(outcome: GameOutcome, tops: Mapping[Color, int]) -> RenderableType:
    """Return a summary of a finished game."""

    grid = Table.grid(expand=True)
    grid.add_column(justify="left")
    reason = outcome.reason.value.replace("_", " ") if outcome.reason else "unfinished"
    grid.add_row(f"[cyan]Score[/cyan]: [bold]{outcome.score}[/bold]")
    grid.add_row(f"[cyan]Ended by[/cyan]: {reason}")
    grid.add_row(f"[cyan]Turns[/cyan]: {outcome.turns}")
    grid.add_row(f"[cyan]Strikes[/cyan]: {outcome.strikes}")
    return Group(render_fireworks(tops), Panel(grid, title="Outcome", box=box.SQUARE, border_style="blue"))


def render_history(games: Sequence[GameSummary], stats: ScoreStatistics) -> RenderableType:
    """Return a table of every game followed by aggregate statistics."""

    table = Table(box=box.ROUNDED, expand=True)
    table.add_column("Game", justify="right", style="bold")
    table.add_column("Seed", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Ended by", justify="left")
    table.add_column("Turns", justify="right")
    table.add_column("Strikes", justify="right")
    for summary in games:
        outcome = summary.outcome
        table.add_row(
            str(summary.game_number),
            str(summary.seed),
            str(outcome.score),
            outcome.reason.value if outcome.reason else "-",
            str(outcome.turns),
            str(outcome.strikes),
        )

    grid = Table.grid(expand=True)
    grid.add_column(justify="left")
    grid.add_row(f"[cyan]Games[/cyan]: {stats.games}")
    grid.add_row(f"[cyan]Mean[/cyan]: {stats.mean:.2f} ± {stats.std:.2f}")
    grid.add_row(f"[cyan]Best / worst[/cyan]: {stats.best} / {stats.worst}")
    grid.add_row(f"[cyan]Perfect games[/cyan]: {stats.perfect_games}")
    grid.add_row(f"[cyan]Strike-outs[/cyan]: {stats.strike_outs}")
    spread = ", ".join(f"{score}×{count}" for score, count in enumerate(stats.histogram) if count)
    grid.add_row(f"[cyan]Scores[/cyan]: {spread}")
    return Group(table, Panel(grid, title="Summary", box=box.SQUARE, border_style="green"))
