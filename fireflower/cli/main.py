"""Typer entry-point wiring for the Fireflower CLI."""

from __future__ import annotations

import logging
import random

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .. import benchmark, tiles
from ..bots import RandomPlayer
from ..game import Game
from ..rules import IllegalActionError
from ..state import GameConfig
from .render import describe_event, render_history, render_outcome

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()

MAX_EVENT_LOG = 40


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def play(
    players: int = typer.Option(3, min=2, max=5, help="Number of seated players."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible games (omit for randomness)."),
    hint_probability: float = typer.Option(0.4, min=0.0, max=1.0, help="Chance a bot gives a hint."),
    play_probability: float = typer.Option(0.3, min=0.0, max=1.0, help="Chance a bot plays instead of discarding."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every event as it happens."),
) -> None:
    """Play a single game between random bots and show how it went."""

    _configure_logging(verbose)
    if seed is None:
        seed = random.randrange(2**32)
    config = GameConfig(num_players=players)
    rng = random.Random(seed)
    seats = [
        RandomPlayer(
            seat,
            players,
            rng,
            hint_probability=hint_probability,
            play_probability=play_probability,
            hand_size=config.hand_size,
        )
        for seat in range(players)
    ]
    game = Game(tiles.shuffled(seed), seats, config)
    try:
        game.run()
    except IllegalActionError as exc:
        console.print(f"[red]Game aborted:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    log = Table.grid(expand=True)
    log.add_column(justify="left")
    for event in seats[0].history[-MAX_EVENT_LOG:]:
        log.add_row(describe_event(event))
    console.print(Panel(log, title=f"Event log as seen by P0 (seed {seed})", border_style="cyan"))
    if game.outcome is not None:
        console.print(render_outcome(game.outcome, game.state.played.tops()))


@app.command("benchmark")
def benchmark_cli(
    games: int = typer.Option(10, min=1, help="Number of games to play."),
    players: int = typer.Option(3, min=2, max=5, help="Number of seated players."),
    seed: int = typer.Option(123, help="Random seed for the benchmark."),
    hint_probability: float = typer.Option(0.4, min=0.0, max=1.0, help="Chance a bot gives a hint."),
    play_probability: float = typer.Option(0.3, min=0.0, max=1.0, help="Chance a bot plays instead of discarding."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress while games run."),
) -> None:
    """Play many seeded games and summarise the scores."""

    _configure_logging(verbose)
    config = benchmark.BenchmarkConfig(
        games=games,
        num_players=players,
        seed=seed,
        hint_probability=hint_probability,
        play_probability=play_probability,
    )
    history = benchmark.run_games(config)
    console.print(render_history(history.games, history.statistics()))


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
