#!/usr/bin/env python3
"""Play the daily Connections puzzle in the terminal."""

from __future__ import annotations

import random
from datetime import date, datetime
from pathlib import Path
from typing import Dict, Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..client import load_daily_puzzle
from ..core.env import Settings, get_settings, load_env
from ..core.errors import FetchError, GameRejection, MalformedPuzzle
from ..game_loop import GameController
from ..puzzle import Difficulty, Puzzle
from ..selection import Direction, Status
from ..utils import parse_coord

app = typer.Typer()
console = Console()

DIFFICULTY_COLORS: Dict[Difficulty, str] = {
    Difficulty.STRAIGHTFORWARD: "yellow",
    Difficulty.MEDIUM: "green",
    Difficulty.HARD: "blue",
    Difficulty.TRICKY: "magenta",
}

MOVES = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

HELP = (
    "[dim]w/a/s/d move · x toggle at cursor · a1..d4 toggle cell · "
    "submit · clear · shuffle · restart · quit[/]"
)


def load_settings(debug: bool = False) -> Settings:
    """Read .env and the environment. Exits with status 1 on bad values."""
    seen = load_env()
    if debug:
        rprint({"env_keys_detected": seen})
    try:
        return get_settings()
    except ValueError as e:
        console.print(f"[red]Invalid configuration:[/] {e}")
        raise typer.Exit(1)


def load_puzzle(day: Optional[str], file: Optional[Path], settings: Settings) -> Puzzle:
    """Load a puzzle from a local JSON file, or fetch it for the given day."""
    try:
        if file is not None:
            return Puzzle.from_json(file.read_bytes())
        when = datetime.strptime(day, "%Y-%m-%d").date() if day else date.today()
        console.print(f"[cyan]Fetching puzzle for {when.isoformat()}...[/]")
        return load_daily_puzzle(when, base_url=settings.base_url, timeout=settings.timeout)
    except (FetchError, MalformedPuzzle, OSError, ValueError) as e:
        console.print(f"[red]Could not load puzzle:[/] {e}")
        raise typer.Exit(1)


def render(game: GameController) -> Table:
    table = Table(show_header=True, show_lines=True, header_style="bold")
    table.add_column("")
    for letter in "ABCD":
        table.add_column(letter, justify="center", min_width=12)

    for r, row in enumerate(game.snapshot()):
        cells = []
        for cell in row:
            text = escape(f"[ {cell.text} ]" if cell.is_cursor else cell.text)
            if cell.difficulty is not None:
                style = f"bold black on {DIFFICULTY_COLORS[cell.difficulty]}"
            elif cell.selected:
                style = "reverse"
            else:
                style = ""
            cells.append(f"[{style}]{text}[/]" if style else text)
        table.add_row(str(r + 1), *cells)
    return table


def show_state(game: GameController) -> None:
    console.print(render(game))
    dots = "● " * game.mistakes_remaining
    console.print(f"Mistakes remaining: {dots or '-'}")
    for category in game.puzzle.categories:
        if category in game.solved_categories:
            color = DIFFICULTY_COLORS[game.puzzle.difficulty_of(category)]
            console.print(f"  [{color}]■[/] {category.title}: {', '.join(category.texts)}")


def show_result(game: GameController) -> None:
    if game.status is Status.WON:
        console.rule("[bold green]Solved![/]")
    else:
        console.rule("[bold red]Out of mistakes[/]")
    for category, difficulty in game.puzzle.with_difficulties():
        color = DIFFICULTY_COLORS[difficulty]
        console.print(f"[{color}]{category.title}[/]: {', '.join(category.texts)}")


def handle(game: GameController, command: str) -> bool:
    """Apply one command. Returns False when the player quits."""
    if command in ("q", "quit", "exit"):
        return False
    if command in MOVES:
        game.move_cursor(MOVES[command])
    elif command in ("x", "toggle"):
        game.toggle_selection()
    elif command in ("submit", "enter", "go"):
        result = game.submit_guess()
        if result.correct:
            console.print(f"[green]Correct![/] {result.category.title}")
        elif result.one_away:
            console.print("[yellow]One away...[/]")
        else:
            console.print("[red]Not quite.[/]")
    elif command == "clear":
        game.clear_selection()
    elif command == "shuffle":
        game.reshuffle()
    elif command == "restart":
        game.restart()
    else:
        try:
            coord = parse_coord(command)
        except ValueError:
            console.print(f"[yellow]Unknown command:[/] {escape(command)}")
            return True
        game.toggle_selection(coord)
    return True


@app.command()
def main(
    day: Optional[str] = typer.Option(None, "--date", help="Puzzle date, YYYY-MM-DD (default: today)"),
    file: Optional[Path] = typer.Option(None, "--file", help="Play a puzzle JSON file instead of fetching"),
    max_mistakes: Optional[int] = typer.Option(None, min=1, help="Mistake budget (default from env or 4)"),
    seed: Optional[int] = typer.Option(None, help="Seed for reproducible shuffles"),
    debug: bool = False,
):
    """
    Play one Connections puzzle.

    Select four words that share a hidden connection and submit them.
    """
    settings = load_settings(debug)
    puzzle = load_puzzle(day, file, settings)
    budget = max_mistakes if max_mistakes is not None else settings.max_mistakes
    rng = random.Random(seed) if seed is not None else None
    game = GameController.new(puzzle, max_mistakes=budget, rng=rng)

    console.rule(f"[bold]Connections #{puzzle.id}[/] · {puzzle.print_date} · by {puzzle.editor}")
    console.print(HELP)

    while game.status is Status.IN_PROGRESS:
        show_state(game)
        try:
            command = console.input("> ").strip().lower()
        except EOFError:
            break
        try:
            if not handle(game, command):
                break
        except GameRejection as e:
            console.print(f"[yellow]{e}[/]")

    if game.status is not Status.IN_PROGRESS:
        show_result(game)


if __name__ == "__main__":
    app()
