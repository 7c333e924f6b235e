from __future__ import annotations
import pathlib
from typing import Optional

import typer
from rich import print

from .play import DIFFICULTY_COLORS, load_puzzle, load_settings

app = typer.Typer()

@app.command()
def main(day: Optional[str] = typer.Option(None, "--date", help="Puzzle date, YYYY-MM-DD"),
         file: Optional[pathlib.Path] = typer.Option(None, "--file", help="Puzzle JSON file"),
         debug: bool = False):
    """Print a puzzle's answers (spoilers)."""
    puzzle = load_puzzle(day, file, load_settings(debug))
    print(f"[bold]Puzzle[/]: #{puzzle.id} ({puzzle.print_date}), edited by {puzzle.editor or 'unknown'}")
    for category, difficulty in puzzle.with_difficulties():
        color = DIFFICULTY_COLORS[difficulty]
        print(f"[{color}]{difficulty.name.title():<16}[/] {category.title}: {', '.join(category.texts)}")

if __name__ == "__main__":
    app()
