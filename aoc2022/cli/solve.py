#!/usr/bin/env python3
"""Solve a single day against your input or the published example."""

from __future__ import annotations

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape

from ..core import load_env, log_level as default_log_level, setup_logging
from ..runner import PARTS, format_elapsed, solve_part
from ..utils import read_file

app = typer.Typer()
console = Console()


@app.command()
def main(
    day: int = typer.Argument(..., help="Day to solve (1-25)"),
    part: int = typer.Option(None, help="Only solve this part (1 or 2)"),
    example: bool = typer.Option(False, help="Use the published example instead of your input"),
    log_level: str = typer.Option(None, help="Log level, defaults to AOC_LOG_LEVEL"),
    log_file: str = typer.Option(None, help="Also write the log to this file"),
    debug: bool = False,
):
    """
    Solve one day, or one part of it.

    Example:
        python -m aoc2022.cli.solve 9
        python -m aoc2022.cli.solve 15 --part 2 --example
    """
    seen = load_env()
    try:
        setup_logging(log_level or default_log_level(), log_file)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(1)
    if debug:
        rprint({"env_keys_detected": seen})

    folder = "examples" if example else "inputs"
    parts = [part] if part is not None else list(PARTS)

    try:
        text = read_file(folder, day)
        for p in parts:
            result = solve_part(day, p, text, example=example)
            console.rule(f"🎄 Part {p} 🎄")
            # multi-line answers (the CRT) are printed as they are
            console.print(str(result.answer), markup=False, highlight=False)
            console.print(f"[dim]({format_elapsed(result.elapsed)})[/]")
    except (FileNotFoundError, ValueError, RuntimeError) as e:
        console.print(f"[red]Day {day} failed:[/] {escape(str(e))}")
        raise typer.Exit(1)


def cli():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    cli()
