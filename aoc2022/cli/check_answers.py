#!/usr/bin/env python3
"""Re-solve recorded answers and report any that no longer match."""

from __future__ import annotations

from pathlib import Path
from typing import Dict

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core import load_env, log_level as default_log_level, setup_logging
from ..runner import solve_part
from ..utils import read_file, read_jsonl

app = typer.Typer()
console = Console()


@app.command()
def main(
    answers_path: str = typer.Argument(..., help="JSONL file written by aoc-all --out"),
    example: bool = typer.Option(False, help="Check against the published examples"),
    log_level: str = typer.Option(None, help="Log level, defaults to AOC_LOG_LEVEL"),
):
    """
    Compare every recorded answer with a fresh solve. Exits 1 on any mismatch.
    """
    load_env()
    try:
        setup_logging(log_level or default_log_level())
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(1)

    if not Path(answers_path).exists():
        console.print(f"[red]No answers file at[/] {answers_path}")
        raise typer.Exit(1)

    folder = "examples" if example else "inputs"
    console.rule("[bold cyan]Answer Check")

    table = Table(title="Recorded vs Solved", show_lines=True)
    table.add_column("Day", justify="right", style="bold")
    table.add_column("Part", justify="right")
    table.add_column("Expected")
    table.add_column("Actual")
    table.add_column("Status")

    texts: Dict[int, str] = {}
    checked = 0
    mismatches = 0
    for row in read_jsonl(answers_path):
        try:
            day, part, expected = int(row["day"]), int(row["part"]), row.get("answer")
        except (KeyError, TypeError, ValueError):
            console.print(f"[red]Malformed answer row:[/] {escape(str(row))}")
            raise typer.Exit(1)

        try:
            if day not in texts:
                texts[day] = read_file(folder, day)
            actual = solve_part(day, part, texts[day], example=example).answer
            ok = actual == expected
            shown = escape(str(actual))
        except (FileNotFoundError, ValueError, RuntimeError) as e:
            ok = False
            shown = f"[red]{escape(str(e))}[/]"

        checked += 1
        if not ok:
            mismatches += 1
        table.add_row(
            str(day),
            str(part),
            escape(str(expected)),
            shown,
            "[green]✓ pass[/]" if ok else "[red]✗ fail[/]",
        )

    console.print(table)
    colour = "green" if not mismatches else "red"
    console.print(f"[{colour}]{checked - mismatches}/{checked} answers match[/]")

    if mismatches:
        raise typer.Exit(1)


def cli():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    cli()
