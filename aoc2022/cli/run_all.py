#!/usr/bin/env python3
"""Run every day that has puzzle text and tabulate the answers."""

from __future__ import annotations

from typing import List

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core import load_env, log_level as default_log_level, setup_logging
from ..runner import PARTS, PartResult, available_days, format_elapsed, load_day, solve_part
from ..utils import read_file, write_jsonl

app = typer.Typer()
console = Console()


def format_answer(result: PartResult) -> str:
    if result.answer is None:
        return "[dim]-[/]"
    return escape(str(result.answer))


@app.command()
def main(
    example: bool = typer.Option(False, help="Use the published examples instead of your inputs"),
    out: str = typer.Option(None, help="Write answers to this JSONL file"),
    days: List[int] = typer.Option(None, "--day", "-d", help="Only run these days"),
    log_level: str = typer.Option(None, help="Log level, defaults to AOC_LOG_LEVEL"),
):
    """
    Solve every available day and show a table of answers and timings.

    Example:
        python -m aoc2022.cli.run_all --example
        python -m aoc2022.cli.run_all --out data/answers.jsonl
    """
    load_env()
    try:
        setup_logging(log_level or default_log_level())
        for day in days or []:
            load_day(day)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(1)

    folder = "examples" if example else "inputs"
    console.rule(f"[bold cyan]Advent of Code 2022 ({folder})")

    table = Table(title="Answers", show_lines=True)
    table.add_column("Day", justify="right", style="bold")
    table.add_column("Part", justify="right")
    table.add_column("Answer")
    table.add_column("Time", justify="right")

    results: List[PartResult] = []
    failures = 0
    for day in days or available_days():
        try:
            text = read_file(folder, day)
        except FileNotFoundError:
            console.print(f"[yellow]Skipping day {day}: no {folder} file[/]")
            continue

        for part in PARTS:
            try:
                result = solve_part(day, part, text, example=example)
            except (ValueError, RuntimeError) as e:
                console.print(f"[red]Day {day} part {part} failed:[/] {escape(str(e))}")
                failures += 1
                continue
            results.append(result)
            table.add_row(str(day), str(part), format_answer(result), format_elapsed(result.elapsed))

    console.print(table)
    total = sum(r.elapsed for r in results)
    console.print(f"⏱  {len(results)} parts solved in {format_elapsed(total)}")

    if out:
        write_jsonl(out, ({"day": r.day, "part": r.part, "answer": r.answer} for r in results))
        console.print(f"\n✓ Answers written to: {out}")

    if failures:
        raise typer.Exit(1)


def cli():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    cli()
