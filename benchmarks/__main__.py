"""Entry point for benchmarks CLI."""

import statistics
from typing import Annotated

import typer
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.table import Table
from rich.text import Text

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._registery import (
    BENCHMARK_REGISTRY,
    CONSOLE,
    BenchmarkPair,
    BenchmarkResult,
    bench_one,
    categories,
    pair_benchmarks,
)

app = typer.Typer(help="Benchmarks for optres: combinators vs plain Python.")


def _run_pairs(pairs: list[BenchmarkPair], scale: int) -> list[BenchmarkResult]:
    results: list[BenchmarkResult] = []
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=len(pairs))
        for pair in pairs:
            progress.update(
                task, description=f"[cyan]{pair.meta.category}: {pair.meta.name}"
            )
            results.append(bench_one(pair, scale))
            progress.advance(task)
    return results


def _display_results(results: list[BenchmarkResult]) -> None:
    table = Table(title="optres Benchmark Results (optres vs plain Python)")
    table.add_column("Category", style="cyan")
    table.add_column("Operation", style="white")
    table.add_column("optres (s, median)", justify="right", style="green")
    table.add_column("plain (s, median)", justify="right", style="yellow")
    table.add_column("Overhead", justify="right")

    for result in results:
        overhead_style = "green bold" if result.overhead < 2 else "red bold"
        table.add_row(
            result.category,
            result.name,
            f"{result.optres_median:.6f}",
            f"{result.plain_median:.6f}",
            Text(f"{result.overhead:.2f}x", style=overhead_style),
        )

    CONSOLE.print(table)
    CONSOLE.print()
    median_overhead = statistics.median(r.overhead for r in results)
    CONSOLE.print(
        Text("Median overhead: ", style="bold")
        + Text(f"{median_overhead:.2f}x", style="green bold")
    )


@app.command("all")
def all_benchmarks(
    *,
    scale: Annotated[
        int,
        typer.Option("--scale", min=1, help="Divide iteration counts to shorten the run."),
    ] = 1,
    category: Annotated[
        str | None,
        typer.Option("--category", help="Only run benchmarks of this category."),
    ] = None,
) -> None:
    """Run every paired benchmark and display the results."""
    pairs = pair_benchmarks(BENCHMARK_REGISTRY, category)
    if not pairs:
        CONSOLE.print("No benchmarks to run!", style="bold red")
        raise typer.Exit(code=1)
    CONSOLE.print("Running optres benchmarks...", style="bold blue")
    _display_results(_run_pairs(pairs, scale))


@app.command("list")
def list_benchmarks() -> None:
    """List the registered benchmarks by category."""
    for cat in categories(BENCHMARK_REGISTRY.values()):
        CONSOLE.print(cat, style="bold cyan")
        for meta in BENCHMARK_REGISTRY.values():
            if meta.category == cat:
                CONSOLE.print(
                    f"  {meta.name} ({meta.implementation}, {meta.cost.name})"
                )


if __name__ == "__main__":
    app()
