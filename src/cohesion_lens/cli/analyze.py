"""Analyze command: compute metrics for every class in a skeleton file."""

import json
from pathlib import Path
from typing import Optional

import click
import typer
from rich.table import Table

from ..batch import BatchResult, analyze_classes
from ..exceptions import CohesionLensError
from ..logging_config import setup_logging
from ..metrics.registry import lookup
from ..structure.loader import LoadResult, load_structures
from . import app
from ._common import console, format_value, resolve_config


@app.command()
def analyze(
    skeleton: Path = typer.Argument(
        ...,
        help="JSON class skeleton file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    metric: Optional[list[str]] = typer.Option(
        None,
        "--metric",
        "-m",
        help="Metric id to compute (repeatable, default: all)",
    ),
    include_ctors: Optional[bool] = typer.Option(
        None,
        "--include-ctors/--exclude-ctors",
        help="Count constructors as methods",
    ),
    include_static: Optional[bool] = typer.Option(
        None,
        "--include-static/--exclude-static",
        help="Count static methods",
    ),
    include_private: Optional[bool] = typer.Option(
        None,
        "--include-private/--exclude-private",
        help="Count private methods",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: rich | json",
        click_type=click.Choice(["rich", "json"], case_sensitive=False),
    ),
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Parallel workers (default: auto-detect)",
        min=1,
        max=32,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
):
    """
    Compute cohesion metrics for every class in a skeleton file.

    Exits with status 1 when a class or metric could not be computed.

    [bold cyan]Examples:[/bold cyan]

      cohesion-lens analyze classes.json

      cohesion-lens analyze classes.json -m LCOM4 -m TCC --include-private

      cohesion-lens analyze classes.json --format json
    """
    try:
        settings = resolve_config(
            config=config,
            metrics=metric,
            include_ctors=include_ctors,
            include_static=include_static,
            include_private=include_private,
            output_format=output_format.lower() if output_format else None,
            workers=workers,
            verbose=verbose,
            quiet=quiet,
        )
    except CohesionLensError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1)

    logger = setup_logging(settings.verbosity)
    logger.debug("Configuration: %s", settings)

    try:
        loaded = load_structures(skeleton)
        result = analyze_classes(
            loaded.structures,
            metrics=settings.selected_metrics,
            parameters=settings.parameter_map(),
            workers=settings.workers,
        )

    except CohesionLensError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if settings.output_format == "json":
        _output_json(result, loaded)
    else:
        _output_rich(result, loaded)

    if not (result.ok and loaded.ok):
        raise typer.Exit(1)


def _output_json(result: BatchResult, loaded: LoadResult) -> None:
    output = result.to_dict()
    output["rejected"] = [str(e) for e in loaded.errors]
    print(json.dumps(output, indent=2))


def _output_rich(result: BatchResult, loaded: LoadResult) -> None:
    console.print()
    console.print(
        f"[bold cyan]COHESION[/bold cyan] -- {len(result.scores)} classes, "
        f"{len(result.metrics)} metrics"
    )
    console.print()

    table = Table(show_header=True, show_lines=False, pad_edge=True)
    table.add_column("Class", style="bold", no_wrap=False, min_width=16)
    for metric in result.metrics:
        table.add_column(metric.value, justify="right")

    for name, scores in result.scores.items():
        by_metric = {s.metric: s for s in scores}
        cells = []
        for metric in result.metrics:
            score = by_metric.get(metric)
            cells.append("[red]error[/red]" if score is None else format_value(score.value))
        table.add_row(name, *cells)

    console.print(table)

    summary = result.summary()
    if summary:
        console.print()
        stats = Table(show_header=True, show_lines=False, pad_edge=True, title="Summary")
        stats.add_column("Metric", min_width=8)
        stats.add_column("Polarity")
        stats.add_column("Mean", justify="right")
        stats.add_column("Stdev", justify="right")
        stats.add_column("Min", justify="right")
        stats.add_column("Max", justify="right")
        for metric, s in summary.items():
            polarity = lookup(metric).polarity
            polarity_str = (
                "[green]high is good[/green]"
                if polarity == "high_is_good"
                else "[yellow]high is bad[/yellow]"
            )
            stats.add_row(
                metric.value,
                polarity_str,
                format_value(s.mean),
                format_value(s.stdev),
                format_value(s.minimum),
                format_value(s.maximum),
            )
        console.print(stats)

    if result.failures or loaded.errors:
        console.print()
        console.print(
            f"[red]{len(result.failures)} failed computations, "
            f"{len(loaded.errors)} rejected classes[/red]"
        )
        for failure in result.failures:
            console.print(f"  {failure.class_name} {failure.metric.value}: {failure.error}")
        for error in loaded.errors:
            console.print(f"  {error}")
    console.print()
