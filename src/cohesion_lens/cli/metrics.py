"""Metrics command: list the metric catalogue."""

import json
import math

import typer
from rich.table import Table

from ..metrics.registry import all_metrics
from . import app
from ._common import console


@app.command()
def metrics(
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
):
    """
    List every metric with its parameters, calibration and range.

    [bold cyan]Examples:[/bold cyan]

      cohesion-lens metrics

      cohesion-lens metrics --json
    """
    definitions = all_metrics()

    if json_output:
        print(
            json.dumps(
                [
                    {
                        "id": d.id,
                        "title": d.title,
                        "accepts_parameters": d.accepts_parameters,
                        "calibration": None
                        if d.calibration is None
                        else {"mean": d.calibration.mean, "sigma": d.calibration.sigma},
                        "bounds": [d.bounds[0], None if math.isinf(d.bounds[1]) else d.bounds[1]],
                        "polarity": d.polarity,
                        "reference": d.reference,
                    }
                    for d in definitions
                ],
                indent=2,
            )
        )
        return

    table = Table(show_header=True, show_lines=False, pad_edge=True)
    table.add_column("Id", style="bold")
    table.add_column("Title", no_wrap=False)
    table.add_column("Params")
    table.add_column("Calibration")
    table.add_column("Range")
    table.add_column("Polarity")

    for d in definitions:
        calibration = (
            "[dim]--[/dim]"
            if d.calibration is None
            else f"mean={d.calibration.mean:g} sigma={d.calibration.sigma:g}"
        )
        upper = "inf" if math.isinf(d.bounds[1]) else f"{d.bounds[1]:g}"
        table.add_row(
            d.id,
            d.title,
            "[green]yes[/green]" if d.accepts_parameters else "[dim]no[/dim]",
            calibration,
            f"[{d.bounds[0]:g}, {upper}]",
            d.polarity.replace("_", " "),
        )

    console.print(table)
