"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    metrics: Optional[list[str]] = None,
    include_ctors: Optional[bool] = None,
    include_static: Optional[bool] = None,
    include_private: Optional[bool] = None,
    output_format: Optional[str] = None,
    workers: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build config from CLI options."""
    return load_config(
        config_file=config,
        metrics=tuple(metrics) if metrics else None,
        include_ctors=include_ctors,
        include_static=include_static,
        include_private=include_private,
        output_format=output_format,
        workers=workers,
        verbose=verbose,
        quiet=quiet,
    )


def format_value(value: float) -> str:
    if value == float("inf"):
        return "inf"
    return f"{value:.3f}"
