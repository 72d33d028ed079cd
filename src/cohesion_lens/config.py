"""Configuration loading and management for Cohesion Lens.

This is the parameter source for batch runs: which metrics to compute, which
methods parameterized metrics should look at, and how to run. Sources are
merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.cohesion-lens.toml)
    3. Project config (./cohesion-lens.toml)
    4. Explicit config file
    5. Environment variables (COHESION_* prefix)
    6. CLI overrides (passed as kwargs)

Example config file:

    metrics = ["LCOM", "LCOM4", "TCC"]
    include_private = true
    workers = 4

    [parameters.LCOM4]
    include_ctors = true

Example:
    >>> config = load_config(metrics=("LCOM",), include_static=True)
    >>> config.parameters_for(Metric.LCOM).include_static
    True
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_args, get_type_hints

from .exceptions import CohesionLensError, ConfigurationError, InvalidConfigError
from .logging_config import Verbosity
from .metrics.parameters import ParameterSet
from .metrics.registry import Metric, lookup

OutputFormat = Literal["rich", "json"]

ENV_PREFIX = "COHESION_"


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for a batch run.

    Attributes:
        Metric selection:
            metrics: Metric ids to compute (default: whole catalogue)

        Method selection (parameterized metrics only; None = library default):
            include_ctors: Count constructors as methods
            include_static: Count static methods
            include_private: Count private methods
            metric_parameters: Per-metric overrides, from [parameters.<ID>] tables

        Execution:
            workers: Thread count for batch runs (None = executor default)

        Output control:
            verbosity: Logging verbosity level
            output_format: "rich" table or "json"
    """

    metrics: tuple[str, ...] = tuple(m.value for m in Metric)

    include_ctors: Optional[bool] = None
    include_static: Optional[bool] = None
    include_private: Optional[bool] = None
    metric_parameters: dict[str, dict[str, bool]] = field(default_factory=dict)

    workers: Optional[int] = None

    verbosity: Verbosity = "normal"
    output_format: OutputFormat = "rich"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        object.__setattr__(self, "metrics", tuple(self.metrics))
        if not self.metrics:
            raise InvalidConfigError("metrics", self.metrics, "at least one metric is required")
        for metric_id in self.metrics:
            self._check_metric("metrics", metric_id)

        for key, overrides in self.metric_parameters.items():
            definition = self._check_metric("parameters", key)
            if not definition.accepts_parameters:
                raise InvalidConfigError(
                    f"parameters.{key}", overrides, f"{key} does not accept parameters"
                )
            self._check_parameters(f"parameters.{key}", overrides)

        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.verbosity not in get_args(Verbosity):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "must be quiet, normal or verbose"
            )
        if self.output_format not in get_args(OutputFormat):
            raise InvalidConfigError("output_format", self.output_format, "must be rich or json")

    @staticmethod
    def _check_metric(key: str, metric_id: str):
        try:
            return lookup(metric_id)
        except CohesionLensError as e:
            raise InvalidConfigError(key, metric_id, str(e)) from None

    @staticmethod
    def _check_parameters(key: str, overrides: Any) -> None:
        if not isinstance(overrides, dict):
            raise InvalidConfigError(key, overrides, "expected a table of booleans")
        try:
            ParameterSet.coerce(overrides)
        except CohesionLensError as e:
            raise InvalidConfigError(key, overrides, str(e)) from None

    @property
    def selected_metrics(self) -> tuple[Metric, ...]:
        return tuple(lookup(m).metric for m in self.metrics)

    @property
    def default_parameters(self) -> ParameterSet:
        """Run-wide method selection, before per-metric overrides."""
        return ParameterSet(
            include_ctors=self.include_ctors,
            include_static=self.include_static,
            include_private=self.include_private,
        )

    def parameters_for(self, metric: Metric) -> ParameterSet:
        """Parameters to pass for a metric; empty for metrics that take none."""
        if not lookup(metric).accepts_parameters:
            return ParameterSet()
        merged = self.default_parameters.to_dict()
        merged.update(
            {k: v for k, v in self.metric_parameters.get(metric.value, {}).items() if v is not None}
        )
        return ParameterSet(**merged)

    def parameter_map(self) -> dict[Metric, ParameterSet]:
        """parameters_for() for every selected metric."""
        return {metric: self.parameters_for(metric) for metric in self.selected_metrics}


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); None values
            are ignored so unset flags do not mask file settings

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is missing or invalid
        InvalidConfigError: If a merged value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".cohesion-lens.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "cohesion-lens.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update({k: v for k, v in overrides.items() if v is not None})

    # [parameters.<ID>] tables map onto metric_parameters
    parameters = merged.pop("parameters", None)
    if parameters is not None:
        if not isinstance(parameters, dict):
            raise InvalidConfigError("parameters", parameters, "expected [parameters.<ID>] tables")
        merged["metric_parameters"] = parameters

    if "metrics" in merged and isinstance(merged["metrics"], list):
        merged["metrics"] = tuple(merged["metrics"])

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from COHESION_* environment variables.

    Supported environment variables:
        COHESION_METRICS: comma-separated metric ids
        COHESION_INCLUDE_CTORS: bool (true/false/1/0)
        COHESION_INCLUDE_STATIC: bool
        COHESION_INCLUDE_PRIVATE: bool
        COHESION_WORKERS: int
        COHESION_VERBOSITY: quiet/normal/verbose
        COHESION_OUTPUT_FORMAT: rich/json

    Returns:
        Dict of field_name -> parsed_value for any COHESION_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        if field_name == "metric_parameters":
            continue
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e)) from None

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string into the field's type.

    Raises:
        ValueError: If value can't be parsed to the expected type
    """
    args = get_args(type_hint)
    if type(None) in args:
        # Optional[X]: parse as X
        type_hint = next(t for t in args if t is not type(None))

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if getattr(type_hint, "__origin__", None) is tuple:
        return tuple(part.strip() for part in value.split(",") if part.strip())

    # Literal types (verbosity, output format) and plain strings
    return value


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return the parsed dict.

    Raises:
        ConfigurationError: If the file can't be read or parsed
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}") from e
