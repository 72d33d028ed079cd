"""Metric catalogue, algorithms, parameters and normalization."""

from .algorithms import ALGORITHMS, algorithm_for
from .normalization import NormalizedScore, normalize
from .parameters import DEFAULT_PARAMETERS, EMPTY_PARAMETERS, ParameterSet
from .registry import (
    REGISTRY,
    Calibration,
    Metric,
    MetricDefinition,
    all_metrics,
    calibrated_metrics,
    lookup,
    parameterized_metrics,
)

__all__ = [
    "ALGORITHMS",
    "algorithm_for",
    "NormalizedScore",
    "normalize",
    "DEFAULT_PARAMETERS",
    "EMPTY_PARAMETERS",
    "ParameterSet",
    "REGISTRY",
    "Calibration",
    "Metric",
    "MetricDefinition",
    "all_metrics",
    "calibrated_metrics",
    "lookup",
    "parameterized_metrics",
]
