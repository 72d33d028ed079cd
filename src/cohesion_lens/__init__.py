"""
Cohesion Lens - class cohesion metrics for object-oriented code

Computes fifteen published cohesion metrics (LCOM family, TCC/LCC, CAMC, NHD,
SCOM, MWE, ...) over class skeletons and normalizes them into comparable
scores.
"""

__version__ = "0.1.0"

from .api import compute
from .batch import BatchResult, analyze_classes
from .metrics import (
    Metric,
    MetricDefinition,
    NormalizedScore,
    ParameterSet,
    all_metrics,
    lookup,
)
from .structure import Attribute, ClassStructure, Method, load_structures

__all__ = [
    "compute",  # Single class, single metric
    "analyze_classes",  # Many classes, many metrics
    "BatchResult",
    "lookup",
    "all_metrics",
    "Metric",
    "MetricDefinition",
    "NormalizedScore",
    "ParameterSet",
    "Attribute",
    "ClassStructure",
    "Method",
    "load_structures",
]
