"""Mathematical utilities for cohesion analysis."""

from .entropy import Entropy
from .graph import GraphMetrics
from .statistics import Statistics

__all__ = [
    "Entropy",
    "GraphMetrics",
    "Statistics",
]
