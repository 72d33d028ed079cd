"""Exception hierarchy for Cohesion Lens."""

from .base import CohesionLensError
from .config import ConfigurationError, InvalidConfigError
from .metrics import MetricError, UnknownMetricError, UnsupportedParametersError
from .structure import MalformedClassStructureError, SkeletonFileError, StructureError

__all__ = [
    "CohesionLensError",
    "MetricError",
    "UnknownMetricError",
    "UnsupportedParametersError",
    "StructureError",
    "MalformedClassStructureError",
    "SkeletonFileError",
    "ConfigurationError",
    "InvalidConfigError",
]
