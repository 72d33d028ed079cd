"""Metric-related exceptions: unknown ids, parameter misuse."""

from typing import Iterable

from .base import CohesionLensError


class MetricError(CohesionLensError):
    """Base class for metric lookup and invocation errors."""

    pass


class UnknownMetricError(MetricError):
    """Raised when a metric id is not part of the fixed catalogue."""

    def __init__(self, metric_id: str, known: Iterable[str] = ()):
        known_list = list(known)
        details = {"metric": str(metric_id)}
        if known_list:
            details["known"] = ", ".join(known_list)
        super().__init__(f"Unknown metric: {metric_id!r}", details=details)
        self.metric_id = metric_id
        self.known = known_list


class UnsupportedParametersError(MetricError):
    """Raised when parameters are supplied that a metric cannot take."""

    def __init__(self, metric_id: str, parameters: Iterable[str], reason: str):
        names = sorted(parameters)
        super().__init__(
            f"Unsupported parameters for {metric_id}",
            details={"parameters": ", ".join(names), "reason": reason},
        )
        self.metric_id = metric_id
        self.parameters = names
        self.reason = reason
