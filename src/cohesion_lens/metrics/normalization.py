"""Normalization of raw metric values into comparable scores.

Two paths, chosen by the metric's registry row:

    no calibration   value = clamp(raw, definition.bounds)          (pass-through)
    calibration      value = logistic((raw - mean) / sigma), in [0, 1]

sigma is signed. With a negative sigma (LCOM4, LCOM5) the z-score flips, so a
raw value above the mean lands below 0.5 and the score falls as raw grows.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from ..math.statistics import Statistics
from .registry import Metric, MetricDefinition


@dataclass(frozen=True)
class NormalizedScore:
    """A metric's reported score for one class, with the raw value kept for reports."""

    metric: Metric
    value: float
    raw: float
    calibrated: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "metric": self.metric.value,
            "value": self.value,
            "raw": self.raw,
            "calibrated": self.calibrated,
        }


def normalize(raw: float, definition: MetricDefinition) -> NormalizedScore:
    """Turn a raw algorithm output into a NormalizedScore.

    Pure: the same (raw, definition) always yields the same score.

    Raises:
        ValueError: If raw is NaN.
    """
    raw = float(raw)
    if math.isnan(raw):
        raise ValueError(f"{definition.id}: raw value is NaN")

    calibration = definition.calibration
    if calibration is None:
        lower, upper = definition.bounds
        return NormalizedScore(
            metric=definition.metric, value=Statistics.clamp(raw, lower, upper), raw=raw
        )

    z = Statistics.z_score(raw, calibration.mean, calibration.sigma)
    value = Statistics.clamp(Statistics.logistic(z), 0.0, 1.0)
    return NormalizedScore(metric=definition.metric, value=value, raw=raw, calibrated=True)
