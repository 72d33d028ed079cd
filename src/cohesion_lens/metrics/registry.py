"""Metric enum and registry: the closed catalogue of cohesion metrics.

Every metric is defined ONCE as an enum member and ONCE as a registry row.
The row says whether callers may pass method-selection parameters, and carries
the optional (mean, sigma) calibration used to squash raw values into [0, 1].

Usage:
    from cohesion_lens.metrics.registry import Metric, lookup, all_metrics

    definition = lookup("LCOM4")
    assert definition.accepts_parameters
    assert definition.calibration.sigma == -0.1

    for definition in all_metrics():   # declaration order
        ...

The registry is a read-only mapping built at import time. There is no
registration API: adding a metric means adding an enum member, a row below
and an algorithm in metrics/algorithms.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

from ..exceptions import UnknownMetricError

# ---------------------------------------------------------------------------
# Metric enum
# ---------------------------------------------------------------------------


class Metric(Enum):
    """Metric identifiers, in report order."""

    LCOM = "LCOM"
    CAMC = "CAMC"
    MMAC = "MMAC"
    LCOM5 = "LCOM5"
    LCOM4 = "LCOM4"
    NHD = "NHD"
    LCOM2 = "LCOM2"
    LCOM3 = "LCOM3"
    SCOM = "SCOM"
    OCC = "OCC"
    PCC = "PCC"
    TCC = "TCC"
    LCC = "LCC"
    CCM = "CCM"
    MWE = "MWE"


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Calibration:
    """Empirical centre and spread of a metric's raw values.

    sigma is a signed scale factor: a negative sigma means higher raw values
    are worse, and the normalized score falls as the raw value grows.
    """

    mean: float
    sigma: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.mean):
            raise ValueError(f"Calibration mean must be finite, got {self.mean}")
        if not math.isfinite(self.sigma) or self.sigma == 0:
            raise ValueError(f"Calibration sigma must be finite and non-zero, got {self.sigma}")


@dataclass(frozen=True)
class MetricDefinition:
    """Registry row for a single metric. Immutable once built.

    Attributes:
        metric: The Metric enum member this row describes.
        accepts_parameters: Whether callers may pass a ParameterSet.
        calibration: (mean, sigma) baseline, or None when the algorithm's
            output needs no rescaling.
        bounds: Documented (lower, upper) range of the raw value; upper may be
            math.inf for counting metrics.
        polarity: "high_is_good" for cohesion, "high_is_bad" for lack of cohesion.
        title: Human-readable name.
        reference: Publication the formula comes from.
    """

    metric: Metric
    accepts_parameters: bool
    calibration: Optional[Calibration]
    bounds: tuple[float, float]
    polarity: str
    title: str
    reference: str

    def __post_init__(self) -> None:
        lower, upper = self.bounds
        if not lower <= upper:
            raise ValueError(f"Invalid bounds {self.bounds} for {self.metric.value}")
        if self.polarity not in ("high_is_good", "high_is_bad"):
            raise ValueError(
                f"Invalid polarity '{self.polarity}' for {self.metric.value}. "
                f"Must be 'high_is_good' or 'high_is_bad'."
            )

    @property
    def id(self) -> str:
        return self.metric.value


def _define(
    metric: Metric,
    accepts_parameters: bool,
    mean: Optional[float],
    sigma: Optional[float],
    *,
    bounds: tuple[float, float],
    polarity: str,
    title: str,
    reference: str,
) -> MetricDefinition:
    """Build a row, rejecting a half-specified calibration."""
    if (mean is None) != (sigma is None):
        raise ValueError(f"{metric.value}: calibration needs both mean and sigma, or neither")
    calibration = Calibration(mean, sigma) if mean is not None and sigma is not None else None
    return MetricDefinition(
        metric=metric,
        accepts_parameters=accepts_parameters,
        calibration=calibration,
        bounds=bounds,
        polarity=polarity,
        title=title,
        reference=reference,
    )


UNIT = (0.0, 1.0)
COUNT = (0.0, math.inf)

_DEFINITIONS = (
    _define(
        Metric.LCOM, True, None, None,
        bounds=COUNT, polarity="high_is_bad",
        title="Lack of Cohesion in Methods",
        reference="Chidamber & Kemerer, A metrics suite for object oriented design (1994)",
    ),
    _define(
        Metric.CAMC, True, None, None,
        bounds=UNIT, polarity="high_is_good",
        title="Cohesion Among Methods of Classes",
        reference="Bansiya et al., A class cohesion metric for object-oriented designs (1999)",
    ),
    _define(
        Metric.MMAC, True, 0.5, 0.1,
        bounds=UNIT, polarity="high_is_good",
        title="Method-Method through Attributes Cohesion",
        reference="Dallal & Briand, A design-based cohesion metric for object-oriented classes (2007)",
    ),
    _define(
        Metric.LCOM5, True, 0.5, -0.1,
        bounds=(0.0, 2.0), polarity="high_is_bad",
        title="Lack of Cohesion in Methods 5",
        reference="Henderson-Sellers et al., Coupling and cohesion: towards a valid metrics suite (1996)",
    ),
    _define(
        Metric.LCOM4, True, 0.5, -0.1,
        bounds=COUNT, polarity="high_is_bad",
        title="Lack of Cohesion in Methods 4",
        reference="Hitz & Montazeri, Measuring coupling and cohesion in object-oriented systems (1995)",
    ),
    _define(
        Metric.NHD, False, None, None,
        bounds=UNIT, polarity="high_is_good",
        title="Normalized Hamming Distance",
        reference="Counsell et al., The interpretation and utility of three cohesion metrics (2006)",
    ),
    _define(
        Metric.LCOM2, True, None, None,
        bounds=UNIT, polarity="high_is_bad",
        title="Lack of Cohesion in Methods 2",
        reference="Henderson-Sellers et al., Coupling and cohesion: towards a valid metrics suite (1996)",
    ),
    _define(
        Metric.LCOM3, True, None, None,
        bounds=COUNT, polarity="high_is_bad",
        title="Lack of Cohesion in Methods 3",
        reference="Li & Henry, Object-oriented metrics that predict maintainability (1993)",
    ),
    _define(
        Metric.SCOM, True, None, None,
        bounds=UNIT, polarity="high_is_good",
        title="Sensitive Class Cohesion Metric",
        reference="Fernandez & Pena, A sensitive metric of class cohesion (2006)",
    ),
    _define(
        Metric.OCC, True, None, None,
        bounds=UNIT, polarity="high_is_good",
        title="Optimistic Class Cohesion",
        reference="Aman et al., A proposal of class cohesion metrics using sizes of cohesive parts (2002)",
    ),
    _define(
        Metric.PCC, False, None, None,
        bounds=UNIT, polarity="high_is_good",
        title="Pessimistic Class Cohesion",
        reference="Aman et al., A proposal of class cohesion metrics using sizes of cohesive parts (2002)",
    ),
    _define(
        Metric.TCC, False, None, None,
        bounds=UNIT, polarity="high_is_good",
        title="Tight Class Cohesion",
        reference="Bieman & Kang, Cohesion and reuse in an object-oriented system (1995)",
    ),
    _define(
        Metric.LCC, False, None, None,
        bounds=UNIT, polarity="high_is_good",
        title="Loose Class Cohesion",
        reference="Bieman & Kang, Cohesion and reuse in an object-oriented system (1995)",
    ),
    _define(
        Metric.CCM, False, None, None,
        bounds=UNIT, polarity="high_is_good",
        title="Class Connection Metric",
        reference="Washizaki et al., A component cohesion metric (2004)",
    ),
    _define(
        Metric.MWE, False, None, None,
        bounds=UNIT, polarity="high_is_good",
        title="Maximal Weighted Entropy",
        reference="Liu et al., Modeling class cohesion as mixtures of latent topics (2009)",
    ),
)


# ---------------------------------------------------------------------------
# Registry: read-only, populated once at import
# ---------------------------------------------------------------------------


REGISTRY: Mapping[Metric, MetricDefinition] = MappingProxyType(
    {definition.metric: definition for definition in _DEFINITIONS}
)


def lookup(metric_id: Union[str, Metric]) -> MetricDefinition:
    """Resolve a metric id (exact, case-sensitive) or enum member to its row.

    Raises:
        UnknownMetricError: If the id is not in the catalogue.
    """
    if isinstance(metric_id, Metric):
        return REGISTRY[metric_id]
    try:
        return REGISTRY[Metric(metric_id)]
    except ValueError:
        raise UnknownMetricError(str(metric_id), [m.value for m in Metric]) from None


def all_metrics() -> tuple[MetricDefinition, ...]:
    """Every definition, in declaration order."""
    return tuple(REGISTRY.values())


def parameterized_metrics() -> tuple[Metric, ...]:
    """Metrics that accept a ParameterSet."""
    return tuple(m for m, d in REGISTRY.items() if d.accepts_parameters)


def calibrated_metrics() -> tuple[Metric, ...]:
    """Metrics normalized through their (mean, sigma) baseline."""
    return tuple(m for m, d in REGISTRY.items() if d.calibration is not None)


def _validate_registry() -> None:
    """Verify every Metric enum member has exactly one row. Runs once at import."""
    if len(_DEFINITIONS) != len(REGISTRY):
        raise RuntimeError("Metric registry has duplicate rows")
    missing = set(Metric) - set(REGISTRY)
    if missing:
        names = sorted(m.value for m in missing)
        raise RuntimeError(f"Metric registry incomplete! Missing rows for: {names}")


_validate_registry()
