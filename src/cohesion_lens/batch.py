"""Batch evaluation of many classes against many metrics.

The facade (api.compute) raises on the first problem. This module is the
batch-oriented caller: one bad (class, metric) pair is logged and recorded as
a BatchFailure while the rest of the batch carries on.

Metric ids are resolved before any work starts, so a typo in the metric list
aborts immediately with UnknownMetricError instead of failing every class.
The same goes for a run-wide parameter mapping and for repeated class names.
"""

from __future__ import annotations

import concurrent.futures
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from .api import compute
from .exceptions import CohesionLensError, MalformedClassStructureError
from .logging_config import get_logger
from .math.statistics import Statistics
from .metrics.normalization import NormalizedScore
from .metrics.parameters import ParameterSet
from .metrics.registry import Metric, MetricDefinition, all_metrics, lookup
from .structure.models import ClassStructure

logger = get_logger(__name__)

ParameterSource = Union[None, ParameterSet, Mapping[Any, Any]]


@dataclass(frozen=True)
class BatchFailure:
    """A (class, metric) pair that could not be computed."""

    class_name: str
    metric: Metric
    error: CohesionLensError

    def to_dict(self) -> dict[str, Any]:
        return {
            "class": self.class_name,
            "metric": self.metric.value,
            "error": str(self.error),
        }


@dataclass(frozen=True)
class MetricSummary:
    """Distribution of one metric's normalized values over a batch."""

    metric: Metric
    count: int
    mean: float
    stdev: float
    minimum: float
    maximum: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "metric": self.metric.value,
            "count": self.count,
            "mean": self.mean,
            "stdev": self.stdev,
            "min": self.minimum,
            "max": self.maximum,
        }


@dataclass
class BatchResult:
    """Scores per class (input order) and every recorded failure."""

    metrics: tuple[Metric, ...]
    scores: dict[str, tuple[NormalizedScore, ...]] = field(default_factory=dict)
    failures: list[BatchFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def summary(self) -> dict[Metric, MetricSummary]:
        return summarize(self.scores.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "metrics": [m.value for m in self.metrics],
            "classes": {
                name: [s.to_dict() for s in scores] for name, scores in self.scores.items()
            },
            "summary": [s.to_dict() for s in self.summary().values()],
            "failures": [f.to_dict() for f in self.failures],
        }


def analyze_classes(
    structures: Iterable[ClassStructure],
    metrics: Optional[Sequence[Union[str, Metric]]] = None,
    parameters: ParameterSource = None,
    workers: Optional[int] = None,
) -> BatchResult:
    """
    Compute every requested metric for every class.

    Args:
        structures: Class snapshots with unique names
        metrics: Metric ids to compute, default the whole catalogue
        parameters: One parameter set for every parameterized metric (a
            ParameterSet or a plain mapping such as {"include_ctors": True}),
            or a per-metric table keyed by Metric or metric id. A run-wide set
            never reaches metrics that take no parameters; a non-empty table
            entry for one is recorded as a failure.
        workers: Thread count; None lets the executor decide, 1 runs inline

    Returns:
        BatchResult with scores in input order and recorded failures

    Raises:
        UnknownMetricError: If a requested metric id is unknown
        UnsupportedParametersError: If a run-wide parameter mapping is invalid,
            including a mapping that mixes metric ids with parameter names
        MalformedClassStructureError: If two classes share a name
    """
    definitions = (
        all_metrics() if metrics is None else tuple(lookup(m) for m in metrics)
    )
    resolved = _resolve_parameters(parameters)
    structures = list(structures)
    _check_unique_names(structures)
    result = BatchResult(metrics=tuple(d.metric for d in definitions))

    def run(structure: ClassStructure) -> tuple[list[NormalizedScore], list[BatchFailure]]:
        return _analyze_one(structure, definitions, resolved)

    if workers == 1 or len(structures) <= 1:
        outcomes = [run(s) for s in structures]
    else:
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
            outcomes = list(executor.map(run, structures))

    for structure, (scores, failures) in zip(structures, outcomes):
        result.scores[structure.name] = tuple(scores)
        result.failures.extend(failures)

    logger.info(
        "Analyzed %d classes x %d metrics (%d failures)",
        len(structures),
        len(definitions),
        len(result.failures),
    )
    return result


def _check_unique_names(structures: Sequence[ClassStructure]) -> None:
    seen: set[str] = set()
    for structure in structures:
        if structure.name in seen:
            raise MalformedClassStructureError(
                structure.name, "class name appears more than once in the batch"
            )
        seen.add(structure.name)


def _analyze_one(
    structure: ClassStructure,
    definitions: Sequence[MetricDefinition],
    parameters: Union[None, ParameterSet, dict[Metric, Any]],
) -> tuple[list[NormalizedScore], list[BatchFailure]]:
    scores: list[NormalizedScore] = []
    failures: list[BatchFailure] = []
    for definition in definitions:
        params = _parameters_for(definition, parameters)
        try:
            scores.append(compute(structure, definition.metric, params))
        except CohesionLensError as e:
            logger.warning("Skipping %s for %s: %s", definition.id, structure.name, e)
            failures.append(BatchFailure(structure.name, definition.metric, e))
    return scores, failures


def _resolve_parameters(
    parameters: ParameterSource,
) -> Union[None, ParameterSet, dict[Metric, Any]]:
    """One ParameterSet for the whole run, or a table keyed by Metric.

    A mapping whose keys are all Metric members or metric ids is a per-metric
    table; table values are validated per class by compute() and recorded as
    failures. Any other mapping is a single parameter set and is validated
    here, before any class runs.
    """
    if parameters is None or isinstance(parameters, ParameterSet):
        return parameters
    if parameters and all(_is_metric_key(key) for key in parameters):
        return {lookup(key).metric: value for key, value in parameters.items()}
    return ParameterSet.coerce(parameters)


def _is_metric_key(key: Any) -> bool:
    return isinstance(key, Metric) or (
        isinstance(key, str) and key in Metric.__members__
    )


def _parameters_for(
    definition: MetricDefinition, parameters: Union[None, ParameterSet, dict[Metric, Any]]
) -> Any:
    """Parameters to hand to compute() for one metric.

    A run-wide set only reaches metrics that accept parameters. A table entry
    is passed as given, so an entry for a metric that takes none fails that
    metric instead of vanishing.
    """
    if parameters is None:
        return None
    if isinstance(parameters, ParameterSet):
        return parameters if definition.accepts_parameters else None
    return parameters.get(definition.metric)


def summarize(score_groups: Iterable[Iterable[NormalizedScore]]) -> dict[Metric, MetricSummary]:
    """Count, mean, sample stdev, min and max of normalized values per metric.

    Metrics appear in catalogue order; metrics without any score are omitted.
    """
    values: dict[Metric, list[float]] = {}
    for scores in score_groups:
        for score in scores:
            values.setdefault(score.metric, []).append(score.value)

    summary: dict[Metric, MetricSummary] = {}
    for metric in Metric:
        observed = values.get(metric)
        if not observed:
            continue
        summary[metric] = MetricSummary(
            metric=metric,
            count=len(observed),
            mean=Statistics.mean(observed),
            stdev=Statistics.stdev(observed),
            minimum=min(observed),
            maximum=max(observed),
        )
    return summary
