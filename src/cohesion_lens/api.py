"""
Public computation API for Cohesion Lens.

Example:
    >>> from cohesion_lens import ClassStructure, Method, Attribute, compute
    >>> cls = ClassStructure(
    ...     name="Cart",
    ...     attributes=[Attribute("items"), Attribute("total")],
    ...     methods=[Method("add", uses={"items", "total"}), Method("clear", uses={"items"})],
    ... )
    >>> compute(cls, "LCOM").value
    0.0
    >>> compute(cls, "TCC").value
    1.0
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from .exceptions import UnsupportedParametersError
from .logging_config import get_logger
from .metrics.algorithms import algorithm_for
from .metrics.normalization import NormalizedScore, normalize
from .metrics.parameters import ParameterSet
from .metrics.registry import Metric, lookup
from .structure.models import ClassStructure

logger = get_logger(__name__)


def compute(
    structure: ClassStructure,
    metric_id: Union[str, Metric],
    parameters: Optional[Union[ParameterSet, Mapping[str, Any]]] = None,
) -> NormalizedScore:
    """
    Compute one metric for one class.

    Args:
        structure: Frozen snapshot of the class
        metric_id: Catalogue id (e.g. "LCOM4") or Metric member
        parameters: Optional method-selection parameters; only metrics whose
            definition accepts parameters may name any, even with a None value

    Returns:
        NormalizedScore carrying both the normalized and the raw value

    Raises:
        UnknownMetricError: If metric_id is not in the catalogue
        UnsupportedParametersError: If parameters are unknown, ill-typed, or
            passed to a metric that takes none
    """
    definition = lookup(metric_id)
    params = ParameterSet.coerce(parameters, metric_id=definition.id)
    named = ParameterSet.named(parameters)
    if not definition.accepts_parameters and named:
        raise UnsupportedParametersError(
            definition.id, named, f"{definition.id} does not accept parameters"
        )

    selected = structure.select(params.resolved())
    raw = algorithm_for(definition.metric)(selected)
    score = normalize(raw, definition)

    logger.debug(
        "%s %s: raw=%.6g value=%.6g (%d/%d methods)",
        structure.name,
        definition.id,
        score.raw,
        score.value,
        len(selected.methods),
        len(structure.methods),
    )
    return score
