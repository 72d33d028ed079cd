"""Attribute-overlap cohesion: MMAC, SCOM."""

import numpy as np

from ...math.graph import GraphMetrics
from ...structure.models import ClassStructure
from .base import attribute_usage, method_pairs, trivial_cohesion


def mmac(structure: ClassStructure) -> float:
    """
    Method-Method through Attributes Cohesion.

    MMAC = Σ_A mu(A) (mu(A) - 1) / (a * k * (k - 1))

    1.0 when every method uses every attribute, 0.0 when no two methods share
    one. 0.0 for a class without attributes.
    """
    trivial = trivial_cohesion(structure)
    if trivial is not None:
        return trivial
    a = len(structure.attributes)
    if a == 0:
        return 0.0
    k = len(structure.methods)
    usage = np.fromiter(attribute_usage(structure).values(), dtype=np.int64, count=a)
    return float(np.sum(usage * (usage - 1))) / (a * k * (k - 1))


def scom(structure: ClassStructure) -> float:
    """
    Sensitive Class Cohesion Metric.

    For each method pair with overlapping attribute sets U_i, U_j:
        connection c_ij = |U_i ∩ U_j| / min(|U_i|, |U_j|)
        weight     w_ij = |U_i ∪ U_j| / a
    SCOM = Σ c_ij w_ij / NP. 0.0 for a class without attributes.
    """
    trivial = trivial_cohesion(structure)
    if trivial is not None:
        return trivial
    a = len(structure.attributes)
    if a == 0:
        return 0.0

    total = 0.0
    for first, second in method_pairs(structure):
        shared = len(first.uses & second.uses)
        if shared == 0:
            continue
        connection = shared / min(len(first.uses), len(second.uses))
        weight = len(first.uses | second.uses) / a
        total += connection * weight
    return total / GraphMetrics.pair_count(len(structure.methods))
