"""Entropy-based cohesion: MWE (Maximal Weighted Entropy).

Each attribute is treated as a topic. A method spreads its attention evenly
over the attributes it uses, so method i gives topic A the weight 1/|U_i|.
For every topic:

    occupancy(A) = share of methods that use A
    H_norm(A)    = entropy of A's weights over all k methods / log2(k)

Methods that do not use A are zero bins; they add nothing to the entropy but
still count towards log2(k). MWE is the best occupancy(A) * H_norm(A).
"""

from ...math.entropy import Entropy
from ...structure.models import ClassStructure
from .base import trivial_cohesion


def mwe(structure: ClassStructure) -> float:
    """Maximal Weighted Entropy in [0, 1]. 0.0 for a class without attributes."""
    trivial = trivial_cohesion(structure)
    if trivial is not None:
        return trivial
    if not structure.attributes:
        return 0.0

    k = len(structure.methods)
    best = 0.0
    for attribute in structure.attribute_names:
        weights = {
            m.name: (1.0 / len(m.uses) if attribute in m.uses else 0.0)
            for m in structure.methods
        }
        users = sum(1 for w in weights.values() if w > 0)
        if users == 0:
            continue
        best = max(best, (users / k) * Entropy.normalized(weights))
    return best
