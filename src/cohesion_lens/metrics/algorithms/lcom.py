"""Lack-of-cohesion family: LCOM, LCOM2, LCOM3, LCOM4, LCOM5.

Higher values mean less cohesion. Classes with fewer than two methods are
treated as cohesive (0.0) for the ratio/pair metrics; the component counts
(LCOM3, LCOM4) report one component per lone method.
"""

from ...math.graph import GraphMetrics
from ...structure.models import ClassStructure
from .base import attribute_usage, calls_between, method_graph, method_pairs, shares_attribute


def lcom(structure: ClassStructure) -> float:
    """
    Chidamber-Kemerer LCOM = max(|P| - |Q|, 0).

    P: method pairs sharing no attribute. Q: method pairs sharing at least one.
    """
    if len(structure.methods) < 2:
        return 0.0

    p = q = 0
    for first, second in method_pairs(structure):
        if shares_attribute(first, second):
            q += 1
        else:
            p += 1
    return float(max(p - q, 0))


def lcom2(structure: ClassStructure) -> float:
    """
    LCOM2 = 1 - Σ mu(A) / (k * a).

    Share of the method x attribute grid that is NOT used. 0.0 for k < 2 or a = 0.
    """
    k = len(structure.methods)
    a = len(structure.attributes)
    if k < 2 or a == 0:
        return 0.0
    return 1.0 - sum(attribute_usage(structure).values()) / (k * a)


def lcom3(structure: ClassStructure) -> float:
    """LCOM3 (Li-Henry): connected components of methods linked by shared attributes."""
    if not structure.methods:
        return 0.0
    graph = method_graph(structure, shares_attribute)
    return float(len(GraphMetrics.connected_components(graph)))


def lcom4(structure: ClassStructure) -> float:
    """LCOM4 (Hitz-Montazeri): like LCOM3, but a call between two methods also links them."""
    if not structure.methods:
        return 0.0
    graph = method_graph(
        structure, lambda a, b: shares_attribute(a, b) or calls_between(a, b)
    )
    return float(len(GraphMetrics.connected_components(graph)))


def lcom5(structure: ClassStructure) -> float:
    """
    LCOM5 (Henderson-Sellers) = (k - Σ mu(A) / a) / (k - 1).

    0.0 when every method uses every attribute, 1.0 when each attribute is used
    by a single method, up to k/(k-1) when attributes go unused.
    0.0 for k < 2 or a = 0.
    """
    k = len(structure.methods)
    a = len(structure.attributes)
    if k < 2 or a == 0:
        return 0.0
    mean_usage = sum(attribute_usage(structure).values()) / a
    return (k - mean_usage) / (k - 1)
