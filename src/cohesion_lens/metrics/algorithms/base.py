"""Shared building blocks for the metric algorithms.

Notation used throughout the algorithm modules:
    k       number of methods in the (already selected) class snapshot
    a       number of declared attributes
    mu(A)   number of methods using attribute A
    R(m)    attributes used by m or by any method m transitively calls
    NP      number of method pairs, k(k-1)/2
"""

from __future__ import annotations

from itertools import combinations
from typing import Callable, Iterator, Optional

from ...math.graph import GraphMetrics
from ...structure.models import ClassStructure, Method

Algorithm = Callable[[ClassStructure], float]


def trivial_cohesion(structure: ClassStructure) -> Optional[float]:
    """Value of a high-is-good metric on a class too small to measure.

    No methods: 0.0. A single method is trivially cohesive: 1.0.
    Returns None when the class has at least two methods.
    """
    k = len(structure.methods)
    if k == 0:
        return 0.0
    if k == 1:
        return 1.0
    return None


def method_pairs(structure: ClassStructure) -> Iterator[tuple[Method, Method]]:
    return combinations(structure.methods, 2)


def shares_attribute(first: Method, second: Method) -> bool:
    return not first.uses.isdisjoint(second.uses)


def calls_between(first: Method, second: Method) -> bool:
    return second.name in first.calls or first.name in second.calls


def attribute_usage(structure: ClassStructure) -> dict[str, int]:
    """mu(A) for every declared attribute, unused ones included as 0."""
    usage = dict.fromkeys(structure.attribute_names, 0)
    for method in structure.methods:
        for attribute in method.uses:
            usage[attribute] += 1
    return usage


def transitive_uses(structure: ClassStructure) -> dict[str, frozenset[str]]:
    """R(m) for every method: direct use plus use through the call graph."""
    calls = {m.name: set(m.calls) for m in structure.methods}
    result: dict[str, frozenset[str]] = {}
    for method in structure.methods:
        reached = GraphMetrics.reachable(calls, method.name) | {method.name}
        result[method.name] = frozenset().union(*(structure.uses_of(n) for n in reached))
    return result


def method_graph(
    structure: ClassStructure, connected: Callable[[Method, Method], bool]
) -> dict[str, set[str]]:
    """Undirected method graph with an edge wherever ``connected`` holds."""
    edges = [(a.name, b.name) for a, b in method_pairs(structure) if connected(a, b)]
    return GraphMetrics.undirected(structure.method_names, edges)
