"""Graph-connectivity cohesion: TCC, LCC, CCM, OCC, PCC.

All five are high-is-good ratios in [0, 1] built on method graphs.
"""

from ...math.graph import GraphMetrics
from ...structure.models import ClassStructure
from .base import calls_between, method_graph, shares_attribute, transitive_uses, trivial_cohesion


def _direct_connections(structure: ClassStructure) -> dict[str, set[str]]:
    """Bieman-Kang direct connection: R(i) and R(j) intersect."""
    reach = transitive_uses(structure)
    return method_graph(structure, lambda a, b: not reach[a.name].isdisjoint(reach[b.name]))


def tcc(structure: ClassStructure) -> float:
    """Tight Class Cohesion = NDC / NP."""
    trivial = trivial_cohesion(structure)
    if trivial is not None:
        return trivial
    graph = _direct_connections(structure)
    return GraphMetrics.edge_count(graph) / GraphMetrics.pair_count(len(structure.methods))


def lcc(structure: ClassStructure) -> float:
    """
    Loose Class Cohesion = (NDC + NIC) / NP.

    A pair counts when a chain of direct connections joins the two methods,
    i.e. when both sit in the same connected component. LCC >= TCC always.
    """
    trivial = trivial_cohesion(structure)
    if trivial is not None:
        return trivial
    components = GraphMetrics.connected_components(_direct_connections(structure))
    connected = sum(GraphMetrics.pair_count(len(c)) for c in components)
    return connected / GraphMetrics.pair_count(len(structure.methods))


def ccm(structure: ClassStructure) -> float:
    """
    Class Connection Metric = NC / (NP * NCC).

    NC: connected pairs (shared attribute or a call either way).
    NCC: number of connected components of that graph.
    """
    trivial = trivial_cohesion(structure)
    if trivial is not None:
        return trivial
    graph = method_graph(structure, lambda a, b: shares_attribute(a, b) or calls_between(a, b))
    nc = GraphMetrics.edge_count(graph)
    ncc = len(GraphMetrics.connected_components(graph))
    return nc / (GraphMetrics.pair_count(len(structure.methods)) * ncc)


def occ(structure: ClassStructure) -> float:
    """
    Optimistic Class Cohesion = max_i |reachable(i)| / (k - 1).

    Weak connection: methods linked through a shared attribute, undirected.
    """
    trivial = trivial_cohesion(structure)
    if trivial is not None:
        return trivial
    graph = method_graph(structure, shares_attribute)
    return _max_reach_ratio(graph, structure)


def pcc(structure: ClassStructure) -> float:
    """
    Pessimistic Class Cohesion = max_i |reachable(i)| / (k - 1).

    Strong connection, directed: i -> j when i writes an attribute j uses.
    Without write information every method is isolated and PCC is 0.
    """
    trivial = trivial_cohesion(structure)
    if trivial is not None:
        return trivial
    graph: dict[str, set[str]] = {
        writer.name: {
            reader.name
            for reader in structure.methods
            if reader.name != writer.name and not writer.writes.isdisjoint(reader.uses)
        }
        for writer in structure.methods
    }
    return _max_reach_ratio(graph, structure)


def _max_reach_ratio(graph: dict[str, set[str]], structure: ClassStructure) -> float:
    k = len(structure.methods)
    best = max(len(GraphMetrics.reachable(graph, name) - {name}) for name in structure.method_names)
    return best / (k - 1)
