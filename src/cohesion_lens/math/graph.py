"""Graph theory over method graphs: components, reachability, pair counts."""

from collections import deque
from typing import Dict, Hashable, Iterable, List, Set, Tuple


class GraphMetrics:
    """Graph calculations for the small graphs built from one class."""

    @staticmethod
    def undirected(
        nodes: Iterable[Hashable], edges: Iterable[Tuple[Hashable, Hashable]]
    ) -> Dict[Hashable, Set[Hashable]]:
        """
        Build a symmetric adjacency map.

        Self-loops are dropped and every node gets an entry, even when isolated.
        """
        adjacency: Dict[Hashable, Set[Hashable]] = {node: set() for node in nodes}
        for a, b in edges:
            if a == b:
                continue
            adjacency.setdefault(a, set()).add(b)
            adjacency.setdefault(b, set()).add(a)
        return adjacency

    @staticmethod
    def reachable(adjacency: Dict[Hashable, Set[Hashable]], start: Hashable) -> Set[Hashable]:
        """
        Nodes reachable from start by BFS.

        start itself is included only when some path leads back to it.

        Args:
            adjacency: Node -> neighbours (directed or symmetric)
            start: Node to search from

        Returns:
            Set of reachable nodes
        """
        visited: Set[Hashable] = set()
        queue: deque = deque(adjacency.get(start, ()))
        while queue:
            node = queue.popleft()
            if node in visited:
                continue
            visited.add(node)
            queue.extend(n for n in adjacency.get(node, ()) if n not in visited)
        return visited

    @staticmethod
    def connected_components(adjacency: Dict[Hashable, Set[Hashable]]) -> List[Set[Hashable]]:
        """
        Connected components of an undirected graph.

        Components are returned in order of first appearance in the adjacency
        map so results are deterministic for a given input.
        """
        seen: Set[Hashable] = set()
        components: List[Set[Hashable]] = []
        for root in adjacency:
            if root in seen:
                continue
            component = {root} | GraphMetrics.reachable(adjacency, root)
            seen |= component
            components.append(component)
        return components

    @staticmethod
    def edge_count(adjacency: Dict[Hashable, Set[Hashable]]) -> int:
        """Number of undirected edges in a symmetric adjacency map."""
        return sum(len(neighbours) for neighbours in adjacency.values()) // 2

    @staticmethod
    def pair_count(n: int) -> int:
        """Number of unordered pairs among n nodes: n(n-1)/2."""
        return n * (n - 1) // 2 if n > 1 else 0
