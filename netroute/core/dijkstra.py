"""Single-source shortest paths.

This module provides Dijkstra's algorithm over graphs whose edge payload is a
WeightedEdge, in two forms: the shortest_paths function, which returns a fresh
result for every call, and the Dijkstra class, which keeps the last result on
the instance.

Edge weights must be nonnegative. This is not checked; negative weights give
wrong distances rather than an error.
"""

import heapq
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Tuple

from netroute.core.graph import Graph, WeightedEdge

logger = logging.getLogger(__name__)

INFINITY = float("inf")


@dataclass
class ShortestPaths:
    """Result of one shortest-path computation.

    Attributes:
        start: Source node of the computation.
        dist: Best known distance per node. Unreached nodes map to infinity.
        parent: Predecessor on the shortest path, for reached nodes only.
    """

    start: Hashable
    dist: Dict[Hashable, float] = field(default_factory=dict)
    parent: Dict[Hashable, Hashable] = field(default_factory=dict)

    def distance_to(self, node: Hashable) -> float:
        return self.dist.get(node, INFINITY)

    def path_to(self, target: Hashable) -> List[Hashable]:
        return reconstruct_path(self.dist, self.parent, self.start, target)


def reconstruct_path(
    dist: Dict[Hashable, float],
    parent: Dict[Hashable, Hashable],
    start: Hashable,
    target: Hashable,
) -> List[Hashable]:
    """Walk the parent map back from target to start.

    Args:
        dist: Distances computed by a run.
        parent: Predecessors computed by the same run.
        start: First node of the wanted path.
        target: Last node of the wanted path.

    Returns:
        The nodes from start to target inclusive, or an empty list if the
        target was not reached or the chain does not lead back to start.
    """
    if dist.get(target, INFINITY) == INFINITY:
        return []

    path = []
    current = target
    while current != start:
        path.append(current)
        if current not in parent:
            return []
        current = parent[current]
    path.append(start)
    path.reverse()
    return path


def shortest_paths(graph: Graph[Any, WeightedEdge], start: Hashable) -> ShortestPaths:
    """Run Dijkstra's algorithm from a start node.

    Stale heap entries are skipped when popped instead of being removed when
    a shorter distance is found.

    Args:
        graph: Graph with WeightedEdge payloads.
        start: Source node.

    Returns:
        A new ShortestPaths. If start is not in the graph every distance is
        infinite.
    """
    result = ShortestPaths(start=start)
    dist = result.dist
    parent = result.parent
    for node in graph:
        dist[node] = INFINITY

    if not graph.has_node(start):
        return result
    dist[start] = 0.0

    queue: List[Tuple[float, Hashable]] = [(0.0, start)]
    relaxations = 0
    while queue:
        distance, node = heapq.heappop(queue)
        if distance != dist[node]:
            continue

        for neighbour, edge in graph.edges_from(node):
            candidate = distance + edge.weight
            if candidate < dist.get(neighbour, INFINITY):
                dist[neighbour] = candidate
                parent[neighbour] = node
                heapq.heappush(queue, (candidate, neighbour))
                relaxations += 1

    logger.debug(
        "Dijkstra from %r: %d nodes, %d relaxations", start, len(dist), relaxations
    )
    return result


class Dijkstra:
    """Dijkstra's algorithm keeping its last result on the instance.

    Every call to run replaces dist and parent. The attributes are not
    meaningful while a run is in progress, and one instance must not be used
    by two callers at once.

    Attributes:
        dist: Distances from the last run's start node.
        parent: Predecessors from the last run.
    """

    def __init__(self) -> None:
        self.dist: Dict[Hashable, float] = {}
        self.parent: Dict[Hashable, Hashable] = {}

    def run(self, graph: Graph[Any, WeightedEdge], start: Hashable) -> None:
        """Compute shortest distances from start.

        Args:
            graph: Graph with WeightedEdge payloads.
            start: Source node.
        """
        result = shortest_paths(graph, start)
        self.dist = result.dist
        self.parent = result.parent

    def get_path_to(self, start: Hashable, target: Hashable) -> List[Hashable]:
        """Return the shortest path from start to target, or [] if none."""
        return reconstruct_path(self.dist, self.parent, start, target)
