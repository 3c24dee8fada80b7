"""Graph traversal algorithms.

This module defines breadth-first and depth-first visitors. Both keep their
visited set on the instance and reset it at the start of every run, so an
instance can be reused but must not be run twice at the same time.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Hashable, List, Set

from netroute.core.graph import Graph


class GraphAlgorithm(ABC):
    """Abstract base class for traversal algorithms."""

    def __init__(self) -> None:
        self.name = "Base Traversal"
        self.visited: Set[Hashable] = set()
        self.order: List[Hashable] = []

    @abstractmethod
    def run(self, graph: Graph[Any, Any], start: Hashable) -> List[Hashable]:
        """
        Traverse the graph from a start node.

        Args:
            graph: The graph to traverse.
            start: The node to start from. It is emitted even if the graph
                does not contain it.

        Returns:
            Nodes in the order they were visited.
        """
        pass

    def __repr__(self) -> str:
        return self.name


class BreadthFirstSearch(GraphAlgorithm):
    """Breadth-first traversal using a FIFO queue."""

    def __init__(self) -> None:
        super().__init__()
        self.name = "BFS"

    def run(self, graph: Graph[Any, Any], start: Hashable) -> List[Hashable]:
        self.visited.clear()
        self.order = []

        queue = deque([start])
        # Nodes are marked on discovery so no node is queued twice.
        self.visited.add(start)

        while queue:
            node = queue.popleft()
            self.order.append(node)
            for neighbour in graph.get_neighbors(node):
                if neighbour not in self.visited:
                    self.visited.add(neighbour)
                    queue.append(neighbour)

        return self.order


class DepthFirstSearch(GraphAlgorithm):
    """Iterative depth-first traversal using an explicit stack.

    A node is checked against the visited set when popped, not when pushed,
    so it can sit on the stack several times. Neighbours are pushed in
    adjacency order and therefore come off in reverse.
    """

    def __init__(self) -> None:
        super().__init__()
        self.name = "DFS"

    def run(self, graph: Graph[Any, Any], start: Hashable) -> List[Hashable]:
        self.visited.clear()
        self.order = []

        stack = [start]
        while stack:
            node = stack.pop()
            if node in self.visited:
                continue
            self.visited.add(node)
            self.order.append(node)
            stack.extend(graph.get_neighbors(node))

        return self.order
