"""Generic adjacency-list graph.

This module defines the Graph class, a container mapping each node to an
ordered list of (neighbour, edge payload) pairs, and the WeightedEdge payload
consumed by the shortest-path engine.
"""

from dataclasses import dataclass
from typing import Dict, Generic, Hashable, Iterator, List, Tuple, TypeVar

NodeT = TypeVar("NodeT", bound=Hashable)
EdgeT = TypeVar("EdgeT")


@dataclass(frozen=True)
class WeightedEdge:
    """Edge payload carrying a single nonnegative weight.

    Attributes:
        weight: Cost of traversing the edge.
    """

    weight: float = 0.0


class Graph(Generic[NodeT, EdgeT]):
    """Directed or undirected graph stored as adjacency lists.

    Parallel edges are kept as separate entries and insertion order is
    preserved. None of the operations raise: queries about absent nodes
    return empty results.

    Attributes:
        directed: Whether edges are one-way. Fixed at construction.
    """

    def __init__(self, directed: bool = True) -> None:
        """Initialize an empty graph.

        Args:
            directed: If False, every edge is mirrored with the same payload.
        """
        self._directed = directed
        self._adjacency: Dict[NodeT, List[Tuple[NodeT, EdgeT]]] = {}

    @property
    def directed(self) -> bool:
        return self._directed

    def add_node(self, node: NodeT) -> None:
        """Add a node if it does not exist yet."""
        self._adjacency.setdefault(node, [])

    def add_edge(self, source: NodeT, target: NodeT, edge: EdgeT) -> None:
        """Add an edge, creating both endpoints if needed.

        Args:
            source: Node the edge leaves from.
            target: Node the edge points to.
            edge: Payload stored with the edge.
        """
        self.add_node(source)
        self.add_node(target)
        self._adjacency[source].append((target, edge))
        if not self._directed:
            self._adjacency[target].append((source, edge))

    def remove_node(self, node: NodeT) -> None:
        """Remove a node along with every edge that touches it."""
        self._adjacency.pop(node, None)
        for neighbours in self._adjacency.values():
            neighbours[:] = [pair for pair in neighbours if pair[0] != node]

    def remove_edge(self, source: NodeT, target: NodeT) -> None:
        """Remove all source->target edges.

        On an undirected graph the mirrored target->source entries go too.
        """
        self._strip(source, target)
        if not self._directed:
            self._strip(target, source)

    def _strip(self, source: NodeT, target: NodeT) -> None:
        neighbours = self._adjacency.get(source)
        if neighbours is not None:
            neighbours[:] = [pair for pair in neighbours if pair[0] != target]

    def get_neighbors(self, node: NodeT) -> List[NodeT]:
        """Return neighbour identities in adjacency order.

        Args:
            node: Node whose neighbours are wanted.

        Returns:
            List of neighbours, with repeats for parallel edges. Empty if the
            node is absent.
        """
        return [neighbour for neighbour, _ in self._adjacency.get(node, ())]

    def edges_from(self, node: NodeT) -> List[Tuple[NodeT, EdgeT]]:
        """Return the (neighbour, edge) pairs leaving a node."""
        return list(self._adjacency.get(node, ()))

    def edges(self) -> Iterator[Tuple[NodeT, NodeT, EdgeT]]:
        """Iterate over all (source, target, edge) triples in adjacency order.

        Undirected edges show up once per direction.
        """
        for source, neighbours in self._adjacency.items():
            for target, edge in neighbours:
                yield source, target, edge

    def nodes(self) -> List[NodeT]:
        return list(self._adjacency)

    def has_node(self, node: NodeT) -> bool:
        return node in self._adjacency

    def size(self) -> int:
        """Return the number of nodes."""
        return len(self._adjacency)

    def clear(self) -> None:
        self._adjacency.clear()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __iter__(self) -> Iterator[NodeT]:
        return iter(self._adjacency)

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        edge_count = sum(len(n) for n in self._adjacency.values())
        return f"Graph({kind}, {self.size()} nodes, {edge_count} edge entries)"
