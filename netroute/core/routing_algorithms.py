from abc import ABC, abstractmethod
import logging
from typing import List

from netroute.core.dijkstra import shortest_paths
from netroute.core.graph import Graph, WeightedEdge
from netroute.core.link import Link

logger = logging.getLogger(__name__)


class RoutingAlgorithm(ABC):
    """Abstract base class for routing algorithms."""

    def __init__(self) -> None:
        self.name = "Base Routing"

    @abstractmethod
    def route(
        self,
        graph: Graph[str, Link],
        source: str,
        destination: str,
        payload_bytes: int,
    ) -> List[str]:
        """
        Find the sequence of devices a packet should travel through.

        Args:
            graph: The network topology with Link edges.
            source: Name of the sending device.
            destination: Name of the receiving device.
            payload_bytes: Packet size, which may influence edge costs.

        Returns:
            The path from source to destination inclusive, or an empty list
            if the destination cannot be reached.
        """
        pass

    def __repr__(self) -> str:
        return self.name


class WeightedGraphRouting(RoutingAlgorithm):
    """Routing that runs Dijkstra over a throwaway weighted copy of the topology.

    Subclasses decide how a Link is turned into a weight. The weighted graph
    is directed and rebuilt on every query.
    """

    def link_weight(self, link: Link, payload_bytes: int) -> float:
        raise NotImplementedError

    def build_weighted_graph(
        self, graph: Graph[str, Link], payload_bytes: int
    ) -> Graph[str, WeightedEdge]:
        """
        Convert a Link graph into a WeightedEdge graph for one payload size.

        Args:
            graph: The network topology.
            payload_bytes: Packet size passed to link_weight.

        Returns:
            A new directed graph with the same nodes and one weighted edge per
            Link edge.
        """
        weighted: Graph[str, WeightedEdge] = Graph(directed=True)
        for node in graph:
            weighted.add_node(node)
        for source, target, link in graph.edges():
            weighted.add_edge(
                source, target, WeightedEdge(self.link_weight(link, payload_bytes))
            )
        return weighted

    def route(
        self,
        graph: Graph[str, Link],
        source: str,
        destination: str,
        payload_bytes: int,
    ) -> List[str]:
        weighted = self.build_weighted_graph(graph, payload_bytes)
        path = shortest_paths(weighted, source).path_to(destination)
        logger.debug(
            "%s route %s->%s (%d bytes): %s",
            self.name,
            source,
            destination,
            payload_bytes,
            path or "unreachable",
        )
        return path


class DijkstraRouting(WeightedGraphRouting):
    """Fastest route for the given packet size.

    Each link weighs its transmission time for the payload, so larger packets
    can take a different route than small ones over the same topology.
    """

    def __init__(self) -> None:
        super().__init__()
        self.name = "Dijkstra"

    def link_weight(self, link: Link, payload_bytes: int) -> float:
        return link.cost_for_bytes(payload_bytes)


class HopCountRouting(WeightedGraphRouting):
    """Route with the fewest hops, ignoring link characteristics."""

    def __init__(self) -> None:
        super().__init__()
        self.name = "HopCount"

    def link_weight(self, link: Link, payload_bytes: int) -> float:
        return 1.0


ROUTING_ALGORITHMS = {
    "dijkstra": DijkstraRouting,
    "hop_count": HopCountRouting,
}


def routing_factory(routing_type: str) -> RoutingAlgorithm:
    """
    Factory function to create the appropriate routing algorithm.

    Args:
        routing_type: Name of the algorithm ("dijkstra" or "hop_count").

    Returns:
        A new instance of the selected routing algorithm.

    Raises:
        ValueError: If the name is not a known algorithm.
    """
    if routing_type not in ROUTING_ALGORITHMS:
        raise ValueError(f"Unknown routing algorithm: {routing_type}")
    return ROUTING_ALGORITHMS[routing_type]()
