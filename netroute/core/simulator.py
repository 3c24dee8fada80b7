"""Network simulator class for network simulation.

This module defines the NetworkSimulator class, which holds the network
topology and device registry, finds routes through it and replays packets
along those routes.
"""

import logging
import simpy
import networkx as nx
from typing import Any, Callable, Dict, Generator, List, Optional, Sequence, Tuple

from netroute.config import SimulationConfig
from netroute.core.devices import Device
from netroute.core.exceptions import InvalidDeviceError, UnknownNodeError
from netroute.core.graph import Graph
from netroute.core.link import Link
from netroute.core.packet import Packet
from netroute.core.routing_algorithms import RoutingAlgorithm, routing_factory

logger = logging.getLogger(__name__)

# Cost charged for a hop with no link between the two devices.
MISSING_LINK_COST = 1e9


class NetworkSimulator:
    """Network simulation environment.

    The simulator keeps references to the devices it is given but does not
    own them: callers must keep a device alive for as long as the simulator
    may use it.

    Attributes:
        config: Defaults for packet creation and routing.
        graph: Directed topology graph with device names as nodes and Link
            edges.
        devices: Registered devices keyed by name.
        hooks: Callbacks keyed by event type.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        """Initialize the network simulator.

        Args:
            config: Simulation defaults. A default SimulationConfig is used
                if omitted.
        """
        self.config = config or SimulationConfig()
        self.graph: Graph[str, Link] = Graph(directed=True)
        self.devices: Dict[str, Device] = {}

        self.hooks: Dict[str, List[Callable[..., Any]]] = {
            "packet_hop": [],  # packet crosses a link
            "packet_expired": [],  # TTL ran out before the end of the path
            "packet_delivered": [],  # packet reached the last node of the path
        }

    def add_device(self, device: Optional[Device]) -> None:
        """Register a device and add it to the topology.

        Args:
            device: The device to register.

        Raises:
            InvalidDeviceError: If device is None.
        """
        if device is None:
            raise InvalidDeviceError("Cannot register a null device")
        self.devices[device.name] = device
        self.graph.add_node(device.name)
        logger.info("Registered %s %s", device.kind, device.name)

    def get_device(self, name: str) -> Optional[Device]:
        return self.devices.get(name)

    def connect(self, a: str, b: str, link: Link, bidir: bool = True) -> None:
        """Connect two registered devices with a link.

        Args:
            a: Name of the first device.
            b: Name of the second device.
            link: Link characteristics.
            bidir: Also add the b->a direction with the same link.

        Raises:
            UnknownNodeError: If either device is not in the topology.
        """
        missing = [name for name in (a, b) if not self.graph.has_node(name)]
        if missing:
            raise UnknownNodeError(*missing)

        self.graph.add_edge(a, b, link)
        if bidir:
            self.graph.add_edge(b, a, link)
        logger.debug("Connected %s %s %s with %s", a, "<->" if bidir else "->", b, link)

    def create_packet(
        self,
        source: str,
        destination: str,
        size: Optional[int] = None,
        ttl: Optional[int] = None,
    ) -> Packet:
        """Create a new packet using configured defaults for missing values.

        Args:
            source: Source device name.
            destination: Destination device name.
            size: Size of packet in bytes.
            ttl: Initial time-to-live.

        Returns:
            The created Packet object.
        """
        return Packet(
            source,
            destination,
            ttl if ttl is not None else self.config.default_ttl,
            size if size is not None else self.config.default_packet_size,
        )

    def find_route(
        self,
        algorithm: RoutingAlgorithm,
        source: str,
        destination: str,
        payload_bytes: int,
    ) -> List[str]:
        """Find a path through the topology.

        Args:
            algorithm: Routing strategy to use.
            source: Source device name.
            destination: Destination device name.
            payload_bytes: Packet size in bytes.

        Returns:
            The path, or an empty list if the destination is unreachable.
        """
        return algorithm.route(self.graph, source, destination, payload_bytes)

    def hop_cost(self, source: str, target: str, size: int) -> float:
        """Return the cost of sending size bytes from source to target.

        With parallel links between the same pair, the first one added is
        used, not the cheapest.

        Args:
            source: Device the hop starts from.
            target: Device the hop ends at.
            size: Payload size in bytes.

        Returns:
            Transmission time in seconds, or MISSING_LINK_COST if the devices
            are not linked.
        """
        for neighbour, link in self.graph.edges_from(source):
            if neighbour == target:
                return link.cost_for_bytes(size)
        logger.warning("No link %s->%s, charging %.0e s", source, target, MISSING_LINK_COST)
        return MISSING_LINK_COST

    def path_cost(self, path: Sequence[str], size: int) -> float:
        """Return the total cost of a path without touching any packet."""
        return sum(self.hop_cost(u, v, size) for u, v in zip(path, path[1:]))

    def _replay(
        self, path: Sequence[str], packet: Packet
    ) -> Generator[Tuple[str, str, float], None, None]:
        """Move a packet along a path, yielding (source, target, cost) per hop.

        The packet's TTL and hop history are updated before each hop is
        yielded. Replay stops when the TTL runs out.
        """
        if len(path) < 2:
            return

        packet.add_hop(path[0])
        for source, target in zip(path, path[1:]):
            if packet.expired:
                logger.warning(
                    "Packet %d expired at %s before reaching %s",
                    packet.id,
                    source,
                    path[-1],
                )
                self.call_hooks("packet_expired", packet, source)
                return
            cost = self.hop_cost(source, target, packet.size)
            packet.dec_ttl()
            packet.add_hop(target)
            yield source, target, cost

    def send_packet(self, path: Sequence[str], packet: Packet) -> float:
        """Replay a packet along a path.

        For every hop the packet's TTL is decremented and the next device is
        appended to its hop history. A path of fewer than two devices leaves
        the packet untouched.

        Args:
            path: Device names from source to destination.
            packet: The packet to send. It is modified in place.

        Returns:
            Total transmission time in seconds.
        """
        total_seconds = 0.0
        hops = 0
        for source, target, cost in self._replay(path, packet):
            total_seconds += cost
            hops += 1
            logger.debug("Packet %d %s->%s: %.6f s", packet.id, source, target, cost)
            self.call_hooks("packet_hop", packet, source, target, cost, total_seconds)

        if hops and hops == len(path) - 1:
            self.call_hooks("packet_delivered", packet, path[-1], total_seconds)
        return total_seconds

    def deliver(
        self, packet: Packet, algorithm: Optional[RoutingAlgorithm] = None
    ) -> Tuple[List[str], float]:
        """Route a packet from its source to its destination and send it.

        Args:
            packet: The packet to deliver.
            algorithm: Routing strategy. Defaults to the configured one.

        Returns:
            The path used and the total transmission time in seconds.
        """
        if algorithm is None:
            algorithm = routing_factory(self.config.routing)
        path = self.find_route(algorithm, packet.source, packet.destination, packet.size)
        return path, self.send_packet(path, packet)

    def transmit(
        self, env: simpy.Environment, path: Sequence[str], packet: Packet
    ) -> simpy.events.Process:
        """Replay a packet along a path as a SimPy process.

        Each hop takes its transmission time in simulated time. The process
        value is the total transmission time.

        Args:
            env: SimPy environment to run in.
            path: Device names from source to destination.
            packet: The packet to send. It is modified in place.

        Returns:
            SimPy process for the packet journey.
        """

        def packet_journey():
            start_time = env.now
            hops = 0
            for source, target, cost in self._replay(path, packet):
                yield env.timeout(cost)
                hops += 1
                self.call_hooks("packet_hop", packet, source, target, cost, env.now)
            if hops and hops == len(path) - 1:
                self.call_hooks("packet_delivered", packet, path[-1], env.now)
            return env.now - start_time

        return env.process(packet_journey())

    def describe_devices(self) -> List[str]:
        """Return one "name (kind)" line per registered device, sorted by name."""
        return [f"{name} ({self.devices[name].kind})" for name in sorted(self.devices)]

    def to_networkx(self) -> nx.MultiDiGraph:
        """Export the topology as a NetworkX multigraph.

        Nodes carry a "kind" attribute; edges carry the link's fields.
        """
        graph = nx.MultiDiGraph()
        for node in self.graph:
            device = self.devices.get(node)
            graph.add_node(node, kind=device.kind if device else None)
        for source, target, link in self.graph.edges():
            graph.add_edge(
                source,
                target,
                latency_ms=link.latency_ms,
                bandwidth_mbps=link.bandwidth_mbps,
                reliability=link.reliability,
            )
        return graph

    def register_hook(self, event_type: str, callback: Callable[..., Any]) -> None:
        """Register a callback function for a specific event type.

        Args:
            event_type: The type of event to register for.
            callback: The function to call when the event occurs.
        """
        if event_type not in self.hooks:
            raise ValueError(f"Unknown hook type: {event_type}")
        self.hooks[event_type].append(callback)

    def call_hooks(self, event_type: str, *args: Any, **kwargs: Any) -> None:
        """Call all registered callbacks for the given event type.

        Args:
            event_type: The type of event that occurred.
            *args, **kwargs: Arguments to pass to the callback functions.
        """
        if event_type in self.hooks:
            for callback in self.hooks[event_type]:
                callback(*args, **kwargs)
