"""Packet class for network simulation.

This module defines the Packet class, which represents a network packet
replayed hop by hop along a route.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Packet:
    """Represents a network packet.

    Attributes:
        source: Name of the sending device.
        destination: Name of the receiving device.
        ttl: Remaining hops before the packet expires.
        size: Size of packet in bytes.
        hops: Names of the devices the packet has passed through, in order.
        id: Unique identifier for the packet.
        flow_id: Identifier for the flow (source-destination pair).
    """

    source: str
    destination: str
    ttl: int
    size: int
    hops: List[str] = field(default_factory=list)
    id: int = field(init=False)
    flow_id: str = field(init=False)

    _id_counter: int = field(default=0, init=False, repr=False)

    def __post_init__(self):
        """Initialize derived attributes after initialization."""
        type(self)._id_counter += 1
        self.id = type(self)._id_counter
        self.flow_id = f"{self.source}-{self.destination}"

    @property
    def expired(self) -> bool:
        return self.ttl <= 0

    def dec_ttl(self) -> None:
        """Decrease the time-to-live by one."""
        self.ttl -= 1

    def add_hop(self, node: str) -> None:
        """Record a device the packet has passed through.

        Args:
            node: Name of the device.
        """
        self.hops.append(node)

    def get_hop_count(self) -> int:
        """Get number of hops recorded.

        Returns:
            Length of the hop history, including the starting device.
        """
        return len(self.hops)
