"""Link class for network simulation.

This module defines the Link class, which describes the physical
characteristics of a connection between two devices and turns them into a
transmission-time cost for a payload of a given size.
"""

from dataclasses import dataclass

# Cost of pushing any payload through a link with no bandwidth. Large enough
# that routing avoids the link, without raising a division error.
ZERO_BANDWIDTH_COST = 1e9


@dataclass(frozen=True)
class Link:
    """Represents a network link.

    Attributes:
        latency_ms: Propagation latency in milliseconds.
        bandwidth_mbps: Capacity in megabits per second.
        reliability: Delivery probability between 0 and 1. Informational
            only, it does not affect the cost.
    """

    latency_ms: float = 1.0
    bandwidth_mbps: float = 100.0
    reliability: float = 0.999

    def calculate_transmission_delay(self, packet_size: int) -> float:
        """Calculate transmission delay based on payload size and bandwidth.

        Args:
            packet_size: Size of the payload in bytes.

        Returns:
            Transmission delay in seconds, or ZERO_BANDWIDTH_COST if the link
            has no bandwidth.
        """
        if self.bandwidth_mbps <= 0.0:
            return ZERO_BANDWIDTH_COST
        return (packet_size * 8) / (self.bandwidth_mbps * 1_000_000)

    def cost_for_bytes(self, packet_size: int) -> float:
        """Calculate total time for a payload (latency + transmission).

        Args:
            packet_size: Size of the payload in bytes.

        Returns:
            Total time in seconds.
        """
        return self.latency_ms / 1000 + self.calculate_transmission_delay(packet_size)

    def __str__(self) -> str:
        return (
            f"Link({self.latency_ms:.1f}ms, {self.bandwidth_mbps:.1f}Mbps, "
            f"reliability={self.reliability:.3f})"
        )
