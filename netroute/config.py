"""Configuration for network simulation."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from netroute.core.routing_algorithms import ROUTING_ALGORITHMS


@dataclass(frozen=True)
class SimulationConfig:
    """Defaults used by the simulator when creating and routing packets."""

    default_ttl: int = 64
    default_packet_size: int = 1500
    routing: str = "dijkstra"
    log_level: str = "INFO"
    output_dir: str = "results"

    def __post_init__(self) -> None:
        if self.default_ttl <= 0:
            raise ValueError("default_ttl must be positive")
        if self.default_packet_size <= 0:
            raise ValueError("default_packet_size must be positive")
        if self.routing not in ROUTING_ALGORITHMS:
            raise ValueError(f"routing must be one of {', '.join(ROUTING_ALGORITHMS)}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log_level: {self.log_level}")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())
