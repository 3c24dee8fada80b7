"""Metrics utilities for network simulation.

This module provides functions for summarizing packet transmissions and for
measuring how route costs change with payload size.
"""

import os
import json
from typing import Any, Dict, Iterable, Sequence

import numpy as np

from netroute.core.packet import Packet
from netroute.core.simulator import NetworkSimulator


def transmission_report(
    path: Sequence[str], packet: Packet, seconds: float
) -> Dict[str, Any]:
    """Summarize one packet transmission.

    Args:
        path: The route the packet was sent along.
        packet: The packet after sending.
        seconds: Total transmission time returned by the simulator.

    Returns:
        Dictionary describing the transmission.
    """
    return {
        "packet_id": packet.id,
        "flow_id": packet.flow_id,
        "size": packet.size,
        "route": list(path),
        "hops": list(packet.hops),
        "ttl_remaining": packet.ttl,
        "delivered": bool(path) and packet.hops[-1:] == [path[-1]],
        "transmission_time": seconds,
    }


def save_report_to_json(
    report: Dict[str, Any], filename: str = "results/report.json"
) -> None:
    """Save a report to a JSON file.

    Args:
        report: Dictionary to save.
        filename: Output filename.
    """
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filename, "w") as f:
        json.dump(report, f, indent=2)


def route_cost_curve(
    simulator: NetworkSimulator, path: Sequence[str], sizes: Iterable[int]
) -> np.ndarray:
    """Compute the cost of a fixed path for a range of payload sizes.

    Args:
        simulator: Simulator holding the topology.
        path: Device names from source to destination.
        sizes: Payload sizes in bytes.

    Returns:
        Array of total transmission times in seconds, one per size.
    """
    return np.array([simulator.path_cost(path, size) for size in sizes], dtype=float)
