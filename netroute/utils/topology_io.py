"""Topology persistence.

This module saves a simulator's devices and links to a JSON file and
rebuilds a simulator from such a file.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from netroute.core.devices import device_from_dict, device_to_dict
from netroute.core.link import Link
from netroute.core.simulator import NetworkSimulator

logger = logging.getLogger(__name__)


def topology_to_dict(simulator: NetworkSimulator) -> Dict[str, Any]:
    """Describe a simulator's topology as plain data.

    Every directed link is listed once, in adjacency order, so a
    bidirectional connection appears as two entries.

    Args:
        simulator: The simulator to describe.

    Returns:
        Dictionary with "devices" and "links" lists.
    """
    devices = [device_to_dict(simulator.devices[name]) for name in simulator.devices]
    links = [
        {
            "source": source,
            "target": target,
            "latency_ms": link.latency_ms,
            "bandwidth_mbps": link.bandwidth_mbps,
            "reliability": link.reliability,
        }
        for source, target, link in simulator.graph.edges()
    ]
    return {"devices": devices, "links": links}


def save_topology(simulator: NetworkSimulator, filename: str) -> None:
    """Save a simulator's topology to a JSON file.

    Args:
        simulator: The simulator to save.
        filename: Output filename. Missing directories are created.
    """
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    data = topology_to_dict(simulator)
    with open(filename, "w") as f:
        json.dump(data, f, indent=2)
    logger.info(
        "Saved %d devices and %d links to %s",
        len(data["devices"]),
        len(data["links"]),
        filename,
    )


def load_topology(
    filename: str, simulator: Optional[NetworkSimulator] = None
) -> NetworkSimulator:
    """Load a topology saved by save_topology.

    Args:
        filename: JSON file to read.
        simulator: Simulator to add the devices and links to. A new one is
            created if omitted.

    Returns:
        The simulator holding the loaded topology.

    Raises:
        ValueError: If a device has an unknown kind.
        UnknownNodeError: If a link refers to a device missing from the file.
    """
    with open(filename) as f:
        data = json.load(f)

    if simulator is None:
        simulator = NetworkSimulator()

    for entry in data.get("devices", []):
        simulator.add_device(device_from_dict(entry))
    for entry in data.get("links", []):
        link = Link(entry["latency_ms"], entry["bandwidth_mbps"], entry["reliability"])
        simulator.connect(entry["source"], entry["target"], link, bidir=False)

    logger.info(
        "Loaded %d devices and %d links from %s",
        len(data.get("devices", [])),
        len(data.get("links", [])),
        filename,
    )
    return simulator
