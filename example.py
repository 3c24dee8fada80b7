#!/usr/bin/env python3
"""Example network simulation using the netroute package.

This script builds a small router/switch/host topology, routes packets of
different sizes between two hosts and reports the transmission times.
"""

import argparse
import logging
import os

from netroute.config import SimulationConfig
from netroute.core.devices import Host, Router, Switch
from netroute.core.link import Link
from netroute.core.routing_algorithms import routing_factory
from netroute.core.simulator import NetworkSimulator
from netroute.utils.metrics import (
    route_cost_curve,
    save_report_to_json,
    transmission_report,
)
from netroute.utils.topology_io import save_topology
from netroute.utils.visualization import plot_route_costs, save_network_visualization


def build_demo_network(config: SimulationConfig) -> NetworkSimulator:
    """Create the demo topology.

    H1 reaches H2 either through the fast S1-R1 core or over a slow direct
    link whose low latency only pays off for small packets.
    """
    sim = NetworkSimulator(config)
    for device in (
        Router(1, "R1", "mgmt0"),
        Switch(2, "S1", "mgmt1"),
        Host(3, "H1", "10.0.0.1"),
        Host(4, "H2", "10.0.0.2"),
    ):
        sim.add_device(device)

    sim.connect("R1", "S1", Link(0.5, 100.0, 0.999))
    sim.connect("S1", "H1", Link(1.0, 100.0, 0.999))
    sim.connect("R1", "H2", Link(3.0, 20.0, 0.98))
    sim.connect("H1", "H2", Link(0.2, 1.0, 0.95))
    return sim


def main():
    parser = argparse.ArgumentParser(description="Route packets through a demo network")
    parser.add_argument("--routing", default="dijkstra", help="dijkstra or hop_count")
    parser.add_argument("--ttl", type=int, default=64)
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[64, 512, 1500, 9000]
    )
    parser.add_argument("--output-dir", default="results")
    parser.add_argument("--plot", action="store_true", help="save figures")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    config = SimulationConfig(
        default_ttl=args.ttl,
        routing=args.routing,
        log_level=args.log_level,
        output_dir=args.output_dir,
    )
    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    sim = build_demo_network(config)
    print("Devices:")
    for line in sim.describe_devices():
        print(f"  {line}")

    algorithm = routing_factory(config.routing)
    reports = []
    for size in args.sizes:
        packet = sim.create_packet("H1", "H2", size=size)
        path, seconds = sim.deliver(packet, algorithm)
        print(
            f"{size:>6} bytes via {' -> '.join(path) or 'no route'}: "
            f"{seconds * 1000:.3f} ms, TTL left {packet.ttl}"
        )
        reports.append(transmission_report(path, packet, seconds))

    save_report_to_json(
        {"routing": algorithm.name, "transmissions": reports},
        os.path.join(config.output_dir, "report.json"),
    )
    save_topology(sim, os.path.join(config.output_dir, "topology.json"))

    if args.plot:
        largest = max(args.sizes)
        path = sim.find_route(algorithm, "H1", "H2", largest)
        save_network_visualization(
            sim, os.path.join(config.output_dir, "topology.png"), path=path
        )
        costs = route_cost_curve(sim, path, args.sizes)
        plot_route_costs(
            args.sizes,
            costs,
            os.path.join(config.output_dir, "route_costs.png"),
            label=" -> ".join(path),
        )


if __name__ == "__main__":
    main()
