"""Visualization utilities for network simulation.

This module provides functions for drawing the network topology with an
optional route highlighted, and for plotting route costs against payload
size.
"""

from typing import Optional, Sequence, Tuple
import matplotlib.pyplot as plt
import networkx as nx
import numpy as np
import os

from netroute.core.simulator import NetworkSimulator

KIND_COLORS = {"Router": "salmon", "Switch": "khaki", "Host": "lightblue"}


def _save_or_show(fig: plt.Figure, filename: Optional[str], block: bool) -> None:
    if filename:
        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.savefig(filename)
        plt.close(fig)
    else:
        plt.show(block=block)
        if not block:
            plt.pause(0.001)


def save_network_visualization(
    simulator: NetworkSimulator,
    filename: Optional[str] = None,
    path: Optional[Sequence[str]] = None,
    figsize: Tuple[int, int] = (10, 8),
    seed: int = 42,
    block: bool = True,
) -> None:
    """Save network topology visualization to a file.

    Args:
        simulator: NetworkSimulator instance.
        filename: Output filename, or None to show it immediately.
        path: Route to highlight.
        figsize: Figure size as (width, height) in inches.
        seed: Seed for the layout.
        block: Whether to block until the window is closed when showing.
    """
    fig = plt.figure(figsize=figsize)

    graph = nx.DiGraph(simulator.to_networkx())
    pos = nx.spring_layout(graph, seed=seed)

    node_colors = [
        KIND_COLORS.get(graph.nodes[node].get("kind"), "lightgray") for node in graph
    ]
    nx.draw_networkx_nodes(graph, pos, node_size=700, node_color=node_colors)
    nx.draw_networkx_edges(graph, pos, edge_color="gray", arrows=False)

    if path and len(path) > 1:
        nx.draw_networkx_edges(
            graph,
            pos,
            edgelist=list(zip(path, path[1:])),
            width=3,
            alpha=0.6,
            edge_color="blue",
            arrows=True,
            arrowsize=20,
        )

    nx.draw_networkx_labels(graph, pos, font_size=14)

    edge_labels = {
        (u, v): f"{data['latency_ms']:.1f}ms\n{data['bandwidth_mbps']:.0f}Mbps"
        for u, v, data in graph.edges(data=True)
    }
    nx.draw_networkx_edge_labels(
        graph,
        pos,
        edge_labels=edge_labels,
        font_size=9,
        rotate=False,
        bbox=dict(facecolor="white", edgecolor="none", alpha=0.7),
    )

    plt.axis("off")
    plt.tight_layout()
    _save_or_show(fig, filename, block)


def plot_route_costs(
    sizes: Sequence[int],
    costs: np.ndarray,
    filename: Optional[str] = None,
    label: str = "route",
    block: bool = True,
) -> None:
    """Plot route transmission time against payload size.

    Args:
        sizes: Payload sizes in bytes.
        costs: Transmission times in seconds, one per size.
        filename: Output filename, or None to show it immediately.
        label: Legend label for the curve.
        block: Whether to block until the window is closed when showing.
    """
    fig = plt.figure(figsize=(8, 5))
    plt.plot(np.asarray(sizes), np.asarray(costs) * 1000, marker="o", label=label)
    plt.xlabel("Payload size (bytes)")
    plt.ylabel("Transmission time (ms)")
    plt.title("Route cost by payload size")
    plt.grid(True, alpha=0.3)
    plt.legend()
    plt.tight_layout()
    _save_or_show(fig, filename, block)
