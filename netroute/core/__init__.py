"""Core components for network routing.

This module contains the graph engine (Graph, traversals, Dijkstra), the
Link and Packet models, routing algorithms and the NetworkSimulator.
"""
