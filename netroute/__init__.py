"""Shortest-cost routing over simulated packet-switched networks."""
