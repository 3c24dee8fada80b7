"""Utilities for topology persistence, metrics and visualization."""
