"""Heuristic matcher linking product listings to a product catalog."""

__version__ = "0.1.0"
