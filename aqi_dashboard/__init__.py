"""Filtering and aggregation pipeline behind the global air quality dashboard."""

__version__ = "1.0.0"
