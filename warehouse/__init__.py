"""In-memory warehouse inventory: keyed repositories and a stock manager."""

__version__ = "1.0.0"
