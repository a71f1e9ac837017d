"""Version information for fwgraph."""

__version__ = "0.1.0"
