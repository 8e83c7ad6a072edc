"""Grid-based vector race simulator."""

__version__ = "0.1.0"
