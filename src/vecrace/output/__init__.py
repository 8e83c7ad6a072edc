"""Output formatting."""

from .console import ConsoleDisplay, ConsoleOutput

__all__ = ["ConsoleDisplay", "ConsoleOutput"]
