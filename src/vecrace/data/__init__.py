"""Track data loading."""

from .track_loader import TrackLoader

__all__ = ["TrackLoader"]
