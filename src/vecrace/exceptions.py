"""Error types raised by the race simulator."""

from typing import Any


class VectorRaceError(Exception):
    """Base class for all simulator errors.

    Carries a human-readable message plus a context dict with the values
    that caused the error (positions, player names, file paths...).
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} ({details})"


class ConfigurationError(VectorRaceError):
    """Race cannot start: bad settings, bad track layout or bad player setup."""


class RaceStateError(VectorRaceError):
    """Operation not allowed in the current race state."""


class TrackError(VectorRaceError):
    """Base class for track loading failures."""


class TrackLoadError(TrackError):
    """Track file is missing or unreadable."""


class TrackFormatError(TrackError):
    """Track text is not a valid rectangular grid of known symbols."""
