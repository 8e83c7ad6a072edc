"""Track file loading.

Track files are plain text grids, one row per line:
'.' free, '#' obstacle, 'S' start, 'F' finish.
"""

from pathlib import Path

from vecrace.exceptions import TrackFormatError, TrackLoadError
from vecrace.models import Track


class TrackLoader:
    """Reads tracks from text files."""

    @staticmethod
    def parse(text: str, name: str = "track") -> Track:
        """Build a Track from grid text.

        Trailing whitespace on each line and trailing blank lines are ignored.

        Raises:
            TrackFormatError: If the grid is empty, ragged or has unknown symbols
        """
        rows = [line.rstrip() for line in text.splitlines()]
        while rows and not rows[-1]:
            rows.pop()
        if not rows:
            raise TrackFormatError("Track file is empty", {"track": name})
        return Track(name=name, rows=tuple(rows))

    @classmethod
    def load(cls, path: str | Path) -> Track:
        """Load a track file.

        Raises:
            TrackLoadError: If the file cannot be read
            TrackFormatError: If its content is not a valid grid
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TrackLoadError("Cannot read track file", {"path": str(path)}) from exc
        return cls.parse(text, name=path.stem)
