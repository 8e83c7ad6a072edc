"""Race settings and wiring of a ready-to-run engine."""

import json
import logging
from pathlib import Path

import numpy as np
from pydantic import BaseModel, Field, ValidationError, model_validator

from vecrace.data import TrackLoader
from vecrace.exceptions import ConfigurationError
from vecrace.models import Player
from vecrace.simulation import Board, DisplaySink, InertiaManager, RaceEngine, VelocityCalculator
from vecrace.strategies import StrategyKind, create_strategy

logger = logging.getLogger(__name__)


class PlayerSettings(BaseModel):
    """One competitor in the race settings."""

    name: str = Field(..., min_length=1, description="Unique player name")
    kind: StrategyKind = Field(default=StrategyKind.GREEDY, description="Strategy used")
    alpha: float = Field(
        default=0.5,
        ge=0.0,
        description="Avoidance weight (safe_runner only)",
    )


class RaceSettings(BaseModel):
    """Everything needed to set up a race."""

    track: Path = Field(..., description="Path to the track file")
    max_turns: int = Field(default=100, gt=0, description="Turn bound")
    seed: int | None = Field(default=None, description="Seed for the bots' random source")
    stop_at_first_finish: bool = Field(
        default=False,
        description="End the race as soon as someone finishes",
    )
    players: list[PlayerSettings] = Field(..., min_length=1, description="Competitors")

    @model_validator(mode="after")
    def _unique_names(self) -> "RaceSettings":
        names = [player.name for player in self.players]
        if len(set(names)) != len(names):
            raise ValueError("player names must be unique")
        return self


def load_settings(path: str | Path) -> RaceSettings:
    """Read race settings from a JSON file.

    Relative track paths are resolved against the settings file's directory.

    Raises:
        ConfigurationError: If the file is unreadable or invalid
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        settings = RaceSettings.model_validate(data)
    except OSError as exc:
        raise ConfigurationError("Cannot read settings file", {"path": str(path)}) from exc
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid settings: {exc}", {"path": str(path)}) from exc

    if not settings.track.is_absolute():
        settings = settings.model_copy(update={"track": path.parent / settings.track})
    return settings


def build_race(settings: RaceSettings, display_sink: DisplaySink | None = None) -> RaceEngine:
    """Load the track and create an engine with all players on their starts.

    Raises:
        TrackError: If the track cannot be loaded
        ConfigurationError: If the players do not fit the track
    """
    track = TrackLoader.load(settings.track)
    board = Board(track, display_sink=display_sink)
    engine = RaceEngine(
        board=board,
        velocity_calculator=VelocityCalculator(),
        inertia_manager=InertiaManager(),
        max_turns=settings.max_turns,
        stop_at_first_finish=settings.stop_at_first_finish,
    )

    starts = track.start_positions
    if len(settings.players) > len(starts):
        raise ConfigurationError(
            "More players than start cells",
            {"players": len(settings.players), "starts": len(starts), "track": track.name},
        )

    rng = np.random.default_rng(settings.seed)
    players = []
    for entry, start in zip(settings.players, starts):
        options = {"alpha": entry.alpha} if entry.kind == StrategyKind.SAFE_RUNNER else {}
        strategy = create_strategy(entry.kind, board, rng, **options)
        players.append(Player(name=entry.name, position=start, strategy=strategy))

    engine.place_players_on_starts(players)
    logger.debug("Built race on %s with %d players", track.name, len(players))
    return engine
