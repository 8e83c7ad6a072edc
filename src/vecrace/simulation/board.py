"""Live race board: the track plus which cells players occupy."""

import logging
from collections.abc import Iterable, Mapping
from typing import Protocol

from vecrace.exceptions import ConfigurationError
from vecrace.models import Direction, Player, Position, Track

logger = logging.getLogger(__name__)


class DisplaySink(Protocol):
    """Receives the board once per completed turn."""

    def __call__(
        self,
        board: "Board",
        players: list[Player],
        previous_directions: Mapping[str, Direction | None],
    ) -> None: ...


class Board:
    """Wraps a Track and tracks player occupancy.

    Occupancy is an index from cell to player name; players never hold a
    reference back to the board.
    """

    def __init__(self, track: Track, display_sink: DisplaySink | None = None):
        """Initialize the board.

        Args:
            track: Static track layout
            display_sink: Optional renderer called by `display`
        """
        self.track = track
        self.display_sink = display_sink
        self._occupancy: dict[Position, str] = {}
        self._players: dict[str, Player] = {}

    # Track queries

    def is_obstacle(self, position: Position) -> bool:
        return self.track.is_obstacle(position)

    def is_finish(self, position: Position) -> bool:
        return self.track.is_finish(position)

    def is_free(self, position: Position) -> bool:
        """Drivable on the track and not occupied by any player."""
        return self.track.is_free(position) and position not in self._occupancy

    # Occupancy

    def is_occupied(self, position: Position) -> bool:
        return position in self._occupancy

    def player_at(self, position: Position) -> Player | None:
        name = self._occupancy.get(position)
        return self._players[name] if name is not None else None

    @property
    def players(self) -> list[Player]:
        """Players currently on the board, in registration order."""
        return list(self._players.values())

    def occupied_positions(self) -> dict[Position, str]:
        return dict(self._occupancy)

    def add_player(self, player: Player) -> None:
        """Place a player on its current position.

        Raises:
            ConfigurationError: If the cell is an obstacle, already occupied,
                or the player name is already on the board
        """
        position = player.position
        if player.name in self._players:
            raise ConfigurationError("Player already on the board", {"player": player.name})
        if self.track.is_obstacle(position):
            raise ConfigurationError(
                "Cannot place player on an obstacle",
                {"player": player.name, "position": position},
            )
        if position in self._occupancy:
            raise ConfigurationError(
                "Start cell already occupied",
                {
                    "player": player.name,
                    "position": position,
                    "occupant": self._occupancy[position],
                },
            )
        self._occupancy[position] = player.name
        self._players[player.name] = player
        logger.debug("Placed %s at %s", player.name, position)

    def update_player_position(self, player: Player, new_position: Position) -> None:
        """Move a player, keeping the occupancy index consistent.

        The new index is built first and swapped in only after the player's
        position has been accepted, so a failure leaves both untouched.
        """
        if self._occupancy.get(player.position) != player.name:
            raise KeyError(f"{player.name} is not on the board at {player.position}")
        occupant = self._occupancy.get(new_position)
        if occupant is not None and occupant != player.name:
            raise ValueError(f"{new_position} is occupied by {occupant}")

        occupancy = dict(self._occupancy)
        del occupancy[player.position]
        occupancy[new_position] = player.name
        player.position = new_position
        self._occupancy = occupancy

    def remove_player(self, player: Player) -> None:
        """Lift a player off the board (e.g. after it finishes)."""
        if self._occupancy.get(player.position) == player.name:
            del self._occupancy[player.position]
        self._players.pop(player.name, None)

    def display(
        self,
        players: Iterable[Player],
        previous_directions: Mapping[str, Direction | None],
    ) -> None:
        """Forward the current state to the display sink, if any."""
        if self.display_sink is not None:
            self.display_sink(self, list(players), previous_directions)
