"""Turn-based race engine."""

import logging
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from vecrace.exceptions import ConfigurationError, RaceStateError
from vecrace.models import MAX_SPEED, MIN_SPEED, Direction, Player, Position
from vecrace.simulation.board import Board
from vecrace.simulation.inertia import InertiaManager
from vecrace.simulation.velocity import VelocityCalculator

logger = logging.getLogger(__name__)

ACCELERATIONS = (-1, 0, 1)


class RaceStatus(str, Enum):
    """Race state machine."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    FINISHED = "finished"


class RaceOutcome(str, Enum):
    """How a finished race ended."""

    WON = "won"
    DRAW = "draw"
    TURN_LIMIT = "turn_limit"


class MoveKind(str, Enum):
    """Result of one player's turn."""

    MOVED = "moved"
    FINISHED = "finished"
    CRASHED_OBSTACLE = "crashed_obstacle"
    CRASHED_PLAYER = "crashed_player"
    CONTESTED = "contested"
    STALLED = "stalled"
    FORFEITED = "forfeited"


@dataclass
class MoveOutcome:
    """What happened to one player during a turn."""

    player: str
    kind: MoveKind
    start: Position
    end: Position
    direction: Direction | None = None
    speed: int = 0
    target: Position | None = None
    reason: str = ""


@dataclass
class TurnReport:
    """All moves of a single turn."""

    turn: int
    moves: list[MoveOutcome] = field(default_factory=list)
    status: RaceStatus = RaceStatus.RUNNING

    def outcome_for(self, name: str) -> MoveOutcome | None:
        for move in self.moves:
            if move.player == name:
                return move
        return None


@dataclass
class Standing:
    """Final classification entry for a player."""

    position: int
    name: str
    finished: bool
    finish_turn: int | None
    distance: int
    crashes: int


@dataclass
class RaceResult:
    """Final race result."""

    outcome: RaceOutcome
    turns_played: int
    standings: list[Standing]
    winners: list[str] = field(default_factory=list)
    finish_reachable: bool = True


@dataclass
class _Intent:
    """A player's declared move, before collisions are resolved."""

    player: Player
    start: Position
    direction: Direction | None = None
    target: Position | None = None
    kind: MoveKind | None = None
    reason: str = ""


class RaceEngine:
    """Runs a race turn by turn.

    Every turn each unfinished player, in registration order, declares a
    direction and an acceleration against the same pre-turn board. The
    declarations are then resolved together: obstacles and occupied cells
    crash the mover, and two movers targeting the same cell both crash.
    """

    def __init__(
        self,
        board: Board,
        velocity_calculator: VelocityCalculator,
        inertia_manager: InertiaManager,
        max_turns: int,
        stop_at_first_finish: bool = False,
    ):
        """Initialize the engine.

        Args:
            board: Board holding the track and occupancy
            velocity_calculator: Measures committed displacements
            inertia_manager: Computes allowed directions per turn
            max_turns: Turn bound, must be positive
            stop_at_first_finish: End the race in the turn the first player finishes
        """
        if isinstance(max_turns, bool) or not isinstance(max_turns, int) or max_turns <= 0:
            raise ConfigurationError("max_turns must be a positive integer", {"max_turns": max_turns})
        self.board = board
        self.velocity_calculator = velocity_calculator
        self.inertia_manager = inertia_manager
        self.max_turns = max_turns
        self.stop_at_first_finish = stop_at_first_finish

        self.status = RaceStatus.NOT_STARTED
        self.turn = 0
        self.players: list[Player] = []
        self.finish_reachable = True

    # Setup

    def add_player(self, player: Player) -> None:
        """Register a player at its current position.

        Raises:
            RaceStateError: If the race has already started
            ConfigurationError: If the name is taken or the cell is occupied
        """
        if self.status != RaceStatus.NOT_STARTED:
            raise RaceStateError("Players can only be added before the race starts")
        if any(existing.name == player.name for existing in self.players):
            raise ConfigurationError("Duplicate player name", {"player": player.name})
        self.board.add_player(player)
        self.players.append(player)

    def place_players_on_starts(self, players: list[Player]) -> None:
        """Reset each player onto the track's start cells, in order."""
        starts = self.board.track.start_positions
        if len(players) > len(starts):
            raise ConfigurationError(
                "More players than start cells",
                {"players": len(players), "starts": len(starts)},
            )
        for player, start in zip(players, starts):
            player.reset_race_state(start)
            self.add_player(player)

    def start(self) -> None:
        """Validate the setup and move to RUNNING.

        Raises:
            RaceStateError: If the race was already started
            ConfigurationError: If there are no players or the track lacks
                a start or a finish cell
        """
        if self.status != RaceStatus.NOT_STARTED:
            raise RaceStateError("Race already started", {"status": self.status.value})
        track = self.board.track
        if not self.players:
            raise ConfigurationError("No players registered")
        if not track.start_positions:
            raise ConfigurationError("Track has no start cell", {"track": track.name})
        if not track.finish_positions:
            raise ConfigurationError("Track has no finish cell", {"track": track.name})

        self.finish_reachable = track.has_reachable_finish()
        if not self.finish_reachable:
            logger.warning("No finish cell of %s is reachable from a start cell", track.name)

        self.status = RaceStatus.RUNNING
        logger.info(
            "Race started on %s: %d players, at most %d turns",
            track.name, len(self.players), self.max_turns,
        )

    # Turn processing

    @property
    def active_players(self) -> list[Player]:
        return [player for player in self.players if not player.finished]

    @property
    def previous_directions(self) -> dict[str, Direction | None]:
        return {player.name: player.previous_direction for player in self.players}

    def calculate_new_position(self, current: Position, direction: Direction, speed: int) -> Position:
        """Displacement scales linearly with speed along the direction."""
        return current.translate(direction, speed)

    def play_turn(self) -> TurnReport:
        """Process one turn for every unfinished player.

        Raises:
            RaceStateError: If the race is not running
        """
        if self.status != RaceStatus.RUNNING:
            raise RaceStateError("Race is not running", {"status": self.status.value})

        self.turn += 1
        intents = [self._declare(player) for player in self.active_players]
        report = TurnReport(turn=self.turn, moves=self._resolve(intents))

        self.board.display(self.players, self.previous_directions)

        if self._should_finish(report):
            self._finish()
        report.status = self.status
        return report

    def turns(self) -> Iterator[TurnReport]:
        """Yield turn reports until the race finishes.

        Starts the race if needed. Callers may stop iterating between turns.
        """
        if self.status == RaceStatus.NOT_STARTED:
            self.start()
        while self.status == RaceStatus.RUNNING:
            yield self.play_turn()

    def run(self) -> RaceResult:
        """Play the race to completion and return the result."""
        for _ in self.turns():
            pass
        return self.result()

    start_race = run

    def _declare(self, player: Player) -> _Intent:
        intent = _Intent(player=player, start=player.position)
        allowed = self.inertia_manager.allowed_directions(player.speed, player.previous_direction)
        try:
            direction = player.choose_direction(allowed)
            if direction is None:
                intent.kind = MoveKind.STALLED
                intent.reason = "no safe direction"
                return intent
            # Direction is a str enum: a bare "E" compares equal to Direction.E
            if not isinstance(direction, Direction) or direction not in allowed:
                intent.kind = MoveKind.FORFEITED
                intent.reason = f"direction {direction!r} not allowed"
                logger.warning("%s chose disallowed direction %r", player.name, direction)
                return intent
            acceleration = player.choose_acceleration()
            if (
                isinstance(acceleration, bool)
                or not isinstance(acceleration, int)
                or acceleration not in ACCELERATIONS
            ):
                intent.kind = MoveKind.FORFEITED
                intent.reason = f"invalid acceleration {acceleration!r}"
                logger.warning("%s chose invalid acceleration %r", player.name, acceleration)
                return intent
            new_speed = max(MIN_SPEED, min(MAX_SPEED, player.speed + acceleration))
            target = self.calculate_new_position(player.position, direction, new_speed)
        except Exception as exc:
            intent.kind = MoveKind.FORFEITED
            intent.reason = f"strategy error: {exc}"
            logger.warning("Strategy of %s failed, turn forfeited", player.name, exc_info=True)
            return intent

        player.speed = new_speed
        intent.direction = direction
        intent.target = target
        return intent

    def _resolve(self, intents: list[_Intent]) -> list[MoveOutcome]:
        occupied = self.board.occupied_positions()
        contenders = Counter(
            intent.target
            for intent in intents
            if intent.kind is None and intent.target != intent.start
        )

        for intent in intents:
            if intent.kind is not None:
                continue
            target = intent.target
            occupant = occupied.get(target)
            if target == intent.start:
                self._commit(intent)
            elif self.board.is_obstacle(target):
                self._crash(intent, MoveKind.CRASHED_OBSTACLE)
            elif occupant is not None and occupant != intent.player.name:
                self._crash(intent, MoveKind.CRASHED_PLAYER, f"cell held by {occupant}")
            elif contenders[target] > 1:
                self._crash(intent, MoveKind.CONTESTED, "cell contested")
            else:
                self._commit(intent)

        return [self._outcome(intent) for intent in intents]

    def _crash(self, intent: _Intent, kind: MoveKind, reason: str = "") -> None:
        player = intent.player
        player.speed = 0
        player.crashes += 1
        intent.kind = kind
        intent.reason = reason
        logger.debug("%s crashed (%s) aiming at %s", player.name, kind.value, intent.target)

    def _commit(self, intent: _Intent) -> None:
        player = intent.player
        target = intent.target
        player.distance += self.velocity_calculator.speed(intent.start, target)
        self.board.update_player_position(player, target)
        player.previous_direction = intent.direction
        intent.kind = MoveKind.MOVED

        if self.board.is_finish(target):
            player.finished = True
            player.finish_turn = self.turn
            self.board.remove_player(player)
            intent.kind = MoveKind.FINISHED
            logger.info("%s finished on turn %d", player.name, self.turn)

    def _outcome(self, intent: _Intent) -> MoveOutcome:
        player = intent.player
        move = MoveOutcome(
            player=player.name,
            kind=intent.kind,
            start=intent.start,
            end=player.position,
            direction=intent.direction,
            speed=player.speed,
            target=intent.target,
            reason=intent.reason,
        )
        logger.debug("Turn %d: %s %s %s -> %s", self.turn, move.player, move.kind.value, move.start, move.end)
        return move

    def _should_finish(self, report: TurnReport) -> bool:
        if not self.active_players:
            return True
        if self.stop_at_first_finish and any(m.kind == MoveKind.FINISHED for m in report.moves):
            return True
        return self.turn >= self.max_turns

    def _finish(self) -> None:
        self.status = RaceStatus.FINISHED
        logger.info("Race finished after %d turns", self.turn)

    # Results

    def result(self) -> RaceResult:
        """Classification of the race so far."""
        order = {player.name: index for index, player in enumerate(self.players)}
        finishers = sorted(
            (p for p in self.players if p.finished),
            key=lambda p: (p.finish_turn, order[p.name]),
        )
        others = sorted(
            (p for p in self.players if not p.finished),
            key=lambda p: (-p.distance, order[p.name]),
        )
        standings = [
            Standing(
                position=rank,
                name=player.name,
                finished=player.finished,
                finish_turn=player.finish_turn,
                distance=player.distance,
                crashes=player.crashes,
            )
            for rank, player in enumerate(finishers + others, 1)
        ]

        winners: list[str] = []
        if finishers:
            first_turn = finishers[0].finish_turn
            winners = [p.name for p in finishers if p.finish_turn == first_turn]
        if not winners:
            outcome = RaceOutcome.TURN_LIMIT
        elif len(winners) == 1:
            outcome = RaceOutcome.WON
        else:
            outcome = RaceOutcome.DRAW

        return RaceResult(
            outcome=outcome,
            turns_played=self.turn,
            standings=standings,
            winners=winners,
            finish_reachable=self.finish_reachable,
        )
