"""Command line entry point: run a vector race on a track file.

Usage:
    vecrace --track tracks/oval.txt --bots greedy chaser safe_runner
    vecrace --config race.json --seed 7
"""

import argparse
import logging
import sys

from vecrace.config import PlayerSettings, RaceSettings, build_race, load_settings
from vecrace.exceptions import VectorRaceError
from vecrace.logging_config import configure_logging
from vecrace.output import ConsoleDisplay, ConsoleOutput
from vecrace.strategies import StrategyKind

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate a grid vector race")
    parser.add_argument("--track", help="Track file (required unless --config is given)")
    parser.add_argument("--config", help="JSON race settings file")
    parser.add_argument(
        "--bots",
        nargs="*",
        default=["greedy", "safe_runner"],
        choices=[kind.value for kind in StrategyKind if kind != StrategyKind.HUMAN],
        help="Bot strategies to race (default: greedy safe_runner)",
    )
    parser.add_argument(
        "--human",
        metavar="NAME",
        help="Add a human player with this name",
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        default=100,
        help="Maximum number of turns (default: 100)",
    )
    parser.add_argument("--seed", type=int, help="Random seed for the bots")
    parser.add_argument(
        "--first-finish",
        action="store_true",
        help="Stop the race as soon as one player finishes",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not draw the board after every turn",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level (default: WARNING)",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> RaceSettings:
    """Build settings from a config file, with command line overrides."""
    if args.config:
        settings = load_settings(args.config)
        if args.seed is not None:
            settings = settings.model_copy(update={"seed": args.seed})
        return settings

    players = []
    if args.human:
        players.append(PlayerSettings(name=args.human, kind=StrategyKind.HUMAN))
    for index, kind in enumerate(args.bots, 1):
        players.append(PlayerSettings(name=f"{kind}-{index}", kind=StrategyKind(kind)))
    return RaceSettings(
        track=args.track,
        max_turns=args.max_turns,
        seed=args.seed,
        stop_at_first_finish=args.first_finish,
        players=players,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if not args.track and not args.config:
        parser.error("one of --track or --config is required")

    try:
        settings = settings_from_args(args)
        logger.debug("Race settings: %s", settings)
        display = None if args.quiet else ConsoleDisplay()
        engine = build_race(settings, display_sink=display)
        for report in engine.turns():
            if not args.quiet:
                ConsoleOutput.print_turn(report)
    except VectorRaceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        # pydantic validation of command line values
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    ConsoleOutput.print_results(engine.result())
    return 0


if __name__ == "__main__":
    sys.exit(main())
