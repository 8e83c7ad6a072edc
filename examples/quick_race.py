#!/usr/bin/env python3
"""Quick race example on the bundled hairpin track.

Runs one seeded race between the three bots and prints every turn.

Usage:
    python examples/quick_race.py [--seed N]
"""

import argparse
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np

from vecrace.data import TrackLoader
from vecrace.models import Player
from vecrace.output import ConsoleDisplay, ConsoleOutput
from vecrace.simulation import Board, InertiaManager, RaceEngine, VelocityCalculator
from vecrace.strategies import ChaserStrategy, GreedyStrategy, SafeRunnerStrategy

TRACK_FILE = Path(__file__).parent / "tracks" / "hairpin.txt"


def main():
    parser = argparse.ArgumentParser(description="Run a quick vector race")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--max-turns", type=int, default=60, help="Turn bound (default: 60)")
    args = parser.parse_args()

    track = TrackLoader.load(TRACK_FILE)
    print(f"Track: {track.name} ({track.width}x{track.height})")
    print(f"Starts: {len(track.start_positions)}, finishes: {len(track.finish_positions)}")

    board = Board(track, display_sink=ConsoleDisplay())
    engine = RaceEngine(
        board=board,
        velocity_calculator=VelocityCalculator(),
        inertia_manager=InertiaManager(),
        max_turns=args.max_turns,
    )

    rng = np.random.default_rng(args.seed)
    starts = track.start_positions
    players = [
        Player(name="Greedy", position=starts[0], strategy=GreedyStrategy(board, rng)),
        Player(name="Chaser", position=starts[1], strategy=ChaserStrategy(board, rng)),
        Player(name="Runner", position=starts[2], strategy=SafeRunnerStrategy(board, rng)),
    ]
    for player in players:
        engine.add_player(player)

    for report in engine.turns():
        ConsoleOutput.print_turn(report)

    ConsoleOutput.print_results(engine.result())
    return 0


if __name__ == "__main__":
    sys.exit(main())
