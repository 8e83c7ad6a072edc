"""Player strategies: human input and automated bots."""

from enum import Enum

import numpy as np

from vecrace.models import Strategy
from vecrace.simulation.board import Board

from .base import BoardAwareStrategy
from .chaser import ChaserStrategy
from .greedy import GreedyStrategy
from .human import HumanStrategy
from .safe_runner import SafeRunnerStrategy


class StrategyKind(str, Enum):
    """Available strategy implementations."""

    HUMAN = "human"
    GREEDY = "greedy"
    CHASER = "chaser"
    SAFE_RUNNER = "safe_runner"


def create_strategy(
    kind: StrategyKind | str,
    board: Board,
    rng: np.random.Generator | None = None,
    **options,
) -> Strategy:
    """Build a strategy by kind.

    Args:
        kind: Strategy kind (enum member or its value)
        board: Board the bots read from
        rng: Random number generator shared by the bots
        **options: Extra keyword arguments for the strategy constructor
    """
    kind = StrategyKind(kind)
    if kind == StrategyKind.HUMAN:
        return HumanStrategy(**options)
    if kind == StrategyKind.GREEDY:
        return GreedyStrategy(board, rng)
    if kind == StrategyKind.CHASER:
        return ChaserStrategy(board, rng)
    return SafeRunnerStrategy(board, rng, **options)


__all__ = [
    "BoardAwareStrategy",
    "ChaserStrategy",
    "GreedyStrategy",
    "HumanStrategy",
    "SafeRunnerStrategy",
    "StrategyKind",
    "create_strategy",
]
