"""PMF strategy subsystem for exploration.

Importing this package registers the built-in strategies.
"""

from exploration.strategies.bag import BagStrategy
from exploration.strategies.base import DecisionRequest, PmfStrategy
from exploration.strategies.epsilon_greedy import EpsilonGreedyStrategy
from exploration.strategies.registry import PmfStrategyRegistry
from exploration.strategies.softmax import SoftmaxStrategy

__all__ = [
    "BagStrategy",
    "DecisionRequest",
    "EpsilonGreedyStrategy",
    "PmfStrategy",
    "PmfStrategyRegistry",
    "SoftmaxStrategy",
]
