"""Epsilon-greedy strategy."""

from __future__ import annotations

from typing import TYPE_CHECKING

from exploration.distributions.generators import generate_epsilon_greedy
from exploration.exceptions import StrategyInputError
from exploration.strategies.base import DecisionRequest, PmfStrategy
from exploration.strategies.registry import PmfStrategyRegistry

if TYPE_CHECKING:
    from exploration.buffers import FloatBuffer
    from exploration.status import ExplorationStatus


@PmfStrategyRegistry.register("epsilon_greedy")
class EpsilonGreedyStrategy(PmfStrategy):
    """Spreads ``config.epsilon`` uniformly and the rest on ``request.top_action``."""

    def generate(self, pmf: FloatBuffer, request: DecisionRequest) -> ExplorationStatus:
        if request.top_action is None:
            raise StrategyInputError("epsilon_greedy strategy requires a top_action")
        return generate_epsilon_greedy(
            self._config.epsilon,
            request.top_action,
            pmf,
            clamp_top_action=self._config.clamp_top_action,
        )
