"""Bagging (vote) strategy."""

from __future__ import annotations

from typing import TYPE_CHECKING

from exploration.distributions.generators import generate_bag
from exploration.exceptions import StrategyInputError
from exploration.strategies.base import DecisionRequest, PmfStrategy
from exploration.strategies.registry import PmfStrategyRegistry

if TYPE_CHECKING:
    from exploration.buffers import FloatBuffer
    from exploration.status import ExplorationStatus


@PmfStrategyRegistry.register("bag")
class BagStrategy(PmfStrategy):
    """Mass proportional to the top-action votes in ``request.votes``."""

    def generate(self, pmf: FloatBuffer, request: DecisionRequest) -> ExplorationStatus:
        if request.votes is None:
            raise StrategyInputError("bag strategy requires votes")
        return generate_bag(request.votes, pmf)
