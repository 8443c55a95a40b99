"""Softmax strategy."""

from __future__ import annotations

from typing import TYPE_CHECKING

from exploration.distributions.generators import generate_softmax
from exploration.exceptions import StrategyInputError
from exploration.strategies.base import DecisionRequest, PmfStrategy
from exploration.strategies.registry import PmfStrategyRegistry

if TYPE_CHECKING:
    from exploration.buffers import FloatBuffer
    from exploration.status import ExplorationStatus


@PmfStrategyRegistry.register("softmax")
class SoftmaxStrategy(PmfStrategy):
    """Weights ``request.scores`` by ``exp(config.softmax_lambda * score)``.

    A length mismatch between the scores and ``request.num_actions`` is
    reported by the generator as ``PDF_RANKING_SIZE_MISMATCH``.
    """

    def generate(self, pmf: FloatBuffer, request: DecisionRequest) -> ExplorationStatus:
        if request.scores is None:
            raise StrategyInputError("softmax strategy requires scores")
        return generate_softmax(self._config.softmax_lambda, request.scores, pmf)
