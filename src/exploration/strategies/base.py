"""Base classes for PMF strategies.

A strategy binds one of the generators in ``exploration.distributions`` to
the Explorer: it reads its parameters from the active config and its
per-decision input from a :class:`DecisionRequest`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from exploration.buffers import FloatBuffer
    from exploration.config import ExplorationConfig
    from exploration.status import ExplorationStatus


@dataclass(frozen=True, slots=True)
class DecisionRequest:
    """Per-decision input handed to a strategy.

    Attributes:
        num_actions: Size of the pmf to generate.
        top_action: Exploit action for epsilon-greedy.
        scores: One score per action for softmax.
        votes: Top-action votes for bagging.
    """

    num_actions: int
    top_action: int | None = None
    scores: Sequence[float] | None = None
    votes: Sequence[int] | None = None


class PmfStrategy(ABC):
    """Abstract base class for PMF strategies.

    Args:
        config: Active configuration for this decision.
    """

    name: str = ""

    def __init__(self, config: ExplorationConfig) -> None:
        self._config = config

    @abstractmethod
    def generate(self, pmf: FloatBuffer, request: DecisionRequest) -> ExplorationStatus:
        """Fill *pmf* for *request*.

        Args:
            pmf: Pre-allocated buffer of length ``request.num_actions``.
            request: Per-decision input.

        Returns:
            Status of the underlying generator.

        Raises:
            StrategyInputError: If *request* lacks the input this strategy needs.
        """
