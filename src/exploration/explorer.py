"""Explorer facade: the integration layer for exploration.

Orchestrates the full per-decision pipeline:
    strategy pmf -> minimum probability floor -> seeded draw -> action reorder -> log.

The core functions report failures as status codes; the Explorer converts
them to exceptions with :func:`~exploration.status.check_status`.
"""

from __future__ import annotations

import hashlib
import logging
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from exploration.config import ExplorationConfig, resolve_config
from exploration.distributions.minimum import enforce_minimum_probability
from exploration.exceptions import BadRangeError, SizeMismatchError, StrategyInputError
from exploration.logging.logger import DecisionLogger
from exploration.logging.types import DecisionRecord
from exploration.reorder import swap_chosen
from exploration.sampling.discrete import sample_after_normalizing, sample_without_normalizing
from exploration.seeding.stream import expand_seed
from exploration.status import ExplorationStatus, check_status
from exploration.strategies import DecisionRequest, PmfStrategyRegistry

if TYPE_CHECKING:
    from exploration.seeding.stream import Seed
    from exploration.strategies.base import PmfStrategy

logger = logging.getLogger("exploration")


def _config_hash(config: ExplorationConfig) -> str:
    """Return the first 16 hex characters of the SHA-256 of the config dump."""
    raw = config.model_dump_json().encode("utf-8")
    return hashlib.sha256(raw).hexdigest()[:16]


@dataclass(frozen=True, slots=True)
class Decision:
    """Outcome of one exploration decision.

    Attributes:
        index: Chosen action index into the pmf.
        probability: Probability of the chosen index.
        pmf: The distribution the index was drawn from.
        seed_hash: Expanded 64-bit seed; replaying it reproduces the draw.
        strategy: Name of the PMF strategy used.
        actions: Copy of the caller's action ids with the chosen one moved
            to position 0, or ``None`` if no actions were given.
    """

    index: int
    probability: float
    pmf: np.ndarray
    seed_hash: int
    strategy: str
    actions: list[Any] | None = None


class Explorer:
    """Turns a policy's ranking into a seeded, logged exploration decision.

    Args:
        config: Default configuration. Loaded from the environment
            (``EXPLORE_*``) when omitted.
    """

    def __init__(self, config: ExplorationConfig | None = None) -> None:
        self._default_config = config if config is not None else ExplorationConfig()
        self._default_strategy = PmfStrategyRegistry.build(self._default_config)
        self._default_config_hash = _config_hash(self._default_config)
        self._logger = DecisionLogger(self._default_config)

        logger.info(
            "Explorer initialized: strategy=%s, minimum_uniform=%.4f, normalize=%s",
            self._default_config.strategy,
            self._default_config.minimum_uniform,
            self._default_config.normalize_before_sampling,
        )

    @property
    def config(self) -> ExplorationConfig:
        """The default configuration."""
        return self._default_config

    @property
    def decision_logger(self) -> DecisionLogger:
        """The logger receiving one record per decision."""
        return self._logger

    def choose(
        self,
        seed: Seed,
        *,
        top_action: int | None = None,
        scores: Sequence[float] | None = None,
        votes: Sequence[int] | None = None,
        num_actions: int | None = None,
        actions: Sequence[Any] | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> Decision:
        """Generate a pmf, draw an action from it and log the decision.

        The number of actions is *num_actions* if given, else the length of
        *scores*, else the length of *actions*.

        Args:
            seed: Integer or byte/text seed for the draw.
            top_action: Exploit action (epsilon-greedy).
            scores: Per-action scores (softmax).
            votes: Top-action votes (bag).
            num_actions: Number of actions.
            actions: Action ids in rank order. Not modified; the decision
                carries a reordered copy.
            overrides: Per-decision ``explore_*`` config overrides.

        Returns:
            The Decision.

        Raises:
            BadRangeError: If a parameter or buffer is out of range.
            SizeMismatchError: If inputs disagree on the number of actions.
            StrategyInputError: If the strategy's input or the action count
                is missing.
            ConfigValidationError: If *overrides* has unknown keys.
        """
        start_ns = time.perf_counter_ns()

        config = resolve_config(self._default_config, overrides)
        if config is self._default_config:
            strategy: PmfStrategy = self._default_strategy
            config_hash = self._default_config_hash
        else:
            strategy = PmfStrategyRegistry.build(config)
            config_hash = _config_hash(config)

        size = self._resolve_num_actions(num_actions, scores, actions)
        if size < 0:
            raise BadRangeError(
                f"Number of actions must be non-negative, got {size}",
                ExplorationStatus.BAD_RANGE,
            )
        if actions is not None and len(actions) != size:
            raise SizeMismatchError(
                f"Got {len(actions)} action ids for {size} actions",
                ExplorationStatus.PDF_RANKING_SIZE_MISMATCH,
            )

        pmf = np.zeros(size, dtype=np.float64)
        request = DecisionRequest(
            num_actions=size, top_action=top_action, scores=scores, votes=votes
        )
        check_status(strategy.generate(pmf, request), f"{strategy.name} generation")

        if config.minimum_uniform > 0.0:
            check_status(
                enforce_minimum_probability(
                    config.minimum_uniform, config.update_zero_elements, pmf
                ),
                "enforce_minimum_probability",
            )

        if config.normalize_before_sampling:
            result = sample_after_normalizing(seed, pmf)
        else:
            result = sample_without_normalizing(seed, pmf)
        check_status(result.status, "sampling")
        index = int(result.index)  # type: ignore[arg-type]

        reordered: list[Any] | None = None
        if actions is not None:
            reordered = list(actions)
            check_status(swap_chosen(reordered, index), "swap_chosen")

        seed_hash = expand_seed(seed)
        probability = float(pmf[index])
        total_ms = (time.perf_counter_ns() - start_ns) / 1_000_000

        self._logger.log_decision(
            DecisionRecord(
                timestamp_ns=time.time_ns(),
                total_ms=total_ms,
                strategy=strategy.name,
                num_actions=size,
                minimum_uniform=config.minimum_uniform,
                normalized=config.normalize_before_sampling,
                seed_hash=seed_hash,
                chosen_index=index,
                chosen_probability=probability,
                config_hash=config_hash,
            )
        )

        return Decision(
            index=index,
            probability=probability,
            pmf=pmf,
            seed_hash=seed_hash,
            strategy=strategy.name,
            actions=reordered,
        )

    @staticmethod
    def _resolve_num_actions(
        num_actions: int | None,
        scores: Sequence[float] | None,
        actions: Sequence[Any] | None,
    ) -> int:
        if num_actions is not None:
            return int(num_actions)
        if scores is not None:
            return len(scores)
        if actions is not None:
            return len(actions)
        raise StrategyInputError("Cannot infer the number of actions: pass num_actions")
