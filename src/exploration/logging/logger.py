"""Diagnostic logger for exploration decisions.

Uses the standard ``logging`` module with the ``"exploration"`` logger.
Supports three verbosity levels and an in-memory diagnostic mode for
post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from exploration.config import ExplorationConfig
    from exploration.logging.types import DecisionRecord

logger = logging.getLogger("exploration")


class DecisionLogger:
    """Per-decision diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per decision (strategy, chosen index and its
        probability, seed hash, floor).

        ``"full"``: Full JSON dump of all record fields.

    Diagnostic mode stores all records in memory for post-hoc analysis via
    ``get_diagnostic_data()`` and ``get_summary_stats()``, e.g. to compare
    the observed index frequencies against the pmfs that produced them.
    """

    def __init__(self, config: ExplorationConfig) -> None:
        """Initialize the logger from configuration.

        Args:
            config: Configuration providing ``log_level`` and ``diagnostic_mode``.
        """
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[DecisionRecord] = []

    def log_decision(self, record: DecisionRecord) -> None:
        """Log a single exploration decision.

        Args:
            record: Immutable record of the decision pipeline execution.
        """
        # Store in memory if diagnostic mode is enabled.
        if self._diagnostic_mode:
            self._records.append(record)

        # Emit log output based on level.
        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "strategy=%s actions=%d chosen=%d prob=%.4f seed=%d floor=%.4f%s total=%.3fms",
                record.strategy,
                record.num_actions,
                record.chosen_index,
                record.chosen_probability,
                record.seed_hash,
                record.minimum_uniform,
                "" if record.normalized else " [UNNORMALIZED]",
                record.total_ms,
            )
        elif self._log_level == "full":
            logger.info("decision_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[DecisionRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``).

        Returns:
            List of all DecisionRecord instances logged so far, oldest first.
            Empty if diagnostic_mode is False.
        """
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        The ``non_first_*`` entries count decisions whose chosen index was
        not 0, i.e. how often the draw moved away from the top-ranked action.

        Returns:
            Dictionary with aggregate stats (decision count, chosen
            probability and timing aggregates, per-index and per-strategy
            counts, non-first count and rate), or empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        probs = [r.chosen_probability for r in self._records]
        total_times = [r.total_ms for r in self._records]
        explored = sum(1 for r in self._records if r.chosen_index != 0)
        return {
            "total_decisions": n,
            "mean_chosen_prob": sum(probs) / n,
            "min_chosen_prob": min(probs),
            "mean_total_ms": sum(total_times) / n,
            "max_total_ms": max(total_times),
            "index_counts": dict(Counter(r.chosen_index for r in self._records)),
            "strategy_counts": dict(Counter(r.strategy for r in self._records)),
            "non_first_count": explored,
            "non_first_rate": explored / n,
        }
