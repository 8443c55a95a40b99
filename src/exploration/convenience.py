"""Allocating, exception-raising wrappers around the core API.

The core functions write into caller buffers and return status codes. These
wrappers allocate a fresh float64 ``numpy.ndarray``, call the core function
and raise :class:`~exploration.exceptions.BadRangeError` or
:class:`~exploration.exceptions.SizeMismatchError` on failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from exploration.distributions.generators import (
    generate_bag,
    generate_bag_from_counts,
    generate_epsilon_greedy,
    generate_softmax,
)
from exploration.distributions.minimum import enforce_minimum_probability
from exploration.sampling.continuous import sample_pdf
from exploration.sampling.discrete import sample_after_normalizing, sample_without_normalizing
from exploration.status import check_status

if TYPE_CHECKING:
    from collections.abc import Iterable

    from exploration.buffers import FloatSequence, IntSequence
    from exploration.seeding.stream import Seed


def epsilon_greedy_pmf(
    epsilon: float,
    top_action: int,
    num_actions: int,
    *,
    clamp_top_action: bool = False,
) -> np.ndarray:
    """Return a new epsilon-greedy pmf over *num_actions* actions."""
    pmf = np.zeros(max(int(num_actions), 0), dtype=np.float64)
    check_status(
        generate_epsilon_greedy(epsilon, top_action, pmf, clamp_top_action=clamp_top_action),
        "generate_epsilon_greedy",
    )
    return pmf


def softmax_pmf(lambda_: float, scores: FloatSequence) -> np.ndarray:
    """Return a new softmax pmf with one entry per score."""
    pmf = np.zeros(len(scores), dtype=np.float64)
    check_status(generate_softmax(lambda_, scores, pmf), "generate_softmax")
    return pmf


def bag_pmf(top_actions: Iterable[int], num_actions: int) -> np.ndarray:
    """Return a new pmf from top-action votes over *num_actions* actions."""
    pmf = np.zeros(max(int(num_actions), 0), dtype=np.float64)
    check_status(generate_bag(top_actions, pmf), "generate_bag")
    return pmf


def bag_pmf_from_counts(vote_counts: IntSequence) -> np.ndarray:
    """Return a new pmf from per-action vote counts."""
    pmf = np.zeros(len(vote_counts), dtype=np.float64)
    check_status(generate_bag_from_counts(vote_counts, pmf), "generate_bag_from_counts")
    return pmf


def with_minimum_probability(
    pmf: FloatSequence,
    minimum_uniform: float,
    *,
    update_zero_elements: bool = False,
) -> np.ndarray:
    """Return a copy of *pmf* with the minimum probability floor applied."""
    result = np.array(pmf, dtype=np.float64, copy=True)
    check_status(
        enforce_minimum_probability(minimum_uniform, update_zero_elements, result),
        "enforce_minimum_probability",
    )
    return result


def sample_index(seed: Seed, pmf: FloatSequence, *, normalize: bool = True) -> int:
    """Draw an action index from *pmf* without modifying it.

    Args:
        seed: Integer or byte/text seed.
        pmf: Probability weights.
        normalize: Normalize a copy of *pmf* first. When False the weights
            are assumed to sum to 1.

    Returns:
        The chosen index.
    """
    values = np.array(pmf, dtype=np.float64, copy=True)
    if normalize:
        result = sample_after_normalizing(seed, values)
    else:
        result = sample_without_normalizing(seed, values)
    check_status(result.status, "sample_index")
    return int(result.index)  # type: ignore[arg-type]


def sample_value(
    seed: Seed,
    pdf: FloatSequence,
    range_min: float,
    range_max: float,
) -> float:
    """Draw a value in ``[range_min, range_max)`` from *pdf* without modifying it."""
    values = np.array(pdf, dtype=np.float64, copy=True)
    result = sample_pdf(seed, values, range_min, range_max)
    check_status(result.status, "sample_value")
    return float(result.value)  # type: ignore[arg-type]
