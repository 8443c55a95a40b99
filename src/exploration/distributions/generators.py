"""Exploration PMF generators.

Each generator fills a caller-supplied, pre-sized pmf buffer and returns an
:class:`~exploration.status.ExplorationStatus`. Inputs are fully validated
before the first write, so a failing call leaves the buffer as it was.

Generators:
    epsilon-greedy: uniform floor of ``epsilon / N`` plus ``1 - epsilon``
        on the top action.
    softmax: ``exp(lambda * (score_i - max_score))`` normalized, with a
        uniform fallback when the weights degenerate.
    bag: one vote per bagged model; mass proportional to vote counts.
"""

from __future__ import annotations

import math
import operator
from typing import TYPE_CHECKING

import numpy as np

from exploration.buffers import fill_buffer, read_buffer, write_buffer
from exploration.status import ExplorationStatus

if TYPE_CHECKING:
    from collections.abc import Iterable

    from exploration.buffers import FloatBuffer, FloatSequence, IntSequence


def _in_unit_interval(value: float) -> bool:
    return math.isfinite(value) and 0.0 <= value <= 1.0


def generate_epsilon_greedy(
    epsilon: float,
    top_action: int,
    pmf: FloatBuffer,
    *,
    clamp_top_action: bool = False,
) -> ExplorationStatus:
    """Fill *pmf* with an epsilon-greedy distribution.

    Every action gets ``epsilon / N``; ``top_action`` additionally gets
    ``1 - epsilon``.

    Args:
        epsilon: Exploration mass in [0, 1].
        top_action: Index of the exploit action.
        pmf: Pre-allocated buffer of length N.
        clamp_top_action: If True, a ``top_action >= N`` is clamped to
            ``N - 1`` instead of failing. Negative indexes always fail.

    Returns:
        ``SUCCESS``, or ``BAD_RANGE`` for an empty buffer, an epsilon outside
        [0, 1], or an invalid ``top_action``.
    """
    num_actions = len(pmf)
    epsilon = float(epsilon)
    if num_actions == 0 or not _in_unit_interval(epsilon):
        return ExplorationStatus.BAD_RANGE

    top_action = operator.index(top_action)
    if top_action < 0:
        return ExplorationStatus.BAD_RANGE
    if top_action >= num_actions:
        if not clamp_top_action:
            return ExplorationStatus.BAD_RANGE
        top_action = num_actions - 1

    values = np.full(num_actions, epsilon / num_actions, dtype=np.float64)
    values[top_action] += 1.0 - epsilon
    write_buffer(pmf, values)
    return ExplorationStatus.SUCCESS


def generate_softmax(
    lambda_: float,
    scores: FloatSequence,
    pmf: FloatBuffer,
) -> ExplorationStatus:
    """Fill *pmf* with a softmax distribution over *scores*.

    Uses the shift-by-max trick for numerical stability. Infinite scores
    are limits of the weighting: with ``lambda > 0`` every ``+inf`` score
    shares all the mass equally (``-inf`` when ``lambda < 0``), and scores
    infinite the other way get none. When the weights cannot be normalized
    (e.g. every score is ``-inf`` with ``lambda > 0``), the pmf falls back
    to uniform ``1 / N``.

    Args:
        lambda_: Inverse temperature. 0 yields a uniform distribution;
            larger values concentrate mass on high scores.
        scores: One score per action.
        pmf: Pre-allocated buffer with one slot per score.

    Returns:
        ``SUCCESS``; ``BAD_RANGE`` for empty inputs, a non-finite lambda or
        NaN scores; ``PDF_RANKING_SIZE_MISMATCH`` when the lengths differ.
    """
    values = read_buffer(scores)
    num_actions = len(pmf)
    if len(values) == 0 or num_actions == 0:
        return ExplorationStatus.BAD_RANGE
    if len(values) != num_actions:
        return ExplorationStatus.PDF_RANKING_SIZE_MISMATCH

    lambda_ = float(lambda_)
    if not math.isfinite(lambda_) or bool(np.isnan(values).any()):
        return ExplorationStatus.BAD_RANGE

    if lambda_ == 0.0:
        fill_buffer(pmf, 1.0 / num_actions)
        return ExplorationStatus.SUCCESS

    dominant = np.isposinf(values) if lambda_ > 0.0 else np.isneginf(values)
    if bool(dominant.any()):
        write_buffer(pmf, dominant.astype(np.float64) / int(dominant.sum()))
        return ExplorationStatus.SUCCESS

    # Shift by the score with the largest weight.
    reference = values.max() if lambda_ > 0.0 else values.min()
    with np.errstate(invalid="ignore", over="ignore"):
        weights = np.exp(lambda_ * (values - reference))
        total = float(weights.sum())

    if not math.isfinite(total) or total <= 0.0 or not bool(np.isfinite(weights).all()):
        fill_buffer(pmf, 1.0 / num_actions)
        return ExplorationStatus.SUCCESS

    write_buffer(pmf, weights / total)
    return ExplorationStatus.SUCCESS


def generate_bag(top_actions: Iterable[int], pmf: FloatBuffer) -> ExplorationStatus:
    """Fill *pmf* from top-action votes, one vote per bagged model.

    Each vote adds ``1 / len(top_actions)`` to the voted action.

    Args:
        top_actions: Indexes of the actions picked by each model.
        pmf: Pre-allocated buffer of length N.

    Returns:
        ``SUCCESS``; ``BAD_RANGE`` for no votes, an empty buffer or a negative
        vote; ``PDF_RANKING_SIZE_MISMATCH`` for a vote ``>= N``.
    """
    votes = [operator.index(vote) for vote in top_actions]
    num_actions = len(pmf)
    if not votes or num_actions == 0:
        return ExplorationStatus.BAD_RANGE
    if min(votes) < 0:
        return ExplorationStatus.BAD_RANGE
    if max(votes) >= num_actions:
        return ExplorationStatus.PDF_RANKING_SIZE_MISMATCH

    counts = np.bincount(np.asarray(votes, dtype=np.int64), minlength=num_actions)
    write_buffer(pmf, counts.astype(np.float64) / len(votes))
    return ExplorationStatus.SUCCESS


def generate_bag_from_counts(vote_counts: IntSequence, pmf: FloatBuffer) -> ExplorationStatus:
    """Fill *pmf* from per-action vote counts.

    ``vote_counts[i]`` is the number of bagged models that picked action
    ``i``. With no votes at all the distribution is uniform.

    Args:
        vote_counts: One non-negative count per action.
        pmf: Pre-allocated buffer with one slot per count.

    Returns:
        ``SUCCESS``; ``BAD_RANGE`` for empty inputs or negative counts;
        ``PDF_RANKING_SIZE_MISMATCH`` when the lengths differ.
    """
    counts = read_buffer(vote_counts)
    num_actions = len(pmf)
    if len(counts) == 0 or num_actions == 0:
        return ExplorationStatus.BAD_RANGE
    if len(counts) != num_actions:
        return ExplorationStatus.PDF_RANKING_SIZE_MISMATCH
    if not bool(np.isfinite(counts).all()) or bool((counts < 0).any()):
        return ExplorationStatus.BAD_RANGE

    total = float(counts.sum())
    if total == 0.0:
        fill_buffer(pmf, 1.0 / num_actions)
        return ExplorationStatus.SUCCESS

    write_buffer(pmf, counts / total)
    return ExplorationStatus.SUCCESS
