"""Seeded inverse-CDF sampling of an action index from a pmf.

A single uniform draw ``u`` (draw 0 of the seed's stream) is compared with
the running sum of the pmf; the chosen index is the first one whose running
sum exceeds ``u``. The strict comparison means zero-mass entries are never
chosen by the walk itself. If the weights sum to less than ``u``, the
unaccounted mass belongs to the last action.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from exploration.buffers import read_buffer, write_buffer
from exploration.distributions.normalize import normalize
from exploration.sampling.types import SampleResult
from exploration.seeding.stream import expand_seed, uniform_at
from exploration.status import ExplorationStatus

if TYPE_CHECKING:
    from exploration.buffers import FloatBuffer
    from exploration.seeding.stream import Seed

_BAD_RANGE = SampleResult(ExplorationStatus.BAD_RANGE)


def resolve_seed(seed: Seed) -> int | None:
    """Expand *seed*, returning ``None`` when it is not a valid seed."""
    try:
        return expand_seed(seed)
    except (TypeError, ValueError):
        return None


def select_index(values: np.ndarray, u: float) -> int:
    """Walk the non-negative weights *values* and pick the index for *u*.

    Args:
        values: Non-negative weights, conceptually summing to 1.
        u: Uniform draw in [0, 1).

    Returns:
        First index whose running sum exceeds *u*, or the last index
        when the walk ends unmatched.
    """
    cdf = np.cumsum(values)
    index = int(np.searchsorted(cdf, u, side="right"))
    return min(index, len(values) - 1)


def sample_after_normalizing(seed: Seed, pmf: FloatBuffer) -> SampleResult:
    """Sample an index after normalizing *pmf* in place.

    Negative entries are clamped to zero. If nothing is left, the first
    action is assumed best: the buffer becomes ``[1, 0, ..., 0]`` and index
    0 is returned.

    Args:
        seed: Integer or byte/text seed.
        pmf: Probability buffer; rewritten when it does not already sum to 1.

    Returns:
        SampleResult with the chosen index, or ``BAD_RANGE`` for an empty
        buffer, non-finite entries, a total that overflows or an invalid
        seed.
    """
    if len(pmf) == 0:
        return _BAD_RANGE
    values = read_buffer(pmf)
    if not bool(np.isfinite(values).all()):
        return _BAD_RANGE
    expanded = resolve_seed(seed)
    if expanded is None:
        return _BAD_RANGE

    negative = values < 0.0
    values[negative] = 0.0
    total = normalize(values)
    if not math.isfinite(total):
        return _BAD_RANGE
    if total == 0.0:
        values[0] = 1.0
        write_buffer(pmf, values)
        return SampleResult(ExplorationStatus.SUCCESS, 0)

    if total != 1.0 or bool(negative.any()):
        write_buffer(pmf, values)

    return SampleResult(ExplorationStatus.SUCCESS, select_index(values, uniform_at(expanded)))


def sample_without_normalizing(seed: Seed, pmf: FloatBuffer) -> SampleResult:
    """Sample an index from *pmf*, trusting that it already sums to 1.

    The buffer is never written. Negative entries count as zero mass.

    Args:
        seed: Integer or byte/text seed.
        pmf: Normalized probability buffer.

    Returns:
        SampleResult with the chosen index, or ``BAD_RANGE`` for an empty
        buffer, non-finite entries or an invalid seed.
    """
    if len(pmf) == 0:
        return _BAD_RANGE
    values = read_buffer(pmf)
    if not bool(np.isfinite(values).all()):
        return _BAD_RANGE
    expanded = resolve_seed(seed)
    if expanded is None:
        return _BAD_RANGE

    np.maximum(values, 0.0, out=values)
    return SampleResult(ExplorationStatus.SUCCESS, select_index(values, uniform_at(expanded)))
