"""Seeded sampling of a real value from a bucketed pdf.

The range ``[range_min, range_max)`` is split into ``len(pdf)`` equal-width
buckets. Draw 0 of the seed's stream picks a bucket by inverse CDF over the
normalized pdf; draw 1 places the value uniformly inside that bucket.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from exploration.buffers import read_buffer, write_buffer
from exploration.distributions.normalize import normalize
from exploration.sampling.discrete import resolve_seed, select_index
from exploration.sampling.types import PdfSampleResult
from exploration.seeding.stream import UniformStream
from exploration.status import ExplorationStatus

if TYPE_CHECKING:
    from exploration.buffers import FloatBuffer
    from exploration.seeding.stream import Seed

_BAD_RANGE = PdfSampleResult(ExplorationStatus.BAD_RANGE)


def sample_pdf(
    seed: Seed,
    pdf: FloatBuffer,
    range_min: float,
    range_max: float,
) -> PdfSampleResult:
    """Sample a value from *pdf* over ``[range_min, range_max)``.

    *pdf* is normalized in place. Negative weights are clamped to zero and
    an all-zero pdf is replaced by a uniform one.

    Args:
        seed: Integer or byte/text seed.
        pdf: Bucket weights, one per equal-width sub-interval.
        range_min: Inclusive lower bound of the range.
        range_max: Exclusive upper bound of the range.

    Returns:
        PdfSampleResult with the value and its bucket, or ``BAD_RANGE`` when
        the bounds are not finite with ``range_min < range_max``, the pdf is
        empty or holds non-finite weights, the weights overflow when summed, or
        the seed is invalid.
    """
    range_min = float(range_min)
    range_max = float(range_max)
    if not (math.isfinite(range_min) and math.isfinite(range_max)):
        return _BAD_RANGE
    if range_min >= range_max:
        return _BAD_RANGE

    num_buckets = len(pdf)
    if num_buckets == 0:
        return _BAD_RANGE
    values = read_buffer(pdf)
    if not bool(np.isfinite(values).all()):
        return _BAD_RANGE
    expanded = resolve_seed(seed)
    if expanded is None:
        return _BAD_RANGE

    np.maximum(values, 0.0, out=values)
    total = normalize(values)
    if not math.isfinite(total):
        return _BAD_RANGE
    if total == 0.0:
        values.fill(1.0 / num_buckets)
    write_buffer(pdf, values)

    stream = UniformStream(expanded)
    bucket = select_index(values, next(stream))
    offset = next(stream)

    width = (range_max - range_min) / num_buckets
    value = range_min + (bucket + offset) * width
    if value >= range_max:
        # Rounding at the top bucket edge.
        value = math.nextafter(range_max, range_min)
    return PdfSampleResult(ExplorationStatus.SUCCESS, value, bucket)
