"""In-place normalization of probability buffers."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from exploration.buffers import read_buffer, write_buffer

if TYPE_CHECKING:
    from exploration.buffers import FloatBuffer


def normalize(buffer: FloatBuffer) -> float:
    """Rescale *buffer* in place so that it sums to 1.

    A zero, negative or non-finite total leaves the buffer untouched; the
    samplers decide how to handle those cases.

    Args:
        buffer: Probability buffer to rescale.

    Returns:
        The total of the buffer before rescaling.
    """
    values = read_buffer(buffer)
    total = float(values.sum())
    if not math.isfinite(total) or total <= 0.0:
        return total
    if total != 1.0:
        write_buffer(buffer, values / total)
    return total
