"""Helpers for reading and writing caller-owned probability buffers.

A buffer is any mutable, indexable, fixed-length sequence of floats: a
``list``, an ``array.array`` or a 1-D ``numpy.ndarray``. The library reads
buffers into float64 arrays for computation and writes results back with
item assignment, so the caller's object keeps its identity, type and length.
No reference to a buffer is kept once a call returns.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Union

import numpy as np

FloatBuffer = Union[MutableSequence[float], np.ndarray]
"""A caller-owned, pre-sized buffer of probabilities or densities."""

IntSequence = Union[Sequence[int], np.ndarray]
"""Read-only sequence of action indexes or vote counts."""

FloatSequence = Union[Sequence[float], np.ndarray]
"""Read-only sequence of scores."""


def read_buffer(buffer: FloatSequence) -> np.ndarray:
    """Return a float64 copy of *buffer* for computation."""
    return np.array(buffer, dtype=np.float64, copy=True).reshape(-1)


def write_buffer(buffer: FloatBuffer, values: np.ndarray) -> None:
    """Write *values* into *buffer* element-wise.

    Args:
        buffer: Destination buffer, same length as *values*.
        values: Computed float64 values.
    """
    if isinstance(buffer, np.ndarray):
        buffer[...] = values.reshape(buffer.shape)
        return
    for i, value in enumerate(values.tolist()):
        buffer[i] = value


def fill_buffer(buffer: FloatBuffer, value: float) -> None:
    """Set every entry of *buffer* to *value*."""
    if isinstance(buffer, np.ndarray):
        buffer.fill(value)
        return
    for i in range(len(buffer)):
        buffer[i] = value
