"""Seed expansion and the deterministic uniform stream.

A seed is either a 64-bit unsigned integer, used as is, or a byte string
(``str`` is UTF-8 encoded first) hashed with MurmurHash3 x86_32 and
zero-extended to 64 bits.

Uniform draws come from the ``merand48`` linear congruential step::

    state_{k+1} = (0xEECE66D5DEECE66D * state_k + 2147483647) mod 2**64
    draw_n      = ((state_{n+1} >> 25) & 0x7FFFFF) / 2**23

with ``state_0`` the expanded seed. Every draw is an exact multiple of
2**-23 in [0, 1), so the n-th draw for a given seed is identical on every
platform and in every language port. Because the step is affine, the n-th
draw can be computed directly by jumping ahead ``n + 1`` steps in
O(log n) multiplications.
"""

from __future__ import annotations

import operator
from typing import Union

from exploration.seeding.murmur import murmurhash3_32

SEED_ALGORITHM = "merand48/murmur3_x86_32/v1"
"""Identifier of the pinned seed-to-draw construction."""

Seed = Union[int, bytes, bytearray, memoryview, str]

_MASK64 = 0xFFFFFFFFFFFFFFFF
_MULTIPLIER = 0xEECE66D5DEECE66D
_INCREMENT = 2147483647
_MANTISSA_SHIFT = 25
_MANTISSA_MASK = 0x7FFFFF
_MANTISSA_SCALE = float(1 << 23)


def expand_seed(seed: Seed) -> int:
    """Turn *seed* into the 64-bit value that starts the uniform stream.

    Args:
        seed: Integer in ``[0, 2**64)`` or a byte/text seed.

    Returns:
        The expanded 64-bit seed.

    Raises:
        ValueError: If an integer seed is outside ``[0, 2**64)``.
        TypeError: If *seed* is not one of the supported types.
    """
    if isinstance(seed, str):
        return murmurhash3_32(seed.encode("utf-8"))
    if isinstance(seed, (bytes, bytearray, memoryview)):
        return murmurhash3_32(seed)
    if isinstance(seed, bool):
        raise TypeError("Seed must be an int, bytes-like object, or str, not bool")
    try:
        value = operator.index(seed)
    except TypeError:
        raise TypeError(f"Unsupported seed type: {type(seed).__name__}") from None
    if value < 0 or value > _MASK64:
        raise ValueError(f"Integer seed must be in [0, 2**64), got {value}")
    return value


def _advance(state: int, steps: int) -> int:
    """Apply the merand48 step to *state* ``steps`` times."""
    acc_mult, acc_inc = 1, 0
    cur_mult, cur_inc = _MULTIPLIER, _INCREMENT
    while steps:
        if steps & 1:
            acc_mult = (acc_mult * cur_mult) & _MASK64
            acc_inc = (acc_inc * cur_mult + cur_inc) & _MASK64
        # f(f(x)) = m^2 x + c (m + 1)
        cur_inc = (cur_inc * (cur_mult + 1)) & _MASK64
        cur_mult = (cur_mult * cur_mult) & _MASK64
        steps >>= 1
    return (acc_mult * state + acc_inc) & _MASK64


def _to_uniform(state: int) -> float:
    return ((state >> _MANTISSA_SHIFT) & _MANTISSA_MASK) / _MANTISSA_SCALE


def uniform_at(seed: Seed, n: int = 0) -> float:
    """Return the *n*-th uniform draw in [0, 1) for *seed*.

    Args:
        seed: Integer or byte/text seed.
        n: Zero-based draw counter.

    Returns:
        The draw, identical for identical ``(seed, n)``.

    Raises:
        ValueError: If *n* is negative or the seed is out of range.
    """
    if n < 0:
        raise ValueError(f"Draw counter must be non-negative, got {n}")
    return _to_uniform(_advance(expand_seed(seed), n + 1))


class UniformStream:
    """Iterator over the uniform draws of a seed.

    The stream holds only the expanded seed and a counter; iterating it is
    equivalent to calling :func:`uniform_at` with increasing counters.

    Args:
        seed: Integer or byte/text seed.
    """

    def __init__(self, seed: Seed) -> None:
        self._seed = expand_seed(seed)
        self._state = self._seed
        self._position = 0

    @property
    def seed(self) -> int:
        """The expanded 64-bit seed."""
        return self._seed

    @property
    def position(self) -> int:
        """Counter of the next draw."""
        return self._position

    def __iter__(self) -> UniformStream:
        return self

    def __next__(self) -> float:
        self._state = (_MULTIPLIER * self._state + _INCREMENT) & _MASK64
        self._position += 1
        return _to_uniform(self._state)

    def skip(self, n: int) -> None:
        """Discard the next *n* draws without materializing them."""
        if n < 0:
            raise ValueError(f"Cannot skip a negative number of draws: {n}")
        self._state = _advance(self._state, n)
        self._position += n
