"""Minimum probability enforcement.

Guarantees every eligible action at least ``minimum_uniform / N`` of the
mass while keeping the eligible total unchanged. An action is eligible when
its probability is non-zero, or when ``update_zero_elements`` is set. Zero
entries that are not eligible stay at zero, which keeps upstream hard
exclusions unreachable.

The floor is applied in rounds: entries at or below the floor are pinned to
it, the rest of the eligible mass is rescaled to make up the difference, and
any entry the rescale pushed below the floor is pinned in the next round.
Each round pins at least one more entry, so the loop ends after at most N
rounds. Applying the pass to an already-conforming pmf is a no-op up to
floating-point rounding.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from exploration.buffers import read_buffer, write_buffer
from exploration.status import ExplorationStatus

if TYPE_CHECKING:
    from exploration.buffers import FloatBuffer

# Above this, the requested floor is treated as full uniform exploration.
_UNIFORM_THRESHOLD = 0.999


def enforce_minimum_probability(
    minimum_uniform: float,
    update_zero_elements: bool,
    pmf: FloatBuffer,
) -> ExplorationStatus:
    """Raise every eligible entry of *pmf* to at least ``minimum_uniform / N``.

    Args:
        minimum_uniform: Total uniform mass to impose, in [0, 1].
        update_zero_elements: Whether zero entries also receive the floor.
        pmf: Probability buffer, updated in place.

    Returns:
        ``SUCCESS``, or ``BAD_RANGE`` for an empty buffer, non-finite entries
        or a ``minimum_uniform`` outside [0, 1].
    """
    num_actions = len(pmf)
    minimum_uniform = float(minimum_uniform)
    if num_actions == 0 or not math.isfinite(minimum_uniform):
        return ExplorationStatus.BAD_RANGE
    if not 0.0 <= minimum_uniform <= 1.0:
        return ExplorationStatus.BAD_RANGE

    values = read_buffer(pmf)
    if not bool(np.isfinite(values).all()):
        return ExplorationStatus.BAD_RANGE

    eligible = values > 0.0
    if update_zero_elements:
        eligible |= values == 0.0
    support = int(eligible.sum())
    if support == 0 or minimum_uniform == 0.0:
        return ExplorationStatus.SUCCESS

    if minimum_uniform > _UNIFORM_THRESHOLD:
        values[eligible] = 1.0 / support
        write_buffer(pmf, values)
        return ExplorationStatus.SUCCESS

    floor = minimum_uniform / num_actions
    target = float(values[eligible].sum())
    if target <= 0.0:
        target = 1.0

    pinned = eligible & (values <= floor)
    while True:
        free = eligible & ~pinned
        free_mass = float(values[free].sum())
        pinned_mass = floor * int(pinned.sum())
        if not free.any() or free_mass <= 0.0:
            # Nothing left to rescale: spread the target evenly.
            values[eligible] = target / support
            break

        ratio = (target - pinned_mass) / free_mass
        newly_pinned = free & (values * ratio < floor)
        if not newly_pinned.any():
            values[free] *= ratio
            values[pinned] = floor
            break
        pinned |= newly_pinned

    write_buffer(pmf, values)
    return ExplorationStatus.SUCCESS
