"""Promotion of the sampled action to rank 0 of an action-id sequence."""

from __future__ import annotations

import operator
from collections.abc import MutableSequence
from typing import Any

from exploration.status import ExplorationStatus


def swap_chosen(actions: MutableSequence[Any], chosen_index: int) -> ExplorationStatus:
    """Swap ``actions[0]`` with ``actions[chosen_index]`` in place.

    Only the action-id sequence is touched; pmf and pdf buffers are not.

    Args:
        actions: Caller's action identifiers, in rank order.
        chosen_index: Index returned by a sampler.

    Returns:
        ``SUCCESS``, or ``BAD_RANGE`` if *actions* is empty or
        *chosen_index* is outside it.
    """
    chosen_index = operator.index(chosen_index)
    if not 0 <= chosen_index < len(actions):
        return ExplorationStatus.BAD_RANGE
    if chosen_index != 0:
        actions[0], actions[chosen_index] = actions[chosen_index], actions[0]
    return ExplorationStatus.SUCCESS
