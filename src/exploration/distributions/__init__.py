"""Distribution generation subsystem for exploration.

PMF generators, the minimum probability pass and the normalizer. All of
them write into caller-owned buffers and report failures as status codes.
"""

from exploration.distributions.generators import (
    generate_bag,
    generate_bag_from_counts,
    generate_epsilon_greedy,
    generate_softmax,
)
from exploration.distributions.minimum import enforce_minimum_probability
from exploration.distributions.normalize import normalize

__all__ = [
    "enforce_minimum_probability",
    "generate_bag",
    "generate_bag_from_counts",
    "generate_epsilon_greedy",
    "generate_softmax",
    "normalize",
]
