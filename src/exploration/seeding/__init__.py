"""Seed expansion subsystem for exploration.

Turns integer or byte-string seeds into a reproducible stream of uniform
draws in [0, 1), identical across processes, machines and ports.
"""

from exploration.seeding.murmur import murmurhash3_32
from exploration.seeding.stream import (
    SEED_ALGORITHM,
    Seed,
    UniformStream,
    expand_seed,
    uniform_at,
)

__all__ = [
    "SEED_ALGORITHM",
    "Seed",
    "UniformStream",
    "expand_seed",
    "murmurhash3_32",
    "uniform_at",
]
