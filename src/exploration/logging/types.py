"""Data types for the decision logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DecisionRecord:
    """Immutable record of a single exploration decision.

    The expanded seed is enough to replay the draw, so the record stores
    it instead of the uniform value.

    Attributes:
        timestamp_ns: Wall-clock time of the decision (nanoseconds since epoch).
        total_ms: Time for generation, enforcement and sampling (ms).
        strategy: Name of the PMF strategy used.
        num_actions: Size of the pmf.
        chosen_index: Index returned by the sampler.
        chosen_probability: Probability of the chosen index after enforcement.
        seed_hash: Expanded 64-bit seed.
        minimum_uniform: Uniform floor that was applied (0 when skipped).
        normalized: Whether the pmf was normalized before sampling.
        config_hash: 16-char SHA-256 prefix of the active config.
    """

    # Timing
    timestamp_ns: int
    total_ms: float

    # Distribution
    strategy: str
    num_actions: int
    minimum_uniform: float
    normalized: bool

    # Draw
    seed_hash: int
    chosen_index: int
    chosen_probability: float

    # Config snapshot
    config_hash: str
