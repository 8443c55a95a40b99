"""exploration: deterministic exploration distributions and seeded sampling.

Turns a policy's ranking (a top action, per-action scores, or ensemble
votes) into an explicit probability mass function, guarantees every action
a minimum probability, and draws an action reproducibly from a seed. The
same seed and distribution always produce the same draw, on any machine.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("exploration")
except PackageNotFoundError:
    __version__ = "0.0.0"

from exploration.config import ExplorationConfig, resolve_config, validate_overrides
from exploration.distributions import (
    enforce_minimum_probability,
    generate_bag,
    generate_bag_from_counts,
    generate_epsilon_greedy,
    generate_softmax,
    normalize,
)
from exploration.exceptions import (
    BadRangeError,
    ConfigValidationError,
    ExplorationError,
    SizeMismatchError,
    StrategyInputError,
)
from exploration.explorer import Decision, Explorer
from exploration.reorder import swap_chosen
from exploration.sampling import (
    PdfSampleResult,
    SampleResult,
    sample_after_normalizing,
    sample_pdf,
    sample_without_normalizing,
)
from exploration.seeding import SEED_ALGORITHM, UniformStream, expand_seed, uniform_at
from exploration.status import ExplorationStatus, check_status

__all__ = [
    "SEED_ALGORITHM",
    "BadRangeError",
    "ConfigValidationError",
    "Decision",
    "ExplorationConfig",
    "ExplorationError",
    "ExplorationStatus",
    "Explorer",
    "PdfSampleResult",
    "SampleResult",
    "SizeMismatchError",
    "StrategyInputError",
    "UniformStream",
    "__version__",
    "check_status",
    "enforce_minimum_probability",
    "expand_seed",
    "generate_bag",
    "generate_bag_from_counts",
    "generate_epsilon_greedy",
    "generate_softmax",
    "normalize",
    "resolve_config",
    "sample_after_normalizing",
    "sample_pdf",
    "sample_without_normalizing",
    "swap_chosen",
    "uniform_at",
    "validate_overrides",
]
