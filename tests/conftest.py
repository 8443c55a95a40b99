"""Shared pytest fixtures for exploration tests.

Provides reusable configuration objects and sample distributions used
across multiple test modules.
"""

from __future__ import annotations

import numpy as np
import pytest

from exploration.config import ExplorationConfig


@pytest.fixture
def default_config() -> ExplorationConfig:
    """Return an ExplorationConfig with all default values (no .env)."""
    return ExplorationConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def silent_config() -> ExplorationConfig:
    """Return a config with no logging for noise-free tests."""
    return ExplorationConfig(_env_file=None, log_level="none")  # type: ignore[call-arg]


@pytest.fixture
def diagnostic_config() -> ExplorationConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return ExplorationConfig(  # type: ignore[call-arg]
        _env_file=None,
        log_level="full",
        diagnostic_mode=True,
    )


@pytest.fixture
def three_action_pmf() -> list[float]:
    """Return the reference pmf [0.5, 0.3, 0.2]."""
    return [0.5, 0.3, 0.2]


@pytest.fixture
def skewed_scores() -> np.ndarray:
    """Return highly skewed scores: one dominant action, one -inf action."""
    return np.array([50.0, 1.0, 0.5, -3.0, -np.inf])
