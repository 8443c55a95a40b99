"""Configuration system for exploration.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (EXPLORE_*) -> .env file -> field defaults.

Per-decision overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from exploration.exceptions import ConfigValidationError

_OVERRIDE_PREFIX = "explore_"

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class ExplorationConfig(BaseSettings):
    """Configuration for the Explorer facade.

    Resolution order: init kwargs -> env vars (EXPLORE_*) -> .env file -> defaults.

    The core functions in ``exploration.distributions`` and
    ``exploration.sampling`` take their parameters explicitly and never read
    this config.
    """

    model_config = SettingsConfigDict(
        env_prefix="EXPLORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- PMF generation ---

    strategy: str = Field(
        default="epsilon_greedy",
        description="PMF strategy: 'epsilon_greedy', 'softmax', 'bag'",
    )
    epsilon: float = Field(
        default=0.05,
        description="Exploration mass for epsilon-greedy, in [0, 1]",
    )
    softmax_lambda: float = Field(
        default=1.0,
        description="Inverse temperature for softmax",
    )
    clamp_top_action: bool = Field(
        default=False,
        description="Clamp an out-of-range top action to the last index instead of failing",
    )

    # --- Minimum probability ---

    minimum_uniform: float = Field(
        default=0.0,
        description="Total uniform floor imposed after generation (0 disables)",
    )
    update_zero_elements: bool = Field(
        default=False,
        description="Whether zero-probability actions also receive the floor",
    )

    # --- Sampling ---

    normalize_before_sampling: bool = Field(
        default=True,
        description="Normalize the pmf in place before drawing",
    )

    # --- Logging ---

    log_level: str = Field(
        default="summary",
        description="Logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all decision records in memory for analysis",
    )


# Populate _ALL_FIELDS now that the class is defined.
_ALL_FIELDS = frozenset(ExplorationConfig.model_fields.keys())


def _strip_prefix(key: str) -> str:
    """Strip the 'explore_' prefix from an override key."""
    if key.startswith(_OVERRIDE_PREFIX):
        return key[len(_OVERRIDE_PREFIX) :]
    return key


def validate_overrides(overrides: Mapping[str, Any]) -> None:
    """Validate all explore_* keys in *overrides* without creating a config.

    Args:
        overrides: Per-decision overrides, potentially with explore_ prefix.

    Raises:
        ConfigValidationError: If any explore_* key is unknown.
    """
    for key in overrides:
        if not key.startswith(_OVERRIDE_PREFIX):
            continue
        field_name = _strip_prefix(key)
        if field_name not in _ALL_FIELDS:
            raise ConfigValidationError(
                f"Unknown config field: '{key}' (no field '{field_name}' exists)"
            )


def resolve_config(
    defaults: ExplorationConfig,
    overrides: Mapping[str, Any] | None,
) -> ExplorationConfig:
    """Create a new config instance merging defaults with per-decision overrides.

    Keys use the 'explore_' prefix (e.g., 'explore_epsilon': 0.1). Keys
    without the prefix are silently ignored.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Per-decision overrides.

    Returns:
        *defaults* itself when nothing applies, otherwise a new validated
        ExplorationConfig.

    Raises:
        ConfigValidationError: If any explore_* key is unknown.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    updates = {
        _strip_prefix(key): value
        for key, value in overrides.items()
        if key.startswith(_OVERRIDE_PREFIX)
    }
    if not updates:
        return defaults

    # model_copy(update=...) skips validation; model_validate coerces types.
    merged = defaults.model_dump()
    merged.update(updates)
    return ExplorationConfig.model_validate(merged)
