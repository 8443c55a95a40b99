"""Diagnostic logging subsystem for exploration.

Provides immutable per-decision records and a configurable logger that
supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from exploration.logging.logger import DecisionLogger
from exploration.logging.types import DecisionRecord

__all__ = [
    "DecisionLogger",
    "DecisionRecord",
]
