"""Exception hierarchy for exploration.

The core distribution and sampling functions report failures through
:class:`~exploration.status.ExplorationStatus` codes. These exceptions are
raised only at the application boundary (the convenience API and the
:class:`~exploration.explorer.Explorer` facade), where a failed status is
converted with :func:`~exploration.status.check_status`.
"""

from __future__ import annotations

from typing import Any


class ExplorationError(Exception):
    """Base exception for all exploration errors."""


class _StatusError(ExplorationError):
    """An error that originates from a non-success status code.

    Attributes:
        status: The ``ExplorationStatus`` returned by the failing operation.
    """

    def __init__(self, message: str, status: Any) -> None:
        super().__init__(message)
        self.status = status


class BadRangeError(_StatusError):
    """A parameter or buffer violated its documented domain.

    Raised for ``BAD_RANGE``: epsilon, lambda or minimum_uniform out of
    range, an empty buffer, an out-of-range index, or invalid range bounds.
    """


class SizeMismatchError(_StatusError):
    """Related sequences do not have compatible sizes.

    Raised for ``PDF_RANKING_SIZE_MISMATCH``: scores and pmf lengths differ,
    vote counts do not line up with the pmf, or a vote references an action
    beyond the pmf.
    """


class ConfigValidationError(ExplorationError):
    """Configuration override validation failed.

    Raised when per-decision overrides contain unknown ``explore_*`` keys.
    """


class StrategyInputError(ExplorationError):
    """The configured strategy is missing the input it needs.

    Raised by the Explorer when, for example, the softmax strategy is
    selected but no scores were supplied.
    """
