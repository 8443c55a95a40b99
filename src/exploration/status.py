"""Status codes returned by the core exploration operations."""

from __future__ import annotations

from enum import IntEnum

from exploration.exceptions import BadRangeError, SizeMismatchError


class ExplorationStatus(IntEnum):
    """Result code of a core operation.

    The numeric values are part of the public contract and match the codes
    used by other implementations of the same library.
    """

    SUCCESS = 0
    BAD_RANGE = 1
    PDF_RANKING_SIZE_MISMATCH = 2


def check_status(status: int, operation: str) -> None:
    """Raise the exception matching a non-success *status*.

    Args:
        status: Status code returned by a core operation.
        operation: Name of the operation, used in the error message.

    Raises:
        BadRangeError: If *status* is ``BAD_RANGE``.
        SizeMismatchError: If *status* is ``PDF_RANKING_SIZE_MISMATCH``.
        ValueError: If *status* is not a known code.
    """
    if status == ExplorationStatus.SUCCESS:
        return
    if status == ExplorationStatus.BAD_RANGE:
        raise BadRangeError(
            f"{operation} failed: parameter or buffer out of range",
            ExplorationStatus.BAD_RANGE,
        )
    if status == ExplorationStatus.PDF_RANKING_SIZE_MISMATCH:
        raise SizeMismatchError(
            f"{operation} failed: input and probability buffer sizes do not match",
            ExplorationStatus.PDF_RANKING_SIZE_MISMATCH,
        )
    raise ValueError(f"Unknown exploration status code: {status!r}")
