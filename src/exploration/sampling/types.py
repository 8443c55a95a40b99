"""Data types for the sampling subsystem."""

from __future__ import annotations

from dataclasses import dataclass

from exploration.status import ExplorationStatus


@dataclass(frozen=True, slots=True)
class SampleResult:
    """Result of drawing an action index from a pmf.

    Attributes:
        status: ``SUCCESS`` or the failure code.
        index: Chosen action index, ``None`` on failure.
    """

    status: ExplorationStatus
    index: int | None = None

    @property
    def ok(self) -> bool:
        """True when the draw succeeded."""
        return self.status == ExplorationStatus.SUCCESS


@dataclass(frozen=True, slots=True)
class PdfSampleResult:
    """Result of drawing a value from a bucketed pdf.

    Attributes:
        status: ``SUCCESS`` or the failure code.
        value: Chosen value in ``[range_min, range_max)``, ``None`` on failure.
        bucket: Index of the bucket the value fell in, ``None`` on failure.
    """

    status: ExplorationStatus
    value: float | None = None
    bucket: int | None = None

    @property
    def ok(self) -> bool:
        """True when the draw succeeded."""
        return self.status == ExplorationStatus.SUCCESS
