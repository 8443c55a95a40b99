"""Seeded sampling subsystem for exploration.

Discrete inverse-CDF sampling of an action index from a pmf and continuous
sampling of a value from a bucketed pdf. Identical seeds and distributions
always give identical results.
"""

from exploration.sampling.continuous import sample_pdf
from exploration.sampling.discrete import sample_after_normalizing, sample_without_normalizing
from exploration.sampling.types import PdfSampleResult, SampleResult

__all__ = [
    "PdfSampleResult",
    "SampleResult",
    "sample_after_normalizing",
    "sample_pdf",
    "sample_without_normalizing",
]
