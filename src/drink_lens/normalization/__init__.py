"""Normalization utilities for drink-lens."""

from drink_lens.normalization.engine import NormalizationConfig, NormalizationEngine, normalize
from drink_lens.normalization.types import DONT_CARE, Dimension, NormalizedValue

__all__ = [
    "DONT_CARE",
    "Dimension",
    "NormalizationConfig",
    "NormalizationEngine",
    "NormalizedValue",
    "normalize",
]
