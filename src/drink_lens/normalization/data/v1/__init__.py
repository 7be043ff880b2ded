"""Normalization dictionary v1."""

from drink_lens.normalization.data.v1.aliases import ALIASES
from drink_lens.normalization.data.v1.terms import TERMS

__all__ = ["TERMS", "ALIASES"]
