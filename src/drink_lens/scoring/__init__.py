"""Preference scoring for drink-lens."""

from drink_lens.scoring.aggregator import aggregate
from drink_lens.scoring.scorer import FieldScorer, score_field
from drink_lens.scoring.validator import validate_scores
from drink_lens.scoring.weights import DEFAULT_WEIGHTS, WeightTable

__all__ = [
    "DEFAULT_WEIGHTS",
    "FieldScorer",
    "WeightTable",
    "aggregate",
    "score_field",
    "validate_scores",
]
