"""drink-lens: Rank drinks from menu photos against a taste preference."""

from drink_lens.core import match_drinks
from drink_lens.normalization import normalize
from drink_lens.pipeline import PipelineConfig, RankingPipeline, dedupe, rank
from drink_lens.schema import CandidateDrink, MatchResult, Preference, ScoredDrink
from drink_lens.scoring import aggregate, score_field, validate_scores

__version__ = "0.1.0"

__all__ = [
    "match_drinks",
    "normalize",
    "score_field",
    "aggregate",
    "validate_scores",
    "dedupe",
    "rank",
    "CandidateDrink",
    "MatchResult",
    "PipelineConfig",
    "Preference",
    "RankingPipeline",
    "ScoredDrink",
    "__version__",
]
