"""Authoritative score validation for drinks from any source."""

from __future__ import annotations

import math
from typing import Any

from drink_lens.schema import CandidateDrink, ScoredDrink
from drink_lens.scoring.aggregator import aggregate
from drink_lens.scoring.weights import DEFAULT_WEIGHTS, WeightTable


def _coerce_score(value: Any, weight: int) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0
    if not isinstance(value, (int, float)) or math.isnan(value) or value < 0:
        return 0
    if math.isinf(value):
        return weight
    return min(weight, int(math.floor(value + 0.5)))


def validate_scores(drink: CandidateDrink, weights: WeightTable = DEFAULT_WEIGHTS) -> ScoredDrink:
    """Clamp field scores into range and recompute `match_percentage`.

    Never raises. Unknown score keys are dropped and missing ones become 0,
    so the result always carries all seven dimensions. Each score is capped
    at its dimension weight, which keeps the total within 0-100.
    """
    raw_scores = drink.field_scores or {}
    field_scores = {
        dimension: _coerce_score(raw_scores.get(dimension), weight)
        for dimension, weight in weights.items()
    }
    data = drink.model_dump(exclude={"field_scores", "match_percentage", "source_image"})
    return ScoredDrink(
        **data,
        field_scores=field_scores,
        match_percentage=aggregate(field_scores),
        source_image=max(1, drink.source_image or 1),
    )
