"""Combine per-field scores into a match percentage."""

from __future__ import annotations

import math
from typing import Any, Mapping

from drink_lens.schema import DIMENSIONS


def aggregate(field_scores: Mapping[str, Any] | None) -> float:
    """Sum weight-scaled field scores into a percentage.

    Missing or non-numeric entries contribute 0. The result is rounded to
    one decimal place.
    """
    if not field_scores:
        return 0.0

    total = 0.0
    for dimension in DIMENSIONS:
        value = field_scores.get(dimension)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            continue
        if math.isnan(value) or math.isinf(value):
            continue
        total += value
    return round(total, 1)
