"""Per-field preference matching with partial credit."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from drink_lens.normalization.engine import NormalizationEngine, default_engine
from drink_lens.normalization.repository import fold_text
from drink_lens.normalization.types import Dimension, NormalizedValue
from drink_lens.schema import DIMENSIONS, CandidateDrink, Preference, ScoredDrink
from drink_lens.scoring.validator import validate_scores
from drink_lens.scoring.weights import DEFAULT_WEIGHTS, WeightTable

logger = logging.getLogger(__name__)

# (dimension, ingredient keywords, inferred value). First matching rule wins.
INFERENCE_RULES: tuple[tuple[str, tuple[str, ...], str], ...] = (
    ("acidity", ("lime", "lemon", "lemonade", "grapefruit", "yuzu", "citrus", "sour mix"), "High"),
    ("sweetness", ("dry vermouth",), "Dry"),
    (
        "sweetness",
        ("cream", "amaretto", "baileys", "kahlua", "coffee liqueur", "condensed milk"),
        "High",
    ),
    ("bitterness", ("dry vermouth", "campari", "amaro", "fernet", "cynar"), "High"),
    ("bitterness", ("bitters", "angostura"), "Medium"),
)


@dataclass(frozen=True)
class FieldScore:
    points: int
    note: str | None = None


@dataclass(frozen=True)
class Inference:
    value: NormalizedValue
    ingredient: str


def half_weight(weight: int) -> int:
    """Half of `weight`, rounded half up."""
    return (weight + 1) // 2


def _is_missing(value: str | None) -> bool:
    return not (value or "").strip()


def _match_points(
    engine: NormalizationEngine,
    preference: NormalizedValue,
    drink: NormalizedValue,
    weight: int,
) -> int:
    if preference.is_dont_care:
        return weight
    if drink.canonical == preference.canonical:
        return weight
    if engine.is_adjacent(preference, drink):
        return half_weight(weight)
    return 0


def score_field(
    dimension: Dimension,
    preference_value: str | None,
    drink_value: str | None,
    weight: int,
    *,
    engine: NormalizationEngine | None = None,
) -> int:
    """Score one dimension: full weight, half weight or zero."""
    engine = engine or default_engine()
    preference = engine.normalize_one(dimension, preference_value)
    drink = engine.normalize_one(dimension, drink_value)
    if not preference.is_dont_care and drink.is_dont_care:
        return 0
    return _match_points(engine, preference, drink, weight)


class FieldScorer:
    """Scores drinks against a preference using a fixed weight table."""

    def __init__(self, engine: NormalizationEngine | None = None, weights: WeightTable = DEFAULT_WEIGHTS):
        self.engine = engine or default_engine()
        self.weights = weights

    def score(
        self,
        dimension: Dimension,
        preference_value: str | None,
        drink_value: str | None,
        ingredients: Sequence[str] = (),
    ) -> FieldScore:
        weight = self.weights[dimension]
        preference = self.engine.normalize_one(dimension, preference_value)
        if preference.is_dont_care:
            return FieldScore(weight)

        drink = self.engine.normalize_one(dimension, drink_value)
        if not (_is_missing(drink_value) or drink.is_dont_care):
            return FieldScore(_match_points(self.engine, preference, drink, weight))

        inference = self.infer(dimension, ingredients)
        if inference is None:
            return FieldScore(0)
        inferred = inference.value
        if inferred.canonical == preference.canonical or self.engine.is_adjacent(preference, inferred):
            note = f"{dimension} inferred as {inferred.canonical} from ingredients ({inference.ingredient})"
            return FieldScore(half_weight(weight), note)
        return FieldScore(0)

    def infer(self, dimension: Dimension, ingredients: Sequence[str]) -> Inference | None:
        """Conservatively infer a missing attribute from the ingredient list."""
        if dimension == "alcohol_type":
            return self._infer_base_spirit(ingredients)

        for rule_dimension, keywords, value in INFERENCE_RULES:
            if rule_dimension != dimension:
                continue
            for ingredient in ingredients:
                padded = f" {fold_text(ingredient)} "
                if any(f" {keyword} " in padded for keyword in keywords):
                    return Inference(self.engine.normalize_one(dimension, value), ingredient)
        return None

    def _infer_base_spirit(self, ingredients: Sequence[str]) -> Inference | None:
        found: dict[str, Inference] = {}
        for ingredient in ingredients:
            item = self.engine.find_in_text("alcohol_type", ingredient)
            if item is not None and item.canonical != "Non-alcoholic":
                found.setdefault(item.canonical, Inference(item, ingredient))
        # Several spirits (or a spirit plus a mixer like ginger beer) is ambiguous.
        if len(found) != 1:
            return None
        return next(iter(found.values()))

    def score_drink(self, preference: Preference, drink: CandidateDrink) -> ScoredDrink:
        field_scores: dict[str, int] = {}
        notes: list[str] = []
        for dimension in DIMENSIONS:
            result = self.score(
                dimension,
                getattr(preference, dimension),
                getattr(drink, dimension),
                drink.ingredients,
            )
            field_scores[dimension] = result.points
            if result.note:
                notes.append(result.note)

        assumptions = drink.assumptions
        if notes:
            logger.debug("scored %r with inferred attributes: %s", drink.name, notes)
            assumptions = "; ".join([part for part in (assumptions, *notes) if part])

        updated = drink.model_copy(update={"field_scores": field_scores, "assumptions": assumptions})
        return validate_scores(updated, self.weights)
