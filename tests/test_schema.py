"""Tests for schema models."""

import pytest
from pydantic import ValidationError

from drink_lens import CandidateDrink, MatchResult, Preference, ScoredDrink


def test_preference_all_none():
    """Preference with no data means "don't care" everywhere."""
    pref = Preference()
    assert pref.alcohol_type is None
    assert pref.spice is None


def test_preference_ignores_unknown_keys():
    pref = Preference.model_validate({"alcohol_type": "Gin", "mood": "happy"})
    assert pref.alcohol_type == "Gin"
    assert not hasattr(pref, "mood")


def test_preference_is_immutable():
    pref = Preference(alcohol_type="Gin")
    with pytest.raises(ValidationError):
        pref.alcohol_type = "Rum"


def test_candidate_drink_requires_name():
    with pytest.raises(ValidationError):
        CandidateDrink.model_validate({"price": "12"})


def test_candidate_drink_coerces_loose_values():
    drink = CandidateDrink.model_validate(
        {"name": "  Negroni ", "price": 14, "ingredients": "gin, campari, sweet vermouth"}
    )
    assert drink.name == "Negroni"
    assert drink.price == "14"
    assert drink.ingredients == ["gin", "campari", "sweet vermouth"]


def test_candidate_drink_defaults():
    drink = CandidateDrink(name="Daiquiri")
    assert drink.ingredients == []
    assert drink.field_scores is None
    assert drink.source_image is None


def test_scored_drink_rejects_out_of_range_percentage():
    with pytest.raises(ValidationError):
        ScoredDrink(name="Mule", match_percentage=120.0)


def test_match_result_json_serialization():
    result = MatchResult(drinks=[ScoredDrink(name="Mule", match_percentage=50.0, source_image=2)])
    json_str = result.model_dump_json()
    assert "match_percentage (enforced)" in json_str
    assert '"source_image":2' in json_str
