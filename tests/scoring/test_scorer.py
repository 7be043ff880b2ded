"""Tests for field scoring."""

import pytest

from drink_lens import CandidateDrink, Preference, score_field
from drink_lens.schema import DIMENSIONS
from drink_lens.scoring import FieldScorer
from drink_lens.scoring.weights import DEFAULT_WEIGHTS


@pytest.fixture
def scorer():
    return FieldScorer()


def test_manhattan_scenario(scorer):
    pref = Preference(
        alcohol_type="Whiskey",
        strength="Very strong",
        glassware="Highball",
        acidity="Low",
        sweetness="Medium",
        bitterness="Medium",
        spice="No",
    )
    drink = CandidateDrink(
        name="Manhattan",
        alcohol_type="Whiskey",
        strength="Very strong",
        glassware="Martini",
        acidity="Low",
        sweetness="Low",
        bitterness="Medium",
        spice="No",
        match_percentage=92,
    )

    result = scorer.score_drink(pref, drink)

    assert result.field_scores == {
        "alcohol_type": 40,
        "strength": 20,
        "glassware": 0,
        "acidity": 10,
        "sweetness": 4,
        "bitterness": 8,
        "spice": 4,
    }
    assert result.match_percentage == 86.0


@pytest.mark.parametrize("pref_value", [None, "", "Any", "NA"])
@pytest.mark.parametrize("drink_value", [None, "Flute", "something odd"])
def test_dont_care_always_gets_full_weight(pref_value, drink_value):
    assert score_field("glassware", pref_value, drink_value, 10) == 10


def test_empty_preference_scores_everything_100(scorer):
    result = scorer.score_drink(Preference(), CandidateDrink(name="Mystery"))

    assert result.match_percentage == 100.0
    assert result.field_scores == dict(DEFAULT_WEIGHTS.items())


@pytest.mark.parametrize(
    "dimension, pref_value, drink_value, weight, expected",
    [
        ("glassware", "Highball", "Collins", 10, 5),
        ("glassware", "Highball", "Highball", 10, 10),
        ("glassware", "Coupe", "Nick & Nora", 10, 5),
        ("glassware", "Coupe", None, 10, 0),
        ("strength", "Very strong", "boozy", 20, 20),
        ("strength", "Very strong", "Medium", 20, 0),
        ("alcohol_type", "Tequila", "Mezcal", 40, 20),
        ("glassware", "Highball", "Collins", 5, 3),
    ],
)
def test_score_field(dimension, pref_value, drink_value, weight, expected):
    assert score_field(dimension, pref_value, drink_value, weight) == expected


def test_unknown_values_match_when_identical():
    assert score_field("glassware", "Copper pineapple", "copper  PINEAPPLE ", 10) == 10


def test_missing_acidity_inferred_from_citrus(scorer):
    result = scorer.score("acidity", "High", None, ["bourbon", "fresh lemon juice", "simple syrup"])

    assert result.points == 5
    assert "acidity inferred as High" in result.note


def test_inferred_adjacent_value_gets_half_weight(scorer):
    result = scorer.score("acidity", "Medium", "N/A", ["lime"])

    assert result.points == 5


def test_inferred_mismatch_scores_zero(scorer):
    result = scorer.score("acidity", "Low", None, ["lime"])

    assert result.points == 0
    assert result.note is None


def test_inference_only_applies_to_missing_values(scorer):
    result = scorer.score("acidity", "High", "Low", ["lime"])

    assert result.points == 0


def test_cream_implies_sweet(scorer):
    assert scorer.score("sweetness", "High", None, ["amaretto", "lemon"]).points == 4


def test_dry_vermouth_implies_dry_and_bitter(scorer):
    ingredients = ["gin", "dry vermouth"]

    assert scorer.score("sweetness", "Dry", None, ingredients).points == 4
    assert scorer.score("bitterness", "High", None, ingredients).points == 4


def test_base_spirit_inferred_from_ingredients(scorer):
    result = scorer.score("alcohol_type", "Whiskey", None, ["rye whiskey", "sweet vermouth", "angostura bitters"])

    assert result.points == 20
    assert "rye whiskey" in result.note


def test_base_spirit_inferred_past_soft_drink_mixers(scorer):
    result = scorer.score("alcohol_type", "Vodka", None, ["vodka", "lime", "ginger beer"])

    assert result.points == 20
    assert result.note == "alcohol_type inferred as Vodka from ingredients (vodka)"


@pytest.mark.parametrize("mixer", ["ginger beer", "Root Beer", "ginger ale"])
def test_soft_drink_mixers_are_not_beer(scorer, mixer):
    assert scorer.infer("alcohol_type", [mixer]) is None


def test_ambiguous_base_spirit_is_not_inferred(scorer):
    result = scorer.score("alcohol_type", "Rum", None, ["white rum", "cognac", "lime"])

    assert result.points == 0


def test_no_inference_rule_scores_zero(scorer):
    assert scorer.score("glassware", "Coupe", None, ["gin", "lime"]).points == 0


def test_inference_note_is_appended_to_assumptions(scorer):
    drink = CandidateDrink(
        name="Whiskey Sour",
        alcohol_type="Whiskey",
        ingredients=["bourbon", "fresh lemon juice"],
        assumptions="Price unreadable",
    )

    result = scorer.score_drink(Preference(acidity="High"), drink)

    assert result.field_scores["acidity"] == 5
    assert result.assumptions == "Price unreadable; acidity inferred as High from ingredients (fresh lemon juice)"


def test_upstream_scores_are_replaced(scorer):
    drink = CandidateDrink(
        name="Gimlet",
        alcohol_type="Gin",
        field_scores={"alcohol_type": 40, "strength": 20},
        match_percentage=100,
    )

    result = scorer.score_drink(Preference(alcohol_type="Rum"), drink)

    assert result.field_scores["alcohol_type"] == 0
    assert result.match_percentage == 60.0
