"""Tests for normalization engine."""

import pytest

from drink_lens import Preference, normalize
from drink_lens.exceptions import ConfigurationError
from drink_lens.normalization import DONT_CARE, NormalizationConfig, NormalizationEngine
from drink_lens.normalization.engine import default_engine
from drink_lens.normalization.repository import Alias, DictionaryRepository


@pytest.fixture
def engine():
    return NormalizationEngine()


@pytest.mark.parametrize("raw", ["boozy", "Spirit-Forward", "  EXTRA strong ", "very strong"])
def test_strength_very_strong_aliases(raw):
    assert normalize("strength", raw) == "Very strong"


@pytest.mark.parametrize(
    "raw, expected",
    [("high", "Strong"), ("normal", "Medium"), ("moderate", "Medium"), ("mild", "Low"), ("weak", "Low"), ("light", "Low")],
)
def test_strength_alias_groups(raw, expected):
    assert normalize("strength", raw) == expected


@pytest.mark.parametrize("raw", ["not strong", "Not very strong", "not boozy"])
def test_strength_negation_maps_to_low(raw):
    assert normalize("strength", raw) == "Low"


@pytest.mark.parametrize("raw", ["no", "None", "ZERO"])
def test_spice_negation_maps_to_low(raw):
    assert normalize("spice", raw) == "Low"


@pytest.mark.parametrize("raw", [None, "", "   ", "Any", "NA", "n/a"])
def test_dont_care_inputs(raw):
    assert normalize("glassware", raw) == DONT_CARE


def test_exact_match_ignores_punctuation(engine):
    item = engine.normalize_one("glassware", "Nick&Nora")

    assert item.canonical == "Nick & Nora"
    assert item.method == "exact"
    assert item.group == "coupe"


def test_contains_prefers_earliest_mention(engine):
    item = engine.normalize_one("glassware", "Martini (near Highball=partial)")

    assert item.canonical == "Martini"
    assert item.method == "alias"


def test_fuzzy_match_fixes_typos(engine):
    item = engine.normalize_one("alcohol_type", "Tequilla")

    assert item.canonical == "Tequila"
    assert item.method == "fuzzy"


def test_unknown_value_is_kept(engine):
    item = engine.normalize_one("glassware", "  Copper Pineapple ")

    assert item.canonical == "copper pineapple"
    assert item.method == "unmapped"
    assert item.raw == "  Copper Pineapple "


def test_glassware_adjacency(engine):
    highball = engine.normalize_one("glassware", "Highball")
    collins = engine.normalize_one("glassware", "Collins")
    martini = engine.normalize_one("glassware", "Martini")

    assert engine.is_adjacent(highball, collins)
    assert not engine.is_adjacent(highball, martini)
    assert not engine.is_adjacent(highball, highball)


def test_ordinal_adjacency(engine):
    medium = engine.normalize_one("sweetness", "Medium")
    low = engine.normalize_one("sweetness", "Low")
    dry = engine.normalize_one("sweetness", "Dry")

    assert engine.is_adjacent(medium, low)
    assert engine.is_adjacent(low, dry)
    assert not engine.is_adjacent(medium, dry)


def test_find_in_text_uses_whole_words(engine):
    assert engine.find_in_text("alcohol_type", "Bourbon whiskey").canonical == "Whiskey"
    assert engine.find_in_text("alcohol_type", "ginger syrup") is None


def test_standardize_preference(engine):
    pref = Preference(alcohol_type="whisky", strength="boozy", glassware="Any", spice="no", bitterness="earthy")

    result = engine.standardize_preference(pref)

    assert result == {
        "alcohol_type": "Whiskey",
        "strength": "Very strong",
        "bitterness": "Earthy",
        "spice": "Low",
    }


def test_unknown_dictionary_version_is_rejected():
    with pytest.raises(ConfigurationError):
        NormalizationEngine(config=NormalizationConfig(dictionary_version="v9"))


def test_conflicting_aliases_are_rejected():
    class ConflictingRepository(DictionaryRepository):
        def _load_aliases(self):
            return [
                Alias(dimension="spice", key="Low", alias="hot", match_type="exact", priority=1),
                Alias(dimension="spice", key="High", alias="HOT", match_type="exact", priority=1),
            ]

    with pytest.raises(ConfigurationError):
        ConflictingRepository()


def test_alias_to_unknown_term_is_rejected():
    class DanglingRepository(DictionaryRepository):
        def _load_aliases(self):
            return [Alias(dimension="glassware", key="Goblet", alias="goblet", match_type="exact", priority=1)]

    with pytest.raises(ConfigurationError):
        DanglingRepository()


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("DRINK_LENS_FUZZY_THRESHOLD", "not-a-number")
    monkeypatch.setenv("DRINK_LENS_DICTIONARY_VERSION", "v1")

    config = NormalizationConfig.from_env()

    assert config.fuzzy_threshold == 0.86
    assert config.dictionary_version == "v1"


def test_default_engine_uses_env_config(monkeypatch):
    monkeypatch.setenv("DRINK_LENS_FUZZY_THRESHOLD", "0.5")
    default_engine.cache_clear()
    try:
        assert default_engine().config.fuzzy_threshold == 0.5
    finally:
        default_engine.cache_clear()
