"""Tests for core matching function."""

import pytest

from drink_lens import MatchResult, PipelineConfig, match_drinks
from drink_lens.exceptions import AuthenticationError
from tests.fakes import FakeProvider, menu


def test_match_drinks_requires_api_key(monkeypatch):
    """match_drinks() should raise AuthenticationError without API key."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    with pytest.raises(AuthenticationError):
        match_drinks(["menu.jpg"], provider="gemini")


def test_match_drinks_with_mock_gemini_provider(mocker):
    """match_drinks() should rank drinks from the gemini provider."""
    provider = FakeProvider([menu("Paloma", alcohol_type="Tequila"), menu("Margarita", alcohol_type="Mezcal")])
    build = mocker.patch("drink_lens.core._build_gemini_provider", return_value=provider)

    result = match_drinks(
        ["one.jpg", "two.jpg"],
        {"alcohol_type": "tequila"},
        api_key="test-key",
        provider="gemini",
        config=PipelineConfig(),
    )

    assert isinstance(result, MatchResult)
    assert [drink.name for drink in result.drinks] == ["Paloma", "Margarita"]
    assert result.drinks[0].match_percentage == 100.0
    assert result.drinks[1].match_percentage == 80.0
    assert result.preference == {"alcohol_type": "Tequila"}
    build.assert_called_once_with("test-key")
    assert [call[1:] for call in provider.calls] == [(1, 2), (2, 2)]


def test_match_drinks_provider_from_env(mocker, monkeypatch):
    monkeypatch.setenv("DRINK_LENS_PROVIDER", "vision")
    provider = FakeProvider([menu("Gimlet")])
    mocker.patch("drink_lens.core._build_gemini_provider", return_value=provider)

    result = match_drinks([b"image"])

    assert [drink.name for drink in result.drinks] == ["Gimlet"]


def test_match_drinks_reads_config_from_env(mocker, monkeypatch):
    monkeypatch.setenv("DRINK_LENS_MAX_RESULTS", "1")
    provider = FakeProvider([menu("Gimlet", "Negroni")])
    mocker.patch("drink_lens.core._build_gemini_provider", return_value=provider)

    result = match_drinks([b"image"], provider="gemini")

    assert len(result.drinks) == 1
    assert "Showing top 1 of 2 unique drinks." in result.notes


def test_match_drinks_unsupported_provider_raises():
    with pytest.raises(ValueError):
        match_drinks(["menu.jpg"], provider="unknown")
