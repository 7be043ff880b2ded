"""Tests for the Gemini menu extraction provider."""

import json
from types import SimpleNamespace

import pytest

from drink_lens.exceptions import AuthenticationError, ExtractionError, ImageError, MalformedResultError
from drink_lens.providers.base import load_image, parse_menu_extraction
from drink_lens.providers.gemini import GeminiProvider
from drink_lens.schema import Preference
from tests.fakes import png_bytes


class MockClient:
    def __init__(self, text=None, error=None):
        self.calls = []
        self.text = text
        self.error = error
        self.models = SimpleNamespace(generate_content=self._generate_content)

    def _generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


def test_extract_menu_parses_reply_and_sends_context():
    reply = {
        "drinks": [
            {"name": "Negroni", "price": 14, "alcohol_type": "Gin", "ingredients": "gin, campari, sweet vermouth"},
            {"name": "", "price": "9"},
            {"price": "11"},
        ],
        "notes": "Bottom of the menu is cut off",
    }
    client = MockClient(text=json.dumps(reply))
    provider = GeminiProvider(client=client, model="test-model")

    extraction = provider.extract_menu(png_bytes(), Preference(alcohol_type="Gin"), 1, 2)

    assert [drink.name for drink in extraction.drinks] == ["Negroni"]
    assert extraction.drinks[0].price == "14"
    assert extraction.drinks[0].ingredients == ["gin", "campari", "sweet vermouth"]
    assert extraction.notes == "Bottom of the menu is cut off; Skipped 2 unreadable drink entries"

    call = client.calls[0]
    assert call["model"] == "test-model"
    prompt = call["contents"][1]
    assert "This is image 1 of 2." in prompt
    assert '"alcohol_type": "Gin"' in prompt


def test_extract_menu_wraps_client_failures():
    client = MockClient(error=RuntimeError("connection reset"))
    provider = GeminiProvider(client=client)

    with pytest.raises(ExtractionError, match="connection reset"):
        provider.extract_menu(png_bytes(), Preference(), 1, 1)


def test_extract_menu_rejects_unreadable_image():
    provider = GeminiProvider(client=MockClient(text='{"drinks": []}'))

    with pytest.raises(ImageError):
        provider.extract_menu(b"not an image", Preference(), 1, 1)


def test_provider_requires_api_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    with pytest.raises(AuthenticationError):
        GeminiProvider()


def test_provider_metadata_uses_configured_model(monkeypatch):
    monkeypatch.setenv("DRINK_LENS_GEMINI_MODEL", "gemini-test")

    provider = GeminiProvider(client=MockClient())

    assert provider.get_extraction_metadata() == {"provider": "gemini", "model": "gemini-test"}


def test_parse_tolerates_code_fences():
    text = '```json\n{"drinks": [{"name": "Paloma"}]}\n```'

    extraction = parse_menu_extraction(text)

    assert [drink.name for drink in extraction.drinks] == ["Paloma"]
    assert extraction.notes is None


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "Sorry, I cannot read this menu.",
        '{"drinks": "Paloma, Gimlet"}',
        '[{"name": "Paloma"}]',
        '{"notes": "blurry"}',
    ],
)
def test_parse_rejects_malformed_replies(text):
    with pytest.raises(MalformedResultError):
        parse_menu_extraction(text)


def test_parse_allows_empty_menu():
    extraction = parse_menu_extraction('{"drinks": [], "notes": "No drinks visible"}')

    assert extraction.drinks == []
    assert extraction.notes == "No drinks visible"


def test_load_image_missing_file(tmp_path):
    with pytest.raises(ImageError):
        load_image(tmp_path / "missing.jpg")


def test_load_image_from_path(tmp_path):
    path = tmp_path / "menu.png"
    path.write_bytes(png_bytes("black"))

    image = load_image(str(path))

    assert image.size == (20, 20)
