"""Providers for drink-lens."""

from drink_lens.providers.base import BaseProvider, parse_menu_extraction
from drink_lens.providers.gemini import GeminiProvider

__all__ = ["BaseProvider", "GeminiProvider", "parse_menu_extraction"]
