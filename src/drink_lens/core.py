"""Core matching function."""

import os
from typing import Mapping, Sequence

from drink_lens.pipeline import PipelineConfig, RankingPipeline
from drink_lens.providers.base import BaseProvider, ImageInput
from drink_lens.schema import MatchResult, Preference


def _build_gemini_provider(api_key: str | None) -> BaseProvider:
    from drink_lens.providers.gemini import GeminiProvider

    return GeminiProvider(api_key=api_key)


def _select_provider(provider: str | None, api_key: str | None) -> BaseProvider:
    provider_name = (provider or os.getenv("DRINK_LENS_PROVIDER", "gemini")).strip().lower()
    if provider_name in {"gemini", "vision"}:
        return _build_gemini_provider(api_key)
    raise ValueError(f"Unsupported provider: {provider_name}")


def match_drinks(
    images: Sequence[ImageInput],
    preference: Preference | Mapping[str, object] | None = None,
    *,
    api_key: str | None = None,
    provider: str | None = None,
    config: PipelineConfig | None = None,
) -> MatchResult:
    """Extract drinks from menu images and rank them against a preference.

    Args:
        images: Menu images - file paths, Path objects, raw bytes or PIL Images.
        preference: Preference or mapping with any of the seven taste fields.
        api_key: Gemini API key. Falls back to GEMINI_API_KEY env var.
        provider: Provider name. Defaults to `DRINK_LENS_PROVIDER` env var,
            then `gemini`.
        config: Pipeline settings. Defaults to `PipelineConfig.from_env()`.

    Returns:
        MatchResult with at most `max_results` drinks, best match first.
    """
    extractor = _select_provider(provider, api_key)
    pipeline = RankingPipeline(extractor, config=config or PipelineConfig.from_env())
    return pipeline.run(images, preference)
