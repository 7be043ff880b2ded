"""Multi-image drink ranking pipeline."""

from __future__ import annotations

import logging
import os
import tempfile
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Mapping, Sequence

from drink_lens.exceptions import (
    ConfigurationError,
    DrinkLensError,
    EmptyResultError,
    ExtractionError,
    MalformedResultError,
    MissingNameError,
    NoInputError,
    TooManyImagesError,
    UnexpectedError,
)
from drink_lens.normalization.engine import NormalizationEngine, default_engine
from drink_lens.providers.base import BaseProvider, ImageInput
from drink_lens.schema import CandidateDrink, Diagnostics, MatchResult, MenuExtraction, Preference, ScoredDrink
from drink_lens.scoring.scorer import FieldScorer
from drink_lens.scoring.validator import validate_scores
from drink_lens.scoring.weights import DEFAULT_WEIGHTS, WeightTable

logger = logging.getLogger(__name__)

NOTE_SEPARATOR = " | "


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _safe_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class PipelineConfig:
    max_results: int = 30
    max_images: int = 10
    # Images are extracted one at a time unless this is raised.
    max_concurrency: int = 1
    spool_dir: str | None = None
    always_rescore: bool = False
    weights: WeightTable = field(default=DEFAULT_WEIGHTS)

    def __post_init__(self) -> None:
        if self.max_results < 1:
            raise ConfigurationError(f"max_results must be at least 1, got {self.max_results}")
        if self.max_images < 1:
            raise ConfigurationError(f"max_images must be at least 1, got {self.max_images}")
        if self.max_concurrency < 1:
            raise ConfigurationError(f"max_concurrency must be at least 1, got {self.max_concurrency}")

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        raw_weights = os.getenv("DRINK_LENS_WEIGHTS")
        return cls(
            max_results=_safe_int(os.getenv("DRINK_LENS_MAX_RESULTS"), 30),
            max_images=_safe_int(os.getenv("DRINK_LENS_MAX_IMAGES"), 10),
            max_concurrency=_safe_int(os.getenv("DRINK_LENS_MAX_CONCURRENCY"), 1),
            spool_dir=os.getenv("DRINK_LENS_SPOOL_DIR") or None,
            always_rescore=_parse_bool(os.getenv("DRINK_LENS_ALWAYS_RESCORE"), False),
            weights=WeightTable.parse(raw_weights) if raw_weights else DEFAULT_WEIGHTS,
        )


@dataclass(frozen=True)
class ImageOutcome:
    index: int
    drinks: list[CandidateDrink]
    note: str | None = None


def dedupe(drinks: Sequence[CandidateDrink]) -> list[CandidateDrink]:
    """Drop later drinks whose name matches an earlier one, ignoring case."""
    seen: set[str] = set()
    unique: list[CandidateDrink] = []
    for drink in drinks:
        key = (drink.name or "").strip().lower()
        if not key:
            raise MissingNameError(f"Drink from image {drink.source_image} has no name")
        if key in seen:
            continue
        seen.add(key)
        unique.append(drink)
    return unique


def rank(drinks: Sequence[ScoredDrink]) -> list[ScoredDrink]:
    """Sort by match percentage, highest first; ties alphabetically by name."""
    return sorted(drinks, key=lambda drink: (-drink.match_percentage, drink.name.lower()))


class RankingPipeline:
    """Extracts drinks from menu images and ranks them against a preference."""

    def __init__(
        self,
        provider: BaseProvider,
        config: PipelineConfig | None = None,
        engine: NormalizationEngine | None = None,
    ):
        self.provider = provider
        self.config = config or PipelineConfig()
        self.engine = engine or default_engine()
        self.scorer = FieldScorer(engine=self.engine, weights=self.config.weights)

    def run(
        self,
        images: Sequence[ImageInput],
        preference: Preference | Mapping[str, object] | None = None,
    ) -> MatchResult:
        """Rank the drinks found on `images`.

        Raises:
            NoInputError: If no images are supplied
            TooManyImagesError: If more than `max_images` are supplied
            EmptyResultError: If no drinks could be extracted from any image
            UnexpectedError: For any other fault
        """
        if not images:
            raise NoInputError("No images uploaded")
        if len(images) > self.config.max_images:
            raise TooManyImagesError(
                f"Too many images: {len(images)} (max {self.config.max_images})"
            )
        if not isinstance(preference, Preference):
            preference = Preference.model_validate(dict(preference or {}))

        try:
            return self._run(images, preference)
        except DrinkLensError:
            raise
        except Exception as exc:
            logger.exception("drink matching failed")
            raise UnexpectedError("Failed to match drinks") from exc

    def _run(self, images: Sequence[ImageInput], preference: Preference) -> MatchResult:
        outcomes = self._extract_all(images, preference)

        pooled: list[CandidateDrink] = []
        notes: list[str] = []
        for outcome in outcomes:
            pooled.extend(outcome.drinks)
            if outcome.note:
                notes.append(outcome.note)

        unique = dedupe(pooled)
        if not unique:
            raise EmptyResultError(
                "Could not extract any drinks from the uploaded images.",
                notes=NOTE_SEPARATOR.join(notes),
            )

        ranked = rank([self._score(drink, preference) for drink in unique])
        shown = ranked[: self.config.max_results]
        if len(shown) < len(ranked):
            notes.append(f"Showing top {len(shown)} of {len(ranked)} unique drinks.")

        return MatchResult(
            preference=self.engine.standardize_preference(preference),
            drinks=shown,
            notes=NOTE_SEPARATOR.join(notes),
            diagnostics=Diagnostics(
                images_processed=len(images),
                total_drinks_found=len(pooled),
                unique_drinks=len(unique),
                drinks_shown=len(shown),
                extractor=self.provider.get_extraction_metadata() or {},
            ),
        )

    def _score(self, drink: CandidateDrink, preference: Preference) -> ScoredDrink:
        if drink.field_scores and not self.config.always_rescore:
            return validate_scores(drink, self.config.weights)
        return self.scorer.score_drink(preference, drink)

    def _extract_all(self, images: Sequence[ImageInput], preference: Preference) -> list[ImageOutcome]:
        total = len(images)
        jobs = list(enumerate(images, start=1))
        workers = min(self.config.max_concurrency, total)
        if workers == 1:
            return [self._extract_one(index, image, preference, total) for index, image in jobs]

        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(
                executor.map(lambda job: self._extract_one(job[0], job[1], preference, total), jobs)
            )

    def _extract_one(self, index: int, image: ImageInput, preference: Preference, total: int) -> ImageOutcome:
        try:
            with self._staged(image) as staged:
                extraction = self.provider.extract_menu(staged, preference, index, total)
            if not isinstance(extraction, MenuExtraction):
                raise MalformedResultError(f"Unexpected extraction result: {type(extraction).__name__}")
        except ExtractionError as exc:
            logger.warning("image %d/%d failed: %s", index, total, exc)
            return ImageOutcome(index=index, drinks=[], note=f"Image {index}: Processing failed - {exc}")
        except Exception as exc:
            logger.exception("image %d/%d failed unexpectedly", index, total)
            return ImageOutcome(index=index, drinks=[], note=f"Image {index}: Processing failed - {exc}")

        drinks = [drink.model_copy(update={"source_image": index}) for drink in extraction.drinks]
        logger.info("Processed image %d/%d: found %d drinks", index, total, len(drinks))
        note = f"Image {index}: {extraction.notes}" if extraction.notes else None
        return ImageOutcome(index=index, drinks=drinks, note=note)

    @contextmanager
    def _staged(self, image: ImageInput) -> Iterator[ImageInput]:
        """Spool raw bytes to a temp file when configured; always removed afterwards."""
        if not self.config.spool_dir or not isinstance(image, bytes):
            yield image
            return

        Path(self.config.spool_dir).mkdir(parents=True, exist_ok=True)
        handle = tempfile.NamedTemporaryFile(dir=self.config.spool_dir, suffix=".img", delete=False)
        path = Path(handle.name)
        try:
            with handle:
                handle.write(image)
            yield path
        finally:
            path.unlink(missing_ok=True)
