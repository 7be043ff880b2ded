"""Normalization engine for drink attribute values."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from difflib import SequenceMatcher
from functools import lru_cache

from drink_lens.normalization.repository import Alias, DictionaryRepository, Term, fold_text
from drink_lens.normalization.types import DONT_CARE, Dimension, Method, NormalizedValue
from drink_lens.schema import DIMENSIONS, Preference

logger = logging.getLogger(__name__)

DONT_CARE_TOKENS = frozenset(
    {"", "any", "na", "n a", "no preference", "either", "whatever", "dont care", "don t care"}
)


@dataclass(frozen=True)
class MatchResult:
    term: Term
    method: Method


@dataclass(frozen=True)
class NormalizationConfig:
    dictionary_version: str = "v1"
    fuzzy_threshold: float = 0.86

    @classmethod
    def from_env(cls) -> "NormalizationConfig":
        raw_threshold = os.getenv("DRINK_LENS_FUZZY_THRESHOLD")
        try:
            threshold = float(raw_threshold) if raw_threshold else 0.86
        except ValueError:
            threshold = 0.86
        return cls(
            dictionary_version=os.getenv("DRINK_LENS_DICTIONARY_VERSION", "v1"),
            fuzzy_threshold=threshold,
        )


class NormalizationEngine:
    """Dictionary-first normalization of the seven taste dimensions."""

    def __init__(self, config: NormalizationConfig | None = None):
        self.config = config or NormalizationConfig()
        self.repo = DictionaryRepository(version=self.config.dictionary_version)

    def normalize(self, dimension: Dimension, raw: str | None) -> str:
        """Return the canonical value for `raw`, or `DONT_CARE` when empty."""
        return self.normalize_one(dimension, raw).canonical

    def normalize_one(self, dimension: Dimension, raw: str | None) -> NormalizedValue:
        value = (raw or "").strip()
        folded = fold_text(value)
        if folded in DONT_CARE_TOKENS:
            return NormalizedValue(dimension=dimension, raw=raw or "", canonical=DONT_CARE, method="dont_care")

        match = (
            self._match_exact(dimension, folded)
            or self._match_alias(dimension, folded)
            or self._match_contains(dimension, folded)
            or self._match_fuzzy(dimension, folded)
        )
        if match:
            return NormalizedValue(
                dimension=dimension,
                raw=raw or "",
                canonical=match.term.key,
                method=match.method,
                group=match.term.group,
                rank=match.term.rank,
            )

        logger.debug("unmapped %s value: %r", dimension, value)
        return NormalizedValue(
            dimension=dimension,
            raw=raw or "",
            canonical=" ".join(value.lower().split()),
            method="unmapped",
        )

    def is_adjacent(self, first: NormalizedValue, second: NormalizedValue) -> bool:
        """True when two distinct values are near-equivalent for their dimension."""
        if first.canonical == second.canonical:
            return False
        if first.group and first.group == second.group:
            return True
        if first.rank is not None and second.rank is not None:
            return abs(first.rank - second.rank) == 1
        return False

    def find_in_text(self, dimension: Dimension, text: str) -> NormalizedValue | None:
        """Find a known value mentioned inside free text, e.g. an ingredient."""
        match = self._match_contains(dimension, fold_text(text))
        if match is None:
            return None
        return NormalizedValue(
            dimension=dimension,
            raw=text,
            canonical=match.term.key,
            method=match.method,
            group=match.term.group,
            rank=match.term.rank,
        )

    def standardize_preference(self, preference: Preference) -> dict[str, str]:
        """Display form of a preference; don't-care fields are omitted."""
        standardized: dict[str, str] = {}
        for dimension in DIMENSIONS:
            item = self.normalize_one(dimension, getattr(preference, dimension))
            if item.is_dont_care:
                continue
            standardized[dimension] = item.canonical if item.is_mapped else item.canonical.capitalize()
        return standardized

    def _term(self, dimension: Dimension, key: str) -> Term:
        for term in self.repo.terms_by_dimension(dimension):
            if term.key == key:
                return term
        raise KeyError(f"{dimension}/{key}")

    def _match_exact(self, dimension: Dimension, folded: str) -> MatchResult | None:
        for term in self.repo.terms_by_dimension(dimension):
            if folded == fold_text(term.key):
                return MatchResult(term=term, method="exact")
        return None

    def _match_alias(self, dimension: Dimension, folded: str) -> MatchResult | None:
        aliases = sorted(
            [a for a in self.repo.aliases_by_dimension(dimension) if a.match_type == "exact"],
            key=lambda item: item.priority,
        )
        for alias in aliases:
            if folded == fold_text(alias.alias):
                return self._match_from_alias(alias)
        return None

    def _match_contains(self, dimension: Dimension, folded: str) -> MatchResult | None:
        padded = f" {folded} "
        best: tuple[int, int, Alias] | None = None
        for alias in self.repo.aliases_by_dimension(dimension):
            if alias.match_type != "contains":
                continue
            position = padded.find(f" {fold_text(alias.alias)} ")
            if position < 0:
                continue
            candidate = (alias.priority, position, alias)
            if best is None or candidate[:2] < best[:2]:
                best = candidate
        return self._match_from_alias(best[2]) if best else None

    def _match_fuzzy(self, dimension: Dimension, folded: str) -> MatchResult | None:
        best_ratio = 0.0
        best_term: Term | None = None

        for term in self.repo.terms_by_dimension(dimension):
            ratio = SequenceMatcher(None, folded, fold_text(term.key)).ratio()
            if ratio > best_ratio:
                best_ratio = ratio
                best_term = term

        if best_term and best_ratio >= self.config.fuzzy_threshold:
            return MatchResult(term=best_term, method="fuzzy")
        return None

    def _match_from_alias(self, alias: Alias) -> MatchResult:
        return MatchResult(term=self._term(alias.dimension, alias.key), method="alias")


@lru_cache(maxsize=1)
def default_engine() -> NormalizationEngine:
    return NormalizationEngine(NormalizationConfig.from_env())


def normalize(dimension: Dimension, raw_value: str | None) -> str:
    """Normalize one attribute value with the default dictionary."""

    return default_engine().normalize(dimension, raw_value)
