"""Dictionary repository for normalization."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from importlib import import_module

from drink_lens.exceptions import ConfigurationError
from drink_lens.normalization.types import Dimension


@dataclass(frozen=True)
class Term:
    dimension: Dimension
    key: str
    group: str | None = None
    rank: int | None = None


@dataclass(frozen=True)
class Alias:
    dimension: Dimension
    key: str
    alias: str
    match_type: str
    priority: int


def fold_text(value: str) -> str:
    text = unicodedata.normalize("NFKC", value).lower().strip()
    text = text.replace("_", " ").replace("-", " ")
    text = re.sub(r"[^\w\s]", " ", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip()


class DictionaryRepository:
    """Loads terms and aliases from packaged dictionary data."""

    def __init__(self, version: str = "v1"):
        self.version = version
        self.terms: list[Term] = self._load_terms()
        self.aliases: list[Alias] = self._load_aliases()
        self._validate()

    def terms_by_dimension(self, dimension: Dimension) -> list[Term]:
        return [term for term in self.terms if term.dimension == dimension]

    def aliases_by_dimension(self, dimension: Dimension) -> list[Alias]:
        return [alias for alias in self.aliases if alias.dimension == dimension]

    def _load_module(self):
        try:
            return import_module(f"drink_lens.normalization.data.{self.version}")
        except ModuleNotFoundError as exc:
            raise ConfigurationError(f"Unknown dictionary version: {self.version}") from exc

    def _load_terms(self) -> list[Term]:
        return [Term(**item) for item in self._load_module().TERMS]

    def _load_aliases(self) -> list[Alias]:
        return [Alias(**item) for item in self._load_module().ALIASES]

    def _validate(self) -> None:
        valid_keys = {(term.dimension, term.key) for term in self.terms}
        if len(valid_keys) != len(self.terms):
            raise ConfigurationError(f"Duplicate term in dictionary {self.version}")

        seen: dict[tuple[str, str, str], str] = {}
        for alias in self.aliases:
            if (alias.dimension, alias.key) not in valid_keys:
                raise ConfigurationError(
                    f"Alias references unknown term: {alias.dimension}/{alias.key}"
                )
            if alias.match_type not in {"exact", "contains"}:
                raise ConfigurationError(f"Invalid alias match type: {alias.match_type}")

            signature = (alias.dimension, alias.match_type, fold_text(alias.alias))
            if signature in seen and seen[signature] != alias.key:
                raise ConfigurationError(
                    f"Conflicting alias detected for {signature}: {seen[signature]} vs {alias.key}"
                )
            seen[signature] = alias.key
