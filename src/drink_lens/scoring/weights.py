"""Per-dimension scoring weights."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from drink_lens.exceptions import ConfigurationError
from drink_lens.schema import DIMENSIONS

DEFAULT_WEIGHT_VALUES = {
    "alcohol_type": 40,
    "strength": 20,
    "glassware": 10,
    "acidity": 10,
    "sweetness": 8,
    "bitterness": 8,
    "spice": 4,
}


@dataclass(frozen=True)
class WeightTable:
    """Weights for the seven dimensions. Must sum to exactly 100."""

    values: Mapping[str, int] = field(default_factory=lambda: dict(DEFAULT_WEIGHT_VALUES))

    def __post_init__(self) -> None:
        missing = [name for name in DIMENSIONS if name not in self.values]
        if missing:
            raise ConfigurationError(f"Weight table is missing dimensions: {', '.join(missing)}")
        unknown = sorted(set(self.values) - set(DIMENSIONS))
        if unknown:
            raise ConfigurationError(f"Weight table has unknown dimensions: {', '.join(unknown)}")
        for name, weight in self.values.items():
            if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
                raise ConfigurationError(f"Weight for {name} must be a non-negative integer, got {weight!r}")
        total = sum(self.values.values())
        if total != 100:
            raise ConfigurationError(f"Weights must sum to 100, got {total}")
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __getitem__(self, dimension: str) -> int:
        return self.values[dimension]

    def items(self):
        return ((name, self.values[name]) for name in DIMENSIONS)

    @classmethod
    def parse(cls, raw: str) -> "WeightTable":
        """Parse `alcohol_type=40,strength=20,...` into a table."""
        values: dict[str, int] = {}
        for part in raw.split(","):
            if not part.strip():
                continue
            name, sep, number = part.partition("=")
            if not sep:
                raise ConfigurationError(f"Invalid weight entry: {part.strip()!r}")
            try:
                values[name.strip()] = int(number.strip())
            except ValueError as exc:
                raise ConfigurationError(f"Invalid weight value: {part.strip()!r}") from exc
        return cls(values)


DEFAULT_WEIGHTS = WeightTable()
