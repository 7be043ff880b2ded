"""Data models for normalization output."""

from typing import Literal

from pydantic import BaseModel

Dimension = Literal[
    "alcohol_type",
    "strength",
    "glassware",
    "acidity",
    "sweetness",
    "bitterness",
    "spice",
]
Method = Literal["dont_care", "exact", "alias", "fuzzy", "unmapped"]

# Sentinel for an absent preference; never equal to a real category.
DONT_CARE = "__dont_care__"


class NormalizedValue(BaseModel):
    """Normalized representation for a single raw attribute value."""

    dimension: Dimension
    raw: str
    canonical: str
    method: Method = "unmapped"
    group: str | None = None
    rank: int | None = None

    @property
    def is_dont_care(self) -> bool:
        return self.canonical == DONT_CARE

    @property
    def is_mapped(self) -> bool:
        return self.method in {"exact", "alias", "fuzzy"}
