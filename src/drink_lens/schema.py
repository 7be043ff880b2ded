"""Data models for drink-lens."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DIMENSIONS = (
    "alcohol_type",
    "strength",
    "glassware",
    "acidity",
    "sweetness",
    "bitterness",
    "spice",
)


class Preference(BaseModel):
    """Taste preference profile. Empty fields mean "don't care"."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    alcohol_type: str | None = None
    strength: str | None = None
    glassware: str | None = None
    acidity: str | None = None
    sweetness: str | None = None
    bitterness: str | None = None
    spice: str | None = None

    @field_validator(*DIMENSIONS, mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)


class CandidateDrink(BaseModel):
    """A drink as reported by the menu extraction step."""

    model_config = ConfigDict(extra="ignore")

    name: str
    price: str | None = None
    alcohol_type: str | None = None
    strength: str | None = None
    glassware: str | None = None
    acidity: str | None = None
    sweetness: str | None = None
    bitterness: str | None = None
    spice: str | None = None
    ingredients: list[str] = Field(default_factory=list)
    description: str | None = None
    reasoning: str | None = None
    assumptions: str | None = None
    # Upstream scores are untrusted and always revalidated.
    field_scores: dict[str, Any] | None = None
    match_percentage: Any = None
    source_image: int | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("price", mode="before")
    @classmethod
    def _price_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("ingredients", mode="before")
    @classmethod
    def _ingredients_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


class ScoredDrink(CandidateDrink):
    """A candidate drink with authoritative scores attached."""

    field_scores: dict[str, int] = Field(default_factory=dict)
    match_percentage: float = Field(default=0.0, ge=0.0, le=100.0)
    source_image: int = Field(default=1, ge=1)


class MenuExtraction(BaseModel):
    """Drinks extracted from one menu image."""

    drinks: list[CandidateDrink] = Field(default_factory=list)
    notes: str | None = None


class Diagnostics(BaseModel):
    images_processed: int = 0
    total_drinks_found: int = 0
    unique_drinks: int = 0
    drinks_shown: int = 0
    extractor: dict[str, str] = Field(default_factory=dict)


class MatchResult(BaseModel):
    """Ranked drinks for one request."""

    status: str = "ok"
    preference: dict[str, str] = Field(default_factory=dict)
    drinks: list[ScoredDrink] = Field(default_factory=list)
    sorted_by: str = "match_percentage (enforced)"
    notes: str = ""
    diagnostics: Diagnostics = Field(default_factory=Diagnostics)
