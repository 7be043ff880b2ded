"""Base provider interface."""

from __future__ import annotations

import json
import logging
import re
from abc import ABC, abstractmethod
from io import BytesIO
from pathlib import Path

from PIL import Image
from pydantic import ValidationError

from drink_lens.exceptions import ImageError, MalformedResultError
from drink_lens.schema import CandidateDrink, MenuExtraction, Preference

logger = logging.getLogger(__name__)

ImageInput = str | Path | bytes | Image.Image

_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


class BaseProvider(ABC):
    """Abstract base class for menu extraction providers."""

    @abstractmethod
    def extract_menu(
        self,
        image: ImageInput,
        preference: Preference,
        index: int,
        total: int,
    ) -> MenuExtraction:
        """Extract candidate drinks from one menu image.

        Args:
            image: Image input (file path, Path object, raw bytes or PIL Image)
            preference: Preference as received with the request
            index: 1-based position of the image within the request
            total: Number of images in the request

        Returns:
            MenuExtraction with zero or more drinks and an optional note

        Raises:
            ExtractionError: If the image cannot be processed
            MalformedResultError: If the reply does not have the expected shape
        """
        pass

    def get_extraction_metadata(self) -> dict[str, str]:
        """Return provider-specific extraction metadata."""
        return {}


def load_image(image: ImageInput) -> Image.Image:
    """Load image from various input types."""
    if isinstance(image, Image.Image):
        return image

    if isinstance(image, bytes):
        try:
            return Image.open(BytesIO(image))
        except Exception as e:
            raise ImageError(f"Failed to open image: {e}") from e

    path = Path(image) if isinstance(image, str) else image
    if not path.exists():
        raise ImageError(f"Image file not found: {path}")

    try:
        return Image.open(path)
    except Exception as e:
        raise ImageError(f"Failed to open image: {e}") from e


def parse_menu_extraction(text: str | None) -> MenuExtraction:
    """Parse a model reply into a MenuExtraction.

    Markdown code fences are tolerated. The reply must be a JSON object with a
    `drinks` array; entries without a usable name are skipped and noted.
    """
    if not text or not text.strip():
        raise MalformedResultError("Empty response from vision model")

    try:
        payload = json.loads(_FENCE.sub("", text.strip()))
    except json.JSONDecodeError as exc:
        raise MalformedResultError(f"Response is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict) or not isinstance(payload.get("drinks"), list):
        raise MalformedResultError("Response does not contain a drinks array")

    drinks: list[CandidateDrink] = []
    skipped = 0
    for entry in payload["drinks"]:
        if not isinstance(entry, dict) or not str(entry.get("name") or "").strip():
            skipped += 1
            continue
        try:
            drinks.append(CandidateDrink.model_validate(entry))
        except ValidationError:
            logger.debug("skipping invalid drink entry: %r", entry)
            skipped += 1

    notes = payload.get("notes")
    notes = notes.strip() if isinstance(notes, str) and notes.strip() else None
    if skipped:
        skipped_note = f"Skipped {skipped} unreadable drink entries"
        notes = f"{notes}; {skipped_note}" if notes else skipped_note
    return MenuExtraction(drinks=drinks, notes=notes)
