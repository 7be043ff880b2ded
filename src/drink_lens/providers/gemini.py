"""Gemini provider implementation."""

import json
import os

from google import genai
from google.genai import errors, types

from drink_lens.exceptions import AuthenticationError, ExtractionError, RateLimitError
from drink_lens.providers.base import BaseProvider, ImageInput, load_image, parse_menu_extraction
from drink_lens.schema import MenuExtraction, Preference

EXTRACTION_PROMPT = """You are reading a photographed bar or restaurant menu.
List every drink printed on it. Return a JSON object with these fields
(use null for missing information):

{
  "drinks": [
    {
      "name": "Drink name exactly as printed",
      "price": "Price as printed, or null",
      "alcohol_type": "Base spirit: Whiskey, Vodka, Gin, Rum, Tequila, Mezcal, Brandy, Pisco, Wine, Beer, Sake, Liqueur or Non-alcoholic",
      "strength": "Very strong (all alcohol), Strong (spirit-led, small modifier), Medium (spirit and mixer) or Low (mostly mixer)",
      "glassware": "Highball, Collins, Lowball, Rocks, Coupe, Nick & Nora, Martini, Flute, Wine glass, Mug, ...",
      "acidity": "High, Medium or Low",
      "sweetness": "High, Medium, Low or Dry",
      "bitterness": "High, Medium or Low",
      "spice": "High, Medium or Low",
      "ingredients": ["Ingredients as listed"],
      "description": "Menu description, if any",
      "assumptions": "Fields you could not read or had to guess, or null"
    }
  ],
  "notes": "Image quality problems or other parsing notes, or null"
}

Important:
- Never invent drinks that are not on the menu
- Leave an attribute null when the menu gives no basis for it
- Do not score or rank the drinks
- Return valid JSON only, no additional text"""


def build_prompt(preference: Preference, index: int, total: int) -> str:
    prefs = json.dumps(preference.model_dump(exclude_none=True), indent=2, ensure_ascii=False)
    return (
        f"{EXTRACTION_PROMPT}\n\n"
        f"The guest is looking for (context only, do not filter):\n{prefs}\n\n"
        f"This is image {index} of {total}."
    )


class GeminiProvider(BaseProvider):
    """Gemini Vision API provider."""

    def __init__(self, api_key: str | None = None, model: str | None = None, client=None):
        """Initialize Gemini provider.

        Args:
            api_key: Gemini API key. Falls back to GEMINI_API_KEY env var.
            model: Model name to use. Falls back to DRINK_LENS_GEMINI_MODEL.
            client: Preconfigured `genai.Client`, mainly for tests.

        Raises:
            AuthenticationError: If no API key is provided or found.
        """
        self.model = model or os.getenv("DRINK_LENS_GEMINI_MODEL", "gemini-2.0-flash")
        if client is not None:
            self.api_key = api_key
            self.client = client
            return

        self.api_key = api_key or os.environ.get("GEMINI_API_KEY")
        if not self.api_key:
            raise AuthenticationError(
                "No API key provided. Set GEMINI_API_KEY environment variable "
                "or pass api_key parameter."
            )
        self.client = genai.Client(api_key=self.api_key)

    def extract_menu(
        self,
        image: ImageInput,
        preference: Preference,
        index: int,
        total: int,
    ) -> MenuExtraction:
        """Extract drinks from a menu image using Gemini Vision.

        Raises:
            ImageError: If image cannot be loaded
            RateLimitError: If API rate limit is exceeded
            AuthenticationError: If API key is invalid
            ExtractionError: If the request fails for any other reason
            MalformedResultError: If the reply cannot be parsed
        """
        pil_image = load_image(image)

        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=[pil_image, build_prompt(preference, index, total)],
                config=types.GenerateContentConfig(response_mime_type="application/json"),
            )
        except errors.ClientError as e:
            if "rate" in str(e).lower() or "quota" in str(e).lower():
                raise RateLimitError(f"API rate limit exceeded: {e}") from e
            if "auth" in str(e).lower() or "key" in str(e).lower():
                raise AuthenticationError(f"Invalid API key: {e}") from e
            raise ExtractionError(f"Vision request rejected: {e}") from e
        except Exception as e:
            raise ExtractionError(f"Failed to extract drinks: {e}") from e

        return parse_menu_extraction(response.text)

    def get_extraction_metadata(self) -> dict[str, str]:
        return {"provider": "gemini", "model": self.model}
