"""Custom exceptions for drink-lens."""


class DrinkLensError(Exception):
    """Base exception for drink-lens."""

    pass


class ConfigurationError(DrinkLensError):
    """Raised when weights or dictionary data are inconsistent."""

    pass


class NoInputError(DrinkLensError):
    """Raised when a request carries no menu images."""

    pass


class TooManyImagesError(NoInputError):
    """Raised when a request carries more images than allowed."""

    pass


class ExtractionError(DrinkLensError):
    """Raised when a single menu image cannot be extracted."""

    pass


class MalformedResultError(ExtractionError):
    """Raised when the vision model reply does not have the expected shape."""

    pass


class AuthenticationError(ExtractionError):
    """Raised when API key is invalid or missing."""

    pass


class RateLimitError(ExtractionError):
    """Raised when API rate limit is exceeded."""

    pass


class ImageError(ExtractionError):
    """Raised when image cannot be read or is invalid."""

    pass


class MissingNameError(DrinkLensError):
    """Raised when a drink without a name reaches deduplication."""

    pass


class EmptyResultError(DrinkLensError):
    """Raised when no drinks survive extraction across all images."""

    def __init__(self, message: str, notes: str = ""):
        super().__init__(message)
        self.notes = notes


class UnexpectedError(DrinkLensError):
    """Raised for any other fault while matching drinks."""

    pass
