"""Exceptions raised by the entity extractor."""


class InputError(ValueError):
    """Raised when there is no text to extract from (empty or whitespace only)."""

    def __init__(self, message: str = "No text provided for processing"):
        super().__init__(message)
