"""Text extractor port."""

from typing import Protocol


class TextExtractor(Protocol):
    """Extracts plain text from a stored document file."""

    async def extract(self, storage_path: str) -> str | None:
        """Return extracted text, or None if the file cannot be read or parsed."""
        ...
