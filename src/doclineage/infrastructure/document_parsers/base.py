"""Base protocol for document parsers."""

from typing import Protocol


class ParseResult:
    """Result of parsing a file: extracted text and the detected file type."""

    __slots__ = ("text", "file_type")

    def __init__(self, text: str, file_type: str) -> None:
        self.text = text
        self.file_type = file_type


class DocumentParser(Protocol):
    """Parser that extracts text from file bytes."""

    def __call__(self, data: bytes, filename: str | None = None) -> ParseResult:
        """Extract text. Raises ValueError on a corrupted file."""
        ...
