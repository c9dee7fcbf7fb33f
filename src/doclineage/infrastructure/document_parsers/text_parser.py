"""Parser for plain text and markdown."""

from doclineage.infrastructure.document_parsers.base import ParseResult


def decode_text(data: bytes) -> str:
    """Decode as UTF-8, falling back to cp1251, then UTF-8 with replacement."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        try:
            return data.decode("cp1251")
        except UnicodeDecodeError:
            return data.decode("utf-8", errors="replace")


def parse_txt(data: bytes, filename: str | None = None) -> ParseResult:
    """Plain text (.txt)."""
    return ParseResult(text=decode_text(data), file_type="txt")


def parse_md(data: bytes, filename: str | None = None) -> ParseResult:
    """Markdown (.md) - kept as-is."""
    return ParseResult(text=decode_text(data), file_type="md")
