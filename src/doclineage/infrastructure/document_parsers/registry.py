"""Registry: select parser by file extension."""

from collections.abc import Callable
from pathlib import Path

from doclineage.infrastructure.document_parsers.base import ParseResult
from doclineage.infrastructure.document_parsers.docx_parser import parse_docx
from doclineage.infrastructure.document_parsers.pdf_parser import parse_pdf
from doclineage.infrastructure.document_parsers.text_parser import parse_md, parse_txt

# extension (lower) -> parse function
_PARSERS_BY_EXT: dict[str, Callable[..., ParseResult]] = {
    "txt": parse_txt,
    "md": parse_md,
    "pdf": parse_pdf,
    "docx": parse_docx,
}


def get_parser_for_filename(filename: str | None) -> Callable[..., ParseResult] | None:
    """Return parse function for given filename (by extension) or None."""
    if not filename:
        return None
    ext = Path(filename).suffix.lstrip(".").lower()
    return _PARSERS_BY_EXT.get(ext)


def parse_file(data: bytes, filename: str | None = None) -> ParseResult:
    """
    Select parser by filename extension, run it, return ParseResult.
    Raises ValueError if no parser found or parse failed.
    """
    parser = get_parser_for_filename(filename)
    if not parser:
        ext = Path(filename).suffix if filename else "unknown"
        raise ValueError(f"No parser for file type: {ext}")
    return parser(data, filename)
