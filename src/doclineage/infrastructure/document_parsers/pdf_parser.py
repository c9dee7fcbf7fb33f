"""Parser for PDF."""

import io

from pypdf import PdfReader

from doclineage.infrastructure.document_parsers.base import ParseResult


def parse_pdf(data: bytes, filename: str | None = None) -> ParseResult:
    """Extract text from PDF bytes, pages separated by a blank line."""
    try:
        reader = PdfReader(io.BytesIO(data))
    except Exception as e:
        raise ValueError(f"Invalid or corrupted PDF: {e}") from e
    parts: list[str] = []
    for page in reader.pages:
        t = page.extract_text()
        if t:
            parts.append(t)
    return ParseResult(text="\n\n".join(parts), file_type="pdf")
