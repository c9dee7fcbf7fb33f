"""Document parsers: extract text from stored files."""

from doclineage.infrastructure.document_parsers.base import ParseResult
from doclineage.infrastructure.document_parsers.registry import parse_file

__all__ = ["ParseResult", "parse_file"]
