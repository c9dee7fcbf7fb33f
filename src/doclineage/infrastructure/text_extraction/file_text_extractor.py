"""Text extractor reading stored document files from a local storage root."""

import asyncio
import logging
from pathlib import Path

from doclineage.infrastructure.document_parsers import parse_file

logger = logging.getLogger(__name__)


class FileTextExtractor:
    """Resolve storage_path under storage_root and parse it in a worker thread."""

    def __init__(self, storage_root: str | Path) -> None:
        self._root = Path(storage_root).resolve()

    def _resolve(self, storage_path: str) -> Path | None:
        path = (self._root / storage_path).resolve()
        if not path.is_relative_to(self._root):
            logger.warning("Storage path %s escapes storage root", storage_path)
            return None
        if not path.is_file():
            logger.warning("Stored file %s does not exist", path)
            return None
        return path

    def _extract_sync(self, storage_path: str) -> str | None:
        path = self._resolve(storage_path)
        if not path:
            return None
        try:
            result = parse_file(path.read_bytes(), filename=path.name)
        except (OSError, ValueError) as e:
            logger.warning("Text extraction failed for %s: %s", path, e)
            return None
        return result.text if result.text.strip() else None

    async def extract(self, storage_path: str) -> str | None:
        """Return extracted text, or None if missing, unsupported or empty."""
        return await asyncio.to_thread(self._extract_sync, storage_path)
