"""Application ports - interfaces for external adapters."""

from doclineage.application.ports.text_extractor import TextExtractor
from doclineage.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "TextExtractor",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
