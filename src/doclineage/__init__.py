"""Document version lineage and diff engine."""

__version__ = "0.1.0"
