"""Lineage relation kinds."""

from enum import StrEnum


class RelationKind(StrEnum):
    """Kind of lineage edge between two documents."""

    VERSION_OF = "version_of"
