"""Domain exceptions."""


class DocLineageError(Exception):
    """Base exception for doclineage."""

    pass


class NotFound(DocLineageError):
    """Requested document or candidate was not found."""

    def __init__(self, entity: str, identifier: str) -> None:
        super().__init__(f"{entity} {identifier} not found")
        self.entity = entity
        self.identifier = identifier


class Conflict(DocLineageError):
    """State-machine precondition violated (terminal candidate, lost race, ...)."""

    pass


class SelfReference(Conflict):
    """A document cannot be linked as a version of itself."""

    pass


class UnprocessableInput(DocLineageError):
    """Text required for a diff is not available."""

    pass


class InvariantViolation(DocLineageError):
    """Stored lineage data is corrupt (cycle, branching chain, dangling edge)."""

    pass


class StoreError(DocLineageError):
    """Document store failed for a reason outside the lineage taxonomy."""

    pass
