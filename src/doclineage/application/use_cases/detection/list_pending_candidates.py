"""List pending candidates use case."""

from doclineage.domain.entities import ReplacementCandidate


class ListPendingCandidatesUseCase:
    """All replacement suggestions still awaiting a decision, newest first."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> list[ReplacementCandidate]:
        async with self._uow_factory() as uow:
            pending = await uow.candidates.list_pending()
        return sorted(pending, key=lambda c: c.created_at, reverse=True)
