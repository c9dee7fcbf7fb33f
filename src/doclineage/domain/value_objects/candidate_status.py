"""Replacement candidate status."""

from enum import StrEnum


class CandidateStatus(StrEnum):
    """Pending candidates end in CONFIRMED or DISMISSED, both terminal."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    DISMISSED = "dismissed"

    @property
    def is_terminal(self) -> bool:
        return self is not CandidateStatus.PENDING
