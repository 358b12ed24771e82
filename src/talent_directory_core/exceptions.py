"""Custom exception hierarchy for talent-directory."""

from __future__ import annotations


class TalentDirectoryError(Exception):
    """Base exception for all talent-directory errors."""


class CandidateNotFoundError(TalentDirectoryError):
    """Raised when a candidate id is not present in the collection."""

    def __init__(self, candidate_id: int) -> None:
        """Initialize with the missing candidate id."""
        super().__init__(f"Candidate {candidate_id} not found")
        self.candidate_id = candidate_id
