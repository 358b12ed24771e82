"""Abstract candidate source interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from talent_directory_core.models.candidate import CandidateFields, CandidateRecord


@runtime_checkable
class CandidateSource(Protocol):
    """Storage collaborator that supplies the candidate collection."""

    async def get_by_id(self, candidate_id: int) -> CandidateRecord | None:
        """Retrieve a candidate by its ID."""
        ...

    async def create(self, fields: CandidateFields) -> CandidateRecord:
        """Store a new candidate and return it with its assigned ID."""
        ...

    async def list_all(self) -> list[CandidateRecord]:
        """List every stored candidate in insertion order."""
        ...
