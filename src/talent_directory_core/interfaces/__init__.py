"""Public interface re-exports for talent_directory_core."""

from talent_directory_core.interfaces.repository import CandidateSource

__all__ = [
    "CandidateSource",
]
