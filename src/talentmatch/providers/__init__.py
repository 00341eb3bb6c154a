"""Data providers feeding candidates, jobs and activity to the matching service."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from ..schemas import CandidateActivity, CandidateMatchProfile, JobMatchRequirements
from .json_store import DatasetLoadError, JsonDataProvider


@runtime_checkable
class MatchingDataProvider(Protocol):
    """Read-only access to the records the matching engine scores.

    Lookups return ``None`` for unknown ids; list operations return at most
    ``limit`` records.
    """

    def get_candidate(self, candidate_id: str) -> CandidateMatchProfile | None:
        """Return the candidate profile or None."""

    def get_job(self, job_id: str) -> JobMatchRequirements | None:
        """Return the job posting or None."""

    def list_published_jobs(self, limit: int) -> list[JobMatchRequirements]:
        """Return published jobs."""

    def list_active_jobs(self, limit: int, as_of: datetime) -> list[JobMatchRequirements]:
        """Return published jobs whose deadline has not passed, newest first."""

    def list_public_candidates(self, limit: int) -> list[CandidateMatchProfile]:
        """Return candidates with a public profile."""

    def get_candidate_activity(self, candidate_id: str) -> CandidateActivity:
        """Return the candidate's interaction history (empty when unknown)."""


__all__ = ["DatasetLoadError", "JsonDataProvider", "MatchingDataProvider"]
