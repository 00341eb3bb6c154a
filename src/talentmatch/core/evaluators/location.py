"""Location and remote-work compatibility."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import CandidateMatchProfile, JobMatchRequirements


@dataclass(frozen=True, slots=True)
class LocationScoreResult:
    score: float
    location_match: str


def calculate_location_score(
    candidate_location: str | None,
    job_location: str | None,
    is_remote: bool,
) -> LocationScoreResult:
    if is_remote:
        return LocationScoreResult(100.0, "Job is remote - location compatible")

    candidate_loc = (candidate_location or "").strip().lower()
    job_loc = (job_location or "").strip().lower()
    if not candidate_loc or not job_loc:
        return LocationScoreResult(50.0, "Location information incomplete")

    if candidate_loc == job_loc:
        return LocationScoreResult(100.0, "Exact location match")

    if candidate_loc.split(",")[0].strip() == job_loc.split(",")[0].strip():
        return LocationScoreResult(90.0, "Same city - good location match")

    if set(candidate_loc.split()) & set(job_loc.split()):
        return LocationScoreResult(
            60.0, "Partial location match - some common location keywords"
        )

    return LocationScoreResult(20.0, "Location mismatch - candidate may need to relocate")


class LocationEvaluator:
    dimension = "location"

    def evaluate(
        self,
        candidate: CandidateMatchProfile,
        job: JobMatchRequirements,
        context: dict[str, Any],
    ) -> dict[str, Any]:
        result = calculate_location_score(candidate.address, job.location, job.is_remote)
        return {
            "dimension": self.dimension,
            "score": result.score,
            "details": {"location_match": result.location_match},
        }
