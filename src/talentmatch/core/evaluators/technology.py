"""Coverage of technologies implied by the job text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from ...schemas import CandidateMatchProfile, JobMatchRequirements, TechnologyStack
from ..numeric import round_half_up
from ..text_analyzer import TECHNOLOGY_CATEGORIES, JobTextAnalysis, analyze_job_text


@dataclass(frozen=True, slots=True)
class TechnologyScoreResult:
    score: float
    matched: list[str]
    missing: list[str]


def _covers(candidate_techs: Sequence[str], job_tech: str) -> bool:
    needle = job_tech.lower()
    for tech in candidate_techs:
        lowered = tech.lower()
        if lowered and (needle in lowered or lowered in needle):
            return True
    return False


def calculate_technology_score(
    candidate_stack: TechnologyStack | None,
    job_technologies: Mapping[str, Sequence[str]],
) -> TechnologyScoreResult:
    """Share of job-implied technologies found in the same candidate category."""
    matched: list[str] = []
    missing: list[str] = []
    for category in TECHNOLOGY_CATEGORIES:
        candidate_techs = getattr(candidate_stack, category, None) or []
        for job_tech in job_technologies.get(category, []):
            (matched if _covers(candidate_techs, job_tech) else missing).append(job_tech)

    total = len(matched) + len(missing)
    score = len(matched) / total * 100 if total else 100.0
    return TechnologyScoreResult(round_half_up(score, 2), matched, missing)


class TechnologyEvaluator:
    dimension = "technology"

    def evaluate(
        self,
        candidate: CandidateMatchProfile,
        job: JobMatchRequirements,
        context: dict[str, Any],
    ) -> dict[str, Any]:
        analysis: JobTextAnalysis = context.get("analysis") or analyze_job_text(
            job.description, job.requirements, job.responsibilities
        )
        result = calculate_technology_score(candidate.technologies, analysis.technologies)
        return {
            "dimension": self.dimension,
            "score": result.score,
            "details": {
                "matched_technologies": result.matched,
                "missing_technologies": result.missing,
            },
        }
