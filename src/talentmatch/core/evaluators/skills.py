"""Required/optional skill coverage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from ...schemas import CandidateMatchProfile, JobMatchRequirements
from ..normalizer import compare_skills, normalize_skills
from ..numeric import round_half_up

OPTIONAL_BONUS_CAP = 20.0


@dataclass(frozen=True, slots=True)
class SkillScoreResult:
    score: float
    matched: list[str]
    missing: list[str]
    extra: list[str]


def calculate_skill_score(
    candidate_skills: Sequence[str],
    required_skills: Sequence[str],
    optional_skills: Sequence[str] = (),
) -> SkillScoreResult:
    """Score required-skill coverage plus a capped optional-skill bonus.

    A job without required skills scores 100 for any candidate listing at
    least one skill and 0 otherwise.
    """
    comparison = compare_skills(candidate_skills, required_skills)
    candidate = normalize_skills(candidate_skills)
    required = normalize_skills(required_skills)

    if not required:
        return SkillScoreResult(
            score=100.0 if candidate else 0.0,
            matched=comparison.matched,
            missing=comparison.missing,
            extra=comparison.extra,
        )

    required_pct = len(comparison.matched) / len(required) * 100

    optional = normalize_skills(optional_skills)
    optional_bonus = 0.0
    if optional:
        candidate_set = set(candidate)
        optional_hits = sum(1 for skill in optional if skill in candidate_set)
        optional_bonus = min(optional_hits / len(optional) * OPTIONAL_BONUS_CAP, OPTIONAL_BONUS_CAP)

    return SkillScoreResult(
        score=round_half_up(min(required_pct + optional_bonus, 100.0), 2),
        matched=comparison.matched,
        missing=comparison.missing,
        extra=comparison.extra,
    )


class SkillEvaluator:
    """Compare candidate skills with the job's required and optional skills."""

    dimension = "skill"

    def evaluate(
        self,
        candidate: CandidateMatchProfile,
        job: JobMatchRequirements,
        context: dict[str, Any],
    ) -> dict[str, Any]:
        result = calculate_skill_score(candidate.skills, job.required_skills, job.optional_skills)
        return {
            "dimension": self.dimension,
            "score": result.score,
            "details": {
                "matched_skills": result.matched,
                "missing_skills": result.missing,
                "extra_skills": result.extra,
            },
        }
