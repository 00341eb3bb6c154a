"""Extra qualifications beyond the job requirements.

The bonus dimension is reported in the breakdown and its factors feed the
suggestion generator, but it carries a zero weight in the total score.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from ...schemas import CandidateMatchProfile, JobMatchRequirements, ProjectRecord
from ..normalizer import compare_skills
from ..numeric import round_half_up

EXTRA_SKILL_POINTS = 5
EXTRA_SKILL_CAP = 50
PROJECT_TECH_POINTS = 3
PROJECT_TECH_CAP = 30


@dataclass(frozen=True, slots=True)
class BonusScoreResult:
    score: float
    bonus_factors: list[str]


def calculate_bonus_score(
    extra_skills: Sequence[str],
    projects: Sequence[ProjectRecord] = (),
) -> BonusScoreResult:
    score = 0.0
    factors: list[str] = []

    if extra_skills:
        score += min(len(extra_skills) * EXTRA_SKILL_POINTS, EXTRA_SKILL_CAP)
        factors.append(f"{len(extra_skills)} additional skills beyond requirements")

    project_techs = [tech for project in projects for tech in project.technologies if tech]
    if project_techs:
        score += min(len(project_techs) * PROJECT_TECH_POINTS, PROJECT_TECH_CAP)
        factors.append(f"{len(project_techs)} technologies used in projects")

    return BonusScoreResult(round_half_up(min(score, 100.0), 2), factors)


class BonusEvaluator:
    dimension = "bonus"

    def evaluate(
        self,
        candidate: CandidateMatchProfile,
        job: JobMatchRequirements,
        context: dict[str, Any],
    ) -> dict[str, Any]:
        extra = compare_skills(candidate.skills, job.required_skills).extra
        result = calculate_bonus_score(extra, candidate.projects)
        return {
            "dimension": self.dimension,
            "score": result.score,
            "details": {"bonus_factors": result.bonus_factors},
        }
