"""Candidate soft-skill levels against traits signalled by the job text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ...schemas import CandidateMatchProfile, JobMatchRequirements, SoftSkillLevels
from ..numeric import round_half_up
from ..text_analyzer import SOFT_SKILL_TRAITS, JobTextAnalysis, analyze_job_text

TRAIT_LABELS: dict[str, str] = {
    "communication": "Communication",
    "leadership": "Leadership",
    "problem_solving": "Problem Solving",
    "adaptability": "Adaptability",
    "creativity": "Creativity",
    "attention_to_detail": "Attention to Detail",
}

MATCH_THRESHOLD = 70.0
GAP_THRESHOLD = 40.0


@dataclass(frozen=True, slots=True)
class SoftSkillsScoreResult:
    score: float
    matches: list[str]
    gaps: list[str]


def calculate_soft_skills_score(
    candidate_levels: SoftSkillLevels | None,
    job_soft_skills: Mapping[str, int],
) -> SoftSkillsScoreResult:
    """Average per-trait coverage over the traits the job actually signals.

    A job that signals no trait yields 100.
    """
    matches: list[str] = []
    gaps: list[str] = []
    total = 0.0
    signalled = 0

    for trait in SOFT_SKILL_TRAITS:
        importance = job_soft_skills.get(trait, 0)
        if importance <= 0:
            continue
        signalled += 1
        level = getattr(candidate_levels, trait, None) or 0.0
        trait_score = min(level / max(importance, 1) * 100, 100.0)
        total += trait_score
        if trait_score >= MATCH_THRESHOLD:
            matches.append(TRAIT_LABELS[trait])
        elif trait_score < GAP_THRESHOLD:
            gaps.append(TRAIT_LABELS[trait])

    score = total / signalled if signalled else 100.0
    return SoftSkillsScoreResult(round_half_up(score, 2), matches, gaps)


class SoftSkillsEvaluator:
    dimension = "soft_skills"

    def evaluate(
        self,
        candidate: CandidateMatchProfile,
        job: JobMatchRequirements,
        context: dict[str, Any],
    ) -> dict[str, Any]:
        analysis: JobTextAnalysis = context.get("analysis") or analyze_job_text(
            job.description, job.requirements, job.responsibilities
        )
        result = calculate_soft_skills_score(candidate.soft_skills, analysis.soft_skills)
        return {
            "dimension": self.dimension,
            "score": result.score,
            "details": {
                "soft_skills_match": result.matches,
                "soft_skills_gaps": result.gaps,
            },
        }
