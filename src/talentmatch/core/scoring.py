"""Weighted multi-dimensional candidate/job match scoring."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Protocol, runtime_checkable

import pendulum

from ..schemas import (
    CandidateMatchProfile,
    JobMatchRequirements,
    MatchBreakdown,
    MatchDetails,
    MatchResult,
)
from .evaluators import (
    BonusEvaluator,
    EducationEvaluator,
    ExperienceEvaluator,
    LocationEvaluator,
    SkillEvaluator,
    SoftSkillsEvaluator,
    TechnologyEvaluator,
    TitleEvaluator,
)
from .numeric import round_half_up
from .suggestions import generate_suggestions
from .text_analyzer import analyze_job_text

# Fixed weights; bonus is computed and reported but contributes nothing.
SCORING_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "skill": 0.30,
        "experience": 0.18,
        "title": 0.12,
        "education": 0.12,
        "soft_skills": 0.12,
        "technology": 0.08,
        "location": 0.08,
        "bonus": 0.00,
    }
)

DIMENSIONS: tuple[str, ...] = tuple(SCORING_WEIGHTS)


@runtime_checkable
class DimensionEvaluator(Protocol):
    """Evaluator contract for a single scoring dimension."""

    dimension: str

    def evaluate(
        self,
        candidate: CandidateMatchProfile,
        job: JobMatchRequirements,
        context: dict[str, Any],
    ) -> dict[str, Any]:
        """Return ``{"dimension", "score", "details"}`` for the pair."""


def default_evaluators() -> list[DimensionEvaluator]:
    return [
        SkillEvaluator(),
        ExperienceEvaluator(),
        TitleEvaluator(),
        EducationEvaluator(),
        SoftSkillsEvaluator(),
        TechnologyEvaluator(),
        LocationEvaluator(),
        BonusEvaluator(),
    ]


class MatchScorer:
    """Runs every dimension evaluator and combines them into a MatchResult."""

    def __init__(
        self,
        evaluators: Iterable[DimensionEvaluator] | None = None,
        *,
        now_provider: Callable[[], pendulum.DateTime] | None = None,
    ) -> None:
        self._evaluators = list(evaluators) if evaluators is not None else default_evaluators()
        self._now_provider = now_provider or pendulum.now
        missing = set(DIMENSIONS) - {evaluator.dimension for evaluator in self._evaluators}
        if missing:
            raise ValueError(f"Missing evaluators for dimensions: {sorted(missing)}")

    def score(
        self,
        candidate: CandidateMatchProfile,
        job: JobMatchRequirements,
        *,
        as_of: pendulum.DateTime | None = None,
    ) -> MatchResult:
        context = {
            "analysis": analyze_job_text(job.description, job.requirements, job.responsibilities),
            "as_of": as_of or self._now_provider(),
        }

        scores: dict[str, float] = {}
        details: dict[str, Any] = {}
        for evaluator in self._evaluators:
            payload = evaluator.evaluate(candidate, job, context)
            dimension = payload.get("dimension")
            if dimension not in SCORING_WEIGHTS:
                raise ValueError(f"Evaluator returned unknown dimension {dimension!r}")
            scores[dimension] = float(payload["score"])
            details.update(payload.get("details") or {})

        result = MatchResult(
            job_id=job.job_id,
            job_title=job.title,
            job_is_remote=job.is_remote,
            candidate_id=candidate.candidate_id or None,
            match_score=self._weighted_total(scores),
            breakdown=MatchBreakdown(**{f"{name}_score": scores[name] for name in DIMENSIONS}),
            details=MatchDetails(**details),
        )
        suggestions = generate_suggestions(result, candidate_projects=candidate.projects)
        return result.model_copy(update={"suggestions": suggestions})

    @staticmethod
    def _weighted_total(scores: Mapping[str, float]) -> float:
        total = sum(scores.get(name, 0.0) * weight for name, weight in SCORING_WEIGHTS.items())
        return min(max(round_half_up(total, 2), 0.0), 100.0)


def calculate_match_score(
    candidate: CandidateMatchProfile,
    job: JobMatchRequirements,
    *,
    as_of: pendulum.DateTime | None = None,
) -> MatchResult:
    """Score a single candidate against a single job with the default evaluators."""
    return MatchScorer().score(candidate, job, as_of=as_of)
