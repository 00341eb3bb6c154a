"""Seniority comparison from accumulated work experience."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

import pendulum

from ...dates import SECONDS_PER_YEAR, parse_datetime
from ...schemas import CandidateMatchProfile, JobMatchRequirements, WorkExperience
from ..numeric import round_half_up

EXPERIENCE_LEVELS: dict[str, int] = {
    "intern": 0,
    "internship": 0,
    "junior": 1,
    "entry": 1,
    "mid": 2,
    "middle": 2,
    "senior": 3,
    "lead": 4,
    "principal": 5,
    "architect": 5,
}

DEFAULT_REQUIRED_LEVEL = 2

LEVEL_NAMES: tuple[str, ...] = ("Intern", "Junior", "Mid-level", "Senior", "Lead", "Principal")

# Upper bounds (exclusive, in years) of levels 0..4; anything above is level 5.
LEVEL_YEAR_THRESHOLDS: tuple[float, ...] = (1, 2, 5, 8, 12)

PENALTY_PER_LEVEL = 25.0


@dataclass(frozen=True, slots=True)
class ExperienceScoreResult:
    score: float
    years_of_experience: float
    candidate_level: int
    required_level: int | None = None
    experience_gap: str | None = None


def total_years_of_experience(
    experiences: Iterable[WorkExperience],
    as_of: pendulum.DateTime,
) -> float:
    """Sum of per-record durations; current or open-ended roles run until ``as_of``."""
    total = 0.0
    for experience in experiences:
        start = parse_datetime(experience.start_date)
        if experience.is_current or experience.end_date is None:
            end = as_of
        else:
            end = parse_datetime(experience.end_date)
        total += max(0.0, (end - start).total_seconds() / SECONDS_PER_YEAR)
    return total


def level_for_years(years: float) -> int:
    for level, upper in enumerate(LEVEL_YEAR_THRESHOLDS):
        if years < upper:
            return level
    return len(LEVEL_YEAR_THRESHOLDS)


def required_level_for(label: str) -> int:
    return EXPERIENCE_LEVELS.get(label.strip().lower(), DEFAULT_REQUIRED_LEVEL)


def calculate_experience_score(
    experiences: Iterable[WorkExperience],
    job_experience_level: str | None,
    *,
    as_of: pendulum.DateTime | None = None,
) -> ExperienceScoreResult:
    as_of = as_of or pendulum.now()
    years = total_years_of_experience(experiences, as_of)
    rounded_years = round_half_up(years, 1)
    candidate_level = level_for_years(years)

    if not job_experience_level or not job_experience_level.strip():
        return ExperienceScoreResult(
            score=100.0,
            years_of_experience=rounded_years,
            candidate_level=candidate_level,
        )

    required_level = required_level_for(job_experience_level)
    if candidate_level >= required_level:
        return ExperienceScoreResult(
            score=100.0,
            years_of_experience=rounded_years,
            candidate_level=candidate_level,
            required_level=required_level,
        )

    gap = required_level - candidate_level
    gap_text = (
        f"Job requires {LEVEL_NAMES[required_level]} level, but candidate has "
        f"{LEVEL_NAMES[candidate_level]} experience ({rounded_years:g} years)"
    )
    return ExperienceScoreResult(
        score=max(0.0, 100.0 - PENALTY_PER_LEVEL * gap),
        years_of_experience=rounded_years,
        candidate_level=candidate_level,
        required_level=required_level,
        experience_gap=gap_text,
    )


class ExperienceEvaluator:
    """Map total years of experience to a level and compare with the job's label."""

    dimension = "experience"

    def evaluate(
        self,
        candidate: CandidateMatchProfile,
        job: JobMatchRequirements,
        context: dict[str, Any],
    ) -> dict[str, Any]:
        result = calculate_experience_score(
            candidate.experiences,
            job.experience_level,
            as_of=context.get("as_of"),
        )
        return {
            "dimension": self.dimension,
            "score": result.score,
            "details": {
                "experience_gap": result.experience_gap,
                "years_of_experience": result.years_of_experience,
            },
        }
