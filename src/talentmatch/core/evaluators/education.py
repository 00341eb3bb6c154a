"""Degree level, preferred school and field-of-study alignment."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Sequence

from ...schemas import (
    CandidateMatchProfile,
    EducationRecord,
    EducationRequirements,
    JobMatchRequirements,
)
from ..numeric import round_half_up

DEGREE_LEVELS: dict[str, int] = {
    "phd": 6,
    "doctorate": 6,
    "doctor": 6,
    "masters": 5,
    "master": 5,
    "msc": 5,
    "ms": 5,
    "ma": 5,
    "bachelors": 4,
    "bachelor": 4,
    "bsc": 4,
    "bs": 4,
    "ba": 4,
    "associate": 3,
    "diploma": 3,
    "certificate": 2,
    "high school": 1,
    "secondary": 1,
}

DEFAULT_REQUIRED_DEGREE_LEVEL = 4
DEFAULT_PREFERRED_DEGREE_LEVEL = 5

DEGREE_LEVEL_NAMES: tuple[str, ...] = (
    "No education",
    "High School",
    "Certificate",
    "Associate/Diploma",
    "Bachelor's",
    "Master's",
    "PhD/Doctorate",
)

BASE_POINTS = 60.0
PENALTY_PER_LEVEL = 20.0
MAX_BONUS = 20.0

_TOKEN = re.compile(r"[a-z0-9]+")
_NON_ALNUM = re.compile(r"[^a-z0-9]")


@dataclass(frozen=True, slots=True)
class EducationScoreResult:
    score: float
    education_match: str
    degree_level: str


def degree_level(degree: str | None) -> int:
    """Ordinal level of a degree label; 0 when unrecognized.

    Exact labels are looked up first, then individual words, so that
    ``"Bachelor of Science"`` maps to the bachelor level.
    """
    text = (degree or "").strip().lower()
    if not text:
        return 0
    if text in DEGREE_LEVELS:
        return DEGREE_LEVELS[text]
    if "high school" in text:
        return DEGREE_LEVELS["high school"]
    return max((DEGREE_LEVELS.get(token, 0) for token in _TOKEN.findall(text)), default=0)


def _squash(text: str) -> str:
    return _NON_ALNUM.sub("", text.lower())


def _field_overlap(candidate_field: str, required_field: str) -> float:
    candidate_norm = candidate_field.lower().strip()
    required_norm = required_field.lower().strip()
    if not candidate_norm or not required_norm:
        return 0.0
    if candidate_norm in required_norm or required_norm in candidate_norm:
        return 1.0
    required_tokens = {token for token in _TOKEN.findall(required_norm) if len(token) > 2}
    if not required_tokens:
        return 0.0
    candidate_tokens = set(_TOKEN.findall(candidate_norm))
    return len(required_tokens & candidate_tokens) / len(required_tokens)


def calculate_education_score(
    education: Sequence[EducationRecord],
    requirements: EducationRequirements,
) -> EducationScoreResult:
    highest_level = 0
    candidate_field = ""
    candidate_school = ""
    for record in education:
        level = degree_level(record.degree)
        if level > highest_level:
            highest_level = level
            candidate_field = record.field_of_study or ""
            candidate_school = record.institution or ""

    if requirements.required_degree:
        required_level = degree_level(requirements.required_degree) or DEFAULT_REQUIRED_DEGREE_LEVEL
        if highest_level >= required_level:
            score = BASE_POINTS
            match = f"Meets required {requirements.required_degree} level"
        else:
            score = max(0.0, BASE_POINTS - (required_level - highest_level) * PENALTY_PER_LEVEL)
            match = f"Below required {requirements.required_degree} level"
    else:
        score = BASE_POINTS
        match = "No specific degree requirement"

    if requirements.preferred_degree:
        preferred_level = (
            degree_level(requirements.preferred_degree) or DEFAULT_PREFERRED_DEGREE_LEVEL
        )
        if highest_level >= preferred_level:
            score += min(MAX_BONUS, (highest_level - preferred_level + 1) * 10)
            match += f" (preferred {requirements.preferred_degree} level met)"

    school = _squash(candidate_school)
    if school:
        for preferred in requirements.preferred_schools:
            preferred_norm = _squash(preferred)
            if preferred_norm and (preferred_norm in school or school in preferred_norm):
                score += MAX_BONUS
                match += f" (preferred school: {preferred})"
                break

    if requirements.required_field and candidate_field:
        overlap = _field_overlap(candidate_field, requirements.required_field)
        if overlap > 0:
            score += MAX_BONUS * overlap
            match += f" ({candidate_field} relevant to {requirements.required_field})"

    return EducationScoreResult(
        score=round_half_up(min(score, 100.0), 2),
        education_match=match,
        degree_level=DEGREE_LEVEL_NAMES[highest_level],
    )


class EducationEvaluator:
    dimension = "education"

    def evaluate(
        self,
        candidate: CandidateMatchProfile,
        job: JobMatchRequirements,
        context: dict[str, Any],
    ) -> dict[str, Any]:
        result = calculate_education_score(candidate.education, job.education)
        return {
            "dimension": self.dimension,
            "score": result.score,
            "details": {
                "education_match": result.education_match,
                "degree_level": result.degree_level,
            },
        }
