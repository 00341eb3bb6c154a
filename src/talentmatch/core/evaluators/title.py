"""Job title similarity."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from ...schemas import CandidateMatchProfile, JobMatchRequirements
from ..numeric import round_half_up

_NON_WORD = re.compile(r"[^\w\s]")


@dataclass(frozen=True, slots=True)
class TitleScoreResult:
    score: float
    title_similarity: str


def title_tokens(text: str) -> set[str]:
    return {word for word in _NON_WORD.sub(" ", text.lower()).split() if len(word) > 2}


def calculate_title_score(candidate_title: str | None, job_title: str) -> TitleScoreResult:
    """Jaccard overlap of title words longer than two characters, as a percentage."""
    if not candidate_title or not candidate_title.strip():
        return TitleScoreResult(0.0, "No job title information in candidate profile")

    candidate_words = title_tokens(candidate_title)
    job_words = title_tokens(job_title or "")
    union = candidate_words | job_words
    similarity = len(candidate_words & job_words) / len(union) * 100 if union else 0.0
    score = min(round_half_up(similarity, 2), 100.0)

    if score >= 70:
        description = "High similarity - candidate title closely matches job requirements"
    elif score >= 40:
        description = "Moderate similarity - some relevant keywords match"
    else:
        description = "Low similarity - limited keyword overlap"
    return TitleScoreResult(score, description)


class TitleEvaluator:
    dimension = "title"

    def evaluate(
        self,
        candidate: CandidateMatchProfile,
        job: JobMatchRequirements,
        context: dict[str, Any],
    ) -> dict[str, Any]:
        result = calculate_title_score(candidate.most_recent_title(), job.title)
        return {
            "dimension": self.dimension,
            "score": result.score,
            "details": {"title_similarity": result.title_similarity},
        }
