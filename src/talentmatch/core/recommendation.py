"""Personalized job feed ranking on top of the match scorer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

import pendulum
import structlog

from ..dates import SECONDS_PER_DAY, parse_datetime
from ..schemas import (
    CandidateActivity,
    CandidateMatchProfile,
    CandidatePreferences,
    JobMatchRequirements,
    RecommendedMatch,
)
from .numeric import round_half_up
from .scoring import MatchScorer

APPLIED_PENALTY = -100.0
REJECTED_PENALTY = -50.0


@dataclass
class RecommendationConfig:
    """Boost caps and relevance floor for the recommendation feed."""

    behavior_cap: float = 10.0
    preference_cap: float = 5.0
    min_final_score: float = 30.0
    skill_overlap_points: float = 5.0
    title_overlap_points: float = 3.0
    viewed_points: float = 2.0
    clicked_points: float = 3.0


def _title_words(title: str) -> set[str]:
    return {word for word in title.lower().split() if len(word) > 2}


def calculate_behavior_boost(
    job_id: str,
    job_title: str,
    job_skills: Sequence[str],
    activity: CandidateActivity,
    config: RecommendationConfig | None = None,
) -> float:
    """Boost from interaction history; applied/rejected jobs get a strong penalty."""
    config = config or RecommendationConfig()
    if job_id in activity.applied_job_ids:
        return APPLIED_PENALTY
    if job_id in activity.rejected_job_ids:
        return REJECTED_PENALTY

    boost = 0.0

    interacted = {skill.lower() for skills in activity.applied_job_skills for skill in skills}
    if interacted:
        job_skills_lower = [skill.lower() for skill in job_skills]
        common = [skill for skill in job_skills_lower if skill in interacted]
        boost += len(common) / max(len(job_skills_lower), 1) * config.skill_overlap_points

    applied_titles = activity.applied_job_titles
    if applied_titles:
        title_words = _title_words(job_title)
        best = 0.0
        for applied_title in applied_titles:
            applied_words = _title_words(applied_title)
            common_words = title_words & applied_words
            similarity = len(common_words) / max(len(title_words), len(applied_words), 1)
            best = max(best, similarity)
        boost += best * config.title_overlap_points

    if job_id in activity.viewed_job_ids:
        boost += config.viewed_points
    if job_id in activity.clicked_job_ids:
        boost += config.clicked_points

    return round_half_up(min(boost, config.behavior_cap), 2)


def calculate_preference_boost(
    job_type: str | None,
    job_is_remote: bool,
    preferences: CandidatePreferences,
    *,
    prefers_remote: bool | None = None,
    config: RecommendationConfig | None = None,
) -> float:
    config = config or RecommendationConfig()
    boost = 0.0
    if job_type and job_type in preferences.preferred_job_types:
        boost += 3
    wants_remote = preferences.prefers_remote if prefers_remote is None else prefers_remote
    if wants_remote is not None:
        if wants_remote and job_is_remote:
            boost += 2
        elif not wants_remote and not job_is_remote:
            boost += 1
    return min(boost, config.preference_cap)


def calculate_freshness_boost(
    published_at: pendulum.DateTime | None,
    *,
    now: pendulum.DateTime | None = None,
) -> float:
    if published_at is None:
        return 0.0
    now = now or pendulum.now()
    days = (now - parse_datetime(published_at)).total_seconds() / SECONDS_PER_DAY
    if days < 1:
        return 5.0
    if days < 7:
        return 3.0
    if days < 30:
        return 1.0
    return 0.0


class RecommendationRanker:
    """Score jobs for a candidate, apply boosts, filter and sort."""

    def __init__(
        self,
        *,
        scorer: MatchScorer | None = None,
        config: RecommendationConfig | None = None,
        now_provider: Callable[[], pendulum.DateTime] | None = None,
    ) -> None:
        self._scorer = scorer or MatchScorer()
        self._config = config or RecommendationConfig()
        self._now_provider = now_provider or pendulum.now
        self._logger = structlog.get_logger(__name__)

    def rank(
        self,
        candidate: CandidateMatchProfile,
        jobs: Iterable[JobMatchRequirements],
        activity: CandidateActivity | None = None,
        *,
        limit: int = 20,
        as_of: pendulum.DateTime | None = None,
    ) -> list[RecommendedMatch]:
        activity = activity or CandidateActivity()
        now = as_of or self._now_provider()
        applied = activity.applied_job_ids
        prefers_remote = candidate.prefers_remote()

        ranked: list[RecommendedMatch] = []
        for job in jobs:
            if job.job_id in applied:
                self._logger.debug("recommendation.skip", job_id=job.job_id, reason="applied")
                continue

            behavior = calculate_behavior_boost(
                job.job_id, job.title, job.all_skills, activity, self._config
            )
            if behavior < REJECTED_PENALTY:
                self._logger.debug("recommendation.skip", job_id=job.job_id, reason="penalized")
                continue

            match = self._scorer.score(candidate, job, as_of=now)
            preference = calculate_preference_boost(
                job.job_type,
                job.is_remote,
                candidate.preferences,
                prefers_remote=prefers_remote,
                config=self._config,
            )
            freshness = calculate_freshness_boost(job.published_at, now=now)
            total = match.match_score + behavior + preference + freshness
            final_score = min(max(round_half_up(total, 2), 0.0), 100.0)

            if final_score < self._config.min_final_score:
                self._logger.debug(
                    "recommendation.skip",
                    job_id=job.job_id,
                    reason="low_relevance",
                    final_score=final_score,
                )
                continue

            ranked.append(
                RecommendedMatch(
                    **match.model_dump(),
                    final_score=final_score,
                    behavior_boost=behavior,
                    preference_boost=preference,
                    freshness_boost=freshness,
                )
            )

        ranked.sort(key=lambda item: item.final_score, reverse=True)
        return ranked[:limit]
