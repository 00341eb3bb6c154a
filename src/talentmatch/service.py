"""Matching service orchestrating providers, scorer, ranker and interview evaluator."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping

import pendulum
import structlog

from . import __version__
from .core import MatchScorer, RecommendationRanker
from .interview import (
    RuleBasedInterviewEvaluator,
    build_auto_evaluation_options,
    merge_evaluation_options,
)
from .providers import MatchingDataProvider
from .schemas import (
    CandidateMatchProfile,
    InterviewEvaluationOptions,
    InterviewFeedback,
    InterviewTurn,
    JobMatchRequirements,
    MatchResult,
    RecommendedMatch,
)

DEFAULT_LIMIT = 10
MAX_LIMIT = 50
JOB_FETCH_LIMIT = 100
CANDIDATE_FETCH_LIMIT = 100
RECOMMENDATION_FETCH_LIMIT = 200


class CandidateNotFoundError(LookupError):
    """Raised when a candidate id is unknown to the provider."""

    def __init__(self, candidate_id: str):
        super().__init__(f"Candidate not found: {candidate_id!r}")
        self.candidate_id = candidate_id


class JobNotFoundError(LookupError):
    """Raised when a job id is unknown to the provider."""

    def __init__(self, job_id: str):
        super().__init__(f"Job not found: {job_id!r}")
        self.job_id = job_id


class OutputWriter:
    """Persist command results as pretty JSON."""

    def write(self, path: Path, payload: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_json(payload), encoding="utf-8")


def render_json(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)


def with_metadata(command: str, results: Any, **extra: Any) -> dict[str, Any]:
    return {
        "metadata": {
            "command": command,
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
            **extra,
        },
        "results": results,
    }


class MatchingService:
    """Entry points of the matching engine over a data provider."""

    def __init__(
        self,
        *,
        provider: MatchingDataProvider,
        scorer: MatchScorer,
        ranker: RecommendationRanker,
        interview_evaluator: RuleBasedInterviewEvaluator,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
        job_fetch_limit: int = JOB_FETCH_LIMIT,
        candidate_fetch_limit: int = CANDIDATE_FETCH_LIMIT,
        recommendation_fetch_limit: int = RECOMMENDATION_FETCH_LIMIT,
        now_provider: Callable[[], pendulum.DateTime] | None = None,
    ) -> None:
        self._provider = provider
        self._scorer = scorer
        self._ranker = ranker
        self._interview_evaluator = interview_evaluator
        self._default_limit = default_limit
        self._max_limit = max_limit
        self._job_fetch_limit = job_fetch_limit
        self._candidate_fetch_limit = candidate_fetch_limit
        self._recommendation_fetch_limit = recommendation_fetch_limit
        self._now_provider = now_provider or pendulum.now
        self._logger = structlog.get_logger(__name__)

    def find_matching_jobs_for_candidate(
        self,
        candidate_id: str,
        limit: int | None = None,
        *,
        as_of: pendulum.DateTime | None = None,
    ) -> list[MatchResult]:
        limit = self._resolve_limit(limit)
        candidate = self._require_candidate(candidate_id)
        now = as_of or self._now_provider()

        jobs = self._provider.list_published_jobs(self._job_fetch_limit)
        matches = [self._scorer.score(candidate, job, as_of=now) for job in jobs]
        matches.sort(key=lambda match: match.match_score, reverse=True)
        results = matches[:limit]

        self._logger.info(
            "matching.jobs_for_candidate",
            candidate_id=candidate_id,
            scored=len(matches),
            returned=len(results),
            top_score=results[0].match_score if results else None,
        )
        return results

    def find_matching_candidates_for_job(
        self,
        job_id: str,
        limit: int | None = None,
        *,
        as_of: pendulum.DateTime | None = None,
    ) -> list[MatchResult]:
        limit = self._resolve_limit(limit)
        job = self._require_job(job_id)
        now = as_of or self._now_provider()

        candidates = self._provider.list_public_candidates(self._candidate_fetch_limit)
        matches = [self._scorer.score(candidate, job, as_of=now) for candidate in candidates]
        matches.sort(key=lambda match: match.match_score, reverse=True)
        results = matches[:limit]

        self._logger.info(
            "matching.candidates_for_job",
            job_id=job_id,
            scored=len(matches),
            returned=len(results),
            top_score=results[0].match_score if results else None,
        )
        return results

    def calculate_candidate_job_match(
        self,
        candidate_id: str,
        job_id: str,
        *,
        as_of: pendulum.DateTime | None = None,
    ) -> MatchResult:
        candidate = self._require_candidate(candidate_id)
        job = self._require_job(job_id)
        result = self._scorer.score(candidate, job, as_of=as_of or self._now_provider())
        self._logger.info(
            "matching.pair",
            candidate_id=candidate_id,
            job_id=job_id,
            match_score=result.match_score,
        )
        return result

    def recommend_jobs_for_candidate(
        self,
        candidate_id: str,
        limit: int | None = None,
        *,
        as_of: pendulum.DateTime | None = None,
    ) -> list[RecommendedMatch]:
        limit = self._resolve_limit(limit)
        candidate = self._require_candidate(candidate_id)
        now = as_of or self._now_provider()

        jobs = self._provider.list_active_jobs(self._recommendation_fetch_limit, now)
        activity = self._provider.get_candidate_activity(candidate_id)
        results = self._ranker.rank(candidate, jobs, activity, limit=limit, as_of=now)

        self._logger.info(
            "recommendation.result",
            candidate_id=candidate_id,
            considered=len(jobs),
            returned=len(results),
            top_final_score=results[0].final_score if results else None,
        )
        return results

    def evaluate_interview(
        self,
        transcript: str,
        turns: Iterable[InterviewTurn | Mapping[str, Any]],
        *,
        job: JobMatchRequirements | None = None,
        client_options: InterviewEvaluationOptions | Mapping[str, Any] | None = None,
    ) -> InterviewFeedback:
        auto = build_auto_evaluation_options(transcript, job)
        options = merge_evaluation_options(auto, client_options)
        feedback = self._interview_evaluator.evaluate(turns, options, transcript=transcript)

        self._logger.info(
            "interview.evaluated",
            job_id=job.job_id if job else None,
            language=options.language.value if options.language else None,
            seniority=options.seniority.value if options.seniority else None,
            questions=len(feedback.per_question),
            overall_score=feedback.overall_score,
            recommendation=feedback.recommendation.value,
        )
        return feedback

    def _resolve_limit(self, limit: int | None) -> int:
        if limit is None:
            return self._default_limit
        if not 1 <= limit <= self._max_limit:
            raise ValueError(f"limit must be between 1 and {self._max_limit}, got {limit}")
        return limit

    def _require_candidate(self, candidate_id: str) -> CandidateMatchProfile:
        candidate = self._provider.get_candidate(candidate_id)
        if candidate is None:
            raise CandidateNotFoundError(candidate_id)
        return candidate

    def _require_job(self, job_id: str) -> JobMatchRequirements:
        job = self._provider.get_job(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        return job
