from __future__ import annotations

from pathlib import Path

import pendulum
import pytest

from talentmatch.container import create_container
from talentmatch.schemas import JobMatchRequirements, Recommendation
from talentmatch.service import CandidateNotFoundError, JobNotFoundError, MatchingService

AS_OF = pendulum.datetime(2025, 1, 10)


def build_service(dataset_path: Path, **settings) -> MatchingService:
    return create_container(settings=settings or None, dataset=str(dataset_path)).service()


def test_find_matching_jobs_for_candidate(dataset_path: Path) -> None:
    service = build_service(dataset_path)

    results = service.find_matching_jobs_for_candidate("C-1", as_of=AS_OF)

    assert [result.job_id for result in results] == ["J-1", "J-2"]
    assert results[0].match_score == pytest.approx(95.2)
    assert results[1].match_score == pytest.approx(26.8)
    assert results[0].candidate_id == "C-1"
    assert len(service.find_matching_jobs_for_candidate("C-1", 1, as_of=AS_OF)) == 1


def test_find_matching_candidates_for_job(dataset_path: Path) -> None:
    service = build_service(dataset_path)

    results = service.find_matching_candidates_for_job("J-1", as_of=AS_OF)

    assert [result.candidate_id for result in results] == ["C-1", "C-2"]
    assert results[0].match_score > results[1].match_score


def test_calculate_candidate_job_match(dataset_path: Path) -> None:
    service = build_service(dataset_path)

    result = service.calculate_candidate_job_match("C-1", "J-1", as_of=AS_OF)

    assert result.job_title == "Backend Engineer"
    assert result.match_score == pytest.approx(95.2)


def test_recommendations_apply_boosts_and_skip_applied(dataset_path: Path) -> None:
    service = build_service(dataset_path)

    results = service.recommend_jobs_for_candidate("C-1", as_of=AS_OF)

    assert [result.job_id for result in results] == ["J-1"]
    assert results[0].freshness_boost == pytest.approx(3.0)
    assert results[0].final_score == pytest.approx(99.2)
    assert all(item.job_id != "J-1" for item in service.recommend_jobs_for_candidate("C-2", as_of=AS_OF))


def test_unknown_ids_and_bad_limits(dataset_path: Path) -> None:
    service = build_service(dataset_path, service={"max_limit": 20})

    with pytest.raises(CandidateNotFoundError):
        service.find_matching_jobs_for_candidate("missing")
    with pytest.raises(JobNotFoundError):
        service.calculate_candidate_job_match("C-1", "missing")
    with pytest.raises(ValueError, match="between 1 and 20"):
        service.find_matching_jobs_for_candidate("C-1", 21)
    with pytest.raises(ValueError):
        service.recommend_jobs_for_candidate("C-1", 0)


def test_evaluate_interview_with_job_keywords(
    dataset_path: Path, incident_answer: str
) -> None:
    service = build_service(dataset_path)
    job = JobMatchRequirements(
        job_id="J-9",
        title="Junior SRE",
        required_skills=["latency"],
        experience_level="Junior",
    )
    turns = [
        {
            "order_index": 1,
            "question_text": "Tell me about a production incident.",
            "answer_text": incident_answer,
        }
    ]

    feedback = service.evaluate_interview("", turns, job=job)

    names = [category.name for category in feedback.category_scores]
    assert "Keyword Match" in names
    assert feedback.recommendation in set(Recommendation)

    plain = service.evaluate_interview("", turns, client_options={"seniority": "JUNIOR"})
    assert plain.overall_score == 70
    assert "Keyword Match" not in [category.name for category in plain.category_scores]
