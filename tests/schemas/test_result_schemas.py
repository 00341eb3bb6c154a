from __future__ import annotations

import pytest
from pydantic import ValidationError

from talentmatch.schemas import (
    ApplicationRecord,
    CandidateActivity,
    InterviewEvaluationOptions,
    InterviewFeedback,
    InterviewTurn,
    MatchBreakdown,
    MatchDetails,
    MatchResult,
    Recommendation,
    Seniority,
)


def build_breakdown(**overrides) -> MatchBreakdown:
    payload = {
        "skill_score": 80.0,
        "experience_score": 100.0,
        "title_score": 50.0,
        "education_score": 60.0,
        "soft_skills_score": 100.0,
        "technology_score": 100.0,
        "location_score": 100.0,
        "bonus_score": 0.0,
    }
    payload.update(overrides)
    return MatchBreakdown(**payload)


def test_breakdown_scores_are_bounded():
    with pytest.raises(ValidationError):
        build_breakdown(skill_score=120.0)


def test_match_result_caps_suggestions():
    with pytest.raises(ValidationError):
        MatchResult(
            match_score=50.0,
            breakdown=build_breakdown(),
            details=MatchDetails(),
            suggestions=[f"tip {index}" for index in range(6)],
        )


def test_candidate_activity_views():
    activity = CandidateActivity(
        applications=[
            ApplicationRecord(job_id="J-1", job_title="Backend Engineer", job_skills=["Go"]),
            ApplicationRecord(job_id="J-2", status="rejected"),
            ApplicationRecord(job_id="J-3", status="WITHDRAWN", job_title="QA"),
        ]
    )

    assert activity.applied_job_ids == {"J-1", "J-2", "J-3"}
    assert activity.rejected_job_ids == {"J-2", "J-3"}
    assert activity.applied_job_titles == ["Backend Engineer", "QA"]
    assert activity.applied_job_skills == [["Go"]]


def test_interview_inputs_accept_camel_case():
    turn = InterviewTurn.model_validate(
        {"orderIndex": 3, "questionText": "Why us?", "questionCategory": "culture"}
    )
    options = InterviewEvaluationOptions.model_validate(
        {"seniority": "SENIOR", "niceToHaveKeywords": ["k8s"], "weights": {"keywordMatch": 0.4}}
    )

    assert turn.order_index == 3
    assert turn.answer_text is None
    assert options.seniority is Seniority.SENIOR
    assert options.nice_to_have_keywords == ["k8s"]
    assert options.weights.keyword_match == pytest.approx(0.4)


def test_interview_turn_order_starts_at_one():
    with pytest.raises(ValidationError):
        InterviewTurn(order_index=0, question_text="Q")


def test_interview_feedback_bounds():
    feedback = InterviewFeedback(overall_score=72, recommendation="CONSIDER", summary="ok")

    assert feedback.recommendation is Recommendation.CONSIDER
    with pytest.raises(ValidationError):
        InterviewFeedback(overall_score=101, recommendation="HIRE", summary="too high")
