from __future__ import annotations

import pendulum
import pytest

from talentmatch.core import SCORING_WEIGHTS, DimensionEvaluator, MatchScorer, calculate_match_score
from talentmatch.core.evaluators import SkillEvaluator
from talentmatch.core.scoring import DIMENSIONS, default_evaluators
from talentmatch.schemas import (
    CandidateMatchProfile,
    EducationRecord,
    JobMatchRequirements,
    TechnologyStack,
    WorkExperience,
)

AS_OF = pendulum.datetime(2025, 1, 1)


def build_candidate(**overrides) -> CandidateMatchProfile:
    payload = {
        "candidate_id": "C-1",
        "skills": ["Python", "Django"],
        "experiences": [
            WorkExperience(
                company="Acme",
                position="Backend Engineer",
                start_date="2015-01",
                end_date="2024-12",
            )
        ],
        "education": [EducationRecord(degree="Bachelor", field_of_study="Computer Science")],
        "address": "Hanoi",
        "technologies": TechnologyStack(backend=["Python", "Django"]),
    }
    payload.update(overrides)
    return CandidateMatchProfile(**payload)


def build_job(**overrides) -> JobMatchRequirements:
    payload = {
        "job_id": "J-1",
        "title": "Backend Engineer",
        "description": "Build APIs with Python and Django.",
        "required_skills": ["python", "django"],
        "experience_level": "Senior",
        "location": "Hanoi",
    }
    payload.update(overrides)
    return JobMatchRequirements(**payload)


def test_weights_sum_to_one_and_bonus_is_zero():
    assert sum(SCORING_WEIGHTS.values()) == pytest.approx(1.0)
    assert SCORING_WEIGHTS["bonus"] == 0.0
    with pytest.raises(TypeError):
        SCORING_WEIGHTS["skill"] = 0.5  # type: ignore[index]


def test_strong_candidate_scores_high():
    result = calculate_match_score(build_candidate(), build_job(), as_of=AS_OF)

    assert result.breakdown.skill_score == pytest.approx(100.0)
    assert result.breakdown.experience_score == pytest.approx(100.0)
    assert result.breakdown.title_score == pytest.approx(100.0)
    assert result.breakdown.education_score == pytest.approx(60.0)
    assert result.breakdown.soft_skills_score == pytest.approx(100.0)
    assert result.breakdown.technology_score == pytest.approx(100.0)
    assert result.breakdown.location_score == pytest.approx(100.0)
    assert result.breakdown.bonus_score == pytest.approx(0.0)
    assert result.match_score == pytest.approx(95.2)
    assert result.details.matched_skills == ["Python", "Django"]
    assert result.details.missing_skills == []
    assert result.suggestions == [
        "Add projects to your portfolio showcasing relevant technologies. This can "
        "provide a bonus score and demonstrate practical experience."
    ]


def test_bonus_does_not_change_total():
    plain = calculate_match_score(build_candidate(), build_job(), as_of=AS_OF)
    extra = calculate_match_score(
        build_candidate(skills=["Python", "Django", "Docker", "Kubernetes", "AWS"]),
        build_job(),
        as_of=AS_OF,
    )

    assert extra.breakdown.bonus_score > plain.breakdown.bonus_score
    assert extra.match_score == pytest.approx(plain.match_score)


def test_weak_candidate_gets_bounded_score_and_suggestions():
    candidate = CandidateMatchProfile(candidate_id="C-2", address="Berlin")
    job = build_job(
        required_skills=["Go", "Rust", "Kafka", "Kubernetes"],
        description="Lead a distributed team with strong communication.",
    )

    result = calculate_match_score(candidate, job, as_of=AS_OF)

    assert 0.0 <= result.match_score < 50.0
    assert result.details.missing_skills == ["Go", "Rust", "Kafka", "Kubernetes"]
    assert result.details.experience_gap is not None
    assert 1 <= len(result.suggestions) <= 5
    assert result.suggestions[0].startswith("Focus on adding these top required skills first")


def test_scoring_is_deterministic():
    candidate, job = build_candidate(), build_job()

    first = calculate_match_score(candidate, job, as_of=AS_OF)
    second = calculate_match_score(candidate, job, as_of=AS_OF)

    assert first.model_dump() == second.model_dump()


def test_every_sub_score_within_bounds():
    result = calculate_match_score(
        build_candidate(headline="Data Scientist", experiences=[]),
        build_job(title="Senior Data Engineer", is_remote=True),
        as_of=AS_OF,
    )

    for value in result.breakdown.model_dump().values():
        assert 0.0 <= value <= 100.0


def test_scorer_requires_every_dimension():
    with pytest.raises(ValueError, match="Missing evaluators"):
        MatchScorer([SkillEvaluator()])


def test_default_evaluators_cover_every_dimension():
    evaluators = default_evaluators()

    assert all(isinstance(evaluator, DimensionEvaluator) for evaluator in evaluators)
    assert [evaluator.dimension for evaluator in evaluators] == list(DIMENSIONS)


def test_scorer_uses_now_provider_when_as_of_missing():
    scorer = MatchScorer(now_provider=lambda: AS_OF)

    result = scorer.score(
        build_candidate(
            experiences=[
                WorkExperience(
                    company="Acme",
                    position="Backend Engineer",
                    start_date="2023-01",
                    is_current=True,
                )
            ]
        ),
        build_job(),
    )

    assert result.details.years_of_experience == pytest.approx(2.0)
