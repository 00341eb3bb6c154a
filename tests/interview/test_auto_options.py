from __future__ import annotations

import pytest

from talentmatch.interview import (
    build_auto_evaluation_options,
    detect_language,
    merge_evaluation_options,
    seniority_from_experience_level,
)
from talentmatch.interview.auto_options import (
    build_auto_synonyms,
    extract_keywords_from_free_text,
)
from talentmatch.schemas import (
    InterviewEvaluationOptions,
    JobMatchRequirements,
    Language,
    Seniority,
)


def build_job() -> JobMatchRequirements:
    return JobMatchRequirements(
        job_id="J-1",
        title="Senior Backend Engineer",
        description="<p>Build APIs</p>",
        required_skills=["Python", "Django"],
        optional_skills=["Redis"],
        categories=["Backend"],
        experience_level="Senior",
    )


def test_detect_language():
    assert detect_language("Tôi đã làm việc với Python") is Language.VI
    assert detect_language("I worked with Python") is Language.EN
    assert detect_language(None) is Language.EN


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        ("Senior", Seniority.SENIOR),
        ("Tech Lead", Seniority.SENIOR),
        ("Junior", Seniority.JUNIOR),
        ("Internship", Seniority.JUNIOR),
        ("Mid-level", Seniority.MID),
        (None, Seniority.MID),
    ],
)
def test_seniority_from_experience_level(level, expected):
    assert seniority_from_experience_level(level) is expected


def test_free_text_keywords_keep_tech_tokens():
    keywords = extract_keywords_from_free_text("<p>Experience with C#, .NET and Node.js</p>")

    assert keywords == ["experience", "c#", ".net", "node.js"]


def test_auto_synonyms():
    assert build_auto_synonyms(["Node.js", "ci/cd", "postgresql"]) == {
        "node.js": ["nodejs"],
        "postgresql": ["postgres"],
    }


def test_auto_options_without_job():
    options = build_auto_evaluation_options("Xin chào, tôi là ứng viên")

    assert options.language is Language.VI
    assert options.seniority is Seniority.MID
    assert options.must_have_keywords is None


def test_auto_options_from_job():
    options = build_auto_evaluation_options("Q: hello\nA: hi", build_job())

    assert options.language is Language.EN
    assert options.seniority is Seniority.SENIOR
    assert options.role == "Senior Backend Engineer"
    assert options.must_have_keywords == [
        "python",
        "django",
        "senior",
        "backend",
        "engineer",
        "build",
        "apis",
    ]
    assert options.nice_to_have_keywords == ["redis", "backend"]
    assert options.synonyms is None


def test_merge_prefers_client_scalars_and_unions_lists():
    auto = build_auto_evaluation_options("Q: hello", build_job())

    merged = merge_evaluation_options(
        auto,
        {
            "seniority": "MID",
            "mustHaveKeywords": ["kafka", "python"],
            "synonyms": {"python": ["py"]},
            "weights": {"relevance": 0.3},
        },
    )

    assert merged.seniority is Seniority.MID
    assert merged.role == "Senior Backend Engineer"
    assert merged.must_have_keywords[-1] == "kafka"
    assert merged.must_have_keywords.count("python") == 1
    assert merged.synonyms == {"python": ["py"]}
    assert merged.weights.relevance == pytest.approx(0.3)


def test_merge_ignores_invalid_client_options():
    auto = InterviewEvaluationOptions(language=Language.EN)

    assert merge_evaluation_options(auto, None) is auto
    assert merge_evaluation_options(auto, {"seniority": "GURU"}) is auto
