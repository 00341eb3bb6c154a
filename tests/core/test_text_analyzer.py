from __future__ import annotations

from talentmatch.core.text_analyzer import (
    analyze_job_text,
    assess_complexity,
    extract_keywords,
)


def test_analyze_counts_soft_skill_and_environment_hits():
    analysis = analyze_job_text(
        "We value communication and teamwork in a fast-paced startup.",
        "Strong communication skills and leadership.",
        "Mentoring juniors. Remote friendly, distributed team.",
    )

    assert analysis.soft_skills["communication"] == 3
    assert analysis.soft_skills["leadership"] == 2
    assert analysis.soft_skills["creativity"] == 0
    assert analysis.environment["startup"] == 2
    assert analysis.environment["remote"] == 2
    assert analysis.signalled_soft_skills() == {"communication": 3, "leadership": 2}


def test_analyze_extracts_unique_technologies_per_category():
    analysis = analyze_job_text(
        "React and TypeScript frontend, Python backend.",
        "PostgreSQL, Redis, Docker. React experience required.",
        "",
    )

    assert analysis.technologies["frontend"] == ["react", "typescript"]
    assert analysis.technologies["backend"] == ["python"]
    assert analysis.technologies["database"] == ["postgresql", "redis"]
    assert analysis.technologies["cloud"] == ["docker"]
    assert analysis.technologies["tools"] == []
    assert analysis.technology_count() == 6


def test_analyze_handles_empty_text():
    analysis = analyze_job_text("", None, None)

    assert analysis.technology_count() == 0
    assert analysis.signalled_soft_skills() == {}
    assert analysis.keywords == []
    assert analysis.complexity == 3


def test_extract_keywords_orders_by_frequency_then_first_seen():
    keywords = extract_keywords("kafka spark kafka python spark kafka data", limit=3)

    assert keywords == ["kafka", "spark", "python"]


def test_extract_keywords_skips_stopwords_and_short_tokens():
    assert extract_keywords("this that with java api") == ["java"]


def test_complexity_is_clamped_to_five():
    text = " ".join(["scalability performance architecture"] * 5 + ["lead senior expert"] * 5)

    assert assess_complexity(text) == 5
    assert assess_complexity("") == 3
