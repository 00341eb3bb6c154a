from __future__ import annotations

from talentmatch.core.normalizer import (
    compare_skills,
    normalize_skill,
    normalize_skills,
    skills_match,
)


def test_synonyms_map_to_canonical_name():
    assert normalize_skill("js") == normalize_skill("JavaScript") == "JavaScript"
    assert normalize_skill("  Postgres ") == "PostgreSQL"
    assert normalize_skill("ReactJS") == "React"


def test_unknown_skill_is_title_cased_per_token():
    assert normalize_skill("machine learning") == "Machine Learning"
    assert normalize_skill("rUST") == "Rust"


def test_empty_input_normalizes_to_empty_string():
    assert normalize_skill("") == ""
    assert normalize_skill(None) == ""
    assert normalize_skill("   ") == ""


def test_normalize_skills_dedupes_and_drops_empty():
    assert normalize_skills(["js", "JavaScript", "", "ts", None, "typescript"]) == [
        "JavaScript",
        "TypeScript",
    ]


def test_skills_match_uses_exact_equality_after_normalization():
    assert skills_match("nodejs", "Node.js")
    assert not skills_match("React", "React Native")


def test_compare_skills_returns_disjoint_sets():
    comparison = compare_skills(
        ["js", "Python", "Docker", "docker"],
        ["JavaScript", "Go", "python"],
    )

    assert comparison.matched == ["JavaScript", "Python"]
    assert comparison.missing == ["Go"]
    assert comparison.extra == ["Docker"]
    assert not set(comparison.matched) & set(comparison.missing)
    assert not set(comparison.matched) & set(comparison.extra)
