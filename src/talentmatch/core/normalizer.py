"""Skill name canonicalization and set comparison."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

SKILL_SYNONYMS: dict[str, str] = {
    "js": "JavaScript",
    "javascript": "JavaScript",
    "ecmascript": "JavaScript",
    "node": "Node.js",
    "nodejs": "Node.js",
    "node.js": "Node.js",
    "python": "Python",
    "py": "Python",
    "java": "Java",
    "java se": "Java",
    "java ee": "Java",
    "j2ee": "Java",
    "react": "React",
    "reactjs": "React",
    "react.js": "React",
    "postgres": "PostgreSQL",
    "postgresql": "PostgreSQL",
    "pg": "PostgreSQL",
    "mysql": "MySQL",
    "mongo": "MongoDB",
    "mongodb": "MongoDB",
    "nosql": "MongoDB",
    "ts": "TypeScript",
    "typescript": "TypeScript",
    "css": "CSS",
    "css3": "CSS",
    "scss": "SASS",
    "sass": "SASS",
    "less": "LESS",
    "html": "HTML",
    "html5": "HTML",
    "git": "Git",
    "github": "Git",
    "gitlab": "Git",
    "docker": "Docker",
    "dockerfile": "Docker",
    "aws": "AWS",
    "amazon web services": "AWS",
    "amazon aws": "AWS",
    "rest": "REST API",
    "restful": "REST API",
    "rest api": "REST API",
    "api": "REST API",
    "graphql": "GraphQL",
    "gql": "GraphQL",
}


@dataclass(frozen=True, slots=True)
class SkillComparison:
    """Disjoint skill sets produced by :func:`compare_skills`."""

    matched: list[str]
    missing: list[str]
    extra: list[str]


def normalize_skill(name: str | None) -> str:
    """Return the canonical form of a skill name.

    Synonym lookup is case-insensitive; unknown names are title-cased per
    whitespace-separated token (``"machine learning"`` -> ``"Machine Learning"``).
    """
    if not name:
        return ""
    stripped = name.strip()
    canonical = SKILL_SYNONYMS.get(stripped.lower())
    if canonical:
        return canonical
    return " ".join(word[:1].upper() + word[1:].lower() for word in stripped.split())


def normalize_skills(names: Iterable[str | None]) -> list[str]:
    """Normalize, drop empty names and de-duplicate preserving first occurrence."""
    seen: dict[str, None] = {}
    for name in names:
        canonical = normalize_skill(name)
        if canonical:
            seen.setdefault(canonical, None)
    return list(seen)


def skills_match(first: str, second: str) -> bool:
    return normalize_skill(first) == normalize_skill(second)


def compare_skills(
    candidate_skills: Iterable[str | None],
    job_skills: Iterable[str | None],
) -> SkillComparison:
    candidate = normalize_skills(candidate_skills)
    job = normalize_skills(job_skills)
    candidate_set = set(candidate)
    job_set = set(job)
    return SkillComparison(
        matched=[skill for skill in candidate if skill in job_set],
        missing=[skill for skill in job if skill not in candidate_set],
        extra=[skill for skill in candidate if skill not in job_set],
    )
