"""Implicit requirement extraction from unstructured job text.

Every trait score is a raw regex hit count over the combined, lower-cased
description/requirements/responsibilities text. Counts are not normalized by
text length, so consumers must treat them as relative magnitudes.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from .numeric import clamp, round_half_up

SOFT_SKILL_TRAITS: tuple[str, ...] = (
    "communication",
    "leadership",
    "problem_solving",
    "adaptability",
    "creativity",
    "attention_to_detail",
)

TECHNOLOGY_CATEGORIES: tuple[str, ...] = ("frontend", "backend", "database", "cloud", "tools")

ENVIRONMENT_TRAITS: tuple[str, ...] = ("startup", "enterprise", "remote", "collaborative")


def _compile(*patterns: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(pattern, re.IGNORECASE) for pattern in patterns)


SOFT_SKILL_PATTERNS: dict[str, tuple[re.Pattern[str], ...]] = {
    "communication": _compile(
        r"\bcommunicat(e|ion|ing|ive)\b",
        r"\bverbal\b",
        r"\bwritten\b",
        r"\bpresentation\b",
        r"\binterpersonal\b",
        r"\bcollaboration\b",
        r"\bteamwork\b",
    ),
    "leadership": _compile(
        r"\blead(ership|ing|er)\b",
        r"\bmentoring\b",
        r"\bcoaching\b",
        r"\bmanagement\b",
        r"\bstrategic\b",
        r"\bvision\b",
    ),
    "problem_solving": _compile(
        r"\bproblem.solv(e|ing)\b",
        r"\banalytical\b",
        r"\bcritical.think(ing)?\b",
        r"\btroubleshoot(ing)?\b",
        r"\bdebug(ging)?\b",
    ),
    "adaptability": _compile(
        r"\badaptable\b",
        r"\bflexible\b",
        r"\bresilient\b",
        r"\bagile\b",
        r"\bquick.learner\b",
        r"\badapt.to.change\b",
    ),
    "creativity": _compile(
        r"\bcreativ(e|ity)\b",
        r"\binnovative\b",
        r"\bdesign.think(ing)?\b",
        r"\bout.of.the.box\b",
    ),
    "attention_to_detail": _compile(
        r"\battention.to.detail\b",
        r"\bdetailed.oriented\b",
        r"\bmeticulous\b",
        r"\bthorough\b",
        r"\bprecise\b",
    ),
}

TECH_PATTERNS: dict[str, tuple[re.Pattern[str], ...]] = {
    "frontend": _compile(
        r"\breact\b",
        r"\bvue\b",
        r"\bangular\b",
        r"\bjavascript\b",
        r"\btypescript\b",
        r"\bhtml\b",
        r"\bcss\b",
        r"\bsass\b",
        r"\bscss\b",
    ),
    "backend": _compile(
        r"\bnode\b",
        r"\bexpress\b",
        r"\bdjango\b",
        r"\bflask\b",
        r"\bspring\b",
        r"\blaravel\b",
        r"\bphp\b",
        r"\bpython\b",
        r"\bjava\b",
        r"\bgo\b",
        r"\bruby\b",
    ),
    "database": _compile(
        r"\bmysql\b",
        r"\bpostgresql\b",
        r"\bmongodb\b",
        r"\bredis\b",
        r"\belasticsearch\b",
        r"\bsql\b",
        r"\bno.sql\b",
    ),
    "cloud": _compile(
        r"\baw\s*s\b",
        r"\bgcp\b",
        r"\bazure\b",
        r"\bheroku\b",
        r"\bdocker\b",
        r"\bkubernetes\b",
        r"\bterraform\b",
    ),
    "tools": _compile(
        r"\bgit\b",
        r"\bjenkins\b",
        r"\bcircle.ci\b",
        r"\bgithub.actions\b",
        r"\bjira\b",
        r"\bslack\b",
        r"\bpostman\b",
    ),
}

LANGUAGE_PATTERNS: tuple[re.Pattern[str], ...] = _compile(
    r"\b(english|spanish|french|german|chinese|japanese|korean|vietnamese)\b",
    r"\bfluent\b",
    r"\bproficient\b",
    r"\bnative\b",
    r"\bconversational\b",
)

ENVIRONMENT_PATTERNS: dict[str, tuple[re.Pattern[str], ...]] = {
    "startup": _compile(
        r"\bstartup\b",
        r"\bfast.paced\b",
        r"\bdynamic\b",
        r"\bagile\b",
        r"\bscale.up\b",
    ),
    "enterprise": _compile(
        r"\benterprise\b",
        r"\bcorporate\b",
        r"\bstructured\b",
        r"\bprocess.oriented\b",
        r"\bmethodology\b",
    ),
    "remote": _compile(
        r"\bremote\b",
        r"\bwork.from.home\b",
        r"\bdistributed\b",
        r"\basynchronous\b",
    ),
    "collaborative": _compile(
        r"\bcollaborative\b",
        r"\bteam.oriented\b",
        r"\bcross.functional\b",
        r"\binterdisciplinary\b",
    ),
}

# (patterns, weight per hit, cap on the total contribution)
COMPLEXITY_INDICATORS: tuple[tuple[tuple[re.Pattern[str], ...], float, float], ...] = (
    (
        _compile(
            r"\bscalability\b",
            r"\bperformance\b",
            r"\boptimization\b",
            r"\barchitecture\b",
            r"\bmicroservices\b",
            r"\bdistributed\b",
            r"\bconcurrency\b",
        ),
        0.2,
        1.0,
    ),
    (
        _compile(r"\blead\b", r"\bmanage\b", r"\barchitect\b", r"\bdesign\b", r"\bstrategy\b"),
        0.15,
        0.8,
    ),
    (
        _compile(r"\badvanced\b", r"\bexpert\b", r"\bsenior\b", r"\bprincipal\b"),
        0.1,
        0.7,
    ),
)

BASE_COMPLEXITY = 3.0

KEYWORD_STOPWORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
        "we", "are", "is", "you", "your", "our", "will", "have", "has", "had", "do", "does",
        "be", "been", "being", "can", "could", "should", "would", "may", "might", "must",
        "this", "that", "these", "those", "i", "me", "my", "myself", "us", "ourselves",
    }
)

_NON_WORD = re.compile(r"[^\w\s]")


@dataclass(frozen=True)
class JobTextAnalysis:
    """Signals extracted from a job posting's free text."""

    soft_skills: Mapping[str, int] = field(default_factory=dict)
    technologies: Mapping[str, list[str]] = field(default_factory=dict)
    languages: list[str] = field(default_factory=list)
    environment: Mapping[str, int] = field(default_factory=dict)
    keywords: list[str] = field(default_factory=list)
    complexity: int = int(BASE_COMPLEXITY)

    def signalled_soft_skills(self) -> dict[str, int]:
        return {trait: count for trait, count in self.soft_skills.items() if count > 0}

    def technology_count(self) -> int:
        return sum(len(items) for items in self.technologies.values())


def analyze_job_text(
    description: str | None = "",
    requirements: str | None = "",
    responsibilities: str | None = "",
) -> JobTextAnalysis:
    full_text = f"{description or ''} {requirements or ''} {responsibilities or ''}".lower()

    return JobTextAnalysis(
        soft_skills={
            trait: count_pattern_matches(full_text, SOFT_SKILL_PATTERNS[trait])
            for trait in SOFT_SKILL_TRAITS
        },
        technologies={
            category: extract_unique_matches(full_text, TECH_PATTERNS[category])
            for category in TECHNOLOGY_CATEGORIES
        },
        languages=extract_unique_matches(full_text, LANGUAGE_PATTERNS),
        environment={
            trait: count_pattern_matches(full_text, ENVIRONMENT_PATTERNS[trait])
            for trait in ENVIRONMENT_TRAITS
        },
        keywords=extract_keywords(full_text),
        complexity=assess_complexity(full_text),
    )


def count_pattern_matches(text: str, patterns: Iterable[re.Pattern[str]]) -> int:
    return sum(sum(1 for _ in pattern.finditer(text)) for pattern in patterns)


def extract_unique_matches(text: str, patterns: Sequence[re.Pattern[str]]) -> list[str]:
    found: dict[str, None] = {}
    for pattern in patterns:
        for match in pattern.finditer(text):
            found.setdefault(match.group(0).lower(), None)
    return list(found)


def extract_keywords(text: str, limit: int = 10) -> list[str]:
    """Top ``limit`` non-stopword tokens longer than three characters.

    Ties keep the order in which the tokens were first seen.
    """
    words = [
        word.lower()
        for word in _NON_WORD.sub(" ", text).split()
        if len(word) > 3 and word.lower() not in KEYWORD_STOPWORDS
    ]
    counts = Counter(words)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [word for word, _ in ranked[:limit]]


def assess_complexity(text: str) -> int:
    complexity = BASE_COMPLEXITY
    for patterns, weight, cap in COMPLEXITY_INDICATORS:
        complexity += min(count_pattern_matches(text, patterns) * weight, cap)
    return int(clamp(round_half_up(complexity), 1, 5))
