"""Derive interview evaluator options from the job being interviewed for."""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

import structlog
from pydantic import ValidationError

from ..schemas import InterviewEvaluationOptions, JobMatchRequirements, Language, Seniority

logger = structlog.get_logger(__name__)

MAX_KEYWORDS = 25
MAX_FREE_TEXT_KEYWORDS = 40

SHORT_TECH_TOKENS = frozenset({"c#", "c++", ".net", "js", "ts"})
NOISE_TOKENS = frozenset({"and", "the", "with", "for", "you", "your"})

TECH_SYNONYMS: dict[str, str] = {
    "typescript": "ts",
    "javascript": "js",
    "node.js": "nodejs",
    "react.js": "reactjs",
    "next.js": "nextjs",
    "postgresql": "postgres",
    "dotnet": ".net",
    ".net": "dotnet",
}

_VIETNAMESE_CHARS = re.compile(
    r"[ăâđêôơưáàảãạíìỉĩịúùủũụéèẻẽẹóòỏõọýỳỷỹỵ]", re.IGNORECASE
)
_HTML_TAG = re.compile(r"<[^>]*>")
_WHITESPACE = re.compile(r"\s+")
_NON_TECH_CHAR = re.compile(r"[^a-z0-9+\s.#/-]")


def _normalize(value: str | None) -> str:
    return str(value or "").strip().lower()


def _unique(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(value for value in values if value))


def strip_html(text: str | None) -> str:
    return _WHITESPACE.sub(" ", _HTML_TAG.sub(" ", str(text or "").strip())).strip()


def detect_language(text: str | None) -> Language:
    """Vietnamese when the text carries any Vietnamese diacritic, else English."""
    if _VIETNAMESE_CHARS.search(str(text or "")):
        return Language.VI
    return Language.EN


def seniority_from_experience_level(experience_level: str | None) -> Seniority:
    level = _normalize(experience_level)
    if not level:
        return Seniority.MID
    if any(marker in level for marker in ("intern", "junior", "jr")):
        return Seniority.JUNIOR
    if any(marker in level for marker in ("senior", "sr", "lead", "principal", "staff")):
        return Seniority.SENIOR
    return Seniority.MID


def extract_keywords_from_free_text(text: str | None) -> list[str]:
    """Tech-ish tokens from free text, keeping ``c#``/``.net``/``node.js`` intact."""
    raw = strip_html(text)
    if not raw:
        return []
    tokens = _NON_TECH_CHAR.sub(" ", raw.lower()).split()
    kept = [
        token
        for token in tokens
        if (len(token) >= 3 or token in SHORT_TECH_TOKENS) and token not in NOISE_TOKENS
    ]
    return _unique(kept)[:MAX_FREE_TEXT_KEYWORDS]


def build_auto_synonyms(keywords: Iterable[str]) -> dict[str, list[str]]:
    synonyms: dict[str, list[str]] = {}

    def add(base: str, variant: str) -> None:
        variant = _normalize(variant)
        if not base or not variant or base == variant:
            return
        bucket = synonyms.setdefault(base, [])
        if variant not in bucket:
            bucket.append(variant)

    for keyword in keywords:
        key = _normalize(keyword)
        if not key:
            continue
        for variant in (key.replace(".", ""), re.sub(r"\s+", "", key), key.replace("-", "")):
            if variant != key:
                add(key, variant)
        if key in TECH_SYNONYMS:
            add(key, TECH_SYNONYMS[key])
    return synonyms


def build_auto_evaluation_options(
    transcript: str | None,
    job: JobMatchRequirements | None = None,
) -> InterviewEvaluationOptions:
    """Language from the transcript; seniority, keywords and synonyms from the job."""
    language = detect_language(transcript)
    if job is None:
        return InterviewEvaluationOptions(language=language, seniority=Seniority.MID)

    required = _unique(_normalize(skill) for skill in job.required_skills)
    optional = _unique(_normalize(skill) for skill in job.optional_skills)
    categories = _unique(_normalize(category) for category in job.categories)

    free_text = "\n".join(
        part.strip()
        for part in (
            job.title,
            job.requirements,
            job.description,
            job.benefits,
            *job.interview_questions,
        )
        if part and part.strip()
    )
    must_have = _unique([*required, *extract_keywords_from_free_text(free_text)])[:MAX_KEYWORDS]
    nice_to_have = _unique([*optional, *categories])[:MAX_KEYWORDS]
    synonyms = build_auto_synonyms([*must_have, *nice_to_have])

    return InterviewEvaluationOptions(
        language=language,
        seniority=seniority_from_experience_level(job.experience_level),
        role=job.title.strip() or None,
        must_have_keywords=must_have or None,
        nice_to_have_keywords=nice_to_have or None,
        synonyms=synonyms or None,
    )


def _union(left: Iterable[str] | None, right: Iterable[str] | None) -> list[str] | None:
    merged = _unique([*(left or ()), *(right or ())])
    return merged or None


def _merge_synonyms(
    auto: Mapping[str, list[str]] | None,
    client: Mapping[str, list[str]] | None,
) -> dict[str, list[str]] | None:
    merged: dict[str, list[str]] = {}
    for source in (auto or {}, client or {}):
        for key, values in source.items():
            bucket = merged.setdefault(key, [])
            bucket.extend(value for value in values if value not in bucket)
    return merged or None


def merge_evaluation_options(
    auto: InterviewEvaluationOptions,
    client: InterviewEvaluationOptions | Mapping[str, Any] | None,
) -> InterviewEvaluationOptions:
    """Overlay client options on auto-derived ones.

    Scalar fields set by the client win. Keyword lists are merged as a union
    (auto first) and synonyms are merged per key.
    """
    if client is None:
        return auto
    if not isinstance(client, InterviewEvaluationOptions):
        try:
            client = InterviewEvaluationOptions.model_validate(dict(client))
        except ValidationError as exc:
            logger.debug("interview.client_options_invalid", error_count=exc.error_count())
            return auto

    overrides = client.model_dump(exclude_none=True, exclude={"weights"})
    merged = auto.model_copy(update=overrides)
    return merged.model_copy(
        update={
            "weights": client.weights if client.weights is not None else auto.weights,
            "must_have_keywords": _union(auto.must_have_keywords, client.must_have_keywords),
            "nice_to_have_keywords": _union(
                auto.nice_to_have_keywords, client.nice_to_have_keywords
            ),
            "synonyms": _merge_synonyms(auto.synonyms, client.synonyms),
        }
    )
