"""Offline rule-based grading of transcribed interview answers.

Every answer is scored from lexical signals only (length, structure markers,
concrete examples, hedging, role keywords and question/answer token overlap).
No model or external service is involved, so results are deterministic.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterable, Mapping, Sequence

import structlog
from pydantic import ValidationError

from ..core.numeric import clamp01, clamp_int
from ..schemas import (
    CategoryScore,
    InterviewEvaluationOptions,
    InterviewFeedback,
    InterviewTurn,
    Language,
    QuestionFeedback,
    Recommendation,
    Seniority,
)
from .localization import MessageId, translate

logger = structlog.get_logger(__name__)

DEFAULT_STOPWORDS_VI: tuple[str, ...] = (
    "la", "va", "nhung", "nhieu", "mot", "cai", "cua", "toi", "minh", "ban", "anh",
    "chi", "em", "co", "khong", "se", "da", "dang", "duoc", "cho", "ve",
)

DEFAULT_STOPWORDS_EN: tuple[str, ...] = (
    "the", "a", "an", "and", "or", "but", "to", "of", "in", "on", "for", "with",
    "is", "are", "was", "were", "i", "we", "you",
)

DEFAULT_FILLER_WORDS: tuple[str, ...] = (
    "uh", "um", "maybe", "probably", "not sure", "i think", "kind of", "sort of",
    "kiểu", "ờ", "ừm", "chắc", "không chắc",
)

# (minimum "good" word count, "ok" word count) per seniority
LENGTH_THRESHOLDS: dict[Seniority, tuple[int, int]] = {
    Seniority.JUNIOR: (25, 70),
    Seniority.MID: (40, 90),
    Seniority.SENIOR: (60, 120),
}

# Below this many words the answer gets a "too short" note.
SHORT_ANSWER_WORDS: dict[Seniority, int] = {
    Seniority.JUNIOR: 18,
    Seniority.MID: 25,
    Seniority.SENIOR: 35,
}

OFF_TOPIC_RELEVANCE = 0.08
OFF_TOPIC_MIN_WORDS = 40
OFF_TOPIC_CAP = 5.0
LOW_RELEVANCE_NOTE = 0.12
HESITATION_HITS = 4
FILLER_HITS = 2

HIRE_THRESHOLD = 80
CONSIDER_THRESHOLD = 60

_EXAMPLE_PHRASES = re.compile(r"\bfor example\b|\be\.g\.|\bví dụ\b|\bchẳng hạn\b")
_EXAMPLE_METRICS = re.compile(
    r"\b\d+%|\b\d+\s*(ms|s|sec|secs|minutes|min|hours|hrs|days|weeks|months|years)\b"
)
_EXAMPLE_TERMS = re.compile(r"\b(kpi|metric|metrics|latency|throughput|roi)\b")
_STRUCTURE = re.compile(
    r"\b(situation|task|action|result)\b|\bproblem\b|\bapproach\b|\boutcome\b|\btrade-?off\b"
)
_HEDGING = re.compile(r"\b(i think|maybe|not sure|probably|kind of|sort of|uh|um)\b")
_TECHNICAL_QUESTION = re.compile(
    r"\b(implement|optimi[sz]e|complexity|big[-\s]?o|api|database|sql|index|cache|latency|"
    r"throughput|react|typescript|node|system design)\b"
)
_BEHAVIORAL_QUESTION = re.compile(
    r"\b(tell me about|conflict|challenge|failure|mistake|team|leadership|stakeholder|"
    r"pressure|deadline|feedback)\b"
)
_PLAIN_KEYWORD = re.compile(r"^[a-z0-9]+$")
_NON_TOKEN = re.compile(r"[^a-z0-9\s]")
_COMBINING_MARK = re.compile("[\u0300-\u036f]")


class QuestionKind(str, Enum):
    TECHNICAL = "TECHNICAL"
    BEHAVIORAL = "BEHAVIORAL"
    GENERAL = "GENERAL"


@dataclass(frozen=True)
class AnswerWeights:
    """Blend weights for the six answer sub-scores."""

    length: float = 0.25
    structure: float = 0.20
    examples: float = 0.20
    confidence: float = 0.10
    keyword_match: float = 0.15
    relevance: float = 0.10

    def total(self) -> float:
        return (
            self.length
            + self.structure
            + self.examples
            + self.confidence
            + self.keyword_match
            + self.relevance
        )

    def for_kind(self, kind: QuestionKind) -> AnswerWeights:
        if kind is QuestionKind.TECHNICAL:
            return replace(
                self,
                keyword_match=clamp01(self.keyword_match + 0.08),
                relevance=clamp01(self.relevance + 0.05),
                examples=clamp01(self.examples + 0.03),
                structure=clamp01(self.structure - 0.03),
            )
        if kind is QuestionKind.BEHAVIORAL:
            return replace(
                self,
                structure=clamp01(self.structure + 0.08),
                examples=clamp01(self.examples + 0.05),
                confidence=clamp01(self.confidence + 0.03),
                keyword_match=clamp01(self.keyword_match - 0.04),
            )
        return self


DEFAULT_WEIGHTS = AnswerWeights()


@dataclass(frozen=True)
class ResolvedOptions:
    """Evaluator options with every default filled in."""

    language: Language = Language.EN
    seniority: Seniority = Seniority.MID
    must_have_keywords: tuple[str, ...] = ()
    nice_to_have_keywords: tuple[str, ...] = ()
    stopwords: tuple[str, ...] = DEFAULT_STOPWORDS_EN
    filler_words: tuple[str, ...] = DEFAULT_FILLER_WORDS
    weights: AnswerWeights = DEFAULT_WEIGHTS

    @property
    def has_keywords(self) -> bool:
        return bool(self.must_have_keywords or self.nice_to_have_keywords)


@dataclass(frozen=True)
class AnswerSignals:
    """Lexical signals of a single answer relative to its question."""

    words: int
    has_examples: bool
    has_structure: bool
    hesitant: bool
    must_hits: int
    nice_hits: int
    relevance: float


def safe_text(value: str | None) -> str:
    return str(value or "").strip()


def strip_diacritics(text: str | None) -> str:
    return _COMBINING_MARK.sub("", unicodedata.normalize("NFD", safe_text(text)))


def count_words(text: str | None) -> int:
    return len(safe_text(text).split())


def normalize_keywords(keywords: Iterable[str] | None) -> list[str]:
    """Lower-case, drop empties and dedupe keeping first occurrence."""
    seen: dict[str, None] = {}
    for keyword in keywords or ():
        value = safe_text(keyword).lower()
        if value:
            seen.setdefault(value, None)
    return list(seen)


def expand_keywords_with_synonyms(
    keywords: Sequence[str],
    synonyms: Mapping[str, Sequence[str]] | None,
) -> list[str]:
    if not synonyms:
        return list(keywords)
    lookup = {key.lower(): values for key, values in synonyms.items()}
    expanded: list[str] = []
    for keyword in keywords:
        expanded.append(keyword)
        expanded.extend(safe_text(value).lower() for value in lookup.get(keyword, ()))
    return normalize_keywords(expanded)


def count_keyword_matches(text: str | None, keywords: Sequence[str]) -> int:
    """Number of keywords present in the text.

    Plain alphanumeric keywords must match on word boundaries; tokens such as
    ``c#``, ``.net`` or ``next.js`` fall back to substring containment.
    """
    lowered = safe_text(text).lower()
    if not lowered or not keywords:
        return 0
    hits = 0
    for keyword in keywords:
        if not keyword:
            continue
        if _PLAIN_KEYWORD.match(keyword):
            if re.search(rf"\b{re.escape(keyword)}\b", lowered):
                hits += 1
        elif keyword in lowered:
            hits += 1
    return hits


def tokenize(text: str | None, language: Language, stopwords: Sequence[str]) -> list[str]:
    lowered = _NON_TOKEN.sub(" ", strip_diacritics(text).lower())
    min_length = 2 if language is Language.VI else 3
    stop = {strip_diacritics(word).lower() for word in stopwords}
    return [token for token in lowered.split() if len(token) >= min_length and token not in stop]


def jaccard(left: Sequence[str], right: Sequence[str]) -> float:
    a, b = set(left), set(right)
    union = len(a | b)
    return len(a & b) / union if union else 0.0


def has_examples_signal(text: str | None) -> bool:
    lowered = safe_text(text).lower()
    if not lowered:
        return False
    return bool(
        _EXAMPLE_PHRASES.search(lowered)
        or _EXAMPLE_METRICS.search(lowered)
        or _EXAMPLE_TERMS.search(lowered)
    )


def has_structure_signal(text: str | None) -> bool:
    lowered = safe_text(text).lower()
    return bool(lowered) and bool(_STRUCTURE.search(lowered))


def is_very_hesitant(text: str | None) -> bool:
    lowered = safe_text(text).lower()
    if not lowered:
        return True
    return len(_HEDGING.findall(lowered)) >= HESITATION_HITS


def detect_question_kind(question_text: str | None, category: str | None = None) -> QuestionKind:
    label = safe_text(category).lower()
    question = safe_text(question_text).lower()

    if any(marker in label for marker in ("tech", "coding", "system", "algorithm")):
        return QuestionKind.TECHNICAL
    if any(marker in label for marker in ("behavior", "communication", "culture")):
        return QuestionKind.BEHAVIORAL
    if _TECHNICAL_QUESTION.search(question):
        return QuestionKind.TECHNICAL
    if _BEHAVIORAL_QUESTION.search(question):
        return QuestionKind.BEHAVIORAL
    return QuestionKind.GENERAL


def resolve_options(
    options: InterviewEvaluationOptions | Mapping[str, Any] | None,
) -> ResolvedOptions:
    """Fill defaults; an invalid raw mapping is logged and replaced by defaults."""
    if options is None:
        parsed = InterviewEvaluationOptions()
    elif isinstance(options, InterviewEvaluationOptions):
        parsed = options
    else:
        try:
            parsed = InterviewEvaluationOptions.model_validate(dict(options))
        except ValidationError as exc:
            logger.debug("interview.options_invalid", error_count=exc.error_count())
            parsed = InterviewEvaluationOptions()

    language = Language.VI if parsed.language is Language.VI else Language.EN
    stopwords = normalize_keywords(parsed.stopwords)
    if not stopwords:
        stopwords = list(DEFAULT_STOPWORDS_VI if language is Language.VI else DEFAULT_STOPWORDS_EN)
    filler_words = normalize_keywords(parsed.filler_words) or list(DEFAULT_FILLER_WORDS)

    weights = DEFAULT_WEIGHTS
    if parsed.weights is not None:
        overrides = parsed.weights.model_dump(exclude_none=True)
        weights = replace(DEFAULT_WEIGHTS, **{k: clamp01(v) for k, v in overrides.items()})

    return ResolvedOptions(
        language=language,
        seniority=parsed.seniority or Seniority.MID,
        must_have_keywords=tuple(
            expand_keywords_with_synonyms(
                normalize_keywords(parsed.must_have_keywords), parsed.synonyms
            )
        ),
        nice_to_have_keywords=tuple(
            expand_keywords_with_synonyms(
                normalize_keywords(parsed.nice_to_have_keywords), parsed.synonyms
            )
        ),
        stopwords=tuple(stopwords),
        filler_words=tuple(filler_words),
        weights=weights,
    )


def collect_signals(question_text: str, answer_text: str, options: ResolvedOptions) -> AnswerSignals:
    return AnswerSignals(
        words=count_words(answer_text),
        has_examples=has_examples_signal(answer_text),
        has_structure=has_structure_signal(answer_text),
        hesitant=is_very_hesitant(answer_text),
        must_hits=count_keyword_matches(answer_text, options.must_have_keywords),
        nice_hits=count_keyword_matches(answer_text, options.nice_to_have_keywords),
        relevance=jaccard(
            tokenize(question_text, options.language, options.stopwords),
            tokenize(answer_text, options.language, options.stopwords),
        ),
    )


def score_answer(
    signals: AnswerSignals,
    kind: QuestionKind,
    options: ResolvedOptions,
) -> int:
    """Blend the six sub-scores into an integer 0..10 answer score."""
    if signals.words == 0:
        return 0

    min_good, ok_words = LENGTH_THRESHOLDS[options.seniority]
    if signals.words < min_good:
        length_score = 4.0
    elif signals.words < ok_words:
        length_score = 7.0
    else:
        length_score = 8.0
    structure_score = 10.0 if signals.has_structure else 4.0
    examples_score = 10.0 if signals.has_examples else 4.0
    confidence_score = 4.0 if signals.hesitant else 8.0
    keyword_score = float(clamp_int(signals.must_hits * 3 + signals.nice_hits, 0, 10))
    relevance_score = float(clamp_int(signals.relevance * 10, 0, 10))

    weights = options.weights.for_kind(kind)
    blended = (
        length_score * weights.length
        + structure_score * weights.structure
        + examples_score * weights.examples
        + confidence_score * weights.confidence
        + keyword_score * weights.keyword_match
        + relevance_score * weights.relevance
    )
    total = weights.total()
    normalized = blended / total if total > 0 else 0.0

    # Long answers with almost no overlap with the question are rambling.
    if signals.relevance < OFF_TOPIC_RELEVANCE and signals.words >= OFF_TOPIC_MIN_WORDS:
        normalized = min(normalized, OFF_TOPIC_CAP)

    return clamp_int(normalized, 0, 10)


def answer_notes(answer_text: str, signals: AnswerSignals, options: ResolvedOptions) -> list[MessageId]:
    if signals.words == 0:
        return [MessageId.NO_ANSWER]

    notes: list[MessageId] = []
    if signals.words < SHORT_ANSWER_WORDS[options.seniority]:
        notes.append(MessageId.TOO_SHORT)
    if not signals.has_structure:
        notes.append(MessageId.ADD_STRUCTURE)
    if not signals.has_examples:
        notes.append(MessageId.ADD_EXAMPLE)
    lowered = answer_text.lower()
    filler_hits = sum(1 for word in options.filler_words if word and word in lowered)
    if signals.hesitant or filler_hits >= FILLER_HITS:
        notes.append(MessageId.LESS_HEDGING)
    if options.must_have_keywords and signals.must_hits == 0:
        notes.append(MessageId.ADD_KEYWORDS)
    if 0 < signals.relevance < LOW_RELEVANCE_NOTE:
        notes.append(MessageId.IMPROVE_RELEVANCE)
    return notes


def recommendation_from_overall(overall_score: int) -> Recommendation:
    if overall_score >= HIRE_THRESHOLD:
        return Recommendation.HIRE
    if overall_score >= CONSIDER_THRESHOLD:
        return Recommendation.CONSIDER
    return Recommendation.REJECT


def _summary_for(overall_score: int) -> MessageId:
    if overall_score >= HIRE_THRESHOLD:
        return MessageId.SUMMARY_STRONG
    if overall_score >= CONSIDER_THRESHOLD:
        return MessageId.SUMMARY_MIXED
    return MessageId.SUMMARY_WEAK


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def _coerce_turns(turns: Iterable[InterviewTurn | Mapping[str, Any]] | None) -> list[InterviewTurn]:
    parsed = [
        turn if isinstance(turn, InterviewTurn) else InterviewTurn.model_validate(turn)
        for turn in turns or ()
    ]
    return sorted(parsed, key=lambda turn: turn.order_index)


class RuleBasedInterviewEvaluator:
    """Grade interview turns and aggregate them into structured feedback."""

    def evaluate(
        self,
        turns: Iterable[InterviewTurn | Mapping[str, Any]] | None,
        options: InterviewEvaluationOptions | Mapping[str, Any] | None = None,
        *,
        transcript: str = "",
    ) -> InterviewFeedback:
        resolved = resolve_options(options)
        language = resolved.language
        ordered = _coerce_turns(turns)

        signals: list[AnswerSignals] = []
        per_question: list[QuestionFeedback] = []
        for turn in ordered:
            answer = safe_text(turn.answer_text)
            turn_signals = collect_signals(safe_text(turn.question_text), answer, resolved)
            kind = detect_question_kind(turn.question_text, turn.question_category)
            notes = answer_notes(answer, turn_signals, resolved)
            feedback = (
                " ".join(translate(language, note) for note in notes)
                if notes
                else translate(language, MessageId.SOLID)
            )
            signals.append(turn_signals)
            per_question.append(
                QuestionFeedback(
                    order_index=turn.order_index,
                    score=score_answer(turn_signals, kind, resolved),
                    feedback=feedback,
                )
            )

        scores = [item.score for item in per_question]
        average = _mean(scores)
        overall_score = clamp_int(average * 10, 0, 100)

        clarity = clamp_int(_mean([1.0 if score >= 6 else 0.0 for score in scores]) * 10, 0, 10)
        depth = clamp_int(average + (1 if any(s.has_examples for s in signals) else 0), 0, 10)
        structure = clamp_int(_mean([1.0 if s.has_structure else 0.0 for s in signals]) * 10, 0, 10)
        relevance = clamp_int(_mean([s.relevance * 10 for s in signals]), 0, 10)
        keyword = 0
        if resolved.has_keywords:
            keyword = clamp_int(
                sum(min(10, s.must_hits * 3 + s.nice_hits) for s in signals) / max(1, len(signals)),
                0,
                10,
            )

        strengths: list[MessageId] = []
        if overall_score >= 75:
            strengths.append(MessageId.STRENGTH_CONSISTENT)
        if any(score >= 8 for score in scores):
            strengths.append(MessageId.STRENGTH_STRONG_ONE)

        improvements: list[MessageId] = []
        if any(score <= 3 for score in scores):
            improvements.append(MessageId.IMPROVE_BRIEF)
        if structure < 6:
            improvements.append(MessageId.IMPROVE_STAR)
        if depth < 6:
            improvements.append(MessageId.IMPROVE_EVIDENCE)
        if clarity < 6:
            improvements.append(MessageId.IMPROVE_CLARITY)
        if resolved.must_have_keywords and keyword < 6:
            improvements.append(MessageId.ADD_KEYWORDS)

        categories = [
            ("Clarity", clarity),
            ("Structure", structure),
            ("Depth & Evidence", depth),
            ("Relevance", relevance),
        ]
        if resolved.has_keywords:
            categories.append(("Keyword Match", keyword))

        feedback = InterviewFeedback(
            overall_score=overall_score,
            recommendation=recommendation_from_overall(overall_score),
            summary=translate(language, _summary_for(overall_score)),
            strengths=[translate(language, item) for item in strengths]
            or [translate(language, MessageId.STRENGTH_DEFAULT)],
            areas_for_improvement=[
                translate(language, item) for item in dict.fromkeys(improvements)
            ]
            or [translate(language, MessageId.IMPROVE_DEFAULT)],
            category_scores=[
                CategoryScore(
                    name=name,
                    score=score,
                    comment=translate(
                        language,
                        MessageId.CATEGORY_OK if score >= 7 else MessageId.CATEGORY_NEEDS_WORK,
                    ),
                )
                for name, score in categories
            ],
            per_question=per_question,
        )
        logger.debug(
            "interview.scored",
            turns=len(ordered),
            overall_score=overall_score,
            transcript_chars=len(transcript or ""),
        )
        return feedback


def generate_interview_feedback_rule_based(
    transcript: str,
    turns: Iterable[InterviewTurn | Mapping[str, Any]] | None,
    options: InterviewEvaluationOptions | Mapping[str, Any] | None = None,
) -> InterviewFeedback:
    """Grade an interview with the default rule-based evaluator."""
    return RuleBasedInterviewEvaluator().evaluate(turns, options, transcript=transcript)
