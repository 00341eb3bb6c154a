"""Interview evaluation input, option and feedback schemas."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Language(str, Enum):
    EN = "en"
    VI = "vi"


class Seniority(str, Enum):
    JUNIOR = "JUNIOR"
    MID = "MID"
    SENIOR = "SENIOR"


class Recommendation(str, Enum):
    HIRE = "HIRE"
    CONSIDER = "CONSIDER"
    REJECT = "REJECT"


class InterviewTurn(BaseModel):
    """Ordered question/answer pair of a transcribed interview."""

    order_index: int = Field(ge=1)
    question_text: str = ""
    question_category: str | None = None
    answer_text: str | None = None

    model_config = ConfigDict(
        extra="forbid", frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class EvaluationWeights(BaseModel):
    """Partial weight overrides for the six answer heuristics (0..1 each)."""

    length: float | None = Field(default=None, ge=0, le=1)
    structure: float | None = Field(default=None, ge=0, le=1)
    examples: float | None = Field(default=None, ge=0, le=1)
    confidence: float | None = Field(default=None, ge=0, le=1)
    keyword_match: float | None = Field(default=None, ge=0, le=1)
    relevance: float | None = Field(default=None, ge=0, le=1)

    model_config = ConfigDict(
        extra="forbid", frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class InterviewEvaluationOptions(BaseModel):
    """Evaluator configuration; every field is optional."""

    language: Language | None = None
    seniority: Seniority | None = None
    role: str | None = None
    must_have_keywords: list[str] | None = None
    nice_to_have_keywords: list[str] | None = None
    synonyms: dict[str, list[str]] | None = None
    stopwords: list[str] | None = None
    filler_words: list[str] | None = None
    weights: EvaluationWeights | None = None

    model_config = ConfigDict(
        extra="forbid", frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class CategoryScore(BaseModel):
    name: str
    score: int = Field(ge=0, le=10)
    comment: str


class QuestionFeedback(BaseModel):
    order_index: int = Field(ge=1)
    score: int = Field(ge=0, le=10)
    feedback: str


class InterviewFeedback(BaseModel):
    """Structured interview feedback; bounds are enforced on construction."""

    overall_score: int = Field(ge=0, le=100)
    recommendation: Recommendation
    summary: str
    strengths: list[str] = Field(default_factory=list)
    areas_for_improvement: list[str] = Field(default_factory=list)
    category_scores: list[CategoryScore] = Field(default_factory=list)
    per_question: list[QuestionFeedback] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
