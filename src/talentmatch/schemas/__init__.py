"""Pydantic schema definitions for provider-neutral data structures."""

from __future__ import annotations

from .candidate import (
    CandidateMatchProfile,
    CandidatePreferences,
    EducationRecord,
    ProjectRecord,
    SoftSkillLevels,
    TechnologyStack,
    WorkExperience,
)
from .interview import (
    CategoryScore,
    EvaluationWeights,
    InterviewEvaluationOptions,
    InterviewFeedback,
    InterviewTurn,
    Language,
    QuestionFeedback,
    Recommendation,
    Seniority,
)
from .job import EducationRequirements, JobMatchRequirements
from .match import (
    ApplicationRecord,
    CandidateActivity,
    MatchBreakdown,
    MatchDetails,
    MatchResult,
    RecommendedMatch,
)

__all__ = [
    "ApplicationRecord",
    "CandidateActivity",
    "CandidateMatchProfile",
    "CandidatePreferences",
    "CategoryScore",
    "EducationRecord",
    "EducationRequirements",
    "EvaluationWeights",
    "InterviewEvaluationOptions",
    "InterviewFeedback",
    "InterviewTurn",
    "JobMatchRequirements",
    "Language",
    "MatchBreakdown",
    "MatchDetails",
    "MatchResult",
    "ProjectRecord",
    "QuestionFeedback",
    "Recommendation",
    "RecommendedMatch",
    "Seniority",
    "SoftSkillLevels",
    "TechnologyStack",
    "WorkExperience",
]
