"""Core matching engine components."""

from __future__ import annotations

from .normalizer import compare_skills, normalize_skill, normalize_skills, skills_match
from .recommendation import RecommendationConfig, RecommendationRanker
from .scoring import SCORING_WEIGHTS, DimensionEvaluator, MatchScorer, calculate_match_score
from .suggestions import generate_match_explanation, generate_suggestions
from .text_analyzer import JobTextAnalysis, analyze_job_text

__all__ = [
    "DimensionEvaluator",
    "JobTextAnalysis",
    "MatchScorer",
    "RecommendationConfig",
    "RecommendationRanker",
    "SCORING_WEIGHTS",
    "analyze_job_text",
    "calculate_match_score",
    "compare_skills",
    "generate_match_explanation",
    "generate_suggestions",
    "normalize_skill",
    "normalize_skills",
    "skills_match",
]
