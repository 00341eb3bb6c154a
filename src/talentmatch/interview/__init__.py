"""Rule-based interview evaluation."""

from __future__ import annotations

from .auto_options import (
    build_auto_evaluation_options,
    detect_language,
    merge_evaluation_options,
    seniority_from_experience_level,
)
from .evaluator import (
    RuleBasedInterviewEvaluator,
    generate_interview_feedback_rule_based,
)
from .localization import MESSAGES, MessageId, translate

__all__ = [
    "MESSAGES",
    "MessageId",
    "RuleBasedInterviewEvaluator",
    "build_auto_evaluation_options",
    "detect_language",
    "generate_interview_feedback_rule_based",
    "merge_evaluation_options",
    "seniority_from_experience_level",
    "translate",
]
