"""Localized feedback messages keyed by a fixed set of message ids."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..schemas import Language


class MessageId(str, Enum):
    NO_ANSWER = "no_answer"
    TOO_SHORT = "too_short"
    ADD_STRUCTURE = "add_structure"
    ADD_EXAMPLE = "add_example"
    LESS_HEDGING = "less_hedging"
    ADD_KEYWORDS = "add_keywords"
    IMPROVE_RELEVANCE = "improve_relevance"
    SOLID = "solid"
    SUMMARY_STRONG = "summary_strong"
    SUMMARY_MIXED = "summary_mixed"
    SUMMARY_WEAK = "summary_weak"
    STRENGTH_CONSISTENT = "strength_consistent"
    STRENGTH_STRONG_ONE = "strength_strong_one"
    STRENGTH_DEFAULT = "strength_default"
    IMPROVE_BRIEF = "improve_brief"
    IMPROVE_STAR = "improve_star"
    IMPROVE_EVIDENCE = "improve_evidence"
    IMPROVE_CLARITY = "improve_clarity"
    IMPROVE_DEFAULT = "improve_default"
    CATEGORY_OK = "category_ok"
    CATEGORY_NEEDS_WORK = "category_needs_work"


_EN: dict[MessageId, str] = {
    MessageId.NO_ANSWER: "No answer provided.",
    MessageId.TOO_SHORT: "Answer is very short; add more detail.",
    MessageId.ADD_STRUCTURE: "Try a clearer structure (problem → action → result).",
    MessageId.ADD_EXAMPLE: "Add a concrete example or metric.",
    MessageId.LESS_HEDGING: "Reduce hedging; be more confident and specific.",
    MessageId.ADD_KEYWORDS: "Try to address the role keywords more explicitly.",
    MessageId.IMPROVE_RELEVANCE: "Make sure the answer directly addresses the question.",
    MessageId.SOLID: "Solid answer with adequate detail and clarity.",
    MessageId.SUMMARY_STRONG: (
        "Strong performance overall with clear, structured answers and good supporting detail."
    ),
    MessageId.SUMMARY_MIXED: (
        "Mixed performance: some solid answers, but consistency and depth can be improved."
    ),
    MessageId.SUMMARY_WEAK: (
        "Needs improvement: answers are often too brief or lack structure and concrete examples."
    ),
    MessageId.STRENGTH_CONSISTENT: "Consistently detailed and coherent answers.",
    MessageId.STRENGTH_STRONG_ONE: "At least one strong, well-supported answer.",
    MessageId.STRENGTH_DEFAULT: "Shows potential; some answers are on the right track.",
    MessageId.IMPROVE_BRIEF: "Some answers are too brief or missing key details.",
    MessageId.IMPROVE_STAR: "Use a consistent structure (STAR / problem-solving narrative).",
    MessageId.IMPROVE_EVIDENCE: "Add more concrete examples and measurable impact.",
    MessageId.IMPROVE_CLARITY: "Improve clarity: explain decisions and trade-offs explicitly.",
    MessageId.IMPROVE_DEFAULT: "Improve consistency across answers.",
    MessageId.CATEGORY_OK: "OK",
    MessageId.CATEGORY_NEEDS_WORK: "Needs improvement",
}

_VI: dict[MessageId, str] = {
    MessageId.NO_ANSWER: "Không có câu trả lời.",
    MessageId.TOO_SHORT: "Câu trả lời quá ngắn; cần thêm chi tiết.",
    MessageId.ADD_STRUCTURE: "Nên trả lời theo cấu trúc rõ hơn (vấn đề → hành động → kết quả).",
    MessageId.ADD_EXAMPLE: "Hãy thêm ví dụ cụ thể hoặc số liệu (metric).",
    MessageId.LESS_HEDGING: "Giảm các từ do dự; tự tin và cụ thể hơn.",
    MessageId.ADD_KEYWORDS: "Hãy đề cập rõ hơn các keyword liên quan tới role.",
    MessageId.IMPROVE_RELEVANCE: "Đảm bảo trả lời đúng trọng tâm câu hỏi.",
    MessageId.SOLID: "Câu trả lời ổn, đủ chi tiết và tương đối rõ ràng.",
    MessageId.SUMMARY_STRONG: "Tổng thể tốt: trả lời rõ ràng, có cấu trúc và có dẫn chứng.",
    MessageId.SUMMARY_MIXED: (
        "Tổng thể trung bình: có câu trả lời tốt nhưng cần cải thiện tính nhất quán và độ sâu."
    ),
    MessageId.SUMMARY_WEAK: (
        "Cần cải thiện: nhiều câu quá ngắn hoặc thiếu cấu trúc và ví dụ cụ thể."
    ),
    MessageId.STRENGTH_CONSISTENT: "Trả lời khá nhất quán, mạch lạc và có chi tiết.",
    MessageId.STRENGTH_STRONG_ONE: "Có ít nhất một câu trả lời mạnh, có dẫn chứng.",
    MessageId.STRENGTH_DEFAULT: "Có tiềm năng; một số câu trả lời đi đúng hướng.",
    MessageId.IMPROVE_BRIEF: "Một số câu trả lời quá ngắn hoặc thiếu ý chính.",
    MessageId.IMPROVE_STAR: "Dùng cấu trúc nhất quán (STAR / kể câu chuyện giải quyết vấn đề).",
    MessageId.IMPROVE_EVIDENCE: "Thêm ví dụ cụ thể và tác động đo lường được.",
    MessageId.IMPROVE_CLARITY: "Cải thiện độ rõ ràng: giải thích quyết định và trade-off.",
    MessageId.IMPROVE_DEFAULT: "Cải thiện tính nhất quán giữa các câu trả lời.",
    MessageId.CATEGORY_OK: "Tốt",
    MessageId.CATEGORY_NEEDS_WORK: "Cần cải thiện",
}

MESSAGES: Mapping[Language, Mapping[MessageId, str]] = MappingProxyType(
    {
        Language.EN: MappingProxyType(_EN),
        Language.VI: MappingProxyType(_VI),
    }
)


def missing_translations() -> dict[Language, set[MessageId]]:
    """Message ids without a translation, per language (empty when complete)."""
    expected = set(MessageId)
    return {
        language: expected - set(table)
        for language, table in MESSAGES.items()
        if expected - set(table)
    }


def translate(language: Language, message_id: MessageId) -> str:
    table = MESSAGES.get(language, MESSAGES[Language.EN])
    return table.get(message_id, MESSAGES[Language.EN][message_id])
