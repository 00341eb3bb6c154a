"""Human-readable improvement suggestions derived from a match result.

Impact percentages are illustrative estimates for the reader; they are not
recomputed against the scorer.
"""

from __future__ import annotations

from typing import Sequence

from ..schemas import MatchResult, ProjectRecord
from .numeric import round_half_up

MAX_SUGGESTIONS = 5


def _impact(weight: float, ratio: float) -> int:
    return int(round_half_up(weight * ratio))


def generate_suggestions(
    result: MatchResult,
    *,
    candidate_projects: Sequence[ProjectRecord] | None = None,
) -> list[str]:
    suggestions: list[str] = []
    details = result.details
    breakdown = result.breakdown
    missing = details.missing_skills
    matched = details.matched_skills

    if missing:
        impact = _impact(40, len(missing) / (len(missing) + len(matched)))
        if len(missing) == 1:
            suggestions.append(
                f'Add "{missing[0]}" to your CV to increase skill match by ~{impact}%'
            )
        elif len(missing) <= 3:
            suggestions.append(
                f"Add these required skills to increase match score by ~{impact}%: "
                f"{', '.join(missing)}"
            )
        else:
            suggestions.append(
                f"Focus on adding these top required skills first: {', '.join(missing[:3])}. "
                f"This could increase your match score by ~{impact}%"
            )

    if details.experience_gap and breakdown.experience_score < 75:
        impact = _impact(25, 1 - breakdown.experience_score / 100)
        if breakdown.experience_score < 50:
            suggestions.append(
                f"Experience gap detected: {details.experience_gap}. Consider gaining more "
                f"experience or applying for junior-level positions. This gap reduces your "
                f"score by ~{impact}%"
            )
        else:
            suggestions.append(
                f"Experience level is slightly below requirement: {details.experience_gap}. "
                f"Highlight relevant projects and achievements to compensate. "
                f"Current impact: ~{impact}%"
            )

    if breakdown.title_score < 70:
        impact = _impact(20, 1 - breakdown.title_score / 100)
        if breakdown.title_score < 40:
            suggestions.append(
                f"Job title mismatch: {details.title_similarity}. Update your headline or "
                f'position titles to include keywords from the job title "{result.job_title}". '
                f"This could improve your score by ~{impact}%"
            )
        else:
            suggestions.append(
                f"Title similarity is moderate: {details.title_similarity}. Consider "
                f"emphasizing relevant keywords from the job title in your profile. "
                f"Potential improvement: ~{impact}%"
            )

    if not result.job_is_remote and breakdown.location_score < 100:
        impact = _impact(10, 1 - breakdown.location_score / 100)
        if breakdown.location_score < 50:
            suggestions.append(
                f"Location mismatch: {details.location_match}. Consider relocating or "
                f"applying for remote positions. Current impact: ~{impact}%"
            )
        else:
            suggestions.append(
                f"Location compatibility: {details.location_match}. If relocation is "
                f"possible, this could improve your match. Potential gain: ~{impact}%"
            )

    if details.extra_skills and not missing:
        suggestions.append(
            f"Great! You have additional skills ({', '.join(details.extra_skills[:3])}) "
            f"beyond the job requirements. Highlight these in your application to stand out."
        )

    if matched and not missing and breakdown.skill_score < 90:
        suggestions.append(
            f"You have the required skills. Consider highlighting your proficiency level "
            f'(e.g., "Expert in {matched[0]}") to maximize your skill score.'
        )

    if not details.bonus_factors and candidate_projects is not None and not candidate_projects:
        suggestions.append(
            "Add projects to your portfolio showcasing relevant technologies. This can "
            "provide a bonus score and demonstrate practical experience."
        )

    if result.match_score < 50:
        suggestions.append(
            f"Overall match score is {result.match_score:g}%. Focus on the highest-impact "
            f"improvements above (skills and experience) to significantly increase your match."
        )

    return suggestions[:MAX_SUGGESTIONS]


def generate_match_explanation(result: MatchResult) -> str:
    """Multi-line plain-text summary of a match result."""
    breakdown = result.breakdown
    details = result.details
    experience_note = f" ({details.experience_gap})" if details.experience_gap else ""

    lines = [
        f"Match Score: {result.match_score:g}%",
        "",
        "Breakdown:",
        f"- Skills: {breakdown.skill_score:g}% ({len(details.matched_skills)} matched, "
        f"{len(details.missing_skills)} missing)",
        f"- Experience: {breakdown.experience_score:g}%{experience_note}",
        f"- Title Similarity: {breakdown.title_score:g}%",
        f"- Education: {breakdown.education_score:g}%",
        f"- Soft Skills: {breakdown.soft_skills_score:g}%",
        f"- Technology: {breakdown.technology_score:g}%",
        f"- Location: {breakdown.location_score:g}%",
        f"- Bonus Factors: {breakdown.bonus_score:g}%",
        "",
    ]
    if details.matched_skills:
        lines.append(f"Matched Skills: {', '.join(details.matched_skills)}")
    if details.missing_skills:
        lines.append(f"Missing Required Skills: {', '.join(details.missing_skills)}")
    if details.extra_skills:
        lines.append(f"Extra Skills (Nice-to-have): {', '.join(details.extra_skills[:5])}")
    return "\n".join(lines).rstrip() + "\n"
