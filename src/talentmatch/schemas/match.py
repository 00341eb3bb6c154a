"""Output value types of the matching pipeline."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

_SCORE = {"ge": 0.0, "le": 100.0}


class MatchBreakdown(BaseModel):
    """Per-dimension sub-scores, each on a 0-100 scale."""

    skill_score: float = Field(**_SCORE)
    experience_score: float = Field(**_SCORE)
    title_score: float = Field(**_SCORE)
    education_score: float = Field(**_SCORE)
    soft_skills_score: float = Field(**_SCORE)
    technology_score: float = Field(**_SCORE)
    location_score: float = Field(**_SCORE)
    bonus_score: float = Field(**_SCORE)

    model_config = ConfigDict(extra="forbid", frozen=True)


class MatchDetails(BaseModel):
    """Explanations backing each sub-score."""

    matched_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    extra_skills: list[str] = Field(default_factory=list)
    experience_gap: str | None = None
    years_of_experience: float = 0.0
    title_similarity: str = ""
    education_match: str = ""
    degree_level: str = ""
    soft_skills_match: list[str] = Field(default_factory=list)
    soft_skills_gaps: list[str] = Field(default_factory=list)
    matched_technologies: list[str] = Field(default_factory=list)
    missing_technologies: list[str] = Field(default_factory=list)
    location_match: str = ""
    bonus_factors: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)


class MatchResult(BaseModel):
    """Complete candidate/job match with suggestions."""

    job_id: str = ""
    job_title: str = ""
    job_is_remote: bool = False
    candidate_id: str | None = None
    match_score: float = Field(**_SCORE)
    breakdown: MatchBreakdown
    details: MatchDetails
    suggestions: list[str] = Field(default_factory=list, max_length=5)

    model_config = ConfigDict(extra="forbid", frozen=True)


class RecommendedMatch(MatchResult):
    """Match result re-ranked with behaviour, preference and freshness boosts."""

    final_score: float = Field(le=100.0)
    behavior_boost: float = 0.0
    preference_boost: float = 0.0
    freshness_boost: float = 0.0


class ApplicationRecord(BaseModel):
    """A past application with the applied job's title and skills."""

    job_id: str
    status: str = "PENDING"
    job_title: str | None = None
    job_skills: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)


class CandidateActivity(BaseModel):
    """Interaction history of a candidate with job postings."""

    viewed_job_ids: list[str] = Field(default_factory=list)
    clicked_job_ids: list[str] = Field(default_factory=list)
    applications: list[ApplicationRecord] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def applied_job_ids(self) -> set[str]:
        return {app.job_id for app in self.applications if app.job_id}

    @property
    def rejected_job_ids(self) -> set[str]:
        return {
            app.job_id
            for app in self.applications
            if app.job_id and app.status.upper() in {"REJECTED", "WITHDRAWN"}
        }

    @property
    def applied_job_titles(self) -> list[str]:
        return [app.job_title for app in self.applications if app.job_title]

    @property
    def applied_job_skills(self) -> list[list[str]]:
        return [list(app.job_skills) for app in self.applications if app.job_skills]
