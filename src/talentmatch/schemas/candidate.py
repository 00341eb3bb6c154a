"""Candidate-side value types consumed by the matching core."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..dates import coerce_optional_datetime, parse_datetime


class WorkExperience(BaseModel):
    """Employment history entry. ``is_current`` means the end date is ignored."""

    company: str = ""
    position: str = ""
    start_date: datetime
    end_date: datetime | None = None
    is_current: bool = False

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("start_date", mode="before")
    @classmethod
    def _parse_start(cls, value: object) -> datetime:
        return parse_datetime(value)

    @field_validator("end_date", mode="before")
    @classmethod
    def _parse_end(cls, value: object) -> datetime | None:
        return coerce_optional_datetime(value)


class EducationRecord(BaseModel):
    """Structured education history entry."""

    degree: str | None = None
    field_of_study: str | None = None
    institution: str | None = None
    graduation_year: int | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class ProjectRecord(BaseModel):
    """Portfolio project with the technologies it used."""

    name: str | None = None
    technologies: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)


class SoftSkillLevels(BaseModel):
    """Self-reported soft-skill levels on a 0-10 scale."""

    communication: float | None = Field(default=None, ge=0, le=10)
    leadership: float | None = Field(default=None, ge=0, le=10)
    problem_solving: float | None = Field(default=None, ge=0, le=10)
    adaptability: float | None = Field(default=None, ge=0, le=10)
    creativity: float | None = Field(default=None, ge=0, le=10)
    attention_to_detail: float | None = Field(default=None, ge=0, le=10)

    model_config = ConfigDict(extra="forbid", frozen=True)


class TechnologyStack(BaseModel):
    """Technologies grouped by the analyzer's categories."""

    frontend: list[str] = Field(default_factory=list)
    backend: list[str] = Field(default_factory=list)
    database: list[str] = Field(default_factory=list)
    cloud: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)


class CandidatePreferences(BaseModel):
    """Job-seeking preferences used by the recommendation ranker."""

    preferred_job_types: list[str] = Field(default_factory=list)
    prefers_remote: bool | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class CandidateMatchProfile(BaseModel):
    """Provider-neutral candidate document used for matching."""

    candidate_id: str = ""
    skills: list[str] = Field(default_factory=list)
    experiences: list[WorkExperience] = Field(default_factory=list)
    education: list[EducationRecord] = Field(default_factory=list)
    headline: str | None = None
    address: str | None = None
    projects: list[ProjectRecord] = Field(default_factory=list)
    soft_skills: SoftSkillLevels | None = None
    technologies: TechnologyStack | None = None
    preferences: CandidatePreferences = Field(default_factory=CandidatePreferences)
    is_public: bool = True

    model_config = ConfigDict(extra="forbid", frozen=True)

    def most_recent_title(self) -> str | None:
        """Position of the latest-started experience, else the headline."""
        if self.experiences:
            latest = max(self.experiences, key=lambda exp: exp.start_date)
            if latest.position:
                return latest.position
        return self.headline or None

    def prefers_remote(self) -> bool:
        if self.preferences.prefers_remote is not None:
            return self.preferences.prefers_remote
        return "remote" in (self.address or "").lower()
