from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..dates import coerce_optional_datetime


class EducationRequirements(BaseModel):
    """Degree and school preferences attached to a job posting."""

    required_degree: str | None = None
    preferred_degree: str | None = None
    required_field: str | None = None
    preferred_schools: list[str] = Field(default_factory=list)
    description: str | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class JobMatchRequirements(BaseModel):
    """Provider-neutral job posting schema."""

    job_id: str = ""
    title: str = ""
    description: str = ""
    requirements: str = ""
    responsibilities: str = ""
    benefits: str = ""
    required_skills: list[str] = Field(default_factory=list)
    optional_skills: list[str] = Field(default_factory=list)
    experience_level: str | None = None
    education: EducationRequirements = Field(default_factory=EducationRequirements)
    location: str | None = None
    is_remote: bool = False
    job_type: str | None = None
    status: str = "PUBLISHED"
    published_at: datetime | None = None
    deadline: datetime | None = None
    categories: list[str] = Field(default_factory=list)
    interview_questions: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("published_at", "deadline", mode="before")
    @classmethod
    def _parse_dates(cls, value: object) -> datetime | None:
        return coerce_optional_datetime(value)

    @property
    def all_skills(self) -> list[str]:
        return [*self.required_skills, *self.optional_skills]
