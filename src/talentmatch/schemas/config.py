"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError


class LoggingConfig(BaseModel):
    level: str = "INFO"


class MatchingConfig(BaseModel):
    job_fetch_limit: int | None = Field(default=None, ge=1)
    candidate_fetch_limit: int | None = Field(default=None, ge=1)


class RecommendationConfig(BaseModel):
    fetch_limit: int | None = Field(default=None, ge=1)
    min_final_score: float | None = Field(default=None, ge=0, le=100)


class ServiceConfig(BaseModel):
    default_limit: int | None = Field(default=None, ge=1)
    max_limit: int | None = Field(default=None, ge=1)


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    recommendation: RecommendationConfig = Field(default_factory=RecommendationConfig)
    service: ServiceConfig = Field(default_factory=ServiceConfig)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        for section in ("matching", "recommendation", "service"):
            values = getattr(self, section).model_dump(exclude_none=True)
            if values:
                settings[section] = values
        return settings


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
