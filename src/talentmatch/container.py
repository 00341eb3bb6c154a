"""Dependency injection container for the matching engine."""

from __future__ import annotations

from typing import Any

from dependency_injector import containers, providers

from .core import MatchScorer, RecommendationConfig, RecommendationRanker
from .core.scoring import default_evaluators
from .interview import RuleBasedInterviewEvaluator
from .providers import JsonDataProvider
from .service import MatchingService

# settings section -> {setting name: MatchingService keyword}
SERVICE_SETTINGS: dict[str, dict[str, str]] = {
    "service": {"default_limit": "default_limit", "max_limit": "max_limit"},
    "matching": {
        "job_fetch_limit": "job_fetch_limit",
        "candidate_fetch_limit": "candidate_fetch_limit",
    },
    "recommendation": {"fetch_limit": "recommendation_fetch_limit"},
}


class MatchingContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    data_provider = providers.Singleton(JsonDataProvider)

    evaluators = providers.Callable(default_evaluators)

    scorer = providers.Singleton(MatchScorer, evaluators=evaluators)

    recommendation_config = providers.Singleton(RecommendationConfig)

    ranker = providers.Singleton(
        RecommendationRanker,
        scorer=scorer,
        config=recommendation_config,
    )

    interview_evaluator = providers.Singleton(RuleBasedInterviewEvaluator)

    service = providers.Factory(
        MatchingService,
        provider=data_provider,
        scorer=scorer,
        ranker=ranker,
        interview_evaluator=interview_evaluator,
    )


def create_container(
    *,
    settings: dict[str, Any] | None = None,
    dataset: str | None = None,
) -> MatchingContainer:
    """Instantiate container with optional overrides."""

    container = MatchingContainer()

    if dataset is not None:
        container.data_provider.override(
            providers.Singleton(JsonDataProvider.from_path, dataset)
        )

    if not settings:
        return container

    service_kwargs: dict[str, Any] = {}
    for section, mapping in SERVICE_SETTINGS.items():
        values = settings.get(section) or {}
        for name, keyword in mapping.items():
            if values.get(name) is not None:
                service_kwargs[keyword] = int(values[name])
    if service_kwargs:
        container.service.add_kwargs(**service_kwargs)

    recommendation_settings = settings.get("recommendation") or {}
    if recommendation_settings.get("min_final_score") is not None:
        container.recommendation_config.override(
            providers.Singleton(
                RecommendationConfig,
                min_final_score=float(recommendation_settings["min_final_score"]),
            )
        )

    return container
