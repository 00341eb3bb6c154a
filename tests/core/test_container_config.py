from __future__ import annotations

import pytest
from pydantic import ValidationError

from talentmatch.config import ConfigManager
from talentmatch.container import create_container
from talentmatch.schemas.config import AppConfig, load_config
from talentmatch.service import DEFAULT_LIMIT, MAX_LIMIT


def test_create_container_with_overrides():
    container = create_container(
        settings={
            "service": {"default_limit": 5, "max_limit": 20},
            "matching": {"job_fetch_limit": 30, "candidate_fetch_limit": 40},
            "recommendation": {"fetch_limit": 60, "min_final_score": 45},
        }
    )

    service = container.service()
    ranker = container.ranker()

    assert service._default_limit == 5
    assert service._max_limit == 20
    assert service._job_fetch_limit == 30
    assert service._candidate_fetch_limit == 40
    assert service._recommendation_fetch_limit == 60
    assert ranker._config.min_final_score == 45.0


def test_create_container_defaults():
    container = create_container()

    service = container.service()

    assert service._default_limit == DEFAULT_LIMIT
    assert service._max_limit == MAX_LIMIT
    assert container.ranker()._config.min_final_score == 30.0
    assert container.scorer() is container.scorer()


def test_load_config_validation():
    data = {
        "logging": {"level": "DEBUG"},
        "service": {"default_limit": 15},
        "recommendation": {"min_final_score": 25.5},
    }
    app_config = load_config(data)
    assert isinstance(app_config, AppConfig)
    assert app_config.logging.level == "DEBUG"

    settings = app_config.to_settings()
    assert settings == {
        "recommendation": {"min_final_score": 25.5},
        "service": {"default_limit": 15},
    }
    assert load_config(None).to_settings() == {}


def test_load_config_rejects_invalid_values():
    with pytest.raises(ValidationError):
        load_config({"service": {"default_limit": 0}})
    with pytest.raises(ValidationError):
        load_config(["not", "a", "mapping"])


def test_config_manager_reads_yaml(tmp_path):
    (tmp_path / "app.yaml").write_text(
        "service:\n  max_limit: 25\nmatching:\n  job_fetch_limit: 50\n", encoding="utf-8"
    )
    (tmp_path / "broken.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    manager = ConfigManager(tmp_path)

    app_config = manager.load_app_config("app")

    assert app_config.service.max_limit == 25
    assert app_config.matching.job_fetch_limit == 50
    with pytest.raises(ValueError):
        manager.load("broken")
