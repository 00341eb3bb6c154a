from __future__ import annotations

import json

import pendulum
import pytest

from talentmatch.providers import DatasetLoadError, JsonDataProvider, MatchingDataProvider

AS_OF = pendulum.datetime(2025, 1, 10)


def build_dataset() -> dict:
    return {
        "candidates": [
            {"candidate_id": "C-1", "skills": ["Python"]},
            {"candidate_id": "C-2", "skills": ["Go"], "is_public": False},
        ],
        "jobs": [
            {"job_id": "J-old", "title": "Old", "published_at": "2024-11-01"},
            {
                "job_id": "J-new",
                "title": "New",
                "published_at": "2025-01-08",
                "deadline": "2025-02-01",
            },
            {"job_id": "J-expired", "title": "Expired", "deadline": "2025-01-01"},
            {"job_id": "J-draft", "title": "Draft", "status": "DRAFT"},
        ],
        "activity": {
            "C-1": {"viewed_job_ids": ["J-new"], "applications": [{"job_id": "J-old"}]}
        },
    }


def test_provider_lookups():
    provider = JsonDataProvider.from_dict(build_dataset())

    assert isinstance(provider, MatchingDataProvider)
    assert provider.get_candidate("C-1").skills == ["Python"]
    assert provider.get_candidate("missing") is None
    assert provider.get_job("J-new").title == "New"
    assert [c.candidate_id for c in provider.list_public_candidates(10)] == ["C-1"]
    assert provider.get_candidate_activity("C-1").applied_job_ids == {"J-old"}
    assert provider.get_candidate_activity("C-2").applications == []


def test_published_and_active_jobs():
    provider = JsonDataProvider.from_dict(build_dataset())

    published = [job.job_id for job in provider.list_published_jobs(10)]
    active = [job.job_id for job in provider.list_active_jobs(10, AS_OF)]

    assert published == ["J-old", "J-new", "J-expired"]
    assert active == ["J-new", "J-old"]
    assert [job.job_id for job in provider.list_active_jobs(1, AS_OF)] == ["J-new"]


def test_invalid_records_are_collected():
    dataset = build_dataset()
    dataset["candidates"].append({"candidate_id": "C-3", "experiences": [{"start_date": "soon"}]})
    dataset["jobs"].append({"job_id": "J-bad", "unexpected": True})
    dataset["activity"]["C-9"] = {"applications": [{"status": "PENDING"}]}

    with pytest.raises(DatasetLoadError) as excinfo:
        JsonDataProvider.from_dict(dataset)

    errors = excinfo.value.errors
    assert len(errors) == 3
    assert errors[0].startswith("candidates[2]: experiences.0.start_date")
    assert errors[1].startswith("jobs[4]: unexpected")
    assert errors[2].startswith("activity[C-9]: applications.0.job_id")


def test_from_path(tmp_path):
    path = tmp_path / "dataset.json"
    path.write_text(json.dumps(build_dataset()), encoding="utf-8")
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")

    assert JsonDataProvider.from_path(path).get_job("J-old") is not None
    with pytest.raises(DatasetLoadError, match="Invalid JSON"):
        JsonDataProvider.from_path(broken)
    with pytest.raises(DatasetLoadError, match="Cannot read dataset"):
        JsonDataProvider.from_path(tmp_path / "missing.json")
    with pytest.raises(DatasetLoadError, match="must be a JSON object"):
        JsonDataProvider.from_dict([])
