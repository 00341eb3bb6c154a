from __future__ import annotations

import json
from pathlib import Path

import pytest

INCIDENT_ANSWER_TEXT = (
    "The problem was a production incident where checkout latency reached 900 ms. "
    "My approach was to roll back the release, add an index, and the result was "
    "latency under 120 ms for example."
)


def build_dataset() -> dict:
    return {
        "candidates": [
            {
                "candidate_id": "C-1",
                "skills": ["Python", "Django"],
                "experiences": [
                    {
                        "company": "Acme",
                        "position": "Backend Engineer",
                        "start_date": "2015-01",
                        "end_date": "2024-12",
                    }
                ],
                "education": [{"degree": "Bachelor"}],
                "address": "Hanoi",
                "technologies": {"backend": ["Python", "Django"]},
            },
            {"candidate_id": "C-2", "skills": ["Excel"], "address": "Berlin"},
        ],
        "jobs": [
            {
                "job_id": "J-1",
                "title": "Backend Engineer",
                "description": "Build APIs with Python and Django.",
                "required_skills": ["python", "django"],
                "experience_level": "Senior",
                "location": "Hanoi",
                "published_at": "2025-01-08",
            },
            {
                "job_id": "J-2",
                "title": "Marketing Manager",
                "description": (
                    "Lead campaigns with creativity and communication using React, "
                    "Vue and Angular."
                ),
                "required_skills": ["SEO", "Copywriting"],
                "experience_level": "Lead",
                "location": "Berlin",
            },
        ],
        "activity": {
            "C-2": {"applications": [{"job_id": "J-1", "job_title": "Backend Engineer"}]}
        },
    }


@pytest.fixture
def dataset_path(tmp_path: Path) -> Path:
    path = tmp_path / "dataset.json"
    path.write_text(json.dumps(build_dataset(), ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def incident_answer() -> str:
    return INCIDENT_ANSWER_TEXT
