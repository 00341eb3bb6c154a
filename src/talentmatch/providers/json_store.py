"""JSON dataset provider.

The dataset is a single JSON document::

    {
      "candidates": [{...CandidateMatchProfile...}],
      "jobs": [{...JobMatchRequirements...}],
      "activity": {"<candidate_id>": {...CandidateActivity...}}
    }
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, TypeVar

import pendulum
import structlog
from pydantic import BaseModel, ValidationError

from ..dates import parse_datetime
from ..schemas import CandidateActivity, CandidateMatchProfile, JobMatchRequirements

ModelT = TypeVar("ModelT", bound=BaseModel)

_OLDEST = pendulum.datetime(1970, 1, 1)


class DatasetLoadError(ValueError):
    """Raised when a dataset cannot be read or holds invalid records."""

    def __init__(self, message: str, errors: Iterable[str] = ()) -> None:
        self.errors = list(errors)
        detail = "; ".join(self.errors)
        super().__init__(f"{message}: {detail}" if detail else message)


class JsonDataProvider:
    """In-memory provider backed by a JSON dataset."""

    def __init__(
        self,
        candidates: Iterable[CandidateMatchProfile] = (),
        jobs: Iterable[JobMatchRequirements] = (),
        activity: dict[str, CandidateActivity] | None = None,
    ) -> None:
        self._candidates = {candidate.candidate_id: candidate for candidate in candidates}
        self._jobs = {job.job_id: job for job in jobs}
        self._activity = dict(activity or {})
        self._logger = structlog.get_logger(__name__)

    @classmethod
    def from_path(cls, path: str | Path) -> JsonDataProvider:
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise DatasetLoadError(f"Cannot read dataset {path}", [str(exc)]) from exc
        except json.JSONDecodeError as exc:
            raise DatasetLoadError(f"Invalid JSON in dataset {path}", [str(exc)]) from exc
        return cls.from_dict(raw)

    @classmethod
    def from_dict(cls, raw: Any) -> JsonDataProvider:
        if not isinstance(raw, dict):
            raise DatasetLoadError("Dataset must be a JSON object")

        errors: list[str] = []
        candidates = _parse_records(
            raw.get("candidates") or [], CandidateMatchProfile, "candidates", errors
        )
        jobs = _parse_records(raw.get("jobs") or [], JobMatchRequirements, "jobs", errors)

        activity: dict[str, CandidateActivity] = {}
        raw_activity = raw.get("activity") or {}
        if not isinstance(raw_activity, dict):
            errors.append("activity: must be an object keyed by candidate id")
        else:
            for candidate_id, payload in raw_activity.items():
                try:
                    activity[str(candidate_id)] = CandidateActivity.model_validate(payload)
                except ValidationError as exc:
                    errors.append(f"activity[{candidate_id}]: {_first_error(exc)}")

        if errors:
            raise DatasetLoadError("Dataset contains invalid records", errors)

        provider = cls(candidates, jobs, activity)
        provider._logger.debug(
            "dataset.loaded",
            candidates=len(candidates),
            jobs=len(jobs),
            activity=len(activity),
        )
        return provider

    def get_candidate(self, candidate_id: str) -> CandidateMatchProfile | None:
        return self._candidates.get(candidate_id)

    def get_job(self, job_id: str) -> JobMatchRequirements | None:
        return self._jobs.get(job_id)

    def list_published_jobs(self, limit: int) -> list[JobMatchRequirements]:
        return [job for job in self._jobs.values() if job.status == "PUBLISHED"][:limit]

    def list_active_jobs(self, limit: int, as_of: datetime) -> list[JobMatchRequirements]:
        now = parse_datetime(as_of)
        active = [
            job
            for job in self._jobs.values()
            if job.status == "PUBLISHED" and (job.deadline is None or job.deadline >= now)
        ]
        active.sort(key=lambda job: job.published_at or _OLDEST, reverse=True)
        return active[:limit]

    def list_public_candidates(self, limit: int) -> list[CandidateMatchProfile]:
        return [candidate for candidate in self._candidates.values() if candidate.is_public][:limit]

    def get_candidate_activity(self, candidate_id: str) -> CandidateActivity:
        return self._activity.get(candidate_id) or CandidateActivity()


def _parse_records(
    items: Any,
    model: type[ModelT],
    section: str,
    errors: list[str],
) -> list[ModelT]:
    if not isinstance(items, list):
        errors.append(f"{section}: must be a list")
        return []
    records: list[ModelT] = []
    for index, item in enumerate(items):
        try:
            records.append(model.model_validate(item))
        except ValidationError as exc:
            errors.append(f"{section}[{index}]: {_first_error(exc)}")
    return records


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error.get('msg')}" if location else str(error.get("msg"))
