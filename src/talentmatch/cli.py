"""Typer CLI entrypoint for the matching engine."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import read_yaml
from .container import create_container
from .dates import parse_datetime
from .logging import configure_logging
from .schemas import InterviewTurn, JobMatchRequirements
from .schemas.config import AppConfig, load_config
from .service import (
    CandidateNotFoundError,
    JobNotFoundError,
    MatchingService,
    OutputWriter,
    render_json,
    with_metadata,
)

app = typer.Typer(help="CV/job matching and interview evaluation CLI.")


def _dataset_option() -> Any:
    return typer.Option(..., exists=True, readable=True, dir_okay=False, help="Dataset JSON path.")


def _limit_option() -> Any:
    return typer.Option(None, help="Maximum number of results (1-50).")


def _output_option() -> Any:
    return typer.Option(
        None, dir_okay=False, resolve_path=True, help="Output JSON path (stdout when omitted)."
    )


def _as_of_option() -> Any:
    return typer.Option(None, help="Reference date (YYYY-MM or ISO) instead of now.")


def _config_option() -> Any:
    return typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path.")


def _log_level_option() -> Any:
    return typer.Option(None, help="Log level for structured logging.")


def _load_app_config(config: Optional[Path]) -> AppConfig:
    if not config:
        return AppConfig()
    try:
        return load_config(read_yaml(config))
    except (ValueError, ValidationError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Invalid config file: {exc}", param_hint="--config") from exc


def _build_service(
    *,
    config: Optional[Path],
    log_level: Optional[str],
    dataset: Optional[Path] = None,
) -> MatchingService:
    app_config = _load_app_config(config)
    configure_logging(log_level or app_config.logging.level)
    container = create_container(
        settings=app_config.to_settings(),
        dataset=str(dataset) if dataset else None,
    )
    return container.service()


def _read_json(path: Path, label: str) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON: {exc}", param_hint=f"--{label}") from exc


def _emit(payload: dict[str, Any], output: Optional[Path]) -> None:
    if output:
        OutputWriter().write(output, payload)
        typer.echo(f"Results saved to {output}.", err=True)
    else:
        typer.echo(render_json(payload))


def _fail(exc: Exception) -> typer.Exit:
    typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(code=1)


@app.command("match-jobs")
def match_jobs(
    dataset: Path = _dataset_option(),
    candidate_id: str = typer.Option(..., help="Candidate to match against published jobs."),
    limit: Optional[int] = _limit_option(),
    output: Optional[Path] = _output_option(),
    as_of: Optional[str] = _as_of_option(),
    config: Optional[Path] = _config_option(),
    log_level: Optional[str] = _log_level_option(),
) -> None:
    """Rank published jobs for a candidate."""
    try:
        service = _build_service(config=config, log_level=log_level, dataset=dataset)
        results = service.find_matching_jobs_for_candidate(
            candidate_id, limit, as_of=parse_datetime(as_of) if as_of else None
        )
    except (CandidateNotFoundError, ValueError) as exc:
        raise _fail(exc) from exc
    _emit(
        with_metadata(
            "match-jobs",
            [result.model_dump(mode="json") for result in results],
            candidate_id=candidate_id,
        ),
        output,
    )


@app.command("match-candidates")
def match_candidates(
    dataset: Path = _dataset_option(),
    job_id: str = typer.Option(..., help="Job to match against public candidates."),
    limit: Optional[int] = _limit_option(),
    output: Optional[Path] = _output_option(),
    as_of: Optional[str] = _as_of_option(),
    config: Optional[Path] = _config_option(),
    log_level: Optional[str] = _log_level_option(),
) -> None:
    """Rank public candidates for a job."""
    try:
        service = _build_service(config=config, log_level=log_level, dataset=dataset)
        results = service.find_matching_candidates_for_job(
            job_id, limit, as_of=parse_datetime(as_of) if as_of else None
        )
    except (JobNotFoundError, ValueError) as exc:
        raise _fail(exc) from exc
    _emit(
        with_metadata(
            "match-candidates",
            [result.model_dump(mode="json") for result in results],
            job_id=job_id,
        ),
        output,
    )


@app.command()
def recommend(
    dataset: Path = _dataset_option(),
    candidate_id: str = typer.Option(..., help="Candidate to build the job feed for."),
    limit: Optional[int] = _limit_option(),
    output: Optional[Path] = _output_option(),
    as_of: Optional[str] = _as_of_option(),
    config: Optional[Path] = _config_option(),
    log_level: Optional[str] = _log_level_option(),
) -> None:
    """Personalized job recommendations for a candidate."""
    try:
        service = _build_service(config=config, log_level=log_level, dataset=dataset)
        results = service.recommend_jobs_for_candidate(
            candidate_id, limit, as_of=parse_datetime(as_of) if as_of else None
        )
    except (CandidateNotFoundError, ValueError) as exc:
        raise _fail(exc) from exc
    _emit(
        with_metadata(
            "recommend",
            [result.model_dump(mode="json") for result in results],
            candidate_id=candidate_id,
        ),
        output,
    )


@app.command("evaluate-interview")
def evaluate_interview(
    turns: Path = typer.Option(
        ...,
        exists=True,
        readable=True,
        dir_okay=False,
        help="Interview JSON: a list of turns or {'transcript', 'turns'}.",
    ),
    job: Optional[Path] = typer.Option(
        None, exists=True, readable=True, dir_okay=False, help="Job posting JSON path."
    ),
    options: Optional[Path] = typer.Option(
        None, exists=True, readable=True, dir_okay=False, help="Evaluation options JSON path."
    ),
    output: Optional[Path] = _output_option(),
    config: Optional[Path] = _config_option(),
    log_level: Optional[str] = _log_level_option(),
) -> None:
    """Grade an interview transcript with the rule-based evaluator."""
    raw = _read_json(turns, "turns")
    if isinstance(raw, list):
        raw = {"turns": raw}
    if not isinstance(raw, dict):
        raise typer.BadParameter(
            "Interview file must hold a list or an object", param_hint="--turns"
        )

    client_options = _read_json(options, "options") if options else None
    if client_options is not None and not isinstance(client_options, dict):
        raise typer.BadParameter("Options file must hold an object", param_hint="--options")

    try:
        service = _build_service(config=config, log_level=log_level)
        parsed_turns = [InterviewTurn.model_validate(item) for item in raw.get("turns") or []]
        job_record = JobMatchRequirements.model_validate(_read_json(job, "job")) if job else None
        transcript = raw.get("transcript") or _join_transcript(parsed_turns)
        feedback = service.evaluate_interview(
            transcript,
            parsed_turns,
            job=job_record,
            client_options=client_options,
        )
    except ValueError as exc:
        raise _fail(exc) from exc

    _emit(
        with_metadata(
            "evaluate-interview",
            feedback.model_dump(mode="json"),
            job_id=job_record.job_id if job_record else None,
        ),
        output,
    )


def _join_transcript(turns: list[InterviewTurn]) -> str:
    lines: list[str] = []
    for turn in sorted(turns, key=lambda item: item.order_index):
        lines.append(f"Q: {turn.question_text}")
        lines.append(f"A: {turn.answer_text or ''}")
    return "\n".join(lines)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
