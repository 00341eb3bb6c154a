from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from talentmatch.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def write_json(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")


def test_match_jobs_writes_output(tmp_path: Path, dataset_path: Path, runner: CliRunner) -> None:
    output_path = tmp_path / "out" / "matches.json"

    result = runner.invoke(
        app,
        [
            "match-jobs",
            "--dataset",
            str(dataset_path),
            "--candidate-id",
            "C-1",
            "--as-of",
            "2025-01-10",
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["metadata"]["command"] == "match-jobs"
    assert payload["metadata"]["candidate_id"] == "C-1"
    assert [item["job_id"] for item in payload["results"]] == ["J-1", "J-2"]
    assert payload["results"][0]["match_score"] == pytest.approx(95.2)


def test_recommend_prints_json(dataset_path: Path, runner: CliRunner) -> None:
    result = runner.invoke(
        app,
        [
            "recommend",
            "--dataset",
            str(dataset_path),
            "--candidate-id",
            "C-1",
            "--as-of",
            "2025-01-10",
            "--log-level",
            "WARNING",
        ],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert [item["job_id"] for item in payload["results"]] == ["J-1"]
    assert payload["results"][0]["final_score"] == pytest.approx(99.2)


def test_match_candidates_with_config(tmp_path: Path, dataset_path: Path, runner: CliRunner) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("service:\n  default_limit: 1\n", encoding="utf-8")
    output_path = tmp_path / "candidates.json"

    result = runner.invoke(
        app,
        [
            "match-candidates",
            "--dataset",
            str(dataset_path),
            "--job-id",
            "J-1",
            "--config",
            str(config_path),
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert [item["candidate_id"] for item in payload["results"]] == ["C-1"]


def test_unknown_candidate_fails(dataset_path: Path, runner: CliRunner) -> None:
    result = runner.invoke(
        app,
        ["match-jobs", "--dataset", str(dataset_path), "--candidate-id", "C-404"],
    )

    assert result.exit_code == 1
    assert "Candidate not found" in result.output


def test_limit_out_of_range_fails(dataset_path: Path, runner: CliRunner) -> None:
    result = runner.invoke(
        app,
        ["recommend", "--dataset", str(dataset_path), "--candidate-id", "C-1", "--limit", "99"],
    )

    assert result.exit_code == 1
    assert "limit must be between 1 and 50" in result.output


def test_evaluate_interview_command(
    tmp_path: Path, runner: CliRunner, incident_answer: str
) -> None:
    turns_path = tmp_path / "interview.json"
    options_path = tmp_path / "options.json"
    output_path = tmp_path / "feedback.json"
    write_json(
        turns_path,
        {
            "transcript": "Q: Tell me about a production incident.",
            "turns": [
                {
                    "orderIndex": 1,
                    "questionText": "Tell me about a production incident.",
                    "answerText": incident_answer,
                }
            ],
        },
    )
    write_json(options_path, {"seniority": "JUNIOR"})

    result = runner.invoke(
        app,
        [
            "evaluate-interview",
            "--turns",
            str(turns_path),
            "--options",
            str(options_path),
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["metadata"]["command"] == "evaluate-interview"
    assert payload["results"]["overall_score"] == 70
    assert payload["results"]["recommendation"] == "CONSIDER"
    assert payload["results"]["per_question"][0]["score"] == 7


def test_evaluate_interview_rejects_scalar_payload(tmp_path: Path, runner: CliRunner) -> None:
    turns_path = tmp_path / "interview.json"
    write_json(turns_path, "just text")

    result = runner.invoke(app, ["evaluate-interview", "--turns", str(turns_path)])

    assert result.exit_code == 2
    assert "--turns" in result.output


def test_evaluate_interview_rejects_non_object_options(tmp_path: Path, runner: CliRunner) -> None:
    turns_path = tmp_path / "interview.json"
    options_path = tmp_path / "options.json"
    write_json(turns_path, [{"order_index": 1, "question_text": "Why us?", "answer_text": "Fit."}])
    write_json(options_path, ["not", "object"])

    result = runner.invoke(
        app, ["evaluate-interview", "--turns", str(turns_path), "--options", str(options_path)]
    )

    assert result.exit_code == 2
    assert "--options" in result.output
    assert not isinstance(result.exception, TypeError)


def test_evaluate_interview_rejects_invalid_json(tmp_path: Path, runner: CliRunner) -> None:
    turns_path = tmp_path / "interview.json"
    turns_path.write_text("{broken", encoding="utf-8")

    result = runner.invoke(app, ["evaluate-interview", "--turns", str(turns_path)])

    assert result.exit_code == 2
    assert "Invalid JSON" in result.output


@pytest.mark.parametrize(
    "content",
    ["- just\n- a list\n", "service:\n  default_limit: 0\n", "service: [unclosed\n"],
)
def test_invalid_config_is_a_usage_error(
    tmp_path: Path, dataset_path: Path, runner: CliRunner, content: str
) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(content, encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "match-jobs",
            "--dataset",
            str(dataset_path),
            "--candidate-id",
            "C-1",
            "--config",
            str(config_path),
        ],
    )

    assert result.exit_code == 2
    assert "Invalid config file" in result.output
