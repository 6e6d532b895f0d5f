# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Smoke tests for the harbormaster-report command line."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

from click.testing import Result
from typer.testing import CliRunner

from harbormaster_report.cli import app

MessageFactory = Callable[..., str]
WriteArtifact = Callable[[str, str], Path]


def _invoke(args: list[str], *, token: str | None = "api-token") -> Result:
    runner = CliRunner()
    return runner.invoke(app, args, env={"PHAB_TOKEN": token})


def test_no_artifacts_reports_status() -> None:
    result = _invoke(["--quiet", "--status", "pass", "PHID-HMBT-1"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "buildTargetPHID": "PHID-HMBT-1",
        "type": "pass",
        "unit": [],
        "lint": [],
        "__conduit__": {"token": "api-token"},
    }


def test_token_option_overrides_environment() -> None:
    result = _invoke(["--quiet", "--status", "work", "--token", "cli-token", "PHID-HMBT-2"], token="env-token")

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["__conduit__"] == {"token": "cli-token"}


def test_artifacts_are_merged(write_artifact: WriteArtifact, make_message: MessageFactory) -> None:
    clippy = write_artifact(
        "clippy.json",
        "\n".join([make_message(), make_message(), make_message(code=None, message="2 warnings emitted")]),
    )
    nextest = write_artifact(
        "nextest.stderr",
        "        PASS [   0.004s] mycrate::tests test_add\n"
        "        FAIL [   0.800s] mycrate::tests test_div\n",
    )

    result = _invoke(
        [
            "--quiet",
            "--status",
            "fail",
            "--workspace",
            "rust",
            "--clippy-json",
            str(clippy),
            "--nextest-stderr",
            str(nextest),
            "PHID-HMBT-3",
        ]
    )

    assert result.exit_code == 0, result.output
    document = json.loads(result.stdout)
    assert document["type"] == "fail"
    assert [unit["name"] for unit in document["unit"]] == ["test_div", "test_add"]
    assert document["unit"][0]["engine"] == "cargo-nextest"
    assert document["lint"] == [
        {
            "name": "cargo-clippy",
            "code": "clippy::needless_return",
            "severity": "Warning",
            "path": "rust/src/lib.rs",
            "line": 3,
            "description": "unneeded `return` statement",
        }
    ]


def test_unreadable_artifact_is_logged_and_skipped(tmp_path: Path) -> None:
    result = _invoke(
        ["--no-emoji", "--status", "pass", "--check-json", str(tmp_path / "missing.json"), "PHID-HMBT-4"]
    )

    assert result.exit_code == 0, result.output
    assert "Failed to parse clippy/check lints" in result.output


def test_clippy_and_check_conflict(tmp_path: Path) -> None:
    result = _invoke(
        [
            "--status",
            "pass",
            "--clippy-json",
            str(tmp_path / "a.json"),
            "--check-json",
            str(tmp_path / "b.json"),
            "PHID-HMBT-5",
        ]
    )

    assert result.exit_code == 2
    assert "mutually exclusive" in result.output


def test_missing_token_fails() -> None:
    result = _invoke(["--status", "pass", "PHID-HMBT-6"], token=None)

    assert result.exit_code == 2


def test_blank_token_fails() -> None:
    result = _invoke(["--status", "pass", "PHID-HMBT-6"], token="  ")

    assert result.exit_code == 2
    assert "token" in result.output


def test_invalid_status_fails() -> None:
    result = _invoke(["--status", "done", "PHID-HMBT-7"])

    assert result.exit_code == 2


def test_status_is_case_insensitive() -> None:
    result = _invoke(["--quiet", "--status", "RESTART", "PHID-HMBT-8"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["type"] == "restart"
