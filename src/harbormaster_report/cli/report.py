# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command printing a Harbormaster build message for a cargo build step."""

from __future__ import annotations

from pathlib import Path
from typing import Final

import typer

from ..config import load_config
from ..core.errors import ReportError
from ..reporting import build_report, render_report
from .models import (
    BUILD_PHID_ARGUMENT,
    CHECK_JSON_OPTION,
    CLIPPY_JSON_OPTION,
    EMOJI_OPTION,
    NEXTEST_STDERR_OPTION,
    QUIET_OPTION,
    STATUS_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
    WORKSPACE_OPTION,
    LogOptions,
)

FAILURE_EXIT_CODE: Final[int] = 2


def report(
    build_phid: BUILD_PHID_ARGUMENT,
    token: TOKEN_OPTION,
    status: STATUS_OPTION,
    workspace: WORKSPACE_OPTION = Path(),
    clippy_json: CLIPPY_JSON_OPTION = None,
    check_json: CHECK_JSON_OPTION = None,
    nextest_stderr: NEXTEST_STDERR_OPTION = None,
    quiet: QUIET_OPTION = False,
    verbose: VERBOSE_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Print the ``harbormaster.sendmessage`` parameters for a build target.

    Lints are read from either --clippy-json or --check-json and unit results
    from --nextest-stderr. An artifact that cannot be parsed is logged and
    skipped; the status is always reported.
    """

    logger = LogOptions(quiet=quiet, verbose=verbose, use_emoji=emoji).build_logger()
    try:
        config = load_config(
            build_target_phid=build_phid,
            status=status,
            token=token,
            workspace=workspace,
            clippy_json=clippy_json,
            check_json=check_json,
            nextest_stderr=nextest_stderr,
        )
        document = render_report(build_report(config, logger))
    except ReportError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=FAILURE_EXIT_CODE) from exc
    typer.echo(document)


__all__ = ["FAILURE_EXIT_CODE", "report"]
