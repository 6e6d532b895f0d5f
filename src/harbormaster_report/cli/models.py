# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data structures for the report CLI command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Final

import typer

from ..core.logging import LogLevel, ReportLogger
from ..core.models import BuildStatus

TOKEN_ENV_VAR: Final[str] = "PHAB_TOKEN"

BUILD_PHID_ARGUMENT = Annotated[
    str,
    typer.Argument(metavar="BUILD_PHID", help="Build target PHID (PHID-HMBT-...)."),
]
TOKEN_OPTION = Annotated[
    str,
    typer.Option("--token", envvar=TOKEN_ENV_VAR, show_envvar=True, help="Phabricator API token."),
]
STATUS_OPTION = Annotated[
    BuildStatus,
    typer.Option("--status", case_sensitive=False, help="Build status to report."),
]
WORKSPACE_OPTION = Annotated[
    Path,
    typer.Option(
        "--workspace",
        help="Path to the rust workspace relative to the repository root.",
        show_default=False,
    ),
]
CLIPPY_JSON_OPTION = Annotated[
    Path | None,
    typer.Option("--clippy-json", help="Path to 'cargo clippy --message-format=json' output."),
]
CHECK_JSON_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--check-json",
        help="Path to 'cargo check --message-format=json' output. Conflicts with --clippy-json.",
    ),
]
NEXTEST_STDERR_OPTION = Annotated[
    Path | None,
    typer.Option("--nextest-stderr", help="Path to 'cargo nextest' stderr output."),
]
QUIET_OPTION = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Only log warnings and errors."),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Also log skipped diagnostics."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]


@dataclass(slots=True)
class LogOptions:
    """Normalised logging preferences from the command line."""

    quiet: bool
    verbose: bool
    use_emoji: bool

    def build_logger(self) -> ReportLogger:
        """Return the :class:`ReportLogger` matching these preferences."""

        if self.quiet:
            level = LogLevel.WARNING
        elif self.verbose:
            level = LogLevel.DEBUG
        else:
            level = LogLevel.INFO
        return ReportLogger(use_emoji=self.use_emoji, level=level)


__all__ = [
    "BUILD_PHID_ARGUMENT",
    "CHECK_JSON_OPTION",
    "CLIPPY_JSON_OPTION",
    "EMOJI_OPTION",
    "LogOptions",
    "NEXTEST_STDERR_OPTION",
    "QUIET_OPTION",
    "STATUS_OPTION",
    "TOKEN_ENV_VAR",
    "TOKEN_OPTION",
    "VERBOSE_OPTION",
    "WORKSPACE_OPTION",
]
