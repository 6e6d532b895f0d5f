# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Combine extractor results into a :class:`BuildReport`."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from ..config import ReportConfig
from ..core.errors import ArtifactError
from ..core.logging import ReportLogger
from ..core.models import BuildReport, BuildStatus, ConduitAuth, LintResult, UnitKey, UnitResult
from ..parsers import parse_cargo_messages, parse_nextest_output


def collect_lints(path: Path | None, workspace: Path, logger: ReportLogger) -> list[LintResult]:
    """Return the lints in ``path``, or nothing when it is absent or unparsable.

    Args:
        path: Cargo JSON message stream, or ``None`` when not supplied.
        workspace: Directory joined in front of each reported file name.
        logger: Sink receiving the warning for an unparsable artifact.

    Returns:
        list[LintResult]: Distinct lints, empty on failure.
    """

    if path is None:
        return []
    try:
        lints = parse_cargo_messages(path, workspace, logger=logger)
    except ArtifactError as exc:
        logger.warn(f"Failed to parse clippy/check lints: {exc}")
        return []
    logger.info(f"Collected {len(lints)} lint(s) from {path}")
    return lints


def collect_units(path: Path | None, logger: ReportLogger) -> dict[UnitKey, UnitResult]:
    """Return the unit results in ``path``, or nothing when it is absent or unparsable."""

    if path is None:
        return {}
    try:
        units = parse_nextest_output(path)
    except ArtifactError as exc:
        logger.warn(f"Failed to parse nextest results: {exc}")
        return {}
    logger.info(f"Collected {len(units)} unit result(s) from {path}")
    return units


def assemble_report(
    lints: Iterable[LintResult],
    units: Mapping[UnitKey, UnitResult],
    *,
    status: BuildStatus,
    build_target_phid: str,
    token: str,
) -> BuildReport:
    """Build the Harbormaster payload from extracted results.

    Unit results are ordered slowest first; a missing duration sorts as zero
    and ties keep their extraction order. Both result lists are always present,
    even when empty.

    Args:
        lints: Distinct lint results.
        units: Unit results keyed by ``(namespace, name)``.
        status: Build target state to report.
        build_target_phid: PHID of the Harbormaster build target.
        token: Conduit API token.

    Returns:
        BuildReport: The assembled payload.
    """

    ordered_units = sorted(units.values(), key=UnitResult.sort_duration, reverse=True)
    return BuildReport(
        build_target_phid=build_target_phid,
        status=status,
        unit=tuple(ordered_units),
        lint=tuple(lints),
        auth=ConduitAuth(token=token),
    )


def build_report(config: ReportConfig, logger: ReportLogger) -> BuildReport:
    """Parse the artifacts named in ``config`` and assemble the payload."""

    lints = collect_lints(config.lint_artifact, config.workspace, logger)
    units = collect_units(config.nextest_stderr, logger)
    return assemble_report(
        lints,
        units,
        status=config.status,
        build_target_phid=config.build_target_phid,
        token=config.token,
    )


__all__ = ["assemble_report", "build_report", "collect_lints", "collect_units"]
