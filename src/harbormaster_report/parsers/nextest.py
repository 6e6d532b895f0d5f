# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parse ``cargo nextest`` status lines into unit results."""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path
from typing import Final

from ..core.errors import ArtifactDecodeError
from ..core.models import UnitKey, UnitResult
from .base import iter_pattern_matches, read_artifact_lines

NEXTEST_ENGINE: Final[str] = "cargo-nextest"
# STATUS [ duration s] namespace name, found anywhere in the line so retry
# prefixes such as "TRY 2 " are skipped. Names containing whitespace do not match.
NEXTEST_STATUS_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<status>[A-Z]+) \[\s*(?P<duration>[0-9.]+)s\] (?P<namespace>\S+) (?P<name>\S+)$"
)


def units_from_lines(lines: Sequence[str], *, path: Path = Path("<nextest>")) -> dict[UnitKey, UnitResult]:
    """Return unit results keyed by ``(namespace, name)``.

    nextest prints a fresh status line for every retry, so a later line for
    the same test replaces the earlier one.

    Args:
        lines: Output lines captured from ``cargo nextest``.
        path: Artifact the lines came from, used in error messages.

    Returns:
        dict[UnitKey, UnitResult]: Latest result for each test.

    Raises:
        ArtifactDecodeError: If a status line carries a malformed duration.
    """

    results: dict[UnitKey, UnitResult] = {}
    for match in iter_pattern_matches(lines, NEXTEST_STATUS_PATTERN, search=True):
        raw_duration = match.group("duration")
        try:
            duration = float(raw_duration)
        except ValueError as exc:
            raise ArtifactDecodeError(path, f"invalid test duration {raw_duration!r}") from exc
        namespace = match.group("namespace")
        name = match.group("name")
        results[(namespace, name)] = UnitResult(
            name=name,
            result=match.group("status").lower(),
            namespace=namespace,
            engine=NEXTEST_ENGINE,
            duration=duration,
        )
    return results


def parse_nextest_output(path: Path) -> dict[UnitKey, UnitResult]:
    """Parse the ``cargo nextest`` stderr capture stored at ``path``.

    Raises:
        ArtifactReadError: If ``path`` cannot be read.
        ArtifactDecodeError: If the file is not UTF-8 or a duration is malformed.
    """

    return units_from_lines(read_artifact_lines(path), path=path)


__all__ = [
    "NEXTEST_ENGINE",
    "NEXTEST_STATUS_PATTERN",
    "parse_nextest_output",
    "units_from_lines",
]
