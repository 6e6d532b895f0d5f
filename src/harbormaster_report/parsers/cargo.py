# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parse ``cargo --message-format=json`` streams into lint results."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Final

from ..core.logging import ReportLogger
from ..core.models import JsonValue, LintResult
from .base import (
    coerce_optional_int,
    decode_text,
    first_mapping,
    iter_json_objects,
    mapping_sequence,
    read_artifact_bytes,
    split_lines,
)

COMPILER_MESSAGE_REASON: Final[str] = "compiler-message"
CLIPPY_CODE_MARKER: Final[str] = "clippy"
CLIPPY_SOURCE: Final[str] = "cargo-clippy"
CHECK_SOURCE: Final[str] = "cargo-check"

# rustc level strings mapped to the names Harbormaster receives as severity.
DIAGNOSTIC_LEVELS: Final[dict[str, str]] = {
    "error: internal compiler error": "Ice",
    "error": "Error",
    "warning": "Warning",
    "failure-note": "FailureNote",
    "note": "Note",
    "help": "Help",
}


def classify_source(code: str) -> str:
    """Return the lint source name for a diagnostic ``code``.

    Clippy prefixes its lint codes with ``clippy::``; everything else comes
    from rustc itself and is reported as ``cargo-check``.
    """

    return CLIPPY_SOURCE if CLIPPY_CODE_MARKER in code else CHECK_SOURCE


def parse_compiler_message(
    record: Mapping[str, JsonValue],
    workspace: Path,
    *,
    logger: ReportLogger | None = None,
) -> LintResult | None:
    """Convert one cargo message into a :class:`LintResult`.

    Args:
        record: Decoded JSON message from the cargo stream.
        workspace: Directory joined in front of each span's file name.
        logger: Optional sink for messages that are skipped.

    Returns:
        LintResult | None: The lint, or ``None`` when the message is not a
        coded compiler diagnostic.
    """

    if record.get("reason") != COMPILER_MESSAGE_REASON:
        return None
    diagnostic = first_mapping(record.get("message"))
    if diagnostic is None:
        return None
    message = diagnostic.get("message")
    level = diagnostic.get("level")
    spans = mapping_sequence(diagnostic.get("spans"))
    if not isinstance(message, str) or not isinstance(level, str) or spans is None:
        return None
    severity = DIAGNOSTIC_LEVELS.get(level)
    if severity is None:
        return None
    code_mapping = first_mapping(diagnostic.get("code"))
    if code_mapping is None:
        return None
    code = code_mapping.get("code")
    if not isinstance(code, str):
        return None
    if not spans:
        if logger is not None:
            logger.debug(f"Skipping {code} without a source span: {message}")
        return None
    span = spans[0]
    file_name = span.get("file_name")
    if not isinstance(file_name, str):
        return None
    return LintResult(
        name=classify_source(code),
        code=code,
        severity=severity,
        path=str(workspace / file_name),
        line=coerce_optional_int(span.get("line_start")),
        description=message,
    )


def lints_from_lines(
    lines: Sequence[str],
    workspace: Path,
    *,
    logger: ReportLogger | None = None,
) -> list[LintResult]:
    """Return the distinct lints found in a cargo JSON message stream.

    Args:
        lines: Lines of the message stream.
        workspace: Directory joined in front of each span's file name.
        logger: Optional sink for messages that are skipped.

    Returns:
        list[LintResult]: Lints in first-seen order with exact duplicates removed.
    """

    seen: dict[LintResult, None] = {}
    for record in iter_json_objects(lines):
        lint = parse_compiler_message(record, workspace, logger=logger)
        if lint is not None:
            seen.setdefault(lint, None)
    return list(seen)


def parse_cargo_messages(
    path: Path,
    workspace: Path = Path(),
    *,
    logger: ReportLogger | None = None,
) -> list[LintResult]:
    """Parse the ``cargo clippy`` or ``cargo check`` JSON output stored at ``path``.

    Both commands emit the same message format; whether a lint came from
    clippy is decided from its code, not from which file was supplied.

    Args:
        path: File holding ``--message-format=json`` output.
        workspace: Directory joined in front of each span's file name.
        logger: Optional sink for messages that are skipped.

    Returns:
        list[LintResult]: Distinct lints in first-seen order.

    Raises:
        ArtifactReadError: If ``path`` cannot be read.
        ArtifactDecodeError: If the content is not UTF-8 text.
    """

    text = decode_text(read_artifact_bytes(path), path)
    return lints_from_lines(split_lines(text), workspace, logger=logger)


__all__ = [
    "CHECK_SOURCE",
    "CLIPPY_SOURCE",
    "DIAGNOSTIC_LEVELS",
    "classify_source",
    "lints_from_lines",
    "parse_cargo_messages",
    "parse_compiler_message",
]
