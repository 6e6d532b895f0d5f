# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared parser infrastructure and helper utilities."""

from __future__ import annotations

import json
import re
from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path
from typing import cast

from ..core.errors import ArtifactDecodeError, ArtifactReadError
from ..core.models import JsonValue


def read_artifact_bytes(path: Path) -> bytes:
    """Return the raw content of the artifact at ``path``.

    Args:
        path: Artifact produced by a build step.

    Returns:
        bytes: Complete file content.

    Raises:
        ArtifactReadError: If the file is missing or cannot be read.
    """

    try:
        return path.read_bytes()
    except OSError as exc:
        raise ArtifactReadError(path, exc.strerror or str(exc)) from exc


def decode_text(data: bytes, path: Path) -> str:
    """Decode ``data`` read from ``path`` as UTF-8.

    Raises:
        ArtifactDecodeError: If the content is not valid UTF-8.
    """

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ArtifactDecodeError(path, f"invalid UTF-8 at byte {exc.start}") from exc


def read_artifact_lines(path: Path) -> list[str]:
    """Return the lines of the UTF-8 text artifact at ``path``."""

    return split_lines(decode_text(read_artifact_bytes(path), path))


def split_lines(text: str) -> list[str]:
    """Split ``text`` on newlines only.

    ``str.splitlines`` also breaks on U+2028 and friends, which JSON encoders
    emit unescaped inside string values.
    """

    return [line.removesuffix("\r") for line in text.split("\n")]


def iter_json_objects(lines: Sequence[str]) -> Iterator[Mapping[str, JsonValue]]:
    """Yield each line of a JSON message stream that decodes to an object.

    Build tools interleave free-form text with their JSON messages, so lines
    that are blank, not JSON, or not a JSON object are skipped.

    Args:
        lines: Lines of a newline-delimited JSON stream.

    Yields:
        Mapping[str, JsonValue]: Decoded message objects in stream order.
    """

    for raw_line in lines:
        trimmed = raw_line.strip()
        if not trimmed:
            continue
        try:
            payload = cast(JsonValue, json.loads(trimmed))
        except json.JSONDecodeError:
            continue
        if isinstance(payload, Mapping):
            yield payload


def first_mapping(value: JsonValue | None) -> Mapping[str, JsonValue] | None:
    """Return ``value`` when it is a mapping, otherwise ``None``."""

    if isinstance(value, Mapping):
        return value
    return None


def mapping_sequence(value: JsonValue | None) -> list[Mapping[str, JsonValue]] | None:
    """Return ``value`` as a list of mappings, or ``None`` when it is not a list of objects."""

    if not isinstance(value, list):
        return None
    if not all(isinstance(item, Mapping) for item in value):
        return None
    return [cast(Mapping[str, JsonValue], item) for item in value]


def coerce_optional_int(value: JsonValue | None) -> int | None:
    """Return ``value`` when it is an integer (booleans excluded), otherwise ``None``."""

    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def iter_pattern_matches(
    lines: Sequence[str],
    pattern: re.Pattern[str],
    *,
    skip_blank: bool = True,
    search: bool = False,
) -> Iterator[re.Match[str]]:
    """Yield regex matches from ``lines`` while filtering unwanted entries.

    Args:
        lines: Sequence of raw lines emitted by a tool.
        pattern: Compiled regular expression used to match result lines.
        skip_blank: When ``True`` blank lines are ignored.
        search: When ``True`` the pattern may match anywhere in the line
            instead of only at its start.

    Yields:
        re.Match[str]: Match objects produced by ``pattern``.
    """

    for raw_line in lines:
        line = raw_line.strip()
        if skip_blank and not line:
            continue
        match = pattern.search(line) if search else pattern.match(line)
        if match:
            yield match


__all__ = [
    "coerce_optional_int",
    "decode_text",
    "first_mapping",
    "iter_json_objects",
    "iter_pattern_matches",
    "mapping_sequence",
    "read_artifact_bytes",
    "read_artifact_lines",
    "split_lines",
]
