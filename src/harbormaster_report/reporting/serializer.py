# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render build reports as Harbormaster JSON documents."""

from __future__ import annotations

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from ..core.errors import ReportEncodeError
from ..core.models import BuildReport


def render_report(report: BuildReport, *, indent: int | None = 2) -> str:
    """Return ``report`` as a JSON document.

    Fields are emitted under their wire names and any field without a value
    is left out rather than written as ``null``.

    Raises:
        ReportEncodeError: If the payload cannot be encoded.
    """

    try:
        return report.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
    except (PydanticSerializationError, ValueError) as exc:
        raise ReportEncodeError(f"failed to encode report: {exc}") from exc


def load_report(document: str | bytes) -> BuildReport:
    """Decode a document produced by :func:`render_report`.

    Raises:
        ReportEncodeError: If ``document`` is not a valid report.
    """

    try:
        return BuildReport.model_validate_json(document)
    except ValidationError as exc:
        raise ReportEncodeError(f"invalid report document: {exc}") from exc


__all__ = ["load_report", "render_report"]
