# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core models, errors and logging shared across the package."""

from __future__ import annotations

from .errors import (
    ArtifactDecodeError,
    ArtifactError,
    ArtifactReadError,
    ConfigError,
    ReportEncodeError,
    ReportError,
)
from .logging import LogLevel, ReportLogger
from .models import BuildReport, BuildStatus, ConduitAuth, LintResult, UnitKey, UnitResult

__all__ = [
    "ArtifactDecodeError",
    "ArtifactError",
    "ArtifactReadError",
    "BuildReport",
    "BuildStatus",
    "ConduitAuth",
    "ConfigError",
    "LintResult",
    "LogLevel",
    "ReportEncodeError",
    "ReportError",
    "ReportLogger",
    "UnitKey",
    "UnitResult",
]
