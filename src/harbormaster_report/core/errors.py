# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while building Harbormaster reports."""

from __future__ import annotations

from pathlib import Path


class ReportError(RuntimeError):
    """Base class for every failure raised by the report pipeline."""


class ArtifactError(ReportError):
    """Raised when a build artifact cannot be turned into results.

    Artifact errors are recoverable: the assembler logs them and treats the
    artifact as having contributed nothing.
    """

    def __init__(self, path: Path, reason: str) -> None:
        """Create the error for ``path`` with a human readable ``reason``.

        Args:
            path: Artifact that failed to parse.
            reason: Short description of the failure.
        """

        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ArtifactReadError(ArtifactError):
    """Raised when an artifact is missing or unreadable."""


class ArtifactDecodeError(ArtifactError):
    """Raised when an artifact exists but is not in the expected format."""


class ReportEncodeError(ReportError):
    """Raised when a report cannot be rendered as JSON."""


class ConfigError(ReportError):
    """Raised when configuration input is invalid."""


__all__ = (
    "ArtifactDecodeError",
    "ArtifactError",
    "ArtifactReadError",
    "ConfigError",
    "ReportEncodeError",
    "ReportError",
)
