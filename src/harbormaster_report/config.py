# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model validated before a report is built."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from .core.errors import ConfigError
from .core.models import BuildStatus


class ReportConfig(BaseModel):
    """Inputs required to build a single Harbormaster message.

    ``clippy_json`` and ``check_json`` are alternative sources for the same
    lint stream and may not both be given; the extractor treats them
    identically.
    """

    model_config = ConfigDict(frozen=True)

    build_target_phid: str
    status: BuildStatus
    token: str
    workspace: Path = Path()
    clippy_json: Path | None = None
    check_json: Path | None = None
    nextest_stderr: Path | None = None

    @field_validator("build_target_phid", "token")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @model_validator(mode="after")
    def _exclusive_lint_sources(self) -> ReportConfig:
        if self.clippy_json is not None and self.check_json is not None:
            raise ValueError("clippy_json and check_json are mutually exclusive")
        return self

    @property
    def lint_artifact(self) -> Path | None:
        """Return whichever lint stream was configured, if any."""

        return self.clippy_json if self.clippy_json is not None else self.check_json


def load_config(**values: object) -> ReportConfig:
    """Validate ``values`` into a :class:`ReportConfig`.

    Raises:
        ConfigError: If any value is missing or invalid.
    """

    try:
        return ReportConfig.model_validate(values)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'config'}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigError(f"invalid configuration: {details}") from exc


__all__ = ["ReportConfig", "load_config"]
