# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models describing the Harbormaster build message payload."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import TypeAliasType

JsonScalar = TypeAliasType("JsonScalar", str | int | float | bool | None)
JsonValue = TypeAliasType(
    "JsonValue", "JsonScalar | list[JsonValue] | dict[str, JsonValue]"
)


class BuildStatus(str, Enum):
    """Build target states accepted by ``harbormaster.sendmessage``."""

    ABORT = "abort"
    FAIL = "fail"
    PASS = "pass"
    PAUSE = "pause"
    RESTART = "restart"
    RESUME = "resume"
    WORK = "work"


class LintResult(BaseModel):
    """Single lint finding reported against a file in the workspace.

    Lint results are value objects: two results with identical fields are the
    same finding, which lets extractors collapse duplicates reported by the
    compiler for every target that includes a source file.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    code: str
    severity: str
    path: str
    line: int | None = None
    position: int | None = Field(default=None, alias="char")
    description: str | None = None


class UnitResult(BaseModel):
    """Outcome of a single test execution."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    result: str
    namespace: str | None = None
    engine: str | None = None
    duration: float | None = None
    path: str | None = None
    coverage: dict[str, JsonValue] | None = None
    details: str | None = None
    format: str | None = None

    def sort_duration(self) -> float:
        """Return the duration used for ordering, treating a missing value as zero."""

        return self.duration if self.duration is not None else 0.0


class ConduitAuth(BaseModel):
    """Conduit credentials embedded in the request body."""

    model_config = ConfigDict(frozen=True)

    token: str


class BuildReport(BaseModel):
    """Root document sent to ``harbormaster.sendmessage``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    build_target_phid: str = Field(alias="buildTargetPHID")
    status: BuildStatus = Field(alias="type")
    unit: tuple[UnitResult, ...] | None = None
    lint: tuple[LintResult, ...] | None = None
    auth: ConduitAuth = Field(alias="__conduit__")


UnitKey = tuple[str, str]

__all__ = [
    "BuildReport",
    "BuildStatus",
    "ConduitAuth",
    "JsonScalar",
    "JsonValue",
    "LintResult",
    "UnitKey",
    "UnitResult",
]
