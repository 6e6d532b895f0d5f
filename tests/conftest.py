# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from harbormaster_report.core.logging import LogLevel, ReportLogger

MessageFactory = Callable[..., str]


def compiler_message(
    *,
    code: str | None = "clippy::needless_return",
    level: str = "warning",
    message: str = "unneeded `return` statement",
    file_name: str = "src/lib.rs",
    line_start: int = 3,
    spans: list[dict[str, object]] | None = None,
) -> str:
    """Return one line of ``cargo --message-format=json`` output."""

    if spans is None:
        spans = [
            {
                "file_name": file_name,
                "byte_start": 40,
                "byte_end": 52,
                "line_start": line_start,
                "line_end": line_start,
                "column_start": 5,
                "column_end": 17,
                "is_primary": True,
                "text": [],
                "label": None,
                "suggested_replacement": None,
                "suggestion_applicability": None,
                "expansion": None,
            }
        ]
    record = {
        "reason": "compiler-message",
        "package_id": "mycrate 0.1.0 (path+file:///work/mycrate)",
        "manifest_path": "/work/mycrate/Cargo.toml",
        "target": {"kind": ["lib"], "name": "mycrate", "src_path": "/work/mycrate/src/lib.rs"},
        "message": {
            "rendered": f"{level}: {message}\n",
            "$message_type": "diagnostic",
            "children": [],
            "code": None if code is None else {"code": code, "explanation": None},
            "level": level,
            "message": message,
            "spans": spans,
        },
    }
    return json.dumps(record)


@pytest.fixture
def make_message() -> MessageFactory:
    """Return a factory building cargo compiler-message lines."""

    return compiler_message


@pytest.fixture
def log_buffer() -> StringIO:
    """Return the buffer backing :func:`logger`."""

    return StringIO()


@pytest.fixture
def logger(log_buffer: StringIO) -> ReportLogger:
    """Return a debug-level logger writing plain text into ``log_buffer``."""

    console = Console(file=log_buffer, color_system=None, no_color=True, width=200)
    return ReportLogger(use_emoji=False, use_color=False, level=LogLevel.DEBUG, console=console)


@pytest.fixture
def write_artifact(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper writing ``content`` to ``tmp_path / name``."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
