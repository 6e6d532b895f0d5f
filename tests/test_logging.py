# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the stderr logging helpers."""

from __future__ import annotations

from io import StringIO

from rich.console import Console

from harbormaster_report.core.logging import LogLevel, ReportLogger, emoji, get_console_manager


def _logger(level: LogLevel, *, use_emoji: bool = False) -> tuple[ReportLogger, StringIO]:
    buffer = StringIO()
    console = Console(file=buffer, color_system=None, no_color=True, width=200)
    return ReportLogger(use_emoji=use_emoji, use_color=False, level=level, console=console), buffer


def test_level_threshold_filters_messages() -> None:
    logger, buffer = _logger(LogLevel.WARNING)

    logger.debug("debug line")
    logger.info("info line")
    logger.warn("warn line")
    logger.fail("fail line")

    output = buffer.getvalue()
    assert "debug line" not in output
    assert "info line" not in output
    assert "warn line" in output
    assert "fail line" in output


def test_emoji_prefix_toggle() -> None:
    assert emoji("✅ ", True) == "✅ "
    assert emoji("✅ ", False) == ""

    logger, buffer = _logger(LogLevel.INFO, use_emoji=False)
    logger.warn("careful")
    assert buffer.getvalue().strip() == "careful"


def test_console_manager_writes_to_stderr() -> None:
    console = get_console_manager().get(color=False, emoji=False)

    assert console.stderr is True
    assert get_console_manager().get(color=False, emoji=False) is console
