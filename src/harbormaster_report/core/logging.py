# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostic logging helpers rendering to stderr with optional colour and emoji.

Standard output carries the generated JSON document, so every log line goes
through a Rich console bound to standard error.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from functools import cache
from typing import Literal

from rich.console import Console
from rich.text import Text


class LogLevel(IntEnum):
    """Verbosity thresholds understood by :class:`ReportLogger`."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40


def detect_tty() -> bool:
    """Return ``True`` when stderr appears to be backed by a terminal.

    Returns:
        bool: ``True`` when ``sys.stderr`` reports TTY support, ``False`` otherwise.
    """

    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


class StderrConsoleManager:
    """Provision Rich :class:`Console` instances keyed by colour and emoji settings."""

    def __init__(self) -> None:
        self._cache: dict[tuple[bool, bool, bool], Console] = {}

    def get(self, *, color: bool, emoji: bool) -> Console:
        """Return a stderr console configured for ``color`` and ``emoji`` preferences.

        Args:
            color: ``True`` when ANSI colour output should be enabled.
            emoji: ``True`` when Rich should render emoji glyphs.

        Returns:
            Console: Cached or newly constructed console matching the preferences.
        """

        tty = detect_tty()
        key = (color, emoji, tty)
        if key not in self._cache:
            color_system: Literal["auto", "standard", "256", "truecolor", "windows"] | None = (
                "auto" if color and tty else None
            )
            self._cache[key] = Console(
                stderr=True,
                color_system=color_system,
                force_terminal=tty,
                no_color=not (color and tty),
                emoji=emoji,
                soft_wrap=True,
            )
        return self._cache[key]


@cache
def get_console_manager() -> StderrConsoleManager:
    """Return the process-wide :class:`StderrConsoleManager`."""

    return StderrConsoleManager()


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


@dataclass(slots=True)
class ReportLogger:
    """Log sink handed to the report pipeline by the CLI.

    Attributes:
        use_emoji: Prefix messages with emoji glyphs.
        use_color: Explicit colour preference; ``None`` follows TTY detection.
        level: Minimum level that is rendered.
        console: Optional console override, used by tests to capture output.
    """

    use_emoji: bool = True
    use_color: bool | None = None
    level: LogLevel = LogLevel.INFO
    console: Console | None = None

    def _emit(self, level: LogLevel, prefix: str, msg: str, style: str) -> None:
        if level < self.level:
            return
        color_enabled = detect_tty() if self.use_color is None else self.use_color
        console = self.console or get_console_manager().get(color=color_enabled, emoji=self.use_emoji)
        text = Text(f"{emoji(prefix, self.use_emoji)}{msg}")
        if color_enabled:
            text.stylize(style)
        console.print(text)

    def debug(self, msg: str) -> None:
        """Emit a debug message."""

        self._emit(LogLevel.DEBUG, "🔍 ", msg, "dim")

    def info(self, msg: str) -> None:
        """Emit an informational message."""

        self._emit(LogLevel.INFO, "ℹ️ ", msg, "cyan")

    def warn(self, msg: str) -> None:
        """Emit a warning message."""

        self._emit(LogLevel.WARNING, "⚠️ ", msg, "yellow")

    def fail(self, msg: str) -> None:
        """Emit an error message."""

        self._emit(LogLevel.ERROR, "❌ ", msg, "red")


__all__ = [
    "LogLevel",
    "ReportLogger",
    "StderrConsoleManager",
    "detect_tty",
    "emoji",
    "get_console_manager",
]
