# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

from .report import report
from .typer_ext import create_typer

app = create_typer(
    name="harbormaster-report",
    help_text="Convert cargo clippy/check and nextest output into a Harbormaster build message.",
)
app.command()(report)


def main() -> None:
    """Run the command line application."""

    app(prog_name="harbormaster-report")


__all__ = ["app", "main"]
