# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer helpers for consistent CLI construction."""

from __future__ import annotations

from typing import Any

import typer


def create_typer(*, name: str | None = None, help_text: str | None = None, **kwargs: Any) -> typer.Typer:
    """Return a :class:`typer.Typer` configured with the project defaults.

    Args:
        name: Optional application name shown in usage output.
        help_text: Help text displayed for the application.
        **kwargs: Extra keyword arguments forwarded to :class:`typer.Typer`.

    Returns:
        typer.Typer: Application instance ready for command registration.
    """

    kwargs.setdefault("add_completion", False)
    kwargs.setdefault("pretty_exceptions_enable", False)
    kwargs.setdefault("context_settings", {"help_option_names": ["-h", "--help"]})
    return typer.Typer(name=name, help=help_text, **kwargs)


__all__ = ["create_typer"]
