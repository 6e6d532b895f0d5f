# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Report assembly and rendering."""

from __future__ import annotations

from .assembler import assemble_report, build_report, collect_lints, collect_units
from .serializer import load_report, render_report

__all__ = [
    "assemble_report",
    "build_report",
    "collect_lints",
    "collect_units",
    "load_report",
    "render_report",
]
