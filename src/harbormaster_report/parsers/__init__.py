# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Public parser exports for converting build output into results."""

from __future__ import annotations

from .cargo import classify_source, lints_from_lines, parse_cargo_messages
from .nextest import parse_nextest_output, units_from_lines

__all__ = [
    "classify_source",
    "lints_from_lines",
    "parse_cargo_messages",
    "parse_nextest_output",
    "units_from_lines",
]
