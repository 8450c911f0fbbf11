#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed records returned by the classifier and the parser
"""

from __future__ import annotations

from numlit.models.records import (
    LiteralClassification,
    Notation,
    ParseErrorKind,
    ParseResult,
    Radix,
)

__all__ = [
    "LiteralClassification",
    "Notation",
    "ParseErrorKind",
    "ParseResult",
    "Radix",
]
