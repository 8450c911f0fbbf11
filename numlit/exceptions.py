#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the numlit package

All exceptions raised by numlit inherit from :class:`NumLitError`, making it
possible to catch every library-specific error with a single ``except`` clause
while still allowing fine-grained handling when needed.

Exception Hierarchy
-------------------
::

    NumLitError
    ├── LiteralParseError      # Radix construction failed (also ValueError)
    └── UnsupportedTypeError   # Target type cannot be resolved (also TypeError)
"""

from __future__ import annotations

from numlit.models.records import ParseErrorKind


class NumLitError(Exception):
    """Base exception for all numlit errors

    Every exception raised by numlit is a subclass of this type.
    """


class LiteralParseError(NumLitError, ValueError):
    """Raised when a digit string cannot be turned into a value of the target type

    This is the single failure type of the radix-construction step.  It
    covers an empty digit body, a character that is not a digit of the
    selected radix, and a magnitude outside the range of the target type.
    Malformed character literals have no error of their own: they fall
    through to the classifier and fail as one of the kinds above.

    Parameters
    ----------
    kind : ParseErrorKind
        Category of the failure.
    digits : str
        The digit string handed to the radix constructor (prefix and
        separators already removed).
    radix : int
        Radix the digits were interpreted in.
    type_name : str, optional
        Name of the target numeric type, used in the message.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        digits: str,
        radix: int,
        type_name: str | None = None,
    ) -> None:
        self.kind = kind
        self.digits = digits
        self.radix = radix
        self.type_name = type_name
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        target = f" as {self.type_name}" if self.type_name else ""
        if self.kind is ParseErrorKind.EMPTY:
            return f"cannot parse integer from empty string{target}"
        if self.kind is ParseErrorKind.INVALID_DIGIT:
            return f"invalid digit found in {self.digits!r} for radix {self.radix}{target}"
        if self.kind is ParseErrorKind.POS_OVERFLOW:
            return f"number {self.digits!r} (radix {self.radix}) too large to fit{target}"
        return f"number {self.digits!r} (radix {self.radix}) too small to fit{target}"


class UnsupportedTypeError(NumLitError, TypeError):
    """Raised when a target cannot be resolved to a numeric type adapter

    Parameters
    ----------
    message : str
        Description of the unresolvable target, including its ``repr``.
    """
