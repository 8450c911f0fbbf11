#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Digit-string validation for radix construction

Python's :func:`int` is deliberately lenient: it accepts surrounding
whitespace, underscores and even its own ``0x``/``0o``/``0b`` prefixes when
the base matches.  Radix construction in numlit is strict instead, so every
built-in numeric type runs its digits through :func:`validate_digits`
before converting.

Checked Constraints
-------------------
* The radix lies in 2–36.
* The digit string is not empty.
* At most one leading sign; ``-`` only for signed targets.
* A sign must be followed by at least one digit.
* Every remaining character is a digit of the radix (``0-9``, ``a-z``,
  case-insensitive).

Range checks are the numeric types' concern and live in
:mod:`numlit.types`.
"""

from __future__ import annotations

import logging
import string

from numlit.exceptions import LiteralParseError
from numlit.models.records import ParseErrorKind

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------

MIN_RADIX: int = 2
"""Smallest supported radix."""

MAX_RADIX: int = 36
"""Largest supported radix (digits ``0-9`` then ``a-z``)."""

DIGIT_ALPHABET: str = string.digits + string.ascii_lowercase
"""Digit characters in value order."""


# ---------------------------------------------------------------------------
# Validation functions
# ---------------------------------------------------------------------------

def validate_radix(radix: int) -> None:
    """Verify that *radix* is usable for digit interpretation

    Raises
    ------
    ValueError
        If *radix* is outside the range [2, 36].  This is a caller bug,
        not a parse failure, so it is not a :class:`LiteralParseError`.
    """
    if not (MIN_RADIX <= radix <= MAX_RADIX):
        raise ValueError(
            f"Radix {radix} is outside the valid range [{MIN_RADIX}, {MAX_RADIX}]."
        )


def validate_digits(
    digits: str,
    radix: int,
    *,
    signed: bool = True,
    type_name: str | None = None,
) -> None:
    """Verify that *digits* is a well-formed digit string for *radix*

    Parameters
    ----------
    digits : str
        Candidate digit string, optionally signed.
    radix : int
        Base to check the digits against.
    signed : bool, optional
        Whether a leading ``-`` is allowed.  For unsigned targets it is
        reported as an invalid digit.
    type_name : str, optional
        Target type name, carried into the error message.

    Raises
    ------
    LiteralParseError
        ``EMPTY`` for an empty string, ``INVALID_DIGIT`` for anything else
        that is not a digit of *radix*.

    Examples
    --------
    >>> validate_digits("CAFE", 16)
    >>> validate_digits("CAFE", 10)  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    numlit.exceptions.LiteralParseError: invalid digit found in 'CAFE' for radix 10
    """
    validate_radix(radix)

    if not digits:
        raise LiteralParseError(ParseErrorKind.EMPTY, digits, radix, type_name)

    magnitude = digits
    if digits[0] == "+" or (signed and digits[0] == "-"):
        magnitude = digits[1:]
        if not magnitude:
            raise LiteralParseError(ParseErrorKind.INVALID_DIGIT, digits, radix, type_name)

    allowed = DIGIT_ALPHABET[:radix]
    for ch in magnitude:
        if not ch.isascii() or ch.lower() not in allowed:
            logger.debug("Character %r is not a radix-%d digit in %r", ch, radix, digits)
            raise LiteralParseError(ParseErrorKind.INVALID_DIGIT, digits, radix, type_name)
