#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Literal classification helpers for the numlit package

All text inspection that decides *how* a literal is to be read lives here,
so that the parser entry points in :mod:`numlit.literal` only orchestrate.

Literal Notations
-----------------
Prefixes are matched case-insensitively after surrounding whitespace has
been trimmed, in the following priority order (first match wins):

* ``0b`` / ``0B``  — binary, radix 2.
* ``0x`` / ``0X``  — hexadecimal, radix 16.
* ``0`` followed by at least one more character — octal, radix 8.
* anything else — decimal, radix 10, body is the whole trimmed text.

A bare ``"0"`` is therefore decimal zero rather than an octal prefix with
an empty body.

Character literals (``'A'``) are recognised on the *untrimmed* text and
must occupy exactly three UTF-8 bytes, so only single-byte (ASCII)
characters qualify.  Anything else falls through to the prefix rules.
"""

from __future__ import annotations

import logging

from numlit.models.records import LiteralClassification, Notation, Radix

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Notation constants
# ---------------------------------------------------------------------------

DIGIT_SEPARATOR: str = "_"
"""Digit-group separator removed from numeric bodies before conversion."""

CHAR_QUOTE: str = "'"
"""Delimiter on both sides of a character literal."""

CHAR_LITERAL_BYTES: int = 3
"""Encoded length of a character literal: quote, one byte, quote."""

LITERAL_ENCODING: str = "utf-8"
"""Encoding used to measure literal length in storage units."""

PREFIX_TABLE: tuple[tuple[str, Radix, Notation], ...] = (
    ("0b", Radix.BINARY, Notation.BINARY),
    ("0x", Radix.HEXADECIMAL, Notation.HEXADECIMAL),
)
"""Two-character radix prefixes, in match priority order (lower-case)."""

OCTAL_PREFIX: str = "0"
"""Leading character that selects octal when more characters follow."""

UNICODE_WHITESPACE: str = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
"""Characters with the Unicode ``White_Space`` property, trimmed from literals.

Narrower than :meth:`str.strip` with no argument, which also removes the
information separators ``\\x1c``-``\\x1f``.
"""


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def identify_literal(text: str) -> LiteralClassification:
    """Decide the notation and radix of a literal

    Parameters
    ----------
    text : str
        Raw literal text.  Surrounding whitespace is ignored.

    Returns
    -------
    LiteralClassification
        Body with the prefix removed, the radix to read it in, and the
        notation that selected that radix.  Separators are left in the
        body.

    Examples
    --------
    >>> identify_literal("0xCAFE")
    LiteralClassification(body='CAFE', radix=<Radix.HEXADECIMAL: 16>, notation=<Notation.HEXADECIMAL: 'hexadecimal'>)
    >>> body, radix = identify_literal(" 0723 ")
    >>> body, int(radix)
    ('723', 8)
    >>> identify_literal("0").radix
    <Radix.DECIMAL: 10>
    """
    trimmed = text.strip(UNICODE_WHITESPACE)
    lowered = trimmed.lower()

    for prefix, radix, notation in PREFIX_TABLE:
        if lowered.startswith(prefix):
            result = LiteralClassification(trimmed[len(prefix):], radix, notation)
            break
    else:
        if len(trimmed) > 1 and lowered.startswith(OCTAL_PREFIX):
            result = LiteralClassification(
                trimmed[len(OCTAL_PREFIX):], Radix.OCTAL, Notation.OCTAL,
            )
        else:
            result = LiteralClassification(trimmed, Radix.DECIMAL, Notation.DECIMAL)

    logger.debug(
        "Classified %r as %s (radix %d, body %r)",
        text, result.notation.value, int(result.radix), result.body,
    )
    return result


def is_char_literal(text: str) -> bool:
    """Return ``True`` if *text* is a single-byte character literal

    The check is made on the text exactly as given: three encoded bytes,
    opening and closing with a single quote.  ``"'全'"`` is five bytes and
    ``"'AB'"`` is four, so neither qualifies.

    Examples
    --------
    >>> is_char_literal("'A'")
    True
    >>> is_char_literal("'全'")
    False
    >>> is_char_literal("''")
    False
    """
    encoded = text.encode(LITERAL_ENCODING, "surrogatepass")
    return (
        len(encoded) == CHAR_LITERAL_BYTES
        and text.startswith(CHAR_QUOTE)
        and text.endswith(CHAR_QUOTE)
    )


def identify_char_literal(text: str) -> LiteralClassification:
    """Classify a character literal as the decimal digits of its code

    Parameters
    ----------
    text : str
        A literal for which :func:`is_char_literal` is ``True``.

    Returns
    -------
    LiteralClassification
        Body holding the base-10 code of the interior byte (``"65"`` for
        ``"'A'"``), radix 10 and :attr:`Notation.CHARACTER`.

    Raises
    ------
    ValueError
        If *text* is not a character literal.
    """
    if not is_char_literal(text):
        raise ValueError(f"{text!r} is not a single-byte character literal")
    code = text.encode(LITERAL_ENCODING)[1]
    result = LiteralClassification(str(code), Radix.DECIMAL, Notation.CHARACTER)
    logger.debug("Classified %r as character (code %d)", text, code)
    return result


def strip_separators(body: str) -> str:
    """Remove every digit-group separator from *body*

    Separators carry no value and their position is not checked.

    Examples
    --------
    >>> strip_separators("1000_0001__1111_")
    '100000011111'
    """
    return body.replace(DIGIT_SEPARATOR, "")
