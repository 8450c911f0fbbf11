#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Numeric literal parser entry points

Three functions share one algorithm:

* :func:`try_parse_literal` — classify and convert, returning a
  :class:`~numlit.models.records.ParseResult`.
* :func:`parse_literal` — the same, raising the conversion failure.
* :func:`parse_literal_fallback` — the same, substituting a fallback value
  for any conversion failure.

Algorithm
---------
1. If the text (as given, untrimmed) is a single-byte character literal
   such as ``'A'``, the decimal code of the character (``"65"``) is
   converted at radix 10.
2. Otherwise the text is classified by
   :func:`~numlit.utils.parsing.identify_literal`, every ``_`` is removed
   from the body, and the body is converted at the selected radix.

Conversion is delegated to the target's numeric type adapter (see
:mod:`numlit.types`), whose failure is surfaced unchanged.

Examples
--------
>>> parse_literal("0xCAFE")
51966
>>> parse_literal("0b1000_0001_1111_1010")
33274
>>> parse_literal("'A'")
65
>>> parse_literal_fallback("CAFE", 0xFABC)
64188
"""

from __future__ import annotations

import logging
from typing import Any

from numlit.models.records import ParseResult
from numlit.types.base import BaseNumericType
from numlit.types.registry import numeric_type_of, resolve_numeric_type
from numlit.utils.parsing import (
    identify_char_literal,
    identify_literal,
    is_char_literal,
    strip_separators,
)

logger = logging.getLogger(__name__)


def _literal_digits(text: str) -> tuple[str, int]:
    """Return the digit string and radix to hand to the adapter"""
    if is_char_literal(text):
        return tuple(identify_char_literal(text))
    body, radix = identify_literal(text)
    return strip_separators(body), radix


def try_parse_literal(text: str, target: Any = int) -> ParseResult:
    """Parse a numeric literal into a result value

    Parameters
    ----------
    text : str
        Literal text in binary, octal, decimal, hexadecimal or
        character-literal notation.
    target : Any, optional
        Type to produce; anything accepted by
        :func:`~numlit.types.registry.resolve_numeric_type`.  Defaults to
        ``int``.

    Returns
    -------
    ParseResult
        ``ok`` with the parsed value, or holding the adapter's failure.

    Raises
    ------
    UnsupportedTypeError
        If *target* cannot be resolved.  This is not a parse failure and
        is never captured in the result.
    """
    adapter = resolve_numeric_type(target)
    digits, radix = _literal_digits(text)
    try:
        value = adapter.from_str_radix(digits, int(radix))
    except ValueError as exc:
        logger.debug("Literal %r failed as %s: %s", text, adapter.name, exc)
        return ParseResult.failure(exc)
    return ParseResult.success(value)


def parse_literal(text: str, target: Any = int) -> Any:
    """Determine the literal notation, then convert to a value of *target*

    Parameters
    ----------
    text : str
        Textual representation of a number.
    target : Any, optional
        Type to produce.  Defaults to ``int``.

    Returns
    -------
    Any
        The parsed value.

    Raises
    ------
    LiteralParseError
        If the body is empty, has a digit invalid for its radix, or does
        not fit *target*.

    Examples
    --------
    >>> import numpy as np
    >>> parse_literal("0723642")
    239522
    >>> parse_literal("0x1_0000", np.uint16)  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    numlit.exceptions.LiteralParseError: number '10000' (radix 16) too large to fit as uint16
    """
    return try_parse_literal(text, target).unwrap()


def parse_literal_fallback(text: str, fallback: Any, target: Any = None) -> Any:
    """Determine the literal notation, then convert or return *fallback*

    Parameters
    ----------
    text : str
        Textual representation of a number.
    fallback : Any
        Value returned unchanged if conversion fails.
    target : Any, optional
        Type to produce.  When omitted, the type of *fallback* is used.

    Returns
    -------
    Any
        The parsed value, or *fallback*.

    Examples
    --------
    >>> parse_literal_fallback("0xCAFE", 0xFABC) == 0xCAFE
    True
    >>> parse_literal_fallback("'全'", 0xFABC) == 0xFABC
    True
    """
    if target is None:
        adapter: BaseNumericType = numeric_type_of(fallback)
    else:
        adapter = resolve_numeric_type(target)
    return try_parse_literal(text, adapter).unwrap_or(fallback)


class NumLiteralMixin:
    """Attach literal parsing to a numeric class

    Mix into an ``int`` or ``float`` subclass (or any class the registry
    can resolve) to gain ``parse_literal`` and ``parse_literal_fallback``
    classmethods that produce instances of that class.

    Examples
    --------
    >>> class Address(NumLiteralMixin, int):
    ...     pass
    >>> Address.parse_literal("0x8000")
    32768
    >>> type(Address.parse_literal("0x8000")).__name__
    'Address'
    """

    @classmethod
    def parse_literal(cls, text: str) -> Any:
        return parse_literal(text, cls)

    @classmethod
    def parse_literal_fallback(cls, text: str, fallback: Any) -> Any:
        return parse_literal_fallback(text, fallback, cls)
