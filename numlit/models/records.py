#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed models for literal classification and parse results

Every model is a small frozen ``dataclass`` or enum.  Models are produced by
the classifier and the parser and carry no behaviour beyond simple
accessors, so the ``models`` layer depends on nothing else in the package.

Hierarchy
---------
::

    Radix                  — digit base (2, 8, 10, 16)
    Notation               — literal notation selected by the classifier
    ParseErrorKind         — failure category of radix construction
    LiteralClassification  — (body, radix, notation) triple
    ParseResult            — value-or-error outcome of a strict parse
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Radix(enum.IntEnum):
    """Digit base used to interpret a numeric body"""

    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEXADECIMAL = 16


class Notation(enum.Enum):
    """Literal notation recognised by the classifier"""

    BINARY = "binary"
    OCTAL = "octal"
    DECIMAL = "decimal"
    HEXADECIMAL = "hexadecimal"
    CHARACTER = "character"


class ParseErrorKind(enum.Enum):
    """Why a digit string could not be converted"""

    EMPTY = "empty"
    INVALID_DIGIT = "invalid_digit"
    POS_OVERFLOW = "pos_overflow"
    NEG_OVERFLOW = "neg_overflow"


@dataclass(frozen=True)
class LiteralClassification:
    """Outcome of classifying a literal

    Parameters
    ----------
    body : str
        Numeric body with the notation prefix removed.  Digit-group
        separators are still present.
    radix : Radix
        Base the body is to be interpreted in.
    notation : Notation
        Notation that selected *radix*.
    """

    body: str
    radix: Radix
    notation: Notation

    def __iter__(self):
        # unpacks as (body, radix)
        yield self.body
        yield self.radix


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Either a parsed value or the failure that prevented it

    Exactly one of :attr:`value` and :attr:`error` is meaningful; use
    :attr:`ok` to tell them apart.  For the built-in numeric types the
    error is a :class:`~numlit.exceptions.LiteralParseError`; classes with
    their own ``from_str_radix`` may store any ``ValueError``.

    Examples
    --------
    >>> ParseResult.success(5).unwrap_or(0)
    5
    """

    value: Any = None
    error: ValueError | None = None

    @classmethod
    def success(cls, value: T) -> ParseResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ValueError) -> ParseResult[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the stored error on failure"""
        if self.error is not None:
            raise self.error
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Return the value, or *default* unchanged on failure"""
        if self.error is not None:
            return default
        return self.value
