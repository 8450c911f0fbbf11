#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Abstract base class for all numeric type adapters

Every concrete adapter (unbounded integer, fixed-width integer, float,
duck-typed class) inherits from :class:`BaseNumericType` and implements
:meth:`from_str_radix`, which is the only capability the literal parser
needs from a target type.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from numlit.exceptions import LiteralParseError
from numlit.models.records import ParseErrorKind

logger = logging.getLogger(__name__)


class BaseNumericType(ABC):
    """Abstract base for "construct a value from digits at a radix"

    Subclasses must override :meth:`from_str_radix` to validate a digit
    string, convert it, range-check the result for the target type and
    return a value of that type.

    Parameters
    ----------
    name : str
        Short type name used in messages and by the registry
        (e.g. ``"uint32"``).
    scalar_type : type
        Constructor producing values of the target type.

    Notes
    -----
    Adapters never see notation prefixes, separators or character
    literals; those are handled by :mod:`numlit.literal` before
    :meth:`from_str_radix` is called.  The dependency direction is::

        models ← utils ← types ← literal ← cli
    """

    signed: bool = True

    def __init__(self, name: str, scalar_type: type) -> None:
        self.name = name
        self.scalar_type = scalar_type

    @abstractmethod
    def from_str_radix(self, digits: str, radix: int) -> Any:
        """Construct a value of the target type from *digits* in *radix*

        Parameters
        ----------
        digits : str
            Digit string, optionally signed, with no prefix or separators.
        radix : int
            Base of *digits*, 2–36.

        Returns
        -------
        Any
            A value of :attr:`scalar_type`.

        Raises
        ------
        LiteralParseError
            If *digits* is empty, contains a non-digit for *radix*, or
            denotes a value outside the target type's range.
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseNumericType):
            return NotImplemented
        return type(self) is type(other) and (self.name, self.scalar_type) == (
            other.name, other.scalar_type,
        )

    def __hash__(self) -> int:
        return hash((type(self), self.name, self.scalar_type))


class DuckTypedNumericType(BaseNumericType):
    """Adapter for a class that already provides ``from_str_radix``

    The class's own classmethod is called unchanged, and so are its
    failures: the parser only requires that they are ``ValueError``
    subclasses (:class:`LiteralParseError` is one).
    """

    def __init__(self, scalar_type: type) -> None:
        super().__init__(scalar_type.__name__, scalar_type)

    def from_str_radix(self, digits: str, radix: int) -> Any:
        return self.scalar_type.from_str_radix(digits, radix)


def overflow_error(digits: str, radix: int, type_name: str) -> LiteralParseError:
    """Build the overflow error matching the sign of *digits*"""
    kind = (
        ParseErrorKind.NEG_OVERFLOW if digits.startswith("-")
        else ParseErrorKind.POS_OVERFLOW
    )
    return LiteralParseError(kind, digits, radix, type_name)
