#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Integer type adapters

Two flavours are provided:

* :class:`IntegerType` — Python's unbounded :class:`int` (or an ``int``
  subclass).  Only empty bodies and invalid digits can fail.
* :class:`BoundedIntegerType` — fixed-width integers with an inclusive
  ``[min_value, max_value]`` range, built from NumPy integer dtypes via
  :func:`numpy.iinfo`.  Values outside the range fail with
  ``POS_OVERFLOW`` / ``NEG_OVERFLOW`` and are never wrapped or truncated.

Examples
--------
>>> import numpy as np
>>> u8 = BoundedIntegerType.from_dtype("uint8")
>>> u8.from_str_radix("ff", 16)
np.uint8(255)
>>> u8.from_str_radix("100", 16)  # doctest: +ELLIPSIS
Traceback (most recent call last):
    ...
numlit.exceptions.LiteralParseError: number '100' (radix 16) too large to fit as uint8
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from numlit.types.base import BaseNumericType, overflow_error
from numlit.utils.validation import validate_digits

logger = logging.getLogger(__name__)


INT_STR_CHUNK: int = 4000
"""Largest digit run converted with one :func:`int` call.

Kept below the interpreter's int/str conversion limit (4300 digits by
default), which applies to radixes that are not powers of two.
"""


def digits_to_int(digits: str, radix: int) -> int:
    """Convert a validated, optionally signed digit string to an int

    Bodies of any length convert exactly: runs of at most
    :data:`INT_STR_CHUNK` digits are accumulated one at a time.

    Examples
    --------
    >>> digits_to_int("-ff", 16)
    -255
    >>> len(str(digits_to_int("9" * 5000, 10) // 10 ** 4990))
    10
    """
    negative = digits.startswith("-")
    magnitude = digits.lstrip("+-")
    if radix & (radix - 1) == 0:
        value = int(magnitude, radix)
    else:
        value = 0
        for start in range(0, len(magnitude), INT_STR_CHUNK):
            chunk = magnitude[start:start + INT_STR_CHUNK]
            value = value * radix ** len(chunk) + int(chunk, radix)
    return -value if negative else value


def magnitude_digits(digits: str) -> str:
    """Strip the sign and leading zeros from a validated digit string"""
    return digits.lstrip("+-").lstrip("0")


def max_digit_count(limit: int, radix: int) -> int:
    """Number of radix-*radix* digits needed to write *limit*"""
    return len(np.base_repr(limit, base=radix))


class IntegerType(BaseNumericType):
    """Adapter for Python's arbitrary-precision integers

    Parameters
    ----------
    scalar_type : type, optional
        ``int`` or an ``int`` subclass whose constructor accepts an
        ``int``.  Defaults to ``int``.
    """

    def __init__(self, scalar_type: type = int) -> None:
        super().__init__(scalar_type.__name__, scalar_type)

    def from_str_radix(self, digits: str, radix: int) -> Any:
        validate_digits(digits, radix, signed=True, type_name=self.name)
        value = digits_to_int(digits, radix)
        if self.scalar_type is int:
            return value
        return self.scalar_type(value)


class BoundedIntegerType(BaseNumericType):
    """Adapter for a fixed-width integer type

    Parameters
    ----------
    name : str
        Type name, e.g. ``"int16"``.
    scalar_type : type
        Constructor of the fixed-width type, e.g. :class:`numpy.int16`.
    min_value : int
        Smallest representable value.
    max_value : int
        Largest representable value.

    Notes
    -----
    Digits are validated in full before the range is checked, so a body
    with an invalid digit reports ``INVALID_DIGIT`` even if its leading
    digits already exceed the range.
    """

    def __init__(self, name: str, scalar_type: type, min_value: int, max_value: int) -> None:
        super().__init__(name, scalar_type)
        self.min_value = int(min_value)
        self.max_value = int(max_value)
        self.signed = self.min_value < 0

    @classmethod
    def from_dtype(cls, dtype: Any) -> BoundedIntegerType:
        """Build an adapter from a NumPy integer dtype or its name"""
        dt = np.dtype(dtype)
        if dt.kind not in "iu":
            raise ValueError(f"{dt.name!r} is not an integer dtype")
        info = np.iinfo(dt)
        return cls(dt.name, dt.type, info.min, info.max)

    def from_str_radix(self, digits: str, radix: int) -> Any:
        validate_digits(digits, radix, signed=self.signed, type_name=self.name)

        # Skip converting bodies that are too long for any in-range value.
        limit = max(self.max_value, -self.min_value)
        if len(magnitude_digits(digits)) > max_digit_count(limit, radix):
            raise overflow_error(digits, radix, self.name)

        value = digits_to_int(digits, radix)
        if value > self.max_value or value < self.min_value:
            logger.debug("Value %d outside [%d, %d] for %s",
                         value, self.min_value, self.max_value, self.name)
            raise overflow_error(digits, radix, self.name)
        return self.scalar_type(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, [{self.min_value}, {self.max_value}])"
