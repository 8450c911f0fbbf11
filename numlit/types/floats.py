#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Floating-point type adapter

Float targets accept the same integer digit bodies as integer targets, in
any radix, and keep the sign of zero (``"-0"`` gives ``-0.0``).  Fractions
and exponents are not literal syntax here and fail as invalid digits.  A
magnitude beyond the largest finite value of the float width is reported
as overflow instead of becoming ``inf``.
"""

from __future__ import annotations

import logging
import math
from typing import Any

import numpy as np

from numlit.types.base import BaseNumericType, overflow_error
from numlit.types.integers import digits_to_int, magnitude_digits, max_digit_count
from numlit.utils.validation import validate_digits

logger = logging.getLogger(__name__)


class FloatType(BaseNumericType):
    """Adapter for a floating-point type

    Parameters
    ----------
    name : str
        Type name, e.g. ``"float32"``.
    scalar_type : type
        Constructor, e.g. :class:`float` or :class:`numpy.float32`.
    max_value : float
        Largest finite value of the type.
    """

    def __init__(self, name: str, scalar_type: type, max_value: float) -> None:
        super().__init__(name, scalar_type)
        self.max_value = float(max_value)

    @classmethod
    def from_dtype(cls, dtype: Any) -> FloatType:
        """Build an adapter from a NumPy float dtype or its name"""
        dt = np.dtype(dtype)
        if dt.kind != "f":
            raise ValueError(f"{dt.name!r} is not a floating-point dtype")
        return cls(dt.name, dt.type, np.finfo(dt).max)

    @classmethod
    def python(cls, scalar_type: type = float) -> FloatType:
        """Adapter for Python's built-in ``float`` (or a subclass)"""
        return cls(scalar_type.__name__, scalar_type, np.finfo(np.float64).max)

    def from_str_radix(self, digits: str, radix: int) -> Any:
        validate_digits(digits, radix, signed=True, type_name=self.name)

        limit = int(self.max_value)
        if len(magnitude_digits(digits)) > max_digit_count(limit, radix):
            raise overflow_error(digits, radix, self.name)

        value = digits_to_int(digits, radix)
        if abs(value) > limit:
            logger.debug("Magnitude of %r exceeds %s max %.6e", digits, self.name, self.max_value)
            raise overflow_error(digits, radix, self.name)
        sign = -1.0 if digits.startswith("-") else 1.0
        return self.scalar_type(math.copysign(float(value), sign))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, max={self.max_value:.6e})"
