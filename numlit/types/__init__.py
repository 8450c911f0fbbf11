#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Numeric type adapters for radix construction

This sub-package provides the "construct a value from a digit string at a
radix, or fail" capability for each supported target:

* :class:`~numlit.types.integers.IntegerType` — unbounded Python ``int``
* :class:`~numlit.types.integers.BoundedIntegerType` — NumPy fixed-width
  integers
* :class:`~numlit.types.floats.FloatType` — Python and NumPy floats
* :class:`~numlit.types.base.DuckTypedNumericType` — any class with its
  own ``from_str_radix``

All adapters share the :class:`~numlit.types.base.BaseNumericType`
interface.
"""

from __future__ import annotations

from numlit.types.base import BaseNumericType, DuckTypedNumericType
from numlit.types.floats import FloatType
from numlit.types.integers import BoundedIntegerType, IntegerType
from numlit.types.registry import NUMERIC_TYPES, numeric_type_of, resolve_numeric_type

__all__ = [
    "BaseNumericType",
    "DuckTypedNumericType",
    "IntegerType",
    "BoundedIntegerType",
    "FloatType",
    "NUMERIC_TYPES",
    "resolve_numeric_type",
    "numeric_type_of",
]
