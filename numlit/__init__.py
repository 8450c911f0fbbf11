#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
numlit - parse radix-prefixed numeric literals into typed values

Converts textual literals in the notations common to C-like languages
into values of any numeric type that can be constructed from a digit
string at a given radix.

Supported Notations
-------------------
=============  ==========================================
Binary         ``0b100010``, ``0B0``, ``0b1010_1101``
Octal          ``0123``, ``00``, ``04763523``
Decimal        ``123``, ``0``, ``9_823_642``
Hexadecimal    ``0xCAFE``, ``0x0``, ``0xa1fb484``
Character      ``'A'``, ``'!'`` (single-byte characters only)
=============  ==========================================

Underscores inside the numeric part are digit-group separators and are
removed before conversion.

Modules
-------
literal
    Parser entry points and the :class:`NumLiteralMixin`.
types
    Numeric type adapters (Python int/float, NumPy integers and floats).
models
    Classification and result records.
utils
    Literal classification and digit validation helpers.
cli
    Command-line front end.

Examples
--------
>>> import numpy as np
>>> from numlit import parse_literal, parse_literal_fallback
>>> parse_literal("0xCAFE", np.uint32)
np.uint32(51966)
>>> parse_literal_fallback("random text", 0xCAFE)
51966
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from numlit.literal import (
    NumLiteralMixin,
    parse_literal,
    parse_literal_fallback,
    try_parse_literal,
)
from numlit.models.records import (
    LiteralClassification,
    Notation,
    ParseErrorKind,
    ParseResult,
    Radix,
)
from numlit.types import (
    NUMERIC_TYPES,
    BaseNumericType,
    BoundedIntegerType,
    FloatType,
    IntegerType,
    resolve_numeric_type,
)
from numlit.utils.parsing import identify_literal
from numlit.exceptions import (
    NumLitError,
    LiteralParseError,
    UnsupportedTypeError,
)

__all__ = [
    # Version
    "__version__",
    # Parser
    "parse_literal",
    "parse_literal_fallback",
    "try_parse_literal",
    "identify_literal",
    "NumLiteralMixin",
    # Models
    "LiteralClassification",
    "Notation",
    "ParseErrorKind",
    "ParseResult",
    "Radix",
    # Types
    "NUMERIC_TYPES",
    "BaseNumericType",
    "BoundedIntegerType",
    "FloatType",
    "IntegerType",
    "resolve_numeric_type",
    # Exceptions
    "NumLitError",
    "LiteralParseError",
    "UnsupportedTypeError",
]
