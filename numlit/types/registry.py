#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Resolution of parse targets to numeric type adapters

The parser accepts many spellings of "the type to produce": Python's
``int``/``float``, NumPy scalar types, :class:`numpy.dtype` objects, dtype
names, ready-made adapters, and any class exposing a ``from_str_radix``
classmethod.  :func:`resolve_numeric_type` maps all of them to a
:class:`~numlit.types.base.BaseNumericType`.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

import numpy as np

from numlit.exceptions import UnsupportedTypeError
from numlit.types.base import BaseNumericType, DuckTypedNumericType
from numlit.types.floats import FloatType
from numlit.types.integers import BoundedIntegerType, IntegerType

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Type configuration
# ---------------------------------------------------------------------------

INTEGER_DTYPES: tuple[str, ...] = (
    "int8", "int16", "int32", "int64",
    "uint8", "uint16", "uint32", "uint64",
)
"""NumPy integer dtypes registered as fixed-width targets."""

FLOAT_DTYPES: tuple[str, ...] = ("float16", "float32", "float64")
"""NumPy float dtypes registered as float targets."""


def _build_registry() -> Mapping[str, BaseNumericType]:
    types: dict[str, BaseNumericType] = {"int": IntegerType(int)}
    for name in INTEGER_DTYPES:
        types[name] = BoundedIntegerType.from_dtype(name)
    types["float"] = FloatType.python()
    for name in FLOAT_DTYPES:
        types[name] = FloatType.from_dtype(name)
    return MappingProxyType(types)


NUMERIC_TYPES: Mapping[str, BaseNumericType] = _build_registry()
"""Read-only mapping of registered type names to adapters."""


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

def resolve_numeric_type(target: Any) -> BaseNumericType:
    """Return the adapter for a parse target

    Parameters
    ----------
    target : Any
        One of:

        * a :class:`BaseNumericType` instance (returned unchanged);
        * a registered type name such as ``"uint32"`` or ``"int"``;
        * a :class:`numpy.dtype` or NumPy scalar type;
        * a class with a ``from_str_radix(digits, radix)`` classmethod;
        * ``int``, ``float`` or a subclass of either (``bool`` excluded).

    Returns
    -------
    BaseNumericType
        Adapter used to construct values of the target type.

    Raises
    ------
    UnsupportedTypeError
        If *target* matches none of the above.

    Examples
    --------
    >>> import numpy as np
    >>> resolve_numeric_type(np.uint16)
    BoundedIntegerType('uint16', [0, 65535])
    >>> resolve_numeric_type("int")
    IntegerType('int')
    """
    if isinstance(target, BaseNumericType):
        return target

    if isinstance(target, str):
        adapter = NUMERIC_TYPES.get(target.lower())
        if adapter is None:
            raise UnsupportedTypeError(
                f"Unknown numeric type name {target!r}; expected one of "
                f"{', '.join(NUMERIC_TYPES)}."
            )
        return adapter

    if isinstance(target, np.dtype):
        return resolve_numeric_type(target.name)

    if isinstance(target, type):
        if issubclass(target, np.generic):
            return resolve_numeric_type(np.dtype(target).name)
        if callable(getattr(target, "from_str_radix", None)):
            logger.debug("Using %s.from_str_radix directly", target.__name__)
            return DuckTypedNumericType(target)
        if issubclass(target, bool):
            raise UnsupportedTypeError("bool is not a numeric parse target.")
        if issubclass(target, int):
            return NUMERIC_TYPES["int"] if target is int else IntegerType(target)
        if issubclass(target, float):
            return NUMERIC_TYPES["float"] if target is float else FloatType.python(target)

    raise UnsupportedTypeError(
        f"Cannot parse literals into {target!r}: not a registered type name, "
        f"NumPy numeric type, int/float type, or class with from_str_radix."
    )


def numeric_type_of(value: Any) -> BaseNumericType:
    """Return the adapter for the type of an existing *value*

    Used to infer the target type from a fallback value.
    """
    return resolve_numeric_type(type(value))
