#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for numeric type adapters and target resolution

Covers unbounded and fixed-width integers, float targets, overflow
reporting and every accepted spelling of a parse target.
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from numlit.exceptions import LiteralParseError, UnsupportedTypeError
from numlit.models.records import ParseErrorKind
from numlit.types import (
    NUMERIC_TYPES,
    BoundedIntegerType,
    DuckTypedNumericType,
    FloatType,
    IntegerType,
    numeric_type_of,
    resolve_numeric_type,
)


def _kind(adapter, digits, radix):
    with pytest.raises(LiteralParseError) as info:
        adapter.from_str_radix(digits, radix)
    return info.value.kind


# -----------------------------------------------------------------------
# IntegerType
# -----------------------------------------------------------------------

class TestIntegerType:
    """Tests for unbounded Python int construction"""

    def test_hex(self) -> None:
        assert IntegerType().from_str_radix("cafe", 16) == 0xCAFE

    def test_negative(self) -> None:
        assert IntegerType().from_str_radix("-42", 10) == -42

    def test_huge_value_does_not_overflow(self) -> None:
        digits = "f" * 64
        assert IntegerType().from_str_radix(digits, 16) == 2**256 - 1

    def test_decimal_beyond_int_str_limit(self) -> None:
        value = IntegerType().from_str_radix("1" * 5000, 10)
        assert value == (10 ** 5000 - 1) // 9

    def test_negative_long_octal(self) -> None:
        value = IntegerType().from_str_radix("-" + "7" * 9000, 8)
        assert value == -(8 ** 9000 - 1)

    def test_long_binary(self) -> None:
        assert IntegerType().from_str_radix("1" * 9000, 2) == 2 ** 9000 - 1

    def test_subclass_constructor(self) -> None:
        class Port(int):
            pass

        value = IntegerType(Port).from_str_radix("80", 10)
        assert type(value) is Port
        assert value == 80

    def test_empty(self) -> None:
        assert _kind(IntegerType(), "", 10) is ParseErrorKind.EMPTY


# -----------------------------------------------------------------------
# BoundedIntegerType
# -----------------------------------------------------------------------

class TestBoundedIntegerType:
    """Tests for fixed-width integer construction"""

    def test_from_dtype_range(self) -> None:
        u8 = BoundedIntegerType.from_dtype("uint8")
        assert (u8.min_value, u8.max_value) == (0, 255)
        assert not u8.signed

    def test_signed_range(self) -> None:
        i16 = BoundedIntegerType.from_dtype(np.int16)
        assert (i16.min_value, i16.max_value) == (-32768, 32767)
        assert i16.signed

    def test_rejects_float_dtype(self) -> None:
        with pytest.raises(ValueError):
            BoundedIntegerType.from_dtype("float32")

    def test_result_type(self) -> None:
        value = BoundedIntegerType.from_dtype("uint32").from_str_radix("cafe", 16)
        assert isinstance(value, np.uint32)
        assert value == 0xCAFE

    def test_max_value(self) -> None:
        u8 = BoundedIntegerType.from_dtype("uint8")
        assert u8.from_str_radix("11111111", 2) == 255

    def test_pos_overflow(self) -> None:
        u8 = BoundedIntegerType.from_dtype("uint8")
        assert _kind(u8, "256", 10) is ParseErrorKind.POS_OVERFLOW

    def test_neg_overflow(self) -> None:
        i8 = BoundedIntegerType.from_dtype("int8")
        assert _kind(i8, "-129", 10) is ParseErrorKind.NEG_OVERFLOW

    def test_signed_min(self) -> None:
        i8 = BoundedIntegerType.from_dtype("int8")
        assert i8.from_str_radix("-128", 10) == -128

    def test_long_body_overflows_without_conversion(self) -> None:
        u64 = BoundedIntegerType.from_dtype("uint64")
        assert _kind(u64, "9" * 5000, 10) is ParseErrorKind.POS_OVERFLOW

    def test_leading_zeros_do_not_overflow(self) -> None:
        u8 = BoundedIntegerType.from_dtype("uint8")
        assert u8.from_str_radix("0" * 40 + "ff", 16) == 255

    def test_unsigned_rejects_minus(self) -> None:
        u8 = BoundedIntegerType.from_dtype("uint8")
        assert _kind(u8, "-1", 10) is ParseErrorKind.INVALID_DIGIT

    def test_uint64_max(self) -> None:
        u64 = BoundedIntegerType.from_dtype("uint64")
        assert u64.from_str_radix("f" * 16, 16) == np.iinfo(np.uint64).max
        assert _kind(u64, "1" + "0" * 16, 16) is ParseErrorKind.POS_OVERFLOW


# -----------------------------------------------------------------------
# FloatType
# -----------------------------------------------------------------------

class TestFloatType:
    """Tests for float construction from integer digits"""

    def test_python_float(self) -> None:
        value = FloatType.python().from_str_radix("ff", 16)
        assert type(value) is float
        assert value == 255.0

    def test_numpy_float32(self) -> None:
        value = FloatType.from_dtype("float32").from_str_radix("1010", 2)
        assert isinstance(value, np.float32)
        assert value == pytest.approx(10.0)

    def test_negative_zero_keeps_sign(self) -> None:
        value = FloatType.python().from_str_radix("-0", 10)
        assert value == 0.0
        assert math.copysign(1.0, value) == -1.0

    def test_negative_zero_numpy(self) -> None:
        assert np.signbit(FloatType.from_dtype("float32").from_str_radix("-0", 16))

    def test_positive_zero(self) -> None:
        assert not np.signbit(FloatType.python().from_str_radix("0", 10))

    def test_fraction_is_invalid(self) -> None:
        assert _kind(FloatType.python(), "1.5", 10) is ParseErrorKind.INVALID_DIGIT

    def test_float16_overflow(self) -> None:
        f16 = FloatType.from_dtype("float16")
        assert _kind(f16, "70000", 10) is ParseErrorKind.POS_OVERFLOW
        assert _kind(f16, "-70000", 10) is ParseErrorKind.NEG_OVERFLOW

    def test_float64_overflow(self) -> None:
        assert _kind(FloatType.python(), "1" + "0" * 400, 10) is ParseErrorKind.POS_OVERFLOW

    def test_rejects_integer_dtype(self) -> None:
        with pytest.raises(ValueError):
            FloatType.from_dtype("int32")


# -----------------------------------------------------------------------
# resolve_numeric_type
# -----------------------------------------------------------------------

class TestResolveNumericType:
    """Tests for parse-target resolution"""

    def test_registry_names(self) -> None:
        for name in ("int", "float", "int8", "uint64", "float32"):
            assert name in NUMERIC_TYPES

    def test_registry_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            NUMERIC_TYPES["int"] = IntegerType()

    def test_python_int(self) -> None:
        assert resolve_numeric_type(int) is NUMERIC_TYPES["int"]

    def test_python_float(self) -> None:
        assert resolve_numeric_type(float) is NUMERIC_TYPES["float"]

    @pytest.mark.parametrize("target", ["uint32", "UINT32", np.uint32, np.dtype("uint32")])
    def test_uint32_spellings(self, target) -> None:
        assert resolve_numeric_type(target) is NUMERIC_TYPES["uint32"]

    def test_numpy_float64_is_numpy_adapter(self) -> None:
        assert resolve_numeric_type(np.float64) is NUMERIC_TYPES["float64"]

    def test_adapter_passthrough(self) -> None:
        adapter = BoundedIntegerType("nibble", int, 0, 15)
        assert resolve_numeric_type(adapter) is adapter

    def test_duck_typed_class(self, money_type) -> None:
        adapter = resolve_numeric_type(money_type)
        assert isinstance(adapter, DuckTypedNumericType)
        assert adapter.from_str_radix("10", 16) == money_type(16)

    def test_int_subclass(self) -> None:
        class Port(int):
            pass

        assert resolve_numeric_type(Port) == IntegerType(Port)

    @pytest.mark.parametrize("target", ["int128", bool, str, object(), None, np.complex64])
    def test_unsupported(self, target) -> None:
        with pytest.raises(UnsupportedTypeError):
            resolve_numeric_type(target)

    def test_numeric_type_of_value(self) -> None:
        assert numeric_type_of(np.uint8(3)) is NUMERIC_TYPES["uint8"]
        assert numeric_type_of(3) is NUMERIC_TYPES["int"]
