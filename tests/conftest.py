#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for numlit tests

Provides literal tables and custom numeric classes used across the
classifier, type adapter, parser and CLI tests.
"""

from __future__ import annotations

import pytest

from numlit.exceptions import LiteralParseError
from numlit.models.records import ParseErrorKind


class Money:
    """Duck-typed numeric class with its own radix constructor"""

    def __init__(self, cents: int) -> None:
        self.cents = cents

    @classmethod
    def from_str_radix(cls, digits: str, radix: int) -> "Money":
        if not digits.isdigit():
            raise LiteralParseError(ParseErrorKind.INVALID_DIGIT, digits, radix, "Money")
        return cls(int(digits, radix))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Money) and other.cents == self.cents


class Strict:
    """Duck-typed class whose constructor raises a plain ValueError"""

    @classmethod
    def from_str_radix(cls, digits: str, radix: int) -> int:
        raise ValueError(f"Strict refuses {digits!r}")


@pytest.fixture
def money_type() -> type:
    return Money


@pytest.fixture
def strict_type() -> type:
    return Strict


@pytest.fixture
def valid_literals() -> dict[str, int]:
    """Literal text mapped to its expected Python int value"""
    return {
        "0": 0,
        "00": 0,
        "7": 7,
        "9_823_642": 9823642,
        "0xCAFE": 0xCAFE,
        "0XcaFe": 0xCAFE,
        "0x0": 0,
        "0xa1fb484": 0xA1FB484,
        "0b1000_0001_1111_1010": 33274,
        "0B1000111011000010": 36546,
        "0B0": 0,
        "0723642": 239522,
        "04763523": 0o4763523,
        "'A'": 65,
        "'!'": 33,
        "  0x1F  ": 31,
        "\t42\n": 42,
    }


@pytest.fixture
def invalid_literals() -> list[str]:
    """Literals that fail for every target type"""
    return [
        "",
        "   ",
        "CAFE",
        "random text",
        "0x",
        "0b",
        "08",
        "0b102",
        "0xG",
        "''",
        "'ABC'",
        "'全'",
        "1.5",
        "1e3",
    ]
