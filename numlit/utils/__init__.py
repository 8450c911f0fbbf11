#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared utilities for literal classification and digit validation

This sub-package centralises the text-level helpers so that the numeric
type adapters and the parser entry points share one implementation.
"""

from __future__ import annotations
