#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed models for decoded nuclear data

Record dataclasses are the sole output of the reader layer.
:class:`Element` and :class:`Zai` identify chemical elements and nuclides.
"""

from __future__ import annotations

from pynkl.models.element import Element
from pynkl.models.records import (
    AceTable,
    ContinuationRecord,
    ControlNumbers,
    IntegerTableRecord,
    InterpolationRecord1D,
    InterpolationRecord2D,
    ListRecord,
    TextRecord,
)
from pynkl.models.zai import Zai

__all__ = [
    "AceTable",
    "ContinuationRecord",
    "ControlNumbers",
    "Element",
    "IntegerTableRecord",
    "InterpolationRecord1D",
    "InterpolationRecord2D",
    "ListRecord",
    "TextRecord",
    "Zai",
]
