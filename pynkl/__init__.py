#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyNKL - Python nuclear data toolkit

Decode ENDF-6 formatted evaluated nuclear data files and ACE (A Compact
ENDF) tables into typed records backed by NumPy arrays, and identify
elements and nuclides.

Modules
-------
readers
    Line-oriented readers for ENDF-6 records and ACE tables.
models
    Typed record dataclasses, :class:`Element` and :class:`Zai`.
data
    :class:`AtomicMassLibrary`, atomic masses keyed by nuclide.
utils
    Fixed-width field decoders, layout constants and range checks.

Examples
--------
>>> from pynkl import EndfReader
>>> with EndfReader.open("n-026_Fe_056.endf") as reader:
...     tpid = reader.read_text()
...     head = reader.read_cont()
>>> head.c1  # ZA
26056.0
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from pynkl.readers.endf import EndfReader
from pynkl.readers.ace import AceReader, parse_ace_table, read_ace_file
from pynkl.data.mass import AtomicMassLibrary
from pynkl.models.element import Element
from pynkl.models.zai import Zai
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
from pynkl.utils.parsing import (
    parse_control_numbers,
    parse_endf_float,
    parse_endf_integer,
    parse_float,
    parse_integer,
    parse_record,
)
from pynkl.exceptions import (
    PyNKLError,
    ParseError,
    ParseIntegerError,
    ParseFloatError,
    DataError,
    FormatError,
    EndOfFileError,
    EndfIOError,
    ValidationError,
)

__all__ = [
    # Version
    "__version__",
    # Readers
    "EndfReader",
    "AceReader",
    "parse_ace_table",
    "read_ace_file",
    # Data
    "AtomicMassLibrary",
    # Models
    "Element",
    "Zai",
    "AceTable",
    "ContinuationRecord",
    "ControlNumbers",
    "IntegerTableRecord",
    "InterpolationRecord1D",
    "InterpolationRecord2D",
    "ListRecord",
    "TextRecord",
    # Field decoding
    "parse_control_numbers",
    "parse_endf_float",
    "parse_endf_integer",
    "parse_float",
    "parse_integer",
    "parse_record",
    # Exceptions
    "PyNKLError",
    "ParseError",
    "ParseIntegerError",
    "ParseFloatError",
    "DataError",
    "FormatError",
    "EndOfFileError",
    "EndfIOError",
    "ValidationError",
]
