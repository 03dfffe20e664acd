#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Line-oriented readers for nuclear data files

* :class:`~pynkl.readers.endf.EndfReader`: ENDF-6 records (CONT, TEXT,
  INTG, LIST, TAB1, TAB2)
* :class:`~pynkl.readers.ace.AceReader`: ACE text tables

Both readers share the :class:`~pynkl.readers.base.BaseReader` stream
handling.
"""

from __future__ import annotations

from pynkl.readers.ace import AceReader, parse_ace_table, read_ace_file
from pynkl.readers.endf import EndfReader

__all__ = ["AceReader", "EndfReader", "parse_ace_table", "read_ace_file"]
