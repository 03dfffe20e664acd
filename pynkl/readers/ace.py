#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
ACE (A Compact ENDF) text table reader

Parses one table of an ACE text file and returns an
:class:`~pynkl.models.records.AceTable`.

Table layout
------------
* **Header**, in one of two forms:

  - legacy (version 1): one line with the table id (columns 1–10), the
    atomic weight ratio (11–22) and the temperature (23–34), followed by
    one comment line;
  - version 2 (first line starts with ``"2."``): the id in columns 12–35
    of the first line; the atomic weight ratio (1–12), the temperature
    (14–25) and the number of comment lines (38–) on the second line,
    followed by that many comment lines.

* **IZAW**: 4 lines of 4 ``(IZ, AW)`` pairs, 7 + 11 columns each.
* **NXS**: 2 lines of 8 integers, 9 columns each.
* **JXS**: 4 lines of 8 integers, 9 columns each.
* **XSS**: ``NXS(1)`` floats, 4 per line, 20 columns each.

References
----------
.. [1] J. L. Conlin and P. Romano, "A Compact ENDF (ACE) Format
   Specification", LA-UR-19-29016, Los Alamos National Laboratory (2019).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

import numpy as np

from pynkl.exceptions import FormatError
from pynkl.models.records import AceTable
from pynkl.readers.base import BaseReader
from pynkl.utils.constants import (
    ACE_AW_WIDTH,
    ACE_INT_WIDTH,
    ACE_INTS_PER_LINE,
    ACE_IZ_WIDTH,
    ACE_IZAW_LINES,
    ACE_IZAW_PER_LINE,
    ACE_JXS_LINES,
    ACE_NXS_LINES,
    ACE_XSS_PER_LINE,
    ACE_XSS_WIDTH,
)

logger = logging.getLogger(__name__)

ACE_VERSION_2_PREFIX: str = "2."
"""Leading characters of a version 2 header."""


def _field(line: str, start: int, stop: int | None = None) -> str:
    if stop is not None and len(line) < stop:
        raise FormatError(
            f"ACE line of {len(line)} characters is too short for columns "
            f"{start + 1}-{stop}."
        )
    return line[start:stop].strip()


def _to_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise FormatError(f"Invalid ACE integer {text!r}.") from exc
    if value < 0:
        raise FormatError(f"ACE integer {value} must be non-negative.")
    return value


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError as exc:
        raise FormatError(f"Invalid ACE float {text!r}.") from exc


class AceReader(BaseReader):
    """Reader for ACE text tables

    Examples
    --------
    >>> with AceReader.open("92235.710nc") as reader:
    ...     table = reader.read()
    >>> table.id
    '92235.71c'
    """

    def _next_line(self) -> str:
        raw = self.read_line()
        try:
            return raw.decode("ascii").rstrip("\r\n")
        except UnicodeDecodeError as exc:
            raise FormatError("ACE line is not ASCII text.") from exc

    def read(self) -> AceTable:
        """Read one ACE table from the stream

        Returns
        -------
        AceTable
            The decoded table.

        Raises
        ------
        EndOfFileError
            If the stream ends before the table is complete.
        FormatError
            If a line is too short or a number is malformed.
        """
        first = self._next_line()
        if first.startswith(ACE_VERSION_2_PREFIX):
            table_id, awr, temperature = self._read_header_version2(first)
        else:
            table_id, awr, temperature = self._read_header_version1(first)
        logger.debug("ACE table %s: AWR=%g, kT=%g", table_id, awr, temperature)

        izaw = self._read_izaw()
        nxs = self._read_integers(ACE_NXS_LINES)
        jxs = self._read_integers(ACE_JXS_LINES)
        xss = self._read_xss(int(nxs[0]))
        logger.debug("ACE table %s: %d XSS values", table_id, xss.size)

        return AceTable(
            id=table_id,
            atomic_weight_ratio=awr,
            temperature=temperature,
            izaw=izaw,
            nxs=nxs,
            jxs=jxs,
            xss=xss,
        )

    def _read_header_version1(self, line: str) -> tuple[str, float, float]:
        table_id = _field(line, 0, 10)
        awr = _to_float(_field(line, 10, 22))
        temperature = _to_float(_field(line, 22, 34))
        self._next_line()  # comment
        return table_id, awr, temperature

    def _read_header_version2(self, line: str) -> tuple[str, float, float]:
        table_id = _field(line, 11, 35)
        line = self._next_line()
        awr = _to_float(_field(line, 0, 12))
        temperature = _to_float(_field(line, 13, 25))
        ncomments = _to_int(_field(line, 37))
        for _ in range(ncomments):
            self._next_line()
        return table_id, awr, temperature

    def _read_izaw(self) -> list[tuple[int, float]]:
        izaw: list[tuple[int, float]] = []
        stride = ACE_IZ_WIDTH + ACE_AW_WIDTH
        for _ in range(ACE_IZAW_LINES):
            line = self._next_line()
            for i in range(ACE_IZAW_PER_LINE):
                start = i * stride
                iz = _to_int(_field(line, start, start + ACE_IZ_WIDTH))
                aw = _to_float(_field(line, start + ACE_IZ_WIDTH, start + stride))
                izaw.append((iz, aw))
        return izaw

    def _read_integers(self, nlines: int) -> np.ndarray:
        values = np.empty(nlines * ACE_INTS_PER_LINE, dtype=np.int64)
        for row in range(nlines):
            line = self._next_line()
            for i in range(ACE_INTS_PER_LINE):
                start = i * ACE_INT_WIDTH
                values[row * ACE_INTS_PER_LINE + i] = _to_int(
                    _field(line, start, start + ACE_INT_WIDTH)
                )
        return values

    def _read_xss(self, size: int) -> np.ndarray:
        xss = np.empty(size, dtype=np.float64)
        count = 0
        while count < size:
            line = self._next_line()
            for i in range(ACE_XSS_PER_LINE):
                if count == size:
                    break
                start = i * ACE_XSS_WIDTH
                xss[count] = _to_float(_field(line, start, start + ACE_XSS_WIDTH))
                count += 1
        return xss


def parse_ace_table(stream: BinaryIO) -> AceTable:
    """Parse one ACE table from a binary stream

    The stream is left open and positioned after the last XSS line.
    """
    return AceReader(stream).read()


def read_ace_file(path: Path | str) -> AceTable:
    """Open *path* and parse the ACE table it holds"""
    with AceReader.open(path) as reader:
        return reader.read()
