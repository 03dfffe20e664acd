#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
ENDF-6 record reader

Reads the six basic ENDF-6 record shapes from a line-oriented binary
stream and returns them as the dataclasses of :mod:`pynkl.models.records`.

Supported records
-----------------
* **CONT**: one line, ``C1 C2 L1 L2 N1 N2``.  HEAD, DIR, SEND, FEND, MEND
  and TEND records share this layout and are read with :meth:`read_cont`.
* **TEXT**: one line, 66 columns of free text.
* **INTG**: one line, ``II JJ`` followed by a run of NDIGIT-wide integers.
* **LIST**: a CONT-like header with NPL in the N1 position, then NPL floats,
  six per line.
* **TAB1**: a header with NR and NP, then NR ``(NBT, INT)`` pairs and NP
  ``(x, y)`` pairs, three pairs per line.
* **TAB2**: a header with NR and NZ, then NR ``(NBT, INT)`` pairs.

The reader does not interpret what a record means: it never looks at the
MAT/MF/MT control numbers of the lines it decodes.  Use
:func:`~pynkl.utils.parsing.parse_control_numbers` on :attr:`line` for
that.

References
----------
.. [1] ENDF-6 Formats Manual (ENDF-102, BNL-90365-2009 Rev. 2), §0.6.
"""

from __future__ import annotations

import logging

import numpy as np

from pynkl.exceptions import DataError, FormatError, ParseIntegerError
from pynkl.models.records import (
    ContinuationRecord,
    IntegerTableRecord,
    InterpolationRecord1D,
    InterpolationRecord2D,
    ListRecord,
    TextRecord,
)
from pynkl.readers.base import BaseReader
from pynkl.utils.constants import (
    ENDF_DATA_WIDTH,
    ENDF_FIELDS_PER_LINE,
    ENDF_PAIRS_PER_LINE,
    INTG_HEADER_WIDTH,
    INTG_MAX_DIGITS,
    INTG_MIN_DIGITS,
)
from pynkl.utils.parsing import (
    as_record,
    parse_endf_integer,
    parse_float,
    parse_integer,
)
from pynkl.utils.validation import (
    validate_breakpoint,
    validate_count,
    validate_scheme,
)

logger = logging.getLogger(__name__)

_Header = tuple[float, float, int, int, int, int]

INTG_VALUE_START: dict[int, int] = {
    ndigit: 2 * INTG_HEADER_WIDTH + (1 if ndigit <= 5 else 0)
    for ndigit in range(INTG_MIN_DIGITS, INTG_MAX_DIGITS + 1)
}
"""0-based byte offset of the first INTG value for each digit count."""


class EndfReader(BaseReader):
    """Reader for ENDF-6 formatted text

    Parameters
    ----------
    stream : BinaryIO
        Binary stream positioned at the start of a record.

    Notes
    -----
    Every ``read_*`` method consumes exactly the lines of one record.
    When a record is malformed the exception propagates to the caller and
    no partial record is returned; the lines already consumed stay
    consumed.

    Examples
    --------
    >>> with EndfReader.open("n-026_Fe_056.endf") as reader:
    ...     tpid = reader.read_text()
    ...     head = reader.read_cont()
    >>> head.c1  # ZA
    26056.0
    """

    def _read_header(self) -> _Header:
        line = as_record(self.read_line())
        return (
            parse_float(line, 1),
            parse_float(line, 2),
            parse_integer(line, 3),
            parse_integer(line, 4),
            parse_integer(line, 5),
            parse_integer(line, 6),
        )

    def _read_interpolation_table(
        self, nr: int
    ) -> tuple[np.ndarray, np.ndarray]:
        breakpoints = np.empty(nr, dtype=np.uint32)
        schemes = np.empty(nr, dtype=np.int64)
        count = 0
        while count < nr:
            line = as_record(self.read_line())
            for pair in range(ENDF_PAIRS_PER_LINE):
                if count == nr:
                    break
                breakpoints[count] = validate_breakpoint(
                    parse_integer(line, 2 * pair + 1)
                )
                schemes[count] = validate_scheme(parse_integer(line, 2 * pair + 2))
                count += 1
        return breakpoints, schemes

    # -----------------------------------------------------------------
    # Records
    # -----------------------------------------------------------------

    def read_cont(self) -> ContinuationRecord:
        """Read a **CONT** record

        Raises
        ------
        EndOfFileError
            If the stream is exhausted.
        FormatError
            If the line is shorter than 66 columns.
        DataError
            If a field cannot be decoded.
        """
        c1, c2, l1, l2, n1, n2 = self._read_header()
        return ContinuationRecord(c1, c2, l1, l2, n1, n2)

    def read_text(self) -> TextRecord:
        """Read a **TEXT** record

        Returns
        -------
        TextRecord
            The first 66 columns of the line, decoded as UTF-8.

        Raises
        ------
        FormatError
            If the line is shorter than 66 bytes.
        DataError
            If the 66 bytes are not valid UTF-8.
        """
        line = as_record(self.read_line())
        if len(line) < ENDF_DATA_WIDTH:
            raise FormatError(
                f"TEXT record of {len(line)} characters is shorter than "
                f"{ENDF_DATA_WIDTH}."
            )
        try:
            content = line[:ENDF_DATA_WIDTH].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DataError("TEXT record is not valid UTF-8.") from exc
        return TextRecord(content)

    def read_intg(self, ndigit: int) -> IntegerTableRecord:
        """Read an **INTG** record

        Parameters
        ----------
        ndigit : int
            Number of digits per value, 2 to 6.  Each value occupies
            ``ndigit + 1`` columns (a sign column plus the digits).

        Returns
        -------
        IntegerTableRecord
            ``II`` (columns 1–5), ``JJ`` (columns 6–10) and the packed
            values, which start in column 12 for ``ndigit <= 5`` and in
            column 11 for ``ndigit == 6``.  The number of values is 18, 13,
            11, 9 and 8 for ``ndigit`` 2 to 6.

        Raises
        ------
        ValueError
            If *ndigit* is outside ``[2, 6]``.
        FormatError
            If the line is too short.
        DataError
            If ``II``, ``JJ`` or a value cannot be decoded.
        """
        if not INTG_MIN_DIGITS <= ndigit <= INTG_MAX_DIGITS:
            raise ValueError(
                f"INTG digit count must be in [{INTG_MIN_DIGITS}, "
                f"{INTG_MAX_DIGITS}], got {ndigit}."
            )
        line = as_record(self.read_line())

        width = ndigit + 1
        start = INTG_VALUE_START[ndigit]
        count = (ENDF_DATA_WIDTH - start) // width
        stop = start + count * width
        if len(line) < stop:
            raise FormatError(
                f"INTG record of {len(line)} characters is shorter than {stop}."
            )

        ii = self._intg_field(line, 0, INTG_HEADER_WIDTH)
        jj = self._intg_field(line, INTG_HEADER_WIDTH, 2 * INTG_HEADER_WIDTH)
        values = np.empty(count, dtype=np.int64)
        for i, ptr in enumerate(range(start, stop, width)):
            values[i] = self._intg_field(line, ptr, ptr + width)
        return IntegerTableRecord(ii, jj, values)

    @staticmethod
    def _intg_field(line: bytes, start: int, stop: int) -> int:
        try:
            return parse_endf_integer(line[start:stop])
        except ParseIntegerError as exc:
            raise DataError(
                f"Invalid INTG value {line[start:stop]!r} in columns "
                f"{start + 1}-{stop}."
            ) from exc

    def read_list(self) -> ListRecord:
        """Read a **LIST** record

        Returns
        -------
        ListRecord
            Header values and the ``NPL`` floats that follow it, six per
            line.

        Raises
        ------
        EndOfFileError
            If the stream ends before ``NPL`` values are read.
        DataError
            If ``NPL`` is negative or a value cannot be decoded.
        """
        c1, c2, l1, l2, npl, n2 = self._read_header()
        validate_count(npl, "NPL")
        logger.debug("LIST: NPL=%d", npl)

        values = np.empty(npl, dtype=np.float64)
        count = 0
        while count < npl:
            line = as_record(self.read_line())
            for column in range(1, ENDF_FIELDS_PER_LINE + 1):
                if count == npl:
                    break
                values[count] = parse_float(line, column)
                count += 1
        return ListRecord(c1, c2, l1, l2, npl, n2, values)

    def read_tab1(self) -> InterpolationRecord1D:
        """Read a **TAB1** record

        Returns
        -------
        InterpolationRecord1D
            Header values, ``NR`` interpolation regions and ``NP``
            tabulated ``(x, y)`` points.

        Raises
        ------
        EndOfFileError
            If the stream ends inside the record.
        DataError
            If ``NR`` or ``NP`` is negative, a breakpoint does not fit an
            unsigned 32-bit integer, a scheme is negative, or a value
            cannot be decoded.
        """
        c1, c2, l1, l2, nr, npoints = self._read_header()
        validate_count(nr, "NR")
        validate_count(npoints, "NP")
        logger.debug("TAB1: NR=%d, NP=%d", nr, npoints)

        breakpoints, schemes = self._read_interpolation_table(nr)
        x = np.empty(npoints, dtype=np.float64)
        y = np.empty(npoints, dtype=np.float64)
        count = 0
        while count < npoints:
            line = as_record(self.read_line())
            for pair in range(ENDF_PAIRS_PER_LINE):
                if count == npoints:
                    break
                x[count] = parse_float(line, 2 * pair + 1)
                y[count] = parse_float(line, 2 * pair + 2)
                count += 1
        return InterpolationRecord1D(
            c1, c2, l1, l2, nr, npoints, breakpoints, schemes, x, y
        )

    def read_tab2(self) -> InterpolationRecord2D:
        """Read a **TAB2** record

        The ``NZ`` sub-records that follow a TAB2 record are not read.

        Raises
        ------
        EndOfFileError
            If the stream ends inside the interpolation table.
        DataError
            If ``NR`` or ``NZ`` is negative or a region is invalid.
        """
        c1, c2, l1, l2, nr, nz = self._read_header()
        validate_count(nr, "NR")
        validate_count(nz, "NZ")
        logger.debug("TAB2: NR=%d, NZ=%d", nr, nz)

        breakpoints, schemes = self._read_interpolation_table(nr)
        return InterpolationRecord2D(c1, c2, l1, l2, nr, nz, breakpoints, schemes)

    read_continuation_record = read_cont
    read_text_record = read_text
    read_integer_table_record = read_intg
    read_list_record = read_list
    read_interpolation_record_1d = read_tab1
    read_interpolation_record_2d = read_tab2
