#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared ENDF-format parsing helpers for the PyNKL package

All low-level fixed-width field decoding lives here so that the record
readers never duplicate format-specific logic.  Every function works on
raw bytes; ``str`` input is accepted for convenience and encoded first, so
column positions are always byte positions.

ENDF-6 Fixed-Width Format
-------------------------
Every ENDF record line is 80 characters wide:

* **Columns 1–66** (66 chars): six data fields, each 11 characters wide.
* **Columns 67–70** (4 chars):  MAT number.
* **Columns 71–72** (2 chars):  MF number.
* **Columns 73–75** (3 chars):  MT number.
* **Columns 76–80** (5 chars):  optional line sequence number.

Integers are read with Fortran ``I11`` rules and floats with ``F11.0``
rules, both in *blank interpretation* mode: spaces anywhere in a field are
ignored and a blank field reads as zero.  Floats may use ``E``/``e``,
``D``/``d`` (legacy), or no letter at all before the exponent (the
"E-less" form, e.g. ``" 1.23456-03"``).

References
----------
.. [1] ENDF-6 Formats Manual (ENDF-102), BNL-90365-2009 Rev. 2, §0.6.
"""

from __future__ import annotations

from typing import NamedTuple, Union

from pynkl.exceptions import (
    DataError,
    FormatError,
    ParseFloatError,
    ParseIntegerError,
)
from pynkl.models.records import ControlNumbers
from pynkl.utils.constants import (
    ENDF_FIELD_WIDTH,
    ENDF_FIELDS_PER_LINE,
    ENDF_MAT_COLUMNS,
    ENDF_MF_COLUMNS,
    ENDF_MT_COLUMNS,
    ENDF_NS_COLUMNS,
)

Field = Union[bytes, bytearray, memoryview, str]
"""Anything that can be decoded as a fixed-width field or record line."""

# ---------------------------------------------------------------------------
# Byte classes
# ---------------------------------------------------------------------------

_SPACE = b" "
_MINUS = ord("-")
_POINT = ord(".")
_ZERO = ord("0")
_SIGNS = b"+-"
_DIGITS = b"0123456789"
_EXPONENT_SEPARATORS = b"eEdD"

# ---------------------------------------------------------------------------
# Float conversion constants
# ---------------------------------------------------------------------------

MAX_EXACT_POW_10: int = 22
"""Largest decimal exponent converted with the exact power-of-ten table.

5**22 < 2**53, so every power of ten up to 10**22 is exactly representable
as an IEEE-754 double.  A field holds at most 11 digits, so its mantissa is
exact as well, and one multiplication or division is then correctly
rounded.  Beyond this bound the conversion goes through :func:`float` on a
decimal string instead.
"""

POW_10_TABLE: tuple[float, ...] = (
    1e0, 1e1, 1e2, 1e3, 1e4, 1e5, 1e6, 1e7, 1e8, 1e9,
    1e10, 1e11, 1e12, 1e13, 1e14, 1e15, 1e16, 1e17, 1e18, 1e19,
    1e20, 1e21, 1e22,
)
"""Exact powers of ten 10**0 … 10**22."""


class DecimalValue(NamedTuple):
    """Decimal form of a scanned ENDF float field

    The value is ``(-1 if negative else 1) * mantissa * 10**exponent``.

    Parameters
    ----------
    mantissa : int
        Non-negative decimal significand (at most 11 digits).
    exponent : int
        Decimal exponent, combining the fractional-part shift and any
        explicit exponent.
    negative : bool
        ``True`` when the field carried a leading ``-``.
    """

    mantissa: int
    exponent: int
    negative: bool


def _as_bytes(field: Field) -> bytes:
    if isinstance(field, str):
        return field.encode("utf-8")
    return bytes(field)


# ---------------------------------------------------------------------------
# Numeric conversion
# ---------------------------------------------------------------------------

def parse_endf_integer(field: Field) -> int:
    """Convert an ENDF-6 integer field to a Python int

    Parameters
    ----------
    field : bytes | str
        Field of 1 to 11 characters, read with Fortran ``I11`` rules.

    Returns
    -------
    int
        The decoded value.  Blank fields read as ``0``.

    Raises
    ------
    ParseIntegerError
        If the field is empty, wider than 11 characters, holds only a
        sign, or contains anything other than an optional leading sign,
        digits and spaces.

    Notes
    -----
    Spaces are ignored anywhere in the field, so ``" 1 2"`` reads as
    ``12``.  Eleven characters can never overflow a signed 64-bit value.

    Examples
    --------
    >>> parse_endf_integer(" 1234567890")
    1234567890
    >>> parse_endf_integer("-    1    2")
    -12
    >>> parse_endf_integer("           ")
    0
    """
    raw = _as_bytes(field)
    if not raw:
        raise ParseIntegerError("Empty ENDF integer field.")
    if len(raw) > ENDF_FIELD_WIDTH:
        raise ParseIntegerError(
            f"ENDF integer field {raw!r} is wider than {ENDF_FIELD_WIDTH} characters."
        )

    chars = raw.replace(_SPACE, b"")
    if not chars:
        return 0

    negative = chars[0] == _MINUS
    if chars[0] in _SIGNS:
        chars = chars[1:]
        if not chars:
            raise ParseIntegerError(f"ENDF integer field {raw!r} holds a sign only.")

    if not chars.isdigit():
        raise ParseIntegerError(f"Invalid character in ENDF integer field {raw!r}.")

    value = int(chars)
    return -value if negative else value


def scan_endf_float(field: Field) -> DecimalValue:
    """Scan an ENDF-6 float field into its decimal components

    Parameters
    ----------
    field : bytes | str
        Field of 1 to 11 characters, read with Fortran ``F11.0`` rules.

    Returns
    -------
    DecimalValue
        Mantissa, decimal exponent and sign.  Blank and sign-only fields
        scan as ``DecimalValue(0, 0, False)``.

    Raises
    ------
    ParseFloatError
        If the field is empty, wider than 11 characters, has an exponent
        separator or exponent sign without digits, or has bytes left over
        after the grammar is consumed.

    Notes
    -----
    Accepted grammar, after spaces are removed::

        sign? digits* ('.' digits*)? (('e'|'E'|'d'|'D') sign? digits+ | sign digits+)?
    """
    raw = _as_bytes(field)
    if not raw:
        raise ParseFloatError("Empty ENDF float field.")
    if len(raw) > ENDF_FIELD_WIDTH:
        raise ParseFloatError(
            f"ENDF float field {raw!r} is wider than {ENDF_FIELD_WIDTH} characters."
        )

    chars = raw.replace(_SPACE, b"")
    end = len(chars)
    if end == 0:
        return DecimalValue(0, 0, False)

    pos = 0
    negative = False
    if chars[0] in _SIGNS:
        negative = chars[0] == _MINUS
        pos = 1
        if pos == end:
            return DecimalValue(0, 0, False)

    mantissa = 0
    exponent = 0

    # integral part
    while pos < end and chars[pos] in _DIGITS:
        mantissa = mantissa * 10 + (chars[pos] - _ZERO)
        pos += 1

    # fractional part
    if pos < end and chars[pos] == _POINT:
        pos += 1
        while pos < end and chars[pos] in _DIGITS:
            mantissa = mantissa * 10 + (chars[pos] - _ZERO)
            exponent -= 1
            pos += 1

    # exponential part, with or without a separator letter
    has_exponent = False
    if pos < end and chars[pos] in _EXPONENT_SEPARATORS:
        has_exponent = True
        pos += 1
    negative_exponent = False
    if pos < end and chars[pos] in _SIGNS:
        has_exponent = True
        negative_exponent = chars[pos] == _MINUS
        pos += 1

    exp_start = pos
    exp = 0
    while pos < end and chars[pos] in _DIGITS:
        exp = exp * 10 + (chars[pos] - _ZERO)
        pos += 1

    if has_exponent and pos == exp_start:
        raise ParseFloatError(f"Empty exponent in ENDF float field {raw!r}.")
    if pos < end:
        raise ParseFloatError(
            f"Unexpected character {chr(chars[pos])!r} in ENDF float field {raw!r}."
        )

    exponent += -exp if negative_exponent else exp
    return DecimalValue(mantissa, exponent, negative)


def decimal_to_float(value: DecimalValue) -> float:
    """Convert a scanned decimal value to the nearest double

    Exponents with ``|q| <= MAX_EXACT_POW_10`` are converted with one
    multiplication or division by an exact power of ten; larger exponents
    are formatted as ``"<mantissa>e<exponent>"`` and handed to
    :func:`float`, which rounds correctly.

    Parameters
    ----------
    value : DecimalValue
        Output of :func:`scan_endf_float`.

    Returns
    -------
    float
        Correctly rounded result.  A zero mantissa gives ``0.0`` or
        ``-0.0`` according to the sign.
    """
    mantissa, exponent, negative = value
    if mantissa == 0:
        return -0.0 if negative else 0.0

    if abs(exponent) > MAX_EXACT_POW_10:
        result = float(f"{mantissa}e{exponent}")
    elif exponent < 0:
        result = float(mantissa) / POW_10_TABLE[-exponent]
    else:
        result = float(mantissa) * POW_10_TABLE[exponent]

    return -result if negative else result


def parse_endf_float(field: Field) -> float:
    """Convert an ENDF-6 float field to a Python float

    Parameters
    ----------
    field : bytes | str
        Field of 1 to 11 characters.  May contain leading, trailing or
        interior spaces.

    Returns
    -------
    float
        The converted value.  Blank and sign-only fields read as ``0.0``.

    Raises
    ------
    ParseFloatError
        If the field cannot be decoded (see :func:`scan_endf_float`).

    Examples
    --------
    >>> parse_endf_float(" 1.23456+03")
    1234.56
    >>> parse_endf_float("1.23456D-03")
    0.00123456
    >>> parse_endf_float("1.2345E+01")
    12.345
    >>> parse_endf_float("           ")
    0.0
    """
    return decimal_to_float(scan_endf_float(field))


# ---------------------------------------------------------------------------
# Column decoding
# ---------------------------------------------------------------------------

def as_record(record: Field) -> bytes:
    """Return *record* as bytes without its line terminator"""
    return _as_bytes(record).rstrip(b"\r\n")


def _column_bounds(column: int) -> tuple[int, int]:
    if not 1 <= column <= ENDF_FIELDS_PER_LINE:
        raise ValueError(
            f"ENDF column index must be in [1, {ENDF_FIELDS_PER_LINE}], got {column}."
        )
    return (column - 1) * ENDF_FIELD_WIDTH, column * ENDF_FIELD_WIDTH


def _window(record: bytes, start: int, stop: int) -> bytes:
    if len(record) < stop:
        raise FormatError(
            f"Record of {len(record)} characters is too short for columns "
            f"{start + 1}-{stop}."
        )
    return record[start:stop]


def parse_integer_window(record: Field, start: int, stop: int) -> int:
    """Decode the integer held in ``record[start:stop]``

    Parameters
    ----------
    record : bytes | str
        Record line, with or without its line terminator.
    start, stop : int
        0-based, half-open byte bounds of the field (at most 11 wide).

    Returns
    -------
    int
        Decoded value.

    Raises
    ------
    FormatError
        If the record is shorter than *stop*.
    DataError
        If the field cannot be parsed as an ENDF integer.
    """
    field = _window(as_record(record), start, stop)
    try:
        return parse_endf_integer(field)
    except ParseIntegerError as exc:
        raise DataError(
            f"Invalid ENDF integer {field!r} in columns {start + 1}-{stop}."
        ) from exc


def parse_integer(record: Field, column: int) -> int:
    """Parse the ENDF integer in data field *column* of *record*

    Parameters
    ----------
    record : bytes | str
        Record line.
    column : int
        1-based data field index in ``[1, 6]``.

    Returns
    -------
    int
        Decoded value.

    Raises
    ------
    ValueError
        If *column* is outside ``[1, 6]``.
    FormatError
        If the record is too short to hold the field.
    DataError
        If the field is not a valid ENDF integer.

    Examples
    --------
    >>> record = " 1.23456789-1.23456789          1          2          3          412341212312345"
    >>> parse_integer(record, 3)
    1
    """
    start, stop = _column_bounds(column)
    return parse_integer_window(record, start, stop)


def parse_float(record: Field, column: int) -> float:
    """Parse the ENDF float in data field *column* of *record*

    Parameters
    ----------
    record : bytes | str
        Record line.
    column : int
        1-based data field index in ``[1, 6]``.

    Returns
    -------
    float
        Decoded value.

    Raises
    ------
    ValueError
        If *column* is outside ``[1, 6]``.
    FormatError
        If the record is too short to hold the field.
    DataError
        If the field is not a valid ENDF float.

    Examples
    --------
    >>> record = " 1.23456789-1.23456789          1          2          3          412341212312345"
    >>> parse_float(record, 2)
    -1.23456789
    """
    start, stop = _column_bounds(column)
    field = _window(as_record(record), start, stop)
    try:
        return parse_endf_float(field)
    except ParseFloatError as exc:
        raise DataError(
            f"Invalid ENDF float {field!r} in column {column}."
        ) from exc


# ---------------------------------------------------------------------------
# Control numbers
# ---------------------------------------------------------------------------

def _non_negative(value: int, label: str) -> int:
    if value < 0:
        raise DataError(f"ENDF {label} control number must be non-negative, got {value}.")
    return value


def parse_material(record: Field) -> int:
    """Parse the MAT material number (columns 67–70)

    MAT may be negative: ``-1`` marks the tape end (TEND) record.
    """
    return parse_integer_window(record, *ENDF_MAT_COLUMNS)


def parse_file(record: Field) -> int:
    """Parse the MF file number (columns 71–72)"""
    return _non_negative(parse_integer_window(record, *ENDF_MF_COLUMNS), "MF")


def parse_section(record: Field) -> int:
    """Parse the MT section number (columns 73–75)"""
    return _non_negative(parse_integer_window(record, *ENDF_MT_COLUMNS), "MT")


def parse_sequence(record: Field) -> int | None:
    """Parse the optional NS sequence number (columns 76–80)

    Returns
    -------
    int | None
        The sequence number, or ``None`` when the record stops before
        column 80.

    Raises
    ------
    DataError
        If the field is present but malformed or negative.
    """
    start, stop = ENDF_NS_COLUMNS
    if len(as_record(record)) < stop:
        return None
    return _non_negative(parse_integer_window(record, start, stop), "NS")


def parse_control_numbers(record: Field) -> ControlNumbers:
    """Parse the MAT/MF/MT/NS control numbers of *record*

    Examples
    --------
    >>> record = " 1.23456789-1.23456789          1          2          3          412341212312345"
    >>> parse_control_numbers(record)
    ControlNumbers(mat=1234, mf=12, mt=123, ns=12345)
    """
    line = as_record(record)
    return ControlNumbers(
        mat=parse_material(line),
        mf=parse_file(line),
        mt=parse_section(line),
        ns=parse_sequence(line),
    )


def parse_record(
    record: Field,
) -> tuple[float, float, int, int, int, int, int, int, int, int | None]:
    """Parse a complete 80-column ENDF record

    The record is read as ``float float int int int int MAT MF MT NS?``.

    Returns
    -------
    tuple
        ``(c1, c2, l1, l2, n1, n2, mat, mf, mt, ns)``.

    Raises
    ------
    FormatError
        If the record is too short.
    DataError
        If any field is malformed or a control number is out of range.

    Examples
    --------
    >>> record = " 1.23456789-1.23456789          1          2          3          412341212312345"
    >>> parse_record(record)
    (1.23456789, -1.23456789, 1, 2, 3, 4, 1234, 12, 123, 12345)
    """
    line = as_record(record)
    c1 = parse_float(line, 1)
    c2 = parse_float(line, 2)
    l1 = parse_integer(line, 3)
    l2 = parse_integer(line, 4)
    n1 = parse_integer(line, 5)
    n2 = parse_integer(line, 6)
    mat, mf, mt, ns = parse_control_numbers(line)
    return (c1, c2, l1, l2, n1, n2, mat, mf, mt, ns)
