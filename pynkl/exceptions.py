#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the PyNKL package

All exceptions raised by PyNKL inherit from :class:`PyNKLError`, making it
possible to catch every library-specific error with a single ``except`` clause
while still allowing fine-grained handling when needed.

Exception Hierarchy
-------------------
::

    PyNKLError
    ├── ParseError          # Unparseable fixed-width field
    │   ├── ParseIntegerError
    │   └── ParseFloatError
    ├── DataError           # Decoded value out of range / bad field
    ├── FormatError         # Structural violation (short line, bad header)
    ├── EndOfFileError      # Stream exhausted before the record was complete
    ├── EndfIOError         # Underlying stream failure
    └── ValidationError     # Identifier and range checks

Programming-contract violations (an ENDF column index outside ``[1, 6]`` or
an INTG digit width outside ``[2, 6]``) are reported with :class:`ValueError`
and are not part of this hierarchy.
"""

from __future__ import annotations


class PyNKLError(Exception):
    """Base exception for all PyNKL errors

    Every exception raised by PyNKL while decoding data is a subclass of
    this type.
    """


class ParseError(PyNKLError):
    """Raised when a single fixed-width field cannot be parsed

    Parameters
    ----------
    message : str
        Human-readable description including the offending field.
    """


class ParseIntegerError(ParseError):
    """Raised by :func:`~pynkl.utils.parsing.parse_endf_integer`"""


class ParseFloatError(ParseError):
    """Raised by :func:`~pynkl.utils.parsing.parse_endf_float`"""


class DataError(PyNKLError):
    """Raised when a record holds invalid data

    The record had the expected layout but one of its fields could not be
    decoded, or decoded to a value outside its allowed range (a negative
    MF/MT control number, a negative list length, a breakpoint that does
    not fit an unsigned 32-bit integer, a TEXT record that is not valid
    text).  When caused by a field parse failure the original
    :class:`ParseError` is available as ``__cause__``.
    """


class FormatError(PyNKLError):
    """Raised when a record does not match the expected fixed-width layout

    Typical causes are a line too short to hold the requested column, or
    an ACE header whose numeric fields cannot be read.
    """


class EndOfFileError(PyNKLError):
    """Raised when the stream is exhausted before a record is complete

    Reading past the last line of a stream always raises this error; a
    zero-length read is never returned as a successful, empty record.
    """


class EndfIOError(PyNKLError):
    """Raised when the underlying stream fails

    The original :class:`OSError` is available as ``__cause__``.
    """


class ValidationError(PyNKLError):
    """Raised when an identifier or value fails a range check

    Used for nuclide identifiers (atomic, mass and isomeric-state
    numbers) and for other post-parse constraints.

    Parameters
    ----------
    message : str
        Description of the failed check, including the field name,
        expected constraint, and actual value.
    """
