#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Range checks for decoded values and nuclide identifiers

Two families of checks live here:

* Record checks raise :class:`~pynkl.exceptions.DataError`.  They guard
  values read from a file (list lengths, interpolation breakpoints) where
  an out-of-range value means the data is bad.
* Identifier checks raise :class:`~pynkl.exceptions.ValidationError`.
  They guard values supplied by the caller when building a
  :class:`~pynkl.models.zai.Zai`.

Checked Constraints
-------------------
* Record counts (NPL, NR, NP, NZ) must be non-negative.
* Interpolation breakpoints must fit an unsigned 32-bit integer.
* Interpolation scheme codes must be non-negative.
* Atomic number must be in the range 1 ≤ Z ≤ 118.
* Mass number must satisfy Z ≤ A < 1000.
* Isomeric state number must satisfy 0 ≤ I < 10.
"""

from __future__ import annotations

import logging

from pynkl.exceptions import DataError, ValidationError
from pynkl.utils.constants import MAX_ATOMIC_NUMBER

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------

MIN_ATOMIC_NUMBER: int = 1
"""Smallest valid atomic number (hydrogen)."""

MAX_MASS_NUMBER: int = 999
"""Largest mass number representable in a ZAI identifier."""

MAX_ISOMERIC_STATE: int = 9
"""Largest isomeric state number representable in a ZAI identifier."""

MAX_BREAKPOINT: int = 2**32 - 1
"""Largest NBT interpolation breakpoint (unsigned 32-bit)."""


# ---------------------------------------------------------------------------
# Record checks
# ---------------------------------------------------------------------------

def validate_count(count: int, label: str = "count") -> int:
    """Verify that a record count read from a header is non-negative

    Parameters
    ----------
    count : int
        Decoded count (NPL, NR, NP or NZ).
    label : str, optional
        Name of the count for error messages.

    Returns
    -------
    int
        *count*, unchanged.

    Raises
    ------
    DataError
        If *count* is negative.
    """
    if count < 0:
        raise DataError(f"Record count {label}={count} must be non-negative.")
    return count


def validate_breakpoint(nbt: int) -> int:
    """Verify that an interpolation breakpoint fits an unsigned 32-bit integer

    Raises
    ------
    DataError
        If *nbt* is outside ``[0, 2**32 - 1]``.
    """
    if not (0 <= nbt <= MAX_BREAKPOINT):
        raise DataError(
            f"Interpolation breakpoint NBT={nbt} does not fit an unsigned 32-bit integer."
        )
    return nbt


def validate_scheme(scheme: int) -> int:
    """Verify that an interpolation scheme code is non-negative

    Raises
    ------
    DataError
        If *scheme* is negative.
    """
    if scheme < 0:
        raise DataError(f"Interpolation scheme INT={scheme} must be non-negative.")
    return scheme


# ---------------------------------------------------------------------------
# Identifier checks
# ---------------------------------------------------------------------------

def validate_atomic_number(Z: int) -> None:
    """Verify that *Z* is a valid atomic number

    Parameters
    ----------
    Z : int
        Atomic number to validate.

    Raises
    ------
    ValidationError
        If *Z* is outside the range [1, 118].

    Examples
    --------
    >>> validate_atomic_number(26)  # Iron
    >>> validate_atomic_number(0)   # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    pynkl.exceptions.ValidationError: ...
    """
    if not (MIN_ATOMIC_NUMBER <= Z <= MAX_ATOMIC_NUMBER):
        raise ValidationError(
            f"Atomic number Z={Z} is outside the valid range "
            f"[{MIN_ATOMIC_NUMBER}, {MAX_ATOMIC_NUMBER}]."
        )
    logger.debug("Atomic number Z=%d passed validation.", Z)


def validate_mass_number(A: int, Z: int) -> None:
    """Verify that *A* is a valid mass number for atomic number *Z*

    Raises
    ------
    ValidationError
        If ``A < Z`` (fewer nucleons than protons) or ``A > 999``.
    """
    if A < Z:
        raise ValidationError(
            f"Mass number A={A} is smaller than atomic number Z={Z}."
        )
    if A > MAX_MASS_NUMBER:
        raise ValidationError(
            f"Mass number A={A} exceeds the maximum of {MAX_MASS_NUMBER}."
        )


def validate_isomeric_state(I: int) -> None:  # noqa: E741
    """Verify that *I* is a valid isomeric state number

    Raises
    ------
    ValidationError
        If *I* is outside ``[0, 9]``.
    """
    if not (0 <= I <= MAX_ISOMERIC_STATE):
        raise ValidationError(
            f"Isomeric state number I={I} is outside the valid range "
            f"[0, {MAX_ISOMERIC_STATE}]."
        )
