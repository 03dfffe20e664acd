#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed dataclass models for decoded ENDF and ACE records

Every model is a plain ``dataclass`` carrying scalar fields and NumPy
arrays.  Models are the sole output of the reader layer.  A model owns its
arrays: nothing in it refers back to the reader's line buffer.

Hierarchy
---------
::

    ControlNumbers           MAT / MF / MT / NS of a single line
    ContinuationRecord       CONT: two floats, four integers
    TextRecord               TEXT: 66 columns of free text
    IntegerTableRecord       INTG: II, JJ and a run of NDIGIT integers
    ListRecord               LIST: CONT header plus NPL floats
    InterpolationRecord1D    TAB1: regions (NBT, INT) and (x, y) pairs
    InterpolationRecord2D    TAB2: regions (NBT, INT) only
    AceTable                 one ACE (A Compact ENDF) table
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np


class ControlNumbers(NamedTuple):
    """Trailing control numbers of an ENDF line

    Parameters
    ----------
    mat : int
        Material number (columns 67–70), ``-1`` on the TEND record.
    mf : int
        File number (columns 71–72).
    mt : int
        Section number (columns 73–75).
    ns : int | None
        Line sequence number (columns 76–80), ``None`` if absent.
    """

    mat: int
    mf: int
    mt: int
    ns: int | None


# ---------------------------------------------------------------------------
# ENDF records
# ---------------------------------------------------------------------------

@dataclass
class ContinuationRecord:
    """An ENDF **CONT** record

    ``[MAT, MF, MT / C1, C2, L1, L2, N1, N2] CONT``

    HEAD, DIR, SEND, FEND, MEND and TEND records share this layout.
    """

    c1: float
    c2: float
    l1: int
    l2: int
    n1: int
    n2: int


@dataclass
class TextRecord:
    """An ENDF **TEXT** record (66 columns of free text)"""

    content: str


@dataclass
class IntegerTableRecord:
    """An ENDF **INTG** record

    Parameters
    ----------
    ii : int
        Row index (columns 1–5).
    jj : int
        Column index (columns 6–10).
    values : numpy.ndarray
        ``int64`` array of the KIJ values packed after the header.
    """

    ii: int
    jj: int
    values: np.ndarray = field(default_factory=lambda: np.empty(0, dtype="i8"))


@dataclass
class ListRecord:
    """An ENDF **LIST** record

    Parameters
    ----------
    c1, c2 : float
        Header floats.
    l1, l2 : int
        Header integers.
    npl : int
        Number of items in the list.
    n2 : int
        Trailing header integer.
    values : numpy.ndarray
        ``float64`` array of length *npl*.
    """

    c1: float
    c2: float
    l1: int
    l2: int
    npl: int
    n2: int
    values: np.ndarray = field(default_factory=lambda: np.empty(0, dtype="f8"))


@dataclass
class InterpolationRecord1D:
    """An ENDF **TAB1** record

    Parameters
    ----------
    c1, c2 : float
        Header floats.
    l1, l2 : int
        Header integers.
    nr : int
        Number of interpolation regions.
    npoints : int
        Number of (x, y) points (NP).
    breakpoints : numpy.ndarray
        ``uint32`` NBT array, shape ``(nr,)``.
    schemes : numpy.ndarray
        ``int64`` INT interpolation law codes, shape ``(nr,)``.
    x, y : numpy.ndarray
        ``float64`` tabulated pairs, shape ``(npoints,)``.
    """

    c1: float
    c2: float
    l1: int
    l2: int
    nr: int
    npoints: int
    breakpoints: np.ndarray
    schemes: np.ndarray
    x: np.ndarray
    y: np.ndarray

    @property
    def regions(self) -> list[tuple[int, int]]:
        """``(breakpoint, scheme)`` pairs"""
        return list(zip(self.breakpoints.tolist(), self.schemes.tolist()))

    @property
    def points(self) -> list[tuple[float, float]]:
        """``(x, y)`` pairs"""
        return list(zip(self.x.tolist(), self.y.tolist()))


@dataclass
class InterpolationRecord2D:
    """An ENDF **TAB2** record

    Same header and interpolation table as :class:`InterpolationRecord1D`,
    with NZ (the number of subsequent sub-records) in place of NP and no
    (x, y) table.
    """

    c1: float
    c2: float
    l1: int
    l2: int
    nr: int
    nz: int
    breakpoints: np.ndarray
    schemes: np.ndarray

    @property
    def regions(self) -> list[tuple[int, int]]:
        """``(breakpoint, scheme)`` pairs"""
        return list(zip(self.breakpoints.tolist(), self.schemes.tolist()))


# ---------------------------------------------------------------------------
# ACE tables
# ---------------------------------------------------------------------------

@dataclass
class AceTable:
    """One table of an ACE (A Compact ENDF) text file

    Parameters
    ----------
    id : str
        Table identifier (ZAID with library suffix, e.g. ``"92235.80c"``).
    atomic_weight_ratio : float
        AWR of the target.
    temperature : float
        Temperature kT (MeV).
    izaw : list[tuple[int, float]]
        Sixteen (IZ, AW) pairs.
    nxs : numpy.ndarray
        ``int64`` NXS array, shape ``(16,)``.  ``nxs[0]`` is the XSS length.
    jxs : numpy.ndarray
        ``int64`` JXS array, shape ``(32,)``.
    xss : numpy.ndarray
        ``float64`` XSS data array.
    """

    id: str
    atomic_weight_ratio: float
    temperature: float
    izaw: list[tuple[int, float]]
    nxs: np.ndarray
    jxs: np.ndarray
    xss: np.ndarray
