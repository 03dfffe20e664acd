#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for PyNKL tests

Provides synthetic ENDF-6 lines and ACE tables for testing the field
decoders and readers without requiring real evaluated data files.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

SCENARIO_RECORD = (
    " 1.23456789-1.23456789          1          2          3          4"
    "1234"
    "12"
    "123"
    "12345"
)
"""Fully populated 80-column record: two floats, four integers, MAT/MF/MT/NS."""

TEXT_LINE = (
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ abcdefghijklmnopqrstuvwxyz 0123456789"
    b"     1 0  0    0\n"
)
"""Tape identification line."""


def _format_field(value: int | str | None) -> str:
    if value is None:
        return " " * 11
    if isinstance(value, int):
        return f"{value:11d}"
    return f"{value:>11s}"


def _make_line(
    *fields: int | str | None,
    mat: int = 125,
    mf: int = 1,
    mt: int = 451,
    ns: int | None = 1,
) -> bytes:
    data = "".join(_format_field(value) for value in fields).ljust(66)
    control = f"{mat:4d}{mf:2d}{mt:3d}"
    if ns is not None:
        control += f"{ns:5d}"
    return f"{data}{control}\n".encode("ascii")


@pytest.fixture
def make_line() -> Callable[..., bytes]:
    """Factory building one 80-column ENDF line

    Integer fields are right-justified, ``str`` fields are used verbatim
    (right-justified to 11 columns) and ``None`` gives a blank field.
    Unused data columns are blank.
    """
    return _make_line


@pytest.fixture
def scenario_record() -> str:
    return SCENARIO_RECORD


@pytest.fixture
def text_line() -> bytes:
    return TEXT_LINE


@pytest.fixture
def cont_lines() -> bytes:
    """CONT record: C1=1, C2=2, L1=1, L2=2, N1=3, N2=4"""
    return _make_line(" 1.000000+0", " 2.000000+0", 1, 2, 3, 4)


@pytest.fixture
def list_lines() -> bytes:
    """LIST record with NPL=8 values 1.0 … 8.0 over two lines"""
    return b"".join([
        _make_line(" 5.000000-1", " 2.500000+6", 0, 1, 8, 0, ns=1),
        _make_line(
            " 1.000000+0", " 2.000000+0", " 3.000000+0",
            " 4.000000+0", " 5.000000+0", " 6.000000+0",
            ns=2,
        ),
        _make_line(" 7.000000+0", " 8.000000+0", ns=3),
    ])


@pytest.fixture
def tab1_lines() -> bytes:
    """TAB1 record: regions (2, 2), (4, 5); points (1, 2) … (7, 8)"""
    return b"".join([
        _make_line(" 0.000000+0", " 0.000000+0", 0, 0, 2, 4, mf=3, mt=1, ns=1),
        _make_line(2, 2, 4, 5, mf=3, mt=1, ns=2),
        _make_line(
            " 1.000000+0", " 2.000000+0", " 3.000000+0",
            " 4.000000+0", " 5.000000+0", " 6.000000+0",
            mf=3, mt=1, ns=3,
        ),
        _make_line(" 7.000000+0", " 8.000000+0", mf=3, mt=1, ns=4),
    ])


@pytest.fixture
def tab2_lines() -> bytes:
    """TAB2 record: NR=3, NZ=4, regions (1, 1), (2, 2), (3, 3)"""
    return b"".join([
        _make_line(" 0.000000+0", " 0.000000+0", 0, 0, 3, 4, mf=6, mt=2, ns=1),
        _make_line(1, 1, 2, 2, 3, 3, mf=6, mt=2, ns=2),
    ])


def _make_intg_line(ndigit: int, values: list[int]) -> bytes:
    start = " " if ndigit <= 5 else ""
    body = "".join(f"{value:{ndigit + 1}d}" for value in values)
    data = f"1234512345{start}{body}".ljust(66)
    return f"{data} 125 8457    1\n".encode("ascii")


@pytest.fixture
def make_intg_line() -> Callable[[int, list[int]], bytes]:
    """Factory building an INTG line with II = JJ = 12345"""
    return _make_intg_line


# ---------------------------------------------------------------------------
# ACE tables
# ---------------------------------------------------------------------------

ACE_XSS = [1.0, 2.5, -3.25, 1.0e-5, 6.02214076e23, 0.0]


def _ace_body() -> str:
    izaw = "".join(
        "".join(f"{row * 4 + i:7d}{float(row * 4 + i):11.5f}" for i in range(4)) + "\n"
        for row in range(4)
    )
    nxs_values = [len(ACE_XSS), 92235] + list(range(3, 17))
    nxs = "".join(
        "".join(f"{v:9d}" for v in nxs_values[row * 8:(row + 1) * 8]) + "\n"
        for row in range(2)
    )
    jxs_values = list(range(1, 33))
    jxs = "".join(
        "".join(f"{v:9d}" for v in jxs_values[row * 8:(row + 1) * 8]) + "\n"
        for row in range(4)
    )
    xss = "".join(
        "".join(f"{x:20.11E}" for x in ACE_XSS[row:row + 4]) + "\n"
        for row in range(0, len(ACE_XSS), 4)
    )
    return izaw + nxs + jxs + xss


@pytest.fixture
def ace_version1() -> bytes:
    """Legacy-header ACE table ``12345.12c``"""
    header = (
        f"{'12345.12c':>10s}{'123.1234567':>12s}{'1.23456E-12':>12s} 03/21/11\n"
        "comment line                                                          mat1234\n"
    )
    return (header + _ace_body()).encode("ascii")


@pytest.fixture
def ace_version2() -> bytes:
    """Version 2 ACE table ``1123123.123c`` with two comment lines"""
    header = (
        f"{'2.0.0':<11s}{'1123123.123c':>24s}  ENDF/B-VIII.0\n"
        f"{'123.1234567':>12s} {'1.23456E-12':>12s}{'2023-01-01':>12s}{2:4d}\n"
        "first comment line\n"
        "second comment line\n"
    )
    return (header + _ace_body()).encode("ascii")


@pytest.fixture
def ace_xss() -> list[float]:
    return list(ACE_XSS)


# ---------------------------------------------------------------------------
# Atomic mass tables
# ---------------------------------------------------------------------------

MASS_TABLE = {
    (1, 1, 0): 1.00782503223,
    (1, 2, 0): 2.01410177812,
    (26, 56, 0): 55.93493633,
    (95, 242, 1): 242.0595953,
}


def _make_mass_line(Z: int, A: int, I: int, mass: float | str) -> str:  # noqa: E741
    label = f"{Z:3d} {A:3d} {I:1d}".ljust(35, " ")
    return f"{label}{mass}\n"


@pytest.fixture
def make_mass_line() -> Callable[[int, int, int, float | str], str]:
    """Factory building one mass table line (Z, A, I, mass)"""
    return _make_mass_line


@pytest.fixture
def mass_table_lines() -> list[str]:
    """Mass table with H1, H2, Fe56 and Am242m1 and a trailing blank line"""
    return [_make_mass_line(*key, mass) for key, mass in MASS_TABLE.items()] + ["\n"]


@pytest.fixture
def mass_table() -> dict[tuple[int, int, int], float]:
    """``(Z, A, I)`` to mass entries of :func:`mass_table_lines`"""
    return dict(MASS_TABLE)
