#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Periodic-table chemical elements

:class:`Element` is a read-only view of one row of
:data:`~pynkl.utils.constants.PERIODIC_TABLE`.  The 118 instances are built
once at import time; every lookup returns one of them, so elements compare
by identity as well as by value.

Examples
--------
>>> Element.from_symbol("Fe").name
'Iron'
>>> Element.from_name("uranium").atomic_number
92
>>> Element.from_atomic_number(119) is None
True
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from pynkl.utils.constants import (
    ELEMENT_NAMES,
    ELEMENT_SYMBOLS,
    MAX_ATOMIC_NUMBER,
    PERIODIC_TABLE,
)


@dataclass(frozen=True, order=True)
class Element:
    """A chemical element from hydrogen (Z = 1) to oganesson (Z = 118)

    Parameters
    ----------
    atomic_number : int
        Proton number *Z*.
    name : str
        IUPAC English name (e.g. ``"Aluminium"``, ``"Caesium"``).
    symbol : str
        One- or two-letter symbol.
    group : int | None
        IUPAC group number 1–18, ``None`` for the lanthanides La–Yb and
        the actinides Ac–No.
    """

    atomic_number: int
    name: str
    symbol: str
    group: int | None

    MAX_ATOMIC_NUMBER = MAX_ATOMIC_NUMBER

    @classmethod
    def from_atomic_number(cls, atomic_number: int) -> Element | None:
        """Return the element with proton number *atomic_number*, or ``None``"""
        return _ELEMENTS.get(atomic_number)

    @classmethod
    def from_symbol(cls, symbol: str) -> Element | None:
        """Return the element with *symbol* (case-insensitive), or ``None``"""
        Z = ELEMENT_SYMBOLS.get(symbol.lower())
        return None if Z is None else _ELEMENTS[Z]

    @classmethod
    def from_name(cls, name: str) -> Element | None:
        """Return the element called *name* (case-insensitive), or ``None``"""
        Z = ELEMENT_NAMES.get(name.lower())
        return None if Z is None else _ELEMENTS[Z]

    @classmethod
    def iter(cls) -> Iterator[Element]:
        """Iterate over all elements in order of atomic number"""
        return iter(_ELEMENTS.values())

    def __str__(self) -> str:
        return self.symbol


_ELEMENTS: dict[int, Element] = {
    Z: Element(
        atomic_number=Z,
        name=str(entry["name"]),
        symbol=str(entry["symbol"]),
        group=entry["group"],  # type: ignore[arg-type]
    )
    for Z, entry in PERIODIC_TABLE.items()
}
