#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Nuclide identifier ``ZAI``

* ``Z``: atomic number (proton number)
* ``A``: mass number (nucleon number)
* ``I``: isomeric state number (0 for the ground state)

A :class:`Zai` is immutable, hashable and ordered by ``(Z, A, I)``, which
makes it suitable as a dictionary key for nuclide data look-ups.

Examples
--------
>>> h1 = Zai(1, 1, 0)
>>> Zai.from_name("H1") == h1 == Zai.from_id(10010)
True
>>> Zai.from_name("Am242m1").id
952421
>>> Zai(27, 58, 1).name
'Co58m1'
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pynkl.models.element import _ELEMENTS, Element
from pynkl.utils.validation import (
    MAX_MASS_NUMBER,
    validate_atomic_number,
    validate_isomeric_state,
    validate_mass_number,
)

_NAME_PATTERN: re.Pattern[str] = re.compile(
    r"(?P<symbol>[A-Z][a-z]?)(?P<mass>[1-9][0-9]{0,2})(?:m(?P<state>[1-9]))?"
)
"""Nuclide name: ``XxAAA`` for ground states, ``XxAAAmI`` for isomers."""


@dataclass(frozen=True, order=True)
class Zai:
    """Nuclide identifier ``(Z, A, I)``

    Parameters
    ----------
    atomic_number : int
        Atomic number *Z*, 1 ≤ Z ≤ 118.
    mass_number : int
        Mass number *A*, Z ≤ A ≤ 999.
    isomeric_state_number : int, optional
        Isomeric state *I*, 0 ≤ I ≤ 9.  Default 0 (ground state).

    Raises
    ------
    ValidationError
        If any number is outside its range.
    """

    atomic_number: int
    mass_number: int
    isomeric_state_number: int = 0

    def __post_init__(self) -> None:
        validate_atomic_number(self.atomic_number)
        validate_mass_number(self.mass_number, self.atomic_number)
        validate_isomeric_state(self.isomeric_state_number)

    @classmethod
    def from_name(cls, name: str) -> Zai | None:
        """Build a nuclide identifier from its name

        Parameters
        ----------
        name : str
            ``XxAAA`` (ground state) or ``XxAAAmI`` (metastable state),
            where ``Xx`` is the element symbol, ``AAA`` a one- to three-digit
            mass number without leading zeros and ``I`` a digit 1–9.

        Returns
        -------
        Zai | None
            ``None`` if *name* is not a conformant nuclide name.

        Examples
        --------
        >>> Zai.from_name("U235")
        Zai(atomic_number=92, mass_number=235, isomeric_state_number=0)
        >>> Zai.from_name("He1") is None
        True
        """
        match = _NAME_PATTERN.fullmatch(name)
        if match is None:
            return None
        element = Element.from_symbol(match["symbol"])
        if element is None:
            return None
        mass_number = int(match["mass"])
        if mass_number < element.atomic_number:
            return None
        state = match["state"]
        return cls(element.atomic_number, mass_number, int(state) if state else 0)

    @classmethod
    def from_id(cls, id: int) -> Zai | None:  # noqa: A002
        """Build a nuclide identifier from ``ID = Z × 10000 + A × 10 + I``

        Returns
        -------
        Zai | None
            ``None`` if *id* does not describe a valid nuclide.

        Examples
        --------
        >>> Zai.from_id(922350)
        Zai(atomic_number=92, mass_number=235, isomeric_state_number=0)
        >>> Zai.from_id(10000) is None
        True
        """
        if id < 0:
            return None
        atomic_number = id // 10000
        if not 1 <= atomic_number <= Element.MAX_ATOMIC_NUMBER:
            return None
        mass_number = id % 10000 // 10
        if mass_number > MAX_MASS_NUMBER or mass_number < atomic_number:
            return None
        return cls(atomic_number, mass_number, id % 10)

    @property
    def id(self) -> int:
        """Nuclide ID ``Z × 10000 + A × 10 + I``"""
        return (
            self.atomic_number * 10000
            + self.mass_number * 10
            + self.isomeric_state_number
        )

    @property
    def element(self) -> Element:
        return _ELEMENTS[self.atomic_number]

    @property
    def name(self) -> str:
        """Standard nuclide name, e.g. ``"H1"`` or ``"Hf178m2"``"""
        base = f"{self.element.symbol}{self.mass_number}"
        if self.is_ground_state:
            return base
        return f"{base}m{self.isomeric_state_number}"

    @property
    def protons(self) -> int:
        return self.atomic_number

    @property
    def neutrons(self) -> int:
        return self.mass_number - self.atomic_number

    @property
    def nucleons(self) -> int:
        return self.mass_number

    @property
    def is_ground_state(self) -> bool:
        return self.isomeric_state_number == 0

    @property
    def is_metastable_state(self) -> bool:
        return self.isomeric_state_number != 0

    def as_tuple(self) -> tuple[int, int, int]:
        """Return ``(Z, A, I)``"""
        return (self.atomic_number, self.mass_number, self.isomeric_state_number)

    def __str__(self) -> str:
        return self.name
