#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Atomic mass library

An :class:`AtomicMassLibrary` maps nuclides (:class:`~pynkl.models.zai.Zai`)
to atomic masses.  It is immutable and built explicitly from a mass table
supplied by the caller, e.g. the atomic mass files distributed with
ENDF/B-VIII.0, JEFF-3.3 or JENDL-5.

Mass table format
-----------------
One nuclide per line, in fixed columns:

* **Columns 1–3**:  atomic number Z.
* **Columns 5–7**:  mass number A.
* **Column 9**:     isomeric state I.
* **Columns 36–**:  atomic mass, up to the end of the line.

Columns 10–35 are ignored.  Blank lines are skipped.

Examples
--------
>>> library = AtomicMassLibrary.open("atomic_masses/endfb")
>>> library.get(Zai(1, 1))
1.00782503223
>>> library.get(Zai(1, 7)) is None
True
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from pynkl.exceptions import DataError, EndfIOError, FormatError, ValidationError
from pynkl.models.zai import Zai
from pynkl.utils.constants import (
    MASS_A_COLUMNS,
    MASS_I_COLUMNS,
    MASS_VALUE_START,
    MASS_Z_COLUMNS,
)
from pynkl.utils.parsing import Field, as_record, parse_integer_window

logger = logging.getLogger(__name__)


def parse_mass_line(line: Field) -> tuple[Zai, float]:
    """Decode one line of a mass table

    Parameters
    ----------
    line : bytes | str
        Table line, with or without its line terminator.

    Returns
    -------
    tuple[Zai, float]
        The nuclide and its atomic mass.

    Raises
    ------
    FormatError
        If the line is too short to hold a mass.
    DataError
        If a number cannot be parsed, the mass is not a positive finite
        value or ``(Z, A, I)`` is not a valid nuclide.
    """
    record = as_record(line)
    atomic_number = parse_integer_window(record, *MASS_Z_COLUMNS)
    mass_number = parse_integer_window(record, *MASS_A_COLUMNS)
    state = parse_integer_window(record, *MASS_I_COLUMNS)

    text = record[MASS_VALUE_START:].strip()
    if not text:
        raise FormatError(
            f"Mass table line {record!r} has no mass after column {MASS_VALUE_START}."
        )
    try:
        mass = float(text)
    except ValueError as exc:
        raise DataError(f"Invalid atomic mass {text!r}.") from exc
    if not 0.0 < mass < math.inf:
        raise DataError(f"Atomic mass must be positive and finite, got {text!r}.")

    try:
        zai = Zai(atomic_number, mass_number, state)
    except ValidationError as exc:
        raise DataError(
            f"Invalid nuclide ({atomic_number}, {mass_number}, {state}) "
            f"in mass table: {exc}"
        ) from exc
    return zai, mass


class AtomicMassLibrary:
    """Immutable table of atomic masses keyed by nuclide

    Parameters
    ----------
    masses : Mapping[Zai, float]
        Atomic mass of each nuclide.  The mapping is copied.
    """

    def __init__(self, masses: Mapping[Zai, float]) -> None:
        self._masses = MappingProxyType(dict(masses))

    @classmethod
    def from_lines(cls, lines: Iterable[Field]) -> AtomicMassLibrary:
        """Build a library from the lines of a mass table

        Raises
        ------
        FormatError, DataError
            If a line cannot be decoded (see :func:`parse_mass_line`).
            The message carries the 1-based line number.
        """
        masses: dict[Zai, float] = {}
        for number, line in enumerate(lines, start=1):
            if not as_record(line).strip():
                continue
            try:
                zai, mass = parse_mass_line(line)
            except (FormatError, DataError) as exc:
                raise type(exc)(f"Mass table line {number}: {exc}") from exc
            masses[zai] = mass
        logger.debug("Loaded %d atomic masses", len(masses))
        return cls(masses)

    @classmethod
    def open(cls, path: Path | str) -> AtomicMassLibrary:
        """Build a library from the mass table file at *path*

        Raises
        ------
        EndfIOError
            If the file cannot be read.
        """
        filepath = Path(path)
        logger.debug("Reading atomic masses: %s", filepath)
        try:
            with filepath.open("rb") as stream:
                lines = stream.readlines()
        except OSError as exc:
            raise EndfIOError(f"Cannot read {filepath}: {exc}") from exc
        return cls.from_lines(lines)

    def get(self, zai: Zai) -> float | None:
        """Atomic mass of *zai*, or ``None`` if the table does not list it"""
        return self._masses.get(zai)

    def __contains__(self, zai: object) -> bool:
        return zai in self._masses

    def __len__(self) -> int:
        return len(self._masses)

    def __iter__(self) -> Iterator[Zai]:
        return iter(self._masses)
