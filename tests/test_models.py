#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for elements, nuclide identifiers and range checks
"""

from __future__ import annotations

import numpy as np
import pytest

from pynkl.data.mass import AtomicMassLibrary, parse_mass_line
from pynkl.exceptions import (
    DataError,
    EndfIOError,
    FormatError,
    ValidationError,
)
from pynkl.models.element import Element
from pynkl.models.records import InterpolationRecord1D, InterpolationRecord2D
from pynkl.models.zai import Zai
from pynkl.utils.validation import (
    validate_atomic_number,
    validate_breakpoint,
    validate_count,
    validate_isomeric_state,
    validate_mass_number,
    validate_scheme,
)


# -----------------------------------------------------------------------
# Element
# -----------------------------------------------------------------------

class TestElement:
    """Tests for periodic-table lookups"""

    def test_count(self) -> None:
        elements = list(Element.iter())
        assert len(elements) == Element.MAX_ATOMIC_NUMBER == 118
        assert [e.atomic_number for e in elements] == list(range(1, 119))

    def test_from_atomic_number(self) -> None:
        iron = Element.from_atomic_number(26)
        assert iron is not None
        assert (iron.name, iron.symbol, iron.group) == ("Iron", "Fe", 8)

    @pytest.mark.parametrize("Z", [0, 119, -1])
    def test_unknown_atomic_number(self, Z: int) -> None:
        assert Element.from_atomic_number(Z) is None

    @pytest.mark.parametrize("symbol", ["Fe", "fe", "FE", "fE"])
    def test_from_symbol_is_case_insensitive(self, symbol: str) -> None:
        assert Element.from_symbol(symbol) is Element.from_atomic_number(26)

    @pytest.mark.parametrize("name", ["Uranium", "uranium", "URANIUM"])
    def test_from_name_is_case_insensitive(self, name: str) -> None:
        uranium = Element.from_name(name)
        assert uranium is not None
        assert uranium.atomic_number == 92

    def test_unknown_symbol_and_name(self) -> None:
        assert Element.from_symbol("Xx") is None
        assert Element.from_name("Unobtainium") is None

    def test_groups(self) -> None:
        assert Element.from_symbol("Se").group == 16
        assert Element.from_symbol("La").group is None
        assert Element.from_symbol("Lu").group == 3
        assert Element.from_symbol("Ac").group is None
        assert Element.from_symbol("Og").group == 18

    def test_ordering(self) -> None:
        assert Element.from_symbol("H") < Element.from_symbol("He")

    def test_str(self) -> None:
        assert str(Element.from_atomic_number(1)) == "H"


# -----------------------------------------------------------------------
# Zai
# -----------------------------------------------------------------------

class TestZai:
    """Tests for nuclide identifiers"""

    def test_hydrogen(self) -> None:
        h1 = Zai(1, 1, 0)
        assert Zai.from_name("H1") == h1
        assert Zai.from_id(10010) == h1
        assert h1.id == 10010
        assert h1.name == "H1"

    def test_default_ground_state(self) -> None:
        assert Zai(92, 235) == Zai(92, 235, 0)

    def test_metastable(self) -> None:
        am = Zai.from_name("Am242m1")
        assert am == Zai(95, 242, 1)
        assert am.id == 952421
        assert Zai.from_id(952421) == am
        assert am.is_metastable_state
        assert not am.is_ground_state

    @pytest.mark.parametrize(
        ("zai", "name"),
        [((27, 58, 1), "Co58m1"), ((72, 178, 2), "Hf178m2"), ((118, 294, 0), "Og294")],
    )
    def test_name(self, zai: tuple[int, int, int], name: str) -> None:
        assert Zai(*zai).name == name
        assert Zai.from_name(name) == Zai(*zai)

    def test_nucleon_counts(self) -> None:
        u235 = Zai(92, 235)
        assert (u235.protons, u235.neutrons, u235.nucleons) == (92, 143, 235)

    def test_element(self) -> None:
        assert Zai(26, 56).element.name == "Iron"

    def test_element_for_every_atomic_number(self) -> None:
        for Z in range(1, Element.MAX_ATOMIC_NUMBER + 1):
            element = Zai(Z, 2 * Z).element
            assert element == Element.from_atomic_number(Z)
            assert element.atomic_number == Z

    def test_as_tuple(self) -> None:
        assert Zai(27, 58, 1).as_tuple() == (27, 58, 1)

    def test_ordering_and_hashing(self) -> None:
        nuclides = [Zai(27, 58, 1), Zai(1, 2), Zai(27, 58), Zai(1, 1)]
        assert sorted(nuclides) == [Zai(1, 1), Zai(1, 2), Zai(27, 58), Zai(27, 58, 1)]
        assert len({Zai(1, 1), Zai.from_id(10010)}) == 1

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Zai(1, 1).mass_number = 2  # type: ignore[misc]

    @pytest.mark.parametrize(
        "name",
        [
            "X1", "Xx1", "Abc123", "H0", "He0", "He04", "He004", "He1234",
            "He1", "H1g", "H1n1", "H1mx", "H1m0", "h1", "", "H1m10",
        ],
    )
    def test_invalid_name(self, name: str) -> None:
        assert Zai.from_name(name) is None

    @pytest.mark.parametrize(
        "id", [1234, 12341231, 11941231, 10000, 12312341, 12310001, -10010]
    )
    def test_invalid_id(self, id: int) -> None:  # noqa: A002
        assert Zai.from_id(id) is None

    @pytest.mark.parametrize(
        "zai", [(0, 1, 0), (119, 300, 0), (2, 1, 0), (1, 1000, 0), (1, 1, 10), (1, 1, -1)]
    )
    def test_invalid_construction(self, zai: tuple[int, int, int]) -> None:
        with pytest.raises(ValidationError):
            Zai(*zai)


# -----------------------------------------------------------------------
# Atomic mass library
# -----------------------------------------------------------------------

class TestAtomicMassLibrary:
    """Tests for atomic mass tables"""

    def test_lookup(
        self,
        mass_table_lines: list[str],
        mass_table: dict[tuple[int, int, int], float],
    ) -> None:
        library = AtomicMassLibrary.from_lines(mass_table_lines)
        assert len(library) == len(mass_table)
        for key, mass in mass_table.items():
            assert library.get(Zai(*key)) == mass
        assert Zai(95, 242, 1) in library

    @pytest.mark.parametrize("zai", [Zai(1, 3), Zai(95, 242), Zai(26, 57)])
    def test_unknown_nuclide(self, mass_table_lines: list[str], zai: Zai) -> None:
        library = AtomicMassLibrary.from_lines(mass_table_lines)
        assert library.get(zai) is None
        assert zai not in library

    def test_iteration(self, mass_table_lines: list[str]) -> None:
        library = AtomicMassLibrary.from_lines(mass_table_lines)
        assert sorted(library) == [Zai(1, 1), Zai(1, 2), Zai(26, 56), Zai(95, 242, 1)]

    def test_bytes_lines(self, mass_table_lines: list[str]) -> None:
        library = AtomicMassLibrary.from_lines(
            line.replace("\n", "\r\n").encode("ascii") for line in mass_table_lines
        )
        assert library.get(Zai(26, 56)) == 55.93493633

    def test_input_mapping_is_copied(self) -> None:
        masses = {Zai(1, 1): 1.0078}
        library = AtomicMassLibrary(masses)
        masses[Zai(1, 1)] = 2.0
        masses[Zai(1, 2)] = 2.0141
        assert library.get(Zai(1, 1)) == 1.0078
        assert Zai(1, 2) not in library

    def test_open(self, tmp_path, mass_table_lines: list[str]) -> None:
        path = tmp_path / "masses"
        path.write_text("".join(mass_table_lines))
        library = AtomicMassLibrary.open(path)
        assert library.get(Zai(1, 2)) == 2.01410177812

    def test_open_missing_file(self, tmp_path) -> None:
        with pytest.raises(EndfIOError):
            AtomicMassLibrary.open(tmp_path / "missing")

    def test_parse_line_ignores_label_columns(self, make_mass_line) -> None:
        line = make_mass_line(27, 58, 1, "57.9357521").replace(" " * 10, "Co58m1 lab", 1)
        assert parse_mass_line(line) == (Zai(27, 58, 1), 57.9357521)

    @pytest.mark.parametrize("line", ["  1   1 0", "  1   1 0" + " " * 30, "  1  "])
    def test_short_line_raises(self, line: str) -> None:
        with pytest.raises(FormatError):
            parse_mass_line(line)

    @pytest.mark.parametrize(
        ("Z", "A", "I", "mass"),
        [
            (1, 1, 0, "abc"),
            (1, 1, 0, "-1.0"),
            (1, 1, 0, "0.0"),
            (1, 1, 0, "inf"),
            (26, 3, 0, "3.0"),
            (119, 300, 0, "300.0"),
        ],
    )
    def test_bad_line_raises(
        self, make_mass_line, Z: int, A: int, I: int, mass: str  # noqa: E741
    ) -> None:
        with pytest.raises(DataError):
            parse_mass_line(make_mass_line(Z, A, I, mass))

    def test_bad_number_column_raises(self, make_mass_line) -> None:
        line = "  x" + make_mass_line(1, 1, 0, 1.0)[3:]
        with pytest.raises(DataError):
            parse_mass_line(line)

    def test_error_names_line_number(
        self, mass_table_lines: list[str], make_mass_line
    ) -> None:
        lines = mass_table_lines[:1] + [make_mass_line(1, 2, 0, "bad")]
        with pytest.raises(DataError, match="line 2"):
            AtomicMassLibrary.from_lines(lines)


# -----------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------

class TestValidation:
    """Tests for record and identifier range checks"""

    def test_count(self) -> None:
        assert validate_count(0) == 0
        with pytest.raises(DataError):
            validate_count(-1, "NPL")

    def test_breakpoint(self) -> None:
        assert validate_breakpoint(2**32 - 1) == 2**32 - 1
        with pytest.raises(DataError):
            validate_breakpoint(2**32)

    def test_scheme(self) -> None:
        assert validate_scheme(5) == 5
        with pytest.raises(DataError):
            validate_scheme(-1)

    def test_atomic_number(self) -> None:
        validate_atomic_number(1)
        validate_atomic_number(118)
        with pytest.raises(ValidationError):
            validate_atomic_number(119)

    def test_mass_number(self) -> None:
        validate_mass_number(999, 118)
        with pytest.raises(ValidationError):
            validate_mass_number(1, 2)

    def test_isomeric_state(self) -> None:
        validate_isomeric_state(9)
        with pytest.raises(ValidationError):
            validate_isomeric_state(10)


# -----------------------------------------------------------------------
# Records
# -----------------------------------------------------------------------

class TestInterpolationRecords:
    """Tests for the region and point views"""

    def test_tab1_views(self) -> None:
        record = InterpolationRecord1D(
            0.0, 0.0, 0, 0, 1, 2,
            breakpoints=np.array([2], dtype=np.uint32),
            schemes=np.array([2], dtype=np.int64),
            x=np.array([1.0, 2.0]),
            y=np.array([3.0, 4.0]),
        )
        assert record.regions == [(2, 2)]
        assert record.points == [(1.0, 3.0), (2.0, 4.0)]
        assert all(isinstance(v, int) for v in record.regions[0])

    def test_tab2_views(self) -> None:
        record = InterpolationRecord2D(
            0.0, 0.0, 0, 0, 0, 3,
            breakpoints=np.empty(0, dtype=np.uint32),
            schemes=np.empty(0, dtype=np.int64),
        )
        assert record.regions == []

    def test_public_models_match_package_exports(self) -> None:
        import pynkl.models
        from pynkl.models import records

        public = {name for name in vars(records) if name[0].isupper()}
        assert public <= set(pynkl.models.__all__) | {"NamedTuple"}
        assert "List" not in public
