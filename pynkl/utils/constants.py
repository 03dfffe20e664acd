#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Fixed-width layout constants and periodic-table data used across PyNKL

Column positions are given as 0-based, half-open Python slice bounds so that
``line[start:stop]`` extracts the field directly.  The ENDF-6 Formats
Manual [1]_ numbers columns from 1; the comments next to each constant give
the 1-based inclusive range used there.

References
----------
.. [1] Trkov, A., Herman, M., & Brown, D. A. (2012). ENDF-6 Formats Manual
   (ENDF-102, BNL-90365-2009 Rev. 2), §0.6.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# ENDF-6 fixed-width column layout
# ---------------------------------------------------------------------------

ENDF_DATA_WIDTH: int = 66
"""Width of the data portion of an ENDF record line (columns 1-66)."""

ENDF_FIELD_WIDTH: int = 11
"""Width of a single numeric field inside the data portion."""

ENDF_FIELDS_PER_LINE: int = 6
"""Number of numeric fields per data line (66 / 11)."""

ENDF_PAIRS_PER_LINE: int = 3
"""Number of (NBT, INT) or (x, y) pairs per TAB1/TAB2 data line."""

ENDF_MAT_COLUMNS: tuple[int, int] = (66, 70)
"""MAT material number, columns 67-70 (may be negative, e.g. ``-1`` TEND)."""

ENDF_MF_COLUMNS: tuple[int, int] = (70, 72)
"""MF file number, columns 71-72."""

ENDF_MT_COLUMNS: tuple[int, int] = (72, 75)
"""MT section number, columns 73-75."""

ENDF_NS_COLUMNS: tuple[int, int] = (75, 80)
"""Optional NS line sequence number, columns 76-80."""

INTG_HEADER_WIDTH: int = 5
"""Width of the II and JJ fields at the start of an INTG record line."""

INTG_MIN_DIGITS: int = 2
"""Smallest NDIGIT accepted for INTG records."""

INTG_MAX_DIGITS: int = 6
"""Largest NDIGIT accepted for INTG records."""

# ---------------------------------------------------------------------------
# ACE (A Compact ENDF) text layout
# ---------------------------------------------------------------------------

ACE_IZAW_LINES: int = 4
"""Number of lines holding the IZAW array (4 pairs per line)."""

ACE_IZAW_PER_LINE: int = 4
"""Number of (IZ, AW) pairs per IZAW line."""

ACE_IZ_WIDTH: int = 7
"""Width of an IZ integer field inside the IZAW array."""

ACE_AW_WIDTH: int = 11
"""Width of an AW float field inside the IZAW array."""

ACE_NXS_LINES: int = 2
"""Number of lines holding the NXS array (8 integers per line)."""

ACE_JXS_LINES: int = 4
"""Number of lines holding the JXS array (8 integers per line)."""

ACE_INT_WIDTH: int = 9
"""Width of an NXS / JXS integer field."""

ACE_INTS_PER_LINE: int = 8
"""Number of NXS / JXS integers per line."""

ACE_XSS_WIDTH: int = 20
"""Width of an XSS float field."""

ACE_XSS_PER_LINE: int = 4
"""Number of XSS floats per line."""


# ---------------------------------------------------------------------------
# Atomic mass tables
# ---------------------------------------------------------------------------

MASS_Z_COLUMNS: tuple[int, int] = (0, 3)
"""Atomic number Z, columns 1-3."""

MASS_A_COLUMNS: tuple[int, int] = (4, 7)
"""Mass number A, columns 5-7."""

MASS_I_COLUMNS: tuple[int, int] = (8, 9)
"""Isomeric state I, column 9."""

MASS_VALUE_START: int = 35
"""First column of the atomic mass, which runs to the end of the line."""


# ---------------------------------------------------------------------------
# Periodic table  (Z = 1 … 118)
# ---------------------------------------------------------------------------

MAX_ATOMIC_NUMBER: int = 118
"""Largest atomic number in the table (oganesson)."""

PERIODIC_TABLE: dict[int, dict[str, str | int | None]] = {
    1:   {"name": "Hydrogen",      "symbol": "H",  "group":   1},
    2:   {"name": "Helium",        "symbol": "He", "group":  18},
    3:   {"name": "Lithium",       "symbol": "Li", "group":   1},
    4:   {"name": "Beryllium",     "symbol": "Be", "group":   2},
    5:   {"name": "Boron",         "symbol": "B",  "group":  13},
    6:   {"name": "Carbon",        "symbol": "C",  "group":  14},
    7:   {"name": "Nitrogen",      "symbol": "N",  "group":  15},
    8:   {"name": "Oxygen",        "symbol": "O",  "group":  16},
    9:   {"name": "Fluorine",      "symbol": "F",  "group":  17},
    10:  {"name": "Neon",          "symbol": "Ne", "group":  18},
    11:  {"name": "Sodium",        "symbol": "Na", "group":   1},
    12:  {"name": "Magnesium",     "symbol": "Mg", "group":   2},
    13:  {"name": "Aluminium",     "symbol": "Al", "group":  13},
    14:  {"name": "Silicon",       "symbol": "Si", "group":  14},
    15:  {"name": "Phosphorus",    "symbol": "P",  "group":  15},
    16:  {"name": "Sulfur",        "symbol": "S",  "group":  16},
    17:  {"name": "Chlorine",      "symbol": "Cl", "group":  17},
    18:  {"name": "Argon",         "symbol": "Ar", "group":  18},
    19:  {"name": "Potassium",     "symbol": "K",  "group":   1},
    20:  {"name": "Calcium",       "symbol": "Ca", "group":   2},
    21:  {"name": "Scandium",      "symbol": "Sc", "group":   3},
    22:  {"name": "Titanium",      "symbol": "Ti", "group":   4},
    23:  {"name": "Vanadium",      "symbol": "V",  "group":   5},
    24:  {"name": "Chromium",      "symbol": "Cr", "group":   6},
    25:  {"name": "Manganese",     "symbol": "Mn", "group":   7},
    26:  {"name": "Iron",          "symbol": "Fe", "group":   8},
    27:  {"name": "Cobalt",        "symbol": "Co", "group":   9},
    28:  {"name": "Nickel",        "symbol": "Ni", "group":  10},
    29:  {"name": "Copper",        "symbol": "Cu", "group":  11},
    30:  {"name": "Zinc",          "symbol": "Zn", "group":  12},
    31:  {"name": "Gallium",       "symbol": "Ga", "group":  13},
    32:  {"name": "Germanium",     "symbol": "Ge", "group":  14},
    33:  {"name": "Arsenic",       "symbol": "As", "group":  15},
    34:  {"name": "Selenium",      "symbol": "Se", "group":  16},
    35:  {"name": "Bromine",       "symbol": "Br", "group":  17},
    36:  {"name": "Krypton",       "symbol": "Kr", "group":  18},
    37:  {"name": "Rubidium",      "symbol": "Rb", "group":   1},
    38:  {"name": "Strontium",     "symbol": "Sr", "group":   2},
    39:  {"name": "Yttrium",       "symbol": "Y",  "group":   3},
    40:  {"name": "Zirconium",     "symbol": "Zr", "group":   4},
    41:  {"name": "Niobium",       "symbol": "Nb", "group":   5},
    42:  {"name": "Molybdenum",    "symbol": "Mo", "group":   6},
    43:  {"name": "Technetium",    "symbol": "Tc", "group":   7},
    44:  {"name": "Ruthenium",     "symbol": "Ru", "group":   8},
    45:  {"name": "Rhodium",       "symbol": "Rh", "group":   9},
    46:  {"name": "Palladium",     "symbol": "Pd", "group":  10},
    47:  {"name": "Silver",        "symbol": "Ag", "group":  11},
    48:  {"name": "Cadmium",       "symbol": "Cd", "group":  12},
    49:  {"name": "Indium",        "symbol": "In", "group":  13},
    50:  {"name": "Tin",           "symbol": "Sn", "group":  14},
    51:  {"name": "Antimony",      "symbol": "Sb", "group":  15},
    52:  {"name": "Tellurium",     "symbol": "Te", "group":  16},
    53:  {"name": "Iodine",        "symbol": "I",  "group":  17},
    54:  {"name": "Xenon",         "symbol": "Xe", "group":  18},
    55:  {"name": "Caesium",       "symbol": "Cs", "group":   1},
    56:  {"name": "Barium",        "symbol": "Ba", "group":   2},
    57:  {"name": "Lanthanum",     "symbol": "La", "group": None},
    58:  {"name": "Cerium",        "symbol": "Ce", "group": None},
    59:  {"name": "Praseodymium",  "symbol": "Pr", "group": None},
    60:  {"name": "Neodymium",     "symbol": "Nd", "group": None},
    61:  {"name": "Promethium",    "symbol": "Pm", "group": None},
    62:  {"name": "Samarium",      "symbol": "Sm", "group": None},
    63:  {"name": "Europium",      "symbol": "Eu", "group": None},
    64:  {"name": "Gadolinium",    "symbol": "Gd", "group": None},
    65:  {"name": "Terbium",       "symbol": "Tb", "group": None},
    66:  {"name": "Dysprosium",    "symbol": "Dy", "group": None},
    67:  {"name": "Holmium",       "symbol": "Ho", "group": None},
    68:  {"name": "Erbium",        "symbol": "Er", "group": None},
    69:  {"name": "Thulium",       "symbol": "Tm", "group": None},
    70:  {"name": "Ytterbium",     "symbol": "Yb", "group": None},
    71:  {"name": "Lutetium",      "symbol": "Lu", "group":   3},
    72:  {"name": "Hafnium",       "symbol": "Hf", "group":   4},
    73:  {"name": "Tantalum",      "symbol": "Ta", "group":   5},
    74:  {"name": "Tungsten",      "symbol": "W",  "group":   6},
    75:  {"name": "Rhenium",       "symbol": "Re", "group":   7},
    76:  {"name": "Osmium",        "symbol": "Os", "group":   8},
    77:  {"name": "Iridium",       "symbol": "Ir", "group":   9},
    78:  {"name": "Platinum",      "symbol": "Pt", "group":  10},
    79:  {"name": "Gold",          "symbol": "Au", "group":  11},
    80:  {"name": "Mercury",       "symbol": "Hg", "group":  12},
    81:  {"name": "Thallium",      "symbol": "Tl", "group":  13},
    82:  {"name": "Lead",          "symbol": "Pb", "group":  14},
    83:  {"name": "Bismuth",       "symbol": "Bi", "group":  15},
    84:  {"name": "Polonium",      "symbol": "Po", "group":  16},
    85:  {"name": "Astatine",      "symbol": "At", "group":  17},
    86:  {"name": "Radon",         "symbol": "Rn", "group":  18},
    87:  {"name": "Francium",      "symbol": "Fr", "group":   1},
    88:  {"name": "Radium",        "symbol": "Ra", "group":   2},
    89:  {"name": "Actinium",      "symbol": "Ac", "group": None},
    90:  {"name": "Thorium",       "symbol": "Th", "group": None},
    91:  {"name": "Protactinium",  "symbol": "Pa", "group": None},
    92:  {"name": "Uranium",       "symbol": "U",  "group": None},
    93:  {"name": "Neptunium",     "symbol": "Np", "group": None},
    94:  {"name": "Plutonium",     "symbol": "Pu", "group": None},
    95:  {"name": "Americium",     "symbol": "Am", "group": None},
    96:  {"name": "Curium",        "symbol": "Cm", "group": None},
    97:  {"name": "Berkelium",     "symbol": "Bk", "group": None},
    98:  {"name": "Californium",   "symbol": "Cf", "group": None},
    99:  {"name": "Einsteinium",   "symbol": "Es", "group": None},
    100: {"name": "Fermium",       "symbol": "Fm", "group": None},
    101: {"name": "Mendelevium",   "symbol": "Md", "group": None},
    102: {"name": "Nobelium",      "symbol": "No", "group": None},
    103: {"name": "Lawrencium",    "symbol": "Lr", "group":   3},
    104: {"name": "Rutherfordium", "symbol": "Rf", "group":   4},
    105: {"name": "Dubnium",       "symbol": "Db", "group":   5},
    106: {"name": "Seaborgium",    "symbol": "Sg", "group":   6},
    107: {"name": "Bohrium",       "symbol": "Bh", "group":   7},
    108: {"name": "Hassium",       "symbol": "Hs", "group":   8},
    109: {"name": "Meitnerium",    "symbol": "Mt", "group":   9},
    110: {"name": "Darmstadtium",  "symbol": "Ds", "group":  10},
    111: {"name": "Roentgenium",   "symbol": "Rg", "group":  11},
    112: {"name": "Copernicium",   "symbol": "Cn", "group":  12},
    113: {"name": "Nihonium",      "symbol": "Nh", "group":  13},
    114: {"name": "Flerovium",     "symbol": "Fl", "group":  14},
    115: {"name": "Moscovium",     "symbol": "Mc", "group":  15},
    116: {"name": "Livermorium",   "symbol": "Lv", "group":  16},
    117: {"name": "Tennessine",    "symbol": "Ts", "group":  17},
    118: {"name": "Oganesson",     "symbol": "Og", "group":  18},
}
"""Element name, symbol and IUPAC group keyed by atomic number.

``group`` is ``None`` for the lanthanides La-Yb and the actinides Ac-No.
"""

ELEMENT_SYMBOLS: dict[str, int] = {
    str(entry["symbol"]).lower(): Z for Z, entry in PERIODIC_TABLE.items()
}
"""Reverse lookup: lower-case element symbol → atomic number."""

ELEMENT_NAMES: dict[str, int] = {
    str(entry["name"]).lower(): Z for Z, entry in PERIODIC_TABLE.items()
}
"""Reverse lookup: lower-case element name → atomic number."""
