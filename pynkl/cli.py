#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyNKL command-line interface

Provides inspection commands for nuclear data files:

1. **text**     Print the tape identification (first TEXT record) of an
   ENDF file
2. **sections** List every (MAT, MF, MT) section of an ENDF file with its
   number of lines
3. **ace**      Print the header of an ACE table
4. **nuclide**  Decode a nuclide name or ZAI identifier

Usage
-----
::

    python -m pynkl.cli text n-026_Fe_056.endf
    python -m pynkl.cli sections n-026_Fe_056.endf
    python -m pynkl.cli ace 26056.800nc
    python -m pynkl.cli nuclide Am242m1
    python -m pynkl.cli -v sections n-026_Fe_056.endf   # debug logging
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

from pynkl.exceptions import EndOfFileError, PyNKLError
from pynkl.models.zai import Zai
from pynkl.readers.ace import read_ace_file
from pynkl.readers.endf import EndfReader
from pynkl.utils.parsing import parse_control_numbers

logger = logging.getLogger("pynkl.cli")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_text(args):
    """Print the tape identification record."""
    with EndfReader.open(args.file) as reader:
        text = reader.read_text()
    print(text.content.rstrip())
    return 0


def cmd_sections(args):
    """List the sections of an ENDF file with their line counts."""
    sections: dict[tuple[int, int, int], int] = {}
    nlines = 0
    with EndfReader.open(args.file) as reader:
        while True:
            try:
                line = reader.read_line()
            except EndOfFileError:
                break
            nlines += 1
            mat, mf, mt, _ = parse_control_numbers(line)
            # MT=0 marks SEND/FEND/MEND/TEND and the tape identification
            if mt == 0:
                continue
            key = (mat, mf, mt)
            sections[key] = sections.get(key, 0) + 1

    logger.debug("Scanned %d lines, %d sections", nlines, len(sections))
    print(f"{'MAT':>5s} {'MF':>3s} {'MT':>4s} {'lines':>7s}")
    for (mat, mf, mt), count in sections.items():
        print(f"{mat:5d} {mf:3d} {mt:4d} {count:7d}")
    return 0


def cmd_ace(args):
    """Print the header of an ACE table."""
    table = read_ace_file(args.file)
    print(f"id:          {table.id}")
    print(f"AWR:         {table.atomic_weight_ratio}")
    print(f"temperature: {table.temperature} MeV")
    print(f"XSS length:  {table.nxs[0]}")
    return 0


def cmd_nuclide(args):
    """Decode a nuclide name or ZAI identifier."""
    value = args.nuclide
    if value.isdigit():
        try:
            zai = Zai.from_id(int(value))
        except ValueError:
            # superscript digits, or more digits than int() accepts
            zai = None
    else:
        zai = Zai.from_name(value)
    if zai is None:
        print(f"ERROR: {value!r} is not a valid nuclide name or identifier")
        return 1
    element = zai.element
    print(f"name:     {zai.name}")
    print(f"id:       {zai.id}")
    print(f"element:  {element.name} ({element.symbol}, Z={element.atomic_number})")
    print(f"nucleons: {zai.nucleons} ({zai.protons} p, {zai.neutrons} n)")
    print(f"state:    {'ground' if zai.is_ground_state else 'metastable'}")
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pynkl",
        description="PyNKL nuclear data inspection CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
    python -m pynkl.cli text n-026_Fe_056.endf        # tape identification
    python -m pynkl.cli sections n-026_Fe_056.endf    # section listing
    python -m pynkl.cli ace 26056.800nc               # ACE header
    python -m pynkl.cli nuclide 952421                # nuclide by ZAI id
""",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command", help="Command to run")

    p = sub.add_parser("text", help="Print the tape identification record")
    p.add_argument("file", help="ENDF file")
    p = sub.add_parser("sections", help="List (MAT, MF, MT) sections")
    p.add_argument("file", help="ENDF file")
    p = sub.add_parser("ace", help="Print the header of an ACE table")
    p.add_argument("file", help="ACE text file")
    p = sub.add_parser("nuclide", help="Decode a nuclide name or ZAI id")
    p.add_argument("nuclide", help="Nuclide name (e.g. Co58m1) or id (e.g. 270581)")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    t0 = time.time()

    commands = {
        "text": cmd_text,
        "sections": cmd_sections,
        "ace": cmd_ace,
        "nuclide": cmd_nuclide,
    }

    try:
        rc = commands[args.command](args)
    except PyNKLError as exc:
        print(f"ERROR: {exc}")
        return 1
    logger.debug("Completed in %.3fs", time.time() - t0)
    return rc


if __name__ == "__main__":
    sys.exit(main())
