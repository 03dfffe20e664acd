#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""Nuclear data look-up tables"""

from __future__ import annotations

from pynkl.data.mass import AtomicMassLibrary

__all__ = ["AtomicMassLibrary"]
