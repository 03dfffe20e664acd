#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Base class for line-oriented nuclear data readers

Every concrete reader (ENDF, ACE) inherits from :class:`BaseReader`,
which owns a binary stream and frames it into lines.  Decoding of the
lines is left to the subclasses, which delegate field conversion to
:mod:`pynkl.utils.parsing` and return the dataclass models of
:mod:`pynkl.models.records`.

Notes
-----
The dependency direction is::

    utils ← models ← readers ← cli
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, TypeVar

from pynkl.exceptions import EndfIOError, EndOfFileError

logger = logging.getLogger(__name__)

_ReaderT = TypeVar("_ReaderT", bound="BaseReader")


class BaseReader:
    """Line framing over a binary stream

    Parameters
    ----------
    stream : BinaryIO
        Any readable binary stream: an open file, :class:`io.BytesIO`,
        :class:`io.BufferedReader`, ...  The reader takes ownership of
        it and closes it in :meth:`close`.

    Notes
    -----
    Apart from the stream, the only state a reader keeps is its last
    line.  A failed read leaves the stream positioned after the lines it
    consumed, so reading can continue with the next record.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._line = b""

    @classmethod
    def open(cls: type[_ReaderT], path: Path | str) -> _ReaderT:
        """Open *path* for binary reading and wrap it in a reader

        Raises
        ------
        EndfIOError
            If the file cannot be opened.
        """
        filepath = Path(path)
        logger.debug("Opening %s: %s", cls.__name__, filepath)
        try:
            stream = filepath.open("rb")
        except OSError as exc:
            raise EndfIOError(f"Cannot open {filepath}: {exc}") from exc
        return cls(stream)

    @property
    def line(self) -> bytes:
        """The last line returned by :meth:`read_line`"""
        return self._line

    def read_line(self) -> bytes:
        """Read the next line, terminator included

        Returns
        -------
        bytes
            Raw bytes of the line, including the trailing ``\\n`` when the
            stream has one.

        Raises
        ------
        EndOfFileError
            If the stream is exhausted.
        EndfIOError
            If the underlying stream raises :class:`OSError`.
        """
        try:
            line = self._stream.readline()
        except OSError as exc:
            raise EndfIOError(f"Failed to read from stream: {exc}") from exc
        if not line:
            raise EndOfFileError("Unexpected end of file.")
        self._line = line
        return line

    def close(self) -> None:
        self._stream.close()

    def __enter__(self: _ReaderT) -> _ReaderT:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
