"""Dump driver for regular files.

The file size is known up front, so parameters are resolved once and
the file is read in fixed chunks that are whole multiples of a row.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO, TextIO

from sdxxd.core.decoder import PatchDecoder
from sdxxd.core.encoder import chunk_size, encode
from sdxxd.core.exceptions import SourceError
from sdxxd.core.models import RawFlags, ResolvedParams, SetFlags
from sdxxd.core.resolver import resolve_params
from sdxxd.drivers.base import BaseDriver

logger = logging.getLogger(__name__)


class FileDriver(BaseDriver):
    """Dump or revert a file of known size."""

    def __init__(
        self,
        path: str | Path,
        raw: RawFlags,
        set_flags: SetFlags,
        output: TextIO | None = None,
        binary_output: BinaryIO | None = None,
        **kwargs,
    ):
        """Initialize the file driver.

        Args:
            path: File to read.
            raw: Flag text as typed.
            set_flags: Which flags were supplied explicitly.
            output: Text sink for dump rows (stdout by default).
            binary_output: Binary sink for reverted bytes.
            **kwargs: Passed through to BaseDriver.
        """
        super().__init__(raw, set_flags, output, binary_output, **kwargs)
        self.path = Path(path)

    @property
    def driver_type(self) -> str:
        return "file"

    def run(self) -> int:
        try:
            handle = self.path.open("rb")
        except FileNotFoundError as e:
            raise SourceError(f"{self.path}: No such file or directory", path=str(self.path)) from e
        except OSError as e:
            raise SourceError(f"{self.path}: {e.strerror or e}", path=str(self.path)) from e

        with handle:
            if self.raw.revert:
                self._revert(handle)
                return 0

            try:
                size = os.fstat(handle.fileno()).st_size
            except OSError as e:
                raise SourceError(f"cannot stat file: {e}", path=str(self.path)) from e

            params = resolve_params(True, self.raw, size, self.set_flags)
            self._dump(handle, params)
        return 0

    def _revert(self, handle: BinaryIO) -> None:
        decoder = PatchDecoder(self.binary_output, self.batch_size, self.raw.little_endian)
        lines = (line.decode("latin-1") for line in handle)
        written = decoder.decode(lines)
        logger.debug("reverted %s into %d bytes", self.path, written)

    def _dump(self, handle: BinaryIO, params: ResolvedParams) -> None:
        try:
            handle.seek(params.seek)
        except (OSError, ValueError) as e:
            raise SourceError(
                f"cannot seek to offset {params.seek}", path=str(self.path), context={"error": str(e)}
            ) from e

        chunk = chunk_size(params.columns, self.read_buffer_size)
        remaining = params.length
        offset = 0

        while remaining > 0:
            data = handle.read(min(chunk, remaining))
            if not data:
                break

            length = min(len(data), remaining)
            remaining -= length
            logger.debug("chunk %d: %d bytes, %d left", offset, length, remaining)
            self.emit(encode(data, length, offset, params, stride=chunk))

            if length < chunk:
                break
            offset += 1
