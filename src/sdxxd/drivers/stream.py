"""Dump driver for standard input.

A stream's total size is unknown, so parameters are re-resolved as data
arrives and rows are written as soon as a full row is buffered. Input is
consumed one line at a time; line terminators are kept as payload bytes.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from typing import BinaryIO, TextIO

from sdxxd.core.decoder import PatchDecoder
from sdxxd.core.encoder import encode
from sdxxd.core.exceptions import DecodeError, SeekError
from sdxxd.core.models import RawFlags, ResolvedParams, SetFlags
from sdxxd.core.resolver import resolve_params
from sdxxd.drivers.base import BaseDriver

logger = logging.getLogger(__name__)


class StreamDriver(BaseDriver):
    """Dump or revert a non-seekable byte stream."""

    def __init__(
        self,
        raw: RawFlags,
        set_flags: SetFlags,
        source: BinaryIO | None = None,
        output: TextIO | None = None,
        binary_output: BinaryIO | None = None,
        **kwargs,
    ):
        """Initialize the stream driver.

        Args:
            raw: Flag text as typed.
            set_flags: Which flags were supplied explicitly.
            source: Binary stream to read (stdin by default).
            output: Text sink for dump rows (stdout by default).
            binary_output: Binary sink for reverted bytes.
            **kwargs: Passed through to BaseDriver.
        """
        super().__init__(raw, set_flags, output, binary_output, **kwargs)
        self.source = source if source is not None else sys.stdin.buffer

    @property
    def driver_type(self) -> str:
        return "stream"

    def _lines(self) -> Iterator[bytes]:
        return iter(self.source.readline, b"")

    def run(self) -> int:
        if self.raw.revert:
            decoder = PatchDecoder(self.binary_output, self.batch_size, self.raw.little_endian)
            try:
                written = decoder.decode(line.decode("latin-1") for line in self._lines())
            except DecodeError as e:
                raise DecodeError(e.message, line_number=e.line_number, exit_code=1) from e
            logger.debug("reverted standard input into %d bytes", written)
            return 0

        # Offsets relative to the end are meaningless without a known size.
        seek = self.raw.seek
        if self.set_flags.seek and (seek.startswith("-") or seek.startswith("+-")):
            raise SeekError("Sorry, cannot seek.", context={"seek": seek})

        self._dump()
        return 0

    def _dump(self) -> None:
        pinned = self.set_flags.length
        buffered = bytearray()
        offset = 0
        params: ResolvedParams | None = None

        for line in self._lines():
            buffered.extend(line)
            # Once the user pins a length, later growth must not override it.
            if params is None or not pinned:
                params = resolve_params(False, self.raw, len(buffered), self.set_flags)

            columns = params.columns
            available = len(buffered) - params.seek

            if available < columns and (
                (available <= params.length and not pinned) or available < params.length
            ):
                continue

            covered = available > params.length or (available == params.length and pinned)
            if available < columns or covered:
                self.emit(self._encode_window(buffered, params.length, offset, params))
                return

            while True:
                self.emit(self._encode_window(buffered, columns, offset, params))
                del buffered[:columns]
                params = params.model_copy(update={"length": params.length - columns})
                offset += 1
                if params.length < columns or len(buffered) - params.seek < columns:
                    break

        if params is not None:
            tail = buffered[params.seek : params.seek + max(params.length, 0)]
            if tail:
                logger.debug("flushing %d trailing bytes at end of stream", len(tail))
                self.emit(encode(tail, len(tail), offset, params))

    @staticmethod
    def _encode_window(
        buffered: bytearray, length: int, offset: int, params: ResolvedParams
    ) -> str:
        window = buffered[params.seek : params.seek + length]
        return encode(window, len(window), offset, params)
