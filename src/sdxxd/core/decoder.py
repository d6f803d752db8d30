"""Reconstruct binary data from dump text.

Each dump line is reduced to its hex payload: the offset label before the
first ``:`` and the ASCII column after the first double space are
discarded. Payload digits accumulate and are decoded in batches so large
dumps never sit in memory as a whole.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import BinaryIO

from sdxxd.core.exceptions import DecodeError

logger = logging.getLogger(__name__)

# Hex digits accumulated before a batch is decoded and written
BATCH_SIZE = 4096

_WHITESPACE = re.compile(r"\s+")


def _unreverse_group(group: str, line_number: int | None) -> str:
    if len(group) % 2:
        raise DecodeError(f"odd-length group {group!r}", line_number=line_number)
    return "".join(group[i : i + 2] for i in range(len(group) - 2, -1, -2))


def extract_hex(line: str, line_number: int | None = None, little_endian: bool = False) -> str:
    """Return the hex digits carried by one dump line.

    Args:
        line: A line of dump text, with or without its newline.
        line_number: Position of the line, used in error context.
        little_endian: Undo the per-group byte reversal of a little-endian dump.

    Raises:
        DecodeError: If the line lacks the ``:`` label separator or the
            double space before the ASCII column.
    """
    line = line.rstrip("\r\n")
    _, colon, rest = line.partition(":")
    if not colon:
        raise DecodeError("missing offset separator ':'", line_number=line_number)

    hex_text, separator, _ = rest.partition("  ")
    if not separator:
        raise DecodeError("missing ASCII column separator", line_number=line_number)

    if little_endian:
        return "".join(_unreverse_group(group, line_number) for group in hex_text.split())
    return _WHITESPACE.sub("", hex_text)


def decode_hex(digits: str) -> bytes:
    """Decode a run of hex digits.

    Raises:
        DecodeError: On non-hex characters or an odd digit count.
    """
    try:
        return bytes.fromhex(digits)
    except ValueError as e:
        raise DecodeError(f"error while decoding: {e}") from e


class PatchDecoder:
    """Stream dump lines back into bytes.

    Attributes:
        sink: Binary stream that receives the decoded bytes.
        batch_size: Number of hex digits that triggers a flush.
        little_endian: Whether the dump was written with byte-reversed groups.
    """

    def __init__(
        self, sink: BinaryIO, batch_size: int = BATCH_SIZE, little_endian: bool = False
    ) -> None:
        self.sink = sink
        self.batch_size = batch_size
        self.little_endian = little_endian
        self.bytes_written = 0

    def _flush(self, digits: str) -> None:
        data = decode_hex(digits)
        self.sink.write(data)
        self.bytes_written += len(data)
        logger.debug("flushed %d decoded bytes", len(data))

    def decode(self, lines: Iterable[str]) -> int:
        """Decode every line and write the result to the sink.

        Bytes from batches flushed before a failure stay written.

        Args:
            lines: Dump text lines.

        Returns:
            Total number of bytes written.

        Raises:
            DecodeError: On a malformed line or undecodable payload.
        """
        pending: list[str] = []
        pending_size = 0

        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue

            digits = extract_hex(line, line_number, self.little_endian)
            pending.append(digits)
            pending_size += len(digits)

            if pending_size > self.batch_size:
                self._flush("".join(pending))
                pending = []
                pending_size = 0

        self._flush("".join(pending))
        self.sink.flush()
        return self.bytes_written
