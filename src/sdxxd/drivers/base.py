"""Base driver interface.

A driver owns one input source and runs the dump (or revert) loop over
it, writing results to text and binary sinks.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import BinaryIO, TextIO

from sdxxd.core.decoder import BATCH_SIZE
from sdxxd.core.encoder import READ_BUFFER_SIZE
from sdxxd.core.models import RawFlags, SetFlags


class BaseDriver(ABC):
    """Abstract base class for input-source drivers.

    Attributes:
        raw: Flag text as typed.
        set_flags: Which flags were supplied explicitly.
        output: Text sink for dump rows.
        binary_output: Binary sink for reverted bytes.
        read_buffer_size: Target size of one file read.
        batch_size: Hex digits decoded per revert batch.
    """

    def __init__(
        self,
        raw: RawFlags,
        set_flags: SetFlags,
        output: TextIO | None = None,
        binary_output: BinaryIO | None = None,
        read_buffer_size: int = READ_BUFFER_SIZE,
        batch_size: int = BATCH_SIZE,
    ):
        self.raw = raw
        self.set_flags = set_flags
        self.output = output if output is not None else sys.stdout
        self._binary_output = binary_output
        self.read_buffer_size = read_buffer_size
        self.batch_size = batch_size

    @property
    def binary_output(self) -> BinaryIO:
        """Binary sink; defaults to the buffer underneath ``output``."""
        if self._binary_output is None:
            self.output.flush()
            return self.output.buffer  # type: ignore[attr-defined]
        return self._binary_output

    @property
    @abstractmethod
    def driver_type(self) -> str:
        """Return the type identifier for this driver ("file" or "stream")."""

    @abstractmethod
    def run(self) -> int:
        """Run the dump or revert loop to completion.

        Returns:
            Exit status, 0 on success.

        Raises:
            SdxxdError: On any fatal condition; ``exit_code`` carries the status.
        """

    def emit(self, text: str) -> None:
        """Write rendered rows to the text sink."""
        if text:
            self.output.write(text)
