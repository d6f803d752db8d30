"""Input-source drivers for sdxxd.

Two drivers share the BaseDriver interface: FileDriver for paths with a
known size, StreamDriver for standard input. select_driver() picks one
from the positional path argument.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sdxxd.core.models import RawFlags, SetFlags
from sdxxd.drivers.base import BaseDriver
from sdxxd.drivers.file import FileDriver
from sdxxd.drivers.stream import StreamDriver

STDIN_MARKER = "-"

__all__ = [
    "BaseDriver",
    "FileDriver",
    "StreamDriver",
    "select_driver",
]


def select_driver(
    path: str | Path | None,
    raw: RawFlags,
    set_flags: SetFlags,
    **kwargs: Any,
) -> BaseDriver:
    """Choose the driver for a path argument.

    Args:
        path: File path, or None / ``"-"`` for standard input.
        raw: Flag text as typed.
        set_flags: Which flags were supplied explicitly.
        **kwargs: Sinks and buffer sizes forwarded to the driver.

    Returns:
        A StreamDriver for standard input, otherwise a FileDriver.
    """
    if path is None or str(path) == STDIN_MARKER:
        return StreamDriver(raw, set_flags, **kwargs)
    return FileDriver(path, raw, set_flags, **kwargs)
