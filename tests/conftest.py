"""Pytest fixtures for sdxxd tests.

This module provides reusable fixtures: sample input files and
the expected dump of the greeting text.
"""

from __future__ import annotations

import sys
from pathlib import Path


# Configure path before any sdxxd imports so the src/ tree is used
# even when the package is not installed.
def _configure_path() -> None:
    """Configure sys.path to prioritize the src directory."""
    src_path = str(Path(__file__).parent.parent / "src")
    if src_path in sys.path:
        sys.path.remove(src_path)
    sys.path.insert(0, src_path)


_configure_path()

import pytest  # noqa: E402

HELLO = b"Hello, World!"
HELLO_DUMP = "00000000: 4865 6c6c 6f2c 2057 6f72 6c64 21  Hello, World!\n"


@pytest.fixture
def hello_file(tmp_path: Path) -> Path:
    """Return a file holding the 13 bytes ``Hello, World!``."""
    path = tmp_path / "hello.bin"
    path.write_bytes(HELLO)
    return path


@pytest.fixture
def twenty_byte_file(tmp_path: Path) -> Path:
    """Return a file holding bytes 0x00 through 0x13."""
    path = tmp_path / "twenty.bin"
    path.write_bytes(bytes(range(20)))
    return path
