"""Hexadecimal dump rendering.

Produces xxd-style rows::

    00000000: 4865 6c6c 6f2c 2057 6f72 6c64 21  Hello, World!

An 8-digit offset, the row's bytes in space-separated groups, then the
printable-ASCII column. Rows are never padded: a short final row shows
only the bytes it holds.
"""

from __future__ import annotations

from collections.abc import Iterator

from sdxxd.core.models import ResolvedParams

# Target size of one File Driver read
READ_BUFFER_SIZE = 2048


def chunk_size(columns: int, target: int = READ_BUFFER_SIZE) -> int:
    """Return the smallest multiple of ``columns`` that is at least ``target``.

    Reading whole multiples of a row keeps every chunk boundary on a row
    boundary.

    Example:
        >>> chunk_size(16)
        2048
        >>> chunk_size(3)
        2049
    """
    rows, remainder = divmod(target, columns)
    if remainder:
        rows += 1
    return rows * columns


def ascii_column(data: bytes) -> str:
    """Map printable bytes (0x20-0x7e) to themselves and the rest to ``.``."""
    return "".join(chr(b) if 0x20 <= b <= 0x7E else "." for b in data)


def hex_groups(row: bytes, group_size: int, little_endian: bool = False) -> list[str]:
    """Split ``row`` into hex tokens of ``group_size`` bytes each.

    The last group holds whatever bytes remain. With ``little_endian`` the
    bytes of each group are reversed before encoding, so two-digit byte
    boundaries stay intact.
    """
    groups: list[str] = []
    for start in range(0, len(row), group_size):
        group = row[start : start + group_size]
        if little_endian:
            group = group[::-1]
        groups.append(group.hex())
    return groups


def format_row(address: int, row: bytes, params: ResolvedParams) -> str:
    """Format a single dump row, including its trailing newline.

    Args:
        address: Byte offset printed in the label.
        row: At most ``params.columns`` bytes.
        params: Resolved dump parameters.
    """
    groups = hex_groups(row, params.group_size, params.little_endian)
    hex_text = "".join(f"{group} " for group in groups)
    return f"{address:08x}: {hex_text} {ascii_column(row)}\n"


def iter_rows(
    buffer: bytes,
    length: int,
    offset: int,
    params: ResolvedParams,
    stride: int | None = None,
) -> Iterator[str]:
    """Yield the rows covering ``buffer[:length]`` one at a time.

    Args:
        buffer: Bytes to render.
        length: Number of leading bytes of ``buffer`` to render.
        offset: Emission counter of the calling driver.
        params: Resolved dump parameters.
        stride: Bytes represented by one ``offset`` step. Defaults to the
            row width for streams and the read-chunk size for files.
    """
    columns = params.columns
    if stride is None:
        stride = chunk_size(columns) if params.is_file else columns

    data = buffer[:length]
    base = offset * stride + params.seek
    for row_index, start in enumerate(range(0, len(data), columns)):
        yield format_row(base + columns * row_index, data[start : start + columns], params)


def encode(
    buffer: bytes,
    length: int,
    offset: int,
    params: ResolvedParams,
    stride: int | None = None,
) -> str:
    """Render ``buffer[:length]`` as dump text.

    Produces ``ceil(length / params.columns)`` rows. See iter_rows() for
    the meaning of ``offset`` and ``stride``.

    Example:
        >>> encode(b"Hello", 5, 0, ResolvedParams(length=5))
        '00000000: 4865 6c6c 6f  Hello\\n'
    """
    return "".join(iter_rows(buffer, length, offset, params, stride))
