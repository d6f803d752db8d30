"""Tests for dump row rendering."""

from __future__ import annotations

import math

import pytest

from sdxxd.core.encoder import ascii_column, chunk_size, encode, format_row, hex_groups, iter_rows
from sdxxd.core.models import ResolvedParams

from conftest import HELLO, HELLO_DUMP


def params(**overrides) -> ResolvedParams:
    return ResolvedParams(**overrides)


class TestChunkSize:
    """Tests for chunk_size()."""

    @pytest.mark.parametrize(
        "columns, expected",
        [(16, 2048), (3, 2049), (7, 2051), (2048, 2048), (5000, 5000)],
    )
    def test_smallest_multiple_at_least_target(self, columns: int, expected: int) -> None:
        assert chunk_size(columns) == expected

    def test_custom_target(self) -> None:
        assert chunk_size(3, target=8) == 9


class TestAsciiColumn:
    """Tests for ascii_column()."""

    def test_printable_bytes_kept(self) -> None:
        assert ascii_column(b"Hello World!") == "Hello World!"

    def test_non_printable_bytes_become_dots(self) -> None:
        assert ascii_column(b"\x00\x1f\x20\x7e\x7f\x80\xff") == ".. ~..."


class TestHexGroups:
    """Tests for hex_groups()."""

    def test_groups_of_two(self) -> None:
        assert hex_groups(b"\x01\x02\x03\x04", 2) == ["0102", "0304"]

    def test_last_group_truncated(self) -> None:
        assert hex_groups(bytes(range(1, 11)), 4) == ["01020304", "05060708", "090a"]

    def test_little_endian_reverses_bytes_not_digits(self) -> None:
        assert hex_groups(b"\x01\x02\x03\x04", 4, little_endian=True) == ["04030201"]
        assert hex_groups(b"\xab\xcd", 2, little_endian=True) == ["cdab"]

    def test_little_endian_truncated_group(self) -> None:
        groups = hex_groups(bytes(range(1, 11)), 4, little_endian=True)
        assert groups == ["04030201", "08070605", "0a09"]

    @pytest.mark.parametrize("columns, group_size", [(16, 2), (16, 3), (10, 4), (7, 8), (5, 1)])
    def test_group_count_per_row(self, columns: int, group_size: int) -> None:
        groups = hex_groups(bytes(columns), group_size)
        assert len(groups) == math.ceil(columns / group_size)

    def test_little_endian_is_byte_level_reversal(self) -> None:
        group = b"\x12\x34\x56\x78"
        reversed_hex = hex_groups(group, 4, little_endian=True)[0]
        assert bytes.fromhex(reversed_hex) == group[::-1]


class TestFormatRow:
    """Tests for format_row()."""

    def test_row_layout(self) -> None:
        row = format_row(0x10, b"AB\x00", params(group_size=2))
        assert row == "00000010: 4142 00  AB.\n"


class TestEncode:
    """Tests for encode()."""

    def test_single_short_row(self) -> None:
        """Test the 13-byte greeting with default parameters."""
        assert encode(HELLO, 13, 0, params(length=13)) == HELLO_DUMP

    def test_four_columns(self) -> None:
        """Test that short final rows are rendered without padding."""
        result = encode(HELLO, 13, 0, params(columns=4, length=13))
        assert result == (
            "00000000: 4865 6c6c  Hell\n"
            "00000004: 6f2c 2057  o, W\n"
            "00000008: 6f72 6c64  orld\n"
            "0000000c: 21  !\n"
        )

    def test_little_endian_group(self) -> None:
        result = encode(b"\x01\x02\x03\x04", 4, 0, params(group_size=4, little_endian=True))
        assert result == "00000000: 04030201  ....\n"

    def test_length_limits_rendered_bytes(self) -> None:
        assert encode(HELLO, 5, 0, params()) == "00000000: 4865 6c6c 6f  Hello\n"

    def test_zero_length_renders_nothing(self) -> None:
        assert encode(HELLO, 0, 0, params()) == ""

    def test_row_count(self) -> None:
        rows = encode(bytes(100), 100, 0, params(columns=16)).splitlines()
        assert len(rows) == math.ceil(100 / 16)

    def test_every_row_but_last_is_full(self) -> None:
        rows = list(iter_rows(bytes(range(50)), 50, 0, params(columns=8, group_size=8)))
        for row in rows[:-1]:
            assert len(row.split("  ")[0].split(": ")[1].replace(" ", "")) == 16
        assert rows[-1].startswith("00000030: 3031  01")

    def test_seek_shifts_addresses(self) -> None:
        result = encode(b"\x0f\x10\x11\x12\x13", 5, 0, params(seek=15))
        assert result == "0000000f: 0f10 1112 13  .....\n"

    def test_stream_offset_uses_row_width(self) -> None:
        result = encode(b"A" * 16, 16, 1, params(columns=16, is_file=False))
        assert result.startswith("00000010: ")

    def test_file_offset_uses_chunk_size(self) -> None:
        result = encode(b"A" * 16, 16, 1, params(columns=16, is_file=True))
        assert result.startswith("00000800: ")

    def test_explicit_stride(self) -> None:
        result = encode(b"A" * 4, 4, 3, params(columns=4, is_file=True), stride=8)
        assert result.startswith("00000018: ")
