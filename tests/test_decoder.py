"""Tests for turning dump text back into bytes."""

from __future__ import annotations

import io
import os

import pytest

from sdxxd.core.decoder import PatchDecoder, decode_hex, extract_hex
from sdxxd.core.encoder import encode
from sdxxd.core.exceptions import DecodeError
from sdxxd.core.models import ResolvedParams

from conftest import HELLO, HELLO_DUMP


class RecordingSink(io.BytesIO):
    """BytesIO that remembers the size of every write."""

    def __init__(self) -> None:
        super().__init__()
        self.writes: list[int] = []

    def write(self, data) -> int:  # type: ignore[override]
        self.writes.append(len(data))
        return super().write(data)


def decode_text(text: str, **kwargs) -> bytes:
    sink = io.BytesIO()
    PatchDecoder(sink, **kwargs).decode(text.splitlines(keepends=True))
    return sink.getvalue()


class TestExtractHex:
    """Tests for extract_hex()."""

    def test_strips_label_and_ascii_column(self) -> None:
        assert extract_hex(HELLO_DUMP) == "48656c6c6f2c20576f726c6421"

    def test_ascii_column_starting_with_space(self) -> None:
        assert extract_hex("00000000: 2041   A\n") == "2041"

    def test_ascii_column_containing_colon(self) -> None:
        assert extract_hex("00000000: 3a3a  ::") == "3a3a"

    def test_missing_colon_raises(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            extract_hex("4865 6c6c  Hell", line_number=3)
        assert exc_info.value.line_number == 3

    def test_missing_ascii_separator_raises(self) -> None:
        with pytest.raises(DecodeError):
            extract_hex("00000000: 4865 6c6c Hell")

    def test_little_endian_groups_restored(self) -> None:
        assert extract_hex("00000000: 04030201 0605  ......", little_endian=True) == "010203040506"

    def test_little_endian_odd_group_raises(self) -> None:
        with pytest.raises(DecodeError):
            extract_hex("00000000: 040  .", little_endian=True)


class TestDecodeHex:
    """Tests for decode_hex()."""

    def test_valid_digits(self) -> None:
        assert decode_hex("48656c6c6f") == b"Hello"

    @pytest.mark.parametrize("digits", ["zz", "414"])
    def test_invalid_digits_raise(self, digits: str) -> None:
        with pytest.raises(DecodeError):
            decode_hex(digits)


class TestPatchDecoder:
    """Tests for PatchDecoder."""

    def test_reverts_greeting(self) -> None:
        assert decode_text(HELLO_DUMP) == HELLO

    def test_returns_bytes_written(self) -> None:
        sink = io.BytesIO()
        assert PatchDecoder(sink).decode([HELLO_DUMP]) == 13

    def test_blank_lines_skipped(self) -> None:
        assert decode_text("\n" + HELLO_DUMP + "\n\n") == HELLO

    def test_empty_input_writes_nothing(self) -> None:
        assert decode_text("") == b""

    def test_flushes_in_batches(self) -> None:
        """Test that output is written once the threshold is exceeded."""
        dump = encode(bytes(range(64)), 64, 0, ResolvedParams(columns=16))
        sink = RecordingSink()
        PatchDecoder(sink, batch_size=40).decode(dump.splitlines())
        assert sink.getvalue() == bytes(range(64))
        # 32 digits per line: flush after lines 2 and 4, then an empty final flush.
        assert sink.writes == [32, 32, 0]

    def test_bytes_before_failing_batch_stay_written(self) -> None:
        sink = io.BytesIO()
        lines = ["00000000: 414243  ABC\n", "00000003: 4g  .\n"]
        with pytest.raises(DecodeError):
            PatchDecoder(sink, batch_size=4).decode(lines)
        assert sink.getvalue() == b"ABC"

    def test_malformed_line_reports_line_number(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_text(HELLO_DUMP + "garbage\n")
        assert exc_info.value.line_number == 2

    def test_little_endian_round_trip(self) -> None:
        data = bytes(range(1, 11))
        dump = encode(data, len(data), 0, ResolvedParams(group_size=4, little_endian=True))
        assert decode_text(dump, little_endian=True) == data


class TestRoundTrip:
    """Encoding then decoding reproduces the input exactly."""

    DATA = os.urandom(300) + bytes(range(256)) + b"  : \n\r"

    @pytest.mark.parametrize("columns", [1, 3, 4, 7, 16, 33])
    @pytest.mark.parametrize("group_size", [1, 2, 3, 4, 8])
    def test_big_endian(self, columns: int, group_size: int) -> None:
        params = ResolvedParams(columns=columns, group_size=group_size)
        dump = encode(self.DATA, len(self.DATA), 0, params)
        assert decode_text(dump) == self.DATA

    @pytest.mark.parametrize("columns", [1, 5, 16, 32])
    @pytest.mark.parametrize("group_size", [1, 2, 4, 8])
    def test_little_endian(self, columns: int, group_size: int) -> None:
        params = ResolvedParams(columns=columns, group_size=group_size, little_endian=True)
        dump = encode(self.DATA, len(self.DATA), 0, params)
        assert decode_text(dump, little_endian=True) == self.DATA
