"""Turn raw flag text into validated dump parameters.

Each field is resolved independently. Several defaults depend on whether
a flag was given explicitly, so the resolver takes a SetFlags record next
to the raw text.
"""

from __future__ import annotations

import logging

from sdxxd.core.exceptions import NumericLiteralError, SeekError, UsageError
from sdxxd.core.models import RawFlags, ResolvedParams, SetFlags
from sdxxd.core.numbers import parse_number

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS = 16
DEFAULT_GROUP_SIZE = 2
DEFAULT_GROUP_SIZE_LITTLE_ENDIAN = 4
FALLBACK_GROUP_SIZE = 16

SEEK_TO_END = "-0"


def is_power_of_two(value: int) -> bool:
    """Return True if ``value`` is a positive power of two."""
    return value > 0 and value & (value - 1) == 0


def _default_group_size(little_endian: bool) -> int:
    return DEFAULT_GROUP_SIZE_LITTLE_ENDIAN if little_endian else DEFAULT_GROUP_SIZE


def _resolve_length(raw: RawFlags, size: int, is_file: bool, explicit: bool) -> int:
    if not explicit:
        return size

    try:
        value = parse_number(raw.length)
    except NumericLiteralError as e:
        raise UsageError(f"invalid length: {e.message}", flag="length") from e
    if value == 0:
        raise UsageError("invalid length", flag="length", context={"value": raw.length})

    # A file cannot supply more than it holds; a stream may still grow.
    if value < 0 or (is_file and value > size):
        return size
    return value


def _resolve_group_size(raw: RawFlags, explicit: bool) -> int:
    if not explicit:
        return _default_group_size(raw.little_endian)

    try:
        value = parse_number(raw.group_size)
    except NumericLiteralError:
        value = 0

    if value == 0:
        logger.debug("group size %r falls back to %d", raw.group_size, FALLBACK_GROUP_SIZE)
        return FALLBACK_GROUP_SIZE
    if value < 0:
        return _default_group_size(raw.little_endian)

    if raw.little_endian and not is_power_of_two(value):
        raise UsageError(
            "number of octets per group must be a power of 2 with -e.",
            flag="group_size",
            context={"value": value},
        )
    return value


def _resolve_columns(raw: RawFlags, explicit: bool) -> int:
    if not explicit:
        return DEFAULT_COLUMNS

    try:
        value = parse_number(raw.columns)
    except NumericLiteralError as e:
        raise UsageError(f"invalid columns: {e.message}", flag="columns") from e
    if value <= 0:
        raise UsageError("invalid number of columns", flag="columns", context={"value": value})
    return value


def _resolve_seek(raw: RawFlags, size: int, is_file: bool, explicit: bool) -> int:
    if not explicit:
        return 0

    text = raw.seek
    if not is_file and (text == SEEK_TO_END or text.startswith("+-")):
        raise SeekError("Sorry, cannot seek.", context={"seek": text})
    if text == SEEK_TO_END:
        return size

    try:
        value = parse_number(text)
    except NumericLiteralError:
        logger.warning("ignoring unparseable seek %r", text)
        return 0

    if value < 0:
        return size + value
    return value


def resolve_params(is_file: bool, raw: RawFlags, size: int, set_flags: SetFlags) -> ResolvedParams:
    """Resolve raw flags against the known (or accumulated) input size.

    Args:
        is_file: Whether the source has a known total size and can seek.
        raw: Flag text as typed.
        size: File size, or bytes buffered so far for a stream.
        set_flags: Which flags were supplied explicitly.

    Returns:
        A fully defaulted, validated ResolvedParams snapshot.

    Raises:
        UsageError: Zero or invalid length, bad columns, or a group size
            that is not a power of two with little-endian output.
        SeekError: A seek that needs a seekable source was requested on a stream.
    """
    length = _resolve_length(raw, size, is_file, set_flags.length)
    group_size = _resolve_group_size(raw, set_flags.group_size)
    columns = _resolve_columns(raw, set_flags.columns)
    seek = _resolve_seek(raw, size, is_file, set_flags.seek)

    params = ResolvedParams(
        columns=columns,
        group_size=group_size,
        length=length,
        seek=seek,
        is_file=is_file,
        little_endian=raw.little_endian,
        revert=raw.revert,
    )
    logger.debug("resolved %s against size %d", params, size)
    return params
