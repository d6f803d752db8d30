"""Integer literal extraction for flag values.

Flags such as ``--seek`` or ``--cols`` accept free-form text. The first
integer literal found in it (hex with ``0x``, octal with a leading ``0``,
or decimal, each optionally negative) is the value.
"""

from __future__ import annotations

import re

from sdxxd.core.exceptions import NumericLiteralError

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

# Alternation order matters: signed forms are tried before unsigned ones.
LITERAL_PATTERN = re.compile(
    r"-?0[xX][0-9a-fA-F]+"
    r"|-\b0[0-7]*\b"
    r"|-\b[1-9][0-9]*\b"
    r"|0[xX][0-9a-fA-F]+"
    r"|\b0[0-7]*\b"
    r"|\b[1-9][0-9]*\b",
    re.ASCII,
)


def find_literal(text: str) -> str | None:
    """Return the first integer literal in ``text``, or None."""
    match = LITERAL_PATTERN.search(text)
    if match is None:
        return None
    return match.group(0)


def _literal_value(literal: str) -> int:
    digits = literal[1:] if literal.startswith("-") else literal
    if digits[:2] in ("0x", "0X"):
        value = int(digits[2:], 16)
    elif len(digits) > 1 and digits.startswith("0"):
        value = int(digits[1:], 8)
    else:
        value = int(digits, 10)
    return -value if literal.startswith("-") else value


def parse_number(text: str) -> int:
    """Parse the first integer literal embedded in ``text``.

    Args:
        text: Raw flag value.

    Returns:
        The literal's value, or 0 when ``text`` holds no literal at all.

    Raises:
        NumericLiteralError: If the literal does not fit a signed 64-bit integer.

    Example:
        >>> parse_number("0x10")
        16
        >>> parse_number("-010")
        -8
        >>> parse_number("none")
        0
    """
    literal = find_literal(text)
    if literal is None:
        return 0

    value = _literal_value(literal)
    if not INT64_MIN <= value <= INT64_MAX:
        raise NumericLiteralError("value out of range", literal=literal)
    return value
