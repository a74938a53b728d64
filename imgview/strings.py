"""String helpers: splitting, number parsing and lookup in fixed name lists."""

from __future__ import annotations

from collections.abc import Sequence

WHITESPACE = " \t\n\v\f\r"

# Numbers are parsed from at most this many characters when a length is given.
_NUM_MAX_CHARS = 31

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def split(text: str, delimiter: str) -> list[str]:
    """Split text by a delimiter, trimming whitespace around every part.

    Leading whitespace before the first part is skipped and a trailing
    delimiter does not produce an extra empty part, so "a;b;c;" gives three
    parts and "" gives none.
    """
    parts: list[str] = []
    pos = 0
    end = len(text)

    while pos < end:
        while pos < end and text[pos] in WHITESPACE:
            pos += 1
        if pos >= end:
            break

        if text[pos] == delimiter:
            parts.append("")
        else:
            start = pos
            while pos < end and text[pos] != delimiter:
                pos += 1
            parts.append(text[start:pos].rstrip(WHITESPACE))

        if pos < end:
            pos += 1  # skip delimiter

    return parts


def _digit_value(char: str) -> int:
    return _DIGITS.find(char.lower()) if char.isascii() else -1


def to_num(text: str, length: int = 0, base: int = 0) -> int:
    """Convert text to a signed 64-bit integer.

    With base 0 the base is taken from the prefix: "0x" for hexadecimal,
    a leading zero for octal, decimal otherwise. A non-zero length limits
    the number of characters used (to 31 at most). The whole text must be
    a number; otherwise ValueError is raised.
    """
    if not text:
        raise ValueError("empty number")
    if length:
        text = text[: min(length, _NUM_MAX_CHARS)]

    body = text.lstrip(WHITESPACE)
    negative = False
    if body[:1] in ("+", "-"):
        negative = body[0] == "-"
        body = body[1:]

    has_hex_prefix = (
        body[:2].lower() == "0x" and len(body) > 2 and body[2] in _HEX_DIGITS
    )
    if base == 0:
        if has_hex_prefix:
            base = 16
            body = body[2:]
        elif body.startswith("0"):
            base = 8
        else:
            base = 10
    elif base == 16:
        if has_hex_prefix:
            body = body[2:]
    elif not 2 <= base <= 36:
        raise ValueError(f"invalid numeric base {base}")

    if not body:
        raise ValueError(f"invalid number: {text!r}")

    value = 0
    for char in body:
        digit = _digit_value(char)
        if digit < 0 or digit >= base:
            raise ValueError(f"invalid number: {text!r}")
        value = value * base + digit

    if negative:
        value = -value
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


def search_index(
    choices: Sequence[str], value: str, length: int = 0
) -> int | None:
    """Return the index of value in choices, or None if it is absent.

    A non-zero length compares only the first length characters of value.
    """
    if length:
        value = value[:length]
    for index, choice in enumerate(choices):
        if choice == value:
            return index
    return None