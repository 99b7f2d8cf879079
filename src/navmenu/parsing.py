"""Parsing of typed prompt input into scalar values."""

import re

from navmenu.exceptions import ParseFailure
from navmenu.models import TypedValue, ValueKind

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1

# ASCII digits only; int() and float() would also accept whitespace,
# underscores and non-ASCII digits.
_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:(?i:inf|infinity|nan)|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)

BOOL_TOKENS = {"true": True, "false": False}


def strip_line_ending(line: str) -> str:
    """Remove one trailing line terminator, leaving other whitespace intact."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


def _parse_int(kind: ValueKind, raw: str, pattern: re.Pattern, low: int, high: int) -> int:
    if not pattern.fullmatch(raw):
        raise ParseFailure(kind, raw)
    number = int(raw)
    if not low <= number <= high:
        raise ParseFailure(kind, raw, f"out of range {low}..{high}")
    return number


def parse_value(kind: ValueKind, raw: str) -> TypedValue:
    """Parse one line of input as ``kind``.

    Args:
        kind: Requested value kind
        raw: Input line without its line terminator

    Returns:
        The parsed TypedValue

    Raises:
        ParseFailure: If the text is not a valid value of that kind
    """
    if kind is ValueKind.STRING:
        return TypedValue(kind, raw)

    if kind is ValueKind.BOOL:
        if raw not in BOOL_TOKENS:
            raise ParseFailure(kind, raw)
        return TypedValue(kind, BOOL_TOKENS[raw])

    if kind is ValueKind.CHAR:
        if len(raw) != 1:
            raise ParseFailure(kind, raw, "expected exactly one character")
        return TypedValue(kind, raw)

    if kind is ValueKind.I64:
        return TypedValue(kind, _parse_int(kind, raw, _SIGNED_INT, I64_MIN, I64_MAX))

    if kind is ValueKind.U64:
        return TypedValue(kind, _parse_int(kind, raw, _UNSIGNED_INT, 0, U64_MAX))

    if kind is ValueKind.F64:
        if not _FLOAT.fullmatch(raw):
            raise ParseFailure(kind, raw)
        return TypedValue(kind, float(raw))

    raise ValueError(f"Unsupported value kind: {kind!r}")
