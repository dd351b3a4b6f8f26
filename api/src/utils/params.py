"""Path parameter parsing."""

import re
from dataclasses import dataclass
from typing import Optional

_INTEGER = re.compile(r"[+-]?[0-9]+")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Longest digit run that can still be a 64-bit value once leading zeros go.
_MAX_SIGNIFICANT_DIGITS = 19


@dataclass(frozen=True)
class ParsedInt:
    """Outcome of parsing a path parameter as an integer."""

    raw: str
    value: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.value is not None


def parse_integer_param(raw: str) -> ParsedInt:
    """
    Parse a path segment as a signed 64-bit base-10 integer.

    Only an optional sign followed by ASCII digits is accepted; whitespace,
    underscores and other forms ``int()`` tolerates are rejected, as are
    values outside the signed 64-bit range.

    Args:
        raw: Path segment as received

    Returns:
        ParsedInt with ``value`` set on success, ``None`` otherwise
    """
    if not _INTEGER.fullmatch(raw):
        return ParsedInt(raw=raw)

    digits = raw.lstrip("+-").lstrip("0")
    if len(digits) > _MAX_SIGNIFICANT_DIGITS:
        return ParsedInt(raw=raw)

    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        return ParsedInt(raw=raw)
    return ParsedInt(raw=raw, value=value)
