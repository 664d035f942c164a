"""
Numeric Field Scanner
=====================
Tokenizes the whitespace separated integer/float columns of an ICGEM record.

Both data passes read their columns through this module so that they accept
exactly the same numeric syntax:

* integers: ``[+-]digits``
* floats: ``[+-]digits[.digits][(E|e)[+-]digits]`` (also ``.5`` / ``5.``)

A token must be followed by whitespace or by the end of the line. Fortran
double precision literals (``1.0D-05``) are therefore rejected instead of being
silently cut at the ``D``.
"""
from __future__ import annotations

import re

from icgemio.exceptions import FieldParseError

_INT_RE = re.compile(r"[ \t]*([+-]?\d+)")
_FLOAT_RE = re.compile(r"[ \t]*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _token_ends(line: str, pos: int) -> bool:
    return pos >= len(line) or line[pos].isspace()


def scan_int(line: str, pos: int, field: str = "integer", source: str = "<stream>") -> tuple[int, int]:
    """
    Parse one integer starting at ``pos``.

    Returns:
        The value and the position right after the consumed token.

    Raises:
        FieldParseError: if no integer token starts at ``pos``.
    """
    match = _INT_RE.match(line, pos)
    if match is None or not _token_ends(line, match.end()):
        raise FieldParseError(line, pos, field=field, source=source)
    return int(match.group(1)), match.end()


def scan_float(line: str, pos: int, field: str = "float", source: str = "<stream>") -> tuple[float, int]:
    """
    Parse one floating point number starting at ``pos``.

    Returns:
        The value and the position right after the consumed token.

    Raises:
        FieldParseError: if no float token starts at ``pos``.
    """
    match = _FLOAT_RE.match(line, pos)
    if match is None or not _token_ends(line, match.end()):
        raise FieldParseError(line, pos, field=field, source=source)
    return float(match.group(1)), match.end()


class FieldScanner:
    """
    Cursor over the columns of a single record.
    """
    def __init__(self, line: str, pos: int = 0, source: str = "<stream>") -> None:
        self.line = line
        self.pos = pos
        self.source = source

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(pos={self.pos}, line={self.line!r})"

    def next_int(self, field: str = "integer") -> int:
        value, self.pos = scan_int(self.line, self.pos, field=field, source=self.source)
        return value

    def next_float(self, field: str = "float") -> float:
        value, self.pos = scan_float(self.line, self.pos, field=field, source=self.source)
        return value

    def next_degree_order(self) -> tuple[int, int]:
        """Read the leading degree and order columns."""
        degree = self.next_int("degree")
        order = self.next_int("order")
        return degree, order

    def skip_floats(self, count: int, field: str = "float") -> float:
        """Read ``count`` floats and return the last one."""
        value = 0.0
        for i in range(count):
            value = self.next_float(f"{field} #{i + 1}")
        return value
