"""Numeric and flag scanning helpers for path data.

Every helper takes the unconsumed text and returns ``(value, rest)`` or None.
None always means nothing was consumed.
"""

from __future__ import annotations

import math
import re

from pathsight.path.commands import FLAG, ArgGroup

# Optional sign, ASCII digits with at most one decimal point, optional exponent.
# "1.5.6" scans as 1.5 then .6 (the second point starts a new literal).
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def scan_number(text: str) -> tuple[float, str] | None:
    """Read one signed float literal after any leading whitespace."""
    text = text.lstrip()
    m = _NUMBER_RE.match(text)
    if m is None:
        return None
    value = float(m.group(0))
    # "1e400" overflows to inf
    if not math.isfinite(value):
        return None
    return value, text[m.end():]


def scan_flag(text: str) -> tuple[bool, str] | None:
    """Read an arc flag. Same literal scan as numbers; nonzero is True."""
    scanned = scan_number(text)
    if scanned is None:
        return None
    value, rest = scanned
    return bool(value), rest


def scan_group(shape: type, text: str) -> tuple[ArgGroup, str] | None:
    """Scan one full argument group of ``shape``; all slots or nothing."""
    values: list[float | bool] = []
    rest = text
    for slot in shape.SLOTS:
        scanned = scan_flag(rest) if slot == FLAG else scan_number(rest)
        if scanned is None:
            return None
        value, rest = scanned
        values.append(value)
    return shape(*values), rest
