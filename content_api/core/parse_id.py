"""Path id parsing — turns a raw path segment into a content id.

Invariants:
    - Returns None for anything that is not a whole, finite number
    - Blank input is never coerced to 0
    - Result always fits a signed 64-bit integer column
"""

import math
import re

# ASCII decimal notation only: no underscores, no hex, no inf/nan spellings,
# no non-ASCII digits (int() and float() would accept "\u0661\u0662").
_NUMERIC_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

_MAX_ID = 2**63 - 1
_MIN_ID = -(2**63)


def parse_id(raw: str | None) -> int | None:
    """Parse a path id, returning None when it is not a whole integer.

    >>> parse_id("42")
    42
    >>> parse_id("1.5") is None
    True
    """
    if raw is None:
        return None
    text = raw.strip()
    if not _NUMERIC_RE.fullmatch(text):
        return None

    value = float(text)
    if not math.isfinite(value) or not value.is_integer():
        return None

    # Plain integers skip float rounding for large values.
    if _INTEGER_RE.fullmatch(text):
        result = int(text)
    else:
        result = int(value)
    if result < _MIN_ID or result > _MAX_ID:
        return None
    return result
