"""Numeric helpers for loosely-typed upstream payloads.

The catalogue API is not schema-validated, so numeric fields may arrive as
numbers, numeric strings, booleans, nulls, or be missing.  These helpers
turn such values into plain floats (or ``None``) without raising.
"""

import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP


def safe_number(val) -> float | None:
    """Convert *val* to a finite float, or ``None`` if it is not a number.

    Handles:
    - None, empty strings -> None
    - bool -> None (``True`` is not a distance)
    - int / float -> float, unless NaN or infinite
    - Numeric strings with surrounding whitespace; digit separators
      ("1,5", "1_000") give None
    - Anything else -> None

    Examples:
        safe_number(6371) -> 6371.0
        safe_number(" 1000.5 ") -> 1000.5
        safe_number("n/a") -> None
    """
    if val is None or val == "" or isinstance(val, bool):
        return None
    if isinstance(val, (int, float)):
        number = float(val)
    elif isinstance(val, str):
        s = val.strip()
        if not s or "," in s or "_" in s:
            return None
        try:
            number = float(s)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def round_half_away(value: float, places: int = 2) -> float:
    """Round *value* to *places* fraction digits, halves away from zero.

    Python's built-in ``round()`` rounds halves to even and works on the
    binary value; this rounds the shortest decimal representation instead,
    so ``round_half_away(0.125) == 0.13`` and ``round_half_away(-2.5, 0) == -3``.
    """
    quantum = Decimal(1).scaleb(-places)
    try:
        rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return float(value)
    return float(rounded)
