from __future__ import annotations

import math
import re
from decimal import Decimal

type BoundValue = int | float | Decimal

_NUMBER_PATTERN = re.compile(
    r"^[ \t\n\r\f\v]*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)[ \t\n\r\f\v]*$",
    flags=re.ASCII,
)


def coerce_number(value: object) -> BoundValue | None:
    """Read a bound as an exact finite number, accepting numbers and numeric strings.

    Integers are returned unchanged and numeric strings as ``Decimal``, so
    bounds beyond float precision still compare exactly. Returns None for
    anything else (booleans, non-finite floats, free text), which makes the
    calling rule skip the bound.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, str):
        return None

    match = _NUMBER_PATTERN.fullmatch(value)
    if match is None:
        return None
    return Decimal(match.group(1))
