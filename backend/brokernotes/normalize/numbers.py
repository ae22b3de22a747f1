from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

# Thousands separators accepted in numeric text: "1,000,000.50"
_THOUSANDS_RE = re.compile(r"[,\s]")


def to_decimal(raw: Any) -> Optional[Decimal]:
    """
    Cell value -> Decimal, or None when the cell is blank or not a number.

    Accepts:
      - int / float / Decimal cell values
      - "1,000,000", " 12.5 ", "1 000 000.00"
    Never raises.
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, Decimal):
        return raw
    if isinstance(raw, int):
        return Decimal(raw)
    if isinstance(raw, float):
        # repr round-trip: 0.1 -> Decimal("0.1"), not the binary expansion
        return Decimal(repr(raw))

    if isinstance(raw, str):
        s = _THOUSANDS_RE.sub("", raw.strip())
        if not s:
            return None
        try:
            val = Decimal(s)
        except InvalidOperation:
            return None
        if not val.is_finite():
            return None
        return val

    return None


def to_decimal_or_zero(raw: Any) -> Decimal:
    val = to_decimal(raw)
    return val if val is not None else Decimal("0")
