from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal

CURRENCY = "USD"

_CENTS = Decimal("0.01")
_UNSAFE_FILENAME_RE = re.compile(r"[^A-Za-z0-9_-]")


def _q2(value: Decimal | float) -> Decimal:
    # half-up, as printed on historical notes
    return Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP)


def money(amount: Decimal | float) -> str:
    """1234567.891 -> 'USD 1,234,567.89'"""
    return f"{CURRENCY} {_q2(amount):,.2f}"


def percent(value: Decimal | float) -> str:
    """10 -> '10.00%'"""
    return f"{_q2(value):.2f}%"


def share_of_100(value: Decimal | float) -> str:
    """50 -> '50.00% of 100%'"""
    return f"{percent(value)} of 100%"


def safe_filename(note_no: str) -> str:
    """Note number -> file stem: anything but letters, digits, '-' and '_' becomes '_'."""
    return _UNSAFE_FILENAME_RE.sub("_", note_no or "") or "_"
