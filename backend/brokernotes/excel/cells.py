from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable, Optional

from openpyxl.worksheet.worksheet import Worksheet

from ..normalize.dates import format_doc_date
from ..normalize.numbers import to_decimal, to_decimal_or_zero

MONEY_FMT = "#,##0.00"

# All row/column arguments below are 0-based, header row == 0.
# openpyxl itself is 1-based; the +1 lives here and nowhere else.


def _cell(ws: Worksheet, row: int, col: int):
    return ws.cell(row=row + 1, column=col + 1)


def get_value(ws: Worksheet, row: int, col: int) -> Any:
    return _cell(ws, row, col).value


def last_row(ws: Worksheet) -> int:
    """Last 0-based row index that openpyxl knows about (0 for header-only)."""
    return max((ws.max_row or 1) - 1, 0)


# ---------------------------------------------------------------------
# Readers (never raise on bad content)
# ---------------------------------------------------------------------

def cell_to_str(v: Any) -> str:
    if v is None or isinstance(v, bool):
        return ""
    if isinstance(v, str):
        return v.strip()
    if isinstance(v, (datetime, date)):
        return format_doc_date(v)
    if isinstance(v, float) and v.is_integer():
        # 1001.0 typed into a note-number cell -> "1001"
        return str(int(v))
    return str(v)


def get_str(ws: Worksheet, row: int, col: int) -> str:
    return cell_to_str(get_value(ws, row, col))


def get_number(ws: Worksheet, row: int, col: int) -> Decimal:
    return to_decimal_or_zero(get_value(ws, row, col))


def get_optional_number(ws: Worksheet, row: int, col: int) -> Optional[Decimal]:
    return to_decimal(get_value(ws, row, col))


def is_blank_value(v: Any) -> bool:
    """Blank == empty cell, whitespace-only text, or numeric zero."""
    if v is None or isinstance(v, bool):
        return True
    if isinstance(v, str):
        return v.strip() == ""
    if isinstance(v, (int, float, Decimal)):
        return v == 0
    return False


def is_row_blank(ws: Worksheet, row: int, cols: Iterable[int]) -> bool:
    return all(is_blank_value(get_value(ws, row, c)) for c in cols)


# ---------------------------------------------------------------------
# Writers (create the cell if absent)
# ---------------------------------------------------------------------

def set_str(ws: Worksheet, row: int, col: int, value: str) -> None:
    _cell(ws, row, col).value = value


def set_number(
    ws: Worksheet,
    row: int,
    col: int,
    value: Decimal | float,
    *,
    num_fmt: Optional[str] = None,
) -> None:
    cell = _cell(ws, row, col)
    cell.value = float(value)
    if num_fmt is not None:
        cell.number_format = num_fmt


def set_money(ws: Worksheet, row: int, col: int, amount: Decimal | float) -> None:
    set_number(ws, row, col, amount, num_fmt=MONEY_FMT)


# ---------------------------------------------------------------------
# Header lookup
# ---------------------------------------------------------------------

def header_map(ws: Worksheet) -> dict[str, int]:
    """
    Lowercased header text (row 0) -> 0-based column index.
    Duplicate headers: first one wins.
    """
    out: dict[str, int] = {}
    for idx, cell in enumerate(next(ws.iter_rows(min_row=1, max_row=1), ())):
        name = cell_to_str(cell.value).lower()
        if name and name not in out:
            out[name] = idx
    return out
